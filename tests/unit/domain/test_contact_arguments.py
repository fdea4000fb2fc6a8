import unittest

from webwx_contact.domain.entities import Message, SayPayload, SayPayloadType
from webwx_contact.domain.exceptions import UnsupportedArgumentException
from webwx_contact.domain.value_objects import UNSET, AliasOperation, AliasRequest


class TestSayPayload(unittest.TestCase):
    def test_text(self):
        payload = SayPayload.from_argument("hi")
        self.assertEqual(payload.type, SayPayloadType.TEXT)
        self.assertEqual(payload.text, "hi")
        self.assertIsNone(payload.message)

    def test_empty_text_is_still_text(self):
        self.assertEqual(SayPayload.from_argument("").type, SayPayloadType.TEXT)

    def test_message(self):
        message = Message(text="hi")
        payload = SayPayload.from_argument(message)
        self.assertEqual(payload.type, SayPayloadType.MESSAGE)
        self.assertIs(payload.message, message)

    def test_unsupported(self):
        with self.assertRaises(UnsupportedArgumentException) as ctx:
            SayPayload.from_argument(3.14)
        self.assertEqual(ctx.exception.field, "content")
        self.assertEqual(ctx.exception.code, "UNSUPPORTED_ARGUMENT")
        self.assertEqual(ctx.exception.argument, 3.14)


class TestAliasRequest(unittest.TestCase):
    def test_no_argument_is_get(self):
        for request in (AliasRequest.from_argument(), AliasRequest.from_argument(UNSET)):
            self.assertEqual(request.operation, AliasOperation.GET)
            self.assertFalse(request.is_mutation)

    def test_none_is_delete(self):
        request = AliasRequest.from_argument(None)
        self.assertEqual(request.operation, AliasOperation.DELETE)
        self.assertIsNone(request.alias)
        self.assertTrue(request.is_mutation)

    def test_string_is_set(self):
        request = AliasRequest.from_argument("")
        self.assertEqual(request.operation, AliasOperation.SET)
        self.assertEqual(request.alias, "")
        self.assertTrue(request.is_mutation)

    def test_unsupported(self):
        with self.assertRaises(UnsupportedArgumentException) as ctx:
            AliasRequest.from_argument(["a"])
        self.assertEqual(ctx.exception.field, "new_alias")


if __name__ == "__main__":
    unittest.main()
