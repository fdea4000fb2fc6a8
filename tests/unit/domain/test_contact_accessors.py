import unittest

from webwx_contact import Contact
from webwx_contact.domain.exceptions import ContactNotReadyException
from webwx_contact.domain.value_objects import Gender

from ..fixtures import BOT_ID, CONTACT_ID, make_puppet, make_raw, make_user


class TestAccessorsBeforeReady(unittest.TestCase):
    """未就绪时所有访问器都返回中性值"""

    def setUp(self):
        self.contact = Contact(CONTACT_ID, make_puppet())

    def test_neutral_values(self):
        c = self.contact
        self.assertEqual(c.name(), "")
        self.assertIsNone(c.alias())
        self.assertEqual(c.gender(), Gender.UNKNOWN)
        self.assertIsNone(c.province())
        self.assertIsNone(c.city())
        self.assertIsNone(c.signature())
        self.assertIsNone(c.stranger())
        self.assertIsNone(c.star())
        self.assertFalse(c.official())
        self.assertFalse(c.special())
        self.assertTrue(c.personal())
        self.assertIsNone(c.get("name"))

    def test_weixin_logs_guidance(self):
        with self.assertLogs("webwx_contact", level="DEBUG") as logs:
            self.assertIsNone(self.contact.weixin())
        self.assertTrue(any("FAQ" in line for line in logs.output))

    def test_str_falls_back_to_id(self):
        self.assertEqual(str(self.contact), f"Contact<{CONTACT_ID}>")
        self.assertEqual(repr(self.contact), f"Contact(None[{CONTACT_ID}])")

    def test_dump_requires_profile(self):
        with self.assertRaises(ContactNotReadyException):
            self.contact.dump()

    def test_dump_raw_without_data(self):
        with self.assertLogs("webwx_contact", level="WARNING"):
            self.contact.dump_raw()


class TestAccessorsAfterReady(unittest.IsolatedAsyncioTestCase):
    async def _ready_contact(self, **overrides) -> Contact:
        contact = Contact(CONTACT_ID, make_puppet(raw=make_raw(**overrides)))
        await contact.ready()
        return contact

    async def test_values(self):
        c = await self._ready_contact()

        self.assertEqual(c.name(), "Alice")
        self.assertEqual(c.alias(), "小A")
        self.assertEqual(c.gender(), Gender.FEMALE)
        self.assertEqual(c.province(), "北京")
        self.assertEqual(c.city(), "海淀")
        self.assertEqual(c.signature(), "今天也要开心")
        self.assertIs(c.star(), True)
        self.assertIs(c.stranger(), False)
        self.assertFalse(c.official())
        self.assertFalse(c.special())
        self.assertTrue(c.personal())
        self.assertEqual(c.weixin(), "alice_wx")
        self.assertEqual(c.get("uin"), "0")
        self.assertIsNone(c.get("no_such_field"))

    async def test_name_is_plain_text(self):
        c = await self._ready_contact(
            NickName='Tom &amp; Jerry<span class="emoji emoji1f334"></span>\u200b'
        )
        self.assertEqual(c.name(), "Tom & Jerry\U0001f334")

    async def test_empty_region_is_none(self):
        c = await self._ready_contact(Province="", City="")
        self.assertIsNone(c.province())
        self.assertIsNone(c.city())

    async def test_personal_is_negation_of_official(self):
        for flag in (0, 8):
            with self.subTest(flag=flag):
                c = await self._ready_contact(UserName="gh_abc", VerifyFlag=flag)
                self.assertEqual(c.personal(), not c.official())
        c = await self._ready_contact(UserName="gh_abc", VerifyFlag=8)
        self.assertTrue(c.official())
        self.assertFalse(c.personal())

    async def test_special_contact(self):
        c = await self._ready_contact(UserName="fmessage")
        self.assertTrue(c.special())

    async def test_str_prefers_alias_then_name(self):
        c = await self._ready_contact()
        self.assertEqual(str(c), "Contact<小A>")
        self.assertEqual(repr(c), f"Contact(Alice[{CONTACT_ID}])")

        c = await self._ready_contact(RemarkName="")
        self.assertEqual(str(c), "Contact<Alice>")

    async def test_dump_logs_every_field(self):
        c = await self._ready_contact()
        with self.assertLogs("webwx_contact", level="INFO") as logs:
            c.dump()
            c.dump_raw()
        joined = "\n".join(logs.output)
        self.assertIn("name: Alice", joined)
        self.assertIn("NickName: Alice", joined)


class TestIsSelf(unittest.TestCase):
    def test_matches_current_user(self):
        puppet = make_puppet(user=make_user(CONTACT_ID))
        self.assertTrue(Contact(CONTACT_ID, puppet).is_self())

    def test_other_user(self):
        puppet = make_puppet(user=make_user(BOT_ID))
        self.assertFalse(Contact(CONTACT_ID, puppet).is_self())

    def test_no_current_user(self):
        puppet = make_puppet(user=None)
        self.assertFalse(Contact(CONTACT_ID, puppet).is_self())


if __name__ == "__main__":
    unittest.main()
