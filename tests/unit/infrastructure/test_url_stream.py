import unittest

import aiohttp
from aiohttp import web
from aiohttp.test_utils import TestServer

from webwx_contact.infrastructure.network import normalize_cookies, open_url_stream

AVATAR_BYTES = b"\x89PNG" + b"\x00" * 2048


class TestNormalizeCookies(unittest.TestCase):
    def test_browser_cookie_list(self):
        cookies = [
            {"name": "wxuin", "value": "1234567", "domain": ".qq.com"},
            {"name": "webwx_data_ticket", "value": "abc"},
            {"value": "ignored"},
        ]
        self.assertEqual(
            normalize_cookies(cookies),
            {"wxuin": "1234567", "webwx_data_ticket": "abc"},
        )

    def test_mapping_and_pairs(self):
        self.assertEqual(normalize_cookies({"a": 1}), {"a": "1"})
        self.assertEqual(normalize_cookies([("a", "1"), ["b", 2]]), {"a": "1", "b": "2"})

    def test_empty(self):
        self.assertEqual(normalize_cookies(None), {})
        self.assertEqual(normalize_cookies([]), {})


class TestOpenUrlStream(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.seen_cookies = {}

        async def icon(request: web.Request) -> web.Response:
            self.seen_cookies = dict(request.cookies)
            return web.Response(body=AVATAR_BYTES, content_type="image/png")

        app = web.Application()
        app.router.add_get("/cgi-bin/mmwebwx-bin/webwxgeticon", icon)
        self.server = TestServer(app)
        await self.server.start_server()

    async def asyncTearDown(self):
        await self.server.close()

    def _url(self, path: str) -> str:
        return str(self.server.make_url(path))

    async def test_read_with_session_cookies(self):
        url = self._url("/cgi-bin/mmwebwx-bin/webwxgeticon?seq=1&type=big")
        cookies = [{"name": "wxuin", "value": "1234567"}]

        async with await open_url_stream(url, cookies, timeout=5) as stream:
            self.assertEqual(stream.status, 200)
            self.assertTrue(stream.content_type.startswith("image/png"))
            data = await stream.read()

        self.assertEqual(data, AVATAR_BYTES)
        self.assertEqual(self.seen_cookies, {"wxuin": "1234567"})
        self.assertTrue(stream.closed)

    async def test_iter_chunked(self):
        stream = await open_url_stream(self._url("/cgi-bin/mmwebwx-bin/webwxgeticon"))
        try:
            chunks = [chunk async for chunk in stream.iter_chunked(512)]
        finally:
            await stream.close()

        self.assertEqual(b"".join(chunks), AVATAR_BYTES)
        self.assertTrue(all(len(chunk) <= 512 for chunk in chunks))

    async def test_async_iteration(self):
        async with await open_url_stream(self._url("/cgi-bin/mmwebwx-bin/webwxgeticon")) as stream:
            data = b"".join([chunk async for chunk in stream])
        self.assertEqual(data, AVATAR_BYTES)

    async def test_http_error_raises(self):
        with self.assertRaises(aiohttp.ClientResponseError) as ctx:
            await open_url_stream(self._url("/missing"))
        self.assertEqual(ctx.exception.status, 404)


if __name__ == "__main__":
    unittest.main()
