"""
URL 字节流 - 携带会话 Cookie 的 HTTP 下载

头像等资源只对已登录的浏览器会话开放，请求时必须带上 puppet 导出的 Cookie。
"""

from collections.abc import AsyncIterator, Iterable, Mapping
from typing import Any

import aiohttp

from ...utils.logger import logger

DEFAULT_CHUNK_SIZE = 64 * 1024


def normalize_cookies(cookies: Any) -> dict[str, str]:
    """
    把 puppet 导出的 Cookie 统一转换为 name -> value 字典。

    Args:
        cookies (Any): 浏览器导出的 Cookie 列表（每项含 name / value）或映射

    Returns:
        dict[str, str]: 可直接交给 aiohttp 的 Cookie 字典
    """
    if not cookies:
        return {}
    if isinstance(cookies, Mapping):
        return {str(k): str(v) for k, v in cookies.items()}

    result = {}
    if isinstance(cookies, Iterable):
        for item in cookies:
            if isinstance(item, Mapping) and item.get("name"):
                result[str(item["name"])] = str(item.get("value", ""))
            elif isinstance(item, (tuple, list)) and len(item) == 2:
                result[str(item[0])] = str(item[1])
    return result


class UrlStream:
    """
    基础设施：HTTP 响应字节流

    持有 aiohttp 会话与响应，可作为异步上下文管理器或异步迭代器使用；
    用完必须关闭（或使用 async with），以释放底层连接。

    Attributes:
        url (str): 请求地址
        status (int): HTTP 状态码
        content_type (str): 响应的 Content-Type
    """

    def __init__(self, session: aiohttp.ClientSession, response: aiohttp.ClientResponse):
        self._session = session
        self._response = response
        self.url = str(response.url)
        self.status = response.status
        self.content_type = response.headers.get("Content-Type", "")

    async def read(self) -> bytes:
        """读取完整响应体。"""
        return await self._response.read()

    async def iter_chunked(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> AsyncIterator[bytes]:
        """按块读取响应体。"""
        async for chunk in self._response.content.iter_chunked(chunk_size):
            yield chunk

    def __aiter__(self) -> AsyncIterator[bytes]:
        return self.iter_chunked()

    @property
    def closed(self) -> bool:
        return self._session.closed

    async def close(self) -> None:
        """释放响应并关闭会话。"""
        self._response.release()
        await self._session.close()

    async def __aenter__(self) -> "UrlStream":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


async def open_url_stream(
    url: str,
    cookies: Any = None,
    timeout: float = 30.0,
) -> UrlStream:
    """
    打开一个携带 Cookie 的 GET 字节流。

    Args:
        url (str): 资源地址
        cookies (Any): 会话 Cookie，格式见 normalize_cookies
        timeout (float): 总超时时间（秒）

    Returns:
        UrlStream: 已收到响应头的字节流

    Raises:
        aiohttp.ClientError: 网络错误或非 2xx 响应
    """
    session = aiohttp.ClientSession(
        cookies=normalize_cookies(cookies),
        timeout=aiohttp.ClientTimeout(total=timeout),
    )
    response = None
    try:
        response = await session.get(url)
        response.raise_for_status()
    except BaseException:
        if response is not None:
            response.release()
        await session.close()
        raise

    logger.debug(f"open_url_stream() 已连接: {url} ({response.status})")
    return UrlStream(session, response)
