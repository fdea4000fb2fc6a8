"""
网络模块 - 携带会话 Cookie 的资源下载
"""

from .url_stream import UrlStream, normalize_cookies, open_url_stream

__all__ = ["UrlStream", "normalize_cookies", "open_url_stream"]
