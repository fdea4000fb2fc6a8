"""
包日志

所有模块共用同一个 ``webwx_contact`` logger，由宿主程序决定 handler 与级别；
本包只负责给每条消息加上前缀，不做任何日志配置。
"""

import logging
from typing import Any

LOGGER_NAME = "webwx_contact"
LOG_PREFIX = "[WebWX联系人]"


class ContactLoggerAdapter(logging.LoggerAdapter):
    """在每条日志前拼接 ``extra["prefix"]``，未设置时使用 LOG_PREFIX。"""

    def process(self, msg: str, kwargs: Any) -> tuple[str, Any]:
        prefix = (self.extra or {}).get("prefix", LOG_PREFIX)
        return f"{prefix} {msg}", kwargs


logger = ContactLoggerAdapter(logging.getLogger(LOGGER_NAME), {"prefix": LOG_PREFIX})
