"""
错误上报 - 基础设施层默认实现
"""

from typing import Any

from ...domain.repositories.error_reporter import IErrorReporter
from ...utils.logger import logger


class LoggingErrorReporter(IErrorReporter):
    """
    默认错误上报器

    没有接入外部遥测服务时使用：把异常连同堆栈写入包日志。
    """

    def capture_exception(self, exc: BaseException, **context: Any) -> None:
        detail = ", ".join(f"{k}={v}" for k, v in context.items())
        logger.error(
            f"捕获异常 {type(exc).__name__}: {exc}" + (f" ({detail})" if detail else ""),
            exc_info=(type(exc), exc, exc.__traceback__),
        )
