"""
错误上报接口 - 异常遥测抽象
"""

from abc import ABC, abstractmethod
from typing import Any


class IErrorReporter(ABC):
    """
    错误上报接口

    puppet 调用失败时，联系人实体先通过此接口上报异常，再把异常抛给调用方。
    """

    @abstractmethod
    def capture_exception(self, exc: BaseException, **context: Any) -> None:
        """
        上报一个异常

        参数:
            exc: 捕获到的异常
            context: 附加的上下文信息（如 contact_id、operation）
        """
        pass
