# 仓储接口
from .error_reporter import IErrorReporter
from .puppet_repository import IContactPuppet

__all__ = [
    "IContactPuppet",
    "IErrorReporter",
]
