"""
领域实体

该模块导出所有领域实体类，包括:
- Contact: 延迟加载的联系人
- Message: 发往联系人的出站消息
"""

from .contact import Contact
from .message import Message, SayPayload, SayPayloadType

__all__ = [
    "Contact",
    "Message",
    "SayPayload",
    "SayPayloadType",
]
