"""
消息实体 - 发往联系人的出站消息

同时定义 say() 的待发送内容 SayPayload：它只区分 "文本" 与 "消息实体"
两种形态，与 Message 放在一起，值对象层无需依赖实体层。
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..exceptions import UnsupportedArgumentException


@dataclass(eq=False)
class Message:
    """
    消息实体

    只承载 Contact.say() 所需的最小字段，真正的序列化与发送由 puppet 完成。

    Attributes:
        puppet (Any): 消息绑定的 puppet
        text (str): 文本内容
        sender (Any, optional): 发送者联系人
        recipient (Any, optional): 接收者联系人
    """

    puppet: Any = None
    text: str = ""
    sender: Any = None
    recipient: Any = None

    def to_dict(self) -> dict[str, Any]:
        """转换为便于日志输出的字典。"""
        return {
            "from": getattr(self.sender, "id", None),
            "to": getattr(self.recipient, "id", None),
            "text": self.text,
        }

    def __str__(self) -> str:
        return f"Message<{self.text}>"


class SayPayloadType(Enum):
    """say() 的内容类型"""

    TEXT = "text"
    MESSAGE = "message"


@dataclass(frozen=True)
class SayPayload:
    """
    say() 的待发送内容

    Attributes:
        type (SayPayloadType): 内容类型
        text (str): 纯文本内容（仅 TEXT）
        message (Message, optional): 预先构建的消息（仅 MESSAGE）
    """

    type: SayPayloadType
    text: str = ""
    message: Message | None = None

    @classmethod
    def from_argument(cls, content: Any) -> "SayPayload":
        """
        将 say() 的原始参数转换为带标记的内容对象。

        Raises:
            UnsupportedArgumentException: 参数既不是 str 也不是 Message
        """
        if isinstance(content, str):
            return cls(type=SayPayloadType.TEXT, text=content)
        if isinstance(content, Message):
            return cls(type=SayPayloadType.MESSAGE, message=content)
        raise UnsupportedArgumentException(content, "content")
