"""
联系人调用参数值对象

alias() 按参数形态区分读取 / 设置 / 删除。入口处先把参数转换为带类型标记的
值对象，后续逻辑只根据标记分支。
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..exceptions import UnsupportedArgumentException


class AliasOperation(Enum):
    """alias() 的操作类型"""

    GET = "get"
    SET = "set"
    DELETE = "delete"


# alias() 未传参时的哨兵值，用于区分 "未传参" 与 "传入 None"
UNSET: Any = object()


@dataclass(frozen=True)
class AliasRequest:
    """
    值对象：一次备注名读写请求

    Attributes:
        operation (AliasOperation): 读取 / 设置 / 删除
        alias (str, optional): 新备注名，仅 SET 时有值
    """

    operation: AliasOperation
    alias: str | None = None

    @classmethod
    def from_argument(cls, new_alias: Any = UNSET) -> "AliasRequest":
        """
        将 alias() 的原始参数转换为带标记的请求。

        Args:
            new_alias (Any): 未传参 / str / None

        Returns:
            AliasRequest: 对应操作的请求对象

        Raises:
            UnsupportedArgumentException: 参数类型不受支持
        """
        if new_alias is UNSET:
            return cls(operation=AliasOperation.GET)
        if new_alias is None:
            return cls(operation=AliasOperation.DELETE)
        if isinstance(new_alias, str):
            return cls(operation=AliasOperation.SET, alias=new_alias)
        raise UnsupportedArgumentException(new_alias, "new_alias")

    @property
    def is_mutation(self) -> bool:
        """是否需要调用远端接口。"""
        return self.operation is not AliasOperation.GET
