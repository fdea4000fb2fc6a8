"""
Puppet 仓储接口 - 浏览器会话传输层的抽象
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any

from ..value_objects.contact_profile import RawContact


class IContactPuppet(ABC):
    """
    Puppet 接口

    Puppet 持有与 Web 微信后端的已认证浏览器会话，负责所有真实的网络 I/O。
    联系人实体只持有其引用，不拥有其生命周期。
    """

    @abstractmethod
    async def fetch_contact(self, contact_id: str) -> RawContact:
        """
        获取联系人原始数据

        参数:
            contact_id: 联系人 ID（UserName）

        返回:
            后端返回的原始联系人字典
        """
        pass

    @abstractmethod
    async def set_contact_alias(self, contact: Any, alias: str | None) -> Any:
        """
        设置或删除联系人备注名

        参数:
            contact: 目标联系人
            alias: 新备注名，None 表示删除
        """
        pass

    @abstractmethod
    async def send(self, message: Any) -> Any:
        """发送消息"""
        pass

    @abstractmethod
    def user_self(self) -> Any | None:
        """获取当前登录用户，未登录时返回 None"""
        pass

    @abstractmethod
    async def hostname(self) -> str:
        """获取当前会话所在的主机名（如 wx.qq.com）"""
        pass

    @abstractmethod
    async def cookies(self) -> Iterable[Mapping[str, Any]] | Mapping[str, str]:
        """
        获取当前会话的 Cookie

        返回:
            浏览器导出的 Cookie 列表（每项含 name / value），或 name -> value 映射
        """
        pass
