"""
联系人资料值对象 - 原始数据解析后的领域记录
"""

from dataclasses import asdict, dataclass, replace
from enum import IntEnum
from typing import Any

# 后端返回的原始联系人字典，字段名由 Web 微信接口决定
RawContact = dict[str, Any]


class Gender(IntEnum):
    """联系人性别，取值与后端 Sex 字段一致"""

    UNKNOWN = 0
    MALE = 1
    FEMALE = 2


@dataclass(frozen=True)
class ContactProfile:
    """
    值对象：联系人资料

    由 ContactNormalizer 从原始数据一次性生成，之后不可变。
    分类标记（star/stranger/official/special）在解析时计算并缓存。

    Attributes:
        id (str): 后端分配的联系人 ID（UserName）
        uin (str): 稳定 ID（Uin），多数情况下为空
        weixin (str): 微信号（Alias）
        name (str): 联系人自己设置的昵称（NickName）
        alias (str, optional): 机器人为其设置的备注名（RemarkName）
        gender (Gender): 性别
        province (str): 省份
        city (str): 城市
        signature (str): 个性签名
        address (str): 地址标识，目前与微信号相同
        avatar (str): 相对头像路径（HeadImgUrl）
        star (bool): 是否星标好友
        stranger (bool): 是否陌生人
        official (bool): 是否公众号
        special (bool): 是否系统 / 服务类特殊账号
    """

    id: str
    uin: str = ""
    weixin: str = ""
    name: str = ""
    alias: str | None = None
    gender: Gender = Gender.UNKNOWN
    province: str = ""
    city: str = ""
    signature: str = ""
    address: str = ""
    avatar: str = ""
    star: bool = False
    stranger: bool = False
    official: bool = False
    special: bool = False

    def with_alias(self, alias: str | None) -> "ContactProfile":
        """返回仅备注名不同的新资料对象。"""
        return replace(self, alias=alias)

    def to_dict(self) -> dict[str, Any]:
        """转换为字典，用于日志输出和调试。"""
        return asdict(self)
