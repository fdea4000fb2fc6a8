"""
联系人解析服务 - 原始数据到领域记录的转换

纯函数式的领域服务：不做 I/O，不抛异常。唯一的校验是 UserName 不能为空，
校验失败时记录警告并返回 None。
"""

from collections.abc import Mapping
from typing import Any

from ...shared.constants import (
    GROUP_ID_PREFIX,
    SPECIAL_CONTACT_IDS,
    SPECIAL_CONTACT_SUFFIX_PATTERN,
    VERIFY_FLAG_OFFICIAL,
)
from ...utils.logger import logger
from ..value_objects.contact_profile import ContactProfile, Gender


def _to_int(value: Any) -> int:
    """宽松地把后端数值字段转换为 int，无法转换时返回 0。"""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    try:
        if isinstance(value, float):
            return int(value)
        return int(str(value).strip())
    except (TypeError, ValueError, OverflowError):
        return 0


def _to_str(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _to_gender(value: Any) -> Gender:
    try:
        return Gender(_to_int(value))
    except ValueError:
        return Gender.UNKNOWN


class ContactNormalizer:
    """
    领域服务：联系人解析器

    负责把 puppet 返回的 Web 微信原始联系人字典转换为 ContactProfile 值对象，
    并在转换时计算公众号 / 特殊账号等分类标记。
    """

    @staticmethod
    def is_official(user_name: str, verify_flag: Any) -> bool:
        """
        判断是否公众号。

        非空 ID、不是群聊 ID，且 VerifyFlag 的第 3 位（值 8）被置位。

        Args:
            user_name (str): 联系人 ID
            verify_flag (Any): 原始 VerifyFlag 字段

        Returns:
            bool: 是否公众号
        """
        return (
            bool(user_name)
            and not user_name.startswith(GROUP_ID_PREFIX)
            and bool(_to_int(verify_flag) & VERIFY_FLAG_OFFICIAL)
        )

    @staticmethod
    def is_special(user_name: str) -> bool:
        """判断是否系统 / 服务类特殊账号（固定名单或 @qqim 后缀）。"""
        return user_name in SPECIAL_CONTACT_IDS or bool(
            SPECIAL_CONTACT_SUFFIX_PATTERN.search(user_name)
        )

    def normalize(self, raw: Any) -> ContactProfile | None:
        """
        将原始联系人数据转换为 ContactProfile。

        Args:
            raw (Any): puppet 返回的原始联系人字典

        Returns:
            ContactProfile | None: 解析结果；原始数据为空或缺少 UserName 时返回 None
        """
        if not raw or not isinstance(raw, Mapping) or not raw.get("UserName"):
            logger.warning("ContactNormalizer.normalize() 收到空的原始联系人数据")
            return None

        user_name = _to_str(raw.get("UserName"))
        weixin = _to_str(raw.get("Alias"))

        return ContactProfile(
            id=user_name,
            uin=_to_str(raw.get("Uin")),
            weixin=weixin,
            name=_to_str(raw.get("NickName")),
            alias=_to_str(raw.get("RemarkName")) or None,
            gender=_to_gender(raw.get("Sex")),
            province=_to_str(raw.get("Province")),
            city=_to_str(raw.get("City")),
            signature=_to_str(raw.get("Signature")),
            # 暂时没有稳定的地址标识，沿用微信号
            address=weixin,
            avatar=_to_str(raw.get("HeadImgUrl")),
            star=bool(raw.get("StarFriend")),
            # stranger 字段由注入浏览器的脚本在补全数据时写入
            stranger=bool(raw.get("stranger")),
            official=self.is_official(user_name, raw.get("VerifyFlag")),
            special=self.is_special(user_name),
        )


_default_normalizer = ContactNormalizer()


def normalize_contact(raw: Any) -> ContactProfile | None:
    """使用默认解析器转换原始联系人数据。"""
    return _default_normalizer.normalize(raw)
