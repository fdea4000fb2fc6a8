# 值对象
from .contact_arguments import UNSET, AliasOperation, AliasRequest
from .contact_profile import ContactProfile, Gender, RawContact

__all__ = [
    # 联系人资料
    "ContactProfile",
    "Gender",
    "RawContact",
    # 调用参数
    "AliasRequest",
    "AliasOperation",
    "UNSET",
]
