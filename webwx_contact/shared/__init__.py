"""
共享模块 - 通用常量
"""

from .constants import (
    GROUP_ID_PREFIX,
    SPECIAL_CONTACT_IDS,
    SPECIAL_CONTACT_SUFFIX_PATTERN,
    VERIFY_FLAG_OFFICIAL,
)

__all__ = [
    "GROUP_ID_PREFIX",
    "SPECIAL_CONTACT_IDS",
    "SPECIAL_CONTACT_SUFFIX_PATTERN",
    "VERIFY_FLAG_OFFICIAL",
]
