"""
常量 - 包内共享的常量
"""

import re

# 包元数据
PACKAGE_NAME = "webwx_contact"
PACKAGE_VERSION = "0.1.0"

# 群聊 ID 前缀，Web 微信后端以 "@@" 标识群聊
GROUP_ID_PREFIX = "@@"

# VerifyFlag 中标识公众号的位
VERIFY_FLAG_OFFICIAL = 0x8

# 系统 / 服务类特殊联系人
# 参考 webwxApp.js 中的 specialContactList
SPECIAL_CONTACT_IDS = frozenset(
    {
        "weibo",
        "qqmail",
        "fmessage",
        "tmessage",
        "qmessage",
        "qqsync",
        "floatbottle",
        "lbsapp",
        "shakeapp",
        "medianote",
        "qqfriend",
        "readerapp",
        "blogapp",
        "facebookapp",
        "masssendapp",
        "meishiapp",
        "feedsapp",
        "voip",
        "blogappweixin",
        "weixin",
        "brandsessionholder",
        "weixinreminder",
        "wxid_novlwrv3lqwv11",
        "gh_22b87fa7cb3c",
        "officialaccounts",
        "notification_messages",
    }
)

# QQ 互通类服务账号（xxx@qqim）
SPECIAL_CONTACT_SUFFIX_PATTERN = re.compile(r"@qqim$")

# 头像默认值
DEFAULT_AVATAR_SCHEME = "http"
DEFAULT_AVATAR_SIZE_SUFFIX = "&type=big"  # 高清头像
DEFAULT_AVATAR_TIMEOUT = 30  # 秒

# 联系人加载默认值
DEFAULT_DEDUPE_READY = True
DEFAULT_STRICT_NORMALIZATION = False
