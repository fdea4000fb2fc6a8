"""
测试公共数据与 puppet 模拟对象
"""

from unittest.mock import AsyncMock, MagicMock

from webwx_contact.domain.repositories import IContactPuppet, IErrorReporter

CONTACT_ID = "@0bb3e4dd746fdbd4a80546aef66f4085"
BOT_ID = "@bot00000000000000000000000000000"
AVATAR_PATH = "/cgi-bin/mmwebwx-bin/webwxgeticon?seq=620310295&username=" + CONTACT_ID

RAW_CONTACT = {
    "UserName": CONTACT_ID,
    "Uin": 0,
    "Alias": "alice_wx",
    "NickName": "Alice",
    "RemarkName": "小A",
    "Sex": 2,
    "Province": "北京",
    "City": "海淀",
    "Signature": "今天也要开心",
    "StarFriend": 1,
    "HeadImgUrl": AVATAR_PATH,
    "VerifyFlag": 0,
}


def make_raw(**overrides) -> dict:
    raw = dict(RAW_CONTACT)
    raw.update(overrides)
    return raw


def make_user(user_id: str = BOT_ID) -> MagicMock:
    user = MagicMock()
    user.id = user_id
    return user


def make_puppet(raw: dict | None = None, user=None) -> MagicMock:
    """构造一个所有异步方法都为 AsyncMock 的 puppet。"""
    puppet = MagicMock(spec=IContactPuppet)
    puppet.fetch_contact = AsyncMock(return_value=make_raw() if raw is None else raw)
    puppet.set_contact_alias = AsyncMock(return_value=None)
    puppet.send = AsyncMock(return_value=True)
    puppet.hostname = AsyncMock(return_value="wx.qq.com")
    puppet.cookies = AsyncMock(return_value=[{"name": "wxuin", "value": "1234567"}])
    puppet.user_self = MagicMock(return_value=user)
    return puppet


def make_reporter() -> MagicMock:
    return MagicMock(spec=IErrorReporter)
