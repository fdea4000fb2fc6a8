"""
联系人实体 - 延迟加载的 Web 微信联系人

构造时只记录后端分配的 ID，其余属性需要通过 ready() 从 puppet 拉取并解析。
"""

import asyncio
from typing import Any

from ...infrastructure.config.config_manager import ConfigManager
from ...infrastructure.network.url_stream import UrlStream, open_url_stream
from ...infrastructure.reporting.error_reporter import LoggingErrorReporter
from ...utils.logger import logger
from ...utils.text import plain_text
from ..exceptions import (
    ContactFetchException,
    ContactNormalizationException,
    ContactNotInitializedException,
    ContactNotReadyException,
    InvalidContactIdException,
    NoAvatarException,
    NoCurrentUserException,
)
from ..repositories.error_reporter import IErrorReporter
from ..repositories.puppet_repository import IContactPuppet
from ..services.contact_normalizer import ContactNormalizer
from ..value_objects.contact_arguments import UNSET, AliasOperation, AliasRequest
from ..value_objects.contact_profile import ContactProfile, Gender, RawContact
from .message import Message, SayPayload, SayPayloadType

WEIXIN_FAQ_URL = (
    "https://github.com/Chatie/wechaty/wiki/FAQ"
    "#1-how-to-get-the-permanent-id-for-a-contact"
)


class Contact:
    """
    联系人实体

    每个微信好友（以及公众号、系统账号）都被封装为一个 Contact。
    实体持有 puppet 的引用（不拥有它），所有网络操作都经由 puppet 完成；
    访问器只读取本地缓存，未就绪时返回中性值而不会抛出异常。

    Attributes:
        id (str): 后端分配的联系人 ID，构造后不可变
        puppet (IContactPuppet): 共享的浏览器会话传输层
    """

    def __init__(
        self,
        contact_id: str,
        puppet: IContactPuppet,
        config: ConfigManager | None = None,
        error_reporter: IErrorReporter | None = None,
        normalizer: ContactNormalizer | None = None,
    ):
        """
        初始化联系人。

        Args:
            contact_id (str): 联系人 ID（UserName）
            puppet (IContactPuppet): puppet 实例
            config (ConfigManager, optional): 配置，默认使用空配置
            error_reporter (IErrorReporter, optional): 错误上报器，默认写日志
            normalizer (ContactNormalizer, optional): 原始数据解析器

        Raises:
            InvalidContactIdException: contact_id 不是字符串
        """
        if not isinstance(contact_id, str):
            raise InvalidContactIdException(contact_id)

        logger.debug(f"Contact({contact_id}) 构造")
        self._id = contact_id
        self.puppet = puppet
        self.config = config or ConfigManager({})
        self.error_reporter = error_reporter or LoggingErrorReporter()
        self.normalizer = normalizer or ContactNormalizer()

        self._profile: ContactProfile | None = None
        self._raw: RawContact | None = None
        self._loading: asyncio.Future | None = None
        # 每次拉取递增；较早发起的拉取晚于新拉取完成时丢弃其结果
        self._load_generation = 0

    @property
    def id(self) -> str:
        return self._id

    def __str__(self) -> str:
        profile = self._profile
        if profile is None:
            return f"Contact<{self.id}>"
        return f"Contact<{profile.alias or profile.name or self.id}>"

    def __repr__(self) -> str:
        name = self._profile.name if self._profile else None
        return f"Contact({name}[{self.id}])"

    # ==================== 生命周期 ====================

    def is_ready(self) -> bool:
        """资料已加载，且 ID 与昵称都不为空。"""
        profile = self._profile
        return bool(profile and profile.id and profile.name)

    async def ready(self) -> "Contact":
        """
        确保联系人资料已加载。

        已就绪时直接返回；否则通过 puppet 拉取原始数据并解析。
        默认情况下，并发调用会共享同一次正在进行的拉取。

        Returns:
            Contact: self

        Raises:
            ContactNotInitializedException: 联系人 ID 为空
            ContactFetchException: puppet 拉取失败
            ContactNormalizationException: 严格模式下原始数据无法解析
        """
        if not self.id:
            raise ContactNotInitializedException(self.id)

        if self.is_ready():
            return self

        if not self.config.get_dedupe_ready():
            await self._load()
            return self

        if self._loading is None:
            self._loading = asyncio.ensure_future(self._load())
            self._loading.add_done_callback(self._on_load_done)
        # shield: 某个调用方被取消时不影响其他等待同一次拉取的调用方
        await asyncio.shield(self._loading)
        return self

    def _on_load_done(self, future: asyncio.Future) -> None:
        if self._loading is future:
            self._loading = None
        # 等待方可能已全部取消，异常已在 _load 中上报，这里标记为已读取
        if not future.cancelled():
            future.exception()

    async def _load(self) -> None:
        self._load_generation += 1
        generation = self._load_generation
        try:
            raw = await self.puppet.fetch_contact(self.id)
        except Exception as e:
            logger.error(f"拉取联系人 {self.id} 失败: {e}")
            self.error_reporter.capture_exception(e, contact_id=self.id, operation="ready")
            raise ContactFetchException(self.id, str(e)) from e

        if generation != self._load_generation:
            logger.debug(f"联系人 {self.id} 已有更新的拉取，丢弃第 {generation} 次拉取结果")
            return

        logger.debug(f"拉取联系人 {self.id} 完成")
        self._raw = raw
        self._profile = self.normalizer.normalize(raw)

        if self._profile is None and self.config.get_strict_normalization():
            raise ContactNormalizationException(self.id)

    async def refresh(self) -> "Contact":
        """
        强制重新加载联系人资料。

        正在进行的拉取（如有）不会被复用：它在本次刷新之前发起，
        其结果完成后会被丢弃。

        Returns:
            Contact: self
        """
        self._profile = None
        self._loading = None
        return await self.ready()

    # ==================== 访问器 ====================

    def name(self) -> str:
        """联系人自己设置的昵称（已清洗为纯文本），未就绪时为空字符串。"""
        profile = self._profile
        return plain_text(profile.name) if profile else ""

    def alias(self, new_alias: Any = UNSET) -> Any:
        """
        读取 / 设置 / 删除联系人备注名。

        - ``contact.alias()`` 返回当前备注名或 None
        - ``await contact.alias("新备注")`` 设置备注名
        - ``await contact.alias(None)`` 删除备注名

        后端对频繁修改有限制（约每分钟 60 次）。

        Args:
            new_alias (Any): 不传 / str / None

        Returns:
            str | None: 读取时的备注名；设置 / 删除时返回可等待对象

        Raises:
            UnsupportedArgumentException: 参数类型不受支持
        """
        request = AliasRequest.from_argument(new_alias)
        if not request.is_mutation:
            profile = self._profile
            return profile.alias or None if profile else None
        return self._update_alias(request)

    async def set_alias(self, new_alias: str) -> Any:
        """设置备注名，等价于 ``await contact.alias(new_alias)``。"""
        return await self._update_alias(AliasRequest.from_argument(new_alias))

    async def delete_alias(self) -> Any:
        """删除备注名，等价于 ``await contact.alias(None)``。"""
        return await self._update_alias(AliasRequest(operation=AliasOperation.DELETE))

    async def _update_alias(self, request: AliasRequest) -> Any:
        new_alias = request.alias if request.operation is AliasOperation.SET else None
        try:
            result = await self.puppet.set_contact_alias(self, new_alias)
        except Exception as e:
            logger.error(f"alias({new_alias}) 被拒绝: {e}")
            self.error_reporter.capture_exception(e, contact_id=self.id, operation="alias")
            raise

        if self._profile is None:
            logger.error(f"alias() 远端已修改，但联系人 {self.id} 尚无本地资料")
        else:
            self._profile = self._profile.with_alias(new_alias)
        return result

    def gender(self) -> Gender:
        profile = self._profile
        return profile.gender if profile else Gender.UNKNOWN

    def province(self) -> str | None:
        profile = self._profile
        return profile.province or None if profile else None

    def city(self) -> str | None:
        profile = self._profile
        return profile.city or None if profile else None

    def signature(self) -> str | None:
        """个性签名（已清洗为纯文本）。"""
        profile = self._profile
        return plain_text(profile.signature) or None if profile else None

    def stranger(self) -> bool | None:
        """
        是否陌生人。

        Returns:
            bool | None: True 为非好友，False 为好友，未就绪时为 None
        """
        profile = self._profile
        return profile.stranger if profile else None

    def official(self) -> bool:
        """是否公众号。"""
        profile = self._profile
        return profile.official if profile else False

    def special(self) -> bool:
        """是否系统 / 服务类特殊账号（如 qqmail、fmessage、xxx@qqim）。"""
        profile = self._profile
        return profile.special if profile else False

    def personal(self) -> bool:
        """是否个人账号，始终等于 not official()。"""
        return not self.official()

    def star(self) -> bool | None:
        profile = self._profile
        return profile.star if profile else None

    def is_self(self) -> bool:
        """是否为当前登录的机器人自己。"""
        user = self.puppet.user_self()
        if user is None:
            return False
        return self.id == user.id

    def weixin(self) -> str | None:
        """
        微信号。

        受腾讯接口限制，大多数联系人拿不到微信号，不建议依赖。
        需要跨会话追踪联系人时请参考 FAQ。

        Returns:
            str | None: 微信号，拿不到时为 None
        """
        profile = self._profile
        wx_id = profile.weixin or None if profile else None
        if not wx_id:
            logger.debug("weixin() 受腾讯接口限制，并非总能拿到微信号")
            logger.debug(f"weixin() 如需跨会话追踪联系人，请参考: {WEIXIN_FAQ_URL}")
        return wx_id

    def get(self, field: str) -> Any:
        """按字段名读取缓存资料，未就绪或字段不存在时返回 None。"""
        profile = self._profile
        return getattr(profile, field, None) if profile else None

    # ==================== 发送消息 ====================

    async def say(self, content: "str | Message") -> Any:
        """
        向联系人发送文本或消息。

        Args:
            content (str | Message): 文本内容或预先构建的消息

        Returns:
            Any: puppet.send() 的返回值

        Raises:
            NoCurrentUserException: puppet 当前没有登录用户（优先于参数检查）
            UnsupportedArgumentException: content 既不是 str 也不是 Message
        """
        logger.debug(f"say({content})")
        user = self.puppet.user_self()
        if user is None:
            raise NoCurrentUserException()

        payload = SayPayload.from_argument(content)

        if payload.type == SayPayloadType.TEXT:
            message = Message(puppet=self.puppet, text=payload.text)
        else:
            message = payload.message

        message.sender = user
        message.recipient = self
        logger.debug(f"say() 发送者: {user} 接收者: {self} 内容: {message.text}")

        return await self.puppet.send(message)

    # ==================== 头像 ====================

    async def avatar(self) -> UrlStream:
        """
        获取头像图片字节流。

        使用示例::

            async with await contact.avatar() as stream:
                data = await stream.read()

        Returns:
            UrlStream: 头像字节流，调用方负责关闭

        Raises:
            ContactNotReadyException: 联系人资料尚未加载
            NoAvatarException: 联系人没有头像地址
        """
        logger.debug("avatar()")
        profile = self._profile
        if profile is None:
            raise ContactNotReadyException(self.id, "无法获取头像: 联系人资料尚未加载")
        if not profile.avatar:
            raise NoAvatarException(self.id)

        try:
            hostname = await self.puppet.hostname()
            avatar_url = (
                f"{self.config.get_avatar_scheme()}://{hostname}"
                f"{profile.avatar}{self.config.get_avatar_size_suffix()}"
            )
            cookies = await self.puppet.cookies()
            logger.debug(f"avatar() url: {avatar_url}")
            return await open_url_stream(
                avatar_url, cookies, timeout=self.config.get_avatar_timeout()
            )
        except Exception as e:
            logger.warning(f"avatar() 异常: {e}")
            self.error_reporter.capture_exception(e, contact_id=self.id, operation="avatar")
            raise

    # ==================== 调试 ====================

    def dump(self) -> None:
        """把解析后的资料逐项写入日志。"""
        if self._profile is None:
            raise ContactNotReadyException(self.id)
        logger.info("======= dump contact =======")
        for key, value in self._profile.to_dict().items():
            logger.info(f"{key}: {value}")

    def dump_raw(self) -> None:
        """把最近一次收到的原始数据逐项写入日志。"""
        if not self._raw:
            logger.warning(f"dump_raw() 联系人 {self.id} 没有原始数据")
            return
        logger.info("======= dump raw contact =======")
        for key, value in self._raw.items():
            logger.info(f"{key}: {value}")
