"""
Web 微信联系人 - 源代码包

本包把 Web 微信后端中的单个联系人建模为延迟加载的实体，采用 DDD (领域驱动设计) 架构：
- domain: 领域层 - 联系人实体、资料解析、异常定义，与 puppet 实现无关
- infrastructure: 基础设施层 - 配置、头像下载、错误上报
- shared: 共享组件 - 跨层使用的常量
- utils: 工具函数 - 日志与文本清洗

真正的网络 I/O 由外部注入的 puppet（浏览器自动化会话）完成。
"""

from .domain.entities import Contact, Message
from .domain.exceptions import (
    ContactException,
    ContactFetchException,
    ContactNormalizationException,
    ContactNotInitializedException,
    ContactNotReadyException,
    DomainException,
    InvalidContactIdException,
    NoAvatarException,
    NoCurrentUserException,
    UnsupportedArgumentException,
)
from .domain.repositories import IContactPuppet, IErrorReporter
from .domain.services import ContactNormalizer, normalize_contact
from .domain.value_objects import ContactProfile, Gender
from .infrastructure import ConfigManager, LoggingErrorReporter, UrlStream
from .shared.constants import PACKAGE_VERSION

__version__ = PACKAGE_VERSION

__all__ = [
    # 实体
    "Contact",
    "Message",
    "ContactProfile",
    "Gender",
    # 解析
    "ContactNormalizer",
    "normalize_contact",
    # 接口
    "IContactPuppet",
    "IErrorReporter",
    # 基础设施
    "ConfigManager",
    "LoggingErrorReporter",
    "UrlStream",
    # 异常
    "DomainException",
    "ContactException",
    "ContactFetchException",
    "ContactNormalizationException",
    "ContactNotInitializedException",
    "ContactNotReadyException",
    "InvalidContactIdException",
    "NoAvatarException",
    "NoCurrentUserException",
    "UnsupportedArgumentException",
]
