"""
领域异常 - 领域层自定义异常

该模块包含联系人领域中使用的所有领域特定异常。
这些异常与具体 puppet 实现无关，表示业务逻辑错误。
"""


class DomainException(Exception):
    """所有领域错误的基础异常。"""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


# ============================================================================
# 联系人异常
# ============================================================================


class ContactException(DomainException):
    """联系人相关错误的基础异常。"""

    def __init__(self, message: str, contact_id: str = "", code: str = "CONTACT_ERROR"):
        self.contact_id = contact_id
        super().__init__(f"{message} (联系人: {contact_id})" if contact_id else message, code)


class ContactNotInitializedException(ContactException):
    """在没有有效 ID 的联系人上调用 ready() 时抛出。"""

    def __init__(self, contact_id: str = ""):
        super().__init__("ready() 调用于未初始化的联系人", contact_id, "CONTACT_NOT_INITIALIZED")


class ContactNotReadyException(ContactException):
    """当联系人数据尚未加载时抛出。"""

    def __init__(self, contact_id: str = "", message: str = "联系人数据尚未加载"):
        super().__init__(message, contact_id, "CONTACT_NOT_READY")


class NoAvatarException(ContactException):
    """当联系人没有头像地址时抛出。"""

    def __init__(self, contact_id: str = ""):
        super().__init__("联系人没有头像地址", contact_id, "NO_AVATAR")


class ContactNormalizationException(ContactException):
    """当后端返回的原始联系人数据无法解析时抛出（严格模式）。"""

    def __init__(self, contact_id: str = ""):
        super().__init__("原始联系人数据无法解析", contact_id, "CONTACT_NORMALIZATION_FAILED")


# ============================================================================
# Puppet 异常
# ============================================================================


class PuppetException(DomainException):
    """Puppet（浏览器会话传输层）相关错误的基础异常。"""

    def __init__(self, message: str, code: str = "PUPPET_ERROR"):
        super().__init__(message, code)


class ContactFetchException(PuppetException):
    """当通过 puppet 获取联系人失败时抛出。"""

    def __init__(self, contact_id: str, reason: str = ""):
        self.contact_id = contact_id
        self.reason = reason
        message = f"获取联系人失败: {contact_id}"
        super().__init__(f"{message} ({reason})" if reason else message, "CONTACT_FETCH_ERROR")


class NoCurrentUserException(PuppetException):
    """当 puppet 没有当前登录用户时抛出。"""

    def __init__(self, message: str = "puppet 当前没有登录用户"):
        super().__init__(message, "NO_CURRENT_USER")


# ============================================================================
# 验证异常
# ============================================================================


class ValidationException(DomainException):
    """验证错误的基础异常。"""

    def __init__(self, message: str, field: str = "", code: str = "VALIDATION_ERROR"):
        self.field = field
        super().__init__(f"{field}: {message}" if field else message, code)


class InvalidContactIdException(ValidationException):
    """当联系人 ID 不是字符串时抛出。"""

    def __init__(self, contact_id: object):
        self.contact_id = contact_id
        super().__init__(
            f"联系人 ID 必须是字符串，实际类型: {type(contact_id).__name__}",
            "contact_id",
            "INVALID_CONTACT_ID",
        )


class UnsupportedArgumentException(ValidationException):
    """当方法收到不支持的参数形态时抛出。"""

    def __init__(self, argument: object, field: str = ""):
        self.argument = argument
        super().__init__(
            f"不支持的参数类型: {type(argument).__name__}",
            field,
            "UNSUPPORTED_ARGUMENT",
        )
