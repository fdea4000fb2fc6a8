"""
配置管理器 - 集中化配置管理

该模块提供访问联系人相关配置的统一接口，
在原始配置字典之上增加默认值与类型转换。
"""

from typing import Any, Dict, Optional

from ...shared.constants import (
    DEFAULT_AVATAR_SCHEME,
    DEFAULT_AVATAR_SIZE_SUFFIX,
    DEFAULT_AVATAR_TIMEOUT,
    DEFAULT_DEDUPE_READY,
    DEFAULT_STRICT_NORMALIZATION,
)


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


class ConfigManager:
    """
    联系人配置

    包装宿主传入的嵌套字典（``{"avatar": {...}, "contact": {...}}``）。
    每个键都有对应的类型化 getter，键缺失或取值无法转换时回退到
    ``shared.constants`` 中的默认值。
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self._config = config or {}

    def get(self, key: str, default: Any = None) -> Any:
        """
        按点号路径读取配置，如 ``get("avatar.timeout")``。

        路径中任一段缺失、为 None 或不是字典时返回 default。
        """
        node: Any = self._config
        for part in key.split("."):
            if not isinstance(node, dict) or node.get(part) is None:
                return default
            node = node[part]
        return node

    def set(self, key: str, value: Any) -> None:
        """按点号路径写入配置，途经的非字典节点会被替换为空字典。"""
        *parents, leaf = key.split(".")
        node = self._config
        for part in parents:
            if not isinstance(node.get(part), dict):
                node[part] = {}
            node = node[part]
        node[leaf] = value

    # ========================================================================
    # 头像配置
    # ========================================================================

    def get_avatar_scheme(self) -> str:
        """获取拼接头像地址时使用的协议。"""
        return str(self.get("avatar.scheme", DEFAULT_AVATAR_SCHEME))

    def get_avatar_size_suffix(self) -> str:
        """获取追加在头像路径后的查询后缀（默认请求高清大图）。"""
        return str(self.get("avatar.size_suffix", DEFAULT_AVATAR_SIZE_SUFFIX))

    def get_avatar_timeout(self) -> float:
        """获取头像下载的超时时间（秒）。"""
        try:
            return float(self.get("avatar.timeout", DEFAULT_AVATAR_TIMEOUT))
        except (TypeError, ValueError):
            return float(DEFAULT_AVATAR_TIMEOUT)

    # ========================================================================
    # 联系人加载配置
    # ========================================================================

    def get_dedupe_ready(self) -> bool:
        """并发调用 ready() 时是否合并为同一次拉取。"""
        return _to_bool(self.get("contact.dedupe_ready", DEFAULT_DEDUPE_READY))

    def get_strict_normalization(self) -> bool:
        """原始数据无法解析时，ready() 是否抛出异常而非静默保持未就绪。"""
        return _to_bool(
            self.get("contact.strict_normalization", DEFAULT_STRICT_NORMALIZATION)
        )
