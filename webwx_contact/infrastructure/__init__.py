# 基础设施层
# 配置
from .config.config_manager import ConfigManager
# 网络
from .network.url_stream import UrlStream, open_url_stream
# 错误上报
from .reporting.error_reporter import LoggingErrorReporter

__all__ = [
    # 配置
    "ConfigManager",
    # 网络
    "UrlStream",
    "open_url_stream",
    # 错误上报
    "LoggingErrorReporter",
]
