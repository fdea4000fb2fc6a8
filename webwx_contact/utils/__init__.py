"""
工具模块 - 日志与文本清洗
"""

from .logger import logger
from .text import plain_text

__all__ = ["logger", "plain_text"]
