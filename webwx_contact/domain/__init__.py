"""
领域层 - 联系人核心业务逻辑，与具体 puppet 实现无关
"""

from . import entities, exceptions, repositories, services, value_objects

__all__ = [
    "entities",
    "exceptions",
    "repositories",
    "services",
    "value_objects",
]
