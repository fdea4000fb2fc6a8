"""
领域服务 - 联系人业务逻辑服务

该模块导出封装联系人核心业务逻辑的领域服务，与具体 puppet 实现无关。
"""

from .contact_normalizer import ContactNormalizer, normalize_contact

__all__ = [
    "ContactNormalizer",
    "normalize_contact",
]
