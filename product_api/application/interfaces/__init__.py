from .identity_registry import IdentityRegistry
from .product_repository import ProductRepository

__all__ = [
    "IdentityRegistry",
    "ProductRepository",
]
