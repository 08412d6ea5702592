from .identity import AuthenticatedOwner, Identity
from .product import Product

__all__ = [
    "AuthenticatedOwner",
    "Identity",
    "Product",
]
