from .identity_service import IdentityService
from .ownership_guard import OwnershipGuard
from .product_service import ProductService

__all__ = [
    "IdentityService",
    "OwnershipGuard",
    "ProductService",
]
