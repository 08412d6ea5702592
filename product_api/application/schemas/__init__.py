from .identity import IdentityResponse
from .product import ProductCreate, ProductUpdate, ProductResponse

__all__ = [
    "IdentityResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
]
