from .base import Base
from .session import Database, build_database, get_db_session
from .models import ProductModel

__all__ = [
    "Base",
    "Database",
    "build_database",
    "get_db_session",
    "ProductModel",
]
