"""SQLAlchemy ORM model for the Product entity."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from product_api.infrastructure.database.base import Base


class ProductModel(Base):
    """ORM model — maps to the 'product' table, one row per owner."""

    __tablename__ = "product"

    owner: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<ProductModel(owner={self.owner}, name='{self.name}')>"
