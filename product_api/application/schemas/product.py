"""Pydantic DTOs (Data Transfer Objects) for the Product feature."""

from pydantic import BaseModel, Field


class ProductCreate(BaseModel):
    """Schema for creating the caller's product."""

    name: str = Field(..., examples=["Widget"])
    description: str = Field(..., examples=["A widget"])


class ProductUpdate(BaseModel):
    """Schema for updating the caller's product — all fields optional."""

    name: str | None = None
    description: str | None = None


class ProductResponse(BaseModel):
    """Schema returned to the client."""

    name: str
    description: str

    model_config = {"from_attributes": True}
