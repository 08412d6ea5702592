"""Pydantic DTOs for identifier issuance and lookup."""

from pydantic import BaseModel, Field


class IdentityResponse(BaseModel):
    """Schema returned when a client reads an identity."""

    id: str = Field(..., examples=["8f14e45f-ceea-467a-9b36-0c1f6e6a7c0b"])
    username: str = Field(..., examples=["alice"])

    model_config = {"from_attributes": True}
