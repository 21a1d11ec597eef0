"""
Pydantic schemas for vocabulary index and status responses.
"""

from pydantic import BaseModel, Field


class EntitySummary(BaseModel):
    """One entry of a class or property index."""

    name: str = Field(..., description="Term name", examples=["Course"])
    label: str = Field(..., description="Display label, falls back to the name")
    url: str = Field(
        ...,
        description="Path of the term's endpoint",
        examples=["/api/v1/schema/class/Course"],
    )


class EntityIndexResponse(BaseModel):
    """All classes or all properties, in declaration order."""

    items: list[EntitySummary]
    total: int
