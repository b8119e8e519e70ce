"""
Product entity representing an item in the static catalog.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Gender(str, Enum):
    """Target audience of a product."""

    MEN = "men"
    WOMEN = "women"
    UNISEX = "unisex"


class Product(BaseModel):
    """Immutable catalog product, loaded once and never mutated."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., min_length=1, description="Unique opaque identifier")
    name: str = Field(..., description="Display name")
    brand: str = Field(..., description="Brand name")
    price: float = Field(..., ge=0.0, description="Price, non-negative")
    image_name: str = Field(..., alias="imageName", description="Opaque image reference")
    colors: tuple[str, ...] = Field(..., description="Normalized color names in display order")
    tags: tuple[str, ...] = Field(..., description="Free-form style labels in display order")
    gender: Gender = Field(..., description="men, women or unisex")

    @field_validator('gender', mode='before')
    @classmethod
    def normalize_gender(cls, v):
        """Accept gender in any casing."""
        if isinstance(v, str):
            return v.strip().lower()
        return v
