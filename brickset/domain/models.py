"""
Domain models for the Brickset catalog.

Defines the LEGO set record schema aligned with the Brickset JSON export
(camelCase keys). Nullable attributes are modelled as ``Optional`` so that
queries can treat a missing value as absent instead of failing.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class PackagingType(str, Enum):
    """Packaging labels used by Brickset."""

    BOX = "Box"
    BOX_WITH_BACKING_CARD = "Box with backing card"
    BLISTER_PACK = "Blister pack"
    BUCKET = "Bucket"
    CANISTER = "Canister"
    FOIL_PACK = "Foil pack"
    PLASTIC_BOX = "Plastic box"
    POLYBAG = "Polybag"
    TUB = "Tub"
    OTHER = "Other"
    NONE = "None"
    NOT_SPECIFIED = "Not specified"

    @classmethod
    def parse(cls, value: str) -> "PackagingType":
        """
        Resolve a Brickset label ("Blister pack") or member name ("BLISTER_PACK").

        Matching is case-insensitive. Raises ValueError for unknown labels.
        """
        wanted = value.strip()
        for member in cls:
            if member.value.lower() == wanted.lower():
                return member
        member_name = wanted.upper().replace(" ", "_")
        if member_name in cls.__members__:
            return cls[member_name]
        raise ValueError(f"Unknown packaging type '{value}'")

    def __str__(self) -> str:
        return self.value


class Dimensions(BaseModel):
    """Box dimensions in centimetres."""

    height: Optional[float] = None
    width: Optional[float] = None
    depth: Optional[float] = None

    model_config = {"frozen": True}


class LegoSet(BaseModel):
    """
    Representation of a single LEGO set in the Brickset catalog.
    """

    number: Optional[str] = Field(
        None, description="Set number including variant, e.g. '10497-1'."
    )
    name: Optional[str] = Field(None, description="Display name of the set.")
    year: Optional[int] = Field(None, description="Release year.")
    theme: Optional[str] = Field(None, description="Theme name.")
    theme_group: Optional[str] = Field(None, description="Group the theme belongs to.")
    subtheme: Optional[str] = Field(None, description="Subtheme name, when the set has one.")
    category: Optional[str] = Field(None, description="Brickset category (Normal, Gear, ...).")
    packaging_type: PackagingType = Field(
        PackagingType.NOT_SPECIFIED, description="How the set is packaged."
    )
    availability: Optional[str] = Field(None, description="Retail availability.")
    tags: Optional[Tuple[str, ...]] = Field(None, description="Free-form labels.")
    pieces: Optional[int] = Field(None, description="Number of pieces.")
    minifigs: Optional[int] = Field(None, description="Number of minifigures.")
    dimensions: Optional[Dimensions] = Field(None, description="Box dimensions.")
    weight: Optional[float] = Field(None, description="Weight in kilograms.")
    url: Optional[str] = Field(None, description="Brickset page for the set.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "alias_generator": to_camel,
        "extra": "ignore",
    }

    @field_validator("packaging_type", mode="before")
    @classmethod
    def _parse_packaging_type(cls, value: Any) -> Any:
        if value is None:
            return PackagingType.NOT_SPECIFIED
        if isinstance(value, str) and not isinstance(value, PackagingType):
            return PackagingType.parse(value)
        return value


__all__ = ["Dimensions", "LegoSet", "PackagingType"]
