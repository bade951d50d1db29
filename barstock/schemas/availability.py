from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


Availability = Literal["full", "partial", "none"]

AVAILABILITY_RANK: dict[str, int] = {"full": 3, "partial": 2, "none": 1}


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class InventoryItem(_Record):
    id: str | None = Field(default=None, alias="_id")
    name: str | None = None
    volume_remaining: float | None = Field(default=None, alias="volumeRemaining")
    volume_total: float | None = Field(default=None, alias="volumeTotal")
    unit: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, v):
        return None if v is None else str(v)


class IngredientRequirement(_Record):
    name: str | None = None
    measure: str | None = None


class Recipe(_Record):
    id: str | None = Field(default=None, alias="_id")
    name: str | None = None
    category: str | None = None
    thumbnail_url: str | None = Field(default=None, alias="thumbnailUrl")
    ingredients: tuple[IngredientRequirement, ...] = ()

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, v):
        return None if v is None else str(v)

    @field_validator("ingredients", mode="before")
    @classmethod
    def _ingredients(cls, v):
        return () if v is None else v


class AvailabilityReport(BaseModel):
    """Presence-only availability of one recipe against an inventory snapshot.

    ``recipe`` is the caller's object, not a copy.
    """

    model_config = ConfigDict(frozen=True)

    recipe: Recipe
    availability: Availability
    missing_ingredients: tuple[str | None, ...] = ()
    available_ingredients: tuple[str | None, ...] = ()
    missing_count: int = Field(ge=0)
    total_ingredients: int = Field(ge=0)
    percentage_available: int = Field(ge=0, le=100)

    @property
    def rank_key(self) -> tuple[int, int]:
        return AVAILABILITY_RANK[self.availability], self.percentage_available


class AnalysisSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    fully_makeable: int = 0
    partially_makeable: int = 0
    not_makeable: int = 0

    @property
    def total(self) -> int:
        return self.fully_makeable + self.partially_makeable + self.not_makeable
