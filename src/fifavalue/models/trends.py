"""Row models for the per-year aggregate side tables."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class ValueTrendRow(BaseModel):
    """Mean market value for one position in one year."""

    year: int
    position: str = Field(..., min_length=1)
    mean_value: float = Field(..., ge=0.0)

    model_config = ConfigDict(frozen=True)

    @field_validator("position")
    @classmethod
    def _strip_position(cls, value: str) -> str:
        return value.strip()


class SkillTrendRow(BaseModel):
    """Mean rating for one skill in one year."""

    year: int
    skill: str = Field(..., min_length=1)
    mean_rating: float

    model_config = ConfigDict(frozen=True)

    @field_validator("skill")
    @classmethod
    def _strip_skill(cls, value: str) -> str:
        return value.strip()
