"""Domain models for generated recipes."""

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator

from smart_chef.domain.images import ImagePayload


class Difficulty(StrEnum):
    """Preparation difficulty of a recipe."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class IngredientSubstitute(BaseModel):
    """Suggested replacement for a recipe ingredient."""

    original: str
    replacement: str


class Recipe(BaseModel):
    """Recipe produced by the generative service."""

    id: str = Field(min_length=1)
    name: str
    image_keyword: str
    description: str
    ingredients: list[str] = Field(min_length=1)
    substitutes: list[IngredientSubstitute] | None = None
    instructions: list[str] = Field(min_length=1)
    time: str
    difficulty: Difficulty
    calories: int | None = Field(default=None, ge=0)
    custom_image: str | None = None

    @field_validator("custom_image")
    @classmethod
    def _require_data_uri(cls, value: str | None) -> str | None:
        if value is not None:
            ImagePayload.from_data_uri(value).to_bytes()
        return value
