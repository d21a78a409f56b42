"""Domain models for the persisted user profile."""

from enum import StrEnum

from pydantic import BaseModel, Field, PositiveFloat, PositiveInt, field_validator

from smart_chef.domain.recipes import Recipe


class Gender(StrEnum):
    """Biological sex used by energy equations."""

    MALE = "male"
    FEMALE = "female"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class ActivityLevel(StrEnum):
    """Ordinal physical activity level."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"

    @property
    def label(self) -> str:
        return _ACTIVITY_LABELS[self]


_ACTIVITY_LABELS: dict[ActivityLevel, str] = {
    ActivityLevel.SEDENTARY: "Sedentary (little or no exercise)",
    ActivityLevel.LIGHT: "Light activity (exercise 1-3 days a week)",
    ActivityLevel.MODERATE: "Moderate activity (exercise 3-5 days a week)",
    ActivityLevel.ACTIVE: "Active (exercise 6-7 days a week)",
    ActivityLevel.VERY_ACTIVE: "Very active (hard training every day)",
}


class UserHealthData(BaseModel):
    """Optional body measurements used for calorie targets."""

    age: PositiveInt | None = None
    weight: PositiveFloat | None = None
    height: PositiveFloat | None = None
    gender: Gender | None = None
    activity_level: ActivityLevel | None = None

    @property
    def is_complete(self) -> bool:
        """Return True only when every field is set."""
        return bool(
            self.age
            and self.weight
            and self.height
            and self.gender
            and self.activity_level
        )


class UserProfile(BaseModel):
    """Locally persisted user preferences and favorites."""

    saved_restrictions: str = ""
    favorites: list[Recipe] = Field(default_factory=list)
    health_data: UserHealthData | None = None
    show_images: bool = True

    @field_validator("favorites")
    @classmethod
    def _unique_favorites(cls, favorites: list[Recipe]) -> list[Recipe]:
        """Keep the first favorite for each id."""
        seen: set[str] = set()
        unique = []
        for recipe in favorites:
            if recipe.id not in seen:
                seen.add(recipe.id)
                unique.append(recipe)
        return unique

    def find_favorite(self, recipe_id: str) -> Recipe | None:
        """Return the favorited recipe with the given id, if any."""
        for recipe in self.favorites:
            if recipe.id == recipe_id:
                return recipe
        return None
