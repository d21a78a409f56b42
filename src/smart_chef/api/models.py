"""Pydantic models for API payloads."""

from pydantic import BaseModel

from smart_chef.domain.plans import PlanGoalId, WeeklyPlan
from smart_chef.domain.recipes import Recipe


class RecipeSearchRequest(BaseModel):
    """Ingredients and per-search restrictions."""

    ingredients: str
    restrictions: str = ""


class WeeklyPlanRequest(BaseModel):
    """Goal to plan the week for."""

    goal: PlanGoalId = PlanGoalId.HEALTHY


class ImageEditRequest(BaseModel):
    """Instruction describing how to change a recipe image."""

    instruction: str


class RestrictionsUpdate(BaseModel):
    restrictions: str


class ShowImagesUpdate(BaseModel):
    show_images: bool


class RecipeView(Recipe):
    """Recipe with the image URL to display, if any."""

    image_url: str | None = None
    is_favorite: bool = False


class WeeklyPlanResponse(BaseModel):
    plan: WeeklyPlan
    notice: str | None = None


class FavoriteToggleResponse(BaseModel):
    favorite: bool
    message: str
