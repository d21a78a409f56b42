"""Domain models for weekly meal plans."""

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, Field


class PlanGoalId(StrEnum):
    """Identifiers of the supported planning goals."""

    WEIGHT_LOSS = "weight_loss"
    WEIGHT_GAIN = "weight_gain"
    MAINTAIN = "maintain"
    HEALTHY = "healthy"


@dataclass(frozen=True)
class PlanGoal:
    """Static description of a planning goal."""

    id: PlanGoalId
    label: str
    icon: str
    description: str


PLAN_GOALS: tuple[PlanGoal, ...] = (
    PlanGoal(
        id=PlanGoalId.WEIGHT_LOSS,
        label="Lose weight",
        icon="Scale",
        description="A calorie-counted plan to reach your ideal weight",
    ),
    PlanGoal(
        id=PlanGoalId.WEIGHT_GAIN,
        label="Gain weight and build muscle",
        icon="TrendingUp",
        description="Meals rich in protein and healthy energy",
    ),
    PlanGoal(
        id=PlanGoalId.HEALTHY,
        label="Healthy, balanced eating",
        icon="Apple",
        description="Focus on vegetables, fruit and whole grains",
    ),
    PlanGoal(
        id=PlanGoalId.MAINTAIN,
        label="Maintain weight",
        icon="Activity",
        description="Balance the energy you eat with the energy you spend",
    ),
)


class MealType(StrEnum):
    """Slot of a meal within a day."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class MealSummary(BaseModel):
    """Single meal suggestion inside a day plan."""

    type: MealType
    name: str
    description: str = ""
    calories: int = Field(ge=0)


class DayPlan(BaseModel):
    """Meals suggested for one day."""

    day: str
    meals: list[MealSummary]
    total_calories: int = Field(ge=0)


class NutritionSummary(BaseModel):
    """Energy calculations the plan was built around."""

    bmr: int | None = None
    tdee: int | None = None
    target_daily_calories: int
    macro_advice: str


class WeeklyPlan(BaseModel):
    """Seven-day meal plan."""

    nutrition_summary: NutritionSummary | None = None
    days: list[DayPlan] = Field(min_length=7, max_length=7)
