"""Tests for prompt composition."""

import pytest

from smart_chef.domain.errors import InputValidationError
from smart_chef.domain.plans import PlanGoalId
from smart_chef.domain.profile import ActivityLevel, Gender, UserHealthData
from smart_chef.services.prompts import (
    GOAL_GUIDANCE,
    KITCHEN_STAPLES,
    build_image_prompt,
    build_recipe_prompt,
    build_weekly_plan_prompt,
    merge_restrictions,
)
from tests.conftest import make_recipe

COMPLETE_HEALTH = UserHealthData(
    age=30,
    weight=75,
    height=170,
    gender=Gender.MALE,
    activity_level=ActivityLevel.MODERATE,
)


def test_merge_restrictions_drops_empty_parts() -> None:
    assert merge_restrictions("no nuts", "", "  ", None, " vegan ") == "no nuts, vegan"
    assert merge_restrictions("", "") == ""


def test_recipe_prompt_embeds_ingredients_and_staples() -> None:
    prompt = build_recipe_prompt("chicken, rice, tomato", "no dairy")

    assert '"chicken, rice, tomato"' in prompt
    assert '"no dairy"' in prompt
    for staple in KITCHEN_STAPLES:
        assert staple in prompt
    assert "3 realistic" in prompt


def test_recipe_prompt_omits_empty_restrictions() -> None:
    prompt = build_recipe_prompt("potatoes", "")

    assert "dietary restrictions" not in prompt


@pytest.mark.parametrize("ingredients", ["", "   ", "\n"])
def test_recipe_prompt_rejects_blank_ingredients(ingredients: str) -> None:
    with pytest.raises(InputValidationError):
        build_recipe_prompt(ingredients, "")


def test_plan_prompt_uses_health_data_when_complete() -> None:
    prompt = build_weekly_plan_prompt(
        PlanGoalId.WEIGHT_LOSS, "halal", COMPLETE_HEALTH
    )

    assert "Mifflin-St Jeor" in prompt
    assert "- Age: 30 years" in prompt
    assert "- Weight: 75 kg" in prompt
    assert "- Gender: Male" in prompt
    assert "moderate" in prompt
    assert GOAL_GUIDANCE[PlanGoalId.WEIGHT_LOSS] in prompt
    assert '"halal"' in prompt
    assert "2000" not in prompt


@pytest.mark.parametrize(
    "missing", ["age", "weight", "height", "gender", "activity_level"]
)
def test_plan_prompt_falls_back_when_any_field_missing(missing: str) -> None:
    health = COMPLETE_HEALTH.model_copy(update={missing: None})

    prompt = build_weekly_plan_prompt(PlanGoalId.MAINTAIN, "", health)

    assert "2000 calories" in prompt
    assert "Mifflin-St Jeor" not in prompt


def test_plan_prompt_falls_back_without_health_data() -> None:
    prompt = build_weekly_plan_prompt(PlanGoalId.HEALTHY, "", None)

    assert "2000 calories" in prompt
    assert "restrictions" not in prompt


def test_image_prompt_uses_keyword_and_name() -> None:
    prompt = build_image_prompt(make_recipe())

    assert "chicken rice (Chicken rice)" in prompt
    assert prompt.startswith("Professional food photography")
