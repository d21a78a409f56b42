"""Prompt templates for recipe, plan and image generation."""

from smart_chef import messages
from smart_chef.domain.errors import InputValidationError
from smart_chef.domain.plans import PlanGoalId
from smart_chef.domain.profile import UserHealthData
from smart_chef.domain.recipes import Recipe

KITCHEN_STAPLES: tuple[str, ...] = (
    "water",
    "salt",
    "pepper",
    "sugar",
    "oil/ghee",
    "common spices",
)

RECIPE_COUNT = 3
BASELINE_DAILY_CALORIES = 2000

GOAL_GUIDANCE: dict[PlanGoalId, str] = {
    PlanGoalId.WEIGHT_LOSS: (
        "weight loss (a calorie deficit of about 500 kcal below TDEE, high protein)"
    ),
    PlanGoalId.WEIGHT_GAIN: (
        "weight gain (a calorie surplus of about 300-500 kcal above TDEE, "
        "focused on complex carbohydrates and protein)"
    ),
    PlanGoalId.MAINTAIN: "weight maintenance (calories roughly equal to TDEE)",
    PlanGoalId.HEALTHY: (
        "a healthy lifestyle (balanced nutrition without strict calorie "
        "counting, but within normal limits)"
    ),
}


def merge_restrictions(*parts: str | None) -> str:
    """Join non-empty restriction fragments."""
    return ", ".join(part.strip() for part in parts if part and part.strip())


def build_recipe_prompt(ingredients: str, restrictions: str) -> str:
    """Compose the recipe generation request."""
    if not ingredients.strip():
        raise InputValidationError(messages.EMPTY_INGREDIENTS)
    staples = ", ".join(KITCHEN_STAPLES)
    lines = [
        "You are a smart and creative chef. Suggest "
        f"{RECIPE_COUNT} realistic, tasty recipes that rely *exclusively* on "
        f'these available ingredients: "{ingredients}".',
    ]
    if restrictions:
        lines.append(
            f'Strictly follow these dietary restrictions: "{restrictions}".'
        )
    lines.extend(
        [
            "",
            "Strict ingredient rules:",
            "1. Recipes must not contain any main ingredient (meat, vegetables, "
            "cheese or starches) that the user did not list above.",
            "2. You may only assume the kitchen staples every home has, which "
            f"are exactly: ({staples}).",
            "3. If very few ingredients are given, invent ways to prepare them "
            '(for example, with only "potatoes": spiced boiled potatoes, fried '
            "potato wedges, mashed potatoes with oil).",
            "",
            "For each recipe provide:",
            "1. Very detailed preparation steps that a beginner can follow.",
            "2. Ingredient substitutes where useful, favouring common ones.",
            "3. One English keyword (image_keyword) that precisely describes the "
            'dish for an image search (for example "grilled chicken salad", '
            '"lentil soup").',
            "4. A short random unique id.",
            "",
            "Respond with JSON only, following the given schema.",
        ]
    )
    return "\n".join(lines)


def build_weekly_plan_prompt(
    goal: PlanGoalId,
    restrictions: str,
    health_data: UserHealthData | None,
) -> str:
    """Compose the weekly plan request.

    Personal energy calculations are requested only when every health field
    is present; otherwise the prompt falls back to a fixed baseline.
    """
    guidance = GOAL_GUIDANCE[goal]
    lines = [
        "Create a complete weekly meal plan (7 days) tailored to the goal: "
        f'"{guidance}".'
    ]
    if restrictions:
        lines.append(f'Strictly respect these restrictions: "{restrictions}".')
    if health_data is not None and health_data.is_complete:
        lines.extend(_health_block(health_data, guidance))
    else:
        lines.append(
            "No precise data was provided. Use an average need of "
            f"{BASELINE_DAILY_CALORIES} calories as the baseline and adjust it "
            "to the goal."
        )
    lines.extend(
        [
            "",
            "For each day (Saturday to Friday) suggest 3 main meals and one "
            "snack. Meals must be realistic and varied.",
            "",
            "Respond with JSON only matching the requested schema, including "
            "the nutrition_summary calculations if data is available.",
        ]
    )
    return "\n".join(lines)


def build_image_prompt(recipe: Recipe) -> str:
    """Compose a food photography prompt for a recipe."""
    subject = f"{recipe.image_keyword} ({recipe.name})"
    return (
        f"Professional food photography of: {subject}, delicious, "
        "high resolution, 4k, appetizing lighting."
    )


def _health_block(health_data: UserHealthData, guidance: str) -> list[str]:
    """Render the body data section; callers ensure the data is complete."""
    return [
        "",
        "User body data (required for the calculations):",
        f"- Age: {health_data.age} years",
        f"- Weight: {health_data.weight:g} kg",
        f"- Height: {health_data.height:g} cm",
        f"- Gender: {health_data.gender.label}",
        f"- Activity level: {health_data.activity_level.value}",
        "",
        "As a nutrition expert you must:",
        "1. Compute the basal metabolic rate (BMR) with the Mifflin-St Jeor "
        "equation.",
        "2. Compute total daily energy expenditure (TDEE) from the activity "
        "level.",
        f'3. Set the daily calorie target for the goal "{guidance}".',
        "4. Build the weekly plan so the average daily calories stay very "
        "close to that target.",
    ]
