"""User-facing messages."""

EMPTY_INGREDIENTS = "Please enter some ingredients."
EMPTY_EDIT_INSTRUCTION = "Please describe how the image should change."
NO_IMAGE_TO_EDIT = "Generate an image for this recipe before editing it."
UNKNOWN_RECIPE = "Recipe not found."

RECIPES_FAILED = (
    "Something went wrong while generating recipes. "
    "Check your internet connection and try again."
)
RECIPES_INVALID = "No valid recipe data was received from the model."
PLAN_FAILED = "The weekly plan could not be created right now. Try again later."
PLAN_INVALID = "No valid plan data was received from the model."
IMAGE_FAILED = "Image generation failed, please try again later."
IMAGE_EDIT_FAILED = "Image editing failed, please try again later."
NO_IMAGE_GENERATED = "No image was generated."
NO_IMAGE_EDITED = "The image was not edited."

INCOMPLETE_HEALTH_DATA = (
    "Complete your health data in the profile for a more accurate plan."
)


def favorite_added(name: str) -> str:
    return f'Saved "{name}" to favorites'


def favorite_removed(name: str) -> str:
    return f'Removed "{name}" from favorites'


def missing_api_key(env_var: str) -> str:
    return f"Set {env_var} in .env before using generation features."
