"""Kitchen session: the user-triggered generation actions and their state."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from smart_chef import messages
from smart_chef.domain.errors import (
    InputValidationError,
    SmartChefError,
)
from smart_chef.domain.images import ImagePayload
from smart_chef.domain.plans import PlanGoalId, WeeklyPlan
from smart_chef.domain.recipes import Recipe
from smart_chef.services.gateway import RecipeGateway
from smart_chef.services.profile import ProfileStore
from smart_chef.services.prompts import (
    build_image_prompt,
    build_recipe_prompt,
    build_weekly_plan_prompt,
    merge_restrictions,
)
from smart_chef.services.schemas import recipe_list_schema, weekly_plan_schema

T = TypeVar("T")


class UnknownRecipeError(SmartChefError):
    """The recipe is neither in the current results nor in favorites."""


@dataclass(frozen=True)
class ActionResult(Generic[T]):
    """Outcome of a user action: a value or a failure, plus an optional notice."""

    value: T | None = None
    failure: SmartChefError | None = None
    notice: str | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def error(self) -> str | None:
        return self.failure.user_message if self.failure else None


@dataclass
class KitchenSession:
    """In-memory state of the current user's generated content.

    Actions are independent coroutines; none waits for another.
    """

    gateway: RecipeGateway
    profile_store: ProfileStore
    recipes: list[Recipe] = field(default_factory=list)
    weekly_plan: WeeklyPlan | None = None
    _in_flight: dict[str, int] = field(default_factory=dict, repr=False)

    @property
    def is_loading(self) -> bool:
        return bool(self._in_flight)

    def loading_actions(self) -> list[str]:
        return sorted(self._in_flight)

    async def search_recipes(
        self, ingredients: str, session_restrictions: str = ""
    ) -> ActionResult[list[Recipe]]:
        """Generate recipes from the given ingredients."""
        restrictions = merge_restrictions(
            self.profile_store.profile.saved_restrictions, session_restrictions
        )
        self._start("recipes")
        try:
            prompt = build_recipe_prompt(ingredients, restrictions)
            recipes = await self.gateway.request_recipes(prompt, recipe_list_schema())
        except SmartChefError as exc:
            self.recipes = []
            return ActionResult(failure=exc)
        finally:
            self._finish("recipes")
        self.recipes = recipes
        return ActionResult(value=recipes)

    async def build_weekly_plan(self, goal: PlanGoalId) -> ActionResult[WeeklyPlan]:
        """Generate a weekly plan for the goal using the saved profile."""
        profile = self.profile_store.profile
        notice = None
        if profile.health_data is None or not profile.health_data.is_complete:
            notice = messages.INCOMPLETE_HEALTH_DATA
        self.weekly_plan = None
        self._start("weekly_plan")
        try:
            prompt = build_weekly_plan_prompt(
                goal, profile.saved_restrictions, profile.health_data
            )
            plan = await self.gateway.request_weekly_plan(prompt, weekly_plan_schema())
        except SmartChefError as exc:
            return ActionResult(failure=exc, notice=notice)
        finally:
            self._finish("weekly_plan")
        self.weekly_plan = plan
        return ActionResult(value=plan, notice=notice)

    async def generate_image(self, recipe_id: str) -> ActionResult[Recipe]:
        """Generate a photo for a recipe and cache it on the recipe."""
        self._start("image")
        try:
            recipe = self.find_recipe(recipe_id)
            image = await self.gateway.request_image(build_image_prompt(recipe))
        except SmartChefError as exc:
            return ActionResult(failure=exc)
        finally:
            self._finish("image")
        return ActionResult(value=self._store_image(recipe, image))

    async def edit_image(
        self, recipe_id: str, instruction: str
    ) -> ActionResult[Recipe]:
        """Edit a recipe's generated photo following the instruction."""
        self._start("image_edit")
        try:
            recipe = self.find_recipe(recipe_id)
            if not recipe.custom_image:
                raise InputValidationError(messages.NO_IMAGE_TO_EDIT)
            if not instruction.strip():
                raise InputValidationError(messages.EMPTY_EDIT_INSTRUCTION)
            try:
                source = ImagePayload.from_data_uri(recipe.custom_image)
            except ValueError as exc:
                raise InputValidationError(messages.NO_IMAGE_TO_EDIT) from exc
            image = await self.gateway.request_image(instruction.strip(), source)
        except SmartChefError as exc:
            return ActionResult(failure=exc)
        finally:
            self._finish("image_edit")
        return ActionResult(value=self._store_image(recipe, image))

    def toggle_favorite(self, recipe_id: str) -> ActionResult[bool]:
        """Toggle a recipe's favorite status."""
        try:
            recipe = self.find_recipe(recipe_id)
        except UnknownRecipeError as exc:
            return ActionResult(failure=exc)
        added = self.profile_store.toggle_favorite(recipe)
        notice = (
            messages.favorite_added(recipe.name)
            if added
            else messages.favorite_removed(recipe.name)
        )
        return ActionResult(value=added, notice=notice)

    def find_recipe(self, recipe_id: str) -> Recipe:
        """Look up a recipe in the current results, then in favorites."""
        for recipe in self.recipes:
            if recipe.id == recipe_id:
                return recipe
        favorite = self.profile_store.profile.find_favorite(recipe_id)
        if favorite is None:
            raise UnknownRecipeError(messages.UNKNOWN_RECIPE)
        return favorite

    def _store_image(self, recipe: Recipe, image: ImagePayload) -> Recipe:
        # A newer search may have reused the id for a different dish.
        updated = recipe.model_copy(update={"custom_image": image.data_uri})
        self.recipes = [
            current.model_copy(update={"custom_image": image.data_uri})
            if _same_dish(current, recipe)
            else current
            for current in self.recipes
        ]
        favorite = self.profile_store.profile.find_favorite(recipe.id)
        if favorite is not None and _same_dish(favorite, recipe):
            self.profile_store.update_favorite_image(recipe.id, image.data_uri)
        return updated

    def _start(self, action: str) -> None:
        self._in_flight[action] = self._in_flight.get(action, 0) + 1

    def _finish(self, action: str) -> None:
        remaining = self._in_flight.get(action, 0) - 1
        if remaining > 0:
            self._in_flight[action] = remaining
        else:
            self._in_flight.pop(action, None)


def _same_dish(current: Recipe, recipe: Recipe) -> bool:
    """Compare two recipes ignoring their cached image."""
    exclude = {"custom_image"}
    return current.model_dump(exclude=exclude) == recipe.model_dump(exclude=exclude)
