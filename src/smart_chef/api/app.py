"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict
from http import HTTPStatus
from typing import TypeVar, cast

import httpx
from fastapi import FastAPI, HTTPException, Request, Response, status

from smart_chef.api.models import (
    FavoriteToggleResponse,
    ImageEditRequest,
    RecipeSearchRequest,
    RecipeView,
    RestrictionsUpdate,
    ShowImagesUpdate,
    WeeklyPlanRequest,
    WeeklyPlanResponse,
)
from smart_chef.app_logging import configure_logging
from smart_chef.containers import AppContainer
from smart_chef.domain.errors import (
    ConfigurationError,
    InputValidationError,
    SmartChefError,
)
from smart_chef.domain.images import ImagePayload
from smart_chef.domain.plans import PLAN_GOALS
from smart_chef.domain.profile import UserHealthData, UserProfile
from smart_chef.domain.recipes import Recipe
from smart_chef.services.kitchen import ActionResult, UnknownRecipeError

T = TypeVar("T")


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/goals")
    async def goals() -> dict[str, object]:
        """Return the static planning goals."""
        return {"goals": [asdict(goal) for goal in PLAN_GOALS]}

    @app.post("/recipes")
    async def search_recipes(
        payload: RecipeSearchRequest, request: Request
    ) -> dict[str, object]:
        """Generate recipes from the submitted ingredients."""
        state_container: AppContainer = request.app.state.container
        result = await state_container.kitchen.search_recipes(
            payload.ingredients, payload.restrictions
        )
        recipes = _unwrap(result)
        return {"recipes": [_recipe_view(state_container, r) for r in recipes]}

    @app.post("/plans/weekly")
    async def build_weekly_plan(
        payload: WeeklyPlanRequest, request: Request
    ) -> WeeklyPlanResponse:
        """Generate a weekly plan for the chosen goal."""
        state_container: AppContainer = request.app.state.container
        result = await state_container.kitchen.build_weekly_plan(payload.goal)
        plan = _unwrap(result)
        return WeeklyPlanResponse(plan=plan, notice=result.notice)

    @app.post("/recipes/{recipe_id}/image")
    async def generate_image(recipe_id: str, request: Request) -> RecipeView:
        """Generate a photo for a recipe."""
        state_container: AppContainer = request.app.state.container
        result = await state_container.kitchen.generate_image(recipe_id)
        return _recipe_view(state_container, _unwrap(result))

    @app.post("/recipes/{recipe_id}/image/edit")
    async def edit_image(
        recipe_id: str, payload: ImageEditRequest, request: Request
    ) -> RecipeView:
        """Edit a recipe's generated photo."""
        state_container: AppContainer = request.app.state.container
        result = await state_container.kitchen.edit_image(
            recipe_id, payload.instruction
        )
        return _recipe_view(state_container, _unwrap(result))

    @app.get("/recipes/{recipe_id}/image")
    async def recipe_image(recipe_id: str, request: Request) -> Response:
        """Return the generated photo, else the placeholder photo."""
        state_container: AppContainer = request.app.state.container
        try:
            recipe = state_container.kitchen.find_recipe(recipe_id)
        except UnknownRecipeError as exc:
            raise HTTPException(status.HTTP_404_NOT_FOUND, exc.user_message) from exc
        if recipe.custom_image:
            image = ImagePayload.from_data_uri(recipe.custom_image)
        elif state_container.profile_store.profile.show_images:
            try:
                image = await state_container.placeholder_image_client.fetch(recipe)
            except httpx.HTTPError as exc:
                logger.warning(
                    "Placeholder image unavailable for %s: %s", recipe.id, exc
                )
                raise HTTPException(status.HTTP_404_NOT_FOUND) from exc
        else:
            raise HTTPException(status.HTTP_404_NOT_FOUND)
        return Response(content=image.to_bytes(), media_type=image.mime_type)

    @app.get("/profile")
    async def get_profile(request: Request) -> UserProfile:
        """Return the stored profile."""
        state_container: AppContainer = request.app.state.container
        return state_container.profile_store.profile

    @app.put("/profile/restrictions")
    async def update_restrictions(
        payload: RestrictionsUpdate, request: Request
    ) -> UserProfile:
        """Replace the permanent dietary restrictions."""
        store = request.app.state.container.profile_store
        store.set_saved_restrictions(payload.restrictions)
        return store.profile

    @app.put("/profile/health")
    async def update_health(payload: UserHealthData, request: Request) -> UserProfile:
        """Replace the stored health data."""
        store = request.app.state.container.profile_store
        store.set_health_data(payload)
        return store.profile

    @app.put("/profile/show-images")
    async def update_show_images(
        payload: ShowImagesUpdate, request: Request
    ) -> UserProfile:
        """Toggle image display."""
        store = request.app.state.container.profile_store
        store.set_show_images(payload.show_images)
        return store.profile

    @app.get("/favorites")
    async def favorites(request: Request) -> dict[str, object]:
        """Return the favorited recipes."""
        state_container: AppContainer = request.app.state.container
        profile = state_container.profile_store.profile
        return {
            "favorites": [_recipe_view(state_container, r) for r in profile.favorites]
        }

    @app.post("/favorites/{recipe_id}")
    async def toggle_favorite(
        recipe_id: str, request: Request
    ) -> FavoriteToggleResponse:
        """Add the recipe to favorites or remove it."""
        state_container: AppContainer = request.app.state.container
        result = state_container.kitchen.toggle_favorite(recipe_id)
        added = _unwrap(result)
        return FavoriteToggleResponse(
            favorite=bool(added), message=result.notice or ""
        )

    return app


def _unwrap(result: ActionResult[T]) -> T:
    """Return the action value or raise the matching HTTP error."""
    if result.failure is not None:
        raise HTTPException(
            status_code=_status_for(result.failure),
            detail=result.failure.user_message,
        )
    return cast(T, result.value)


def _status_for(failure: SmartChefError) -> int:
    if isinstance(failure, ConfigurationError):
        return HTTPStatus.SERVICE_UNAVAILABLE
    if isinstance(failure, InputValidationError):
        return HTTPStatus.UNPROCESSABLE_ENTITY
    if isinstance(failure, UnknownRecipeError):
        return HTTPStatus.NOT_FOUND
    return HTTPStatus.BAD_GATEWAY


def _recipe_view(container: AppContainer, recipe: Recipe) -> RecipeView:
    """Attach the display image URL to a recipe."""
    profile = container.profile_store.profile
    image_url = None
    if recipe.custom_image:
        image_url = recipe.custom_image
    elif profile.show_images:
        image_url = container.placeholder_image_client.url_for(recipe)
    return RecipeView(
        **recipe.model_dump(),
        image_url=image_url,
        is_favorite=profile.find_favorite(recipe.id) is not None,
    )
