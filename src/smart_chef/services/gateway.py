"""Gateway to the hosted generative service."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Protocol

from smart_chef import messages
from smart_chef.config import GEMINI_API_KEY_ENV, require_api_key
from smart_chef.domain.errors import GenerationError
from smart_chef.domain.gateway import GatewayResponse
from smart_chef.domain.images import ImagePayload
from smart_chef.domain.plans import WeeklyPlan
from smart_chef.domain.recipes import Recipe
from smart_chef.services.decoder import (
    decode_image,
    decode_recipes,
    decode_weekly_plan,
)

_logger = logging.getLogger(__name__)


class GenerativeClient(Protocol):
    """Interface for a provider of structured text and images."""

    async def generate_structured(
        self, *, model: str, prompt: str, schema: dict[str, object]
    ) -> GatewayResponse:
        """Return a JSON response constrained by the schema."""

    async def generate_image(
        self, *, model: str, prompt: str, source: ImagePayload | None
    ) -> GatewayResponse:
        """Return a response carrying an inline image."""


ClientFactory = Callable[[str], GenerativeClient]


@dataclass
class RecipeGateway:
    """Sends single-attempt requests and decodes their results.

    The provider client is built on first use, after the credential check,
    so a missing key fails before any network attempt.
    """

    client_factory: ClientFactory
    api_key: str
    text_model: str
    image_model: str
    api_key_env: str = GEMINI_API_KEY_ENV
    _client: GenerativeClient | None = field(default=None, init=False, repr=False)

    async def request_recipes(
        self, prompt: str, schema: dict[str, object]
    ) -> list[Recipe]:
        """Request a recipe list."""
        response = await self._call(
            "recipes",
            messages.RECIPES_FAILED,
            lambda client: client.generate_structured(
                model=self.text_model, prompt=prompt, schema=schema
            ),
        )
        recipes = decode_recipes(response)
        _logger.info("Generated recipes: count=%s", len(recipes))
        return recipes

    async def request_weekly_plan(
        self, prompt: str, schema: dict[str, object]
    ) -> WeeklyPlan:
        """Request a weekly meal plan."""
        response = await self._call(
            "weekly plan",
            messages.PLAN_FAILED,
            lambda client: client.generate_structured(
                model=self.text_model, prompt=prompt, schema=schema
            ),
        )
        plan = decode_weekly_plan(response)
        _logger.info("Generated weekly plan: days=%s", len(plan.days))
        return plan

    async def request_image(
        self, instruction: str, source: ImagePayload | None = None
    ) -> ImagePayload:
        """Generate an image, or edit ``source`` when it is given."""
        if source is None:
            operation, failure_message = "image", messages.IMAGE_FAILED
            missing_message = messages.NO_IMAGE_GENERATED
        else:
            operation, failure_message = "image edit", messages.IMAGE_EDIT_FAILED
            missing_message = messages.NO_IMAGE_EDITED
        response = await self._call(
            operation,
            failure_message,
            lambda client: client.generate_image(
                model=self.image_model, prompt=instruction, source=source
            ),
        )
        image = decode_image(response, missing_message)
        _logger.info("Generated %s: mime_type=%s", operation, image.mime_type)
        return image

    async def _call(
        self,
        operation: str,
        failure_message: str,
        send: Callable[[GenerativeClient], Awaitable[GatewayResponse]],
    ) -> GatewayResponse:
        api_key = require_api_key(self.api_key, self.api_key_env)
        try:
            if self._client is None:
                self._client = self.client_factory(api_key)
            return await send(self._client)
        except Exception as exc:
            _logger.exception("Generative %s request failed", operation)
            raise GenerationError(failure_message) from exc
