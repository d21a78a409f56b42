"""Decoding of raw generative responses into domain models."""

import json
import logging
import uuid

from pydantic import TypeAdapter, ValidationError

from smart_chef import messages
from smart_chef.domain.errors import DecodeError, DecodeErrorKind
from smart_chef.domain.gateway import GatewayResponse
from smart_chef.domain.images import ImagePayload
from smart_chef.domain.plans import WeeklyPlan
from smart_chef.domain.recipes import Recipe

_logger = logging.getLogger(__name__)

_RECIPE_LIST = TypeAdapter(list[Recipe])


def parse_json(response: GatewayResponse, user_message: str) -> object:
    """Parse the response text as JSON, unwrapping provider envelopes."""
    text = (response.text or "").strip()
    if not text:
        raise DecodeError(DecodeErrorKind.EMPTY_RESPONSE, user_message)
    try:
        payload = json.loads(text)
    except ValueError as exc:
        raise DecodeError(DecodeErrorKind.MALFORMED_JSON, user_message) from exc
    if response.envelope_key and isinstance(payload, dict):
        return payload.get(response.envelope_key)
    return payload


def decode_recipes(response: GatewayResponse) -> list[Recipe]:
    """Decode a non-empty list of recipes with unique ids."""
    payload = parse_json(response, messages.RECIPES_INVALID)
    if isinstance(payload, list) and not payload:
        raise DecodeError(DecodeErrorKind.EMPTY_RESULT, messages.RECIPES_INVALID)
    try:
        recipes = _RECIPE_LIST.validate_python(payload)
    except ValidationError as exc:
        raise DecodeError(
            DecodeErrorKind.INCOMPLETE_RESPONSE, messages.RECIPES_INVALID
        ) from exc
    return _ensure_unique_ids(recipes)


def decode_weekly_plan(response: GatewayResponse) -> WeeklyPlan:
    """Decode a weekly plan object."""
    payload = parse_json(response, messages.PLAN_INVALID)
    try:
        return WeeklyPlan.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(
            DecodeErrorKind.INCOMPLETE_RESPONSE, messages.PLAN_INVALID
        ) from exc


def decode_image(
    response: GatewayResponse, user_message: str = messages.NO_IMAGE_GENERATED
) -> ImagePayload:
    """Return the first inline data part as an image payload."""
    for part in response.parts:
        if part.inline_data is not None and part.inline_data.data:
            return ImagePayload(
                mime_type=part.inline_data.mime_type,
                data=part.inline_data.data,
            )
    raise DecodeError(DecodeErrorKind.NO_IMAGE_RETURNED, user_message)


def _ensure_unique_ids(recipes: list[Recipe]) -> list[Recipe]:
    seen: set[str] = set()
    unique: list[Recipe] = []
    for recipe in recipes:
        if recipe.id in seen:
            replacement = uuid.uuid4().hex[:8]
            _logger.warning(
                "Duplicate recipe id %s replaced with %s", recipe.id, replacement
            )
            recipe = recipe.model_copy(update={"id": replacement})
        seen.add(recipe.id)
        unique.append(recipe)
    return unique
