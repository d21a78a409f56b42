"""Shared test fixtures."""

import json
from dataclasses import dataclass, field

import pytest

from smart_chef.adapters.placeholder_image_client import (
    PlaceholderImageClient,
    placeholder_image_url,
)
from smart_chef.config import Settings
from smart_chef.containers import AppContainer
from smart_chef.domain.gateway import GatewayResponse, InlineData, ResponsePart
from smart_chef.domain.images import ImagePayload
from smart_chef.domain.recipes import Recipe
from smart_chef.services.gateway import GenerativeClient, RecipeGateway
from smart_chef.services.kitchen import KitchenSession
from smart_chef.services.profile import KeyValueStore, ProfileStore

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-png"


def recipe_payload(recipe_id: str = "r1", name: str = "Chicken rice") -> dict:
    return {
        "id": recipe_id,
        "name": name,
        "image_keyword": "chicken rice",
        "description": "Rice cooked with chicken and tomato",
        "ingredients": ["200g chicken", "1 cup rice", "2 tomatoes"],
        "substitutes": [{"original": "rice", "replacement": "bulgur"}],
        "instructions": ["Brown the chicken", "Add rice and tomato", "Simmer"],
        "time": "40 minutes",
        "difficulty": "easy",
        "calories": 650,
    }


def make_recipe(recipe_id: str = "r1", name: str = "Chicken rice") -> Recipe:
    return Recipe.model_validate(recipe_payload(recipe_id, name))


def plan_payload(with_summary: bool = True) -> dict:
    days = [
        {
            "day": day,
            "meals": [
                {
                    "type": "breakfast",
                    "name": "Oats",
                    "description": "Oats with milk",
                    "calories": 350,
                },
                {"type": "lunch", "name": "Chicken salad", "calories": 550},
                {"type": "dinner", "name": "Lentil soup", "calories": 450},
                {"type": "snack", "name": "Apple", "calories": 95},
            ],
            "total_calories": 1445,
        }
        for day in (
            "Saturday",
            "Sunday",
            "Monday",
            "Tuesday",
            "Wednesday",
            "Thursday",
            "Friday",
        )
    ]
    payload: dict = {"days": days}
    if with_summary:
        payload["nutrition_summary"] = {
            "bmr": 1699,
            "tdee": 2634,
            "target_daily_calories": 2134,
            "macro_advice": "Keep protein high and carbs moderate.",
        }
    return payload


def image_response(data: bytes = PNG_BYTES) -> GatewayResponse:
    return GatewayResponse(
        parts=[
            ResponsePart(text="Here is your dish"),
            ResponsePart(
                inline_data=InlineData(
                    mime_type="image/png",
                    data=ImagePayload.from_bytes(data, "image/png").data,
                )
            ),
        ]
    )


@dataclass
class FakeGenerativeClient(GenerativeClient):
    """Fake generative client returning canned responses."""

    structured: GatewayResponse = field(
        default_factory=lambda: GatewayResponse(
            text=json.dumps([recipe_payload("r1"), recipe_payload("r2", "Tomato rice")])
        )
    )
    image: GatewayResponse = field(default_factory=image_response)
    error: Exception | None = None
    structured_calls: list[dict[str, object]] = field(default_factory=list)
    image_calls: list[dict[str, object]] = field(default_factory=list)

    async def generate_structured(
        self, *, model: str, prompt: str, schema: dict[str, object]
    ) -> GatewayResponse:
        self.structured_calls.append({"model": model, "prompt": prompt, "schema": schema})
        if self.error:
            raise self.error
        return self.structured

    async def generate_image(
        self, *, model: str, prompt: str, source: ImagePayload | None
    ) -> GatewayResponse:
        self.image_calls.append({"model": model, "prompt": prompt, "source": source})
        if self.error:
            raise self.error
        return self.image


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """In-memory key-value store for tests."""

    entries: dict[str, str] = field(default_factory=dict)
    writes: int = 0

    def get(self, key: str) -> str | None:
        return self.entries.get(key)

    def set(self, key: str, value: str) -> None:
        self.writes += 1
        self.entries[key] = value

    def delete(self, key: str) -> None:
        self.entries.pop(key, None)


@dataclass
class FakePlaceholderImageClient(PlaceholderImageClient):
    """Fake placeholder client that returns static bytes or fails."""

    error: Exception | None = None
    content: bytes = b"\xff\xd8\xffplaceholder"

    def url_for(self, recipe: Recipe) -> str:
        return placeholder_image_url("https://photos.test", recipe)

    async def fetch(self, recipe: Recipe) -> ImagePayload:
        if self.error:
            raise self.error
        return ImagePayload.from_bytes(self.content, "image/jpeg")


def make_gateway(
    client: FakeGenerativeClient, api_key: str = "gemini-key"
) -> RecipeGateway:
    return RecipeGateway(
        client_factory=lambda _key: client,
        api_key=api_key,
        text_model="text-model",
        image_model="image-model",
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(gemini_api_key="gemini-key", profile_path="unused.json")


@pytest.fixture
def generative_client() -> FakeGenerativeClient:
    return FakeGenerativeClient()


@pytest.fixture
def key_value_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def profile_store(key_value_store: InMemoryKeyValueStore) -> ProfileStore:
    store = ProfileStore(key_value_store)
    store.load()
    return store


@pytest.fixture
def kitchen(
    generative_client: FakeGenerativeClient, profile_store: ProfileStore
) -> KitchenSession:
    return KitchenSession(
        gateway=make_gateway(generative_client), profile_store=profile_store
    )


@pytest.fixture
def placeholder_client() -> FakePlaceholderImageClient:
    return FakePlaceholderImageClient()


@pytest.fixture
def container(
    settings: Settings,
    kitchen: KitchenSession,
    placeholder_client: FakePlaceholderImageClient,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        gateway=kitchen.gateway,
        profile_store=kitchen.profile_store,
        kitchen=kitchen,
        placeholder_image_client=placeholder_client,
        close_resources=close_resources,
    )
