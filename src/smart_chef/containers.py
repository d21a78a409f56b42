"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from smart_chef.adapters.gemini_client import GeminiGenerativeClient
from smart_chef.adapters.json_file_store import JsonFileKeyValueStore
from smart_chef.adapters.openai_client import OpenAIGenerativeClient
from smart_chef.adapters.placeholder_image_client import (
    HttpxPlaceholderImageClient,
    PlaceholderImageClient,
)
from smart_chef.config import Settings
from smart_chef.services.gateway import ClientFactory, RecipeGateway
from smart_chef.services.kitchen import KitchenSession
from smart_chef.services.profile import ProfileStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    gateway: RecipeGateway
    profile_store: ProfileStore
    kitchen: KitchenSession
    placeholder_image_client: PlaceholderImageClient
    close_resources: Callable[[], Awaitable[None]]


def build_gateway(settings: Settings) -> RecipeGateway:
    """Create the gateway for the configured provider."""
    if settings.ai_provider == "openai":

        def openai_factory(api_key: str) -> OpenAIGenerativeClient:
            return OpenAIGenerativeClient.create(
                api_key,
                reasoning_effort=settings.openai_reasoning_effort,
                store=settings.openai_store,
            )

        factory: ClientFactory = openai_factory
        text_model = settings.openai_model
        image_model = settings.openai_image_model
    else:
        factory = GeminiGenerativeClient.create
        text_model = settings.gemini_text_model
        image_model = settings.gemini_image_model
    return RecipeGateway(
        client_factory=factory,
        api_key=settings.active_api_key(),
        api_key_env=settings.active_api_key_env(),
        text_model=text_model,
        image_model=image_model,
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    gateway = build_gateway(resolved_settings)
    profile_store = ProfileStore(
        JsonFileKeyValueStore.create(resolved_settings.profile_path)
    )
    profile_store.load()
    kitchen = KitchenSession(gateway=gateway, profile_store=profile_store)
    placeholder_client = HttpxPlaceholderImageClient.create(
        resolved_settings.placeholder_image_base_url
    )

    async def close_resources() -> None:
        await placeholder_client.close()

    return AppContainer(
        settings=resolved_settings,
        gateway=gateway,
        profile_store=profile_store,
        kitchen=kitchen,
        placeholder_image_client=placeholder_client,
        close_resources=close_resources,
    )
