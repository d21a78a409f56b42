"""Public photo lookup used when a recipe has no generated image."""

from dataclasses import dataclass
from typing import Protocol
from urllib.parse import quote

import httpx

from smart_chef.domain.images import ImagePayload
from smart_chef.domain.recipes import Recipe


def placeholder_image_url(base_url: str, recipe: Recipe) -> str:
    """Build a stable photo lookup URL from the recipe keyword and id."""
    keyword = quote(recipe.image_keyword, safe="")
    lock = quote(recipe.id, safe="")
    return f"{base_url.rstrip('/')}/800/600/{keyword},food/all?lock={lock}"


class PlaceholderImageClient(Protocol):
    """Interface for fetching fallback recipe photos."""

    def url_for(self, recipe: Recipe) -> str:
        """Return the fallback photo URL for a recipe."""

    async def fetch(self, recipe: Recipe) -> ImagePayload:
        """Download the fallback photo for a recipe."""


@dataclass
class HttpxPlaceholderImageClient(PlaceholderImageClient):
    """HTTPX-backed placeholder photo client."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxPlaceholderImageClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url,
            http_client=httpx.AsyncClient(follow_redirects=True),
        )

    def url_for(self, recipe: Recipe) -> str:
        return placeholder_image_url(self.base_url, recipe)

    async def fetch(self, recipe: Recipe) -> ImagePayload:
        """Download the photo; HTTP failures propagate as httpx errors."""
        response = await self.http_client.get(self.url_for(recipe), timeout=15)
        response.raise_for_status()
        mime_type = response.headers.get("content-type", "image/jpeg")
        return ImagePayload.from_bytes(
            response.content, mime_type.split(";", 1)[0].strip()
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
