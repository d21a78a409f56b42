"""Local user profile state and persistence."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

from smart_chef.domain.profile import UserHealthData, UserProfile
from smart_chef.domain.recipes import Recipe

_logger = logging.getLogger(__name__)

PROFILE_STORAGE_KEY = "smart_chef_profile_v2"

ProfileListener = Callable[[UserProfile], None]


class KeyValueStore(Protocol):
    """Local string key-value persistence."""

    def get(self, key: str) -> str | None:
        """Return the stored value, if present."""

    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""

    def delete(self, key: str) -> None:
        """Remove a value if present."""


@dataclass
class ProfileStore:
    """Holds the user profile and mirrors every change to storage."""

    storage: KeyValueStore
    key: str = PROFILE_STORAGE_KEY
    profile: UserProfile = field(default_factory=UserProfile)
    _listeners: list[ProfileListener] = field(default_factory=list, repr=False)

    def load(self) -> UserProfile:
        """Restore the profile, discarding corrupt data."""
        raw = self.storage.get(self.key)
        if raw is None:
            self.profile = UserProfile()
            return self.profile
        try:
            self.profile = UserProfile.model_validate_json(raw)
        except ValueError:
            _logger.warning("Discarding corrupt profile stored under %s", self.key)
            self.storage.delete(self.key)
            self.profile = UserProfile()
        return self.profile

    def save(self) -> None:
        """Serialize the whole profile under the storage key."""
        self.storage.set(self.key, self.profile.model_dump_json())

    def subscribe(self, listener: ProfileListener) -> Callable[[], None]:
        """Register a change listener and return its unsubscribe callback."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_saved_restrictions(self, restrictions: str) -> None:
        self._replace(saved_restrictions=restrictions)

    def set_health_data(self, health_data: UserHealthData | None) -> None:
        self._replace(health_data=health_data)

    def set_show_images(self, show_images: bool) -> None:
        self._replace(show_images=show_images)

    def is_favorite(self, recipe_id: str) -> bool:
        return self.profile.find_favorite(recipe_id) is not None

    def toggle_favorite(self, recipe: Recipe) -> bool:
        """Add or remove a favorite; return True when it was added."""
        if self.is_favorite(recipe.id):
            favorites = [fav for fav in self.profile.favorites if fav.id != recipe.id]
            added = False
        else:
            favorites = [*self.profile.favorites, recipe]
            added = True
        self._replace(favorites=favorites)
        return added

    def update_favorite_image(self, recipe_id: str, data_uri: str) -> bool:
        """Store a generated image on a favorite; return False if not favorited."""
        if not self.is_favorite(recipe_id):
            return False
        favorites = [
            fav.model_copy(update={"custom_image": data_uri})
            if fav.id == recipe_id
            else fav
            for fav in self.profile.favorites
        ]
        self._replace(favorites=favorites)
        return True

    def _replace(self, **changes: object) -> None:
        self.profile = self.profile.model_copy(update=changes)
        self.save()
        for listener in list(self._listeners):
            listener(self.profile)
