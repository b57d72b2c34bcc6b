"""Resolution of the text-generation API key."""

from dataclasses import dataclass
from typing import Literal, Protocol

KeySource = Literal["user", "environment"]


class SettingsRepository(Protocol):
    """Persistence interface for user-provided application settings."""

    def get_api_key(self) -> str | None:
        """Return the stored API key, if any."""

    def set_api_key(self, api_key: str) -> None:
        """Store the API key."""

    def clear_api_key(self) -> None:
        """Remove the stored API key."""


@dataclass(frozen=True)
class ResolvedApiKey:
    """An API key together with where it came from."""

    value: str
    source: KeySource


@dataclass
class ApiKeyService:
    """Resolves the API key: user value first, then the environment default."""

    repository: SettingsRepository
    default_key: str | None = None

    def resolve(self) -> ResolvedApiKey | None:
        """Return the effective key, or None when no key is configured."""
        user_key = (self.repository.get_api_key() or "").strip()
        if user_key:
            return ResolvedApiKey(value=user_key, source="user")
        env_key = (self.default_key or "").strip()
        if env_key:
            return ResolvedApiKey(value=env_key, source="environment")
        return None

    def set_user_key(self, api_key: str) -> None:
        """Persist a user-provided key; blank values clear it."""
        cleaned = api_key.strip()
        if not cleaned:
            self.repository.clear_api_key()
            return
        self.repository.set_api_key(cleaned)

    def clear_user_key(self) -> None:
        """Forget the user-provided key."""
        self.repository.clear_api_key()
