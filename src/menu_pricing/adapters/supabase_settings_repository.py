"""Supabase repository for user-provided application settings."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from menu_pricing.services.api_keys import SettingsRepository

_API_KEY = "openai_api_key"


@dataclass
class SupabaseSettingsRepository(SettingsRepository):
    """Supabase implementation storing settings as key/value rows."""

    client: Client

    def get_api_key(self) -> str | None:
        """Return the stored API key, if any."""
        response = (
            self.client.table("app_settings")
            .select("value")
            .eq("key", _API_KEY)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get("value")

    def set_api_key(self, api_key: str) -> None:
        """Store the API key."""
        self.client.table("app_settings").upsert(
            {
                "key": _API_KEY,
                "value": api_key,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            }
        ).execute()

    def clear_api_key(self) -> None:
        """Remove the stored API key."""
        self.client.table("app_settings").delete().eq("key", _API_KEY).execute()
