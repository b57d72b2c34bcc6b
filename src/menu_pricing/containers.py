"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from menu_pricing.adapters.openai_narrative_client import OpenAINarrativeClient
from menu_pricing.adapters.supabase_ingredient_repository import (
    SupabaseIngredientRepository,
)
from menu_pricing.adapters.supabase_product_repository import (
    SupabaseProductRepository,
)
from menu_pricing.adapters.supabase_settings_repository import (
    SupabaseSettingsRepository,
)
from menu_pricing.config import Settings
from menu_pricing.services.api_keys import ApiKeyService
from menu_pricing.services.ingredients import IngredientService
from menu_pricing.services.narrative import NarrativeService
from menu_pricing.services.products import ProductService
from menu_pricing.services.seed import DemoCatalogSeeder


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    ingredient_service: IngredientService
    product_service: ProductService
    api_key_service: ApiKeyService
    narrative_service: NarrativeService
    demo_seeder: DemoCatalogSeeder


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    ingredient_repository = SupabaseIngredientRepository(supabase_client)
    product_repository = SupabaseProductRepository(supabase_client)
    settings_repository = SupabaseSettingsRepository(supabase_client)

    api_key_service = ApiKeyService(
        repository=settings_repository,
        default_key=resolved_settings.openai_api_key,
    )
    narrative_service = NarrativeService(
        client=OpenAINarrativeClient(),
        api_key_service=api_key_service,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )

    return AppContainer(
        settings=resolved_settings,
        ingredient_service=IngredientService(ingredient_repository),
        product_service=ProductService(
            repository=product_repository,
            ingredient_repository=ingredient_repository,
        ),
        api_key_service=api_key_service,
        narrative_service=narrative_service,
        demo_seeder=DemoCatalogSeeder(
            ingredient_repository=ingredient_repository,
            product_repository=product_repository,
        ),
    )
