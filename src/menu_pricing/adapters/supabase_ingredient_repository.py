"""Supabase implementation for the ingredient catalog."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import uuid4

from supabase import Client

from menu_pricing.domain.ingredients import BaseUnit, Ingredient
from menu_pricing.services.ingredients import IngredientRepository


@dataclass
class SupabaseIngredientRepository(IngredientRepository):
    """Supabase-backed repository for ingredients."""

    client: Client

    def list_ingredients(self) -> list[Ingredient]:
        """Return every stored ingredient."""
        response = (
            self.client.table("ingredients")
            .select("*")
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_ingredient(row) for row in response.data or []]

    def add_ingredient(self, ingredient: Ingredient) -> list[Ingredient]:
        """Insert an ingredient, assigning an id if empty, and return the catalog."""
        response = (
            self.client.table("ingredients")
            .insert(
                {
                    "id": ingredient.id or str(uuid4()),
                    "name": ingredient.name,
                    "base_cost": ingredient.base_cost,
                    "base_unit": ingredient.base_unit.value,
                    "conversion_factor": ingredient.conversion_factor,
                    "created_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create ingredient")
        return self.list_ingredients()


def _parse_ingredient(row: dict[str, object]) -> Ingredient:
    """Parse an ingredient row into a domain model."""
    return Ingredient(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        base_cost=float(row.get("base_cost", 0.0)),
        base_unit=BaseUnit(str(row.get("base_unit", BaseUnit.UNIT.value))),
        conversion_factor=int(row.get("conversion_factor", 1)),
    )
