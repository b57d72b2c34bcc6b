"""Supabase implementation for products."""

from dataclasses import dataclass

from supabase import Client

from menu_pricing.domain.ingredients import UsageUnit
from menu_pricing.domain.products import OperatingCosts, Product, RecipeLine
from menu_pricing.services.products import ProductRepository


@dataclass
class SupabaseProductRepository(ProductRepository):
    """Supabase-backed repository storing each product as a whole record."""

    client: Client

    def list_products(self) -> list[Product]:
        """Return every stored product."""
        response = self.client.table("products").select("*").execute()
        return [_parse_product(row) for row in response.data or []]

    def get_product(self, product_id: str) -> Product | None:
        """Return a product by id, if present."""
        response = (
            self.client.table("products")
            .select("*")
            .eq("id", product_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_product(response.data[0])

    def save_product(self, product: Product) -> None:
        """Insert or overwrite a product by id."""
        self.client.table("products").upsert(_serialize_product(product)).execute()

    def delete_product(self, product_id: str) -> list[Product]:
        """Delete a product and return the remaining ones."""
        self.client.table("products").delete().eq("id", product_id).execute()
        return self.list_products()


def _serialize_product(product: Product) -> dict[str, object]:
    """Convert a product into its stored row shape."""
    return {
        "id": product.id,
        "name": product.name,
        "recipe_lines": [
            {
                "ingredient_id": line.ingredient_id,
                "quantity_used": line.quantity_used,
                "usage_unit": line.usage_unit.value,
            }
            for line in product.recipe_lines
        ],
        "costs": {
            "fixed_cost_allocated": product.costs.fixed_cost_allocated,
            "tax_percent": product.costs.tax_percent,
            "target_margin_percent": product.costs.target_margin_percent,
        },
    }


def _parse_product(row: dict[str, object]) -> Product:
    """Parse a product row into a domain model."""
    costs_raw = row.get("costs") or {}
    defaults = OperatingCosts()
    lines = tuple(
        RecipeLine(
            ingredient_id=str(line["ingredient_id"]),
            quantity_used=float(line.get("quantity_used", 0.0)),
            usage_unit=UsageUnit(str(line.get("usage_unit", UsageUnit.UNIT.value))),
        )
        for line in row.get("recipe_lines") or []
    )
    return Product(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        recipe_lines=lines,
        costs=OperatingCosts(
            fixed_cost_allocated=float(
                costs_raw.get("fixed_cost_allocated", defaults.fixed_cost_allocated)
            ),
            tax_percent=float(costs_raw.get("tax_percent", defaults.tax_percent)),
            target_margin_percent=float(
                costs_raw.get("target_margin_percent", defaults.target_margin_percent)
            ),
        ),
    )
