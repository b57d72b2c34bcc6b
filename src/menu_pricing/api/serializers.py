"""JSON payload builders for API responses."""

from dataclasses import asdict

from menu_pricing.domain.ingredients import Ingredient
from menu_pricing.domain.pricing import ImpactResult, PriceSummary
from menu_pricing.domain.products import Product, RecipeLine
from menu_pricing.services.products import SimulationView


def serialize_ingredient(ingredient: Ingredient) -> dict[str, object]:
    """Return the stored shape of an ingredient."""
    return {
        "id": ingredient.id,
        "name": ingredient.name,
        "base_cost": ingredient.base_cost,
        "base_unit": ingredient.base_unit.value,
        "conversion_factor": ingredient.conversion_factor,
    }


def serialize_line(line: RecipeLine) -> dict[str, object]:
    """Return the stored shape of a recipe line."""
    return {
        "ingredient_id": line.ingredient_id,
        "quantity_used": line.quantity_used,
        "usage_unit": line.usage_unit.value,
    }


def serialize_product(product: Product) -> dict[str, object]:
    """Return the stored shape of a product."""
    return {
        "id": product.id,
        "name": product.name,
        "recipe_lines": [serialize_line(line) for line in product.recipe_lines],
        "costs": asdict(product.costs),
    }


def serialize_summary(summary: PriceSummary) -> dict[str, object]:
    """Return pricing figures for a product."""
    return asdict(summary)


def serialize_impact(impact: ImpactResult) -> dict[str, object]:
    """Return an impact analysis."""
    return asdict(impact)


def serialize_simulation(view: SimulationView) -> dict[str, object]:
    """Return the simulated recipe and its impact."""
    return {
        "product_id": view.workspace.product.id,
        "simulated_lines": [
            serialize_line(line) for line in view.workspace.simulated_lines
        ],
        "changed_line_indexes": view.changed_line_indexes,
        "impact": serialize_impact(view.impact),
        "margin_saturated": view.margin_saturated,
    }
