"""Pricing engine: unit normalization, cost aggregation and impact analysis.

Every function here is pure and free of storage concerns. Ingredients are
resolved by id against the catalog passed into each call.
"""

import logging
from collections.abc import Iterable, Sequence
from decimal import ROUND_HALF_UP, Decimal

from menu_pricing.domain.ingredients import BaseUnit, Ingredient, PackageUnit
from menu_pricing.domain.pricing import CompositionSlice, ImpactResult, PriceSummary
from menu_pricing.domain.products import OperatingCosts, Product, RecipeLine

_logger = logging.getLogger(__name__)

_FINE_UNITS_PER_BASE = 1000
_CENT = Decimal("0.01")


def normalize_package(
    price: float, size: float, unit: PackageUnit
) -> tuple[float, BaseUnit, int]:
    """Convert a package price into cost per canonical base unit.

    Returns ``(base_cost, base_unit, conversion_factor)``. No validation is
    performed; callers must reject zero sizes beforehand.
    """
    if unit == PackageUnit.KILOGRAM:
        return price / size, BaseUnit.KILOGRAM, _FINE_UNITS_PER_BASE
    if unit == PackageUnit.GRAM:
        return (price / size) * 1000, BaseUnit.KILOGRAM, _FINE_UNITS_PER_BASE
    if unit == PackageUnit.LITER:
        return price / size, BaseUnit.LITER, _FINE_UNITS_PER_BASE
    if unit == PackageUnit.MILLILITER:
        return (price / size) * 1000, BaseUnit.LITER, _FINE_UNITS_PER_BASE
    return price / size, BaseUnit.UNIT, 1


def line_cost(line: RecipeLine, ingredient: Ingredient | None) -> float:
    """Return the cost of one recipe line, or 0.0 when the ingredient is missing."""
    if ingredient is None:
        return 0.0
    return (ingredient.base_cost / ingredient.conversion_factor) * line.quantity_used


def total_direct_cost(
    lines: Iterable[RecipeLine], ingredients: Iterable[Ingredient]
) -> float:
    """Sum line costs over a recipe, skipping lines with unknown ingredients."""
    catalog = _index(ingredients)
    total = 0.0
    for line in lines:
        ingredient = catalog.get(line.ingredient_id)
        if ingredient is None:
            _logger.warning(
                "Recipe line references unknown ingredient %s", line.ingredient_id
            )
            continue
        total += line_cost(line, ingredient)
    return total


def is_margin_saturated(costs: OperatingCosts) -> bool:
    """Return True when tax plus margin leave no room for cost recovery."""
    return _divisor(costs) <= 0


def sale_price(direct_cost: float, costs: OperatingCosts) -> float:
    """Suggested sale price using the markup-divisor formula.

    PV = (direct cost + fixed cost) / (1 - (tax% + margin%) / 100).
    Returns 0.0 when tax + margin >= 100%.
    """
    divisor = _divisor(costs)
    if divisor <= 0:
        return 0.0
    return (direct_cost + costs.fixed_cost_allocated) / divisor


def analyze_impact(
    product: Product,
    simulated_lines: Sequence[RecipeLine],
    ingredients: Sequence[Ingredient],
) -> ImpactResult:
    """Compare the product's stored recipe against a simulated one."""
    direct_cost_before = total_direct_cost(product.recipe_lines, ingredients)
    price_before = sale_price(direct_cost_before, product.costs)

    direct_cost_after = total_direct_cost(simulated_lines, ingredients)
    price_after = sale_price(direct_cost_after, product.costs)

    price_delta = price_after - price_before

    if price_delta > 0:
        message = (
            "A alteração aumentou o custo direto em "
            f"{format_money(direct_cost_after - direct_cost_before)}. "
            f"O preço de venda precisa subir {format_money(price_delta)} "
            "para manter a margem de "
            f"{format_percent(product.costs.target_margin_percent)}%."
        )
    elif price_delta < 0:
        message = (
            "A alteração gerou uma economia de "
            f"{format_money(direct_cost_before - direct_cost_after)} "
            "no custo direto. Você pode reduzir o preço em "
            f"{format_money(abs(price_delta))} e manter a mesma margem."
        )
    else:
        message = "Nenhuma alteração significativa no preço final."

    return ImpactResult(
        direct_cost_before=direct_cost_before,
        price_before=price_before,
        direct_cost_after=direct_cost_after,
        price_after=price_after,
        price_delta=price_delta,
        message=message,
    )


def price_composition(
    direct_cost: float, costs: OperatingCosts, price: float
) -> list[CompositionSlice]:
    """Split a sale price into ingredients, fixed costs, taxes and profit."""
    return [
        CompositionSlice(name="Insumos", value=direct_cost),
        CompositionSlice(name="Custos Fixos", value=costs.fixed_cost_allocated),
        CompositionSlice(name="Impostos", value=price * (costs.tax_percent / 100)),
        CompositionSlice(
            name="Lucro Líquido", value=price * (costs.target_margin_percent / 100)
        ),
    ]


def price_summary(product: Product, ingredients: Sequence[Ingredient]) -> PriceSummary:
    """Compute the current pricing figures for a product."""
    catalog = _index(ingredients)
    direct_cost = total_direct_cost(product.recipe_lines, ingredients)
    price = sale_price(direct_cost, product.costs)
    saturated = is_margin_saturated(product.costs)
    if saturated:
        _logger.warning(
            "Tax plus margin reach 100%% for product %s; price saturated to 0",
            product.id,
        )
    line_costs: list[float | None] = []
    for line in product.recipe_lines:
        ingredient = catalog.get(line.ingredient_id)
        line_costs.append(
            line_cost(line, ingredient) if ingredient is not None else None
        )
    return PriceSummary(
        direct_cost=direct_cost,
        sale_price=price,
        line_costs=line_costs,
        composition=price_composition(direct_cost, product.costs, price),
        markup_percent=product.costs.tax_percent
        + product.costs.target_margin_percent,
        margin_saturated=saturated,
    )


def format_money(value: float) -> str:
    """Format a monetary value as Brazilian reais with two decimals.

    Ties round away from zero.
    """
    cents = Decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP)
    return f"R$ {cents}"


def format_percent(value: float) -> str:
    """Format a percentage without a trailing ``.0`` for whole numbers."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _divisor(costs: OperatingCosts) -> float:
    return 1 - ((costs.tax_percent + costs.target_margin_percent) / 100)


def _index(ingredients: Iterable[Ingredient]) -> dict[str, Ingredient]:
    catalog: dict[str, Ingredient] = {}
    for ingredient in ingredients:
        catalog.setdefault(ingredient.id, ingredient)
    return catalog
