"""Domain models for products and their recipes."""

from dataclasses import dataclass, field

from menu_pricing.domain.ingredients import UsageUnit

DEFAULT_TARGET_MARGIN_PERCENT = 20.0


@dataclass(frozen=True)
class RecipeLine:
    """One ingredient-quantity pair of a recipe."""

    ingredient_id: str
    quantity_used: float
    usage_unit: UsageUnit


@dataclass(frozen=True)
class OperatingCosts:
    """Cost configuration that turns direct cost into a sale price."""

    fixed_cost_allocated: float = 0.0
    tax_percent: float = 0.0
    target_margin_percent: float = DEFAULT_TARGET_MARGIN_PERCENT


@dataclass(frozen=True)
class Product:
    """A menu item with its recipe and operating costs."""

    id: str
    name: str
    recipe_lines: tuple[RecipeLine, ...] = ()
    costs: OperatingCosts = field(default_factory=OperatingCosts)
