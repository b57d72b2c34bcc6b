"""Computed pricing value objects."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ImpactResult:
    """Before/after comparison of a simulated recipe."""

    direct_cost_before: float
    price_before: float
    direct_cost_after: float
    price_after: float
    price_delta: float
    message: str


@dataclass(frozen=True)
class CompositionSlice:
    """Share of the sale price attributed to one cost component."""

    name: str
    value: float


@dataclass(frozen=True)
class PriceSummary:
    """Current pricing figures for a product."""

    direct_cost: float
    sale_price: float
    line_costs: list[float | None]
    composition: list[CompositionSlice]
    markup_percent: float
    margin_saturated: bool
