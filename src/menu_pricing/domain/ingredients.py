"""Domain models for purchasable ingredients."""

from dataclasses import dataclass
from enum import StrEnum


class PackageUnit(StrEnum):
    """Units an ingredient package can be bought in."""

    KILOGRAM = "kg"
    GRAM = "g"
    LITER = "l"
    MILLILITER = "ml"
    UNIT = "un"


class BaseUnit(StrEnum):
    """Canonical coarse units used to store unit cost."""

    KILOGRAM = "kg"
    LITER = "l"
    UNIT = "un"


class UsageUnit(StrEnum):
    """Fine-grained units used for recipe quantities."""

    GRAM = "g"
    MILLILITER = "ml"
    UNIT = "un"


@dataclass(frozen=True)
class Ingredient:
    """Represents an ingredient with its normalized unit cost."""

    id: str
    name: str
    base_cost: float
    base_unit: BaseUnit
    conversion_factor: int


def usage_unit_for(base_unit: BaseUnit) -> UsageUnit:
    """Return the recipe unit matching an ingredient base unit."""
    if base_unit == BaseUnit.KILOGRAM:
        return UsageUnit.GRAM
    if base_unit == BaseUnit.LITER:
        return UsageUnit.MILLILITER
    return UsageUnit.UNIT
