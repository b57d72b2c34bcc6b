"""Services for the ingredient catalog."""

import logging
import math
from dataclasses import dataclass
from typing import Protocol
from uuid import uuid4

from menu_pricing.domain.errors import InvalidInputError
from menu_pricing.domain.ingredients import Ingredient, PackageUnit
from menu_pricing.services.pricing import normalize_package

_logger = logging.getLogger(__name__)


class IngredientRepository(Protocol):
    """Persistence interface for the ingredient catalog."""

    def list_ingredients(self) -> list[Ingredient]:
        """Return every stored ingredient."""

    def add_ingredient(self, ingredient: Ingredient) -> list[Ingredient]:
        """Store an ingredient, assigning an id if empty, and return the catalog."""


@dataclass
class IngredientService:
    """Application service for registering and listing ingredients."""

    repository: IngredientRepository

    def list_ingredients(self) -> list[Ingredient]:
        """Return the ingredient catalog."""
        return self.repository.list_ingredients()

    def register(
        self,
        name: str,
        package_price: object,
        package_size: object,
        package_unit: object,
    ) -> tuple[Ingredient, list[Ingredient]]:
        """Validate a purchased package and store it as a normalized ingredient.

        Returns the stored ingredient and the updated catalog. Raises
        ``InvalidInputError`` before anything is written when the input is bad.
        """
        cleaned_name = (name or "").strip()
        if not cleaned_name:
            raise InvalidInputError("Ingredient name is required")
        price = _parse_number(package_price, "package_price")
        size = _parse_number(package_size, "package_size")
        if price < 0:
            raise InvalidInputError("package_price must not be negative")
        if size <= 0:
            raise InvalidInputError("package_size must be greater than zero")
        unit = _parse_unit(package_unit)

        base_cost, base_unit, conversion_factor = normalize_package(price, size, unit)
        ingredient_id = str(uuid4())
        catalog = self.repository.add_ingredient(
            Ingredient(
                id=ingredient_id,
                name=cleaned_name,
                base_cost=base_cost,
                base_unit=base_unit,
                conversion_factor=conversion_factor,
            )
        )
        stored = _find_registered(catalog, ingredient_id)
        _logger.info(
            "Registered ingredient %s at %.4f per %s",
            stored.id,
            stored.base_cost,
            stored.base_unit,
        )
        return stored, catalog


def _parse_number(raw: object, field_name: str) -> float:
    """Parse a user-supplied number, rejecting garbage and non-finite values."""
    if isinstance(raw, bool):
        raise InvalidInputError(f"{field_name} must be a number")
    try:
        value = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{field_name} must be a number") from exc
    if not math.isfinite(value):
        raise InvalidInputError(f"{field_name} must be a finite number")
    return value


def _parse_unit(raw: object) -> PackageUnit:
    """Parse a package unit such as ``kg`` or ``ml``, case-insensitively."""
    try:
        return PackageUnit(str(raw).strip().lower())
    except ValueError as exc:
        allowed = ", ".join(unit.value for unit in PackageUnit)
        raise InvalidInputError(f"package_unit must be one of: {allowed}") from exc


def _find_registered(catalog: list[Ingredient], ingredient_id: str) -> Ingredient:
    """Return the catalog entry stored under the given id."""
    for ingredient in catalog:
        if ingredient.id == ingredient_id:
            return ingredient
    raise RuntimeError("Ingredient store did not return the registered ingredient")
