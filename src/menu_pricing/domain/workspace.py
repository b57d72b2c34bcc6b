"""Product aggregate with a simulated recipe working copy."""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from menu_pricing.domain.errors import InvalidInputError
from menu_pricing.domain.ingredients import Ingredient, usage_unit_for
from menu_pricing.domain.products import Product, RecipeLine


@dataclass
class PricingWorkspace:
    """Holds a stored product and a simulated copy of its recipe.

    Recipe edits replace ``product`` and reset ``simulated_lines`` to the new
    recipe in lockstep. Name and cost edits keep the simulation, which is
    priced with the current costs. Simulation edits only touch
    ``simulated_lines``.
    """

    product: Product
    simulated_lines: list[RecipeLine] = field(default_factory=list)

    @classmethod
    def open(cls, product: Product) -> "PricingWorkspace":
        """Start a workspace whose simulation matches the stored recipe."""
        return cls(product=product, simulated_lines=list(product.recipe_lines))

    def rename(self, name: str) -> Product:
        """Change the product name."""
        self.product = replace(self.product, name=name)
        return self.product

    def update_costs(self, **changes: float) -> Product:
        """Update one or more operating cost fields."""
        for name, value in changes.items():
            if not math.isfinite(value):
                raise InvalidInputError(f"{name} must be a finite number")
        costs = replace(self.product.costs, **changes)
        self.product = replace(self.product, costs=costs)
        return self.product

    def add_line(self, ingredient: Ingredient) -> Product:
        """Append an ingredient to the recipe with zero quantity."""
        line = RecipeLine(
            ingredient_id=ingredient.id,
            quantity_used=0.0,
            usage_unit=usage_unit_for(ingredient.base_unit),
        )
        return self._commit_lines([*self.product.recipe_lines, line])

    def update_line(self, index: int, quantity_used: float) -> Product:
        """Change the stored quantity of a recipe line."""
        _check_quantity(quantity_used)
        lines = list(self.product.recipe_lines)
        self._check_index(index, lines)
        lines[index] = replace(lines[index], quantity_used=quantity_used)
        return self._commit_lines(lines)

    def remove_line(self, index: int) -> Product:
        """Remove a line from the recipe."""
        lines = list(self.product.recipe_lines)
        self._check_index(index, lines)
        del lines[index]
        return self._commit_lines(lines)

    def simulate_quantity(self, index: int, quantity_used: float) -> None:
        """Change a quantity in the simulated copy only."""
        _check_quantity(quantity_used)
        self._check_index(index, self.simulated_lines)
        self.simulated_lines[index] = replace(
            self.simulated_lines[index], quantity_used=quantity_used
        )

    def reset_simulation(self) -> None:
        """Discard simulated changes."""
        self.simulated_lines = list(self.product.recipe_lines)

    def changed_line_indexes(self) -> list[int]:
        """Return indexes whose simulated quantity differs from the stored one."""
        return [
            index
            for index, (stored, simulated) in enumerate(
                zip(self.product.recipe_lines, self.simulated_lines, strict=False)
            )
            if stored.quantity_used != simulated.quantity_used
        ]

    def available_ingredients(
        self, catalog: Sequence[Ingredient]
    ) -> list[Ingredient]:
        """Return catalog entries not yet used by the recipe."""
        used = {line.ingredient_id for line in self.product.recipe_lines}
        return [ingredient for ingredient in catalog if ingredient.id not in used]

    def _commit_lines(self, lines: list[RecipeLine]) -> Product:
        return self._commit(replace(self.product, recipe_lines=tuple(lines)))

    def _commit(self, product: Product) -> Product:
        self.product = product
        self.simulated_lines = list(product.recipe_lines)
        return product

    @staticmethod
    def _check_index(index: int, lines: Sequence[RecipeLine]) -> None:
        if not 0 <= index < len(lines):
            raise InvalidInputError(f"Recipe line {index} does not exist")


def _check_quantity(quantity_used: float) -> None:
    if not math.isfinite(quantity_used):
        raise InvalidInputError("quantity_used must be a finite number")
    if quantity_used < 0:
        raise InvalidInputError("quantity_used must not be negative")
