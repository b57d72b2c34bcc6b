"""Product lifecycle, recipe editing and price simulation."""

import logging
from dataclasses import dataclass, field
from typing import Protocol
from uuid import uuid4

from menu_pricing.domain.errors import InvalidInputError, ProductNotFoundError
from menu_pricing.domain.ingredients import Ingredient
from menu_pricing.domain.pricing import ImpactResult, PriceSummary
from menu_pricing.domain.products import Product
from menu_pricing.domain.workspace import PricingWorkspace
from menu_pricing.services.ingredients import IngredientRepository
from menu_pricing.services.pricing import (
    analyze_impact,
    is_margin_saturated,
    price_summary,
)

_logger = logging.getLogger(__name__)


class ProductRepository(Protocol):
    """Persistence interface for products."""

    def list_products(self) -> list[Product]:
        """Return every stored product."""

    def get_product(self, product_id: str) -> Product | None:
        """Return a product by id, if present."""

    def save_product(self, product: Product) -> None:
        """Insert or overwrite a product by id."""

    def delete_product(self, product_id: str) -> list[Product]:
        """Delete a product and return the remaining ones."""


@dataclass(frozen=True)
class SimulationView:
    """Simulated recipe state of a product together with its impact."""

    workspace: PricingWorkspace
    changed_line_indexes: list[int]
    impact: ImpactResult
    margin_saturated: bool


@dataclass
class ProductService:
    """Application service coordinating products, recipes and simulations.

    Each product opened for editing gets a ``PricingWorkspace``; every
    committing edit persists the whole product.
    """

    repository: ProductRepository
    ingredient_repository: IngredientRepository
    _workspaces: dict[str, PricingWorkspace] = field(default_factory=dict)

    def list_products(self) -> list[Product]:
        """Return all products."""
        return self.repository.list_products()

    def create_product(self, name: str) -> Product:
        """Create and persist a product with an empty recipe and default costs."""
        product = Product(id=str(uuid4()), name=name)
        self.repository.save_product(product)
        _logger.info("Created product %s", product.id)
        return product

    def get_product(self, product_id: str) -> Product:
        """Return the current state of a product."""
        return self._workspace(product_id).product

    def delete_product(self, product_id: str) -> list[Product]:
        """Delete a product and drop its simulation."""
        self._workspaces.pop(product_id, None)
        return self.repository.delete_product(product_id)

    def rename(self, product_id: str, name: str) -> Product:
        """Rename a product."""
        return self._persist(self._workspace(product_id).rename(name))

    def update_costs(
        self,
        product_id: str,
        *,
        fixed_cost_allocated: float | None = None,
        tax_percent: float | None = None,
        target_margin_percent: float | None = None,
    ) -> Product:
        """Update the operating costs fields that are provided."""
        changes = {
            key: value
            for key, value in {
                "fixed_cost_allocated": fixed_cost_allocated,
                "tax_percent": tax_percent,
                "target_margin_percent": target_margin_percent,
            }.items()
            if value is not None
        }
        workspace = self._workspace(product_id)
        if not changes:
            return workspace.product
        return self._persist(workspace.update_costs(**changes))

    def add_line(self, product_id: str, ingredient_id: str) -> Product:
        """Append a catalog ingredient to the recipe."""
        workspace = self._workspace(product_id)
        ingredient = self._find_ingredient(ingredient_id)
        return self._persist(workspace.add_line(ingredient))

    def update_line(self, product_id: str, index: int, quantity_used: float) -> Product:
        """Commit a new quantity for a recipe line."""
        return self._persist(
            self._workspace(product_id).update_line(index, quantity_used)
        )

    def remove_line(self, product_id: str, index: int) -> Product:
        """Remove a recipe line."""
        return self._persist(self._workspace(product_id).remove_line(index))

    def available_ingredients(self, product_id: str) -> list[Ingredient]:
        """Return catalog ingredients not yet in the product recipe."""
        return self._workspace(product_id).available_ingredients(
            self.ingredient_repository.list_ingredients()
        )

    def price_summary(self, product_id: str) -> PriceSummary:
        """Compute current pricing figures from the stored recipe."""
        product = self._workspace(product_id).product
        return price_summary(product, self.ingredient_repository.list_ingredients())

    def simulate_quantity(
        self, product_id: str, index: int, quantity_used: float
    ) -> SimulationView:
        """Change a simulated quantity without touching the stored recipe."""
        self._workspace(product_id).simulate_quantity(index, quantity_used)
        return self.simulation(product_id)

    def reset_simulation(self, product_id: str) -> SimulationView:
        """Discard simulated changes."""
        self._workspace(product_id).reset_simulation()
        return self.simulation(product_id)

    def simulation(self, product_id: str) -> SimulationView:
        """Return the simulated recipe and its impact against the stored one."""
        workspace = self._workspace(product_id)
        ingredients = self.ingredient_repository.list_ingredients()
        return SimulationView(
            workspace=workspace,
            changed_line_indexes=workspace.changed_line_indexes(),
            impact=analyze_impact(
                workspace.product, workspace.simulated_lines, ingredients
            ),
            margin_saturated=is_margin_saturated(workspace.product.costs),
        )

    def _workspace(self, product_id: str) -> PricingWorkspace:
        workspace = self._workspaces.get(product_id)
        if workspace is not None:
            return workspace
        product = self.repository.get_product(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        workspace = PricingWorkspace.open(product)
        self._workspaces[product_id] = workspace
        return workspace

    def _find_ingredient(self, ingredient_id: str) -> Ingredient:
        for ingredient in self.ingredient_repository.list_ingredients():
            if ingredient.id == ingredient_id:
                return ingredient
        raise InvalidInputError(f"Ingredient not found: {ingredient_id}")

    def _persist(self, product: Product) -> Product:
        self.repository.save_product(product)
        return product
