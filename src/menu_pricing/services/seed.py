"""Sample catalog used to populate empty stores."""

import logging
from dataclasses import dataclass
from uuid import uuid4

from menu_pricing.domain.ingredients import BaseUnit, Ingredient, usage_unit_for
from menu_pricing.domain.products import OperatingCosts, Product, RecipeLine
from menu_pricing.services.ingredients import IngredientRepository
from menu_pricing.services.products import ProductRepository

_logger = logging.getLogger(__name__)

DEMO_INGREDIENTS: tuple[Ingredient, ...] = (
    Ingredient("", "Farinha de Trigo Especial", 5.00, BaseUnit.KILOGRAM, 1000),
    Ingredient("", "Queijo Mussarela", 38.00, BaseUnit.KILOGRAM, 1000),
    # 12.00 per 2 kg can
    Ingredient("", "Molho de Tomate Pelati", 6.00, BaseUnit.KILOGRAM, 1000),
    # 4.50 per 50 g bunch
    Ingredient("", "Manjericão Fresco", 90.00, BaseUnit.KILOGRAM, 1000),
    Ingredient("", "Azeite Extra Virgem", 45.00, BaseUnit.LITER, 1000),
    Ingredient("", "Embalagem Pizza", 2.50, BaseUnit.UNIT, 1),
)

DEMO_PRODUCT_NAME = "Pizza Margherita Clássica"
DEMO_COSTS = OperatingCosts(
    fixed_cost_allocated=8.00,
    tax_percent=12.0,
    target_margin_percent=25.0,
)
DEMO_RECIPE: tuple[tuple[str, float], ...] = (
    ("Farinha de Trigo Especial", 350),
    ("Molho de Tomate Pelati", 120),
    ("Queijo Mussarela", 280),
    ("Manjericão Fresco", 10),
    ("Azeite Extra Virgem", 15),
    ("Embalagem Pizza", 1),
)


@dataclass
class DemoCatalogSeeder:
    """Fills empty ingredient and product stores with a sample pizza."""

    ingredient_repository: IngredientRepository
    product_repository: ProductRepository

    def seed(self) -> bool:
        """Seed whichever store is empty. Returns True if anything was written."""
        seeded = False
        catalog = self.ingredient_repository.list_ingredients()
        if not catalog:
            for ingredient in DEMO_INGREDIENTS:
                catalog = self.ingredient_repository.add_ingredient(ingredient)
            seeded = True
        if not self.product_repository.list_products():
            self.product_repository.save_product(_demo_product(catalog))
            seeded = True
        if seeded:
            _logger.info("Seeded demo catalog")
        return seeded


def _demo_product(catalog: list[Ingredient]) -> Product:
    by_name = {ingredient.name: ingredient for ingredient in catalog}
    lines = [
        RecipeLine(
            ingredient_id=by_name[name].id,
            quantity_used=quantity,
            usage_unit=usage_unit_for(by_name[name].base_unit),
        )
        for name, quantity in DEMO_RECIPE
        if name in by_name
    ]
    return Product(
        id=str(uuid4()),
        name=DEMO_PRODUCT_NAME,
        recipe_lines=tuple(lines),
        costs=DEMO_COSTS,
    )
