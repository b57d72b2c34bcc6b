"""Tests for ingredient registration."""

import pytest

from menu_pricing.domain.errors import InvalidInputError
from menu_pricing.domain.ingredients import BaseUnit, Ingredient
from menu_pricing.services.ingredients import IngredientService
from tests.conftest import InMemoryIngredientRepository


def test_register_normalizes_gram_package() -> None:
    repository = InMemoryIngredientRepository()
    service = IngredientService(repository)

    ingredient, catalog = service.register("Parmesão", "19.90", "200", "g")

    assert ingredient.id
    assert ingredient.name == "Parmesão"
    assert ingredient.base_cost == pytest.approx(99.5)
    assert ingredient.base_unit == BaseUnit.KILOGRAM
    assert ingredient.conversion_factor == 1000
    assert catalog == [ingredient]


def test_register_accepts_uppercase_units() -> None:
    service = IngredientService(InMemoryIngredientRepository())

    ingredient, _ = service.register("Ovos", 18, 12, "UN")

    assert ingredient.base_cost == pytest.approx(1.5)
    assert ingredient.base_unit == BaseUnit.UNIT
    assert ingredient.conversion_factor == 1


@pytest.mark.parametrize(
    ("name", "price", "size", "unit"),
    [
        ("Leite", 5.0, 0, "l"),
        ("Leite", 5.0, -1, "l"),
        ("Leite", -5.0, 1, "l"),
        ("Leite", "abc", 1, "l"),
        ("Leite", 5.0, "nan", "l"),
        ("Leite", 5.0, None, "l"),
        ("Leite", 5.0, 1, "xícara"),
        ("   ", 5.0, 1, "l"),
    ],
)
def test_register_rejects_invalid_input_without_writing(
    name: str, price: object, size: object, unit: str
) -> None:
    repository = InMemoryIngredientRepository()
    service = IngredientService(repository)

    with pytest.raises(InvalidInputError):
        service.register(name, price, size, unit)

    assert repository.add_calls == 0
    assert repository.ingredients == []


def test_register_allows_free_ingredient() -> None:
    service = IngredientService(InMemoryIngredientRepository())

    ingredient, _ = service.register("Água", 0, 1, "l")

    assert ingredient.base_cost == 0.0


class NewestFirstIngredientRepository(InMemoryIngredientRepository):
    """Store that returns its catalog in reverse insertion order."""

    def list_ingredients(self) -> list[Ingredient]:
        return list(reversed(self.ingredients))

    def add_ingredient(self, ingredient: Ingredient) -> list[Ingredient]:
        super().add_ingredient(ingredient)
        return self.list_ingredients()


@pytest.mark.parametrize(
    "repository_class",
    [InMemoryIngredientRepository, NewestFirstIngredientRepository],
)
def test_register_duplicate_name_returns_the_new_record(
    repository_class: type[InMemoryIngredientRepository],
) -> None:
    service = IngredientService(repository_class())

    first, _ = service.register("Farinha", 5.0, 1, "kg")
    second, catalog = service.register("Farinha", 7.0, 1, "kg")

    assert second.id != first.id
    assert second.base_cost == pytest.approx(7.0)
    assert {item.id for item in catalog} == {first.id, second.id}
