"""Tests for the product aggregate and its simulation copy."""

import pytest

from menu_pricing.domain.errors import InvalidInputError
from menu_pricing.domain.ingredients import UsageUnit
from menu_pricing.domain.workspace import PricingWorkspace
from tests.conftest import make_box, make_cheese, make_flour, make_pizza


def test_simulation_diverges_without_touching_product() -> None:
    workspace = PricingWorkspace.open(make_pizza())

    workspace.simulate_quantity(0, 700)

    assert workspace.product.recipe_lines[0].quantity_used == 350
    assert workspace.simulated_lines[0].quantity_used == 700
    assert workspace.changed_line_indexes() == [0]


def test_recipe_edit_updates_product_and_simulation_in_lockstep() -> None:
    workspace = PricingWorkspace.open(make_pizza())
    workspace.simulate_quantity(1, 10)

    product = workspace.update_line(0, 400)

    assert product.recipe_lines[0].quantity_used == 400
    assert workspace.simulated_lines == list(product.recipe_lines)
    assert workspace.changed_line_indexes() == []


def test_cost_and_name_edits_keep_the_simulation() -> None:
    workspace = PricingWorkspace.open(make_pizza())
    workspace.simulate_quantity(0, 700)

    workspace.rename("Pizza Nova")
    product = workspace.update_costs(tax_percent=10)

    assert product.name == "Pizza Nova"
    assert product.costs.tax_percent == 10
    assert product.costs.target_margin_percent == 25
    assert workspace.changed_line_indexes() == [0]


def test_add_line_derives_usage_unit() -> None:
    workspace = PricingWorkspace.open(make_pizza())
    workspace.remove_line(2)
    workspace.remove_line(1)

    product = workspace.add_line(make_box())

    assert product.recipe_lines[-1].usage_unit == UsageUnit.UNIT
    assert product.recipe_lines[-1].quantity_used == 0.0
    assert len(workspace.simulated_lines) == 2


def test_available_ingredients_excludes_used_ones() -> None:
    workspace = PricingWorkspace.open(make_pizza())
    workspace.remove_line(1)

    available = workspace.available_ingredients(
        [make_flour(), make_cheese(), make_box()]
    )

    assert [item.id for item in available] == ["cheese"]


def test_reset_simulation_discards_changes() -> None:
    workspace = PricingWorkspace.open(make_pizza())
    workspace.simulate_quantity(2, 3)

    workspace.reset_simulation()

    assert workspace.simulated_lines == list(workspace.product.recipe_lines)


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_out_of_range_index_is_rejected(index: int) -> None:
    workspace = PricingWorkspace.open(make_pizza())

    with pytest.raises(InvalidInputError):
        workspace.update_line(index, 1)
    with pytest.raises(InvalidInputError):
        workspace.simulate_quantity(index, 1)


def test_negative_quantity_is_rejected() -> None:
    workspace = PricingWorkspace.open(make_pizza())

    with pytest.raises(InvalidInputError):
        workspace.simulate_quantity(0, -5)


@pytest.mark.parametrize("quantity", [float("nan"), float("inf")])
def test_non_finite_quantity_is_rejected(quantity: float) -> None:
    workspace = PricingWorkspace.open(make_pizza())

    with pytest.raises(InvalidInputError):
        workspace.update_line(0, quantity)
    with pytest.raises(InvalidInputError):
        workspace.simulate_quantity(0, quantity)

    assert workspace.product == make_pizza()
    assert workspace.changed_line_indexes() == []


@pytest.mark.parametrize(
    "field_name", ["fixed_cost_allocated", "tax_percent", "target_margin_percent"]
)
def test_non_finite_costs_are_rejected(field_name: str) -> None:
    workspace = PricingWorkspace.open(make_pizza())

    with pytest.raises(InvalidInputError):
        workspace.update_costs(**{field_name: float("nan")})

    assert workspace.product.costs == make_pizza().costs
