"""Product, recipe and simulation endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status

from menu_pricing.api.models import (
    ProductCreate,
    ProductUpdate,
    QuantityUpdate,
    RecipeLineCreate,
)
from menu_pricing.api.serializers import (
    serialize_ingredient,
    serialize_product,
    serialize_simulation,
    serialize_summary,
)

if TYPE_CHECKING:
    from menu_pricing.containers import AppContainer
    from menu_pricing.services.products import ProductService

router = APIRouter(prefix="/products", tags=["products"])


def _products(request: Request) -> ProductService:
    container: AppContainer = request.app.state.container
    return container.product_service


def _detail(service: ProductService, product_id: str) -> dict[str, object]:
    return {
        "product": serialize_product(service.get_product(product_id)),
        "pricing": serialize_summary(service.price_summary(product_id)),
    }


@router.get("")
async def list_products(request: Request) -> dict[str, object]:
    """Return all products."""
    products = _products(request).list_products()
    return {"products": [serialize_product(product) for product in products]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(payload: ProductCreate, request: Request) -> dict[str, object]:
    """Create a product with an empty recipe and default costs."""
    product = _products(request).create_product(payload.name)
    return {"product": serialize_product(product)}


@router.get("/{product_id}")
async def get_product(product_id: str, request: Request) -> dict[str, object]:
    """Return a product with its current pricing."""
    return _detail(_products(request), product_id)


@router.patch("/{product_id}")
async def update_product(
    product_id: str, payload: ProductUpdate, request: Request
) -> dict[str, object]:
    """Rename a product and/or change its operating costs."""
    service = _products(request)
    if payload.name is not None:
        service.rename(product_id, payload.name)
    service.update_costs(
        product_id,
        fixed_cost_allocated=payload.fixed_cost_allocated,
        tax_percent=payload.tax_percent,
        target_margin_percent=payload.target_margin_percent,
    )
    return _detail(service, product_id)


@router.delete("/{product_id}")
async def delete_product(product_id: str, request: Request) -> dict[str, object]:
    """Delete a product and return the remaining ones."""
    remaining = _products(request).delete_product(product_id)
    return {"products": [serialize_product(product) for product in remaining]}


@router.get("/{product_id}/available-ingredients")
async def available_ingredients(
    product_id: str, request: Request
) -> dict[str, object]:
    """Return catalog ingredients that the recipe does not use yet."""
    ingredients = _products(request).available_ingredients(product_id)
    return {"ingredients": [serialize_ingredient(item) for item in ingredients]}


@router.post("/{product_id}/lines", status_code=status.HTTP_201_CREATED)
async def add_line(
    product_id: str, payload: RecipeLineCreate, request: Request
) -> dict[str, object]:
    """Append an ingredient to the recipe with zero quantity."""
    service = _products(request)
    service.add_line(product_id, payload.ingredient_id)
    return _detail(service, product_id)


@router.patch("/{product_id}/lines/{index}")
async def update_line(
    product_id: str, index: int, payload: QuantityUpdate, request: Request
) -> dict[str, object]:
    """Commit a new quantity for a recipe line."""
    service = _products(request)
    service.update_line(product_id, index, payload.quantity_used)
    return _detail(service, product_id)


@router.delete("/{product_id}/lines/{index}")
async def remove_line(
    product_id: str, index: int, request: Request
) -> dict[str, object]:
    """Remove a recipe line."""
    service = _products(request)
    service.remove_line(product_id, index)
    return _detail(service, product_id)


@router.get("/{product_id}/simulation")
async def get_simulation(product_id: str, request: Request) -> dict[str, object]:
    """Return the simulated recipe and its impact on the sale price."""
    return serialize_simulation(_products(request).simulation(product_id))


@router.patch("/{product_id}/simulation/lines/{index}")
async def simulate_quantity(
    product_id: str, index: int, payload: QuantityUpdate, request: Request
) -> dict[str, object]:
    """Change a quantity in the simulation only."""
    view = _products(request).simulate_quantity(
        product_id, index, payload.quantity_used
    )
    return serialize_simulation(view)


@router.delete("/{product_id}/simulation")
async def reset_simulation(product_id: str, request: Request) -> dict[str, object]:
    """Discard simulated changes."""
    return serialize_simulation(_products(request).reset_simulation(product_id))


@router.post("/{product_id}/simulation/narrative")
async def simulation_narrative(
    product_id: str, request: Request
) -> dict[str, object]:
    """Ask the consultant for commentary on the current simulation."""
    container: AppContainer = request.app.state.container
    view = container.product_service.simulation(product_id)
    text = await container.narrative_service.generate(
        view.workspace.product,
        container.ingredient_service.list_ingredients(),
        view.impact,
    )
    return {"text": text, "impact": serialize_simulation(view)["impact"]}
