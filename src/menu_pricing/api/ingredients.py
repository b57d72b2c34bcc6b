"""Ingredient catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status

from menu_pricing.api.models import IngredientCreate
from menu_pricing.api.serializers import serialize_ingredient

if TYPE_CHECKING:
    from menu_pricing.containers import AppContainer

router = APIRouter(prefix="/ingredients", tags=["ingredients"])


@router.get("")
async def list_ingredients(request: Request) -> dict[str, object]:
    """Return the ingredient catalog."""
    container: AppContainer = request.app.state.container
    ingredients = container.ingredient_service.list_ingredients()
    return {"ingredients": [serialize_ingredient(item) for item in ingredients]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def register_ingredient(
    payload: IngredientCreate, request: Request
) -> dict[str, object]:
    """Register an ingredient from a purchased package."""
    container: AppContainer = request.app.state.container
    ingredient, catalog = container.ingredient_service.register(
        name=payload.name,
        package_price=payload.package_price,
        package_size=payload.package_size,
        package_unit=payload.package_unit,
    )
    return {
        "ingredient": serialize_ingredient(ingredient),
        "ingredients": [serialize_ingredient(item) for item in catalog],
    }
