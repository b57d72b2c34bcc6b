"""Request models for the pricing API."""

from pydantic import BaseModel, Field


class IngredientCreate(BaseModel):
    """Purchased package used to register an ingredient."""

    name: str
    package_price: float | str
    package_size: float | str
    package_unit: str = "kg"


class ProductCreate(BaseModel):
    """Name of a new product."""

    name: str = Field(min_length=1)


class ProductUpdate(BaseModel):
    """Partial update of a product's name and operating costs."""

    name: str | None = Field(default=None, min_length=1)
    fixed_cost_allocated: float | None = Field(
        default=None, ge=0, allow_inf_nan=False
    )
    tax_percent: float | None = Field(default=None, allow_inf_nan=False)
    target_margin_percent: float | None = Field(default=None, allow_inf_nan=False)


class RecipeLineCreate(BaseModel):
    """Ingredient to append to a recipe."""

    ingredient_id: str


class QuantityUpdate(BaseModel):
    """New quantity for a recipe line, in its usage unit."""

    quantity_used: float = Field(ge=0, allow_inf_nan=False)


class ApiKeyUpdate(BaseModel):
    """User-provided API key."""

    api_key: str
