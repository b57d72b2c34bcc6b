"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from menu_pricing.api.ingredients import router as ingredients_router
from menu_pricing.api.products import router as products_router
from menu_pricing.api.settings import router as settings_router
from menu_pricing.app_logging import configure_logging
from menu_pricing.containers import AppContainer
from menu_pricing.domain.errors import InvalidInputError, ProductNotFoundError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state_container: AppContainer = app.state.container
        if state_container.settings.seed_demo_data:
            try:
                state_container.demo_seeder.seed()
            except Exception:
                logger.exception("Failed to seed demo catalog")
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(ingredients_router)
    app.include_router(products_router)
    app.include_router(settings_router)

    @app.exception_handler(InvalidInputError)
    async def invalid_input(_request: Request, exc: InvalidInputError) -> JSONResponse:
        logger.info("Rejected input: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": str(exc)},
        )

    @app.exception_handler(ProductNotFoundError)
    async def product_not_found(
        _request: Request, exc: ProductNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
