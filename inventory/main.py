"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from inventory.api import pantry, products, shopping_list
from inventory.config import get_settings
from inventory.errors import (
    InvalidIdentifier,
    InventoryError,
    NotFound,
    StorageUnavailable,
    ValidationFailure,
)

settings = get_settings()
logger = logging.getLogger(__name__)

ERROR_STATUS_CODES: dict[type[InventoryError], int] = {
    InvalidIdentifier: status.HTTP_400_BAD_REQUEST,
    ValidationFailure: status.HTTP_400_BAD_REQUEST,
    NotFound: status.HTTP_404_NOT_FOUND,
    StorageUnavailable: status.HTTP_503_SERVICE_UNAVAILABLE,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    yield


app = FastAPI(
    title="Pantry Inventory API",
    description="Product catalog, pantry stock and an automatically derived shopping list",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(InventoryError)
async def inventory_error_handler(request: Request, exc: InventoryError) -> JSONResponse:
    """Translate domain errors into HTTP responses."""
    status_code = ERROR_STATUS_CODES.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
    return JSONResponse(status_code=status_code, content={"detail": exc.detail})


# Register routers
app.include_router(products.router)
app.include_router(pantry.router)
app.include_router(shopping_list.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
