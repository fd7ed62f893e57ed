"""Domain errors and the FastAPI handlers that turn them into JSON responses."""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


# --- Catalog lookups ---

class CatalogError(KeyError):
    """An id is not present in a read-only catalog."""

    label = "Item"

    def __init__(self, item_id: Optional[str]):
        self.item_id = item_id
        super().__init__(item_id)

    def __str__(self) -> str:
        return f"{self.label} not found: {self.item_id}"


class MaterialNotFound(CatalogError):
    label = "Material"


class FurnitureTypeNotFound(CatalogError):
    label = "Furniture type"


class TemplateNotFound(CatalogError):
    label = "Furniture template"


# --- Estimation ---

class EstimationError(ValueError):
    """Rejected estimate request. Terminal for that call; nothing partial is returned."""

    kind = "EstimationError"

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(message)


class UnknownMaterial(EstimationError):
    kind = "UnknownMaterial"


class UnknownFurnitureType(EstimationError):
    kind = "UnknownFurnitureType"


class InvalidDimensions(EstimationError):
    kind = "InvalidDimensions"


def _error_body(message: str, **extra) -> dict:
    body = {"success": False, "message": message}
    body.update({k: v for k, v in extra.items() if v is not None})
    return body


def register_exception_handlers(app: FastAPI) -> None:
    """Register domain exception handlers with the FastAPI app."""

    @app.exception_handler(EstimationError)
    async def estimation_error_handler(request: Request, exc: EstimationError) -> JSONResponse:
        logger.info("Estimate rejected (%s): %s", exc.kind, exc.message)
        return JSONResponse(
            status_code=400,
            content=_error_body(exc.message, error=exc.kind, field=exc.field),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        first = errors[0] if errors else {}
        loc = [str(part) for part in first.get("loc", ()) if part != "body"]
        field = ".".join(loc) or None
        message = first.get("msg", "Invalid request body")
        if field:
            message = f"{field}: {message}"
        logger.info("Request rejected on %s: %s", request.url.path, message)
        return JSONResponse(
            status_code=400,
            content=_error_body(message, error="InvalidRequest", field=field),
        )

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content=_error_body(str(exc), error=type(exc).__name__),
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=_error_body("Internal server error", error="InternalError"),
        )
