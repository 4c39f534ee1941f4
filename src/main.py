"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import assert_never

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api import categories, todos
from src.config import get_settings
from src.database import Database
from src.services.errors import ErrorKind, StoreError

API_VERSION = "1.0.0"

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database at startup and release it at shutdown."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.state.database = Database(settings.database_url)
    logger.info(f"Todo API {API_VERSION} started ({settings.environment})")
    yield
    app.state.database.close()


app = FastAPI(
    title="Todo App API",
    description="Todo list with categories, filtering and pagination",
    version=API_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(todos.router)
app.include_router(categories.router)


def status_for(kind: ErrorKind) -> int:
    """Map a store error kind onto an HTTP status."""
    match kind:
        case ErrorKind.VALIDATION | ErrorKind.CONFLICT:
            return status.HTTP_400_BAD_REQUEST
        case ErrorKind.NOT_FOUND:
            return status.HTTP_404_NOT_FOUND
        case ErrorKind.INTERNAL:
            return status.HTTP_500_INTERNAL_SERVER_ERROR
        case _:
            assert_never(kind)


def describe_validation_error(exc: RequestValidationError) -> str:
    """Turn the first request validation error into a readable message."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    error = errors[0]
    path = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    field = path[-1] if path else ""

    if error["type"] == "json_invalid":
        return "Malformed JSON body"
    if error["type"] == "missing":
        name = field.replace("_", " ").capitalize() if field else "Request body"
        return f"{name} is required"

    message = error["msg"].removeprefix("Value error, ")
    if error["type"] == "value_error" or not field:
        return message
    return f"Invalid {field}: {message}"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    if exc.kind is ErrorKind.INTERNAL:
        logger.error(f"Store failure on {request.method} {request.url.path}: {exc.message}")
        return error_response(status_for(exc.kind), "Internal server error")
    return error_response(status_for(exc.kind), exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return error_response(status.HTTP_400_BAD_REQUEST, describe_validation_error(exc))


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        return error_response(exc.status_code, "Endpoint not found. Visit /docs for documentation.")
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


@app.get("/", include_in_schema=False)
async def root():
    """Redirect to the interactive API docs."""
    return RedirectResponse(url="/docs", status_code=status.HTTP_302_FOUND)


@app.get("/api")
async def api_info():
    """Describe the API."""
    return {
        "message": "Todo App API",
        "version": API_VERSION,
        "documentation": "/docs",
        "endpoints": {
            "health": "GET /api/health",
            "todos": "GET /api/todos",
            "categories": "GET /api/categories",
        },
    }


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {
        "success": True,
        "message": "Server is running",
        "timestamp": datetime.now(UTC).isoformat(),
        "version": API_VERSION,
        "environment": settings.environment,
    }
