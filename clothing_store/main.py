"""Clothing Store API - customer measurements and order history.

This is the main entry point. Run with ``python -m clothing_store.main``.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException

from clothing_store import __version__
from clothing_store.api.router import api_router
from clothing_store.core.config import HOST, PORT, settings
from clothing_store.core.database import Database
from clothing_store.core.exceptions import ClothingStoreError, CustomerNotFoundError
from clothing_store.core.logging import get_logger, setup_logging
from clothing_store.db.seed import init_db

STATIC_DIR = Path(__file__).resolve().parent / "static"

logger = get_logger(__name__)


def get_cors_headers(request: Request) -> dict:
    """Get CORS headers based on request origin."""
    origin = request.headers.get("origin", "")
    if not origin:
        return {}
    if "*" in settings.cors_origins:
        return {"Access-Control-Allow-Origin": "*"}
    if origin in settings.cors_origins:
        return {
            "Access-Control-Allow-Origin": origin,
            "Access-Control-Allow-Credentials": "true",
        }
    return {}


def error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    """JSON error body in the shape the frontend expects."""
    return JSONResponse(
        status_code=status_code,
        content={"error": message},
        headers=get_cors_headers(request),
    )


def create_app(database_url: Optional[str] = None, seed: Optional[bool] = None) -> FastAPI:
    """Build the application.

    The store is opened in the lifespan and closed on shutdown (Ctrl-C
    included), so writes are flushed before the process exits.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        setup_logging()
        logger.info("Starting Clothing Store API", version=__version__, env=settings.app_env)

        database = Database(database_url or settings.database_url, echo=settings.debug)
        try:
            await init_db(database, seed=settings.seed_sample_data if seed is None else seed)
            app.state.database = database
            logger.info("Server ready", url=f"http://localhost:{PORT}", database=database.url)
            yield
        finally:
            logger.info("Shutting down Clothing Store API")
            await database.close()

    app = FastAPI(
        title=settings.app_name,
        description="""
## Clothing Store API

Keeps customer details, body measurements and order counts for a tailoring shop.

### Key Features
- **Customers**: create, list, search, update and delete customer records
- **Measurements**: upper and lower body measurements in centimeters
- **Statistics**: customer totals and summed order counts
- **Export**: full dump of all customers
        """,
        version=__version__,
        lifespan=lifespan,
    )

    allow_all = "*" in settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ClothingStoreError)
    async def clothing_store_exception_handler(request: Request, exc: ClothingStoreError):
        """Handle validation, not-found and storage errors."""
        return error_response(request, exc.status_code, exc.message)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions with CORS headers."""
        return error_response(request, exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Malformed bodies are reported as 400.

        A customer id that is not an integer cannot match a row, so it is
        reported the same way as a missing customer.
        """
        errors = exc.errors()
        if any(tuple(error.get("loc", ()))[:2] == ("path", "customer_id") for error in errors):
            not_found = CustomerNotFoundError()
            return error_response(request, not_found.status_code, not_found.message)

        if errors:
            first = errors[0]
            location = ".".join(str(part) for part in first.get("loc", ()))
            message = f"Invalid request: {location}: {first.get('msg', 'invalid value')}"
        else:
            message = "Invalid request"
        return error_response(request, 400, message)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.error(
            "unhandled_exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=True,
        )

        # Don't expose internal errors in production
        if settings.is_production:
            return error_response(request, 500, "Internal server error")
        return error_response(request, 500, str(exc))

    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/", include_in_schema=False)
    async def root():
        """Serve the frontend."""
        return FileResponse(STATIC_DIR / "index.html")

    # Registered last so API routes take precedence
    app.mount("/", StaticFiles(directory=STATIC_DIR, check_dir=False), name="static")

    return app


app = create_app()


def run() -> None:
    """Start the server on the fixed port."""
    import uvicorn

    uvicorn.run(
        "clothing_store.main:app",
        host=HOST,
        port=PORT,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    run()
