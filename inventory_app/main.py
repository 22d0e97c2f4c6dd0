from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from typing import Optional
import logging

import uvicorn

from inventory_app.config import Settings, get_settings
from inventory_app.context import AppContext
from inventory_app.api import products, contact, health

# Configure logging
logging.basicConfig(
    level=get_settings().LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

PRODUCTS_PATH = "/api/products"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    Builds the AppContext on startup and releases it on shutdown.
    """
    # Startup
    logger.info("Starting up application...")
    settings = app.state.settings
    context = AppContext.from_settings(settings)

    if settings.CREATE_TABLES:
        context.create_tables()

    app.state.context = context

    try:
        yield
    finally:
        # Shutdown
        logger.info("Shutting down application...")
        context.close()


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Report malformed requests with a readable message.

    Product requests fail the way the database would fail them: a lookup
    that cannot match is not found, anything else is a server error.
    Other requests get 400.
    """
    message = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    )

    if request.url.path.startswith(PRODUCTS_PATH):
        if request.method == "GET":
            return JSONResponse(status_code=404, content={"error": "Product not found"})
        return JSONResponse(status_code=500, content={"error": message})

    return JSONResponse(status_code=400, content={"error": message})


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"error": str(exc)})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Settings to run with; defaults to the environment

    Returns:
        Configured application. Resources are acquired when its lifespan starts.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="InventoryApp",
        description="""
        Backend for the InventoryApp frontend:

        - **Products**: CRUD, name search, sorting and inventory statistics
        - **Contact**: reCAPTCHA-protected contact form stored in a text log
        """,
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def disable_caching(request: Request, call_next):
        response = await call_next(request)
        response.headers["Cache-Control"] = "no-cache"
        return response

    # Include API routers
    app.include_router(health.router, prefix="/api")
    app.include_router(products.router, prefix="/api")
    app.include_router(contact.router, prefix="/api")

    # Frontend, mounted last so the API routes take precedence
    app.mount(
        "/",
        StaticFiles(directory=settings.STATIC_DIR, html=True, check_dir=False),
        name="static"
    )

    return app


app = create_app()


def run():
    """Serve the application with uvicorn on the configured host and port."""
    settings = get_settings()
    logger.info(f"Server running at http://{settings.HOST}:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
