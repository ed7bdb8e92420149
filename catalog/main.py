# catalog/main.py
import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import router as api_router
from .config import settings
from .core import NotFoundError, StorageError, ValidationError
from .database import ProductStore
from .logging_config import setup_logging
from .pages import render_error, router as pages_router

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


def _wants_json(request: Request) -> bool:
    return request.url.path.startswith("/api/")


def create_app(store: Optional[ProductStore] = None) -> FastAPI:
    """Build the catalog app around ``store``.

    Without a store, one is created at ``settings.data_path``.  The store is
    initialized on startup unless already done; a ``StorageError`` there
    aborts startup.
    """
    setup_logging(settings.log_level, settings.log_file)
    if store is None:
        store = ProductStore(settings.data_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # run() initializes up front so it can exit cleanly on failure
        if not store.initialized:
            store.initialize()
        logger.info("Serving products from %s", store.path)
        yield

    app = FastAPI(title=settings.project_name, lifespan=lifespan)
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
        return response

    # ---------------------------
    # Error mapping
    # ---------------------------
    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content={"message": exc.message, "errors": exc.errors})

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"message": exc.message})

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = [
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in exc.errors()
        ]
        return JSONResponse(status_code=400, content={"message": "Invalid request", "errors": errors})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if _wants_json(request):
            return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})
        message = "Page not found" if exc.status_code == 404 else str(exc.detail)
        return render_error(request, message, exc.status_code)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        if _wants_json(request):
            return JSONResponse(status_code=500, content={"message": "Internal server error"})
        return render_error(request, "Something went wrong on the server", 500)

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    app.include_router(api_router, prefix="/api/products", tags=["products"])
    app.include_router(pages_router)
    return app


app = create_app()


def run() -> None:
    store = ProductStore(settings.data_path)
    try:
        store.initialize()
    except StorageError as exc:
        logger.critical("Error ensuring data directory exists: %s", exc)
        sys.exit(1)
    uvicorn.run(create_app(store), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
