# storage_api/main.py
import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from storage_api.config import settings
from storage_api.database import engine, init_db
from storage_api.errors import StorageError, status_code_for
from storage_api.routes.products import router as products_router
from storage_api.routes.warehouses import router as warehouses_router
from storage_api.utils.responses import envelope, error_response

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.CREATE_TABLES:
        init_db(engine)
    yield


def _validation_message(exc: RequestValidationError) -> str:
    locations = {err.get("loc", ("",))[0] for err in exc.errors()}
    if "path" in locations:
        return "invalid id"
    if "body" in locations:
        return "invalid request body"
    return "invalid request"


async def handle_validation_error(request: Request, exc: RequestValidationError):
    # Bad ids and bodies are client errors, reported before any store call
    return error_response(400, _validation_message(exc))


async def handle_storage_error(request: Request, exc: StorageError):
    code = status_code_for(exc.kind)
    if code == 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return error_response(500, "internal server error")
    return error_response(code, exc.message)


async def handle_http_error(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, "internal server error")


async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        # Unhandled errors still get a request line; the 500 body comes from the exception handler
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, status_code, elapsed_ms)


def create_app() -> FastAPI:
    app = FastAPI(title="Storage API", version="1.0.0", lifespan=lifespan)

    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StorageError, handle_storage_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    app.middleware("http")(log_requests)

    # Router registration
    app.include_router(products_router)
    app.include_router(warehouses_router)

    @app.get("/")
    def read_root():
        return envelope("Storage API is running")

    return app


app = create_app()
