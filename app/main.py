# app/main.py
import secrets
from datetime import datetime, timezone
from typing import Dict, List, Optional

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, get_settings
from .database import ProductStore
from .errors import VALIDATION_FAILED, UnauthorizedError
from .logger import configure, get_logger
from .models import ErrorOut, Product, ProductIn, ProductPage, ProductUpdate
from .sdk import (
    create_product_logic,
    delete_product_logic,
    get_product_logic,
    list_products_logic,
    product_stats_logic,
    search_products_logic,
    update_product_logic,
)

logger = get_logger("api")

API_PREFIX = "/api"
WELCOME = "Welcome to the Product API! Go to /api/products to see all products."


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


# ---------------------------
# Product endpoints
# ---------------------------
# search and stats must be declared before /{product_id}, otherwise the
# path parameter captures them as ids.
router = APIRouter(prefix=f"{API_PREFIX}/products", responses={400: {"model": ErrorOut}, 401: {"model": ErrorOut}})


@router.get("", response_model=ProductPage)
async def list_products(
    category: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    store: ProductStore = Depends(get_store),
):
    return await list_products_logic(store, category, page, limit)


@router.get("/search", response_model=List[Product])
async def search_products(q: Optional[str] = None, store: ProductStore = Depends(get_store)):
    return await search_products_logic(store, q)


@router.get("/stats", response_model=Dict[str, int])
async def product_stats(store: ProductStore = Depends(get_store)):
    return await product_stats_logic(store)


@router.get("/{product_id}", response_model=Product, responses={404: {"model": ErrorOut}})
async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    return await get_product_logic(store, product_id)


@router.post("", response_model=Product, status_code=201)
async def create_product(payload: ProductIn, store: ProductStore = Depends(get_store)):
    return await create_product_logic(store, payload)


@router.put("/{product_id}", response_model=Product, responses={404: {"model": ErrorOut}})
async def update_product(product_id: str, payload: ProductUpdate, store: ProductStore = Depends(get_store)):
    return await update_product_logic(store, product_id, payload)


@router.delete("/{product_id}", status_code=204, response_class=Response, responses={404: {"model": ErrorOut}})
async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    await delete_product_logic(store, product_id)
    return Response(status_code=204)


# ---------------------------
# App factory
# ---------------------------
def create_app(store: Optional[ProductStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure(settings.log_level)

    app = FastAPI(title="product-api (in-memory)")
    app.state.store = store if store is not None else ProductStore.with_sample_data()
    app.state.settings = settings

    @app.get("/", response_class=PlainTextResponse)
    async def welcome():
        return WELCOME

    app.include_router(router)

    # ---------------------------
    # Error handling
    # ---------------------------
    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.detail)
        return _error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("%s %s -> 400: %s", request.method, request.url.path, exc.errors())
        return _error_response(400, VALIDATION_FAILED)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return _error_response(500, "Internal Server Error")

    # ---------------------------
    # Middleware (last registered runs first)
    # ---------------------------
    @app.middleware("http")
    async def require_api_key(request: Request, call_next):
        path = request.url.path
        if path == API_PREFIX or path.startswith(API_PREFIX + "/"):
            expected = request.app.state.settings.api_key
            provided = request.headers.get("x-api-key")
            if not expected or provided is None or not secrets.compare_digest(provided.encode(), expected.encode()):
                exc = UnauthorizedError()
                logger.warning("%s %s -> 401: %s", request.method, path, exc.detail)
                return _error_response(exc.status_code, exc.detail)
        return await call_next(request)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info("%s %s - %s", request.method, request.url.path, datetime.now(timezone.utc).isoformat())
        return await call_next(request)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    logger.info("Server is running on http://localhost:%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
