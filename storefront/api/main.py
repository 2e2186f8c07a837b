"""
FastAPI app assembly: logging, middleware, error handlers and router wiring.
"""
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request

from storefront import __version__
from storefront.api.errors import register_error_handlers
from storefront.api.auth import router as auth_router
from storefront.api.health import router as health_router
from storefront.api.orders import router as orders_router
from storefront.api.payments import router as payments_router
from storefront.api.product_skus import router as product_skus_router
from storefront.api.products import router as products_router
from storefront.api.users import router as users_router
from storefront.utils.settings import get_settings

settings = get_settings()

# Configure logging
LOG_LEVEL = getattr(logging, settings.log_level, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s env=%s", settings.log_level, settings.app_env)

# Database schema is managed by Alembic migrations.

app = FastAPI(
    title="Storefront API",
    description="Users, catalog, orders, payments and Google login for the storefront.",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info("Incoming request: method=%s url=%s", request.method, request.url)
    return await call_next(request)


register_error_handlers(app)


@app.get("/")
def root():
    return {"message": "Storefront API"}


app.include_router(health_router)
app.include_router(users_router)
app.include_router(products_router)
app.include_router(product_skus_router)
app.include_router(orders_router)
app.include_router(payments_router)
app.include_router(auth_router)
