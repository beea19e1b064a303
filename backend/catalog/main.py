from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from catalog.api.errors import validation_exception_handler
from catalog.api.health import router as health_router
from catalog.api.routes_products import router as products_router
from catalog.config import settings
from catalog.db import init_db
from catalog.logging_config import RequestLoggingMiddleware, setup_logging

logger = setup_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup
    logger.info("Starting %s", settings.SERVICE_NAME)
    init_db()
    try:
        yield
    finally:
        logger.info("Shutting down %s", settings.SERVICE_NAME)


app = FastAPI(
    title="Product Catalog API",
    description="Product catalog CRUD API: commands and queries dispatched through a mediator",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.FRONTEND_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

app.add_exception_handler(RequestValidationError, validation_exception_handler)

app.include_router(health_router)

app.include_router(products_router, prefix="/api/products", tags=["products"])
