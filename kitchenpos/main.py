from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from kitchenpos.core.config import get_settings
from kitchenpos.core.exceptions import KitchenPosError
from kitchenpos.routers.health import router as health_router
from kitchenpos.routers.menu_groups import router as menu_groups_router
from kitchenpos.routers.menus import router as menus_router
from kitchenpos.routers.order_tables import router as order_tables_router
from kitchenpos.routers.orders import router as orders_router
from kitchenpos.routers.products import router as products_router
from kitchenpos.routers.table_groups import router as table_groups_router

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Restaurant point-of-sale API - products, menus, tables, table groups and orders.",
    version="0.1.0",
    debug=settings.DEBUG,
)


# Business rule violations raised by the services
@app.exception_handler(KitchenPosError)
async def kitchenpos_exception_handler(request: Request, exc: KitchenPosError):
    """Map domain errors to their 4xx status with a structured body."""
    logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.error_code,
            "message": exc.message,
        }
    )


# Global exception handler for unhandled errors
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle unexpected server errors with structured response."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again later.",
            "request_id": request.headers.get("X-Request-ID"),
        }
    )

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health_router)
app.include_router(products_router, prefix="/api")
app.include_router(menu_groups_router, prefix="/api")
app.include_router(menus_router, prefix="/api")
app.include_router(order_tables_router, prefix="/api")
app.include_router(table_groups_router, prefix="/api")
app.include_router(orders_router, prefix="/api")


@app.get("/")
def read_root():
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "docs": "/docs",
        "health": "/health"
    }
