"""
Kitchen Control - Backend API
Back-office de pedidos de tiendas a la cocina central
"""
import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables before settings are read
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from kitchen_control.api import orders
from kitchen_control.core.config import settings
from kitchen_control.core.database import check_database, init_db
from kitchen_control.core.exceptions import (
    ErrorKind,
    InvalidRequestError,
    KitchenControlException,
    status_code_for,
)
from kitchen_control.domain.api_response import ApiResponse

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Crear tablas al arrancar"""
    init_db()
    yield


# Crear aplicación FastAPI
app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
    debug=settings.API_DEBUG,
    lifespan=lifespan,
)

ALLOWED_ORIGINS = settings.get_allowed_origins()

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials="*" not in ALLOWED_ORIGINS,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


# ============================================================================
# Error envelope
# ============================================================================

def error_response(kind: ErrorKind, message: str) -> JSONResponse:
    """Render the ApiResponse envelope for an error kind"""
    status_code = status_code_for(kind)
    body = ApiResponse(code=status_code, message=message)
    return JSONResponse(status_code=status_code, content=body.to_dict())


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = error.get("loc", ())
        location = ".".join(str(item) for item in loc)
        part = f"{location}: {error.get('msg')}" if location else str(error.get("msg"))
        # Echo rejected path/query values so the client sees which id was refused
        if loc and loc[0] in ("path", "query") and "input" in error:
            part += f" (got {error['input']})"
        parts.append(part)
    return "Invalid request: " + "; ".join(parts)


@app.exception_handler(KitchenControlException)
async def kitchen_control_exception_handler(request: Request, exc: KitchenControlException):
    logger.warning(f"{request.method} {request.url.path} -> {exc.to_dict()}")
    return error_response(exc.kind, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    invalid = InvalidRequestError(
        _describe_validation_error(exc),
        extra={"errors": len(exc.errors())},
    )
    return await kitchen_control_exception_handler(request, invalid)


@app.exception_handler(Exception)
async def unexpected_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(ErrorKind.UNEXPECTED, str(exc) or exc.__class__.__name__)


# Include API routers
app.include_router(orders.router)


@app.get("/")
async def root():
    """Endpoint raíz - Verificación de estado de la API"""
    return {
        "message": "Kitchen Control API",
        "status": "online",
        "version": settings.API_VERSION,
        "description": "API para pedidos de tiendas a la cocina central"
    }


@app.get("/health")
def health():
    """Health check endpoint para monitoreo - tests database connectivity"""
    start_time = time.time()

    connected, db_latency_ms, db_error = check_database()
    db_status = "connected" if connected else "disconnected"

    total_latency_ms = round((time.time() - start_time) * 1000, 2)

    return {
        "status": "healthy" if connected else "degraded",
        "service": "kitchen-control-api",
        "version": settings.API_VERSION,
        "database": {
            "status": db_status,
            "latency_ms": db_latency_ms,
            "error": db_error,
        },
        "total_latency_ms": total_latency_ms
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "kitchen_control.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
