import logging
import traceback
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware

from src.routers import processo, processo_import
from src.database import Base, engine
from src.middleware.request_logging import RequestLoggingMiddleware
from src.core.settings import get_app_settings
from src.core.container_config import get_configured_container
from src.core.exceptions import (
    BaseApplicationException,
    ValidationException,
    InfrastructureException,
)

settings = get_app_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    Base.metadata.create_all(bind=engine)
    logger.info(f"{settings.app_name} started")
    yield
    engine.dispose()


app = FastAPI(
    title=settings.app_name,
    lifespan=lifespan
)

# Inizializza il container DI
get_configured_container()

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add request logging middleware
app.add_middleware(
    RequestLoggingMiddleware,
    log_requests=settings.log_requests,
    slow_request_threshold=settings.slow_request_threshold
)

# ============================================================================
# GLOBAL EXCEPTION HANDLERS
# ============================================================================


@app.exception_handler(BaseApplicationException)
async def custom_application_exception_handler(request: Request, exc: BaseApplicationException):
    """Handler per eccezioni custom dell'applicazione"""
    logger.error(f"Application exception: {exc.error_code} - {exc.message}", extra={
        "error_code": exc.error_code,
        "details": exc.details,
        "path": str(request.url),
        "method": request.method
    })

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


@app.exception_handler(ValidationException)
async def validation_exception_handler(request: Request, exc: ValidationException):
    """Handler specifico per errori di validazione e per gli errori bloccanti dell'importazione"""
    logger.warning(f"Validation error: {exc.message}", extra={
        "error_code": exc.error_code,
        "details": exc.details,
        "path": str(request.url)
    })

    return JSONResponse(
        status_code=400,
        content=exc.to_dict()
    )


@app.exception_handler(InfrastructureException)
async def infrastructure_exception_handler(request: Request, exc: InfrastructureException):
    """Handler specifico per errori di infrastruttura"""
    logger.error(f"Infrastructure error: {exc.message}", extra={
        "error_code": exc.error_code,
        "path": str(request.url)
    })

    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "error_code": exc.error_code,
            "details": {},
            "status_code": 500
        }
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Handler per errori di validazione FastAPI: i campi mancanti o vuoti sono un 400"""
    logger.warning(f"Request validation error: {exc.errors()}", extra={
        "path": str(request.url),
        "method": request.method
    })

    fields = sorted({str(error["loc"][-1]) for error in exc.errors() if error.get("loc")})
    return JSONResponse(
        status_code=400,
        content={
            "error": "All required fields must be filled in." if fields else "Request validation failed",
            "error_code": "VALIDATION_ERROR",
            "details": {"fields": fields},
            "status_code": 400
        }
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handler per HTTPException di Starlette"""
    logger.info(f"HTTP exception: {exc.status_code} - {exc.detail}", extra={
        "status_code": exc.status_code,
        "path": str(request.url)
    })

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": str(exc.detail),
            "error_code": "HTTP_ERROR",
            "details": {},
            "status_code": exc.status_code
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handler generico per errori non gestiti"""
    logger.error(f"Unhandled exception: {str(exc)}", extra={
        "path": str(request.url),
        "method": request.method,
        "traceback": traceback.format_exc()
    })

    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "error_code": "INTERNAL_SERVER_ERROR",
            "details": {},
            "status_code": 500
        }
    )


app.include_router(processo_import.router)
app.include_router(processo.router)


@app.get("/health")
async def health():
    """Liveness probe"""
    return {"status": "healthy"}
