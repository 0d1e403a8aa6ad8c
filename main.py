"""
Main FastAPI application entry point.
"""
import time
import logging
import warnings
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError
from starlette import status
from starlette.middleware.base import BaseHTTPMiddleware
from sqlalchemy.exc import OperationalError

from config import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
    force=True
)

logger = logging.getLogger(__name__)

from alembic_runner import run_migrations, get_current_revision
from Common_module.bootstrap import seed_reference_data
from Common_module.errors import ParishError

# Routers
from Auth_module.Auth_router import router as auth_router
from Audit_module.Admin_router import router as admin_router
from Member_module.Member_router import router as member_router
from Archive_module.Archive_router import router as archive_router
from Baptism_module.Baptism_router import router as baptism_router
from Wedding_module.Wedding_router import router as wedding_router


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log HTTP requests and responses with status codes."""

    async def dispatch(self, request: Request, call_next):
        client_ip = request.client.host if request.client else "unknown"
        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.time() - start_time
            logger.error(
                f"{request.method} {request.url.path} | Status: 500 (SERVER_ERROR) | "
                f"Error: {e} | Duration: {duration:.3f}s | IP: {client_ip}"
            )
            raise

        duration = time.time() - start_time
        status_code = response.status_code
        if 200 <= status_code < 300:
            status_category = "SUCCESS"
        elif 300 <= status_code < 400:
            status_category = "REDIRECT"
        elif 400 <= status_code < 500:
            status_category = "CLIENT_ERROR"
        else:
            status_category = "SERVER_ERROR"

        logger.info(
            f"{request.method} {request.url.path} | "
            f"Status: {status_code} ({status_category}) | "
            f"Duration: {duration:.3f}s | "
            f"IP: {client_ip}"
        )
        return response


def initialize_database():
    """
    Bring the schema up to date and seed reference rows.
    Connection problems are logged; the app still starts and reports errors per request.
    """
    try:
        logger.info("Running database migrations...")
        run_migrations()
    except OperationalError as e:
        logger.error(f"Failed to connect to database during migrations: {e}")
        logger.warning("Migrations will be retried on next startup")
    except Exception as e:
        logger.error(f"Unexpected error during migrations: {e}", exc_info=True)

    try:
        logger.info("Seeding roles and sequence counters...")
        seed_reference_data()
    except OperationalError as e:
        logger.error(f"Failed to connect to database during seeding: {e}")
    except Exception as e:
        logger.error(f"Unexpected error during seeding: {e}", exc_info=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for startup and shutdown."""
    logger.info("Starting application...")
    initialize_database()
    logger.info("Application started successfully")
    yield
    logger.info("Application shutdown complete")


app = FastAPI(
    title="Parish Records API",
    version="1.0.0",
    lifespan=lifespan
)


def _format_validation_errors(exc):
    """Return consistent error structure for 422 responses."""
    detail_list = []
    errors = exc.errors() if hasattr(exc, "errors") else []

    for err in errors:
        loc = err.get("loc", [])
        source = loc[0] if loc else "body"
        field = loc[-1] if len(loc) > 1 else loc[0] if loc else None
        detail_list.append({
            "source": source,
            "field": field,
            "message": err.get("msg"),
            "type": err.get("type")
        })
    return detail_list


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle FastAPI request validation errors."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "status": "error",
            "message": "Request validation failed.",
            "details": _format_validation_errors(exc)
        }
    )


@app.exception_handler(ValidationError)
async def pydantic_validation_exception_handler(request: Request, exc: ValidationError):
    """Handle Pydantic validation errors."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "status": "error",
            "message": "Validation failed.",
            "details": _format_validation_errors(exc)
        }
    )


@app.exception_handler(ParishError)
async def parish_error_handler(request: Request, exc: ParishError):
    """Map application errors to their HTTP status with a short public message."""
    content = dict(exc.extra)
    content.update({"status": "error", "message": exc.message})
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"status": "error", "message": "Internal server error"}
    )


ALLOWED_ORIGINS = settings.allowed_origins
if ALLOWED_ORIGINS == ["*"]:
    warnings.warn("CORS is set to allow all origins. This is not recommended for production.")

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "X-Requested-With"],
)

app.include_router(auth_router)
app.include_router(member_router)
app.include_router(archive_router)
app.include_router(baptism_router)
app.include_router(wedding_router)
app.include_router(admin_router)


@app.get("/")
def root():
    """Root endpoint with API information."""
    return {
        "status": "success",
        "message": "Parish Records API",
        "version": "1.0.0",
        "endpoints": {
            "auth": "/api/auth",
            "members": "/api/members",
            "archives": "/api/archives",
            "baptisms": "/api/baptisms",
            "weddings": "/api/weddings",
            "admin": "/api/admin"
        },
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.get("/health")
def health_check():
    """Health check endpoint for container orchestration."""
    return {
        "status": "healthy",
        "service": "Parish Records API",
        "schema_revision": get_current_revision()
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=5000,
        reload=False,
        log_level="info",
        access_log=True
    )
