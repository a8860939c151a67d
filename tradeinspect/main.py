from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from tradeinspect.config import get_settings
from tradeinspect.database import init_db
from tradeinspect.core.errors import AppError
import logging

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events"""
    # Startup
    await init_db()
    logger.info(f"Trade inspection API started ({settings.ENVIRONMENT})")
    yield
    # Shutdown
    logger.info("Trade inspection API stopped")


app = FastAPI(
    title="Trade Inspection Marketplace",
    description="Customer, inspector and company registries, inspection parameter catalogs and enquiries",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

if settings.ENVIRONMENT == "development":
    logger.info(f"CORS allowed origins: {settings.cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)

# Add Gzip compression
app.add_middleware(GZipMiddleware, minimum_size=1000)


def _field_name(loc) -> str:
    parts = [str(part) for part in loc if part not in ("body", "query", "path", "header")]
    return ".".join(parts) or "body"


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report unparseable or invalid request data as 400 with the offending fields"""
    raw_errors = exc.errors()
    errors = [
        {"field": _field_name(error.get("loc", ())), "message": error.get("msg", "")}
        for error in raw_errors
    ]
    missing = [error["field"] for error, raw in zip(errors, raw_errors) if raw.get("type") == "missing"]

    if missing and len(missing) == len(errors):
        message = f"Required fields missing: {', '.join(missing)}"
    else:
        fields = []
        for error in errors:
            if error["field"] not in fields:
                fields.append(error["field"])
        message = f"Validation failed: {', '.join(fields)}"

    logger.warning(f"{request.method} {request.url.path} rejected: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": message, "errors": errors},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail}, headers=exc.headers)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    content = {"message": "Internal server error"}
    if not settings.is_production:
        content["error"] = str(exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Trade Inspection Marketplace API",
        "version": "1.0.0",
        "docs": "/docs",
        "status": "operational"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "environment": settings.ENVIRONMENT
    }


# Import and include routers
from tradeinspect.api.v1 import (  # noqa: E402
    auth,
    customers,
    indian_inspector,
    international_inspector,
    indian_company,
    international_company,
    enquiry,
    physical_parameter,
    chemical_parameter,
)

prefix = settings.API_PREFIX
app.include_router(customers.router, prefix=f"{prefix}/customers", tags=["Customers"])
app.include_router(indian_inspector.router, prefix=f"{prefix}/indianinspector", tags=["Indian Inspectors"])
app.include_router(
    international_inspector.router, prefix=f"{prefix}/internationalinspector", tags=["International Inspectors"]
)
app.include_router(auth.router, prefix=f"{prefix}/auth", tags=["Authentication"])
app.include_router(
    international_company.router, prefix=f"{prefix}/internationalcompany", tags=["International Companies"]
)
app.include_router(indian_company.router, prefix=f"{prefix}/indiancompany", tags=["Indian Companies"])
app.include_router(enquiry.router, prefix=f"{prefix}/raiseenquiry", tags=["Enquiries"])
app.include_router(physical_parameter.router, prefix=f"{prefix}/physical-parameter", tags=["Physical Parameters"])
app.include_router(chemical_parameter.router, prefix=f"{prefix}/chemical-parameter", tags=["Chemical Parameters"])
