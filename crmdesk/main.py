"""Main server application."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from minio.error import S3Error
from urllib3.exceptions import HTTPError as MinioConnectionError

from .api import router as api_router
from .api import router_metrics as api_router_metrics
from .core.config import get_server_settings
from .core.dependencies import get_minio_client
from .core.logging_config import configure_logging
from .core.middleware import PrometheusMiddleware
from .core.services.errors import ServiceError
from .core.storage import AvatarStorage

settings = get_server_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application lifespan events."""

    # Startup
    configure_logging(settings)
    logger.info(
        f"Server configured with host={settings.api_host}, port={settings.api_port}"
    )

    storage = AvatarStorage(
        get_minio_client(), settings.minio_bucket_name, settings.minio_public_url
    )
    try:
        storage.ensure_bucket_exists()
    except (S3Error, MinioConnectionError) as e:
        logger.error(f"Error creating bucket: {e}")

    yield  # Server is running

    # Shutdown
    logger.info("Server shutting down...")


app = FastAPI(
    title="CRMDesk API",
    description="Backend of the CRM dashboard",
    version="0.1.0",
    lifespan=lifespan,
    redirect_slashes=False,
)
app_metrics = FastAPI(
    title="CRMDesk Metrics API",
    description="Metrics endpoint for Prometheus",
    version="0.1.0",
)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.debug(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


app.add_middleware(PrometheusMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")

app_metrics.include_router(api_router_metrics)
