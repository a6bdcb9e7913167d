from contextlib import asynccontextmanager
from typing import Callable, Type, TypeVar

from fastapi import Depends
from loguru import logger
from minio import Minio
from sqlalchemy.ext.asyncio import AsyncSession

from .config import get_server_settings
from .database import async_session_maker

T = TypeVar("T")

_service_registry = {}


@asynccontextmanager
async def get_db():
    """
    Dependency to get a database session in an async context
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_db_session():
    """
    Dependency to get a database session in a Depends
    """
    async with get_db() as session:
        yield session


def get_minio_client() -> Minio:
    """Build a MinIO client from the storage settings."""
    settings = get_server_settings()
    return Minio(
        settings.minio_host,
        access_key=settings.minio_access_key,
        secret_key=settings.minio_secret_key,
        secure=settings.minio_secure,
    )


def register_service(
    service_class: Type[T] | None = None,
) -> Callable[[Type[T]], Type[T]] | Type[T]:
    """Decorator to register services and their dependencies"""

    def decorator(cls: Type[T]) -> Type[T]:
        # Create default factory if none exists
        if not hasattr(cls, "create"):

            def default_factory(db: AsyncSession) -> T:
                return cls(db)

            _service_registry[cls] = default_factory
        else:
            _service_registry[cls] = cls.create
        return cls

    if service_class is None:
        return decorator
    return decorator(service_class)


def get_service(service_class: Type[T]) -> Callable[[AsyncSession], T]:
    """Dependency injector for services"""

    def factory(db: AsyncSession = Depends(get_db_session)) -> T:
        if service_class not in _service_registry:
            raise ValueError(f"Service {service_class.__name__} not registered")
        logger.debug(f"Creating service {service_class.__name__}")
        return _service_registry[service_class](db)

    return factory
