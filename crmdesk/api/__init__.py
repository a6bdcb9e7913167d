"""API router initialization."""

from fastapi import APIRouter

from .auth import router as auth_router
from .dashboard import router as dashboard_router
from .email_templates import router as email_templates_router
from .health import router as health_router
from .metrics import router as metrics_router
from .profile import router as profile_router
from .records import router as records_router
from .sessions import router as sessions_router
from .user_preferences import router as user_preferences_router

router = APIRouter()
router_metrics = APIRouter()

# Include all sub-routers
router.include_router(auth_router, prefix="/auth", tags=["auth"])
router.include_router(dashboard_router, prefix="/dashboard", tags=["dashboard"])
router.include_router(records_router, prefix="/records", tags=["records"])
router.include_router(
    email_templates_router, prefix="/email-templates", tags=["email_templates"]
)
router.include_router(sessions_router, prefix="/sessions", tags=["sessions"])
router.include_router(profile_router, prefix="/profile", tags=["profile"])
router.include_router(
    user_preferences_router,
    prefix="/user-preferences",
    tags=["user_preferences"],
)
router.include_router(health_router, prefix="/health", tags=["health"])
router_metrics.include_router(metrics_router, prefix="/metrics", tags=["metrics"])
