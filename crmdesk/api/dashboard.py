"""Routes for the user dashboard."""

from typing import Dict, List

from fastapi import APIRouter, Depends
from loguru import logger

from ..core.auth import get_current_user
from ..core.database import User
from ..core.dependencies import get_service
from ..core.layout import compact_layout, find_free_slot
from ..core.services import DashboardService, WidgetDataService
from ..schemas.dashboard import (
    CompactLayoutRequest,
    DashboardState,
    DashboardSummary,
    FreeSlotRequest,
    GridPositionResponse,
    SaveDashboardRequest,
    WidgetChangesRequest,
    WidgetInfo,
    WidgetPlacement,
)

router = APIRouter()


@router.get("/preferences", response_model=DashboardState)
async def get_dashboard_preferences(
    current_user: User = Depends(get_current_user),
    dashboard_service: DashboardService = Depends(get_service(DashboardService)),
):
    """Visible widgets, card order and compacted layout of the current user."""
    return await dashboard_service.get_dashboard(current_user.id)


@router.put("/preferences", response_model=DashboardState)
async def save_dashboard_preferences(
    request: SaveDashboardRequest,
    current_user: User = Depends(get_current_user),
    dashboard_service: DashboardService = Depends(get_service(DashboardService)),
):
    return await dashboard_service.save_dashboard(
        current_user.id, request.visible_widgets, request.card_order, request.layout
    )


@router.delete("/preferences", response_model=DashboardState)
async def reset_dashboard_preferences(
    current_user: User = Depends(get_current_user),
    dashboard_service: DashboardService = Depends(get_service(DashboardService)),
):
    """Drop the stored dashboard and return the defaults."""
    await dashboard_service.reset_dashboard(current_user.id)
    return await dashboard_service.get_dashboard(current_user.id)


@router.post("/preferences/changes", response_model=DashboardState)
async def apply_widget_changes(
    request: WidgetChangesRequest,
    current_user: User = Depends(get_current_user),
    dashboard_service: DashboardService = Depends(get_service(DashboardService)),
):
    """Apply the widget toggles collected in customize mode, then save."""
    return await dashboard_service.apply_widget_changes(
        current_user.id,
        request.pending,
        request.visible_widgets,
        request.card_order,
        request.layout,
    )


@router.get("/widgets", response_model=List[WidgetInfo])
async def get_widget_catalog(
    current_user: User = Depends(get_current_user),
    dashboard_service: DashboardService = Depends(get_service(DashboardService)),
):
    state = await dashboard_service.get_dashboard(current_user.id)
    return dashboard_service.get_widget_catalog(state.visible_widgets)


@router.post("/layout/compact", response_model=Dict[str, WidgetPlacement])
async def compact(
    request: CompactLayoutRequest,
    _: User = Depends(get_current_user),
):
    return compact_layout(request.layout, request.visible_widgets)


@router.post("/layout/free-slot", response_model=GridPositionResponse)
async def free_slot(
    request: FreeSlotRequest,
    _: User = Depends(get_current_user),
):
    position = find_free_slot(request.layout, request.width, request.height)
    logger.debug(
        f"Free slot for {request.width}x{request.height}: ({position.x}, {position.y})"
    )
    return GridPositionResponse(x=position.x, y=position.y)


@router.get("/summary", response_model=DashboardSummary)
async def get_dashboard_summary(
    current_user: User = Depends(get_current_user),
    widget_data_service: WidgetDataService = Depends(get_service(WidgetDataService)),
):
    """Aggregates behind the dashboard widgets."""
    return await widget_data_service.get_summary(current_user.id)
