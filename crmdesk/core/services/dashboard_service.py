"""Service for managing the per-user dashboard."""

from typing import Iterable, List, Optional

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from ...schemas.dashboard import DashboardState, WidgetInfo, WidgetPlacement
from ..dependencies import register_service
from ..layout import Layout, compact_layout, dump_layout, find_free_slot, parse_layout
from ..repository import DashboardPreferencesRepository
from ..widgets import (
    DEFAULT_VISIBLE_WIDGETS,
    DEFAULT_WIDGETS,
    NEW_WIDGET_HEIGHT,
    NEW_WIDGET_WIDTH,
    WIDGET_KEYS,
    is_known_widget,
    sanitize_widget_keys,
)
from .errors import ValidationError


def _merge_card_order(card_order: Iterable[str], visible: List[str]) -> List[str]:
    """Sanitized order with every visible key present."""
    order = sanitize_widget_keys(card_order)
    order.extend(key for key in visible if key not in order)
    return order


def build_state(
    visible_widgets: Iterable[str],
    card_order: Optional[Iterable[str]],
    layout: Layout,
) -> DashboardState:
    """Sanitize keys and compact the layout against the visible set."""
    visible = sanitize_widget_keys(visible_widgets)
    order = _merge_card_order(
        card_order if card_order is not None else WIDGET_KEYS, visible
    )
    return DashboardState(
        visible_widgets=visible,
        card_order=order,
        layout=compact_layout(layout, visible),
    )


@register_service
class DashboardService:
    """Service for managing the per-user dashboard."""

    def __init__(self, db: AsyncSession):
        self.repo = DashboardPreferencesRepository(db)

    @classmethod
    def create(cls, db: AsyncSession) -> "DashboardService":
        return cls(db)

    async def get_dashboard(self, user_id: int) -> DashboardState:
        """Get the dashboard of a user, falling back to defaults.

        Stored values are treated leniently: unknown widget keys are dropped,
        a malformed layout reads as empty.
        """
        prefs = await self.repo.get_by_user_id(user_id)
        if prefs is None:
            logger.debug(f"No dashboard stored for user {user_id}, using defaults")
            return build_state(DEFAULT_VISIBLE_WIDGETS, WIDGET_KEYS, {})

        visible = prefs.visible_widgets
        if not isinstance(visible, list):
            visible = DEFAULT_VISIBLE_WIDGETS
        card_order = prefs.card_order if isinstance(prefs.card_order, list) else None

        return build_state(visible, card_order, parse_layout(prefs.layout_view))

    async def save_dashboard(
        self,
        user_id: int,
        visible_widgets: List[str],
        card_order: Optional[List[str]],
        layout: Layout,
    ) -> DashboardState:
        """Compact and persist the whole dashboard (last write wins)."""
        state = build_state(visible_widgets, card_order, layout)
        await self.repo.create_or_update(
            user_id,
            state.visible_widgets,
            state.card_order,
            dump_layout(state.layout),
        )
        logger.info(
            f"Saved dashboard for user {user_id} with "
            f"{len(state.visible_widgets)} visible widgets"
        )
        return state

    async def apply_widget_changes(
        self,
        user_id: int,
        pending: List[str],
        visible_widgets: List[str],
        card_order: List[str],
        layout: Layout,
    ) -> DashboardState:
        """Apply pending widget toggles and save the result.

        A pending key that is currently visible is removed from the dashboard;
        one that is hidden is added at the first free 3x2 slot.
        """
        unknown = [key for key in pending if not is_known_widget(key)]
        if unknown:
            raise ValidationError(f"Unknown widgets: {', '.join(unknown)}")

        currently_visible = set(visible_widgets)
        final_visible = list(visible_widgets)
        final_order = list(card_order)
        final_layout = dict(layout)

        toggles = list(dict.fromkeys(pending))
        for key in toggles:
            if key in currently_visible:
                final_visible = [w for w in final_visible if w != key]
                final_order = [w for w in final_order if w != key]
                final_layout.pop(key, None)
            else:
                final_visible.append(key)
                if key not in final_order:
                    final_order.append(key)
                position = find_free_slot(
                    final_layout, NEW_WIDGET_WIDTH, NEW_WIDGET_HEIGHT
                )
                final_layout[key] = WidgetPlacement(
                    x=position.x, y=position.y, w=NEW_WIDGET_WIDTH, h=NEW_WIDGET_HEIGHT
                )

        logger.debug(f"Applying {len(toggles)} widget changes for user {user_id}")
        return await self.save_dashboard(
            user_id, final_visible, final_order, final_layout
        )

    async def reset_dashboard(self, user_id: int) -> bool:
        """Forget the stored dashboard so the next read yields defaults."""
        deleted = await self.repo.delete_by_user_id(user_id)
        if deleted:
            logger.info(f"Reset dashboard for user {user_id}")
        return deleted is not None

    @staticmethod
    def get_widget_catalog(visible_widgets: Iterable[str]) -> List[WidgetInfo]:
        visible = set(visible_widgets)
        return [
            WidgetInfo(key=widget.key, title=widget.title, visible=widget.key in visible)
            for widget in DEFAULT_WIDGETS
        ]
