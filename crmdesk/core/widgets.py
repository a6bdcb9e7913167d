"""Catalog of dashboard widgets."""

from typing import Iterable, List, NamedTuple


class WidgetDefinition(NamedTuple):
    key: str
    title: str
    visible: bool


# Display order of a fresh dashboard
DEFAULT_WIDGETS: List[WidgetDefinition] = [
    WidgetDefinition("leads", "My Leads", True),
    WidgetDefinition("contacts", "My Contacts", True),
    WidgetDefinition("deals", "My Deals", True),
    WidgetDefinition("accountsSummary", "My Accounts", True),
    WidgetDefinition("quickActions", "Quick Actions", True),
    WidgetDefinition("todaysAgenda", "Today's Agenda", True),
    WidgetDefinition("upcomingMeetings", "Upcoming Meetings", True),
    WidgetDefinition("taskReminders", "Task Reminders", True),
    WidgetDefinition("recentActivities", "Recent Activities", False),
    WidgetDefinition("emailStats", "Email Statistics", False),
    WidgetDefinition("weeklySummary", "Weekly Summary", False),
    WidgetDefinition("followUpsDue", "Follow-ups Due", False),
]

WIDGET_KEYS: List[str] = [widget.key for widget in DEFAULT_WIDGETS]
DEFAULT_VISIBLE_WIDGETS: List[str] = [w.key for w in DEFAULT_WIDGETS if w.visible]

# Size given to a widget added from the customize panel
NEW_WIDGET_WIDTH = 3
NEW_WIDGET_HEIGHT = 2


def is_known_widget(key: str) -> bool:
    return key in WIDGET_KEYS


def sanitize_widget_keys(keys: Iterable[str]) -> List[str]:
    """Drop unknown and repeated keys, keeping the first occurrence."""
    seen = set()
    result = []
    for key in keys:
        if not is_known_widget(key) or key in seen:
            continue
        seen.add(key)
        result.append(key)
    return result
