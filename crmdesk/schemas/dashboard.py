from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

GRID_COLUMNS = 12


class WidgetPlacement(BaseModel):
    """Position and size of one widget on the 12-column dashboard grid."""

    x: int = Field(..., ge=0, description="Column offset")
    y: int = Field(..., ge=0, description="Row offset")
    w: int = Field(..., ge=1, le=GRID_COLUMNS, description="Width in columns")
    h: int = Field(..., ge=1, description="Height in rows")

    @model_validator(mode="after")
    def check_fits_grid(self) -> "WidgetPlacement":
        if self.x + self.w > GRID_COLUMNS:
            raise ValueError(
                f"Widget overflows the grid: x + w = {self.x + self.w} > {GRID_COLUMNS}"
            )
        return self


class DashboardState(BaseModel):
    """A user's dashboard: which widgets show, in what order, and where."""

    visible_widgets: List[str]
    card_order: List[str]
    layout: Dict[str, WidgetPlacement] = Field(default_factory=dict)

    class Config:
        json_schema_extra = {
            "example": {
                "visible_widgets": ["leads", "deals"],
                "card_order": ["leads", "deals", "contacts"],
                "layout": {
                    "leads": {"x": 0, "y": 0, "w": 3, "h": 2},
                    "deals": {"x": 3, "y": 0, "w": 3, "h": 2},
                },
            }
        }


class SaveDashboardRequest(BaseModel):
    """Request to save the whole dashboard."""

    visible_widgets: List[str]
    card_order: Optional[List[str]] = None
    layout: Dict[str, WidgetPlacement] = Field(default_factory=dict)


class WidgetChangesRequest(DashboardState):
    """Pending widget toggles applied on top of the current dashboard."""

    pending: List[str] = Field(
        default_factory=list,
        description="Widget keys to toggle: visible ones are removed, hidden ones added",
    )


class CompactLayoutRequest(BaseModel):
    layout: Dict[str, WidgetPlacement]
    visible_widgets: List[str]


class FreeSlotRequest(BaseModel):
    layout: Dict[str, WidgetPlacement] = Field(default_factory=dict)
    width: int = Field(3, ge=1, le=GRID_COLUMNS)
    height: int = Field(2, ge=1)


class GridPositionResponse(BaseModel):
    x: int
    y: int


class WidgetInfo(BaseModel):
    key: str
    title: str
    visible: bool


class LeadsSummary(BaseModel):
    total: int = 0
    new: int = 0
    attempted: int = 0
    follow_up: int = 0
    qualified: int = 0
    recent_lead: Optional[str] = None


class ContactsSummary(BaseModel):
    total: int = 0
    by_source: Dict[str, int] = Field(default_factory=dict)


class DealsSummary(BaseModel):
    total: int = 0
    active: int = 0
    won: int = 0
    lost: int = 0
    total_pipeline: float = 0.0
    won_value: float = 0.0
    by_stage: Dict[str, int] = Field(default_factory=dict)


class AccountsSummary(BaseModel):
    total: int = 0
    by_status: Dict[str, int] = Field(default_factory=dict)


class TaskBrief(BaseModel):
    id: int
    title: str
    due_date: Optional[str] = None
    priority: Optional[str] = None
    status: Optional[str] = None


class TasksSummary(BaseModel):
    total: int = 0
    overdue: int = 0
    due_today: int = 0
    high_priority: int = 0
    by_status: Dict[str, int] = Field(default_factory=dict)
    tasks: List[TaskBrief] = Field(default_factory=list)


class EmailStats(BaseModel):
    sent: int = 0
    opened: int = 0
    clicked: int = 0
    open_rate: int = 0
    click_rate: int = 0
    recent_subject: Optional[str] = None


class DashboardSummary(BaseModel):
    leads: LeadsSummary
    contacts: ContactsSummary
    deals: DealsSummary
    accounts: AccountsSummary
    tasks: TasksSummary
    email_stats: EmailStats
