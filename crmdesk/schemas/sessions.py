from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel


class SessionInfo(BaseModel):
    id: int
    user_agent: Optional[str] = None
    device_info: Dict[str, str]
    last_active_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    is_current: bool = False


class TerminateOthersResponse(BaseModel):
    terminated: int
