"""Routes for the signed-in sessions of the current user."""

from typing import List

from fastapi import APIRouter, Depends, status

from ..core.auth import get_current_token, get_current_user
from ..core.database import User
from ..core.dependencies import get_service
from ..core.services import SessionService
from ..schemas.sessions import SessionInfo, TerminateOthersResponse

router = APIRouter()


@router.get("", response_model=List[SessionInfo])
async def list_sessions(
    token: str = Depends(get_current_token),
    current_user: User = Depends(get_current_user),
    session_service: SessionService = Depends(get_service(SessionService)),
):
    return await session_service.list_active_sessions(current_user.id, token)


@router.post("/terminate-others", response_model=TerminateOthersResponse)
async def terminate_other_sessions(
    token: str = Depends(get_current_token),
    current_user: User = Depends(get_current_user),
    session_service: SessionService = Depends(get_service(SessionService)),
):
    """Sign out everywhere except here."""
    count = await session_service.terminate_other_sessions(current_user.id, token)
    return TerminateOthersResponse(terminated=count)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def terminate_session(
    session_id: int,
    current_user: User = Depends(get_current_user),
    session_service: SessionService = Depends(get_service(SessionService)),
):
    await session_service.terminate_session(current_user.id, session_id)
