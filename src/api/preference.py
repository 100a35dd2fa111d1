"""Favorite team/country API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_current_user, get_preference_service
from src.models.user import User
from src.schemas.preference import PreferenceResponse, PreferenceSet
from src.services.preference_service import PreferenceService

router = APIRouter(prefix="/api/preference", tags=["preference"])


@router.get("", response_model=PreferenceResponse | None)
def get_preference(
    current_user: Annotated[User, Depends(get_current_user)],
    preferences: Annotated[PreferenceService, Depends(get_preference_service)],
):
    """Get the user's favorite, or null if none was chosen."""
    return preferences.get(current_user.id)


@router.post("", response_model=PreferenceResponse, status_code=status.HTTP_201_CREATED)
def set_preference(
    preference_data: PreferenceSet,
    current_user: Annotated[User, Depends(get_current_user)],
    preferences: Annotated[PreferenceService, Depends(get_preference_service)],
):
    """Set the user's favorite, replacing any previous one."""
    return preferences.set(
        current_user.id,
        preference_data.team_name,
        preference_data.team_logo,
        team_id=preference_data.team_id,
    )
