"""Preference schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PreferenceSet(BaseModel):
    """Choose a favorite team or country."""

    model_config = ConfigDict(coerce_numbers_to_str=True, str_strip_whitespace=True)

    team_id: str | None = Field(None, max_length=64)
    team_name: str = Field(..., min_length=1, max_length=100)
    team_logo: str = Field(..., min_length=1, max_length=255)


class PreferenceResponse(BaseModel):
    """Preference response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    team_id: str | None
    team_name: str
    team_logo: str
    updated_at: datetime
