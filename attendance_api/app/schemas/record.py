"""
Pydantic schemas for attendance records.

Records travel over the wire and sit on disk with camelCase keys
(``userName``, ``loginDate``...).  The models below use snake_case
attribute names with camelCase aliases and serialise by alias.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RecordCreate(BaseModel):
    """Body of ``POST /api/records``.

    ``name`` is optional at the schema level so that a missing or blank
    value is reported by the service as ``Name is required``.
    """

    name: Optional[str] = Field(None, description="Display name of the person checking in")


class RecordRead(BaseModel):
    """Schema for reading a check-in record."""

    model_config = ConfigDict(populate_by_name=True)

    user_name: str = Field(..., alias="userName", description="Trimmed display name")
    user_id: str = Field(..., alias="userId", description="Lowercase hyphenated slug of the name")
    login_date: str = Field(..., alias="loginDate", description="Check-in date, e.g. 18/10/2026")
    login_time: str = Field(..., alias="loginTime", description="Check-in time, e.g. 7:05:09 pm")
    timestamp: int = Field(..., description="Milliseconds since the epoch; identifies the record")


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


class HealthStatus(BaseModel):
    status: str = "ok"
    message: str = "Server is running"
