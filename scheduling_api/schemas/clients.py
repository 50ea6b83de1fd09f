from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator


class ClientCreate(BaseModel):
    """
    Create/replace client payload, shared by POST and PUT.

    Blank optional strings are treated as absent so they are never stored as "".
    birth_date is kept as the caller's string; the service normalizes it to a date.
    """
    name: str = Field(..., min_length=1, description="Client name")
    phone: Optional[str] = Field(None, description="Phone number")
    email: Optional[EmailStr] = Field(None, description="E-mail address")
    notes: Optional[str] = Field(None, description="Free-text notes")
    birth_date: Optional[str] = Field(
        None, description="Birth date (YYYY-MM-DD or ISO-8601 date-time; time is discarded)"
    )
    gender: Optional[str] = Field(None)

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("phone", "email", "notes", "birth_date", "gender", mode="before")
    @classmethod
    def _blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ClientRead(BaseModel):
    """Client read model."""
    id: int = Field(..., description="Client ID")
    tenant_id: str = Field(..., description="Owning tenant")
    name: str = Field(..., description="Client name")
    phone: Optional[str] = Field(None)
    email: Optional[str] = Field(None)
    notes: Optional[str] = Field(None)
    birth_date: Optional[date] = Field(None, description="Birth date (YYYY-MM-DD)")
    gender: Optional[str] = Field(None)
    created_at: datetime = Field(..., description="Created timestamp")
    updated_at: datetime = Field(..., description="Updated timestamp")

    class Config:
        from_attributes = True
