"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    Populated from the user object Supabase returns for a verified token
    and made available to route handlers via dependency injection.
    """

    id: str = Field(..., description="User ID (UUID from Supabase)")
    email: Optional[EmailStr] = Field(None, description="User's email address")
    role: str = Field(default="authenticated", description="Supabase role claim")
    created_at: Optional[datetime] = Field(None, description="Account creation time")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }
