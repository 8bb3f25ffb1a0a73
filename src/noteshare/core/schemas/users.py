"""User lookup schemas (collaborator picker)."""

import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserSummary(BaseModel):
    """Public part of a user record."""

    id: uuid.UUID = Field(description="User ID")
    email: str = Field(description="Email address")
    name: Optional[str] = Field(default=None, description="Display name")

    model_config = ConfigDict(from_attributes=True)
