"""Comment schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CommentCreate(BaseModel):
    """New comment. Blank bodies are rejected by the service."""

    body: str = Field(max_length=5000, description="Comment text")

    model_config = ConfigDict(json_schema_extra={"example": {"body": "Looks good to me"}})


class CommentResponse(BaseModel):
    id: uuid.UUID
    body: str
    author_name: str = Field(description="Author name, or email when the author has no name")
    created_at: datetime
