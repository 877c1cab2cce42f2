"""Post schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PostCreate(BaseModel):
    """Create a new post. Any owner field sent by the client is ignored."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=255)
    body: str = Field(..., min_length=1)


class PostUpdate(BaseModel):
    """Partial update of a post; omitted fields are left unchanged."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str | None = Field(None, min_length=1, max_length=255)
    body: str | None = Field(None, min_length=1)

    @field_validator("title", "body", mode="before")
    @classmethod
    def reject_explicit_null(cls, value):
        # Only runs for fields the client actually sent
        if value is None:
            raise ValueError("may not be null")
        return value


class PostResponse(BaseModel):
    """Post response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    body: str
    created_at: datetime
    updated_at: datetime


class PostPage(BaseModel):
    """One page of posts."""

    data: list[PostResponse]
    current_page: int
    per_page: int
    total: int
    last_page: int
