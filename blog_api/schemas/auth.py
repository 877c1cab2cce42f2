"""Authentication schemas."""

from datetime import datetime
from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    field_validator,
)


def check_email_format(value: str) -> str:
    """Reject malformed addresses but keep the address exactly as submitted.

    Logins look the email up verbatim, so the stored form must be the
    submitted form.
    """
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(str(e)) from e
    return value


EmailAddress = Annotated[str, Field(max_length=255), AfterValidator(check_email_format)]


class UserRegister(BaseModel):
    """User registration request."""

    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
    email: EmailAddress
    password: str = Field(..., min_length=8, max_length=128)


class UserLogin(BaseModel):
    """User login request.

    Anything missing or malformed is rejected as unauthorized rather than
    as a validation error.
    """

    email: str | None = None
    password: str | None = None

    @field_validator("email", "password", mode="before")
    @classmethod
    def ignore_non_strings(cls, value):
        return value if isinstance(value, str) else None


class UserResponse(BaseModel):
    """User information response (never includes the password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime


class RegisterResponse(BaseModel):
    """Registration response."""

    user: UserResponse


class TokenResponse(BaseModel):
    """Bearer token response, the only place the raw token is ever shown."""

    token: str
    token_type: str = "bearer"  # noqa: S105


class MessageResponse(BaseModel):
    message: str
