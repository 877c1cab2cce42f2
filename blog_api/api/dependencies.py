"""FastAPI dependencies for authentication and database."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from blog_api.database import get_db
from blog_api.models.access_token import AccessToken
from blog_api.models.user import User
from blog_api.services.tokens import resolve_access_token, token_owner

# Missing credentials are reported as 401 by resolve_access_token
security = HTTPBearer(auto_error=False)


def get_current_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> AccessToken:
    """Get the active access token presented with the request."""
    raw_token = credentials.credentials if credentials else None
    return resolve_access_token(db, raw_token)


def get_current_user(
    token: Annotated[AccessToken, Depends(get_current_token)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the user the presented token belongs to."""
    return token_owner(db, token)
