"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from blog_api.api.dependencies import get_current_token, get_current_user
from blog_api.database import get_db
from blog_api.models.access_token import AccessToken
from blog_api.models.user import User
from blog_api.schemas.auth import (
    MessageResponse,
    RegisterResponse,
    TokenResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from blog_api.services.credentials import register_user, verify_credentials
from blog_api.services.tokens import issue_token, revoke_token
from blog_api.tasks.welcome import send_welcome_email

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user."""
    user = register_user(db, user_data.name, user_data.email, user_data.password)

    # Fire and forget: a broker outage must not fail the registration
    try:
        send_welcome_email.delay(user.id)
    except Exception as e:
        logger.error(f"Could not queue welcome email for user {user.id}: {e}")

    return RegisterResponse(user=UserResponse.model_validate(user))


@router.post("/login", response_model=TokenResponse)
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    user = verify_credentials(db, credentials.email, credentials.password)
    return TokenResponse(token=issue_token(db, user))


@router.post("/logout", response_model=MessageResponse)
def logout(
    current_user: Annotated[User, Depends(get_current_user)],
    token: Annotated[AccessToken, Depends(get_current_token)],
    db: Annotated[Session, Depends(get_db)],
):
    """Revoke the token used for this request; other sessions stay active."""
    logger.info(f"Logout request received for user {current_user.id}")
    if revoke_token(db, token.id):
        return MessageResponse(message="Logged out")
    return MessageResponse(message="Already logged out or no token found")
