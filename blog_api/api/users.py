"""User API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from blog_api.api.dependencies import get_current_user
from blog_api.database import get_db, storage_guard
from blog_api.exceptions import NotFound
from blog_api.models.user import User
from blog_api.repositories.users import find_user_by_id
from blog_api.schemas.auth import UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}", response_model=UserResponse)
def show_user(
    user_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get a user's public profile."""
    with storage_guard(db, "fetching a user"):
        user = find_user_by_id(db, user_id)
    if user is None:
        logger.info(f"User {user_id} not found")
        raise NotFound("User not found")
    return user
