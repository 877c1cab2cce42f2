"""Post API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from blog_api.api.dependencies import get_current_user
from blog_api.config import get_settings
from blog_api.database import get_db
from blog_api.models.user import User
from blog_api.schemas.auth import MessageResponse
from blog_api.schemas.post import PostCreate, PostPage, PostResponse, PostUpdate
from blog_api.services import posts as post_service

router = APIRouter(prefix="/posts", tags=["posts"])

# Keeps the computed offset within a 64-bit integer
MAX_PAGE = 1_000_000


@router.get("", response_model=PostPage)
def get_posts(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
    page: int = Query(default=1, ge=1, le=MAX_PAGE),
):
    """Get one page of the current user's posts."""
    per_page = get_settings().posts_per_page
    return post_service.list_posts(db, current_user, page, per_page)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    post_data: PostCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Create a new post."""
    return post_service.create_post(db, current_user, post_data)


@router.get("/{post_id}", response_model=PostResponse)
def get_post(
    post_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get a specific post."""
    return post_service.get_post(db, current_user, post_id)


@router.patch("/{post_id}", response_model=PostResponse)
def update_post(
    post_id: int,
    post_data: PostUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update a post's title and/or body."""
    return post_service.update_post(db, current_user, post_id, post_data)


@router.delete("/{post_id}", response_model=MessageResponse)
def delete_post(
    post_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete a post."""
    post_service.delete_post(db, current_user, post_id)
    return MessageResponse(message="Post deleted successfully")
