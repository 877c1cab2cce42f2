"""Pydantic schemas for API requests and responses."""

from blog_api.schemas.auth import (
    MessageResponse,
    RegisterResponse,
    TokenResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from blog_api.schemas.post import PostCreate, PostPage, PostResponse, PostUpdate

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "RegisterResponse",
    "TokenResponse",
    "MessageResponse",
    "PostCreate",
    "PostUpdate",
    "PostResponse",
    "PostPage",
]
