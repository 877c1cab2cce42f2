"""SQLAlchemy models."""

from blog_api.models.access_token import AccessToken
from blog_api.models.post import Post
from blog_api.models.user import User

__all__ = [
    "User",
    "AccessToken",
    "Post",
]
