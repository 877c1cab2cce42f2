"""Personal access token model."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from blog_api.database import Base
from blog_api.models.mixins import TimestampMixin


class AccessToken(Base, TimestampMixin):
    """Bearer token issued at login.

    Only the SHA-256 digest of the raw token is stored. A token is active
    while revoked_at is NULL; revocation is terminal.
    """

    __tablename__ = "personal_access_tokens"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(255), nullable=False, default="api-token")
    token_hash = Column(String(64), unique=True, nullable=False, index=True)
    revoked_at = Column(DateTime(timezone=True), nullable=True)
