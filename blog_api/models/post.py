"""Post model."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text

from blog_api.database import Base
from blog_api.models.mixins import TimestampMixin


class Post(Base, TimestampMixin):
    """Blog post; user_id is set from the author at creation and never changes."""

    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(255), nullable=False)
    body = Column(Text, nullable=False)
