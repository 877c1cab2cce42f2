"""User model."""

from sqlalchemy import Column, Integer, String

from blog_api.database import Base
from blog_api.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """Registered author; owns posts and access tokens."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
