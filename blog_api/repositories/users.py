"""User data access."""

from sqlalchemy.orm import Session

from blog_api.models.user import User


def find_user_by_id(db: Session, user_id: int) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def find_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def insert_user(db: Session, name: str, email: str, password_hash: str) -> User:
    """Insert a user row. Raises IntegrityError when the email is taken."""
    user = User(name=name, email=email, password_hash=password_hash)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
