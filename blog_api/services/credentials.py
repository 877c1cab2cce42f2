"""Credential store: registration and password verification."""

import logging

from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from blog_api.database import storage_guard
from blog_api.exceptions import EmailTaken, InvalidCredentials
from blog_api.models.user import User
from blog_api.repositories.users import find_user_by_email, insert_user

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def register_user(db: Session, name: str, email: str, password: str) -> User:
    """Create a new user with a bcrypt hash of the password.

    Raises:
        EmailTaken: if another user already has this email
    """
    with storage_guard(db, "registering a user"):
        if find_user_by_email(db, email) is not None:
            logger.warning(f"Registration rejected, email already taken: {email}")
            raise EmailTaken()

        try:
            user = insert_user(db, name, email, get_password_hash(password))
        except IntegrityError as e:
            # Lost a race with a concurrent registration for the same email
            db.rollback()
            logger.warning(f"Registration rejected, email already taken: {email}")
            raise EmailTaken() from e

    logger.info(f"Registered user {user.id}")
    return user


def verify_credentials(db: Session, email: str | None, password: str | None) -> User:
    """Authenticate a user by email and password.

    Unknown email and wrong password fail the same way.

    Raises:
        InvalidCredentials: if the pair does not match a user
    """
    if not email or not password:
        logger.warning("Login failed: incomplete credentials")
        raise InvalidCredentials()

    with storage_guard(db, "looking up credentials"):
        user = find_user_by_email(db, email)

    if user is None:
        # Spend the same hashing time as a real check
        pwd_context.dummy_verify()
        logger.warning(f"Login failed for {email}")
        raise InvalidCredentials()

    if not verify_password(password, user.password_hash):
        logger.warning(f"Login failed for {email}")
        raise InvalidCredentials()

    return user
