"""Bearer token issuing, resolution and revocation."""

import hashlib
import logging
import secrets

from sqlalchemy.orm import Session

from blog_api.database import storage_guard
from blog_api.exceptions import InvalidToken
from blog_api.models.access_token import AccessToken
from blog_api.models.user import User
from blog_api.repositories.tokens import find_active_token, insert_token, mark_token_revoked
from blog_api.repositories.users import find_user_by_id

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_NAME = "api-token"  # noqa: S105


def hash_token(raw_token: str) -> str:
    """Digest under which a raw token is stored and looked up."""
    return hashlib.sha256(raw_token.encode("utf-8")).hexdigest()


def issue_token(db: Session, user: User, name: str = DEFAULT_TOKEN_NAME) -> str:
    """Mint a token for a user and return the raw value.

    The raw value is returned exactly once; only its digest is persisted.
    """
    raw_token = secrets.token_urlsafe(40)
    with storage_guard(db, "issuing a token"):
        token = insert_token(db, user.id, hash_token(raw_token), name)
    logger.info(f"Issued token {token.id} for user {user.id}")
    return raw_token


def resolve_access_token(db: Session, raw_token: str | None) -> AccessToken:
    """Find the active token row for a presented raw token.

    Raises:
        InvalidToken: if the token is missing, unknown or revoked
    """
    if not raw_token:
        raise InvalidToken()

    with storage_guard(db, "resolving a token"):
        token = find_active_token(db, hash_token(raw_token))

    if token is None:
        raise InvalidToken()
    return token


def token_owner(db: Session, token: AccessToken) -> User:
    """Load the user a token belongs to."""
    with storage_guard(db, "loading a token owner"):
        user = find_user_by_id(db, token.user_id)
    if user is None:
        raise InvalidToken()
    return user


def resolve_token(db: Session, raw_token: str | None) -> User:
    """Resolve a presented raw token to its owner."""
    return token_owner(db, resolve_access_token(db, raw_token))


def revoke_token(db: Session, token_id: int) -> bool:
    """Revoke a token; safe to call on an already revoked or missing token.

    Returns True when this call revoked the token, False when it was
    already gone.
    """
    with storage_guard(db, "revoking a token"):
        revoked = mark_token_revoked(db, token_id)

    if revoked:
        logger.info(f"Token {token_id} revoked")
    else:
        logger.warning(f"Token {token_id} already revoked or missing")
    return revoked
