"""Access token data access."""

from datetime import UTC, datetime

from sqlalchemy.orm import Session

from blog_api.models.access_token import AccessToken


def insert_token(db: Session, user_id: int, token_hash: str, name: str) -> AccessToken:
    token = AccessToken(user_id=user_id, token_hash=token_hash, name=name)
    db.add(token)
    db.commit()
    db.refresh(token)
    return token


def find_active_token(db: Session, token_hash: str) -> AccessToken | None:
    """Find a non-revoked token by its digest."""
    return (
        db.query(AccessToken)
        .filter(AccessToken.token_hash == token_hash, AccessToken.revoked_at.is_(None))
        .first()
    )


def mark_token_revoked(db: Session, token_id: int) -> bool:
    """Revoke a token in a single conditional UPDATE.

    Returns True when this call revoked it, False when it was already
    revoked or does not exist.
    """
    updated = (
        db.query(AccessToken)
        .filter(AccessToken.id == token_id, AccessToken.revoked_at.is_(None))
        .update({AccessToken.revoked_at: datetime.now(UTC)}, synchronize_session=False)
    )
    db.commit()
    return updated > 0
