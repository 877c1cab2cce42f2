"""Token issuer/validator tests."""

import pytest

from blog_api.exceptions import InvalidToken
from blog_api.models.access_token import AccessToken
from blog_api.services.credentials import register_user
from blog_api.services.tokens import (
    hash_token,
    issue_token,
    resolve_access_token,
    resolve_token,
    revoke_token,
)


@pytest.fixture
def user(db):
    return register_user(db, "Token User", "token@example.com", "password123")


def test_issue_then_resolve_returns_same_user(db, user):
    raw_token = issue_token(db, user)

    assert resolve_token(db, raw_token).id == user.id


def test_raw_token_is_not_stored(db, user):
    raw_token = issue_token(db, user)

    token = db.query(AccessToken).one()
    assert token.token_hash == hash_token(raw_token)
    assert token.token_hash != raw_token
    assert token.name == "api-token"
    stored_values = [getattr(token, column.name) for column in AccessToken.__table__.columns]
    assert raw_token not in [str(value) for value in stored_values]


def test_resolve_unknown_token(db, user):
    issue_token(db, user)

    with pytest.raises(InvalidToken):
        resolve_token(db, "unknown-token")


def test_resolve_missing_token(db):
    with pytest.raises(InvalidToken):
        resolve_token(db, None)
    with pytest.raises(InvalidToken):
        resolve_token(db, "")


def test_revoked_token_no_longer_resolves(db, user):
    raw_token = issue_token(db, user)
    token = resolve_access_token(db, raw_token)

    assert revoke_token(db, token.id) is True

    with pytest.raises(InvalidToken):
        resolve_token(db, raw_token)


def test_revoke_is_idempotent(db, user):
    token = resolve_access_token(db, issue_token(db, user))

    assert revoke_token(db, token.id) is True
    assert revoke_token(db, token.id) is False
    assert revoke_token(db, 999999) is False


def test_revoke_keeps_other_tokens_active(db, user):
    first = issue_token(db, user)
    second = issue_token(db, user)

    revoke_token(db, resolve_access_token(db, first).id)

    assert resolve_token(db, second).id == user.id
