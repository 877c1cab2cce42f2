"""Credential store tests."""

import pytest

from blog_api.exceptions import EmailTaken, InvalidCredentials
from blog_api.models.user import User
from blog_api.services.credentials import register_user, verify_credentials


def test_register_hashes_password(db):
    user = register_user(db, "Alice", "alice@example.com", "password123")

    assert user.id is not None
    assert user.password_hash != "password123"
    assert user.password_hash.startswith("$2")


def test_register_duplicate_email(db):
    register_user(db, "Alice", "alice@example.com", "password123")

    with pytest.raises(EmailTaken):
        register_user(db, "Mallory", "alice@example.com", "otherpassword")

    assert db.query(User).one().name == "Alice"


def test_verify_credentials(db):
    user = register_user(db, "Alice", "alice@example.com", "password123")

    assert verify_credentials(db, "alice@example.com", "password123").id == user.id


@pytest.mark.parametrize(
    "email,password",
    [
        ("alice@example.com", "wrongpassword"),
        ("nobody@example.com", "password123"),
        ("alice@example.com", None),
        (None, "password123"),
    ],
)
def test_verify_credentials_failures(db, email, password):
    register_user(db, "Alice", "alice@example.com", "password123")

    with pytest.raises(InvalidCredentials) as exc_info:
        verify_credentials(db, email, password)

    assert exc_info.value.message == "Unauthorized"
