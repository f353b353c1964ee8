from __future__ import annotations

from unittest.mock import patch

import pytest

from app.core.errors import DuplicateEmailError, InvalidCredentialsError, WeakPasswordError
from app.models.auth import User
from app.services.user_store import ADMIN_ROLE, UserStore


@pytest.fixture
def store():
    store = UserStore()
    store.seed_admin("admin@workplace.com", "work123")
    return store


def test_register_rejects_short_password(store):
    with pytest.raises(WeakPasswordError):
        store.register("Jane", "jane@example.com", "12345", "user")
    assert store.find_by_email("jane@example.com") is None


def test_register_accepts_six_characters(store):
    user = store.register("Jane", "jane@example.com", "123456", "user")
    assert user.email == "jane@example.com"
    assert user.full_name == "Jane"
    assert user.role == "user"
    assert user.id.isdigit()
    assert user.created_at.endswith("Z")
    assert user.builtin is False


def test_register_duplicate_email_fails(store):
    store.register("Jane", "jane@example.com", "secret1", "user")
    with pytest.raises(DuplicateEmailError):
        store.register("Jane Two", "jane@example.com", "secret2", "user")


def test_email_uniqueness_is_case_sensitive(store):
    store.register("Jane", "jane@example.com", "secret1", "user")
    user = store.register("Jane", "JANE@example.com", "secret1", "user")
    assert user.email == "JANE@example.com"


def test_register_checks_password_before_email(store):
    store.register("Jane", "jane@example.com", "secret1", "user")
    with pytest.raises(WeakPasswordError):
        store.register("Jane", "jane@example.com", "short", "user")


def test_register_admin_email_is_duplicate(store):
    with pytest.raises(DuplicateEmailError):
        store.register("Mallory", "admin@workplace.com", "longenough", "admin")


def test_ids_stay_unique_within_same_millisecond(store):
    with patch("app.services.user_store.time.time", return_value=1700000000.0):
        first = store.register("A", "a@example.com", "secret1", "user")
        second = store.register("B", "b@example.com", "secret1", "user")
    assert first.id != second.id


def test_authenticate_admin_without_registered_users(store):
    user = store.authenticate("admin@workplace.com", "work123")
    assert user.role == ADMIN_ROLE
    assert user.builtin is True


def test_authenticate_admin_survives_loaded_users(store):
    store.load(
        [
            User(
                id="1",
                full_name="Impostor",
                email="admin@workplace.com",
                password="other",
                role="user",
                created_at="2024-01-01T00:00:00.000Z",
            )
        ]
    )
    assert store.authenticate("admin@workplace.com", "work123").role == ADMIN_ROLE


def test_authenticate_registered_user(store):
    store.register("Jane", "jane@example.com", "secret1", "manager")
    user = store.authenticate("jane@example.com", "secret1")
    assert user.full_name == "Jane"


@pytest.mark.parametrize(
    ("email", "password"),
    [
        ("jane@example.com", "wrong!"),
        ("JANE@example.com", "secret1"),
        ("nobody@example.com", "secret1"),
        ("admin@workplace.com", "WORK123"),
    ],
)
def test_authenticate_is_exact_match(store, email, password):
    store.register("Jane", "jane@example.com", "secret1", "user")
    with pytest.raises(InvalidCredentialsError):
        store.authenticate(email, password)


def test_persistable_excludes_seeded_admin(store):
    store.register("Jane", "jane@example.com", "secret1", "user")
    assert [u.email for u in store.persistable()] == ["jane@example.com"]
    assert [u.email for u in store.all()] == ["admin@workplace.com", "jane@example.com"]


def test_seed_admin_is_idempotent(store):
    store.seed_admin("admin@workplace.com", "work123")
    assert len(store.all()) == 1


def test_user_serialises_with_camel_case():
    user = User(
        id="1",
        full_name="Jane",
        email="jane@example.com",
        password="secret1",
        role="user",
        created_at="2024-01-01T00:00:00.000Z",
        builtin=True,
    )
    data = user.model_dump(by_alias=True)
    assert data == {
        "id": "1",
        "fullName": "Jane",
        "email": "jane@example.com",
        "password": "secret1",
        "role": "user",
        "createdAt": "2024-01-01T00:00:00.000Z",
    }
