from __future__ import annotations

import pytest
from werkzeug.security import check_password_hash

from src.geo_attendance.geo_attendance.core.exceptions import NotFoundError, ValidationError


def test_list_students_only_returns_nim_references(container):
    students = container.user_service.list_students()

    assert [u.email for u in students] == ["alice@example.com"]


def test_create_user_hashes_password(container, users):
    user_id = container.user_service.create_user(
        name="Bob Smith", email="bob@example.com", password="bob12345", role="student", nim_nip="NIM12346"
    )

    created = users.get_by_id(user_id)
    assert created.password_hash != "bob12345"
    assert check_password_hash(created.password_hash, "bob12345")


def test_numeric_password_is_treated_as_text(container, users):
    user_id = container.user_service.create_user(name="Bob Smith", email="bob@example.com", password=12345678)

    assert check_password_hash(users.get_by_id(user_id).password_hash, "12345678")

    with pytest.raises(ValidationError):
        container.user_service.edit_user(user_id, password=123)


def test_create_user_with_explicit_id(container, users):
    assert container.user_service.create_user(user_id=10, name="Dan", email="dan@example.com", password="dan12345") == 10
    assert users.get_by_id(10).email == "dan@example.com"


def test_login_identifier_is_unique(container):
    with pytest.raises(ValidationError):
        container.user_service.create_user(name="Other Alice", email="alice@example.com", password="secret12")


def test_edit_user_updates_only_given_fields(container, users):
    container.user_service.edit_user(1, name="Alice J.", role="", nim_nip=None)

    user = users.get_by_id(1)
    assert user.name == "Alice J."
    assert user.role == "student"


def test_edit_user_without_fields(container):
    with pytest.raises(ValidationError):
        container.user_service.edit_user(1)


def test_edit_user_cannot_take_another_users_email(container):
    with pytest.raises(ValidationError):
        container.user_service.edit_user(1, email="carol@example.com")


def test_edit_unknown_user(container):
    with pytest.raises(NotFoundError):
        container.user_service.edit_user(99, name="Ghost")


def test_delete_user(container, users):
    container.user_service.delete_user(3)
    assert users.get_by_id(3) is None

    with pytest.raises(NotFoundError):
        container.user_service.delete_user(3)
