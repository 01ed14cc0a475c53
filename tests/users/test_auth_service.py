from __future__ import annotations

import pytest
from werkzeug.security import check_password_hash

from src.geo_attendance.geo_attendance.core.exceptions import (
    AuthenticationError,
    DeliveryError,
    InvalidOrExpiredCodeError,
    NotFoundError,
    ValidationError,
)


def test_login_issues_and_mails_a_code(container, codes, mailer):
    user = container.auth_service.login("alice@example.com", "alice123")

    assert (user.user_id, user.email) == (1, "alice@example.com")
    assert list(codes.by_user) == [1]
    assert mailer.sent[0][0] == "alice@example.com"
    assert mailer.last_code() == codes.by_user[1].code


def test_unknown_email_is_not_found(container, mailer):
    with pytest.raises(NotFoundError):
        container.auth_service.login("nobody@example.com", "whatever")
    assert mailer.sent == []


def test_wrong_password_issues_nothing(container, codes, mailer):
    with pytest.raises(AuthenticationError):
        container.auth_service.login("alice@example.com", "wrong-password")
    assert codes.by_user == {}
    assert mailer.sent == []


@pytest.mark.parametrize("email,password", [("", "alice123"), ("alice@example.com", ""), (None, None)])
def test_missing_credentials(container, email, password):
    with pytest.raises(ValidationError):
        container.auth_service.login(email, password)


def test_placeholder_hash_never_matches(container, users):
    users.update_password(1, "CHANGE_ME")

    with pytest.raises(AuthenticationError):
        container.auth_service.login("alice@example.com", "CHANGE_ME")


def test_login_twice_keeps_only_latest_code(container, codes, mailer):
    container.auth_service.login("alice@example.com", "alice123")
    first = mailer.last_code()
    container.auth_service.login("alice@example.com", "alice123")
    second = mailer.last_code()

    assert len(codes.by_user) == 1
    if first != second:
        with pytest.raises(InvalidOrExpiredCodeError):
            container.two_factor_service.verify(1, first)
    assert container.two_factor_service.verify(1, second).email == "alice@example.com"


def test_login_not_completed_when_delivery_fails(container, mailer):
    mailer.fail_with = DeliveryError("timeout")

    with pytest.raises(DeliveryError):
        container.auth_service.login("alice@example.com", "alice123")


def test_reset_password_requires_matching_id_and_email(container, users):
    with pytest.raises(NotFoundError):
        container.auth_service.reset_password(user_id=1, email="carol@example.com", new_password="newpass1")

    container.auth_service.reset_password(user_id=1, email="alice@example.com", new_password="newpass1")

    assert check_password_hash(users.get_by_id(1).password_hash, "newpass1")
    container.auth_service.login("alice@example.com", "newpass1")


def test_reset_password_missing_fields(container):
    with pytest.raises(ValidationError):
        container.auth_service.reset_password(user_id=None, email="alice@example.com", new_password="x")
