from __future__ import annotations

import threading
from datetime import timedelta
from itertools import count

import pytest

from src.geo_attendance.geo_attendance.core.exceptions import (
    ConfigurationError,
    DeliveryError,
    InvalidOrExpiredCodeError,
    NotFoundError,
    ValidationError,
)
from src.geo_attendance.geo_attendance.two_factor.service import TwoFactorService


def _sequential_codes():
    counter = count(1)
    return lambda: f"{next(counter):06d}"


@pytest.fixture
def service(codes, users, mailer, clock):
    return TwoFactorService(codes, users, mailer, clock=clock, code_generator=_sequential_codes())


def test_issue_stores_code_with_five_minute_expiry_and_mails_it(service, users, codes, mailer, clock):
    issued = service.issue_for(users.get_by_id(1))

    assert issued.code == "000001"
    assert codes.by_user[1].expires_at == clock.now() + timedelta(minutes=5)
    assert mailer.sent == [("alice@example.com", "Your 2FA code", "Your 2FA code is: 000001")]


def test_verify_returns_user_and_consumes_code(service, users, codes):
    issued = service.issue_for(users.get_by_id(1))

    user = service.verify(1, issued.code)

    assert user.email == "alice@example.com"
    assert 1 not in codes.by_user


def test_second_verification_with_same_code_fails(service, users):
    issued = service.issue_for(users.get_by_id(1))
    service.verify(1, issued.code)

    with pytest.raises(InvalidOrExpiredCodeError):
        service.verify(1, issued.code)


def test_expired_code_never_verifies(service, users, clock):
    issued = service.issue_for(users.get_by_id(1))
    clock.advance(minutes=6)

    with pytest.raises(InvalidOrExpiredCodeError):
        service.verify(1, issued.code)


def test_code_is_invalid_exactly_at_expiry(service, users, clock):
    issued = service.issue_for(users.get_by_id(1))
    clock.advance(minutes=5)

    with pytest.raises(InvalidOrExpiredCodeError):
        service.verify(1, issued.code)


def test_code_is_valid_just_before_expiry(service, users, clock):
    issued = service.issue_for(users.get_by_id(1))
    clock.advance(minutes=4, seconds=59)

    assert service.verify(1, issued.code).user_id == 1


def test_wrong_code_and_missing_code_look_the_same(service, users):
    with pytest.raises(InvalidOrExpiredCodeError) as no_code:
        service.verify(1, "123456")

    service.issue_for(users.get_by_id(1))
    with pytest.raises(InvalidOrExpiredCodeError) as wrong_code:
        service.verify(1, "999999")

    assert str(no_code.value) == str(wrong_code.value)


def test_code_of_another_user_does_not_verify(service, users):
    issued = service.issue_for(users.get_by_id(3))

    with pytest.raises(InvalidOrExpiredCodeError):
        service.verify(1, issued.code)


def test_new_code_invalidates_previous_one(service, users):
    first = service.issue_for(users.get_by_id(1))
    second = service.issue_for(users.get_by_id(1))

    with pytest.raises(InvalidOrExpiredCodeError):
        service.verify(1, first.code)
    assert service.verify(1, second.code).user_id == 1


def test_resend_issues_fresh_code_without_password(service, codes, mailer):
    user = service.resend("1")

    assert user.user_id == 1
    assert codes.by_user[1].code == "000001"
    assert mailer.sent[-1][1] == "Your new 2FA code"


def test_resend_for_unknown_user(service):
    with pytest.raises(NotFoundError):
        service.resend(42)


def test_resend_requires_user_id(service):
    with pytest.raises(ValidationError):
        service.resend(None)


def test_delivery_failure_propagates(service, users, mailer):
    mailer.fail_with = DeliveryError("smtp down")

    with pytest.raises(DeliveryError):
        service.issue_for(users.get_by_id(1))


def test_missing_mail_configuration_propagates(service, users, mailer):
    mailer.fail_with = ConfigurationError("no MAIL_HOST")

    with pytest.raises(ConfigurationError):
        service.issue_for(users.get_by_id(1))


def test_concurrent_issuance_leaves_at_most_one_active_code(codes, users, mailer, clock):
    service = TwoFactorService(codes, users, mailer, clock=clock)
    user = users.get_by_id(1)
    issued = []
    lock = threading.Lock()

    def issue():
        code = service.issue_for(user)
        with lock:
            issued.append(code.code)

    threads = [threading.Thread(target=issue) for _ in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(issued) == 20
    assert len(codes.by_user) == 1
    survivor = codes.by_user[1].code
    assert survivor in issued
    assert service.verify(1, survivor).user_id == 1
