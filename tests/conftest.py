from __future__ import annotations

import threading
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.geo_attendance.geo_attendance.attendance.model import AttendanceRecord
from src.geo_attendance.geo_attendance.container import wire_services
from src.geo_attendance.geo_attendance.core.enums import AttendanceType
from src.geo_attendance.geo_attendance.locations.model import Location
from src.geo_attendance.geo_attendance.notifications.model import Notification
from src.geo_attendance.geo_attendance.two_factor.model import TwoFactorCode
from src.geo_attendance.geo_attendance.users.model import User

OFFICE_LAT = -6.97321
OFFICE_LON = 107.63014
OFFICE_RADIUS_M = 50.0


class FixedClock:
    def __init__(self, now: datetime):
        self._now = now

    def now(self) -> datetime:
        return self._now

    def advance(self, **kwargs) -> None:
        self._now = self._now + timedelta(**kwargs)


class InMemoryUsers:
    def __init__(self, users: list[User]):
        self._by_id: dict[int, User] = {u.user_id: u for u in users}

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._by_id.get(int(user_id))

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._by_id.values() if u.email == email), None)

    def create_user(self, *, name, email, password_hash, role, nim_nip, user_id=None) -> int:
        user_id = user_id or max(self._by_id, default=0) + 1
        self._by_id[user_id] = User(
            user_id=user_id, name=name, email=email, password_hash=password_hash, role=role, nim_nip=nim_nip
        )
        return user_id

    def update_user(self, user_id: int, fields: dict) -> bool:
        user = self._by_id.get(user_id)
        if not user:
            return False
        mapping = {"username_email": "email"}
        self._by_id[user_id] = replace(user, **{mapping.get(k, k): v for k, v in fields.items()})
        return True

    def update_password(self, user_id: int, password_hash: str) -> bool:
        return self.update_user(user_id, {"password_hash": password_hash})

    def delete_by_id(self, user_id: int) -> bool:
        return self._by_id.pop(int(user_id), None) is not None

    def list_by_reference_prefix(self, prefix: str):
        items = [u for u in self._by_id.values() if (u.nim_nip or "").startswith(prefix)]
        return sorted(items, key=lambda u: u.name)


class InMemoryCodes:
    """Keyed by user_id like the user_2fa_codes primary key; each call is atomic."""

    def __init__(self):
        self._lock = threading.Lock()
        self.by_user: dict[int, TwoFactorCode] = {}

    def delete_for_user(self, user_id: int) -> int:
        with self._lock:
            return 1 if self.by_user.pop(user_id, None) else 0

    def insert(self, *, user_id: int, code: str, expires_at: datetime) -> None:
        with self._lock:
            self.by_user[user_id] = TwoFactorCode(user_id=user_id, code=code, expires_at=expires_at)

    def find_active(self, *, user_id: int, code: str, now: datetime) -> Optional[TwoFactorCode]:
        with self._lock:
            rec = self.by_user.get(user_id)
            if rec and rec.code == code and rec.expires_at > now:
                return rec
            return None

    def delete(self, *, user_id: int, code: str) -> bool:
        with self._lock:
            rec = self.by_user.get(user_id)
            if rec and rec.code == code:
                del self.by_user[user_id]
                return True
            return False


class InMemoryLocations:
    def __init__(self, locations: list[Location]):
        self.by_id = {loc.location_id: loc for loc in locations}

    def get_by_id(self, location_id: int) -> Optional[Location]:
        return self.by_id.get(location_id)

    def upsert(self, *, location_id, name, latitude, longitude, radius_m) -> None:
        created_at = self.by_id[location_id].created_at if location_id in self.by_id else None
        self.by_id[location_id] = Location(
            location_id=location_id,
            name=name,
            latitude=latitude,
            longitude=longitude,
            radius_m=radius_m,
            created_at=created_at,
        )


class InMemoryAttendance:
    def __init__(self):
        self.records: list[AttendanceRecord] = []

    def create(self, *, user_id, location_id, type: AttendanceType, latitude, longitude, timestamp, note=None, status=None):
        attendance_id = len(self.records) + 1
        self.records.append(
            AttendanceRecord(
                attendance_id=attendance_id,
                user_id=user_id,
                location_id=location_id,
                type=type,
                timestamp=timestamp,
                latitude=latitude,
                longitude=longitude,
                status=status,
                note=note,
            )
        )
        return attendance_id, timestamp

    def list_all(self):
        return sorted(self.records, key=lambda r: r.timestamp, reverse=True)

    def list_for_user(self, user_id: int):
        return [r for r in self.list_all() if r.user_id == user_id]


class InMemoryNotifications:
    def __init__(self):
        self.by_id: dict[int, Notification] = {}

    def list_all(self):
        return sorted(self.by_id.values(), key=lambda n: n.created_at, reverse=True)

    def create(self, *, title, message, created_at) -> int:
        notification_id = max(self.by_id, default=0) + 1
        self.by_id[notification_id] = Notification(notification_id, title, message, created_at)
        return notification_id

    def delete(self, notification_id: int):
        return self.by_id.pop(notification_id, None)


@dataclass
class RecordingMailer:
    sent: list[tuple[str, str, str]] = field(default_factory=list)
    fail_with: Optional[Exception] = None

    def send(self, to_address: str, subject: str, body: str) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.sent.append((to_address, subject, body))

    def last_code(self) -> str:
        return self.sent[-1][2].rsplit(" ", 1)[-1]


@pytest.fixture
def clock():
    return FixedClock(datetime(2025, 12, 23, 8, 0, 0))


@pytest.fixture
def users():
    return InMemoryUsers(
        [
            User(1, "Alice Johnson", "alice@example.com", generate_password_hash("alice123"), "student", "NIM12345"),
            User(3, "Carol Lee", "carol@example.com", generate_password_hash("carol123"), "teacher", "NIP98765"),
        ]
    )


@pytest.fixture
def codes():
    return InMemoryCodes()


@pytest.fixture
def locations():
    return InMemoryLocations(
        [
            Location(
                location_id=1,
                name="Telkom University Bandung",
                latitude=OFFICE_LAT,
                longitude=OFFICE_LON,
                radius_m=OFFICE_RADIUS_M,
                created_at=datetime(2025, 12, 25, 1, 57, 25),
            )
        ]
    )


@pytest.fixture
def attendance():
    return InMemoryAttendance()


@pytest.fixture
def notifications():
    return InMemoryNotifications()


@pytest.fixture
def mailer():
    return RecordingMailer()


@pytest.fixture
def container(users, codes, locations, attendance, notifications, mailer, clock):
    return wire_services(
        users_repo=users,
        codes_repo=codes,
        locations_repo=locations,
        attendance_repo=attendance,
        notifications_repo=notifications,
        mailer=mailer,
        clock=clock,
    )


@pytest.fixture
def client(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.geo_attendance.geo_attendance.main import create_app

    app = create_app(container)
    return app.test_client()
