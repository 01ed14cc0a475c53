from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import Clock, SystemClock
from .core.constants import DEFAULT_PRIMARY_OFFICE_ID, DEFAULT_TWO_FACTOR_TTL_MINUTES
from .database.connection import DBConfig, DatabaseConnection
from .locations.mysql_location_repository import MySQLLocationRepository
from .locations.repository import LocationRepository
from .locations.service import OfficeService
from .mail.sender import EmailSender, MailConfig, SmtpEmailSender
from .notifications.mysql_notification_repository import MySQLNotificationRepository
from .notifications.repository import NotificationRepository
from .notifications.service import NotificationService
from .two_factor.mysql_two_factor_repository import MySQLTwoFactorCodeRepository
from .two_factor.repository import TwoFactorCodeRepository
from .two_factor.service import TwoFactorService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    codes_repo: TwoFactorCodeRepository
    locations_repo: LocationRepository
    attendance_repo: AttendanceRepository
    notifications_repo: NotificationRepository
    mailer: EmailSender

    auth_service: AuthService
    two_factor_service: TwoFactorService
    user_service: UserService
    office_service: OfficeService
    attendance_service: AttendanceService
    notification_service: NotificationService


def wire_services(
    *,
    users_repo: UserRepository,
    codes_repo: TwoFactorCodeRepository,
    locations_repo: LocationRepository,
    attendance_repo: AttendanceRepository,
    notifications_repo: NotificationRepository,
    mailer: EmailSender,
    clock: Optional[Clock] = None,
    primary_office_id: int = DEFAULT_PRIMARY_OFFICE_ID,
    two_factor_ttl_minutes: int = DEFAULT_TWO_FACTOR_TTL_MINUTES,
) -> Container:
    """Build services over any repository implementations (MySQL or in-memory)."""

    clock = clock or SystemClock()

    two_factor_service = TwoFactorService(
        codes_repo,
        users_repo,
        mailer,
        clock=clock,
        ttl_minutes=two_factor_ttl_minutes,
    )
    office_service = OfficeService(locations_repo, office_id=primary_office_id)

    return Container(
        users_repo=users_repo,
        codes_repo=codes_repo,
        locations_repo=locations_repo,
        attendance_repo=attendance_repo,
        notifications_repo=notifications_repo,
        mailer=mailer,
        auth_service=AuthService(users_repo, two_factor_service),
        two_factor_service=two_factor_service,
        user_service=UserService(users_repo),
        office_service=office_service,
        attendance_service=AttendanceService(attendance_repo, office_service, users_repo, clock=clock),
        notification_service=NotificationService(notifications_repo, clock=clock),
    )


def build_container(
    *,
    db_config: dict,
    mail_config: dict,
    primary_office_id: int = DEFAULT_PRIMARY_OFFICE_ID,
    two_factor_ttl_minutes: int = DEFAULT_TWO_FACTOR_TTL_MINUTES,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    return wire_services(
        users_repo=MySQLUserRepository(conn),
        codes_repo=MySQLTwoFactorCodeRepository(conn),
        locations_repo=MySQLLocationRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        notifications_repo=MySQLNotificationRepository(conn),
        mailer=SmtpEmailSender(MailConfig.from_dict(mail_config)),
        primary_office_id=primary_office_id,
        two_factor_ttl_minutes=two_factor_ttl_minutes,
    )
