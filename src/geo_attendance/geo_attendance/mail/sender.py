from __future__ import annotations

import logging
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from typing import Optional, Protocol

from ..core.constants import DEFAULT_MAIL_TIMEOUT_SECONDS
from ..core.exceptions import ConfigurationError, DeliveryError

logger = logging.getLogger(__name__)


class EmailSender(Protocol):
    def send(self, to_address: str, subject: str, body: str) -> None:
        """Deliver a plain-text email or raise DeliveryError / ConfigurationError."""

        raise NotImplementedError


@dataclass(frozen=True)
class MailConfig:
    host: Optional[str]
    port: int = 587
    username: Optional[str] = None
    password: Optional[str] = None
    sender: Optional[str] = None
    use_tls: bool = True
    timeout_seconds: float = DEFAULT_MAIL_TIMEOUT_SECONDS

    @classmethod
    def from_dict(cls, mail_config: dict) -> "MailConfig":
        return cls(
            host=mail_config.get("host") or None,
            port=int(mail_config.get("port") or 587),
            username=mail_config.get("username") or None,
            password=mail_config.get("password") or None,
            sender=mail_config.get("sender") or mail_config.get("username") or None,
            use_tls=bool(mail_config.get("use_tls", True)),
            timeout_seconds=float(mail_config.get("timeout_seconds") or DEFAULT_MAIL_TIMEOUT_SECONDS),
        )


class SmtpEmailSender(EmailSender):
    """SMTP transport with a bounded socket timeout.

    A timeout, refused connection or SMTP error is reported as DeliveryError.
    """

    def __init__(self, config: MailConfig):
        self._config = config

    def _require_config(self) -> MailConfig:
        cfg = self._config
        if not cfg.host or not cfg.sender:
            raise ConfigurationError("Mail transport is not configured (MAIL_HOST / MAIL_SENDER)")
        if cfg.username and not cfg.password:
            raise ConfigurationError("MAIL_PASSWORD is required when MAIL_USER is set")
        return cfg

    def send(self, to_address: str, subject: str, body: str) -> None:
        cfg = self._require_config()

        msg = EmailMessage()
        msg["From"] = cfg.sender
        msg["To"] = to_address
        msg["Subject"] = subject
        msg.set_content(body)

        try:
            with smtplib.SMTP(cfg.host, cfg.port, timeout=cfg.timeout_seconds) as smtp:
                if cfg.use_tls:
                    smtp.starttls()
                if cfg.username:
                    smtp.login(cfg.username, cfg.password)
                smtp.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            # socket.timeout is an OSError subclass.
            logger.warning("SMTP delivery to %s via %s:%s failed: %s", to_address, cfg.host, cfg.port, e)
            raise DeliveryError("Failed to send email") from e
