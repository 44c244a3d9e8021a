from __future__ import annotations

import logging
import smtplib
from dataclasses import dataclass
from email.mime.text import MIMEText
from typing import Protocol

from ..core.exceptions import DeliveryError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SmtpConfig:
    host: str
    port: int
    user: str
    password: str
    timeout: int = 10


class Mailer(Protocol):
    def send(self, to: str, subject: str, text: str) -> None:
        raise NotImplementedError


class SmtpMailer(Mailer):
    """Plain-text mail through an authenticated STARTTLS relay (Gmail by default)."""

    def __init__(self, config: SmtpConfig):
        self._config = config

    def send(self, to: str, subject: str, text: str) -> None:
        if not to:
            raise DeliveryError("No recipients defined")

        msg = MIMEText(text, "plain", "utf-8")
        msg["Subject"] = subject
        msg["From"] = self._config.user
        msg["To"] = to

        try:
            with smtplib.SMTP(self._config.host, self._config.port, timeout=self._config.timeout) as server:
                server.starttls()
                server.login(self._config.user, self._config.password)
                server.send_message(msg)
        except smtplib.SMTPAuthenticationError as e:
            logger.error("SMTP authentication failed for %s", self._config.user)
            raise DeliveryError("SMTP authentication failed") from e
        except (smtplib.SMTPException, OSError) as e:
            logger.error("Email to %s failed: %s", to, e)
            raise DeliveryError(f"Email to {to} failed: {e}") from e

        logger.info("Email sent to %s", to)
