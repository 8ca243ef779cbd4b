import asyncio
import logging
import smtplib
from abc import ABC, abstractmethod
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Any

import httpx

from app.core.config import Settings
from app.core.errors import NotificationError
from app.models.booking import BootcampRequest, ConsultationRequest
from app.models.submission import NotificationOutcome, TemplateKind
from app.services.email_service import render_message

logger = logging.getLogger(__name__)


class Notifier(ABC):
    """Sends one rendered message to one recipient.

    Subclasses implement ``deliver`` and raise NotificationError when the
    transport fails. ``send`` never raises for transport failures; it reports
    them in the returned outcome. There is no retry.
    """

    @abstractmethod
    async def deliver(self, recipient: str, subject: str, html: str) -> None:
        """Hand the message to the transport. Raises NotificationError on failure."""

    async def send(
        self,
        recipient: str,
        kind: TemplateKind,
        payload: ConsultationRequest | BootcampRequest,
    ) -> NotificationOutcome:
        subject, html = render_message(kind, payload)
        try:
            await self.deliver(recipient, subject, html)
        except NotificationError as e:
            logger.error("Email %s to %s failed: %s", kind.value, recipient, e.reason)
            return NotificationOutcome(recipient=recipient, kind=kind, ok=False, error=e.reason)
        logger.info("Email %s sent to %s", kind.value, recipient)
        return NotificationOutcome(recipient=recipient, kind=kind, ok=True)


class ConsoleNotifier(Notifier):
    """Logs messages instead of sending them. Used when no transport is configured."""

    async def deliver(self, recipient: str, subject: str, html: str) -> None:
        logger.info("Email transport not configured; would send %r to %s:\n%s", subject, recipient, html)


class SmtpNotifier(Notifier):
    def __init__(self, settings: Settings):
        self.settings = settings

    def _send_email_sync(self, to_email: str, subject: str, html_body: str) -> None:
        """Send email via SMTP (blocking). Run off the event loop."""
        s = self.settings
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = f"{s.from_name} <{s.from_email}>"
        msg["To"] = to_email
        msg.attach(MIMEText(html_body, "html", "utf-8"))
        try:
            with smtplib.SMTP(s.smtp_host, s.smtp_port, timeout=s.email_timeout_seconds) as server:
                server.starttls()
                server.login(s.smtp_user, s.smtp_password)
                server.sendmail(s.from_email, [to_email], msg.as_string())
        except (smtplib.SMTPException, OSError) as e:
            raise NotificationError(to_email, f"{type(e).__name__}: {e}") from e

    async def deliver(self, recipient: str, subject: str, html: str) -> None:
        await asyncio.to_thread(self._send_email_sync, recipient, subject, html)


class ResendNotifier(Notifier):
    """Sends through the Resend HTTP API."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self._transport = transport

    async def deliver(self, recipient: str, subject: str, html: str) -> None:
        s = self.settings
        payload: dict[str, Any] = {
            "from": f"{s.from_name} <{s.from_email}>",
            "to": [recipient],
            "subject": subject,
            "html": html,
        }
        try:
            async with httpx.AsyncClient(timeout=s.email_timeout_seconds, transport=self._transport) as client:
                resp = await client.post(
                    s.resend_api_url,
                    json=payload,
                    headers={"Authorization": f"Bearer {s.resend_api_key}"},
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NotificationError(recipient, f"{type(e).__name__}: {e}") from e
        if resp.status_code >= 300:
            raise NotificationError(recipient, f"status={resp.status_code} body={resp.text[:500]}")


def build_notifier(settings: Settings) -> Notifier:
    backend = settings.resolved_email_backend
    if backend == "smtp":
        return SmtpNotifier(settings)
    if backend == "resend":
        return ResendNotifier(settings)
    if backend == "console":
        return ConsoleNotifier()
    raise ValueError(f"Unknown EMAIL_BACKEND: {backend!r}")
