"""Mail service for sending transactional emails."""
import logging
import smtplib
from dataclasses import dataclass
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi.concurrency import run_in_threadpool
from jinja2 import Environment, FileSystemLoader, select_autoescape

from venuebook.core.config import settings

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


class MailerError(Exception):
    """Raised when an email cannot be delivered."""
    pass


@dataclass
class MailMessage:
    """A rendered email ready for delivery."""

    to_email: str
    subject: str
    html_content: str
    text_content: Optional[str] = None
    from_email: str = ""


class Mailer:
    """Service for rendering templates and delivering email."""

    def __init__(self):
        """Initialize the mailer from settings."""
        self.backend = settings.MAIL_BACKEND
        self.from_email = settings.MAIL_FROM
        self.smtp_host = settings.SMTP_HOST
        self.smtp_port = settings.SMTP_PORT
        self.smtp_username = settings.SMTP_USERNAME
        self.smtp_password = settings.SMTP_PASSWORD
        self.smtp_use_tls = settings.SMTP_USE_TLS
        self.env = Environment(
            loader=FileSystemLoader(str(TEMPLATES_DIR)),
            autoescape=select_autoescape(["html"]),
        )

    def render(self, template_key: str, context: Dict[str, Any]) -> MailMessage:
        """
        Render the HTML and plain text parts of an email template.

        Args:
            template_key: Template path without extension (e.g. 'emails/otp_verification')
            context: Template context variables

        Returns:
            MailMessage without recipient or subject filled in
        """
        html_content = self.env.get_template(f"{template_key}.html").render(**context)
        text_content = self.env.get_template(f"{template_key}.txt").render(**context)
        return MailMessage(
            to_email="",
            subject="",
            html_content=html_content,
            text_content=text_content,
            from_email=self.from_email,
        )

    async def send_otp_email(self, to_email: str, name: str, otp_code: int) -> MailMessage:
        """
        Send the OTP verification email to a newly registered user.

        Args:
            to_email: Recipient email address
            name: Recipient display name
            otp_code: Code to include in the message

        Returns:
            The delivered message
        """
        message = self.render(
            "emails/otp_verification",
            {
                "name": name,
                "otp_code": otp_code,
                "expire_minutes": settings.OTP_EXPIRE_MINUTES,
            },
        )
        message.to_email = to_email
        message.subject = "Welcome Onboard!"

        await self.send(message)
        return message

    async def send(self, message: MailMessage):
        """Deliver a message with the configured backend."""
        if self.backend == "console":
            logger.info(
                f"Email to {message.to_email} ({message.subject}):\n{message.text_content}"
            )
            return

        if self.backend != "smtp":
            raise MailerError(f"Unknown mail backend '{self.backend}'")

        await run_in_threadpool(self._send_smtp_email, message)
        logger.info(f"Sent email '{message.subject}' to {message.to_email}")

    def _send_smtp_email(self, message: MailMessage):
        """Send email via SMTP."""
        msg = MIMEMultipart("alternative")
        msg["Subject"] = message.subject
        msg["From"] = message.from_email or self.from_email
        msg["To"] = message.to_email

        if message.text_content:
            msg.attach(MIMEText(message.text_content, "plain"))
        msg.attach(MIMEText(message.html_content, "html"))

        try:
            with smtplib.SMTP(self.smtp_host, self.smtp_port, timeout=30) as server:
                if self.smtp_use_tls:
                    server.starttls()
                if self.smtp_username:
                    server.login(self.smtp_username, self.smtp_password)
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            raise MailerError(f"SMTP error: {e}") from e


# Singleton instance
mailer = Mailer()
