"""Outbound mail over SMTP."""

import logging
import smtplib
from email.message import EmailMessage

from blog_api.config import Settings, get_settings

logger = logging.getLogger(__name__)

WELCOME_SUBJECT = "Welcome to the blog"


class MailService:
    """Sends plain-text mail through the configured SMTP server."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    @property
    def is_configured(self) -> bool:
        return self.settings.mail_enabled

    def build_welcome_message(self, to_address: str, name: str) -> EmailMessage:
        message = EmailMessage()
        message["Subject"] = WELCOME_SUBJECT
        message["From"] = self.settings.smtp_from
        message["To"] = to_address
        message.set_content(
            f"Hi {name},\n\n"
            "Thanks for signing up. You can now log in and start writing posts.\n"
        )
        return message

    def send(self, message: EmailMessage) -> None:
        """Deliver a message. SMTP and socket errors propagate to the caller."""
        with smtplib.SMTP_SSL(self.settings.smtp_host, self.settings.smtp_port, timeout=30) as smtp:
            if self.settings.smtp_user and self.settings.smtp_password:
                smtp.login(self.settings.smtp_user, self.settings.smtp_password)
            smtp.send_message(message)
        logger.info(f"Sent '{message['Subject']}' to {message['To']}")

    def send_welcome(self, to_address: str, name: str) -> bool:
        """Send the welcome email. Returns False when mail is not configured."""
        if not self.is_configured:
            logger.info("SMTP not configured, welcome email skipped")
            return False
        self.send(self.build_welcome_message(to_address, name))
        return True
