"""Celery task sending the welcome email after registration."""

import logging
import smtplib

from sqlalchemy.orm import Session

from blog_api.celery_app import app as celery_app
from blog_api.database import SessionLocal
from blog_api.repositories.users import find_user_by_id
from blog_api.services.mail import MailService

logger = logging.getLogger(__name__)


@celery_app.task(bind=True, max_retries=2, default_retry_delay=60)
def send_welcome_email(self, user_id: int) -> dict:
    """Send the welcome email to a newly registered user.

    Args:
        user_id: ID of the registered user

    Returns:
        dict with the delivery outcome
    """
    db: Session = SessionLocal()
    try:
        user = find_user_by_id(db, user_id)
        if not user:
            logger.warning(f"User {user_id} not found, welcome email not sent")
            return {"success": False, "user_id": user_id, "reason": "user not found"}

        mail_service = MailService()
        try:
            sent = mail_service.send_welcome(user.email, user.name)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Welcome email to user {user_id} failed: {e}")
            raise self.retry(exc=e) from e

        if not sent:
            return {"success": False, "user_id": user_id, "reason": "mail not configured"}
        return {"success": True, "user_id": user_id}
    finally:
        db.close()
