"""Email service for account notifications"""

import asyncio
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

from ...core.config import settings

logger = logging.getLogger(__name__)


class EmailService:

    def __init__(self):
        self.smtp_host = settings.SMTP_HOST
        self.smtp_port = settings.SMTP_PORT
        self.smtp_username = settings.SMTP_USERNAME
        self.smtp_password = settings.SMTP_PASSWORD
        self.smtp_use_tls = settings.SMTP_USE_TLS
        self.from_email = settings.FROM_EMAIL
        self.from_name = settings.FROM_NAME
        self.frontend_url = settings.FRONTEND_URL

    async def send_email(
        self,
        to_email: str,
        subject: str,
        html_content: str,
        text_content: Optional[str] = None,
    ) -> bool:
        """Send an email; without SMTP configured the message is only logged"""
        if not self.smtp_host:
            logger.info("SMTP not configured, email to %s: %s\n%s", to_email, subject, text_content or html_content)
            return True

        msg = MIMEMultipart('alternative')
        msg['Subject'] = subject
        msg['From'] = f"{self.from_name} <{self.from_email}>"
        msg['To'] = to_email
        if text_content:
            msg.attach(MIMEText(text_content, 'plain'))
        msg.attach(MIMEText(html_content, 'html'))

        try:
            await self._send_smtp_email(msg)
        except (smtplib.SMTPException, OSError):
            logger.exception("Error sending email to %s", to_email)
            return False

        logger.info("Email sent to %s: %s", to_email, subject)
        return True

    async def _send_smtp_email(self, msg: MIMEMultipart):
        def send_sync():
            with smtplib.SMTP(self.smtp_host, self.smtp_port) as server:
                if self.smtp_use_tls:
                    server.starttls()
                if self.smtp_username:
                    server.login(self.smtp_username, self.smtp_password)
                server.send_message(msg)

        # Run in thread pool to avoid blocking
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, send_sync)

    async def send_password_reset_email(self, to_email: str, full_name: str, reset_token: str) -> bool:
        reset_url = f"{self.frontend_url}/reset-password?token={reset_token}"
        minutes = settings.PASSWORD_RESET_EXPIRATION_MINUTES

        subject = f"Reset your {self.from_name} password"

        html_content = f"""
        <!DOCTYPE html>
        <html>
        <body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333;">
            <div style="max-width: 600px; margin: 0 auto; padding: 20px;">
                <h2>Hi {full_name},</h2>
                <p>We received a request to reset your password. Use the link below to choose a new one:</p>
                <p><a href="{reset_url}">{reset_url}</a></p>
                <p>This link expires in {minutes} minutes. If you did not request a reset, ignore this email.</p>
            </div>
        </body>
        </html>
        """

        text_content = f"""
        Hi {full_name},

        Reset your {self.from_name} password here:
        {reset_url}

        This link expires in {minutes} minutes.
        If you did not request a reset, you can ignore this email.
        """

        return await self.send_email(to_email, subject, html_content, text_content)
