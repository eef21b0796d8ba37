"""
Booking mail transport
Delivers HTML mail through the resort's Gmail account (STARTTLS on port 587)
"""
import logging
import smtplib
from email.mime.text import MIMEText
from typing import Optional

logger = logging.getLogger(__name__)

SMTP_TIMEOUT = 30


class EmailChannel:
    """Gmail SMTP sender authenticated with an app password"""

    def __init__(self, account: str, app_password: str,
                 smtp_host: str = "smtp.gmail.com", smtp_port: int = 587):
        self.account = account
        self.app_password = app_password
        self.smtp_host = smtp_host
        self.smtp_port = smtp_port

    def build_message(self, recipient: str, subject: str, html: str,
                      reply_to: Optional[str] = None) -> MIMEText:
        msg = MIMEText(html, "html", "utf-8")
        msg["From"] = self.account
        msg["To"] = recipient
        msg["Subject"] = subject
        if reply_to:
            msg["Reply-To"] = reply_to
        return msg

    def send(self, recipient: str, subject: str, html: str, reply_to: Optional[str] = None) -> bool:
        """Returns False when the SMTP exchange fails; the error is logged"""
        msg = self.build_message(recipient, subject, html, reply_to)
        try:
            with smtplib.SMTP(self.smtp_host, self.smtp_port, timeout=SMTP_TIMEOUT) as server:
                server.starttls()
                server.login(self.account, self.app_password)
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send email to {recipient} via {self.smtp_host}: {e}")
            return False

        logger.info(f"Email sent to {recipient}: {subject}")
        return True
