"""SMTP notifier for matching hackathons."""
import logging
import smtplib
from email.errors import MessageError
from email.mime.text import MIMEText
from typing import Callable, List, Optional

from notifier.message import SUBJECT, build_body
from processor.models import EmailCredentials, SendResult

logger = logging.getLogger(__name__)

DEFAULT_SMTP_HOST = 'smtp.gmail.com'
DEFAULT_SMTP_PORT = 587


class EmailNotifier:
    """Sends one plain-text email over STARTTLS-authenticated SMTP."""

    def __init__(
        self,
        credentials: EmailCredentials,
        smtp_host: str = DEFAULT_SMTP_HOST,
        smtp_port: int = DEFAULT_SMTP_PORT,
        subject: str = SUBJECT,
        timeout: int = 30,
        smtp_factory: Optional[Callable[..., smtplib.SMTP]] = None
    ):
        """
        Initialize the notifier.

        Args:
            credentials: Sender, receiver and password
            smtp_host: SMTP submission host
            smtp_port: SMTP submission port
            subject: Subject line of the email
            timeout: SMTP connection timeout in seconds
            smtp_factory: Callable returning an SMTP connection
                (default: smtplib.SMTP)
        """
        self.credentials = credentials
        self.smtp_host = smtp_host
        self.smtp_port = smtp_port
        self.subject = subject
        self.timeout = timeout
        self.smtp_factory = smtp_factory or smtplib.SMTP

    def send(self, lines: List[str]) -> SendResult:
        """
        Send the formatted event lines as a single email.

        Args:
            lines: Formatted event lines, one per event

        Returns:
            SendResult describing whether the email was sent
        """
        if not self.credentials.is_complete:
            message = "Email credentials are not set in environment variables."
            logger.error(message)
            return SendResult(
                sent=False,
                error=message,
                error_type='configuration'
            )

        msg = self._create_message(build_body(lines))

        try:
            with self.smtp_factory(
                self.smtp_host,
                self.smtp_port,
                timeout=self.timeout
            ) as smtp:
                smtp.starttls()
                smtp.login(self.credentials.sender, self.credentials.password)
                smtp.send_message(msg)
        except (smtplib.SMTPException, OSError, UnicodeError, MessageError) as e:
            logger.error(f"Error sending email: {e}")
            return SendResult(
                sent=False,
                error=str(e),
                error_type=type(e).__name__
            )

        logger.info("Email sent successfully.")
        return SendResult(sent=True)

    def _create_message(self, body: str) -> MIMEText:
        msg = MIMEText(body, 'plain', 'utf-8')
        msg['Subject'] = self.subject
        msg['From'] = self.credentials.sender
        msg['To'] = self.credentials.receiver
        return msg
