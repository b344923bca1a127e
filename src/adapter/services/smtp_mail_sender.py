import logging
import smtplib
from email.message import EmailMessage

from fastapi.concurrency import run_in_threadpool

from libs.result import Error, Result, Return
from src.app.services.mail_sender import IMailSender, MailMessage
from src.domain.entities import ErrorCode

logger = logging.getLogger(__name__)


class SmtpMailSender(IMailSender):
    """Sends HTML mail over SMTP; the blocking client runs in the threadpool"""

    def __init__(
        self,
        host: str,
        port: int,
        sender: str,
        username: str = "",
        password: str = "",
        use_tls: bool = True,
        timeout: float = 10.0,
    ):
        self.host = host
        self.port = port
        self.sender = sender
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout

    def _build(self, message: MailMessage) -> EmailMessage:
        email = EmailMessage()
        email["From"] = self.sender
        email["To"] = message.to
        email["Subject"] = message.subject
        email.set_content(message.html_body, subtype="html")
        return email

    def _deliver(self, email: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as conn:
            if self.use_tls:
                conn.starttls()
            if self.username:
                conn.login(self.username, self.password)
            conn.send_message(email)

    async def send(self, message: MailMessage) -> Result[None]:
        try:
            await run_in_threadpool(self._deliver, self._build(message))
        except (smtplib.SMTPException, OSError) as exc:
            logger.error(f"Mail delivery to SMTP {self.host}:{self.port} failed: {exc}")
            return Return.err(
                Error(ErrorCode.MAIL_DELIVERY_FAILED, "Email could not be delivered")
            )
        return Return.ok(None)
