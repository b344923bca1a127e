from abc import ABC, abstractmethod

from pydantic import BaseModel

from libs.result import Result


class MailMessage(BaseModel):
    """Outbound email"""

    to: str
    subject: str
    html_body: str


class IMailSender(ABC):
    """Mail delivery interface - application layer"""

    @abstractmethod
    async def send(self, message: MailMessage) -> Result[None]:
        """Deliver a message, or return Error(MAIL_DELIVERY_FAILED)"""
        pass
