import logging
from fastapi import Request
from fastapi_mail import ConnectionConfig, FastMail, MessageSchema, MessageType

from easyhr.core.config import Settings
from easyhr.core.errors import EmailDeliveryFailed

logger = logging.getLogger(__name__)


def build_connection_config(settings: Settings) -> ConnectionConfig:
  return ConnectionConfig(
    MAIL_USERNAME=settings.mail_username,
    MAIL_PASSWORD=settings.mail_password,
    MAIL_FROM=settings.mail_from,
    MAIL_FROM_NAME=settings.mail_from_name,
    MAIL_PORT=settings.mail_port,
    MAIL_SERVER=settings.mail_server,
    MAIL_STARTTLS=settings.mail_starttls,
    MAIL_SSL_TLS=settings.mail_ssl_tls,
    USE_CREDENTIALS=bool(settings.mail_username),
    VALIDATE_CERTS=True,
    SUPPRESS_SEND=int(settings.mail_suppress_send),
  )


class Mailer:
  """Sends plain-text mail through FastMail."""

  def __init__(self, settings: Settings):
    self.config = build_connection_config(settings)
    self.fm = FastMail(self.config)

  async def send(self, to: str, subject: str, body_text: str) -> None:
    message = MessageSchema(
      subject=subject,
      recipients=[to],
      body=body_text,
      subtype=MessageType.plain,
    )
    try:
      await self.fm.send_message(message)
    except Exception as e:
      logger.exception("Error sending email to %s", to)
      raise EmailDeliveryFailed() from e
    logger.info("Email '%s' sent to %s", subject, to)


def get_mailer(request: Request):
  return request.app.state.mailer
