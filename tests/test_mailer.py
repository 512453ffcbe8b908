import asyncio
from email.utils import parseaddr

import pytest

from easyhr.core.config import Settings
from easyhr.core.errors import EmailDeliveryFailed
from easyhr.services.mailer import Mailer


def test_send_builds_plain_text_message():
  mailer = Mailer(Settings(mail_suppress_send=True))
  with mailer.fm.record_messages() as outbox:
    asyncio.run(mailer.send("a@x.com", "Email Verification", "Click the link"))

  assert len(outbox) == 1
  assert parseaddr(outbox[0]["To"])[1] == "a@x.com"
  assert outbox[0]["Subject"] == "Email Verification"


def test_transport_failure_becomes_email_delivery_failed(monkeypatch):
  mailer = Mailer(Settings(mail_suppress_send=True))

  async def broken(message, template_name=None):
    raise ConnectionRefusedError("smtp down")

  monkeypatch.setattr(mailer.fm, "send_message", broken)
  with pytest.raises(EmailDeliveryFailed):
    asyncio.run(mailer.send("a@x.com", "Subject", "Body"))
