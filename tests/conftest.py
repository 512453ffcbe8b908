import re
import pytest
from fastapi.testclient import TestClient

from easyhr.core.config import Settings
from easyhr.core.errors import EmailDeliveryFailed
from easyhr.main import create_app

PASSWORD = "Aa1!aaaa"
TOKEN_IN_LINK = re.compile(r"/verify-email/([0-9a-f]+)")


class RecordingMailer:
  """Stands in for the SMTP-backed mailer and keeps every message."""

  def __init__(self):
    self.outbox = []
    self.fail = False

  async def send(self, to, subject, body_text):
    if self.fail:
      raise EmailDeliveryFailed()
    self.outbox.append({"to": to, "subject": subject, "body": body_text})

  def last_token(self, to=None):
    for message in reversed(self.outbox):
      if to is None or message["to"] == to:
        return TOKEN_IN_LINK.search(message["body"]).group(1)
    raise AssertionError(f"no verification email for {to}")


@pytest.fixture
def settings(tmp_path):
  return Settings(
    database_url=f"sqlite:///{tmp_path / 'app.db'}",
    jwt_secret="test-secret",
    client_url="http://frontend.test",
    log_level="WARNING",
  )


@pytest.fixture
def mailer():
  return RecordingMailer()


@pytest.fixture
def app(settings, mailer):
  app = create_app(settings, mailer=mailer)
  yield app
  app.state.db.dispose()


@pytest.fixture
def client(app):
  return TestClient(app)


@pytest.fixture
def db(app):
  session = app.state.db.session()
  yield session
  session.close()


def registration(email="a@x.com", company_id="C1", first_name="Ana", **company):
  return {
    "firstName": first_name,
    "lastName": "Lopez",
    "email": email,
    "phoneNumber": "555-0100",
    "jobTitle": "HR Manager",
    "company": {
      "companyId": company_id,
      "employeesCount": company.get("employeesCount", "11-50"),
      "name": company.get("name", f"{company_id} Ltd"),
    },
  }


def register(client, mailer, email="a@x.com", company_id="C1", **kwargs):
  resp = client.post("/api/auth/register", json=registration(email, company_id, **kwargs))
  assert resp.status_code == 201, resp.text
  return mailer.last_token(email)


def onboard(client, mailer, email="a@x.com", company_id="C1", password=PASSWORD, **kwargs):
  """Register, verify and set a password; return the session token."""
  token = register(client, mailer, email, company_id, **kwargs)
  resp = client.get(f"/api/auth/verify-email/{token}")
  assert resp.status_code == 200, resp.text
  resp = client.put("/api/auth/create-password", json={"email": email, "password": password})
  assert resp.status_code == 200, resp.text
  resp = client.post("/api/auth/login", json={"email": email, "password": password})
  assert resp.status_code == 200, resp.text
  return resp.json()["token"]


def auth(token):
  return {"Authorization": f"Bearer {token}"}
