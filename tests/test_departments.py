from conftest import auth, onboard


def create(client, token, **fields):
  payload = {"name": "Engineering", "email": "eng@x.com", "lead": "Grace"}
  payload.update(fields)
  return client.post("/api/departments", headers=auth(token), json=payload)


def test_department_crud(client, mailer):
  token = onboard(client, mailer)

  resp = create(client, token)
  assert resp.status_code == 201, resp.text
  dept = resp.json()["data"]
  assert dept["name"] == "Engineering"
  assert dept["email"] == "eng@x.com"
  assert dept["lead"] == "Grace"

  resp = client.get("/api/departments", headers=auth(token))
  assert resp.json()["count"] == 1

  resp = client.put(f"/api/departments/{dept['id']}", headers=auth(token), json={"lead": "Ada"})
  assert resp.status_code == 200
  assert resp.json()["data"]["lead"] == "Ada"
  assert resp.json()["data"]["name"] == "Engineering"

  resp = client.delete(f"/api/departments/{dept['id']}", headers=auth(token))
  assert resp.status_code == 200
  assert resp.json() == {"success": True, "data": {}}
  assert client.get("/api/departments", headers=auth(token)).json()["count"] == 0


def test_department_validation(client, mailer):
  token = onboard(client, mailer)
  assert create(client, token, name="").status_code == 400
  assert create(client, token, email="not-an-email").status_code == 400
  assert create(client, token, name="x" * 101).status_code == 400

  resp = create(client, token, email="", lead=None)
  assert resp.status_code == 201
  assert resp.json()["data"]["email"] is None


def test_departments_are_tenant_scoped(client, mailer):
  owner = onboard(client, mailer, "a@x.com", "C1")
  outsider = onboard(client, mailer, "b@y.com", "C2")
  dept_id = create(client, owner).json()["data"]["id"]

  assert client.get("/api/departments", headers=auth(outsider)).json()["count"] == 0

  resp = client.put(f"/api/departments/{dept_id}", headers=auth(outsider), json={"name": "Mine now"})
  assert resp.status_code == 403
  assert resp.json()["success"] is False
  resp = client.delete(f"/api/departments/{dept_id}", headers=auth(outsider))
  assert resp.status_code == 403

  resp = client.get("/api/departments", headers=auth(owner))
  assert resp.json()["data"][0]["name"] == "Engineering"


def test_missing_department_is_not_found(client, mailer):
  token = onboard(client, mailer)
  assert client.put("/api/departments/42", headers=auth(token), json={"name": "x"}).status_code == 404
  assert client.delete("/api/departments/42", headers=auth(token)).status_code == 404


def test_same_tenant_colleague_can_manage(client, mailer):
  first = onboard(client, mailer, "a@x.com", "C1")
  second = onboard(client, mailer, "b@x.com", "C1")
  dept_id = create(client, first).json()["data"]["id"]
  assert client.delete(f"/api/departments/{dept_id}", headers=auth(second)).status_code == 200


def test_blank_lead_is_stored_as_none(client, mailer):
  token = onboard(client, mailer)

  resp = create(client, token, lead="")
  assert resp.status_code == 201
  assert resp.json()["data"]["lead"] is None

  dept = create(client, token, name="Sales").json()["data"]
  assert dept["lead"] == "Grace"
  resp = client.put(f"/api/departments/{dept['id']}", headers=auth(token), json={"lead": "  "})
  assert resp.status_code == 200
  assert resp.json()["data"]["lead"] is None
