from resource_manager.core.security import parse_roles, verify_password
from resource_manager.models import UserInfo
from resource_manager.services.user_service import authenticate, register_user, REGISTERED_MSG
from conftest import login


def test_register_hashes_password(db):
    assert register_user(db, name="bob", password="secret123", roles="ROLE_USER") == REGISTERED_MSG
    stored = db.query(UserInfo).filter(UserInfo.Name == "bob").one()
    assert stored.Password != "secret123"
    assert verify_password("secret123", stored.Password)
    assert authenticate(db, "bob", "secret123") is not None
    assert authenticate(db, "bob", "wrong") is None
    assert authenticate(db, "nobody", "secret123") is None


def test_roles_stored_verbatim(db):
    register_user(db, name="odd", password="pw", roles=" ROLE_X , whatever,")
    stored = db.query(UserInfo).filter(UserInfo.Name == "odd").one()
    assert stored.Roles == " ROLE_X , whatever,"
    assert parse_roles(stored.Roles) == ["ROLE_X", "whatever"]


def test_register_endpoint_then_login(db, client):
    r = client.post("/reg", data={"name": "carol", "password": "secret123"}, follow_redirects=False)
    assert r.status_code == 303
    assert r.headers["location"] == "/"
    stored = db.query(UserInfo).filter(UserInfo.Name == "carol").one()
    assert stored.Roles == "ROLE_USER"
    assert stored.Password != "secret123"

    # kayıt oturum açmaz
    assert client.get("/", follow_redirects=False).status_code == 303

    assert login(client, "carol", "wrong").headers["location"] == "/login_page?error"
    assert login(client, "carol", "secret123").headers["location"] == "/"
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["data"]["username"] == "carol"


def test_duplicate_name_rejected(db, client):
    client.post("/reg", data={"name": "dave", "password": "pw1"})
    r = client.post("/reg", data={"name": "dave", "password": "pw2"}, follow_redirects=False)
    assert r.status_code == 400
    assert r.json() == {"ok": False, "error": "username already exists"}


def test_login_page_flags(client):
    r = client.get("/login_page?error")
    assert r.status_code == 200
    body = r.json()
    assert body["meta"]["view"] == "login_page"
    assert body["data"]["error"] is True


def test_logout_clears_session(db, user_client):
    assert user_client.get("/").status_code == 200
    r = user_client.get("/logout", follow_redirects=False)
    assert r.headers["location"] == "/login_page?logout"
    assert user_client.get("/", follow_redirects=False).status_code == 303


def test_reg_page_logs_out(db, user_client):
    r = user_client.get("/reg")
    assert r.json()["meta"]["view"] == "reg_page"
    assert user_client.get("/", follow_redirects=False).status_code == 303


def test_admin_registers_admin(db, admin_client):
    assert admin_client.get("/reg_admin").json()["meta"]["view"] == "reg_page_admin"
    r = admin_client.post("/reg_admin", data={"name": "eve", "password": "pw"}, follow_redirects=False)
    assert r.status_code == 303
    stored = db.query(UserInfo).filter(UserInfo.Name == "eve").one()
    assert stored.Roles == "ROLE_ADMIN"
    # yönetici oturumu değişmez
    assert admin_client.get("/").json()["data"]["username"] == "boss"


def test_login_page_shows_registered_name(db, client):
    client.post("/reg", data={"name": "frank", "password": "pw"}, follow_redirects=False)
    data = client.get("/login_page").json()["data"]
    assert data["username"] == "frank"
    assert data["roles"] == ["ROLE_USER"]
