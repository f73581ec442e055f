from resource_manager.core.access import ACCESS_POLICY, AccessLevel, required_level
from resource_manager.main import app
from resource_manager.repositories import ResourceRepository, SupplierRepository
from conftest import add_resource, add_supplier


def test_policy_table_levels():
    assert required_level("GET", "/reg") == AccessLevel.ANONYMOUS
    assert required_level("POST", "/reg") == AccessLevel.ANONYMOUS
    assert required_level("GET", "/reg_admin") == AccessLevel.ADMIN
    assert required_level("GET", "/") == AccessLevel.AUTHENTICATED
    assert required_level("GET", "/findRes") == AccessLevel.AUTHENTICATED
    assert required_level("GET", "/deleteRes/7") == AccessLevel.ADMIN
    assert required_level("GET", "/editSup/12") == AccessLevel.ADMIN
    assert required_level("POST", "/saveSup") == AccessLevel.ADMIN
    assert required_level("HEAD", "/login_page") == AccessLevel.ANONYMOUS
    # tabloda olmayan yol: en az giriş
    assert required_level("GET", "/something-else") == AccessLevel.AUTHENTICATED


def test_every_route_is_listed_in_policy():
    listed = {(m, p) for (m, p) in ACCESS_POLICY}
    for route in app.routes:
        methods = getattr(route, "methods", None)
        if not methods or not getattr(route, "include_in_schema", False):
            continue
        for m in methods - {"HEAD", "OPTIONS"}:
            assert (m, route.path) in listed, f"{m} {route.path} missing from ACCESS_POLICY"


def test_anonymous_is_redirected_to_login(client):
    r = client.get("/", follow_redirects=False)
    assert r.status_code == 303
    assert r.headers["location"] == "/login_page"

    r = client.get("/findSup?keywordName=x", follow_redirects=False)
    assert r.status_code == 303


def test_anonymous_delete_does_nothing(db, client):
    add_resource(db, "Bolt")
    r = client.get("/deleteRes/1", follow_redirects=False)
    assert r.status_code == 303
    assert r.headers["location"] == "/login_page"
    assert ResourceRepository(db).count() == 1


def test_non_admin_delete_gets_access_denied(db, user_client):
    rid = add_resource(db, "Bolt")
    r = user_client.get(f"/deleteRes/{rid}", follow_redirects=False)
    assert r.status_code == 403
    assert r.headers["content-type"].startswith("text/html")
    assert "Access denied" in r.text
    assert ResourceRepository(db).count() == 1


def test_non_admin_cannot_create_or_delete_suppliers(db, user_client):
    sid = add_supplier(db, "Acme")
    assert user_client.get("/newSup").status_code == 403
    assert user_client.post("/saveSup", data={"name": "Evil"}).status_code == 403
    assert user_client.get(f"/deleteSup/{sid}").status_code == 403
    assert user_client.get("/reg_admin").status_code == 403
    assert SupplierRepository(db).count() == 1


def test_non_admin_can_read(db, user_client):
    add_resource(db, "Bolt")
    r = user_client.get("/")
    assert r.status_code == 200
    assert r.json()["meta"]["view"] == "index"
    assert user_client.get("/sup").status_code == 200


def test_bearer_token_is_accepted(db, client):
    from resource_manager.core.security import create_access_token
    add_resource(db, "Bolt")
    token = create_access_token(sub="api", roles="ROLE_USER")
    r = client.get("/", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 200
    assert r.json()["data"]["username"] == "api"


def test_garbage_token_counts_as_anonymous(client):
    r = client.get("/", headers={"Authorization": "Bearer not-a-jwt"}, follow_redirects=False)
    assert r.status_code == 303


def test_expired_token_counts_as_anonymous(client):
    from resource_manager.core.security import create_access_token
    token = create_access_token(sub="api", roles="ROLE_USER", expires_minutes=-1)
    r = client.get("/", headers={"Authorization": f"Bearer {token}"}, follow_redirects=False)
    assert r.status_code == 303
    assert r.headers["location"] == "/login_page"


def test_token_signed_with_other_secret_counts_as_anonymous(client):
    from datetime import datetime, timedelta, timezone
    from jose import jwt
    forged = jwt.encode(
        {"sub": "mallory", "roles": "ROLE_ADMIN", "exp": datetime.now(tz=timezone.utc) + timedelta(minutes=5)},
        "some-other-secret",
        algorithm="HS256",
    )
    r = client.get("/newSup", headers={"Authorization": f"Bearer {forged}"}, follow_redirects=False)
    assert r.status_code == 303
    assert r.headers["location"] == "/login_page"
