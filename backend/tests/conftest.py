import os
import shutil
import tempfile

# app import edilmeden önce: geçici SQLite dosyası
_TMP_DIR = tempfile.mkdtemp(prefix="resmgr-tests-")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_TMP_DIR, "test.db").replace("\\", "/")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("SESSION_SECRET", "test-session-secret")

import pytest
from fastapi.testclient import TestClient

from resource_manager.core.db import Base, SessionLocal, engine
from resource_manager.main import app
from resource_manager.models import Resource, Supplier
from resource_manager.services.user_service import register_user


@pytest.fixture(scope="session", autouse=True)
def _tmp_database_dir():
    yield
    # önce açık bağlantılar kapanır
    engine.dispose()
    shutil.rmtree(_TMP_DIR, ignore_errors=True)


@pytest.fixture()
def db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(db):
    with TestClient(app) as c:
        yield c


def add_supplier(db, name, phone=None, email=None) -> int:
    s = Supplier(SupplierName=name, Phone=phone, Email=email)
    db.add(s)
    db.commit()
    return s.SupplierID


def add_resource(db, name, type_=None, quantity=0, cost=0, acdate=None, supplier_id=None) -> int:
    r = Resource(Name=name, Type=type_, Quantity=quantity, Cost=cost, AcDate=acdate, SupplierID=supplier_id)
    db.add(r)
    db.commit()
    return r.ResID


def login(client, name, password):
    return client.post(
        "/login_page",
        data={"username": name, "password": password},
        follow_redirects=False,
    )


@pytest.fixture()
def admin_client(db, client):
    register_user(db, name="boss", password="bosspass", roles="ROLE_USER,ROLE_ADMIN")
    r = login(client, "boss", "bosspass")
    assert r.status_code == 303 and r.headers["location"] == "/"
    return client


@pytest.fixture()
def user_client(db, client):
    register_user(db, name="alice", password="alicepass", roles="ROLE_USER")
    r = login(client, "alice", "alicepass")
    assert r.status_code == 303 and r.headers["location"] == "/"
    return client
