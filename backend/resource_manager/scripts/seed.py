import logging
import os
from contextlib import contextmanager

from sqlalchemy import select

from resource_manager.core.config import ADMIN_ROLE
from resource_manager.core.db import Base, SessionLocal, engine
from resource_manager.core.security import hash_password
from resource_manager.models import Resource, Supplier, UserInfo

logger = logging.getLogger(__name__)

# ---------- küçük yardımcılar ----------

@contextmanager
def session_scope():
    """Tek seferlik session aç/kapat (hata olursa rollback)."""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

def get_one(db, model, **by):
    """Tekil alanlara göre satır getir (yoksa None)."""
    return db.execute(select(model).filter_by(**by)).scalars().first()

def get_or_create(db, model, unique_by: dict, defaults: dict | None = None):
    """unique_by ile ara, yoksa oluştur (idempotent)."""
    inst = get_one(db, model, **unique_by)
    if inst:
        return inst, False
    data = {**unique_by, **(defaults or {})}
    inst = model(**data)
    db.add(inst)
    db.flush()
    return inst, True

# ---------- tohum veriler (idempotent) ----------

SUPPLIERS = [
    {"SupplierName": "Acme Fasteners", "Phone": "+1-555-0100", "Email": "sales@acme.example"},
    {"SupplierName": "Wire & Co",      "Phone": "+1-555-0199", "Email": "orders@wireco.example"},
]

# supplier: SUPPLIERS içindeki ad
RESOURCES = [
    {"Name": "Bolt",  "Type": "hardware", "Quantity": 10, "Cost": 2,  "AcDate": "2024-01-15", "supplier": "Acme Fasteners"},
    {"Name": "Nut",   "Type": "hardware", "Quantity": 25, "Cost": 1,  "AcDate": "2024-01-15", "supplier": "Acme Fasteners"},
    {"Name": "Cable", "Type": "hardware", "Quantity": 5,  "Cost": 12, "AcDate": "2024-02-03", "supplier": "Wire & Co"},
]

def seed(db, admin_name: str = "admin", admin_password: str = "admin") -> dict:
    """Demo tedarikçi/kaynak ve bir yönetici hesabı; tekrar çalıştırılabilir."""
    created = {"suppliers": 0, "resources": 0, "users": 0}

    by_name = {}
    for s in SUPPLIERS:
        sup, new = get_or_create(db, Supplier, {"SupplierName": s["SupplierName"]}, defaults=s)
        by_name[sup.SupplierName] = sup
        created["suppliers"] += int(new)

    for r in RESOURCES:
        data = {k: v for k, v in r.items() if k != "supplier"}
        data["SupplierID"] = by_name[r["supplier"]].SupplierID
        _, new = get_or_create(db, Resource, {"Name": r["Name"]}, defaults=data)
        created["resources"] += int(new)

    if not get_one(db, UserInfo, Name=admin_name):
        db.add(UserInfo(Name=admin_name, Password=hash_password(admin_password), Roles=ADMIN_ROLE))
        db.flush()
        created["users"] += 1

    return created

def run():
    Base.metadata.create_all(bind=engine)
    with session_scope() as db:
        created = seed(
            db,
            admin_name=os.getenv("SEED_ADMIN_NAME", "admin"),
            admin_password=os.getenv("SEED_ADMIN_PASSWORD", "admin"),
        )
    logger.info("Seed tamam: %s", created)

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run()
