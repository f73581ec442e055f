from resource_manager.repositories import ResourceRepository, SupplierRepository
from resource_manager.scripts.seed import seed
from resource_manager.services.user_service import authenticate


def test_seed_is_idempotent(db):
    first = seed(db, admin_name="root", admin_password="rootpw")
    db.commit()
    assert first == {"suppliers": 2, "resources": 3, "users": 1}

    again = seed(db, admin_name="root", admin_password="rootpw")
    db.commit()
    assert again == {"suppliers": 0, "resources": 0, "users": 0}
    assert SupplierRepository(db).count() == 2
    assert ResourceRepository(db).count() == 3

    admin = authenticate(db, "root", "rootpw")
    assert admin is not None
    assert "ROLE_ADMIN" in admin.Roles
