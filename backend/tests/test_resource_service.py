import pytest

from resource_manager.core.exceptions import RecordNotFoundError
from resource_manager.repositories import ResourceRepository, SupplierRepository
from resource_manager.schemas.resource import ResourceRecord
from resource_manager.schemas.supplier import SupplierRecord
from resource_manager.services import resource_service, supplier_service
from conftest import add_resource, add_supplier


def test_save_inserts_then_updates(db):
    sup = supplier_service.save_supplier(db, SupplierRecord(SupplierName="Acme", Phone="1", Email="a@x"))
    assert sup.SupplierID is not None

    rec = resource_service.save_resource(db, ResourceRecord(Name="Bolt", Type="hardware", Quantity=3, SupplierID=sup.SupplierID))
    assert rec.ResID is not None

    updated = resource_service.save_resource(db, rec.model_copy(update={"Quantity": 7}))
    assert updated.ResID == rec.ResID
    assert resource_service.get_resource(db, rec.ResID).Quantity == 7
    assert ResourceRepository(db).count() == 1


def test_records_are_immutable(db):
    rec = ResourceRecord(Name="Bolt")
    with pytest.raises(Exception):
        rec.Name = "Nut"


def test_save_with_unknown_supplier_is_rejected(db):
    with pytest.raises(RecordNotFoundError):
        resource_service.save_resource(db, ResourceRecord(Name="Bolt", SupplierID=999))
    assert ResourceRepository(db).count() == 0


def test_update_of_missing_record_is_not_found(db):
    with pytest.raises(RecordNotFoundError):
        supplier_service.save_supplier(db, SupplierRecord(SupplierID=42, SupplierName="Ghost"))


def test_get_missing_resource_raises(db):
    with pytest.raises(RecordNotFoundError) as ei:
        resource_service.get_resource(db, 123)
    assert ei.value.kind == "Resource"
    assert ei.value.record_id == 123


def test_delete_supplier_cascades_to_its_resources(db):
    acme = add_supplier(db, "Acme")
    other = add_supplier(db, "Other")
    add_resource(db, "Bolt", supplier_id=acme)
    add_resource(db, "Nut", supplier_id=acme)
    keep = add_resource(db, "Cable", supplier_id=other)
    before = ResourceRepository(db).count()

    removed = supplier_service.delete_supplier(db, acme)

    assert removed == 2
    assert ResourceRepository(db).count() == before - 2
    assert SupplierRepository(db).find_by_id(acme) is None
    assert [r.ResID for r in ResourceRepository(db).find_all()] == [keep]


def test_delete_missing_supplier_raises(db):
    with pytest.raises(RecordNotFoundError):
        supplier_service.delete_supplier(db, 5)


def test_general_search_spans_fields_and_supplier_name(db):
    acme = add_supplier(db, "Acme")
    add_resource(db, "Bolt", "hardware", 10, 2, "2024-01-15", acme)
    add_resource(db, "Paper", "office", 3, 4, "2023-05-01", None)

    assert [r.Name for r in resource_service.list_all_resources(db, "Acme")] == ["Bolt"]
    assert [r.Name for r in resource_service.list_all_resources(db, "office")] == ["Paper"]
    assert [r.Name for r in resource_service.list_all_resources(db, "2023")] == ["Paper"]
    assert len(resource_service.list_all_resources(db, None)) == 2


def test_general_supplier_search(db):
    add_supplier(db, "Acme", "555-0100", "sales@acme.example")
    add_supplier(db, "Wire", "555-0199", "orders@wire.example")
    assert [s.SupplierName for s in supplier_service.list_all_suppliers(db, "0199")] == ["Wire"]
    assert len(supplier_service.list_all_suppliers(db, "")) == 2


def test_supplier_names_for_keeps_row_order(db):
    acme = add_supplier(db, "Acme")
    a = add_resource(db, "A", supplier_id=acme)
    b = add_resource(db, "B")
    recs = [resource_service.get_resource(db, b), resource_service.get_resource(db, a)]
    assert resource_service.supplier_names_for(db, recs) == [None, "Acme"]
