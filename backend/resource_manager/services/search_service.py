# backend/resource_manager/services/search_service.py
"""
Anahtar kelime filtresi (tek alan, öncelik sırası sabit).

Verilen adaylardan ilk DOLU olan seçilir (None ve "" boş sayılır), sadece o
alana göre arama yapılır. Birden fazla alan dolu olsa bile kesişim alınmaz:
öncelikli alan kazanır. Hiçbiri dolu değilse tüm liste döner.

Not: bu davranış dışarıdan gözlemlenebilir; çok alanlı (AND) filtreye
çevrilmeden olduğu gibi korunur.
"""
from __future__ import annotations
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar

from sqlalchemy.orm import Session

from ..repositories import ResourceRepository, SupplierRepository
from ..schemas.resource import ResourceRecord
from ..schemas.search import FilterResult
from ..schemas.supplier import SupplierRecord

T = TypeVar("T")

# Alan etiketleri (görünüm formundaki parametre adlarıyla aynı)
KW_NAME = "keywordName"
KW_TYPE = "keywordType"
KW_QUANTITY = "keywordQuantity"
KW_COST = "keywordCost"
KW_ACDATE = "keywordAcdate"
KW_SUPPLIER = "keywordSupplier"
KW_PHONE = "keywordPhone"
KW_EMAIL = "keywordEmail"
KW_ID = "keywordId"

RESOURCE_PRIORITY: Tuple[str, ...] = (KW_NAME, KW_TYPE, KW_QUANTITY, KW_COST, KW_ACDATE, KW_SUPPLIER)
SUPPLIER_PRIORITY: Tuple[str, ...] = (KW_NAME, KW_PHONE, KW_EMAIL, KW_ID)


def is_present(value: Optional[str]) -> bool:
    return value is not None and value != ""


def first_present(candidates: Sequence[Tuple[str, Optional[str]]]) -> Optional[Tuple[str, str]]:
    """İlk dolu (etiket, değer) çifti; yoksa None."""
    for tag, value in candidates:
        if is_present(value):
            return tag, value
    return None


def _dispatch(
    candidates: Sequence[Tuple[str, Optional[str]]],
    searches: dict[str, Callable[[str], List[T]]],
    find_all: Callable[[], List[T]],
) -> FilterResult[T]:
    hit = first_present(candidates)
    if hit is None:
        return FilterResult(results=find_all())
    tag, value = hit
    return FilterResult(matched_field=tag, matched_value=value, results=searches[tag](value))


def select_resource_filter(
    db: Session,
    *,
    name: Optional[str] = None,
    type_: Optional[str] = None,
    quantity: Optional[str] = None,
    cost: Optional[str] = None,
    acdate: Optional[str] = None,
    supplier_name: Optional[str] = None,
) -> FilterResult[ResourceRecord]:
    """
    Öncelik: name > type > quantity > cost > acdate > supplier_name.
    supplier_name, Resource alanı değil Supplier adı üzerinden (join) filtreler.
    """
    repo = ResourceRepository(db)
    candidates = (
        (KW_NAME, name),
        (KW_TYPE, type_),
        (KW_QUANTITY, quantity),
        (KW_COST, cost),
        (KW_ACDATE, acdate),
        (KW_SUPPLIER, supplier_name),
    )
    searches = {
        KW_NAME: repo.search_by_name,
        KW_TYPE: repo.search_by_type,
        KW_QUANTITY: repo.search_by_quantity,
        KW_COST: repo.search_by_cost,
        KW_ACDATE: repo.search_by_acdate,
        KW_SUPPLIER: repo.search_by_supplier,
    }
    return _dispatch(candidates, searches, repo.find_all)


def select_supplier_filter(
    db: Session,
    *,
    name: Optional[str] = None,
    phone: Optional[str] = None,
    email: Optional[str] = None,
    id_: Optional[str] = None,
) -> FilterResult[SupplierRecord]:
    """Öncelik: name > phone > email > id (id metin olarak eşleşir)."""
    repo = SupplierRepository(db)
    candidates = (
        (KW_NAME, name),
        (KW_PHONE, phone),
        (KW_EMAIL, email),
        (KW_ID, id_),
    )
    searches = {
        KW_NAME: repo.search_by_name,
        KW_PHONE: repo.search_by_phone,
        KW_EMAIL: repo.search_by_email,
        KW_ID: repo.search_by_id,
    }
    return _dispatch(candidates, searches, repo.find_all)


def supplier_names_matching(db: Session, keyword: Optional[str] = None) -> List[Optional[str]]:
    """
    Görüntüleme için tedarikçi adları (Resource id sırasında, satır başına bir ad).
    Dolu keyword -> adı eşleşen ve en az bir Resource'un bağlı olduğu tedarikçiler.
    Boş -> her Resource'un tedarikçi adı (tedarikçisiz satır için None).
    """
    repo = ResourceRepository(db)
    return repo.supplier_names(keyword if is_present(keyword) else None)
