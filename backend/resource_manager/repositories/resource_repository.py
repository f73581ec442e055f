# backend/resource_manager/repositories/resource_repository.py
# Kaynak sorguları. commit yok; transaction servis katmanında.

from typing import List, Optional

from sqlalchemy import String, cast, func, or_
from sqlalchemy.orm import Session

from ..core.exceptions import RecordNotFoundError
from ..models import Resource, Supplier
from ..schemas.resource import ResourceRecord


def _contains(kw: str) -> str:
    # kullanıcının verdiği % ve _ joker olarak kalır
    return f"%{kw}%"


class ResourceRepository:
    """Resource kayıtları: arama, ekleme/güncelleme, silme."""

    def __init__(self, db: Session):
        self.db = db

    def _records(self, query) -> List[ResourceRecord]:
        rows = query.order_by(Resource.ResID.asc()).all()
        return [ResourceRecord.model_validate(r) for r in rows]

    # ---- okuma ----
    def find_by_id(self, resid: int) -> Optional[ResourceRecord]:
        row = self.db.get(Resource, resid)
        return ResourceRecord.model_validate(row) if row else None

    def find_all(self) -> List[ResourceRecord]:
        return self._records(self.db.query(Resource))

    def count(self) -> int:
        return self.db.query(func.count(Resource.ResID)).scalar() or 0

    def search(self, keyword: str) -> List[ResourceRecord]:
        """Genel arama: ad, tür, miktar, maliyet, tarih ya da tedarikçi adı."""
        pattern = _contains(keyword)
        q = (
            self.db.query(Resource)
            .outerjoin(Supplier, Resource.SupplierID == Supplier.SupplierID)
            .filter(or_(
                Resource.Name.like(pattern),
                Resource.Type.like(pattern),
                cast(Resource.Quantity, String).like(pattern),
                cast(Resource.Cost, String).like(pattern),
                Resource.AcDate.like(pattern),
                Supplier.SupplierName.like(pattern),
            ))
        )
        return self._records(q)

    def search_by_name(self, keyword: str) -> List[ResourceRecord]:
        return self._records(self.db.query(Resource).filter(Resource.Name.like(_contains(keyword))))

    def search_by_type(self, keyword: str) -> List[ResourceRecord]:
        return self._records(self.db.query(Resource).filter(Resource.Type.like(_contains(keyword))))

    def search_by_quantity(self, keyword: str) -> List[ResourceRecord]:
        # sayısal alan: anahtar kelimenin kendisi desen (joker yoksa tam eşleşme)
        return self._records(self.db.query(Resource).filter(cast(Resource.Quantity, String).like(keyword)))

    def search_by_cost(self, keyword: str) -> List[ResourceRecord]:
        return self._records(self.db.query(Resource).filter(cast(Resource.Cost, String).like(keyword)))

    def search_by_acdate(self, keyword: str) -> List[ResourceRecord]:
        return self._records(self.db.query(Resource).filter(Resource.AcDate.like(_contains(keyword))))

    def search_by_supplier(self, keyword: str) -> List[ResourceRecord]:
        q = (
            self.db.query(Resource)
            .join(Supplier, Resource.SupplierID == Supplier.SupplierID)
            .filter(Supplier.SupplierName.like(_contains(keyword)))
        )
        return self._records(q)

    def supplier_names(self, keyword: Optional[str] = None) -> List[Optional[str]]:
        """
        Her kaynak satırı için tedarikçi adı, ResID sırasında.
        keyword varsa inner join (search_by_supplier ile hizalı);
        yoksa tüm kaynaklar, tedarikçisiz olanlar None (find_all ile hizalı).
        """
        if keyword:
            q = (
                self.db.query(Supplier.SupplierName)
                .join(Resource, Resource.SupplierID == Supplier.SupplierID)
                .filter(Supplier.SupplierName.like(_contains(keyword)))
            )
        else:
            q = (
                self.db.query(Supplier.SupplierName)
                .select_from(Resource)
                .outerjoin(Supplier, Resource.SupplierID == Supplier.SupplierID)
            )
        return [name for (name,) in q.order_by(Resource.ResID.asc()).all()]

    # ---- yazma (commit çağıranda) ----
    def save(self, record: ResourceRecord) -> ResourceRecord:
        """ResID None ise ekle, değilse mevcut satırı güncelle."""
        if record.ResID is None:
            row = Resource()
            self.db.add(row)
        else:
            row = self.db.get(Resource, record.ResID)
            if row is None:
                raise RecordNotFoundError("Resource", record.ResID)

        row.Name = record.Name
        row.Type = record.Type
        row.Quantity = record.Quantity
        row.Cost = record.Cost
        row.AcDate = record.AcDate
        row.SupplierID = record.SupplierID
        self.db.flush()
        return ResourceRecord.model_validate(row)

    def delete_by_id(self, resid: int) -> bool:
        row = self.db.get(Resource, resid)
        if row is None:
            return False
        self.db.delete(row)
        self.db.flush()
        return True

    def delete_by_supplier(self, supid: int) -> int:
        n = (
            self.db.query(Resource)
            .filter(Resource.SupplierID == supid)
            .delete(synchronize_session="fetch")
        )
        self.db.flush()
        return n
