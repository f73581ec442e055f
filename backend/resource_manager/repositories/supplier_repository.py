from typing import List, Optional

from sqlalchemy import String, cast, func, or_
from sqlalchemy.orm import Session

from ..core.exceptions import RecordNotFoundError
from ..models import Supplier
from ..schemas.supplier import SupplierRecord


class SupplierRepository:
    """Supplier kayıtları. Commit çağıran serviste."""

    def __init__(self, db: Session):
        self.db = db

    def _records(self, query) -> List[SupplierRecord]:
        rows = query.order_by(Supplier.SupplierID.asc()).all()
        return [SupplierRecord.model_validate(r) for r in rows]

    def find_by_id(self, supid: int) -> Optional[SupplierRecord]:
        row = self.db.get(Supplier, supid)
        return SupplierRecord.model_validate(row) if row else None

    def exists(self, supid: int) -> bool:
        return self.db.get(Supplier, supid) is not None

    def find_all(self) -> List[SupplierRecord]:
        return self._records(self.db.query(Supplier))

    def count(self) -> int:
        return self.db.query(func.count(Supplier.SupplierID)).scalar() or 0

    def search(self, keyword: str) -> List[SupplierRecord]:
        pattern = f"%{keyword}%"
        q = self.db.query(Supplier).filter(or_(
            Supplier.SupplierName.like(pattern),
            Supplier.Phone.like(pattern),
            Supplier.Email.like(pattern),
        ))
        return self._records(q)

    def search_by_name(self, keyword: str) -> List[SupplierRecord]:
        return self._records(self.db.query(Supplier).filter(Supplier.SupplierName.like(f"%{keyword}%")))

    def search_by_phone(self, keyword: str) -> List[SupplierRecord]:
        return self._records(self.db.query(Supplier).filter(Supplier.Phone.like(f"%{keyword}%")))

    def search_by_email(self, keyword: str) -> List[SupplierRecord]:
        return self._records(self.db.query(Supplier).filter(Supplier.Email.like(f"%{keyword}%")))

    def search_by_id(self, keyword: str) -> List[SupplierRecord]:
        # id metin olarak karşılaştırılır; joker verilmezse tam eşleşme
        return self._records(self.db.query(Supplier).filter(cast(Supplier.SupplierID, String).like(keyword)))

    def save(self, record: SupplierRecord) -> SupplierRecord:
        if record.SupplierID is None:
            row = Supplier()
            self.db.add(row)
        else:
            row = self.db.get(Supplier, record.SupplierID)
            if row is None:
                raise RecordNotFoundError("Supplier", record.SupplierID)

        row.SupplierName = record.SupplierName
        row.Phone = record.Phone
        row.Email = record.Email
        self.db.flush()
        return SupplierRecord.model_validate(row)

    def delete_by_id(self, supid: int) -> bool:
        row = self.db.get(Supplier, supid)
        if row is None:
            return False
        self.db.delete(row)
        self.db.flush()
        return True
