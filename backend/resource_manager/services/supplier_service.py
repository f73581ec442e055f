# backend/resource_manager/services/supplier_service.py
from __future__ import annotations
import logging
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import RecordNotFoundError
from ..repositories import ResourceRepository, SupplierRepository
from ..schemas.supplier import SupplierRecord
from .search_service import is_present

logger = logging.getLogger(__name__)


def list_all_suppliers(db: Session, keyword: Optional[str] = None) -> List[SupplierRecord]:
    repo = SupplierRepository(db)
    if is_present(keyword):
        return repo.search(keyword)
    return repo.find_all()


def list_suppliers(db: Session) -> List[SupplierRecord]:
    return SupplierRepository(db).find_all()


def get_supplier(db: Session, supid: int) -> SupplierRecord:
    rec = SupplierRepository(db).find_by_id(supid)
    if rec is None:
        raise RecordNotFoundError("Supplier", supid)
    return rec


def save_supplier(db: Session, record: SupplierRecord) -> SupplierRecord:
    try:
        saved = SupplierRepository(db).save(record)
        db.commit()
        return saved
    except RecordNotFoundError:
        db.rollback()
        raise
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("save_supplier error (SupplierID=%s)", record.SupplierID)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"save_supplier error: {type(e).__name__}",
        )


def delete_supplier(db: Session, supid: int) -> int:
    """
    Tedarikçiyi ve ona bağlı tüm kaynakları tek transaction'da siler.
    Dönen değer: silinen kaynak sayısı.
    """
    try:
        sup_repo = SupplierRepository(db)
        if not sup_repo.exists(supid):
            raise RecordNotFoundError("Supplier", supid)
        removed = ResourceRepository(db).delete_by_supplier(supid)
        sup_repo.delete_by_id(supid)
        db.commit()
        logger.info("supplier %s deleted with %s dependent resource(s)", supid, removed)
        return removed
    except RecordNotFoundError:
        db.rollback()
        raise
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("delete_supplier error (SupplierID=%s)", supid)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"delete_supplier error: {type(e).__name__}",
        )
