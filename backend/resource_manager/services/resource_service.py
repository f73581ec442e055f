# backend/resource_manager/services/resource_service.py
from __future__ import annotations
import logging
from typing import Dict, List, Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import RecordNotFoundError
from ..repositories import ResourceRepository, SupplierRepository
from ..schemas.resource import ResourceRecord
from .search_service import is_present

logger = logging.getLogger(__name__)


def list_all_resources(db: Session, keyword: Optional[str] = None) -> List[ResourceRecord]:
    repo = ResourceRepository(db)
    if is_present(keyword):
        return repo.search(keyword)
    return repo.find_all()


def get_resource(db: Session, resid: int) -> ResourceRecord:
    rec = ResourceRepository(db).find_by_id(resid)
    if rec is None:
        raise RecordNotFoundError("Resource", resid)
    return rec


def supplier_names_for(db: Session, resources: List[ResourceRecord]) -> List[Optional[str]]:
    """Listedeki her kaynak için tedarikçi adı (aynı sırada)."""
    names: Dict[int, Optional[str]] = {
        s.SupplierID: s.SupplierName for s in SupplierRepository(db).find_all()
    }
    return [names.get(r.SupplierID) if r.SupplierID is not None else None for r in resources]


def save_resource(db: Session, record: ResourceRecord) -> ResourceRecord:
    """Insert (ResID yok) ya da update. Tedarikçi verilmişse var olmalı."""
    try:
        if record.SupplierID is not None and not SupplierRepository(db).exists(record.SupplierID):
            raise RecordNotFoundError("Supplier", record.SupplierID)
        saved = ResourceRepository(db).save(record)
        db.commit()
        return saved
    except RecordNotFoundError:
        db.rollback()
        raise
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("save_resource error (ResID=%s)", record.ResID)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"save_resource error: {type(e).__name__}",
        )


def delete_resource(db: Session, resid: int) -> None:
    try:
        if not ResourceRepository(db).delete_by_id(resid):
            raise RecordNotFoundError("Resource", resid)
        db.commit()
    except RecordNotFoundError:
        db.rollback()
        raise
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("delete_resource error (ResID=%s)", resid)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"delete_resource error: {type(e).__name__}",
        )
