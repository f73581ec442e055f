# backend/resource_manager/routers/suppliers.py
from typing import Optional

from fastapi import APIRouter, Depends, Form, Path, Query
from sqlalchemy.orm import Session

from ..core.access import page_user
from ..core.api import page, redirect_to
from ..core.db import get_db
from ..schemas.supplier import SupplierRecord
from ..services import supplier_service
from ..services.search_service import select_supplier_filter

router = APIRouter(tags=["suppliers"])


@router.get("/sup")
def view_supplier_page(
    keyword: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    who: dict = Depends(page_user),
):
    list_sup = supplier_service.list_all_suppliers(db, keyword)
    return page("sup", {"listSup": list_sup, "keyword": keyword, **who}, items=list_sup)


@router.get("/findSup")
def find_suppliers(
    keywordName: Optional[str] = Query(None),
    keywordPhone: Optional[str] = Query(None),
    keywordEmail: Optional[str] = Query(None),
    keywordId: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    who: dict = Depends(page_user),
):
    result = select_supplier_filter(
        db,
        name=keywordName,
        phone=keywordPhone,
        email=keywordEmail,
        id_=keywordId,
    )
    model = {
        "listSup": result.results,
        "matchedField": result.matched_field,
        "matchedValue": result.matched_value,
        **result.model_attrs(),
        **who,
    }
    return page("sup", model, items=result.results)


@router.get("/newSup")
def show_new_supplier_form(who: dict = Depends(page_user)):
    return page("new_sup", {"supplier": SupplierRecord(), **who})


@router.get("/editSup/{supid}")
def show_edit_supplier_form(
    supid: int = Path(...),
    db: Session = Depends(get_db),
    who: dict = Depends(page_user),
):
    return page("edit_sup", {"supplier": supplier_service.get_supplier(db, supid), **who})


@router.post("/saveSup")
def save_supplier(
    supid: Optional[int] = Form(None),
    name: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    db: Session = Depends(get_db),
):
    supplier_service.save_supplier(db, SupplierRecord(
        SupplierID=supid,
        SupplierName=name,
        Phone=phone,
        Email=email,
    ))
    return redirect_to("/sup")


# bağlı tüm kaynaklar da silinir
@router.get("/deleteSup/{supid}")
def delete_supplier(supid: int = Path(...), db: Session = Depends(get_db)):
    supplier_service.delete_supplier(db, supid)
    return redirect_to("/sup")
