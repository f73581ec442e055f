# backend/resource_manager/routers/resources.py
from typing import Optional

from fastapi import APIRouter, Depends, Form, Path, Query
from sqlalchemy.orm import Session

from ..core.access import page_user
from ..core.api import page, redirect_to
from ..core.db import get_db
from ..schemas.resource import ResourceRecord
from ..services import resource_service, supplier_service
from ..services.search_service import KW_SUPPLIER, select_resource_filter, supplier_names_matching

router = APIRouter(tags=["resources"])


# ---- Liste / genel arama ----
@router.get("/")
def view_home_page(
    keyword: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    who: dict = Depends(page_user),
):
    list_res = resource_service.list_all_resources(db, keyword)
    if keyword:
        list_sups = resource_service.supplier_names_for(db, list_res)
    else:
        # tam liste: id sırası find_all ile aynı
        list_sups = supplier_names_matching(db, None)
    return page(
        "index",
        {"listRes": list_res, "listSups": list_sups, "keyword": keyword, **who},
        items=list_res,
    )


# ---- Tek alan filtresi ----
@router.get("/findRes")
def find_resources(
    keywordName: Optional[str] = Query(None),
    keywordType: Optional[str] = Query(None),
    keywordQuantity: Optional[str] = Query(None),
    keywordCost: Optional[str] = Query(None),
    keywordAcdate: Optional[str] = Query(None),
    keywordSupplier: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    who: dict = Depends(page_user),
):
    result = select_resource_filter(
        db,
        name=keywordName,
        type_=keywordType,
        quantity=keywordQuantity,
        cost=keywordCost,
        acdate=keywordAcdate,
        supplier_name=keywordSupplier,
    )
    if result.matched_field == KW_SUPPLIER:
        list_sups = supplier_names_matching(db, result.matched_value)
    else:
        list_sups = resource_service.supplier_names_for(db, result.results)
    model = {
        "listRes": result.results,
        "listSups": list_sups,
        "matchedField": result.matched_field,
        "matchedValue": result.matched_value,
        **result.model_attrs(),
        **who,
    }
    return page("index", model, items=result.results)


# ---- Formlar ----
@router.get("/newRes")
def show_new_resource_form(db: Session = Depends(get_db), who: dict = Depends(page_user)):
    return page("new_res", {"resource": ResourceRecord(), "suppliers": supplier_service.list_suppliers(db), **who})


@router.get("/editRes/{resid}")
def show_edit_resource_form(
    resid: int = Path(...),
    db: Session = Depends(get_db),
    who: dict = Depends(page_user),
):
    resource = resource_service.get_resource(db, resid)
    return page("edit_res", {"resource": resource, "suppliers": supplier_service.list_suppliers(db), **who})


@router.post("/saveRes")
def save_resource(
    resid: Optional[int] = Form(None),
    name: Optional[str] = Form(None),
    type: Optional[str] = Form(None),
    quantity: int = Form(0),
    cost: int = Form(0),
    acdate: Optional[str] = Form(None),
    supplier: Optional[int] = Form(None),
    db: Session = Depends(get_db),
):
    resource_service.save_resource(db, ResourceRecord(
        ResID=resid,
        Name=name,
        Type=type,
        Quantity=quantity,
        Cost=cost,
        AcDate=acdate,
        SupplierID=supplier,
    ))
    return redirect_to("/")


# GET ile silme: bu yola yapılan her GET yıkıcıdır
@router.get("/deleteRes/{resid}")
def delete_resource(resid: int = Path(...), db: Session = Depends(get_db)):
    resource_service.delete_resource(db, resid)
    return redirect_to("/")
