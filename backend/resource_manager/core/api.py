# backend/resource_manager/core/api.py
from __future__ import annotations
from typing import Any, Dict, Optional, Sequence
from fastapi.encoders import jsonable_encoder
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

# Tüm JSON cevaplarda UTF-8 charset
class UTF8JSONResponse(JSONResponse):
    media_type = "application/json; charset=utf-8"

def list_meta(items: Optional[Sequence[Any]] = None, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    meta: Dict[str, Any] = {}
    if items is not None:
        meta["count"] = len(items)
    if extra:
        meta.update(extra)
    return meta

def ok(data: Any = True, meta: Optional[Dict[str, Any]] = None, status_code: int = 200):
    payload: Dict[str, Any] = {"ok": True, "data": data}
    if meta:
        payload["meta"] = meta
    return UTF8JSONResponse(content=payload, status_code=status_code)

def fail(error: str, status_code: int = 400, meta: Optional[Dict[str, Any]] = None):
    payload: Dict[str, Any] = {"ok": False, "error": error}
    if meta:
        payload["meta"] = meta
    return UTF8JSONResponse(content=payload, status_code=status_code)

def page(view: str, model: Dict[str, Any], items: Optional[Sequence[Any]] = None):
    """Sayfa cevabı: görünüm adı meta'da, sayfa modeli data'da."""
    return ok(jsonable_encoder(model), meta=list_meta(items, extra={"view": view}))

def redirect_to(url: str):
    # POST sonrası GET'e dönüş (Post/Redirect/Get)
    return RedirectResponse(url=url, status_code=303)

ACCESS_DENIED_HTML = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>403 - Access denied</title></head>
<body>
<h1>403 - Access denied</h1>
<p>You do not have permission to open this page.</p>
<p><a href="/">Back to resources</a> | <a href="/logout">Log out</a></p>
</body>
</html>
"""

def access_denied_page():
    return HTMLResponse(content=ACCESS_DENIED_HTML, status_code=403)
