# backend/resource_manager/main.py
import json
import logging

from fastapi import FastAPI, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from .core.config import CORS_ALLOW_ORIGINS, LOG_LEVEL, SESSION_SECRET
from .core.db import Base, engine
from .core.access import authorize
from .core.exceptions import AccessDeniedError, NotAuthenticatedError, RecordNotFoundError
from . import models  # noqa: F401  (metadata dolsun)

# --- Router importları ---
from .routers.auth import router as auth_router
from .routers.resources import router as resources_router
from .routers.suppliers import router as suppliers_router

# --- API zarfları ---
from .core.api import ok, fail, redirect_to, access_denied_page, UTF8JSONResponse

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Tek yetki kapısı: her route'tan önce erişim tablosu kontrol edilir
app = FastAPI(
    title="Resources Manager",
    default_response_class=UTF8JSONResponse,
    dependencies=[Depends(authorize)],
)


# -----------------------------
# Global hata zarfı
# -----------------------------
@app.exception_handler(StarletteHTTPException)
async def http_exception_to_envelope(request: Request, exc: StarletteHTTPException):
    return fail(str(exc.detail) if exc.detail else exc.__class__.__name__, status_code=exc.status_code)

@app.exception_handler(RequestValidationError)
async def validation_exception_to_envelope(request: Request, exc: RequestValidationError):
    return fail("Validation error", status_code=422, meta={"errors": json.loads(json.dumps(exc.errors(), default=str))})

@app.exception_handler(RecordNotFoundError)
async def not_found_to_envelope(request: Request, exc: RecordNotFoundError):
    logger.info("not found: %s", exc)
    return fail("Record not found", status_code=404, meta={"kind": exc.kind, "id": exc.record_id})

@app.exception_handler(NotAuthenticatedError)
async def not_authenticated_to_login(request: Request, exc: NotAuthenticatedError):
    return redirect_to("/login_page")

@app.exception_handler(AccessDeniedError)
async def access_denied_to_page(request: Request, exc: AccessDeniedError):
    return access_denied_page()


# -----------------------------
# CORS yapılandırması (.env)
# -----------------------------
def _parse_origins(env_val: str | None):
    if not env_val or env_val.strip() == "*":
        return ["*"]
    try:
        parsed = json.loads(env_val)
        if isinstance(parsed, list):
            return [str(x) for x in parsed]
    except ValueError:
        pass
    return [s.strip() for s in env_val.split(",") if s.strip()]

ALLOWED_ORIGINS = _parse_origins(CORS_ALLOW_ORIGINS)
logger.info("CORS allow_origins = %s", ALLOWED_ORIGINS)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
# Oturum çerezi (imzalı); kimlik token'ı burada taşınır
app.add_middleware(SessionMiddleware, secret_key=SESSION_SECRET, session_cookie="RMSESSION")


# ---- startup: tablolar yoksa oluştur ----
@app.on_event("startup")
def _ensure_tables():
    Base.metadata.create_all(bind=engine)

# ---- Sağlık ucu ----
@app.get("/health")
def health():
    return ok({"service": "Resources Manager"})


# =========================
# Router kayıtları
# =========================
app.include_router(auth_router)
app.include_router(resources_router)
app.include_router(suppliers_router)

logger.info("routes registered: auth, resources, suppliers")
