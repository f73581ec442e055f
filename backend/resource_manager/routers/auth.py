from fastapi import APIRouter, Depends, Form, Request
from sqlalchemy.orm import Session

from ..core.access import page_user
from ..core.api import page, redirect_to
from ..core.config import ADMIN_ROLE, DEFAULT_USER_ROLE
from ..core.db import get_db
from ..core.security import (
    SESSION_ROLES_KEY, SESSION_USERNAME_KEY, sign_in, sign_out,
)
from ..services.user_service import authenticate, register_user

router = APIRouter(tags=["auth"])


# ---- Giriş ----
@router.get("/login_page")
def login_form(request: Request, who: dict = Depends(page_user)):
    # /reg sonrası oturumdaki görüntüleme bilgisi burada gösterilir
    return page("login_page", {
        "error": "error" in request.query_params,
        "logout": "logout" in request.query_params,
        **who,
    })

@router.post("/login_page")
def login_submit(
    request: Request,
    username: str = Form(...),
    password: str = Form(...),
    db: Session = Depends(get_db),
):
    user = authenticate(db, username, password)
    if user is None:
        return redirect_to("/login_page?error")
    sign_in(request, user.Name, user.Roles)
    return redirect_to("/")

@router.api_route("/logout", methods=["GET", "POST"])
def logout(request: Request):
    sign_out(request)
    return redirect_to("/login_page?logout")


# ---- Kayıt (anonim) ----
@router.get("/reg")
def register_form(request: Request):
    # kayıt sayfası mevcut oturumu kapatır
    sign_out(request)
    return page("reg_page", {})

@router.post("/reg")
def register(
    request: Request,
    name: str = Form(...),
    password: str = Form(...),
    roles: str = Form(DEFAULT_USER_ROLE),
    db: Session = Depends(get_db),
):
    register_user(db, name=name, password=password, roles=roles, anonymous=True)
    # sadece görüntüleme bilgisi; giriş yine /login_page'den
    request.session[SESSION_USERNAME_KEY] = name
    request.session[SESSION_ROLES_KEY] = roles
    return redirect_to("/")


# ---- Kayıt (yönetici) ----
@router.get("/reg_admin")
def register_admin_form(who: dict = Depends(page_user)):
    return page("reg_page_admin", {**who})

@router.post("/reg_admin")
def register_admin(
    name: str = Form(...),
    password: str = Form(...),
    roles: str = Form(ADMIN_ROLE),
    db: Session = Depends(get_db),
):
    register_user(db, name=name, password=password, roles=roles)
    return redirect_to("/")
