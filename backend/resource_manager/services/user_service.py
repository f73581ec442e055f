# backend/resource_manager/services/user_service.py
from __future__ import annotations
import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.config import ADMIN_ROLE
from ..core.security import hash_password, verify_password, parse_roles
from ..models import UserInfo
from ..repositories import UserRepository

logger = logging.getLogger(__name__)

REGISTERED_MSG = "User added to system!"


def register_user(db: Session, *, name: str, password: str, roles: str, anonymous: bool = False) -> str:
    """
    Parolayı hash'leyip kullanıcıyı kaydeder. Roller doğrulanmadan saklanır.
    anonymous=True iken yönetici rolü gelirse sadece uyarı loglanır.
    """
    name = name.strip()
    repo = UserRepository(db)
    if repo.find_by_name(name):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="username already exists")

    if anonymous and ADMIN_ROLE in parse_roles(roles):
        logger.warning("anonymous registration requested admin role: user=%s", name)

    user = UserInfo(Name=name, Password=hash_password(password), Roles=roles or "")
    try:
        repo.save(user)
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="username already exists")
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("register_user error (name=%s)", name)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"register_user error: {type(e).__name__}",
        )

    logger.info("user registered: name=%s roles=%s", name, user.Roles)
    return REGISTERED_MSG


def authenticate(db: Session, name: str, password: str) -> Optional[UserInfo]:
    user = UserRepository(db).find_by_name((name or "").strip())
    if not user or not user.Password or not verify_password(password, user.Password):
        logger.info("failed login: user=%s", name)
        return None
    return user
