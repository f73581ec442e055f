# backend/resource_manager/core/access.py
"""
Erişim politikası: (method, path) -> gereken seviye.

Tüm kurallar bu tabloda. Tabloda olmayan her uç en az giriş ister.
Kontrol tek bir bağımlılıkta (`authorize`) yapılır; uygulama seviyesinde
her route'a eklenir.
"""
import logging
import re
from enum import IntEnum
from typing import Dict, List, Optional, Tuple

from fastapi import Depends, Request
from starlette.routing import compile_path

from .exceptions import AccessDeniedError, NotAuthenticatedError
from .security import Identity, current_identity, display_state

logger = logging.getLogger(__name__)


class AccessLevel(IntEnum):
    ANONYMOUS = 0
    AUTHENTICATED = 1
    ADMIN = 2


ACCESS_POLICY: Dict[Tuple[str, str], AccessLevel] = {
    ("GET",  "/health"):            AccessLevel.ANONYMOUS,
    ("GET",  "/login_page"):        AccessLevel.ANONYMOUS,
    ("POST", "/login_page"):        AccessLevel.ANONYMOUS,
    ("GET",  "/logout"):            AccessLevel.ANONYMOUS,
    ("POST", "/logout"):            AccessLevel.ANONYMOUS,
    ("GET",  "/reg"):               AccessLevel.ANONYMOUS,
    ("POST", "/reg"):               AccessLevel.ANONYMOUS,
    ("GET",  "/reg_admin"):         AccessLevel.ADMIN,
    ("POST", "/reg_admin"):         AccessLevel.ADMIN,
    ("GET",  "/"):                  AccessLevel.AUTHENTICATED,
    ("GET",  "/sup"):               AccessLevel.AUTHENTICATED,
    ("GET",  "/findRes"):           AccessLevel.AUTHENTICATED,
    ("GET",  "/findSup"):           AccessLevel.AUTHENTICATED,
    ("GET",  "/newRes"):            AccessLevel.ADMIN,
    ("GET",  "/newSup"):            AccessLevel.ADMIN,
    ("POST", "/saveRes"):           AccessLevel.ADMIN,
    ("POST", "/saveSup"):           AccessLevel.ADMIN,
    ("GET",  "/editRes/{resid}"):   AccessLevel.ADMIN,
    ("GET",  "/editSup/{supid}"):   AccessLevel.ADMIN,
    ("GET",  "/deleteRes/{resid}"): AccessLevel.ADMIN,
    ("GET",  "/deleteSup/{supid}"): AccessLevel.ADMIN,
}

DEFAULT_LEVEL = AccessLevel.AUTHENTICATED


def _compile(policy: Dict[Tuple[str, str], AccessLevel]) -> List[Tuple[str, "re.Pattern[str]", AccessLevel]]:
    compiled = []
    for (method, template), level in policy.items():
        regex, _fmt, _conv = compile_path(template)
        compiled.append((method, regex, level))
    return compiled

_COMPILED = _compile(ACCESS_POLICY)


def required_level(method: str, path: str) -> AccessLevel:
    method = "GET" if method.upper() == "HEAD" else method.upper()
    for m, regex, level in _COMPILED:
        if m == method and regex.match(path):
            return level
    return DEFAULT_LEVEL


def authorize(request: Request) -> Optional[Identity]:
    """Tek yetki kapısı: route çalışmadan önce tabloya göre kontrol eder."""
    level = required_level(request.method, request.url.path)
    ident = current_identity(request)

    if level == AccessLevel.ANONYMOUS:
        return ident
    if ident is None:
        raise NotAuthenticatedError()
    if level == AccessLevel.ADMIN and not ident.is_admin:
        logger.warning("access denied: user=%s %s %s", ident.username, request.method, request.url.path)
        raise AccessDeniedError(ident.username, request.url.path)
    return ident


def page_user(request: Request, ident: Optional[Identity] = Depends(authorize)) -> dict:
    # sayfa modellerine eklenen kullanıcı bilgisi
    return display_state(request, ident)
