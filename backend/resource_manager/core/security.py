# backend/resource_manager/core/security.py
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple

from fastapi import Request
from fastapi.security.utils import get_authorization_scheme_param
from jose import jwt, JWTError
from passlib.context import CryptContext
from pydantic import BaseModel, ConfigDict

from .config import JWT_SECRET, JWT_ALG, ACCESS_TOKEN_EXPIRE_MINUTES, ADMIN_ROLE

# Parola hash kalıbı
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Oturumdaki anahtarlar
SESSION_TOKEN_KEY = "token"
SESSION_USERNAME_KEY = "username"
SESSION_ROLES_KEY = "roles"


class Identity(BaseModel):
    """Giriş yapmış kullanıcı (JWT'den çözülmüş)."""
    model_config = ConfigDict(frozen=True)

    username: str
    roles: Tuple[str, ...] = ()

    @property
    def is_admin(self) -> bool:
        return ADMIN_ROLE in self.roles


# ---- Parola yardımcıları ----
def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)

def hash_password(plain: str) -> str:
    return pwd_context.hash(plain)

# ---- Rol listesi: "ROLE_A,ROLE_B" ----
def parse_roles(roles: Optional[str]) -> List[str]:
    if not roles:
        return []
    return [r.strip() for r in roles.split(",") if r.strip()]

# ---- JWT üretimi / çözümü ----
def create_access_token(sub: str, roles: str, expires_minutes: Optional[int] = None) -> str:
    expire = datetime.now(tz=timezone.utc) + timedelta(
        minutes=expires_minutes or ACCESS_TOKEN_EXPIRE_MINUTES
    )
    payload = {"sub": sub, "roles": roles or "", "exp": expire}
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALG)

def decode_access_token(token: str) -> Optional[Identity]:
    try:
        data = jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALG])
    except JWTError:
        return None
    username = data.get("sub")
    if not username:
        return None
    return Identity(username=username, roles=tuple(parse_roles(data.get("roles"))))

# ---- Authorization başlığını toleranslı çöz ----
def _extract_bearer_token(request: Request) -> Optional[str]:
    """
    'Authorization' başlığını esnek parse eder:
      - Fazladan boşluklar: "Bearer   <JWT>"
      - Tırnaklı değer:    Authorization: "Bearer <JWT>"
    Başlık yoksa ya da şema bearer değilse None.
    """
    auth = request.headers.get("Authorization")
    if not auth:
        return None

    auth = str(auth).strip().strip('"').strip("'")
    scheme, param = get_authorization_scheme_param(auth)
    if not scheme or scheme.lower() != "bearer":
        return None

    token = (param or "").strip().replace(" ", "")
    return token or None

def current_identity(request: Request) -> Optional[Identity]:
    """Önce bearer başlığı, yoksa oturum çerezindeki token."""
    token = _extract_bearer_token(request)
    if token is None:
        token = request.session.get(SESSION_TOKEN_KEY)
    if not token:
        return None
    return decode_access_token(token)

# ---- Oturum yönetimi ----
def sign_in(request: Request, username: str, roles: str) -> str:
    token = create_access_token(sub=username, roles=roles)
    request.session[SESSION_TOKEN_KEY] = token
    request.session[SESSION_USERNAME_KEY] = username
    request.session[SESSION_ROLES_KEY] = roles
    return token

def sign_out(request: Request) -> None:
    request.session.clear()

def display_state(request: Request, ident: Optional[Identity]) -> dict:
    """Sayfa başlığı için kullanıcı adı ve roller; kimlik yoksa oturumdaki görüntüleme bilgisi."""
    if ident is not None:
        return {"username": ident.username, "roles": list(ident.roles)}
    return {
        "username": request.session.get(SESSION_USERNAME_KEY),
        "roles": parse_roles(request.session.get(SESSION_ROLES_KEY)),
    }
