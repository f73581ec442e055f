# backend/resource_manager/core/config.py
"""
Uygulama ayarları: .env + ortam değişkenleri.

.env dosyası ortamı EZMEZ (CI'da verilen değişkenler önceliklidir).
"""
import os
from dotenv import dotenv_values, find_dotenv

# Proje kökü (.. = backend)
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
DEFAULT_DOTENV = os.path.join(BASE_DIR, ".env")


def _norm_key(k: str) -> str:
    return k.replace("\ufeff", "").strip() if isinstance(k, str) else k


def load_env() -> str | None:
    dotenv_path = DEFAULT_DOTENV if os.path.exists(DEFAULT_DOTENV) else find_dotenv(filename=".env", usecwd=True)
    if dotenv_path:
        cfg = dotenv_values(dotenv_path, encoding="utf-8-sig")
        for k, v in cfg.items():
            nk = _norm_key(k)
            if v is not None and (nk not in os.environ or not os.environ[nk].strip()):
                os.environ[nk] = v
    return dotenv_path or None


DOTENV_PATH = load_env()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./resources.db")

# Kimlik / oturum
JWT_SECRET = os.getenv("JWT_SECRET", "dev-secret-change-me")
JWT_ALG = os.getenv("JWT_ALG", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))
SESSION_SECRET = os.getenv("SESSION_SECRET", "dev-session-secret-change-me")

# Roller
ADMIN_ROLE = os.getenv("ADMIN_ROLE", "ROLE_ADMIN")
DEFAULT_USER_ROLE = os.getenv("DEFAULT_USER_ROLE", "ROLE_USER")

CORS_ALLOW_ORIGINS = os.getenv("CORS_ALLOW_ORIGINS", "*")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
