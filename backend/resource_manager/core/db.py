# backend/resource_manager/core/db.py
from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from .config import DATABASE_URL, DOTENV_PATH

DSN = DATABASE_URL
if not DSN or not DSN.strip():
    raise RuntimeError(f"DATABASE_URL tanımlı değil. .env: {DOTENV_PATH or '(bulunamadı)'}")

url = make_url(DSN)
engine_kwargs = dict(pool_pre_ping=True)

# Dialect'e göre güvenli ayarlar
backend = url.get_backend_name()  # örn: 'sqlite', 'postgresql'
if backend.startswith("sqlite"):
    # SQLite'ta thread check'i kapat, pool boyutu argümanları verme
    engine_kwargs["connect_args"] = {"check_same_thread": False}
    if url.database in (None, "", ":memory:"):
        # bellek içi DB: tüm bağlantılar aynı DB'yi görsün
        engine_kwargs["poolclass"] = StaticPool
else:
    engine_kwargs.update(pool_size=5, max_overflow=10)

engine = create_engine(DSN, **engine_kwargs)

if backend.startswith("sqlite"):
    @event.listens_for(engine, "connect")
    def _sqlite_fk_on(dbapi_conn, _record):
        # SQLite FK kontrolü varsayılan olarak kapalı
        cur = dbapi_conn.cursor()
        cur.execute("PRAGMA foreign_keys=ON")
        cur.close()

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
