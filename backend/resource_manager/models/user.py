from sqlalchemy import Column, Integer, String
from ..core.db import Base

class UserInfo(Base):
    __tablename__ = "users"

    UserID   = Column("id", Integer, primary_key=True, autoincrement=True)
    Name     = Column("name", String(50), nullable=False, unique=True)
    # her zaman bcrypt hash, düz metin asla
    Password = Column("password", String(255), nullable=False)
    # virgülle ayrılmış: "ROLE_USER,ROLE_ADMIN"
    Roles    = Column("roles", String(200), nullable=False, default="")
