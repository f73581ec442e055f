from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from ..core.db import Base

class Supplier(Base):
    __tablename__ = "suppliers"

    SupplierID   = Column("supid", Integer, primary_key=True, autoincrement=True)
    # DB’de kolon adı "name", biz attr olarak SupplierName kullanıyoruz
    SupplierName = Column("name", String(200))
    Phone        = Column("phone", String(50))
    Email        = Column("email", String(200))

    # sadece okuma amaçlı; silme zinciri supplier_service'te açıkça yapılır
    resources = relationship("Resource", back_populates="supplier", passive_deletes=True)
