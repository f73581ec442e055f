from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from ..core.db import Base

class Resource(Base):
    __tablename__ = "resources"

    ResID      = Column("resid", Integer, primary_key=True, autoincrement=True)
    Name       = Column("name", String(200))
    Type       = Column("type", String(100))
    Quantity   = Column("quantity", Integer, nullable=False, default=0)
    Cost       = Column("cost", Integer, nullable=False, default=0)
    # yyyy-MM-dd metin olarak saklanır, parse edilmez
    AcDate     = Column("acdate", String(20))
    SupplierID = Column("supplier", Integer, ForeignKey("suppliers.supid", ondelete="CASCADE"), index=True)

    supplier = relationship("Supplier", back_populates="resources")
