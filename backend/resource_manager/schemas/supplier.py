# resource_manager/schemas/supplier.py
from typing import Optional
from pydantic import BaseModel, ConfigDict


class SupplierRecord(BaseModel):
    # e-posta/telefon biçimi doğrulanmaz, olduğu gibi saklanır
    model_config = ConfigDict(from_attributes=True, frozen=True)

    SupplierID: Optional[int] = None
    SupplierName: Optional[str] = None
    Phone: Optional[str] = None
    Email: Optional[str] = None
