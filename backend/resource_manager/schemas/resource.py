# resource_manager/schemas/resource.py
from typing import Optional
from pydantic import BaseModel, ConfigDict


class ResourceRecord(BaseModel):
    """Değiştirilemez kaynak kaydı; ResID None ise henüz kaydedilmemiş."""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    ResID: Optional[int] = None
    Name: Optional[str] = None
    Type: Optional[str] = None
    Quantity: int = 0
    Cost: int = 0
    AcDate: Optional[str] = None
    SupplierID: Optional[int] = None
