# resource_manager/schemas/search.py
from typing import Generic, List, Optional, TypeVar
from pydantic import BaseModel, ConfigDict

RecordT = TypeVar("RecordT")


class FilterResult(BaseModel, Generic[RecordT]):
    """
    Anahtar kelime filtresinin sonucu.
    matched_field/matched_value: hangi alan uygulandı (yoksa None -> tüm liste).
    """
    model_config = ConfigDict(frozen=True)

    matched_field: Optional[str] = None
    matched_value: Optional[str] = None
    results: List[RecordT] = []

    def model_attrs(self) -> dict:
        # görünüm formunu tekrar doldurmak için: {"keywordType": "hardware"}
        if self.matched_field is None:
            return {}
        return {self.matched_field: self.matched_value}
