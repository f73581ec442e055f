from .resource_repository import ResourceRepository
from .supplier_repository import SupplierRepository
from .user_repository import UserRepository
__all__ = ["ResourceRepository", "SupplierRepository", "UserRepository"]
