from .supplier import Supplier
from .resource import Resource
from .user import UserInfo
__all__ = ["Supplier", "Resource", "UserInfo"]
