# backend/resource_manager/core/exceptions.py
# Uygulama hataları; HTTP karşılıkları main.py'deki handler'larda:
#   kayıt yok -> 404 zarfı, giriş yok -> /login_page, yetki yok -> 403 sayfası


class ResourceManagerError(Exception):
    pass


class RecordNotFoundError(ResourceManagerError):
    """Id ile aranan kayıt yok (kind: "Resource" / "Supplier")."""

    def __init__(self, kind: str, record_id):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} '{record_id}' not found")


class NotAuthenticatedError(ResourceManagerError):
    pass


class AccessDeniedError(ResourceManagerError):
    """Giriş yapılmış ama rol yetmiyor."""

    def __init__(self, username: str, path: str):
        self.username = username
        self.path = path
        super().__init__(f"User '{username}' may not access '{path}'")
