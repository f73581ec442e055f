from typing import Optional

from sqlalchemy.orm import Session

from ..models import UserInfo


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_by_name(self, name: str) -> Optional[UserInfo]:
        return self.db.query(UserInfo).filter(UserInfo.Name == name).first()

    def save(self, user: UserInfo) -> UserInfo:
        self.db.add(user)
        self.db.flush()
        return user
