"""UserService — user CRUD and credential lookup."""

from __future__ import annotations

from typing import Optional

from flatpay.core.config import StorageConfig
from flatpay.core.protocols import IIdAllocator, IRecordStore
from flatpay.models.user import User
from flatpay.services.base import BaseEntityService


class UserService(BaseEntityService[User]):
    model = User

    def __init__(self, *, store: IRecordStore, ids: IIdAllocator,
                 storage: StorageConfig | None = None) -> None:
        storage = storage or StorageConfig()
        super().__init__(store=store, ids=ids, file_name=storage.users_file)

    def authenticate(self, username: str, password: str) -> Optional[User]:
        """First stored user whose username and password match exactly, else None."""
        for user in self.list_all():
            if user.username == username and user.password == password:
                return user
        return None
