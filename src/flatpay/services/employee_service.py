"""EmployeeService — add, list, update and delete employees."""

from __future__ import annotations

from flatpay.core.config import StorageConfig
from flatpay.core.protocols import IIdAllocator, IRecordStore
from flatpay.models.employee import Employee
from flatpay.services.base import BaseEntityService


class EmployeeService(BaseEntityService[Employee]):
    model = Employee

    def __init__(self, *, store: IRecordStore, ids: IIdAllocator,
                 storage: StorageConfig | None = None) -> None:
        storage = storage or StorageConfig()
        super().__init__(store=store, ids=ids, file_name=storage.employees_file)
