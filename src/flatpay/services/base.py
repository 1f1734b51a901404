"""Base service with common dependency wiring for one entity table."""

from __future__ import annotations

import logging
from typing import Generic, Optional, TypeVar

from flatpay.core.protocols import IIdAllocator, IRecordStore
from flatpay.core.types import FileName, RecordId
from flatpay.models.record import FlatRecord

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=FlatRecord)


class BaseEntityService(Generic[R]):
    """Common CRUD for an entity stored one-per-line in ``file_name``.

    The file name doubles as the ledger key for ID allocation. Rows that do
    not decode into the entity are skipped on listing; ``store.read_all``
    stays the lossless view for diagnostics.
    """

    model: type[R]

    def __init__(self, *, store: IRecordStore, ids: IIdAllocator, file_name: FileName) -> None:
        self._store = store
        self._ids = ids
        self._file_name = file_name

    @property
    def file_name(self) -> FileName:
        return self._file_name

    def add(self, entity: R) -> R:
        """Assign the next ID to ``entity`` and append it. Returns the stored copy."""
        stored = entity.model_copy(update={"id": self._ids.next_id(self._file_name)})
        self._store.append(self._file_name, stored.to_fields())
        logger.info("Added %s id=%d", self.model.__name__, stored.id)
        return stored

    def update(self, entity: R) -> None:
        if entity.id is None:
            raise ValueError(f"Cannot update a {self.model.__name__} without an id")
        self._store.replace_or_delete(self._file_name, entity.id, entity.to_fields(), False)

    def delete(self, entity_id: RecordId) -> None:
        self._store.replace_or_delete(self._file_name, entity_id, None, True)

    def list_all(self) -> list[R]:
        entities: list[R] = []
        for row_number, fields in enumerate(self._store.read_all(self._file_name), start=1):
            try:
                entities.append(self.model.from_fields(fields))
            except ValueError as exc:
                logger.warning("Skipping row %d of %s: %s", row_number, self._file_name, exc)
        return entities

    def get(self, entity_id: RecordId) -> Optional[R]:
        for entity in self.list_all():
            if entity.id == entity_id:
                return entity
        return None
