"""Base class for entities stored as one comma-delimited line."""

from __future__ import annotations

from typing import ClassVar, Optional, Sequence

from pydantic import BaseModel


class FlatRecord(BaseModel):
    """Entity whose field 0 on disk is its integer ID.

    Subclasses declare which row widths they accept on decode; rows of any
    other width are rejected rather than partially loaded.
    """

    ACCEPTED_FIELD_COUNTS: ClassVar[tuple[int, ...]] = ()

    id: Optional[int] = None

    def to_fields(self) -> list[str]:
        raise NotImplementedError

    @classmethod
    def from_fields(cls, fields: Sequence[str]):
        """Decode a raw row. Raises ValueError for unaccepted or unparseable rows."""
        if len(fields) not in cls.ACCEPTED_FIELD_COUNTS:
            raise ValueError(
                f"{cls.__name__} expects {cls.ACCEPTED_FIELD_COUNTS} fields, got {len(fields)}"
            )
        return cls._from_checked(list(fields))

    @classmethod
    def _from_checked(cls, fields: list[str]):
        raise NotImplementedError

    def _id_field(self) -> str:
        if self.id is None:
            raise ValueError(f"{type(self).__name__} has no id assigned")
        return str(self.id)
