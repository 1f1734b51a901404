"""In-memory backends for unit tests — dict-backed fakes."""

from __future__ import annotations

from typing import Optional

from flatpay.core.exceptions import RecordParseError, StoreIOError
from flatpay.core.types import Fields, FieldsIn, FileName, RecordId
from flatpay.persistence.codec import decode_line, encode_line, parse_key


class MemoryRecordStore:
    """Dict-backed IRecordStore for unit tests; one list of lines per file name."""

    def __init__(self) -> None:
        self._files: dict[str, list[str]] = {}

    def append(self, file_name: FileName, fields: FieldsIn) -> None:
        self._files.setdefault(file_name, []).append(encode_line(fields))

    def read_all(self, file_name: FileName) -> list[Fields]:
        return [decode_line(line) for line in self._files.get(file_name, [])]

    def replace_or_delete(self, file_name: FileName, key: RecordId, fields: Optional[FieldsIn],
                          delete: bool) -> None:
        if not delete and fields is None:
            raise ValueError("fields are required unless delete=True")
        if file_name not in self._files:
            raise StoreIOError(file_name, "no such file")
        replacement = None if delete else encode_line(fields)  # type: ignore[arg-type]
        out: list[str] = []
        for line_number, line in enumerate(self._files[file_name], start=1):
            line_key = parse_key(line)
            if line_key is None:
                raise RecordParseError(file_name, line_number, line,
                                       "field 0 is not an integer key")
            if line_key != key:
                out.append(line)
            elif replacement is not None:
                out.append(replacement)
        self._files[file_name] = out

    def lines(self, file_name: FileName) -> list[str]:
        return list(self._files.get(file_name, []))


class MemoryIdAllocator:
    """Dict-backed IIdAllocator for unit tests."""

    def __init__(self) -> None:
        self._issued: dict[FileName, RecordId] = {}

    def next_id(self, name: FileName) -> RecordId:
        self._issued[name] = self._issued.get(name, 0) + 1
        return self._issued[name]
