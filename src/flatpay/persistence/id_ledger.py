"""Ledger-file backend implementing IIdAllocator."""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path

from flatpay.core.exceptions import (
    FieldFormatError,
    RecordParseError,
    ReplaceError,
    StoreIOError,
)
from flatpay.core.types import FileName, RecordId
from flatpay.persistence.codec import (
    LEDGER_SEPARATOR,
    discard,
    fsync_file,
    parse_int,
    temp_path_for,
    undecodable,
)

logger = logging.getLogger(__name__)

_locks: dict[str, threading.Lock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.Lock:
    """One lock per ledger file, shared by every allocator in the process."""
    key = os.path.normcase(os.path.abspath(path))
    with _locks_guard:
        lock = _locks.get(key)
        if lock is None:
            lock = _locks[key] = threading.Lock()
        return lock


class FileIdAllocator:
    """Production IIdAllocator persisting ``name=last_issued`` lines.

    The ledger is re-read on every call and rewritten in full, so separate
    allocator instances (and process restarts) continue the same sequences.
    Calls are serialized only within this process: two processes sharing a
    ledger can still issue the same ID. Multi-writer deployments need an
    external arbiter owning the ledger.
    """

    cross_process_safe = False

    def __init__(self, ledger_path: str | os.PathLike[str], encoding: str = "utf-8",
                 temp_prefix: str = "temp_") -> None:
        self._path = Path(ledger_path)
        self._encoding = encoding
        self._temp_prefix = temp_prefix
        self._lock = _lock_for(self._path)

    @property
    def ledger_path(self) -> Path:
        return self._path

    def next_id(self, name: FileName) -> RecordId:
        if not name or LEDGER_SEPARATOR in name or "\n" in name or "\r" in name:
            raise ValueError(f"Invalid logical file name {name!r}")
        with self._lock:
            ledger = self._load()
            issued = ledger.get(name, 0) + 1
            ledger[name] = issued
            self._save(ledger)
        logger.debug("Issued id %d for %s", issued, name)
        return issued

    def peek(self, name: FileName) -> RecordId:
        """Last ID issued for ``name`` (0 if none), without allocating."""
        with self._lock:
            return self._load().get(name, 0)

    def _load(self) -> dict[str, int]:
        ledger: dict[str, int] = {}
        line_number = 0
        try:
            with open(self._path, "a+", encoding=self._encoding) as fh:
                fh.seek(0)
                for raw in fh:
                    line_number += 1
                    line = raw.rstrip("\r\n")
                    parts = line.split(LEDGER_SEPARATOR)
                    if len(parts) != 2 or not parts[1]:
                        logger.warning("Skipping malformed ledger line %d in %s: %r",
                                       line_number, self._path, line)
                        continue
                    value = parse_int(parts[1])
                    if value is None:
                        raise RecordParseError(str(self._path), line_number, line,
                                               "ledger value is not an integer")
                    ledger[parts[0]] = value
        except UnicodeDecodeError as exc:
            raise undecodable(self._path, line_number, exc) from exc
        except OSError as exc:
            raise StoreIOError(str(self._path), f"ledger read failed: {exc}") from exc
        return ledger

    def _save(self, ledger: dict[str, int]) -> None:
        temp = temp_path_for(self._path, self._temp_prefix)
        try:
            with open(temp, "w", encoding=self._encoding) as fh:
                for name, value in ledger.items():
                    fh.write(f"{name}{LEDGER_SEPARATOR}{value}\n")
                fsync_file(fh)
        except UnicodeEncodeError as exc:
            discard(temp)
            raise FieldFormatError(f"Ledger name is not representable in {self._encoding}: {exc}") from exc
        except OSError as exc:
            discard(temp)
            raise StoreIOError(str(self._path), f"ledger write failed: {exc}") from exc
        try:
            os.replace(temp, self._path)
        except OSError as exc:
            logger.error("Swap of %s over %s failed: %s", temp, self._path, exc)
            raise ReplaceError(str(self._path), str(temp), f"ledger swap failed: {exc}") from exc
