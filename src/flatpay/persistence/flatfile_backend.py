"""Flat-file backend implementing IRecordStore."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from flatpay.core.exceptions import (
    FieldFormatError,
    RecordParseError,
    ReplaceError,
    StoreIOError,
)
from flatpay.core.types import Fields, FieldsIn, FileName, RecordId
from flatpay.persistence.codec import (
    decode_line,
    discard,
    encode_line,
    fsync_file,
    parse_key,
    strip_terminator,
    temp_path_for,
    undecodable,
)

logger = logging.getLogger(__name__)


class FlatFileRecordStore:
    """Production IRecordStore backed by comma-delimited text files.

    Every operation takes the target file name explicitly; the store keeps no
    notion of a "current" file. Relative names resolve against ``data_dir``.

    Readers racing a concurrent ``append`` or ``replace_or_delete`` get no
    isolation and may observe a partially written line.
    """

    def __init__(self, data_dir: str | os.PathLike[str] = ".", encoding: str = "utf-8",
                 temp_prefix: str = "temp_") -> None:
        self._data_dir = Path(data_dir)
        self._encoding = encoding
        self._temp_prefix = temp_prefix

    def path_for(self, file_name: FileName) -> Path:
        return self._data_dir / file_name

    # ---- IRecordStore methods ----

    def append(self, file_name: FileName, fields: FieldsIn) -> None:
        line = encode_line(fields)
        path = self.path_for(file_name)
        try:
            with open(path, "a", encoding=self._encoding) as fh:
                fh.write(line + "\n")
        except UnicodeEncodeError as exc:
            raise FieldFormatError(f"Record is not representable in {self._encoding}: {exc}") from exc
        except OSError as exc:
            raise StoreIOError(str(path), f"append failed: {exc}") from exc
        logger.debug("Appended record key=%s to %s", line.split(",", 1)[0], path)

    def read_all(self, file_name: FileName) -> list[Fields]:
        path = self.path_for(file_name)
        rows: list[Fields] = []
        try:
            with open(path, encoding=self._encoding) as fh:
                for line in fh:
                    rows.append(decode_line(strip_terminator(line)))
        except FileNotFoundError:
            logger.debug("%s does not exist, treating as empty table", path)
            return []
        except UnicodeDecodeError as exc:
            raise undecodable(path, len(rows), exc) from exc
        except OSError as exc:
            raise StoreIOError(str(path), f"read failed: {exc}") from exc
        return rows

    def replace_or_delete(self, file_name: FileName, key: RecordId, fields: Optional[FieldsIn],
                          delete: bool) -> None:
        """Rewrite ``file_name`` with every line keyed ``key`` replaced or dropped.

        Non-matching lines are copied verbatim. When ``delete`` is true all
        matching lines are removed; otherwise each one is replaced by
        ``fields``. A key that matches nothing leaves the content unchanged.

        Raises:
            StoreIOError: the original is missing/unreadable or the temp file
                cannot be written.
            RecordParseError: some line's field 0 is not an integer, or the
                file is not valid in the configured encoding. The original is
                left untouched.
            ReplaceError: the final swap failed; the data file state is
                unspecified.
        """
        if not delete and fields is None:
            raise ValueError("fields are required unless delete=True")
        replacement = None if delete else encode_line(fields)  # type: ignore[arg-type]

        path = self.path_for(file_name)
        temp = temp_path_for(path, self._temp_prefix)
        matched = 0
        lines_read = 0
        try:
            with open(path, encoding=self._encoding) as src, \
                    open(temp, "w", encoding=self._encoding) as dst:
                for raw in src:
                    lines_read += 1
                    line = strip_terminator(raw)
                    line_key = parse_key(line)
                    if line_key is None:
                        raise RecordParseError(str(path), lines_read, line,
                                               "field 0 is not an integer key")
                    if line_key != key:
                        dst.write(line + "\n")
                        continue
                    matched += 1
                    if replacement is not None:
                        dst.write(replacement + "\n")
                fsync_file(dst)
        except UnicodeDecodeError as exc:
            discard(temp)
            raise undecodable(path, lines_read, exc) from exc
        except UnicodeEncodeError as exc:
            discard(temp)
            raise FieldFormatError(f"Record is not representable in {self._encoding}: {exc}") from exc
        except RecordParseError:
            discard(temp)
            raise
        except OSError as exc:
            discard(temp)
            raise StoreIOError(str(path), f"rewrite failed: {exc}") from exc

        if matched == 0:
            logger.debug("No record keyed %d in %s", key, path)
        elif matched > 1:
            logger.warning("%d records share key %d in %s; all were %s",
                           matched, key, path, "deleted" if delete else "replaced")

        try:
            os.replace(temp, path)
        except OSError as exc:
            logger.error("Swap of %s over %s failed: %s", temp, path, exc)
            raise ReplaceError(str(path), str(temp), f"swap failed: {exc}") from exc
