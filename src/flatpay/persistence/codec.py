"""Line codec shared by the record store and the ID ledger.

A record is one text line of comma-joined fields: no quoting, no escaping,
no header, no trimming. Field 0 is the integer key.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from flatpay.core.exceptions import FieldFormatError, RecordParseError
from flatpay.core.types import Fields, FieldsIn

logger = logging.getLogger(__name__)

DELIMITER = ","
LEDGER_SEPARATOR = "="

_KEY_RE = re.compile(r"[+-]?[0-9]+")
_FORBIDDEN = (DELIMITER, "\n", "\r")


def encode_line(fields: FieldsIn) -> str:
    """Join ``fields`` into one record line, without the terminator."""
    out: list[str] = []
    for i, field in enumerate(fields):
        text = str(field)
        for ch in _FORBIDDEN:
            if ch in text:
                raise FieldFormatError(f"Field {i} contains {ch!r}: {text!r}")
        out.append(text)
    if not out:
        raise FieldFormatError("A record needs at least one field")
    return DELIMITER.join(out)


def decode_line(line: str) -> Fields:
    """Split a line (terminator already stripped) into its raw fields.

    An empty line decodes to ``[""]``; trailing empty fields are kept.
    """
    return line.split(DELIMITER)


def strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        return line[:-1]
    return line


def parse_int(text: str) -> int | None:
    """Strict integer parse: optional sign and ASCII digits, nothing else."""
    if _KEY_RE.fullmatch(text) is None:
        return None
    return int(text)


def parse_key(line: str) -> int | None:
    """Return the integer in field 0 of ``line``, or None if it is not one."""
    return parse_int(line.split(DELIMITER, 1)[0])


def temp_path_for(path: Path, prefix: str) -> Path:
    """Sibling scratch file used while rewriting ``path``."""
    return path.with_name(f"{prefix}{path.name}")


def fsync_file(handle) -> None:
    handle.flush()
    os.fsync(handle.fileno())


def discard(temp: Path) -> None:
    """Remove a scratch file left by a failed rewrite, if any."""
    try:
        temp.unlink()
    except FileNotFoundError:
        pass
    except OSError as exc:
        logger.warning("Could not remove scratch file %s: %s", temp, exc)


def undecodable(path: Path, lines_read: int, exc: UnicodeDecodeError) -> RecordParseError:
    """Parse error for bytes that are not valid in the configured encoding.

    Text is decoded ahead of the line iterator, so the bad bytes sit at or
    after line ``lines_read + 1``.
    """
    return RecordParseError(str(path), lines_read + 1, repr(exc.object[exc.start:exc.end]),
                            f"not valid {exc.encoding} at or after this line")
