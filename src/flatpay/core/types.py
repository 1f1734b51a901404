"""Type aliases used across the FlatPay store."""

from __future__ import annotations

from typing import Sequence

Fields = list[str]
FieldsIn = Sequence[str]
RecordId = int
FileName = str
