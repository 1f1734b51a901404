"""Application user entity."""

from __future__ import annotations

from typing import ClassVar

from flatpay.models.record import FlatRecord


class User(FlatRecord):
    """Row layout: id, first_name, last_name, second_last_name, email, username, password."""

    ACCEPTED_FIELD_COUNTS: ClassVar[tuple[int, ...]] = (7,)

    first_name: str = ""
    last_name: str = ""
    second_last_name: str = ""
    email: str = ""
    username: str = ""
    password: str = ""

    def to_fields(self) -> list[str]:
        return [
            self._id_field(),
            self.first_name,
            self.last_name,
            self.second_last_name,
            self.email,
            self.username,
            self.password,
        ]

    @classmethod
    def _from_checked(cls, fields: list[str]) -> "User":
        return cls(
            id=int(fields[0]),
            first_name=fields[1],
            last_name=fields[2],
            second_last_name=fields[3],
            email=fields[4],
            username=fields[5],
            password=fields[6],
        )
