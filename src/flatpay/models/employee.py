"""Employee entity and its on-disk row layout."""

from __future__ import annotations

from datetime import date, datetime
from typing import ClassVar, Optional

from flatpay.models.record import FlatRecord

DATE_FORMAT = "%d/%m/%Y"  # dd/MM/yyyy

PAYROLL_BIWEEKLY = "QUINCENAL"
PAYROLL_MONTHLY = "MENSUAL"


class Employee(FlatRecord):
    """Single employee.

    Row layout: id, national_id, first_name, last_name, second_last_name,
    email, phone, gross_salary, payroll_type, position[, hire_date].
    Older files carry 10 fields; hire_date was appended later.
    """

    ACCEPTED_FIELD_COUNTS: ClassVar[tuple[int, ...]] = (10, 11)

    national_id: str = ""
    first_name: str = ""
    last_name: str = ""
    second_last_name: str = ""
    email: str = ""
    phone: str = ""
    gross_salary: float = 0.0
    payroll_type: str = PAYROLL_MONTHLY
    position: str = ""
    hire_date: Optional[date] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name} {self.second_last_name}"

    def to_fields(self) -> list[str]:
        fields = [
            self._id_field(),
            self.national_id,
            self.first_name,
            self.last_name,
            self.second_last_name,
            self.email,
            self.phone,
            str(float(self.gross_salary)),
            self.payroll_type,
            self.position,
        ]
        if self.hire_date is not None:
            fields.append(self.hire_date.strftime(DATE_FORMAT))
        return fields

    @classmethod
    def _from_checked(cls, fields: list[str]) -> "Employee":
        hire_date = None
        if len(fields) == 11:
            hire_date = datetime.strptime(fields[10], DATE_FORMAT).date()
        return cls(
            id=int(fields[0]),
            national_id=fields[1],
            first_name=fields[2],
            last_name=fields[3],
            second_last_name=fields[4],
            email=fields[5],
            phone=fields[6],
            gross_salary=float(fields[7]),
            payroll_type=fields[8],
            position=fields[9],
            hire_date=hire_date,
        )
