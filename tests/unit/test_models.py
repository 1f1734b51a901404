"""Tests for Employee and User row codecs."""

from __future__ import annotations

from datetime import date

import pytest

from flatpay.models.employee import PAYROLL_BIWEEKLY, Employee
from flatpay.models.user import User

EMPLOYEE_ROW = [
    "7", "1-1111-1111", "Ana", "Lopez", "Mora", "ana@example.com",
    "8888-8888", "650000.0", "QUINCENAL", "Analyst",
]


class TestEmployee:
    def test_decodes_ten_field_row(self):
        emp = Employee.from_fields(EMPLOYEE_ROW)
        assert emp.id == 7
        assert emp.gross_salary == 650000.0
        assert emp.payroll_type == PAYROLL_BIWEEKLY
        assert emp.hire_date is None
        assert emp.full_name == "Ana Lopez Mora"

    def test_decodes_eleven_field_row_with_hire_date(self):
        emp = Employee.from_fields(EMPLOYEE_ROW + ["03/02/2021"])
        assert emp.hire_date == date(2021, 2, 3)

    def test_encodes_back_to_same_row(self):
        assert Employee.from_fields(EMPLOYEE_ROW).to_fields() == EMPLOYEE_ROW

    def test_encodes_hire_date_as_day_month_year(self):
        emp = Employee(id=1, gross_salary=500000, hire_date=date(2024, 12, 1))
        fields = emp.to_fields()
        assert len(fields) == 11
        assert fields[7] == "500000.0"
        assert fields[10] == "01/12/2024"

    @pytest.mark.parametrize("count", [0, 1, 9, 12])
    def test_rejects_unaccepted_widths(self, count):
        with pytest.raises(ValueError):
            Employee.from_fields((EMPLOYEE_ROW + ["01/01/2020", "x"])[:count])

    def test_rejects_bad_salary(self):
        row = list(EMPLOYEE_ROW)
        row[7] = "lots"
        with pytest.raises(ValueError):
            Employee.from_fields(row)

    def test_rejects_bad_hire_date(self):
        with pytest.raises(ValueError):
            Employee.from_fields(EMPLOYEE_ROW + ["2021-02-03"])

    def test_to_fields_requires_id(self):
        with pytest.raises(ValueError):
            Employee(first_name="Ana").to_fields()


class TestUser:
    def test_round_trips_seven_fields(self):
        row = ["3", "Beto", "Ruiz", "Soto", "b@example.com", "beto", "s3cret"]
        user = User.from_fields(row)
        assert user.username == "beto"
        assert user.to_fields() == row

    def test_rejects_short_row(self):
        with pytest.raises(ValueError):
            User.from_fields(["3", "Beto"])

    def test_rejects_non_numeric_id(self):
        with pytest.raises(ValueError):
            User.from_fields(["x", "Beto", "Ruiz", "Soto", "b@example.com", "beto", "pw"])
