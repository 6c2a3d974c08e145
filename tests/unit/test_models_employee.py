"""
Employee model tests.

Tests coercion of CSV strings, JSON serialization of salaries and the
camelCase response shape.
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from models import Employee, EmployeePage, EmployeeSummary


class TestEmployee:

    def test_coerces_strings(self):
        employee = Employee(id="7", name="Ana", age="31", department="IT", salary="1234.50")

        assert employee.id == 7
        assert employee.age == 31
        assert employee.salary == Decimal("1234.50")

    def test_none_name_and_department_become_empty(self):
        employee = Employee(id=1, name=None, age=30, department=None, salary=10)

        assert employee.name == ""
        assert employee.department == ""

    @pytest.mark.parametrize("field", ["id", "age", "salary"])
    def test_non_numeric_rejected(self, field):
        data = {"id": "1", "name": "Ana", "age": "30", "department": "IT", "salary": "100"}
        data[field] = "abc"
        with pytest.raises(ValidationError):
            Employee(**data)

    def test_frozen(self):
        employee = Employee(id=1, name="Ana", age=30, department="IT", salary=10)
        with pytest.raises(ValidationError):
            employee.salary = Decimal(20)

    def test_whole_salary_serializes_as_int(self):
        employee = Employee(id=1, name="Ana", age=30, department="IT", salary="5000.00")
        assert employee.model_dump(mode="json")["salary"] == 5000
        assert isinstance(employee.model_dump(mode="json")["salary"], int)

    def test_fractional_salary_serializes_as_float(self):
        employee = Employee(id=1, name="Ana", age=30, department="IT", salary="5000.25")
        assert employee.model_dump(mode="json")["salary"] == 5000.25


class TestEmployeeSummary:

    def test_camel_case_and_department_omitted(self):
        body = EmployeeSummary(total=3, average_salary=200).to_response()
        assert body == {"total": 3, "averageSalary": 200}

    def test_department_echoed(self):
        body = EmployeeSummary(total=2, department="IT", average_salary=150).to_response()
        assert body == {"total": 2, "department": "IT", "averageSalary": 150}

    def test_populate_by_alias(self):
        summary = EmployeeSummary(total=1, averageSalary=42)
        assert summary.average_salary == 42

    def test_negative_total_rejected(self):
        with pytest.raises(ValidationError):
            EmployeeSummary(total=-1)


class TestEmployeePage:

    def test_empty_page(self):
        body = EmployeePage(total=0, department="Sales", average_salary=0, items=[]).to_response()
        assert body == {"total": 0, "department": "Sales", "averageSalary": 0, "items": []}

    def test_items_serialized(self):
        employee = Employee(id=1, name="Ana", age=30, department="IT", salary=100)
        body = EmployeePage(total=1, department="IT", average_salary=100, items=[employee]).to_response()

        assert body["items"] == [
            {"id": 1, "name": "Ana", "age": 30, "department": "IT", "salary": 100}
        ]
