"""
Employee Data Models.

Request-scoped records and the response shapes built from them.
No business logic - pure data structures.

Exports:
    Employee: One employee row (CSV line or SQL row)
    EmployeeSummary: Count + rounded average salary, optional department echo
    EmployeePage: EmployeeSummary plus capped list of matching employees
"""

from decimal import Decimal
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


def _decimal_to_json_number(value: Decimal) -> Union[int, float]:
    """Whole salaries serialize as ints, others as floats (JSON has no decimal)."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


class Employee(BaseModel):
    """
    One employee record.

    Lax mode coerces CSV strings: "42" -> 42, "1234.50" -> Decimal("1234.50").
    Null/missing name and department become empty strings.

    Examples:
        >>> Employee(id="1", name="Ana", age="30", department="IT", salary="100")
        Employee(id=1, name='Ana', age=30, department='IT', salary=Decimal('100'))
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Employee identifier")
    name: str = Field(default="", description="Display name")
    age: int = Field(..., description="Age in years")
    department: str = Field(default="", description="Department name as stored at the source")
    salary: Decimal = Field(..., description="Salary (non-negative, not enforced)")

    @field_validator("name", "department", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_serializer("salary")
    def _serialize_salary(self, value: Decimal) -> Union[int, float]:
        return _decimal_to_json_number(value)


class EmployeeSummary(BaseModel):
    """
    Aggregate over the employees matching a department filter.

    department is None when no filter was applied; to_response() omits it.
    """

    model_config = ConfigDict(populate_by_name=True)

    total: int = Field(..., ge=0, description="Count of all matches (not capped)")
    department: Optional[str] = Field(default=None, description="Echo of the filter")
    average_salary: int = Field(
        default=0,
        alias="averageSalary",
        description="Mean salary of matches rounded half-to-even; 0 when total is 0"
    )

    def to_response(self) -> Dict[str, Any]:
        """camelCase JSON-ready dict without null fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class EmployeePage(EmployeeSummary):
    """EmployeeSummary plus the first matches in source order."""

    items: List[Employee] = Field(default_factory=list, description="At most the configured cap")
