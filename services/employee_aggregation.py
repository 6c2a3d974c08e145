# ============================================================================
# EMPLOYEE AGGREGATION SERVICE
# ============================================================================
# STATUS: Service - pure in-memory filter/aggregate
# PURPOSE: Department filter, count, rounded mean salary, capped item list
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================
"""
Employee Filter/Aggregate Computation.

One linear pass over the records of a single request:

    records -> department filter (trimmed, case-folded) -> count + mean salary
            -> first N matches in source order

Rules:
    - A record matches when record.department.strip().casefold() equals
      department.strip().casefold().
    - An empty/absent filter matches every record; the summary then has
      department=None.
    - total counts every match; items holds at most max_items of them.
    - averageSalary is the exact Decimal mean rounded half-to-even to an int.
      Zero matches give averageSalary 0 and items [].

Exports:
    normalize_department: Key used for comparisons
    matches_department: Predicate for one record
    round_half_even: Decimal -> int rounding used by both endpoints
    summarize_by_department: The full computation
"""

from decimal import Decimal, ROUND_HALF_EVEN
from typing import Iterable, List, Optional

from config.defaults import EmployeeDefaults
from models import Employee, EmployeePage


def normalize_department(value: Optional[str]) -> str:
    """Trim and case-fold a department name; None becomes ''."""
    if value is None:
        return ""
    return value.strip().casefold()


def matches_department(employee: Employee, department_key: str) -> bool:
    """
    Args:
        employee: Record to test
        department_key: Already-normalized filter ('' matches everything)
    """
    if not department_key:
        return True
    return normalize_department(employee.department) == department_key


def round_half_even(value) -> int:
    """Round a Decimal/float/int to the nearest int, ties to even (2.5 -> 2, 3.5 -> 4)."""
    if not isinstance(value, Decimal):
        # str() keeps float inputs from picking up binary noise
        value = Decimal(str(value))
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_EVEN))


def summarize_by_department(
    employees: Iterable[Employee],
    department: Optional[str] = None,
    max_items: int = EmployeeDefaults.MAX_ITEMS,
) -> EmployeePage:
    """
    Filter employees by department and aggregate the matches.

    Args:
        employees: Records in source order
        department: Filter value; None/blank disables filtering
        max_items: Cap on returned items (total is never capped)

    Returns:
        EmployeePage with total, department echo, averageSalary and items

    Example:
        >>> page = summarize_by_department(rows, "IT")
        >>> page.total, page.average_salary
        (2, 150)
    """
    department_key = normalize_department(department)
    echoed = department.strip() if department_key else None

    total = 0
    salary_sum = Decimal(0)
    items: List[Employee] = []

    for employee in employees:
        if not matches_department(employee, department_key):
            continue
        total += 1
        salary_sum += employee.salary
        if len(items) < max_items:
            items.append(employee)

    if total == 0:
        return EmployeePage(total=0, department=echoed, average_salary=0, items=[])

    return EmployeePage(
        total=total,
        department=echoed,
        average_salary=round_half_even(salary_sum / total),
        items=items,
    )
