"""
Employee data models.

Exports:
    Employee, EmployeeSummary, EmployeePage
"""

from .employee import Employee, EmployeeSummary, EmployeePage

__all__ = [
    "Employee",
    "EmployeeSummary",
    "EmployeePage",
]
