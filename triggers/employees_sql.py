# ============================================================================
# EMPLOYEES (SQL WAREHOUSE) HTTP TRIGGER
# ============================================================================
# STATUS: HTTP Trigger - GET /api/employees/sql[?department=<name>]
# PURPOSE: Pushed-down count/average salary from the SQL warehouse
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================
"""
Employees by Department (SQL) HTTP Trigger.

Runs one aggregate query on the SQL warehouse. department is optional:

    /api/employees/sql?department=IT -> {"total": 2, "department": "IT", "averageSalary": 150}
    /api/employees/sql               -> {"total": 3, "averageSalary": 200}

No items are returned by this endpoint.

Exports:
    EmployeesSqlTrigger: Trigger class
    employees_sql_trigger: Singleton trigger instance
"""

from typing import Dict, Any, List

import azure.functions as func

from infrastructure import SqlWarehouseRepository
from .http_base import BaseHttpTrigger


class EmployeesSqlTrigger(BaseHttpTrigger):
    """SQL-backed aggregate - department filter optional."""

    def __init__(self):
        super().__init__("employees_sql")

    def get_allowed_methods(self) -> List[str]:
        return ["GET"]

    def process_request(self, req: func.HttpRequest) -> Dict[str, Any]:
        department = self.get_query_param(req, "department")
        summary = SqlWarehouseRepository().summarize(department)
        return summary.to_response()


# Singleton instance
employees_sql_trigger = EmployeesSqlTrigger()
