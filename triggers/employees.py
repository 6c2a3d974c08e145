# ============================================================================
# EMPLOYEES (DATA LAKE CSV) HTTP TRIGGER
# ============================================================================
# STATUS: HTTP Trigger - GET /api/employees?department=<name>
# PURPOSE: Filter the employee CSV by department, return count/average/items
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================
"""
Employees by Department HTTP Trigger.

Downloads the employee CSV from the data lake, filters it by department
(case-insensitive, trimmed) and returns:

    {"total": 2, "department": "IT", "averageSalary": 150, "items": [...]}

items holds at most 50 records in file order; total is never capped.

Errors:
    department missing/blank        -> 400 "Department parameter is required"
    ONELAKE_DFS_FILE_URL missing    -> 500
    file missing/unreachable/denied -> 404
    credential chain failure        -> 500
    malformed CSV                   -> 500

Exports:
    EmployeesTrigger: Trigger class
    employees_trigger: Singleton trigger instance
"""

from typing import Dict, Any, List

import azure.functions as func

from config import get_config
from exceptions import AccessForbiddenError, SourceUnreachableError
from infrastructure import DataLakeFileRepository
from services import parse_employee_csv, summarize_by_department
from .http_base import BaseHttpTrigger

DEPARTMENT_REQUIRED_MESSAGE = "Department parameter is required"


class EmployeesTrigger(BaseHttpTrigger):
    """CSV-backed department filter - department is required."""

    def __init__(self):
        super().__init__("employees")

    def get_allowed_methods(self) -> List[str]:
        return ["GET"]

    def process_request(self, req: func.HttpRequest) -> Dict[str, Any]:
        department = self.get_query_param(
            req, "department", required=True, error_message=DEPARTMENT_REQUIRED_MESSAGE
        )

        data_lake_config = get_config().data_lake
        try:
            with DataLakeFileRepository.from_config(data_lake_config) as repo:
                content = repo.read_bytes()
        except AccessForbiddenError as e:
            # 403 is reserved for /api/files/raw; here a denied read is "inaccessible"
            raise SourceUnreachableError(f"CSV read forbidden: {e}") from e

        employees = parse_employee_csv(content, encoding=data_lake_config.encoding)
        page = summarize_by_department(employees, department)

        self.logger.info(
            f"Department '{page.department}': {page.total} of {len(employees)} employees matched",
            extra={"custom_dimensions": {"department": page.department, "total": page.total}}
        )
        return page.to_response()


# Singleton instance
employees_trigger = EmployeesTrigger()
