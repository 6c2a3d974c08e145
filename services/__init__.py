"""
Employee Services.

Pure request-scoped computation - no I/O, no Azure SDK calls. Repositories in
infrastructure/ fetch the data; triggers/ wire the two together.

Exports:
    parse_employee_csv: CSV bytes -> List[Employee]
    summarize_by_department: Filter + aggregate + cap
    normalize_department: Comparison key for department names
    round_half_even: Rounding used by both employee endpoints
"""

from .employee_aggregation import (
    matches_department,
    normalize_department,
    round_half_even,
    summarize_by_department,
)
from .employee_csv import REQUIRED_COLUMNS, parse_employee_csv

__all__ = [
    "REQUIRED_COLUMNS",
    "matches_department",
    "normalize_department",
    "parse_employee_csv",
    "round_half_even",
    "summarize_by_department",
]
