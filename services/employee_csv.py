"""
Employee CSV Parser.

Turns the raw bytes of the employee CSV into Employee records.

Format:
    - Header row required; names matched after strip + lower-case
      ("Id", " ID ", "id" all map to id)
    - Required columns: id, name, age, department, salary (extra columns ignored)
    - UTF-8, optional BOM
    - Empty file or header-only file -> no records

Failures (missing columns, unparseable numbers, broken quoting) raise
DataFormatError with the offending row number. The HTTP layer maps that to 500.

Exports:
    REQUIRED_COLUMNS: Column names every file must provide
    parse_employee_csv: bytes -> List[Employee]
"""

from io import BytesIO
from typing import List

import pandas as pd
from pydantic import ValidationError

from exceptions import DataFormatError
from models import Employee
from util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.SERVICE, "EmployeeCsvParser")

REQUIRED_COLUMNS = ("id", "name", "age", "department", "salary")
_NUMERIC_COLUMNS = ("id", "age", "salary")


def parse_employee_csv(data: bytes, encoding: str = "utf-8-sig") -> List[Employee]:
    """
    Parse employee CSV content.

    Args:
        data: Full file content
        encoding: Text encoding (utf-8-sig strips a BOM if present)

    Returns:
        Employees in file order

    Raises:
        DataFormatError: If the header or any row cannot be parsed
    """
    if not data or not data.strip():
        logger.warning("Employee CSV is empty - returning no records")
        return []

    try:
        # dtype=str + keep_default_na=False: every cell stays a string, blanks stay ''
        df = pd.read_csv(BytesIO(data), dtype=str, keep_default_na=False, encoding=encoding)
    except pd.errors.EmptyDataError:
        logger.warning("Employee CSV has no header row - returning no records")
        return []
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise DataFormatError(f"CSV could not be tokenized: {e}") from e

    df.columns = [str(column).strip().lower() for column in df.columns]

    duplicated = sorted({c for c in df.columns if list(df.columns).count(c) > 1})
    if duplicated:
        raise DataFormatError(f"CSV header has duplicate columns: {duplicated}")

    missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
    if missing:
        raise DataFormatError(
            f"CSV is missing required columns {missing}. "
            f"Available columns: {list(df.columns)[:20]}"
        )

    employees: List[Employee] = []
    # Row 1 is the header
    for row_number, row in enumerate(df[list(REQUIRED_COLUMNS)].to_dict(orient="records"), start=2):
        for column in _NUMERIC_COLUMNS:
            row[column] = row[column].strip()
        try:
            employees.append(Employee.model_validate(row))
        except ValidationError as e:
            fields = [".".join(str(loc) for loc in err["loc"]) for err in e.errors()]
            raise DataFormatError(f"CSV row {row_number} has invalid fields {fields}: {e}") from e

    logger.debug(f"Parsed {len(employees)} employee rows")
    return employees
