# ============================================================================
# SQL WAREHOUSE REPOSITORY
# ============================================================================
# STATUS: Infrastructure - Token-authenticated SQL endpoint access (TDS)
# PURPOSE: Pushed-down department count/average over the employees table
# LAST_REVIEWED: 19 OCT 2026
# DEPENDENCIES: pyodbc (ODBC Driver 18 for SQL Server), infrastructure.auth, config
# ============================================================================

"""
SQL Warehouse Repository.

Runs one aggregate query per request against the employees table of a
Fabric warehouse / Azure SQL endpoint:

    SELECT COUNT(*) AS total, AVG(CAST(salary AS DECIMAL(38, 4))) AS average_salary
    FROM [schema].[table]
    [WHERE LOWER(LTRIM(RTRIM(department))) = LOWER(LTRIM(RTRIM(?)))]

Authentication:
    Token (default): Entra ID bearer token from the credential chain, passed
        to the driver through the SQL_COPT_SS_ACCESS_TOKEN connection attribute.
    Password (local development): SQL_USER + SQL_PASSWORD, no token request.

Connections are encrypted (Encrypt=yes, server certificate validated), use
a login timeout and a per-statement query timeout, and are closed at the
end of every request.

pyodbc is imported on first connection, so loading this module does not
require the ODBC driver manager to be installed.

Errors:
    pyodbc.Error                -> DatabaseError (500)
    token acquisition failure   -> AuthenticationFailureError (500)
    SQL_ENDPOINT/SQL_DATABASE   -> ConfigurationMissingError (500)
"""

import struct
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional, Tuple

from config import SqlWarehouseConfig, get_config
from exceptions import DatabaseError
from infrastructure.auth import get_access_token
from models import EmployeeSummary
from services import normalize_department, round_half_even
from util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.REPOSITORY, "SqlWarehouseRepository")

# msodbcsql pre-connect attribute carrying an Entra access token
SQL_COPT_SS_ACCESS_TOKEN = 1256


def quote_identifier(name: str) -> str:
    """T-SQL bracket quoting (] doubled)."""
    return "[" + name.replace("]", "]]") + "]"


def encode_access_token(token: str) -> bytes:
    """
    Pack a bearer token for SQL_COPT_SS_ACCESS_TOKEN.

    The driver expects a little-endian length prefix followed by the token
    as UTF-16-LE bytes.
    """
    raw = token.encode("utf-16-le")
    return struct.pack(f"<I{len(raw)}s", len(raw), raw)


class SqlWarehouseRepository:
    """
    Employee aggregates from the SQL warehouse.

    Usage:
        repo = SqlWarehouseRepository()
        summary = repo.summarize("IT")
    """

    def __init__(self, config: Optional[SqlWarehouseConfig] = None):
        self.config = config or get_config().sql
        self.config.require_connection_settings()

    def connection_string(self) -> str:
        """ODBC connection string; credentials only for password auth."""
        parts = [
            f"Driver={{{self.config.odbc_driver}}}",
            f"Server=tcp:{self.config.endpoint},{self.config.port}",
            f"Database={self.config.database}",
            "Encrypt=yes",
            "TrustServerCertificate=no",
        ]
        if self.config.uses_password_auth:
            parts.append(f"UID={self.config.user}")
            parts.append(f"PWD={{{self.config.password.replace('}', '}}')}}}")
        return ";".join(parts) + ";"

    def _connect_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for pyodbc.connect (login timeout, fresh token)."""
        kwargs: Dict[str, Any] = {"timeout": self.config.connect_timeout_seconds}
        if not self.config.uses_password_auth:
            token = get_access_token(self.config.token_scope)
            kwargs["attrs_before"] = {SQL_COPT_SS_ACCESS_TOKEN: encode_access_token(token)}
        return kwargs

    @contextmanager
    def _get_connection(self) -> Iterator[Any]:
        """
        Context manager for one request-scoped connection.

        Raises:
            DatabaseError: Connection or query failure (pyodbc.Error)
        """
        import pyodbc

        kwargs = self._connect_kwargs()
        conn = None
        try:
            logger.debug(f"Connecting to {self.config.endpoint}:{self.config.port}/{self.config.database}")
            conn = pyodbc.connect(self.connection_string(), **kwargs)
            conn.timeout = self.config.command_timeout_seconds
            yield conn
        except pyodbc.Error as e:
            raise DatabaseError(
                f"SQL warehouse error on {self.config.endpoint}/{self.config.database}: "
                f"{type(e).__name__}: {e}"
            ) from e
        finally:
            if conn is not None:
                conn.close()

    def build_aggregate_query(self, department: Optional[str] = None) -> Tuple[str, Tuple[Any, ...]]:
        """
        Compose the aggregate query.

        Args:
            department: Filter value; None/blank aggregates the whole table

        Returns:
            (query, params) ready for cursor.execute
        """
        query = (
            "SELECT COUNT(*) AS total, AVG(CAST(salary AS DECIMAL(38, 4))) AS average_salary "
            f"FROM {quote_identifier(self.config.db_schema)}.{quote_identifier(self.config.table)}"
        )

        if not normalize_department(department):
            return query, ()

        query += " WHERE LOWER(LTRIM(RTRIM(department))) = LOWER(LTRIM(RTRIM(?)))"
        return query, (department.strip(),)

    def summarize(self, department: Optional[str] = None) -> EmployeeSummary:
        """
        Count and average salary for a department (or the whole table).

        Args:
            department: Optional filter, matched case-insensitively and trimmed

        Returns:
            EmployeeSummary with department echo only when a filter was given
        """
        query, params = self.build_aggregate_query(department)
        echoed = department.strip() if params else None

        with self._get_connection() as conn:
            cursor = conn.cursor()
            try:
                cursor.execute(query, *params)
                row = cursor.fetchone()
            finally:
                cursor.close()

        total = int(row[0] or 0) if row else 0
        average = row[1] if row else None
        average_salary = round_half_even(average) if total and average is not None else 0

        logger.info(
            f"SQL aggregate: department={echoed!r} total={total}",
            extra={"custom_dimensions": {"department": echoed, "total": total}},
        )
        return EmployeeSummary(total=total, department=echoed, average_salary=average_salary)


__all__ = ["SqlWarehouseRepository", "quote_identifier", "encode_access_token"]
