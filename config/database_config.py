"""
SQL Warehouse Configuration.

Provides configuration for the SQL endpoint used by GET /api/employees/sql:
    - Endpoint host and database name (required for that endpoint only)
    - Entra ID token scope (token passed through the ODBC access-token attribute)
    - ODBC driver name
    - Optional password authentication for local development
    - Fixed connect/command timeouts

Exports:
    SqlWarehouseConfig: SQL warehouse configuration
"""

import os
from typing import Optional
from pydantic import BaseModel, Field

from exceptions import ConfigurationMissingError
from .defaults import SqlWarehouseDefaults, AuthDefaults


# ============================================================================
# SQL WAREHOUSE CONFIGURATION
# ============================================================================

class SqlWarehouseConfig(BaseModel):
    """
    SQL warehouse configuration with Entra ID token support.

    endpoint/database are Optional so the app can start (and serve the
    data lake endpoints) without them. Use require_connection_settings()
    at request time.
    """

    endpoint: Optional[str] = Field(
        default=None,
        description="SQL endpoint hostname (SQL_ENDPOINT)",
        examples=["abc123.datawarehouse.fabric.microsoft.com"]
    )

    database: Optional[str] = Field(
        default=None,
        description="Database name (SQL_DATABASE)",
        examples=["hr"]
    )

    port: int = Field(
        default=SqlWarehouseDefaults.PORT,
        description="SQL endpoint port"
    )

    db_schema: str = Field(
        default=SqlWarehouseDefaults.SCHEMA,
        description="Schema holding the employees table"
    )

    table: str = Field(
        default=SqlWarehouseDefaults.TABLE,
        description="Employees table name"
    )

    token_scope: str = Field(
        default=AuthDefaults.SQL_TOKEN_SCOPE,
        description="""OAuth scope requested from the credential chain.

        The resulting bearer token is handed to the ODBC driver as an access token.
        Environment Variable: SQL_TOKEN_SCOPE
        """
    )

    user: Optional[str] = Field(
        default=None,
        description="""Login name (SQL_USER).

        Used only with password auth (SQL_PASSWORD). With token auth the
        principal comes from the token itself.
        """
    )

    password: Optional[str] = Field(
        default=None,
        repr=False,
        description="Password for local development only (SQL_PASSWORD). When set, no token is requested."
    )

    connect_timeout_seconds: int = Field(
        default=SqlWarehouseDefaults.CONNECT_TIMEOUT_SECONDS,
        ge=1,
        description="Connection timeout in seconds"
    )

    command_timeout_seconds: int = Field(
        default=SqlWarehouseDefaults.COMMAND_TIMEOUT_SECONDS,
        ge=1,
        description="Query timeout in seconds"
    )

    odbc_driver: str = Field(
        default=SqlWarehouseDefaults.ODBC_DRIVER,
        description="Installed ODBC driver name (SQL_ODBC_DRIVER); connections always use Encrypt=yes"
    )

    @property
    def is_configured(self) -> bool:
        """True when both endpoint and database are set."""
        return bool(self.endpoint) and bool(self.database)

    @property
    def uses_password_auth(self) -> bool:
        return bool(self.password)

    def require_connection_settings(self) -> None:
        """
        Fail with ConfigurationMissingError unless endpoint and database are set.

        Raises:
            ConfigurationMissingError: If SQL_ENDPOINT or SQL_DATABASE is missing
        """
        missing = [
            name for name, value in (("SQL_ENDPOINT", self.endpoint), ("SQL_DATABASE", self.database))
            if not value
        ]
        if missing:
            raise ConfigurationMissingError(
                f"{' and '.join(missing)} environment variable(s) not configured"
            )
        if self.uses_password_auth and not self.user:
            raise ConfigurationMissingError("SQL_USER is required when SQL_PASSWORD is set")

    def debug_dict(self) -> dict:
        """Debug output with masked password."""
        return {
            "endpoint": self.endpoint,
            "database": self.database,
            "port": self.port,
            "schema": self.db_schema,
            "table": self.table,
            "user": self.user,
            "password": "***MASKED***" if self.password else None,
            "token_scope": self.token_scope,
            "odbc_driver": self.odbc_driver,
            "connect_timeout_seconds": self.connect_timeout_seconds,
            "command_timeout_seconds": self.command_timeout_seconds,
        }

    @classmethod
    def from_environment(cls) -> "SqlWarehouseConfig":
        """Load from environment variables. Blank values count as unset."""
        return cls(
            endpoint=os.environ.get("SQL_ENDPOINT", "").strip() or None,
            database=os.environ.get("SQL_DATABASE", "").strip() or None,
            port=int(os.environ.get("SQL_PORT", str(SqlWarehouseDefaults.PORT))),
            db_schema=os.environ.get("SQL_SCHEMA", SqlWarehouseDefaults.SCHEMA),
            table=os.environ.get("SQL_TABLE", SqlWarehouseDefaults.TABLE),
            token_scope=os.environ.get("SQL_TOKEN_SCOPE", AuthDefaults.SQL_TOKEN_SCOPE),
            user=os.environ.get("SQL_USER") or None,
            password=os.environ.get("SQL_PASSWORD") or None,
            odbc_driver=os.environ.get("SQL_ODBC_DRIVER", SqlWarehouseDefaults.ODBC_DRIVER),
            connect_timeout_seconds=int(os.environ.get(
                "SQL_CONNECT_TIMEOUT", str(SqlWarehouseDefaults.CONNECT_TIMEOUT_SECONDS)
            )),
            command_timeout_seconds=int(os.environ.get(
                "SQL_COMMAND_TIMEOUT", str(SqlWarehouseDefaults.COMMAND_TIMEOUT_SECONDS)
            )),
        )
