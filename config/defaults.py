"""
Configuration Defaults - Single source of truth for all default values.

Organization:
    - SqlWarehouseDefaults: SQL endpoint connection/timeouts/table
    - DataLakeDefaults: Data lake file access
    - AuthDefaults: Credential chain order and token scopes
    - EmployeeDefaults: Filtered endpoint limits
    - AppDefaults: Environment name

There are no defaults for SQL_ENDPOINT, SQL_DATABASE or ONELAKE_DFS_FILE_URL.
Endpoints that need them fail with ConfigurationMissingError when unset.

Usage:
    from config.defaults import SqlWarehouseDefaults

    # In Pydantic Field definitions:
    port: int = Field(default=SqlWarehouseDefaults.PORT, ...)
"""


# =============================================================================
# SQL WAREHOUSE DEFAULTS
# =============================================================================

class SqlWarehouseDefaults:
    """
    SQL warehouse connection defaults.

    Targets the TDS endpoint of a Fabric warehouse or Azure SQL database.
    Timeouts match the fixed connect/command timeouts of the employee
    SQL endpoint (30 seconds each).
    """

    PORT = 1433
    SCHEMA = "dbo"
    TABLE = "employees"
    CONNECT_TIMEOUT_SECONDS = 30
    COMMAND_TIMEOUT_SECONDS = 30
    ODBC_DRIVER = "ODBC Driver 18 for SQL Server"


# =============================================================================
# DATA LAKE DEFAULTS
# =============================================================================

class DataLakeDefaults:
    """Data lake (OneLake / ADLS Gen2 DFS) defaults."""

    CSV_CONTENT_TYPE = "text/csv; charset=utf-8"
    CSV_ENCODING = "utf-8-sig"


# =============================================================================
# AUTH DEFAULTS
# =============================================================================

class AuthDefaults:
    """
    Entra ID credential defaults.

    CREDENTIAL_CHAIN is the ordered list of providers tried until one
    returns a token. Names map to azure.identity credential classes.
    """

    CREDENTIAL_CHAIN = ("environment", "managed_identity", "azure_cli")
    SUPPORTED_PROVIDERS = ("environment", "workload_identity", "managed_identity", "azure_cli")

    # Fabric warehouse / Azure SQL endpoint audience
    SQL_TOKEN_SCOPE = "https://database.windows.net/.default"


# =============================================================================
# EMPLOYEE ENDPOINT DEFAULTS
# =============================================================================

class EmployeeDefaults:
    """Filtered employee endpoint limits."""

    MAX_ITEMS = 50


# =============================================================================
# APPLICATION DEFAULTS
# =============================================================================

class AppDefaults:
    """
    Application-wide defaults.
    """

    ENVIRONMENT = "dev"


# =============================================================================
# EXPORTS
# =============================================================================

__all__ = [
    "SqlWarehouseDefaults",
    "DataLakeDefaults",
    "AuthDefaults",
    "EmployeeDefaults",
    "AppDefaults",
]
