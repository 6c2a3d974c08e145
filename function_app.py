"""
Azure Functions entry point for the Employee Data API.

Exposes employee data from two sources:

    Data lake CSV (OneLake / ADLS Gen2) -> filter/aggregate in memory
    SQL warehouse                       -> aggregate pushed down to SQL

Both are reached with an Entra ID token from an ordered credential chain
(AZURE_CREDENTIAL_CHAIN).

Exports:
    app: Azure Function App instance

Dependencies:
    azure.functions: Azure Functions SDK
    triggers/*: HTTP trigger implementations
    infrastructure.*: Data lake and SQL warehouse repositories

Endpoints:
    GET /api/employees?department=IT   - Filtered CSV: total, averageSalary, first 50 items
    GET /api/employees/sql[?department=IT] - SQL aggregate: total, averageSalary
    GET /api/files/raw                 - Employee CSV bytes (text/csv)

Environment Variables:
    ONELAKE_DFS_FILE_URL: Full DFS URL of the employee CSV
    SQL_ENDPOINT: SQL warehouse hostname
    SQL_DATABASE: SQL warehouse database
    AZURE_CREDENTIAL_CHAIN: Ordered credential providers (optional)
    AZURE_MANAGED_IDENTITY_CLIENT_ID: User-assigned identity (optional)
    LOG_LEVEL / DEBUG_LOGGING: Component logger levels (optional)
"""

# ========================================================================
# IMPORTS - Categorized by source for maintainability
# ========================================================================

# Native Python modules
import logging

# Azure SDK modules (3rd party - Microsoft)
import azure.functions as func

# Suppress Azure Identity and Azure SDK authentication/HTTP logging
logging.getLogger("azure.identity").setLevel(logging.WARNING)
logging.getLogger("azure.identity._internal").setLevel(logging.WARNING)
logging.getLogger("azure.core.pipeline.policies.http_logging_policy").setLevel(logging.WARNING)
logging.getLogger("azure.storage").setLevel(logging.WARNING)
logging.getLogger("azure.core").setLevel(logging.WARNING)
logging.getLogger("msal").setLevel(logging.WARNING)  # Microsoft Authentication Library

# Application modules (our code)
from util_logger import LoggerFactory
from util_logger import ComponentType
from config.env_validation import log_validation_results

# HTTP trigger singletons
from triggers.employees import employees_trigger
from triggers.employees_sql import employees_sql_trigger
from triggers.file_passthrough import file_passthrough_trigger

# ========================================================================
# STARTUP VALIDATION - Warn about misconfigured app settings, never crash
# ========================================================================

logger = LoggerFactory.create_logger(ComponentType.VALIDATOR, "Startup")
log_validation_results(logger)

# Initialize function app with HTTP auth level
app = func.FunctionApp(http_auth_level=func.AuthLevel.FUNCTION)


# ============================================================================
# EMPLOYEE ENDPOINTS
# ============================================================================

@app.route(route="employees", methods=["GET"])
def employees(req: func.HttpRequest) -> func.HttpResponse:
    """
    Employees by department from the data lake CSV.

    GET /api/employees?department=IT
    """
    return employees_trigger.handle_request(req)


@app.route(route="employees/sql", methods=["GET"])
def employees_sql(req: func.HttpRequest) -> func.HttpResponse:
    """
    Employee count and average salary from the SQL warehouse.

    GET /api/employees/sql?department=IT (department optional)
    """
    return employees_sql_trigger.handle_request(req)


# ============================================================================
# FILE ENDPOINTS
# ============================================================================

@app.route(route="files/raw", methods=["GET"])
def files_raw(req: func.HttpRequest) -> func.HttpResponse:
    """Raw employee CSV passthrough."""
    return file_passthrough_trigger.handle_request(req)
