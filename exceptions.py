# ============================================================================
# EXCEPTIONS
# ============================================================================
# STATUS: Shared - raised by repositories/services, mapped by HTTP triggers
# PURPOSE: Error taxonomy with fixed HTTP status and generic public message
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================

"""
Custom Exception Hierarchy

Every error a request can hit is raised as one of these classes. Each class
carries:

    status_code:    HTTP status returned by the trigger boundary
    public_message: Generic message shown to the client

The exception's own message (str(e)) holds the detailed, internal reason and
is only ever logged server-side. Client payloads never include it so that
endpoint URLs, hostnames and driver messages do not leak.

Mapping:
    ConfigurationMissingError   500
    SourceUnreachableError      404
    SourceNotFoundError         404
    AccessForbiddenError        403
    AuthenticationFailureError  500
    DatabaseError               500
    DataFormatError             500
"""


class EmployeeApiError(Exception):
    """
    Base class for expected runtime failures.

    Subclasses override status_code and public_message.
    """
    status_code: int = 500
    public_message: str = "An unexpected error occurred while processing the request."


class ConfigurationMissingError(EmployeeApiError):
    """
    Required environment configuration is absent or invalid.

    Examples:
        - SQL_ENDPOINT or SQL_DATABASE not set
        - ONELAKE_DFS_FILE_URL not set
        - Unknown provider name in AZURE_CREDENTIAL_CHAIN
    """
    status_code = 500
    public_message = "Service configuration missing."


class SourceUnreachableError(EmployeeApiError):
    """
    Upstream data source could not be reached or read.

    Examples:
        - DNS/network failure contacting the data lake
        - Data lake returned a non-success status
    """
    status_code = 404
    public_message = "Data source not found or inaccessible."


class SourceNotFoundError(SourceUnreachableError):
    """Requested file does not exist in the data lake."""
    status_code = 404
    public_message = "Requested file not found."


class AccessForbiddenError(EmployeeApiError):
    """Identity authenticated but lacks permission on the resource."""
    status_code = 403
    public_message = "Access to the requested resource is forbidden."


class AuthenticationFailureError(EmployeeApiError):
    """
    No credential in the chain could produce a bearer token.

    Also raised when the upstream rejects the token.
    """
    status_code = 500
    public_message = "Authentication failed. Please ensure Entra ID authentication is properly configured."


class DatabaseError(EmployeeApiError):
    """
    SQL warehouse connection or query failure.

    Examples:
        - Endpoint unreachable, TLS failure
        - Login rejected, database missing
        - Query or statement timeout
    """
    status_code = 500
    public_message = "Database connection failed. Please check the SQL endpoint configuration and ensure the database is accessible."


class DataFormatError(EmployeeApiError):
    """Downloaded CSV could not be parsed into employee records."""
    status_code = 500
    public_message = "Employee data could not be read."
