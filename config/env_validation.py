# ============================================================================
# ENVIRONMENT VARIABLE VALIDATION
# ============================================================================
# STATUS: Configuration - Startup validation with regex patterns
# PURPOSE: Report malformed env vars at startup with clear fix suggestions
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================
"""
Environment Variable Validation Module.

Validates environment variables at startup using regex patterns so that
configuration errors show up in the host log with actionable messages.

Nothing here is fatal: every endpoint re-checks its own settings at request
time and returns 500 when they are missing, so an app configured only for
the data lake still serves /api/employees and /api/files/raw.

Usage:
    from config.env_validation import validate_environment, ENV_VAR_RULES

    errors = validate_environment()
    for error in errors:
        print(f"{error.var_name}: {error.message}")

Exports:
    ENV_VAR_RULES: Dict of all validation rules
    ValidationError: Dataclass for validation errors
    EnvVarRule: Dataclass for a single rule
    validate_environment: Main validation function
    validate_single_var: Validate one variable
    log_validation_results: Log errors/warnings, return overall status
"""

import os
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Pattern, Any


# ============================================================================
# VALIDATION ERROR
# ============================================================================

@dataclass
class ValidationError:
    """Result of a failed environment variable validation."""
    var_name: str
    message: str
    current_value: Optional[str]
    expected_pattern: str
    fix_suggestion: str
    severity: str = "error"  # error, warning

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for JSON serialization."""
        return {
            "var_name": self.var_name,
            "message": self.message,
            "current_value": self._mask_sensitive(self.current_value),
            "expected_pattern": self.expected_pattern,
            "fix_suggestion": self.fix_suggestion,
            "severity": self.severity,
        }

    def _mask_sensitive(self, value: Optional[str]) -> Optional[str]:
        """Mask potentially sensitive values."""
        if value is None:
            return None
        sensitive_keywords = ["password", "secret", "key", "token"]
        var_lower = self.var_name.lower()
        if any(kw in var_lower for kw in sensitive_keywords):
            return "***MASKED***"
        if len(value) > 30:
            return f"{value[:20]}...({len(value)} chars)"
        return value


# ============================================================================
# VALIDATION RULE DEFINITION
# ============================================================================

@dataclass
class EnvVarRule:
    """
    Validation rule for an environment variable.

    Attributes:
        pattern: Compiled regex pattern for validation
        pattern_description: Human-readable description of expected format
        required: Whether this variable must be set
        fix_suggestion: How to fix if validation fails
        example: Example valid value
        allow_empty: Allow empty string (default False)
        default_value: Default value used if not set (for warning messages)
        warn_on_default: Emit warning when using default value
    """
    pattern: Pattern
    pattern_description: str
    required: bool
    fix_suggestion: str
    example: str
    allow_empty: bool = False
    default_value: Optional[str] = None
    warn_on_default: bool = True


# ============================================================================
# VALIDATION RULES - Single source of truth for env var formats
# ============================================================================

_HOSTNAME = re.compile(r"^(localhost|127\.0\.0\.1|[a-z0-9][a-z0-9-]*(\.[a-z0-9][a-z0-9-]*)+)$", re.IGNORECASE)
_DATABASE_NAME = re.compile(r"^[a-zA-Z][a-zA-Z0-9_-]{0,127}$")
_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]{0,62}$")
_HTTPS_FILE_URL = re.compile(r"^https://[a-z0-9][a-z0-9.-]+\.[a-z]{2,}/[^/]+/.*[^/]$", re.IGNORECASE)
_HTTPS_SCOPE = re.compile(r"^https://\S+/\.default$", re.IGNORECASE)
_POSITIVE_INT = re.compile(r"^[1-9][0-9]*$")
_ODBC_DRIVER = re.compile(r"^ODBC Driver 1[78] for SQL Server$")
_BOOLEAN = re.compile(r"^(true|false|1|0|yes|no)$", re.IGNORECASE)
_GUID = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE)
_CREDENTIAL_CHAIN = re.compile(
    r"^\s*(environment|workload_identity|managed_identity|azure_cli)"
    r"(\s*,\s*(environment|workload_identity|managed_identity|azure_cli))*\s*$",
    re.IGNORECASE,
)


ENV_VAR_RULES: Dict[str, EnvVarRule] = {
    # =========================================================================
    # SQL WAREHOUSE (GET /api/employees/sql)
    # =========================================================================
    "SQL_ENDPOINT": EnvVarRule(
        pattern=_HOSTNAME,
        pattern_description="Hostname of the SQL endpoint (no scheme, no port)",
        required=True,
        fix_suggestion="Copy the SQL connection host from the warehouse settings",
        example="abc123.datawarehouse.fabric.microsoft.com",
    ),

    "SQL_DATABASE": EnvVarRule(
        pattern=_DATABASE_NAME,
        pattern_description="Database name (letters, numbers, underscore, hyphen)",
        required=True,
        fix_suggestion="Set to the warehouse database name",
        example="hr",
    ),

    "SQL_PORT": EnvVarRule(
        pattern=_POSITIVE_INT,
        pattern_description="Positive integer (default 1433)",
        required=False,
        fix_suggestion="Use a valid port number like 1433",
        example="1433",
        default_value="1433",
        warn_on_default=False,
    ),

    "SQL_SCHEMA": EnvVarRule(
        pattern=_IDENTIFIER,
        pattern_description="SQL identifier (letters, numbers, underscore)",
        required=False,
        fix_suggestion="Set the schema holding the employees table",
        example="dbo",
        default_value="dbo",
    ),

    "SQL_TABLE": EnvVarRule(
        pattern=_IDENTIFIER,
        pattern_description="SQL identifier (letters, numbers, underscore)",
        required=False,
        fix_suggestion="Set the employees table name",
        example="employees",
        default_value="employees",
    ),

    "SQL_TOKEN_SCOPE": EnvVarRule(
        pattern=_HTTPS_SCOPE,
        pattern_description="OAuth scope ending in /.default",
        required=False,
        fix_suggestion="Use the resource scope of the SQL endpoint",
        example="https://database.windows.net/.default",
        default_value="https://database.windows.net/.default",
        warn_on_default=False,
    ),

    "SQL_CONNECT_TIMEOUT": EnvVarRule(
        pattern=_POSITIVE_INT,
        pattern_description="Positive integer seconds (default 30)",
        required=False,
        fix_suggestion="Use a timeout in seconds like 30",
        example="30",
        default_value="30",
        warn_on_default=False,
    ),

    "SQL_COMMAND_TIMEOUT": EnvVarRule(
        pattern=_POSITIVE_INT,
        pattern_description="Positive integer seconds (default 30)",
        required=False,
        fix_suggestion="Use a timeout in seconds like 30",
        example="30",
        default_value="30",
        warn_on_default=False,
    ),

    "SQL_ODBC_DRIVER": EnvVarRule(
        pattern=_ODBC_DRIVER,
        pattern_description="Installed ODBC driver name for SQL Server",
        required=False,
        fix_suggestion="Use the driver name listed by odbcinst -q -d, e.g. 'ODBC Driver 18 for SQL Server'",
        example="ODBC Driver 18 for SQL Server",
        default_value="ODBC Driver 18 for SQL Server",
        warn_on_default=False,
    ),

    # =========================================================================
    # DATA LAKE (GET /api/employees, GET /api/files/raw)
    # =========================================================================
    "ONELAKE_DFS_FILE_URL": EnvVarRule(
        pattern=_HTTPS_FILE_URL,
        pattern_description="HTTPS DFS URL of a file: https://<host>/<file system>/<path to file>",
        required=True,
        fix_suggestion="Use the file's DFS URL from the lakehouse file properties",
        example="https://onelake.dfs.fabric.microsoft.com/ws/lh.Lakehouse/Files/employees.csv",
    ),

    # =========================================================================
    # AUTHENTICATION
    # =========================================================================
    "AZURE_CREDENTIAL_CHAIN": EnvVarRule(
        pattern=_CREDENTIAL_CHAIN,
        pattern_description="Comma list of environment, workload_identity, managed_identity, azure_cli",
        required=False,
        fix_suggestion="Order providers by preference, e.g. 'managed_identity,azure_cli'",
        example="environment,managed_identity,azure_cli",
        default_value="environment,managed_identity,azure_cli",
        warn_on_default=False,
    ),

    "AZURE_MANAGED_IDENTITY_CLIENT_ID": EnvVarRule(
        pattern=_GUID,
        pattern_description="GUID client ID of a user-assigned managed identity",
        required=False,
        fix_suggestion="Copy the Client ID (not Object ID) from the managed identity resource",
        example="12345678-1234-1234-1234-123456789abc",
        warn_on_default=False,
    ),

    # =========================================================================
    # LOGGING
    # =========================================================================
    "LOG_LEVEL": EnvVarRule(
        pattern=re.compile(r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$", re.IGNORECASE),
        pattern_description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        required=False,
        fix_suggestion="Set to DEBUG for verbose logging, INFO for normal operation",
        example="INFO",
        default_value="INFO",
    ),

    "DEBUG_LOGGING": EnvVarRule(
        pattern=_BOOLEAN,
        pattern_description="Boolean value (true/false)",
        required=False,
        fix_suggestion="Set to 'true' to force DEBUG on every component logger",
        example="false",
        default_value="false",
        warn_on_default=False,
    ),
}


# ============================================================================
# VALIDATION FUNCTIONS
# ============================================================================

def validate_single_var(
    var_name: str,
    rule: EnvVarRule,
    include_warnings: bool = True
) -> Optional[ValidationError]:
    """
    Validate a single environment variable against its rule.

    Args:
        var_name: Environment variable name
        rule: Validation rule to apply
        include_warnings: Whether to return warnings for vars using defaults

    Returns:
        ValidationError if validation fails or warning if using default, None if passes
    """
    value = os.environ.get(var_name)

    if rule.required and (value is None or (not rule.allow_empty and value.strip() == "")):
        return ValidationError(
            var_name=var_name,
            message="Required environment variable not set",
            current_value=value,
            expected_pattern=rule.pattern_description,
            fix_suggestion=f"{rule.fix_suggestion}. Example: {rule.example}",
            severity="error",
        )

    if value is None or value == "":
        if include_warnings and not rule.required and rule.warn_on_default and rule.default_value is not None:
            return ValidationError(
                var_name=var_name,
                message="Not set, using default value",
                current_value=None,
                expected_pattern=f"Default: {rule.default_value}",
                fix_suggestion=f"Set explicitly or accept default. {rule.fix_suggestion}",
                severity="warning",
            )
        return None

    if not rule.pattern.match(value):
        return ValidationError(
            var_name=var_name,
            message="Invalid format",
            current_value=value,
            expected_pattern=rule.pattern_description,
            fix_suggestion=f"{rule.fix_suggestion}. Example: {rule.example}",
            severity="error",
        )

    return None


def validate_environment(
    rules: Optional[Dict[str, EnvVarRule]] = None,
    include_warnings: bool = True
) -> List[ValidationError]:
    """
    Validate all environment variables against their rules.

    Args:
        rules: Optional custom rules dict (defaults to ENV_VAR_RULES)
        include_warnings: Whether to include warnings for vars using defaults

    Returns:
        List of ValidationError objects (errors and optionally warnings)
    """
    if rules is None:
        rules = ENV_VAR_RULES

    results = []
    for var_name, rule in rules.items():
        result = validate_single_var(var_name, rule, include_warnings=include_warnings)
        if result:
            results.append(result)

    return results


def log_validation_results(logger) -> bool:
    """
    Log validation results at appropriate levels.

    Errors are logged at ERROR, warnings at WARNING.

    Args:
        logger: Logger instance

    Returns:
        True if no errors (warnings are OK), False otherwise
    """
    all_results = validate_environment(include_warnings=True)

    errors = [r for r in all_results if r.severity == "error"]
    warnings = [r for r in all_results if r.severity == "warning"]

    for error in errors:
        logger.error(
            f"ENV VAR ERROR: {error.var_name} - {error.message}",
            extra={'custom_dimensions': error.to_dict()}
        )
        logger.error(f"  Expected: {error.expected_pattern}")
        logger.error(f"  Fix: {error.fix_suggestion}")

    if warnings:
        logger.warning(f"ENV VARS: {len(warnings)} optional variables using defaults:")
        for warning in warnings:
            default_val = warning.expected_pattern.replace("Default: ", "")
            logger.warning(f"  {warning.var_name} → {default_val}")

    if errors:
        logger.error(f"Environment validation found {len(errors)} errors; affected endpoints will return 500")
        return False

    logger.info("Environment validation passed")
    return True


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "ENV_VAR_RULES",
    "EnvVarRule",
    "ValidationError",
    "validate_environment",
    "validate_single_var",
    "log_validation_results",
]
