"""
Environment variable validation tests.

Tests regex patterns for the SQL warehouse, data lake and credential chain
validators.
"""

import pytest
from unittest.mock import MagicMock

from config.env_validation import (
    ENV_VAR_RULES,
    validate_environment,
    validate_single_var,
    log_validation_results,
)


class TestSqlEndpointValidation:
    """SQL_ENDPOINT must be a bare hostname."""

    rule = ENV_VAR_RULES["SQL_ENDPOINT"]

    @pytest.mark.parametrize("value", [
        "localhost",
        "127.0.0.1",
        "abc123.datawarehouse.fabric.microsoft.com",
    ])
    def test_hostnames_accepted(self, monkeypatch, value):
        monkeypatch.setenv("SQL_ENDPOINT", value)
        assert validate_single_var("SQL_ENDPOINT", self.rule) is None

    @pytest.mark.parametrize("value", [
        "https://abc123.datawarehouse.fabric.microsoft.com",
        "abc123.datawarehouse.fabric.microsoft.com:1433",
    ])
    def test_scheme_or_port_rejected(self, monkeypatch, value):
        monkeypatch.setenv("SQL_ENDPOINT", value)
        result = validate_single_var("SQL_ENDPOINT", self.rule)
        assert result is not None
        assert result.severity == "error"

    def test_missing_is_error(self, clean_env):
        result = validate_single_var("SQL_ENDPOINT", self.rule)
        assert result is not None
        assert result.message == "Required environment variable not set"

    def test_spaces_rejected(self, monkeypatch):
        monkeypatch.setenv("SQL_ENDPOINT", "  ")
        result = validate_single_var("SQL_ENDPOINT", self.rule)
        assert result is not None


class TestFileUrlValidation:
    """ONELAKE_DFS_FILE_URL must be an https URL pointing at a file."""

    rule = ENV_VAR_RULES["ONELAKE_DFS_FILE_URL"]

    def test_file_url_accepted(self, monkeypatch, file_url):
        monkeypatch.setenv("ONELAKE_DFS_FILE_URL", file_url)
        assert validate_single_var("ONELAKE_DFS_FILE_URL", self.rule) is None

    @pytest.mark.parametrize("value", [
        "http://onelake.dfs.fabric.microsoft.com/ws/lh.Lakehouse/Files/employees.csv",
        "https://onelake.dfs.fabric.microsoft.com/",
        "https://onelake.dfs.fabric.microsoft.com/ws/lh.Lakehouse/Files/",
        "https://onelake.dfs.fabric.microsoft.com/employees.csv",
        "employees.csv",
    ])
    def test_non_file_urls_rejected(self, monkeypatch, value):
        monkeypatch.setenv("ONELAKE_DFS_FILE_URL", value)
        assert validate_single_var("ONELAKE_DFS_FILE_URL", self.rule) is not None


class TestCredentialChainValidation:

    rule = ENV_VAR_RULES["AZURE_CREDENTIAL_CHAIN"]

    @pytest.mark.parametrize("value", [
        "managed_identity",
        "environment,managed_identity,azure_cli",
        "workload_identity, azure_cli",
        "AZURE_CLI",
    ])
    def test_known_providers_accepted(self, monkeypatch, value):
        monkeypatch.setenv("AZURE_CREDENTIAL_CHAIN", value)
        assert validate_single_var("AZURE_CREDENTIAL_CHAIN", self.rule) is None

    @pytest.mark.parametrize("value", ["default", "managed_identity,,azure_cli", "visual_studio"])
    def test_unknown_providers_rejected(self, monkeypatch, value):
        monkeypatch.setenv("AZURE_CREDENTIAL_CHAIN", value)
        assert validate_single_var("AZURE_CREDENTIAL_CHAIN", self.rule) is not None

    def test_unset_uses_default_silently(self, clean_env):
        assert validate_single_var("AZURE_CREDENTIAL_CHAIN", self.rule) is None


class TestOptionalVars:

    def test_default_warning_for_schema(self, clean_env):
        result = validate_single_var("SQL_SCHEMA", ENV_VAR_RULES["SQL_SCHEMA"])
        assert result is not None
        assert result.severity == "warning"

    def test_warnings_suppressed(self, clean_env):
        result = validate_single_var("SQL_SCHEMA", ENV_VAR_RULES["SQL_SCHEMA"], include_warnings=False)
        assert result is None

    @pytest.mark.parametrize("value", ["0", "-5", "abc", "30s"])
    def test_bad_timeouts_rejected(self, monkeypatch, value):
        monkeypatch.setenv("SQL_CONNECT_TIMEOUT", value)
        assert validate_single_var("SQL_CONNECT_TIMEOUT", ENV_VAR_RULES["SQL_CONNECT_TIMEOUT"]) is not None

    @pytest.mark.parametrize("value,ok", [
        ("ODBC Driver 18 for SQL Server", True),
        ("ODBC Driver 17 for SQL Server", True),
        ("PostgreSQL Unicode", False),
    ])
    def test_odbc_driver_name(self, monkeypatch, value, ok):
        monkeypatch.setenv("SQL_ODBC_DRIVER", value)
        result = validate_single_var("SQL_ODBC_DRIVER", ENV_VAR_RULES["SQL_ODBC_DRIVER"])
        assert (result is None) is ok

    def test_client_id_must_be_guid(self, monkeypatch):
        monkeypatch.setenv("AZURE_MANAGED_IDENTITY_CLIENT_ID", "my-identity")
        rule = ENV_VAR_RULES["AZURE_MANAGED_IDENTITY_CLIENT_ID"]
        assert validate_single_var("AZURE_MANAGED_IDENTITY_CLIENT_ID", rule) is not None

    def test_token_scope_value_masked(self, monkeypatch):
        monkeypatch.setenv("SQL_TOKEN_SCOPE", "not-a-scope")
        result = validate_single_var("SQL_TOKEN_SCOPE", ENV_VAR_RULES["SQL_TOKEN_SCOPE"])
        assert result.to_dict()["current_value"] == "***MASKED***"


class TestValidateEnvironment:

    def test_fully_configured_has_no_errors(self):
        errors = [r for r in validate_environment() if r.severity == "error"]
        assert errors == []

    def test_missing_required_vars_reported(self, clean_env):
        names = {r.var_name for r in validate_environment() if r.severity == "error"}
        assert names == {"SQL_ENDPOINT", "SQL_DATABASE", "ONELAKE_DFS_FILE_URL"}

    def test_log_validation_results_is_non_fatal(self, clean_env):
        logger = MagicMock()
        assert log_validation_results(logger) is False
        assert logger.error.called

    def test_log_validation_results_passes(self):
        logger = MagicMock()
        assert log_validation_results(logger) is True
        logger.info.assert_called_with("Environment validation passed")
