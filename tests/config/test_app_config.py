"""
Configuration model tests.

Loading from the environment, lazy require_*() checks, masking and the
get_config() singleton.
"""

import pytest

from config import AppConfig, AuthConfig, DataLakeConfig, SqlWarehouseConfig, debug_config, get_config
from exceptions import ConfigurationMissingError


class TestSqlWarehouseConfig:

    def test_defaults(self, clean_env):
        config = SqlWarehouseConfig.from_environment()

        assert config.endpoint is None
        assert config.database is None
        assert config.port == 1433
        assert config.db_schema == "dbo"
        assert config.table == "employees"
        assert config.connect_timeout_seconds == 30
        assert config.command_timeout_seconds == 30
        assert config.odbc_driver == "ODBC Driver 18 for SQL Server"
        assert not config.is_configured

    def test_blank_values_count_as_unset(self, clean_env):
        clean_env.setenv("SQL_ENDPOINT", "   ")
        clean_env.setenv("SQL_DATABASE", "")
        config = SqlWarehouseConfig.from_environment()
        assert config.endpoint is None
        assert config.database is None

    def test_require_connection_settings_names_missing_vars(self, clean_env):
        clean_env.setenv("SQL_ENDPOINT", "wh.datawarehouse.fabric.microsoft.com")
        config = SqlWarehouseConfig.from_environment()

        with pytest.raises(ConfigurationMissingError, match="SQL_DATABASE"):
            config.require_connection_settings()

    def test_require_connection_settings_passes(self, clean_env):
        clean_env.setenv("SQL_ENDPOINT", "wh.datawarehouse.fabric.microsoft.com")
        clean_env.setenv("SQL_DATABASE", "hr")
        SqlWarehouseConfig.from_environment().require_connection_settings()

    def test_password_without_user_rejected(self):
        config = SqlWarehouseConfig(endpoint="wh", database="hr", password="secret")
        with pytest.raises(ConfigurationMissingError, match="SQL_USER"):
            config.require_connection_settings()

    def test_password_masked(self):
        config = SqlWarehouseConfig(endpoint="wh", database="hr", user="u", password="secret")
        assert config.debug_dict()["password"] == "***MASKED***"
        assert "secret" not in repr(config)

    def test_timeouts_from_environment(self, clean_env):
        clean_env.setenv("SQL_CONNECT_TIMEOUT", "5")
        clean_env.setenv("SQL_COMMAND_TIMEOUT", "12")
        config = SqlWarehouseConfig.from_environment()
        assert config.connect_timeout_seconds == 5
        assert config.command_timeout_seconds == 12


class TestDataLakeConfig:

    def test_components(self, file_url):
        config = DataLakeConfig(file_url=file_url)

        assert config.account_host == "onelake.dfs.fabric.microsoft.com"
        assert config.file_name == "employees.csv"
        assert config.account_url == "https://onelake.dfs.fabric.microsoft.com"
        assert config.file_system == "testws"
        assert config.file_path == "hr.Lakehouse/Files/employees.csv"
        assert config.require_file_url() == file_url

    def test_encoded_path_is_decoded(self):
        config = DataLakeConfig(file_url="https://acct.dfs.core.windows.net/hr/raw%20data/employees.csv")
        assert config.file_system == "hr"
        assert config.file_path == "raw data/employees.csv"

    def test_missing_url(self, clean_env):
        config = DataLakeConfig.from_environment()
        assert not config.is_configured
        with pytest.raises(ConfigurationMissingError, match="ONELAKE_DFS_FILE_URL"):
            config.require_file_url()

    @pytest.mark.parametrize("url", [
        "http://onelake.dfs.fabric.microsoft.com/ws/lh/Files/employees.csv",
        "https://onelake.dfs.fabric.microsoft.com/",
        "https://onelake.dfs.fabric.microsoft.com/testws",
        "https://onelake.dfs.fabric.microsoft.com/testws/Files/",
        "not a url",
    ])
    def test_invalid_url(self, url):
        with pytest.raises(ConfigurationMissingError):
            DataLakeConfig(file_url=url).require_file_url()


class TestAuthConfig:

    def test_default_chain(self, clean_env):
        config = AuthConfig.from_environment()
        assert config.credential_chain == ("environment", "managed_identity", "azure_cli")
        assert config.managed_identity_client_id is None

    def test_chain_parsed_and_normalized(self, clean_env):
        clean_env.setenv("AZURE_CREDENTIAL_CHAIN", " Managed_Identity , AZURE_CLI ")
        config = AuthConfig.from_environment()
        assert config.credential_chain == ("managed_identity", "azure_cli")

    def test_unknown_providers_reported(self):
        config = AuthConfig(credential_chain="managed_identity,visual_studio")
        assert config.unknown_providers() == ("visual_studio",)

    def test_empty_chain_rejected(self):
        with pytest.raises(ValueError):
            AuthConfig(credential_chain=" , ")

    def test_client_id_masked(self):
        config = AuthConfig(managed_identity_client_id="12345678-1234-1234-1234-123456789abc")
        assert config.debug_dict()["managed_identity_client_id"] == "12345678..."


class TestGetConfig:

    def test_singleton(self):
        assert get_config() is get_config()

    def test_composes_domain_configs(self):
        config = get_config()
        assert isinstance(config, AppConfig)
        assert config.sql.is_configured
        assert config.data_lake.is_configured

    def test_invalid_value_becomes_configuration_missing(self, monkeypatch):
        monkeypatch.setenv("SQL_CONNECT_TIMEOUT", "0")
        with pytest.raises(ConfigurationMissingError):
            get_config()

    def test_non_integer_port_becomes_configuration_missing(self, monkeypatch):
        monkeypatch.setenv("SQL_PORT", "abc")
        with pytest.raises(ConfigurationMissingError):
            get_config()

    def test_debug_config_masks_password(self, monkeypatch):
        monkeypatch.setenv("SQL_PASSWORD", "hunter2")
        info = debug_config()
        assert info["sql"]["password"] == "***MASKED***"
        assert "hunter2" not in str(info)
