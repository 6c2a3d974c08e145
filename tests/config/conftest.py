"""
Config test fixtures - clean environment via monkeypatch.
"""

import pytest


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all env vars that config modules might read, for isolation."""
    env_vars_to_clear = [
        "SQL_ENDPOINT", "SQL_DATABASE", "SQL_PORT", "SQL_SCHEMA", "SQL_TABLE",
        "SQL_TOKEN_SCOPE", "SQL_USER", "SQL_PASSWORD", "SQL_ODBC_DRIVER",
        "SQL_CONNECT_TIMEOUT", "SQL_COMMAND_TIMEOUT",
        "ONELAKE_DFS_FILE_URL",
        "AZURE_CREDENTIAL_CHAIN", "AZURE_MANAGED_IDENTITY_CLIENT_ID",
        "ENVIRONMENT", "LOG_LEVEL", "DEBUG_LOGGING",
    ]
    for var in env_vars_to_clear:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
