"""
Root conftest.py - sys.path, env vars, shared fixtures.

Sets up the test environment so all production code can be imported
without SQL warehouse connections or Azure credentials.
"""

import os
import sys

import pytest

# Add project root to sys.path so 'config', 'services', 'triggers', etc. are importable
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


TEST_FILE_URL = "https://onelake.dfs.fabric.microsoft.com/testws/hr.Lakehouse/Files/employees.csv"


@pytest.fixture(autouse=True, scope="session")
def set_minimal_env_vars():
    """
    Set minimal environment variables for a fully configured app.

    Tests that need a value missing remove it with monkeypatch.
    """
    defaults = {
        "ENVIRONMENT": "dev",
        "SQL_ENDPOINT": "testwarehouse.datawarehouse.fabric.microsoft.com",
        "SQL_DATABASE": "hr",
        "ONELAKE_DFS_FILE_URL": TEST_FILE_URL,
        "AZURE_CREDENTIAL_CHAIN": "environment,managed_identity,azure_cli",
    }
    for key, value in defaults.items():
        os.environ.setdefault(key, value)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Config and credential singletons are re-read from the environment per test."""
    from config import reset_config
    from infrastructure.auth import reset_credential

    reset_config()
    reset_credential()
    yield
    reset_config()
    reset_credential()


@pytest.fixture
def file_url():
    return TEST_FILE_URL
