"""
Main Application Configuration.

Composes domain-specific configuration modules:
    - SqlWarehouseConfig (SQL endpoint, timeouts, token scope)
    - DataLakeConfig (employee CSV file URL)
    - AuthConfig (ordered credential chain)

Exports:
    AppConfig: Main configuration class

Pattern:
    Composition over inheritance - domain configs are composed, not inherited.
"""

import os
from pydantic import BaseModel, Field

from .database_config import SqlWarehouseConfig
from .storage_config import DataLakeConfig
from .auth_config import AuthConfig
from .defaults import AppDefaults


# ============================================================================
# APPLICATION CONFIGURATION
# ============================================================================

class AppConfig(BaseModel):
    """
    Application configuration - composition of domain configs.
    """

    # ========================================================================
    # Core Application Settings
    # ========================================================================

    environment: str = Field(
        default=AppDefaults.ENVIRONMENT,
        description="Environment name (dev, qa, prod)",
        examples=["dev", "prod"]
    )

    # ========================================================================
    # Domain Configurations
    # ========================================================================

    sql: SqlWarehouseConfig = Field(default_factory=SqlWarehouseConfig)
    data_lake: DataLakeConfig = Field(default_factory=DataLakeConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)

    @classmethod
    def from_environment(cls) -> "AppConfig":
        """Load every domain config from environment variables."""
        return cls(
            environment=os.environ.get("ENVIRONMENT", AppDefaults.ENVIRONMENT),
            sql=SqlWarehouseConfig.from_environment(),
            data_lake=DataLakeConfig.from_environment(),
            auth=AuthConfig.from_environment(),
        )
