"""
Authentication Module.

Entra ID token acquisition for the SQL warehouse and the data lake.

Components:
-----------
- build_credential_chain: Ordered ChainedTokenCredential from AuthConfig
- get_azure_credential: Process-wide cached chain
- get_access_token: Bearer token for a scope (AuthenticationFailureError on failure)

Usage:
------
```python
from infrastructure.auth import get_access_token

token = get_access_token(config.sql.token_scope)
```

Environment Variables:
---------------------
AZURE_CREDENTIAL_CHAIN=environment,managed_identity,azure_cli
AZURE_MANAGED_IDENTITY_CLIENT_ID=<guid>  # User-assigned MI
"""

from .credential import (
    PROVIDER_FACTORIES,
    build_credential_chain,
    get_access_token,
    get_azure_credential,
    reset_credential,
)

__all__ = [
    "PROVIDER_FACTORIES",
    "build_credential_chain",
    "get_access_token",
    "get_azure_credential",
    "reset_credential",
]
