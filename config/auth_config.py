"""
Entra ID Authentication Configuration.

Controls the ordered credential chain used to acquire bearer tokens for the
SQL warehouse and the data lake.

Environment Variables:
    AZURE_CREDENTIAL_CHAIN: Comma-separated provider names tried in order.
        Supported: environment, workload_identity, managed_identity, azure_cli
        Default: environment,managed_identity,azure_cli
    AZURE_MANAGED_IDENTITY_CLIENT_ID: Client ID of a user-assigned identity
        (omit for system-assigned)

Exports:
    AuthConfig: Credential chain configuration
"""

import os
from typing import Optional, Tuple
from pydantic import BaseModel, Field, field_validator

from .defaults import AuthDefaults


class AuthConfig(BaseModel):
    """Credential chain configuration."""

    credential_chain: Tuple[str, ...] = Field(
        default=AuthDefaults.CREDENTIAL_CHAIN,
        description="Ordered credential provider names"
    )

    managed_identity_client_id: Optional[str] = Field(
        default=None,
        description="User-assigned managed identity client ID (not Object ID)"
    )

    @field_validator("credential_chain", mode="before")
    @classmethod
    def _split_chain(cls, value):
        if isinstance(value, str):
            value = value.split(",")
        names = tuple(str(part).strip().lower() for part in value if str(part).strip())
        if not names:
            raise ValueError("credential chain must name at least one provider")
        return names

    def unknown_providers(self) -> Tuple[str, ...]:
        """Provider names not recognised by the credential factory."""
        return tuple(
            name for name in self.credential_chain
            if name not in AuthDefaults.SUPPORTED_PROVIDERS
        )

    def debug_dict(self) -> dict:
        return {
            "credential_chain": list(self.credential_chain),
            "managed_identity_client_id": (
                self.managed_identity_client_id[:8] + "..."
                if self.managed_identity_client_id else None
            ),
        }

    @classmethod
    def from_environment(cls) -> "AuthConfig":
        chain = os.environ.get("AZURE_CREDENTIAL_CHAIN", "").strip()
        return cls(
            credential_chain=chain or AuthDefaults.CREDENTIAL_CHAIN,
            managed_identity_client_id=os.environ.get("AZURE_MANAGED_IDENTITY_CLIENT_ID") or None,
        )
