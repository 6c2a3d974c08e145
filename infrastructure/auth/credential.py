# ============================================================================
# ENTRA ID CREDENTIAL CHAIN
# ============================================================================
# STATUS: Infrastructure - Canonical credential provider
# PURPOSE: Ordered ChainedTokenCredential built from AZURE_CREDENTIAL_CHAIN
# LAST_REVIEWED: 19 OCT 2026
# DEPENDENCIES: azure.identity, config.auth_config
# ============================================================================
"""
Entra ID credential chain.

Providers are tried in the configured order until one returns a token:

    environment        -> EnvironmentCredential (AZURE_CLIENT_ID/SECRET/TENANT_ID)
    workload_identity  -> WorkloadIdentityCredential (AKS federated token)
    managed_identity   -> ManagedIdentityCredential (client_id if user-assigned)
    azure_cli          -> AzureCliCredential (local `az login`)

Each provider fails explicitly; ChainedTokenCredential collects the failures
into a single ClientAuthenticationError which is re-raised here as
AuthenticationFailureError.

The chain is built once per process and reused. azure.identity caches tokens
internally, so get_access_token() is cheap after the first call.
"""

from typing import Callable, Dict, List, Optional

from azure.core.credentials import TokenCredential
from azure.core.exceptions import ClientAuthenticationError
from azure.identity import (
    AzureCliCredential,
    ChainedTokenCredential,
    EnvironmentCredential,
    ManagedIdentityCredential,
    WorkloadIdentityCredential,
)

from config import AuthConfig, get_config
from exceptions import AuthenticationFailureError, ConfigurationMissingError
from util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.FACTORY, "CredentialChain")

_credential: Optional[ChainedTokenCredential] = None


def _managed_identity(auth_config: AuthConfig) -> TokenCredential:
    if auth_config.managed_identity_client_id:
        return ManagedIdentityCredential(client_id=auth_config.managed_identity_client_id)
    return ManagedIdentityCredential()


PROVIDER_FACTORIES: Dict[str, Callable[[AuthConfig], TokenCredential]] = {
    "environment": lambda auth_config: EnvironmentCredential(),
    "workload_identity": lambda auth_config: WorkloadIdentityCredential(),
    "managed_identity": _managed_identity,
    "azure_cli": lambda auth_config: AzureCliCredential(),
}


def build_credential_chain(auth_config: AuthConfig) -> ChainedTokenCredential:
    """
    Build a ChainedTokenCredential from the configured provider order.

    Args:
        auth_config: Provider order and managed identity client ID

    Returns:
        ChainedTokenCredential over the constructible providers

    Raises:
        ConfigurationMissingError: Unknown provider name in the chain
        AuthenticationFailureError: No provider in the chain could be constructed
    """
    unknown = auth_config.unknown_providers()
    if unknown:
        raise ConfigurationMissingError(
            f"Unknown credential provider(s) in AZURE_CREDENTIAL_CHAIN: {list(unknown)}. "
            f"Supported: {sorted(PROVIDER_FACTORIES)}"
        )

    credentials: List[TokenCredential] = []
    used: List[str] = []
    for name in auth_config.credential_chain:
        try:
            credentials.append(PROVIDER_FACTORIES[name](auth_config))
            used.append(name)
        except ValueError as e:
            # WorkloadIdentityCredential validates its env vars in the constructor
            logger.warning(f"Skipping credential provider '{name}': {e}")

    if not credentials:
        raise AuthenticationFailureError(
            f"No credential provider could be constructed from chain {list(auth_config.credential_chain)}"
        )

    logger.info(f"Credential chain: {' -> '.join(used)}")
    return ChainedTokenCredential(*credentials)


def get_azure_credential() -> ChainedTokenCredential:
    """Get cached credential chain built from get_config().auth."""
    global _credential
    if _credential is None:
        _credential = build_credential_chain(get_config().auth)
    return _credential


def reset_credential() -> None:
    """Drop the cached chain (tests, config reload)."""
    global _credential
    _credential = None


def get_access_token(scope: str) -> str:
    """
    Acquire a bearer token for the given scope.

    Args:
        scope: OAuth scope, e.g. "https://storage.azure.com/.default"

    Returns:
        Access token string

    Raises:
        AuthenticationFailureError: Every provider in the chain failed
    """
    credential = get_azure_credential()
    try:
        return credential.get_token(scope).token
    except ClientAuthenticationError as e:
        # CredentialUnavailableError subclasses ClientAuthenticationError
        raise AuthenticationFailureError(f"Token acquisition failed for scope {scope}: {e}") from e


__all__ = [
    "PROVIDER_FACTORIES",
    "build_credential_chain",
    "get_azure_credential",
    "reset_credential",
    "get_access_token",
]
