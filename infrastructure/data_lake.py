# ============================================================================
# DATA LAKE FILE REPOSITORY
# ============================================================================
# STATUS: Infrastructure - OneLake / ADLS Gen2 single-file access
# PURPOSE: Existence check and full read of the employee CSV via the DFS API
# LAST_REVIEWED: 19 OCT 2026
# DEPENDENCIES: azure-storage-file-datalake, azure-core, infrastructure.auth
# ============================================================================

"""
Data Lake File Repository.

Reads one file addressed by its full DFS URL, authenticated with the shared
credential chain:

    https://onelake.dfs.fabric.microsoft.com/<workspace>/<item>/Files/employees.csv

Azure SDK exceptions are translated into the service error hierarchy:

    ResourceNotFoundError / HTTP 404    -> SourceNotFoundError
    ClientAuthenticationError           -> AuthenticationFailureError
    HTTP 403                            -> AccessForbiddenError
    other HttpResponseError             -> SourceUnreachableError
    ServiceRequestError (DNS, TLS, ...) -> SourceUnreachableError

Usage:
    repo = DataLakeFileRepository.from_config()
    if repo.exists():
        data = repo.read_bytes()
"""

from typing import Optional

from azure.core.credentials import TokenCredential
from azure.core.exceptions import (
    AzureError,
    ClientAuthenticationError,
    HttpResponseError,
    ResourceNotFoundError,
    ServiceRequestError,
)
from azure.storage.filedatalake import DataLakeFileClient, DataLakeServiceClient

from config import DataLakeConfig, get_config
from exceptions import (
    AccessForbiddenError,
    AuthenticationFailureError,
    EmployeeApiError,
    SourceNotFoundError,
    SourceUnreachableError,
)
from infrastructure.auth import get_azure_credential
from util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.REPOSITORY, "DataLakeFileRepository")


def translate_azure_error(error: AzureError, action: str) -> EmployeeApiError:
    """
    Map an Azure SDK exception to the service error hierarchy.

    Args:
        error: Exception raised by the storage client
        action: Short description for the internal message ("download", "exists")

    Returns:
        Exception instance to raise (caller chains with `from`)
    """
    status = getattr(error, "status_code", None)

    if isinstance(error, ResourceNotFoundError) or status == 404:
        return SourceNotFoundError(f"Data lake {action} failed: file not found ({error})")
    if isinstance(error, ClientAuthenticationError):
        return AuthenticationFailureError(f"Data lake {action} failed: authentication rejected ({error})")
    if status == 403:
        return AccessForbiddenError(f"Data lake {action} failed: forbidden ({error})")
    if isinstance(error, (HttpResponseError, ServiceRequestError)):
        return SourceUnreachableError(f"Data lake {action} failed: status={status} ({error})")
    return SourceUnreachableError(f"Data lake {action} failed: {type(error).__name__} ({error})")


class DataLakeFileRepository:
    """
    One DFS file, one client, one request.

    The DataLakeServiceClient and its file client are created lazily and
    closed with the repository (use as a context manager).
    """

    def __init__(self, file_url: str, credential: TokenCredential, config: Optional[DataLakeConfig] = None):
        self.file_url = file_url
        self.credential = credential
        self.config = config or DataLakeConfig(file_url=file_url)
        self._service: Optional[DataLakeServiceClient] = None
        self._client: Optional[DataLakeFileClient] = None

    @classmethod
    def from_config(cls, config: Optional[DataLakeConfig] = None) -> "DataLakeFileRepository":
        """
        Build from DataLakeConfig (defaults to get_config().data_lake).

        Raises:
            ConfigurationMissingError: ONELAKE_DFS_FILE_URL missing or invalid
        """
        config = config or get_config().data_lake
        file_url = config.require_file_url()
        return cls(file_url, get_azure_credential(), config)

    @property
    def client(self) -> DataLakeFileClient:
        """
        File client for the configured URL, created on first use.

        The URL is split into account URL, file system and file path and
        resolved through a DataLakeServiceClient.

        Raises:
            ConfigurationMissingError: URL has no file system or file path
        """
        if self._client is None:
            self.config.require_file_url()
            self._service = DataLakeServiceClient(self.config.account_url, credential=self.credential)
            file_system = self._service.get_file_system_client(self.config.file_system)
            self._client = file_system.get_file_client(self.config.file_path)
        return self._client

    def exists(self) -> bool:
        """
        Check whether the file exists.

        Raises:
            AccessForbiddenError, AuthenticationFailureError, SourceUnreachableError
        """
        try:
            found = self.client.exists()
        except AzureError as e:
            raise translate_azure_error(e, "exists") from e
        logger.debug(f"exists({self.config.file_name}) -> {found}")
        return bool(found)

    def read_bytes(self) -> bytes:
        """
        Download the whole file.

        Raises:
            SourceNotFoundError, AccessForbiddenError,
            AuthenticationFailureError, SourceUnreachableError
        """
        try:
            data = self.client.download_file().readall()
        except AzureError as e:
            raise translate_azure_error(e, "download") from e
        logger.info(f"Downloaded {self.config.file_name} from {self.config.account_host} ({len(data)} bytes)")
        return data

    def close(self) -> None:
        if self._service is not None:
            self._service.close()
        self._service = None
        self._client = None

    def __enter__(self) -> "DataLakeFileRepository":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
