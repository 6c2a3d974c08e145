# ============================================================================
# DATA LAKE STORAGE CONFIGURATION
# ============================================================================
# STATUS: Configuration - OneLake / ADLS Gen2 file location
# PURPOSE: Single CSV file URL used by the filtered and passthrough endpoints
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================

"""
Data Lake Storage Configuration.

The employee CSV lives at one DFS file URL, e.g.

    https://onelake.dfs.fabric.microsoft.com/<workspace>/<lakehouse>.Lakehouse/Files/employees.csv

Both GET /api/employees and GET /api/files/raw read from it.

Exports:
    DataLakeConfig: File URL plus parsed components
"""

import os
from typing import List, Optional
from urllib.parse import unquote, urlparse
from pydantic import BaseModel, Field

from exceptions import ConfigurationMissingError
from .defaults import DataLakeDefaults


class DataLakeConfig(BaseModel):
    """
    Data lake file configuration.

    file_url is Optional so the app starts without it; use require_file_url()
    at request time.
    """

    file_url: Optional[str] = Field(
        default=None,
        description="Full DFS URL of the employee CSV (ONELAKE_DFS_FILE_URL)",
        examples=["https://onelake.dfs.fabric.microsoft.com/ws/lh.Lakehouse/Files/employees.csv"]
    )

    content_type: str = Field(
        default=DataLakeDefaults.CSV_CONTENT_TYPE,
        description="Content-Type returned by GET /api/files/raw"
    )

    encoding: str = Field(
        default=DataLakeDefaults.CSV_ENCODING,
        description="Text encoding used when parsing the CSV (utf-8-sig strips a BOM)"
    )

    @property
    def is_configured(self) -> bool:
        return bool(self.file_url)

    @property
    def account_host(self) -> Optional[str]:
        """Hostname part of the file URL (for logging, never returned to clients)."""
        if not self.file_url:
            return None
        return urlparse(self.file_url).netloc or None

    @property
    def file_name(self) -> Optional[str]:
        """Last path segment of the file URL."""
        if not self.file_url:
            return None
        path = urlparse(self.file_url).path.rstrip("/")
        return path.rsplit("/", 1)[-1] or None

    @property
    def account_url(self) -> Optional[str]:
        """https://<host> part of the file URL (DataLakeServiceClient endpoint)."""
        host = self.account_host
        return f"https://{host}" if host else None

    @property
    def file_system(self) -> Optional[str]:
        """First path segment: the file system (OneLake workspace / ADLS container)."""
        segments = self._path_segments()
        return segments[0] if len(segments) >= 2 else None

    @property
    def file_path(self) -> Optional[str]:
        """Path of the file inside the file system, URL-decoded."""
        segments = self._path_segments()
        return "/".join(segments[1:]) if len(segments) >= 2 else None

    def _path_segments(self) -> List[str]:
        if not self.file_url:
            return []
        path = unquote(urlparse(self.file_url).path)
        return [segment for segment in path.split("/") if segment]

    def require_file_url(self) -> str:
        """
        Return the file URL or fail.

        The URL must name a file system and a file inside it:
        https://<host>/<file system>/<path to file>

        Raises:
            ConfigurationMissingError: If ONELAKE_DFS_FILE_URL is missing, not an
                https URL, or has no file path after the file system
        """
        if not self.file_url:
            raise ConfigurationMissingError("ONELAKE_DFS_FILE_URL environment variable is not set")

        parsed = urlparse(self.file_url)
        if parsed.scheme != "https" or not parsed.netloc:
            raise ConfigurationMissingError(
                "ONELAKE_DFS_FILE_URL must be an https URL pointing at a file"
            )
        if self.file_system is None or parsed.path.endswith("/"):
            raise ConfigurationMissingError(
                "ONELAKE_DFS_FILE_URL must include a file system and a file path "
                "(https://<host>/<file system>/<path to file>)"
            )
        return self.file_url

    def debug_dict(self) -> dict:
        return {
            "account_host": self.account_host,
            "file_system": self.file_system,
            "file_name": self.file_name,
            "configured": self.is_configured,
        }

    @classmethod
    def from_environment(cls) -> "DataLakeConfig":
        """Load from environment variables. Blank values count as unset."""
        return cls(
            file_url=os.environ.get("ONELAKE_DFS_FILE_URL", "").strip() or None,
        )
