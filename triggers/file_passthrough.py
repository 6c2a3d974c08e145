# ============================================================================
# RAW FILE PASSTHROUGH HTTP TRIGGER
# ============================================================================
# STATUS: HTTP Trigger - GET /api/files/raw
# PURPOSE: Return the employee CSV bytes unchanged
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================
"""
Raw File Passthrough HTTP Trigger.

Checks that the configured data lake file exists, then returns its bytes
with Content-Type text/csv; charset=utf-8.

Errors:
    file does not exist     -> 404
    identity lacks access   -> 403
    unreachable             -> 404
    credential failure      -> 500

Exports:
    FilePassthroughTrigger: Trigger class
    file_passthrough_trigger: Singleton trigger instance
"""

from typing import List

import azure.functions as func

from config import get_config
from exceptions import SourceNotFoundError
from infrastructure import DataLakeFileRepository
from .http_base import BaseHttpTrigger


class FilePassthroughTrigger(BaseHttpTrigger):
    """Existence check, then full read."""

    def __init__(self):
        super().__init__("files_raw")

    def get_allowed_methods(self) -> List[str]:
        return ["GET"]

    def process_request(self, req: func.HttpRequest) -> func.HttpResponse:
        data_lake_config = get_config().data_lake

        with DataLakeFileRepository.from_config(data_lake_config) as repo:
            if not repo.exists():
                raise SourceNotFoundError(f"File {data_lake_config.file_name} does not exist")
            content = repo.read_bytes()

        return func.HttpResponse(
            body=content,
            status_code=200,
            mimetype="text/csv",
            charset="utf-8",
            headers={"Content-Type": data_lake_config.content_type}
        )


# Singleton instance
file_passthrough_trigger = FilePassthroughTrigger()
