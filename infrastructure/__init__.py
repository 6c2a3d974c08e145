"""
Infrastructure Package - Lazy Loading Implementation.

Repositories for the two employee data sources, imported only when first
accessed.

Why Lazy Loading:
    function_app.py is imported on every cold start, before the Functions
    host guarantees app settings and managed identity endpoints. Importing
    a repository module pulls in azure.storage and creates loggers;
    deferring that until the first request keeps cold start cheap and keeps
    configuration reads out of module import.

Exports:
    DataLakeFileRepository: One DFS file (exists / read_bytes)
    SqlWarehouseRepository: Aggregate query over the employees table
    translate_azure_error: Azure SDK exception -> service exception
"""

from typing import TYPE_CHECKING

# For type checking only - doesn't actually import at runtime
if TYPE_CHECKING:
    from .data_lake import DataLakeFileRepository as _DataLakeFileRepository
    from .data_lake import translate_azure_error as _translate_azure_error
    from .sql_warehouse import SqlWarehouseRepository as _SqlWarehouseRepository


def __getattr__(name: str):
    """
    Lazy import mechanism - only imports when actually accessed.
    """
    if name == "DataLakeFileRepository":
        from .data_lake import DataLakeFileRepository
        return DataLakeFileRepository
    elif name == "translate_azure_error":
        from .data_lake import translate_azure_error
        return translate_azure_error
    elif name == "SqlWarehouseRepository":
        from .sql_warehouse import SqlWarehouseRepository
        return SqlWarehouseRepository

    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = [
    "DataLakeFileRepository",
    "SqlWarehouseRepository",
    "translate_azure_error",
]
