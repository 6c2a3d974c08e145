"""
Triggers Package.

Azure Functions HTTP trigger implementations.

HTTP Endpoints:
    /api/employees: Department filter over the data lake CSV
    /api/employees/sql: Department aggregate from the SQL warehouse
    /api/files/raw: Raw CSV passthrough

Exports:
    BaseHttpTrigger for type hints and inheritance
"""

# Only import the base class to avoid initialization at import time
# Trigger instances should be imported directly from their modules
from .http_base import BaseHttpTrigger

__all__ = [
    'BaseHttpTrigger',
]
