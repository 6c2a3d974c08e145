"""
HTTP Trigger Base Class.

Abstract base class for the employee HTTP triggers providing consistent
request/response handling.

Error mapping (handle_request):
    ValueError              -> 400, message shown to the client
    EmployeeApiError        -> exception's status_code + public_message
    Exception               -> 500, generic message

Internal details (str(e), tracebacks) are logged, never returned. Every
response carries an X-Request-ID header; error bodies also include it.

Exports:
    BaseHttpTrigger: Base class for HTTP triggers
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, Union, List
import logging
import uuid
import json

import azure.functions as func
from exceptions import EmployeeApiError
from util_logger import LoggerFactory
from util_logger import ComponentType, LogContext

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred while processing the request."


class BaseHttpTrigger(ABC):
    """
    Abstract base class for Azure Functions HTTP triggers.

    Subclasses implement process_request() and get_allowed_methods() and
    raise exceptions for error conditions; the base class maps them to
    status codes.
    """

    def __init__(self, trigger_name: str):
        """
        Initialize HTTP trigger with name for logging context.

        Args:
            trigger_name: Name of the trigger for logging (e.g., "employees", "file_passthrough")
        """
        self.trigger_name = trigger_name
        self.logger = LoggerFactory.create_logger(ComponentType.TRIGGER, f"HttpTrigger.{trigger_name}")

    # ========================================================================
    # ABSTRACT METHODS - Must be implemented by concrete triggers
    # ========================================================================

    @abstractmethod
    def process_request(self, req: func.HttpRequest) -> Union[Dict[str, Any], func.HttpResponse]:
        """
        Process the HTTP request and return response data.

        Args:
            req: Azure Functions HTTP request object

        Returns:
            Dictionary serialized as a 200 JSON response, or a ready
            HttpResponse (e.g. raw file content)

        Raises:
            ValueError: For client errors (400)
            EmployeeApiError: For mapped upstream/config failures
            Exception: For internal server errors (500)
        """
        pass

    @abstractmethod
    def get_allowed_methods(self) -> List[str]:
        """
        Return list of allowed HTTP methods for this trigger.

        Returns:
            List of HTTP methods (e.g., ["GET"])
        """
        pass

    # ========================================================================
    # CONCRETE INFRASTRUCTURE METHODS
    # ========================================================================

    def handle_request(self, req: func.HttpRequest) -> func.HttpResponse:
        """
        Main entry point for HTTP request handling.

        Args:
            req: Azure Functions HTTP request object

        Returns:
            Azure Functions HTTP response
        """
        request_id = self._generate_request_id()
        context = LogContext(request_id=request_id, endpoint=self.trigger_name)
        dimensions = {"custom_dimensions": context.to_dict()}

        self.logger.info(
            f"[{self.trigger_name}] Request {request_id} started: {req.method} {req.url}",
            extra=dimensions
        )

        try:
            if req.method not in self.get_allowed_methods():
                return self._create_error_response(
                    message=f"Method {req.method} not allowed. Allowed: {', '.join(self.get_allowed_methods())}",
                    status_code=405,
                    request_id=request_id
                )

            result = self.process_request(req)

            if isinstance(result, func.HttpResponse):
                result.headers["X-Request-ID"] = request_id
                response = result
            else:
                response = self._create_success_response(result, request_id)

            self.logger.info(
                f"[{self.trigger_name}] Request {request_id} completed: {response.status_code}",
                extra=dimensions
            )
            return response

        except ValueError as e:
            self.logger.warning(f"[{self.trigger_name}] Client error: {e}", extra=dimensions)
            return self._create_error_response(
                message=str(e),
                status_code=400,
                request_id=request_id
            )

        except EmployeeApiError as e:
            # 5xx are logged as errors with traceback, 4xx as warnings
            self.logger.log(
                logging.ERROR if e.status_code >= 500 else logging.WARNING,
                f"[{self.trigger_name}] {type(e).__name__} ({e.status_code}): {e}",
                exc_info=e.status_code >= 500,
                extra=dimensions
            )
            return self._create_error_response(
                message=e.public_message,
                status_code=e.status_code,
                request_id=request_id
            )

        except Exception as e:
            self.logger.error(
                f"[{self.trigger_name}] Internal error: {type(e).__name__}: {e}",
                exc_info=True,
                extra=dimensions
            )
            return self._create_error_response(
                message=INTERNAL_ERROR_MESSAGE,
                status_code=500,
                request_id=request_id
            )

    # ========================================================================
    # UTILITY METHODS FOR SUBCLASSES
    # ========================================================================

    def get_query_param(self, req: func.HttpRequest, name: str, required: bool = False,
                        error_message: Optional[str] = None) -> Optional[str]:
        """
        Read one query parameter, treating blank values as missing.

        Args:
            req: HTTP request object
            name: Parameter name
            required: Raise ValueError when missing/blank
            error_message: Client-facing message for the ValueError

        Returns:
            The raw parameter value (untrimmed) or None

        Raises:
            ValueError: If required and missing or whitespace-only
        """
        value = req.params.get(name)
        if value is None or not value.strip():
            if required:
                raise ValueError(error_message or f"Missing required query parameter: {name}")
            return None
        return value

    # ========================================================================
    # PRIVATE INFRASTRUCTURE METHODS
    # ========================================================================

    def _generate_request_id(self) -> str:
        """Generate unique request ID for tracing."""
        return str(uuid.uuid4())[:8]

    def _create_success_response(self, data: Dict[str, Any], request_id: str) -> func.HttpResponse:
        """JSON 200 response with the payload exactly as given."""
        return func.HttpResponse(
            json.dumps(data, default=str),
            status_code=200,
            mimetype="application/json",
            headers={"X-Request-ID": request_id}
        )

    def _create_error_response(self, message: str, status_code: int, request_id: str) -> func.HttpResponse:
        """Create standardized error response."""
        response_data = {
            "error": message,
            "request_id": request_id,
        }

        return func.HttpResponse(
            json.dumps(response_data),
            status_code=status_code,
            mimetype="application/json",
            headers={"X-Request-ID": request_id}
        )
