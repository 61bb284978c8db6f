"""
Centralized Exception Hierarchy for IndexConsole.

All exceptions raised by the console inherit from IndexConsoleError so the
presentation layer can render any of them with the same error panel.

Helpful Error Messages
----------------------
Each exception includes:
- error_code: Unique identifier for documentation lookup (e.g., "IC-API-001")
- why_it_happened: Explanation of the root cause
- how_to_fix: Actionable steps to resolve the issue

Exception Hierarchy
-------------------
    IndexConsoleError (base)
    ├── ValidationError            local, raised before any network call
    │   └── ConfigValidationError
    ├── ApiError                   non-2xx response from the indexing service
    │   └── NotFoundError          404, e.g. selecting a missing index
    ├── NetworkError               transport failure, no response received
    └── MalformedResponseError     2xx response whose payload is unusable

Usage
-----
    from indexconsole.core.exceptions import ApiError, NotFoundError

    try:
        await client.get_index(name)
    except NotFoundError:
        ...
    except ApiError as e:
        logger.warning("Service refused", status=e.status_code)
"""

from __future__ import annotations

import builtins
import re
from typing import Any, List, Optional


def sanitize_message(message: str) -> str:
    """Sanitize an error message to avoid leaking sensitive info.

    Masks bearer tokens, API keys and credentials embedded in URLs.

    Args:
        message: Original error message

    Returns:
        Sanitized message with sensitive info replaced
    """
    if not message:
        return message

    patterns = [
        (r"(sk-|pk-|api_key[=:][\s]*)[a-zA-Z0-9_-]{20,}", r"\1<api-key>"),
        (r"Bearer\s+[a-zA-Z0-9_.-]+", r"Bearer <token>"),
        (r"://[^:/\s]+:[^@/\s]+@", r"://<user>:<pass>@"),
    ]

    result = message
    for pattern, replacement in patterns:
        result = re.sub(pattern, replacement, result)
    return result


class IndexConsoleError(Exception):
    """
    Base exception for all IndexConsole errors.

    Includes helpful error information:
    - error_code: Unique code for documentation lookup
    - why_it_happened: Explanation of the root cause
    - how_to_fix: List of actionable suggestions
    """

    error_code: str = "IC-ERR-000"
    why_it_happened: str = "An unexpected error occurred"
    how_to_fix: List[str] = ["Check the error message for details"]

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[str] = None,
        why_it_happened: Optional[str] = None,
        how_to_fix: Optional[List[str]] = None,
    ) -> None:
        super().__init__(sanitize_message(message))

        if error_code is not None:
            self.error_code = error_code
        if why_it_happened is not None:
            self.why_it_happened = why_it_happened
        if how_to_fix is not None:
            self.how_to_fix = how_to_fix


# ============================================================================
# Validation Exceptions
# ============================================================================


class ValidationError(IndexConsoleError):
    """
    Raised when a required field is missing or empty.

    Always raised before the API client is touched, so a ValidationError
    guarantees that no request was sent.

    Attributes
    ----------
    field : str
        The form field that failed validation
    """

    error_code = "IC-VAL-000"
    why_it_happened = "A required field is missing or empty"
    how_to_fix = [
        "Fill in every field marked as required",
        "Check that the value is not only whitespace",
    ]

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        *,
        error_code: Optional[str] = None,
        why_it_happened: Optional[str] = None,
        how_to_fix: Optional[List[str]] = None,
    ) -> None:
        super().__init__(
            message,
            error_code=error_code,
            why_it_happened=why_it_happened,
            how_to_fix=how_to_fix,
        )
        self.field = field


class ConfigValidationError(ValidationError):
    """
    Raised when configuration validation fails.

    Attributes
    ----------
    field : str
        The configuration field that failed validation
    value : any
        The invalid value
    """

    error_code = "IC-VAL-001"
    why_it_happened = (
        "A configuration value is invalid. "
        "The indexconsole.yaml file or an INDEXCONSOLE_* variable may be wrong"
    )
    how_to_fix = [
        "Check indexconsole.yaml for syntax errors",
        "Verify the value type matches what's expected",
        "Unset INDEXCONSOLE_* environment variables to fall back to defaults",
    ]

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
    ) -> None:
        super().__init__(message, field)
        self.value = value


# ============================================================================
# Service Exceptions
# ============================================================================


class ApiError(IndexConsoleError):
    """
    Raised when the indexing service answers with a non-2xx status.

    The raw response body is read completely before this is raised and is
    kept verbatim in ``body``; for non-JSON responses it is the only error
    detail the service provides.

    Attributes
    ----------
    status_code : int
        HTTP status of the response
    status_text : str
        HTTP reason phrase (e.g. "Conflict")
    body : str
        Raw response body text
    """

    error_code = "IC-API-001"
    why_it_happened = "The indexing service rejected the request"
    how_to_fix = [
        "Read the service message shown above",
        "Refresh the index list; it may be out of date",
    ]

    def __init__(
        self,
        status_code: int,
        status_text: str = "",
        body: str = "",
        *,
        method: Optional[str] = None,
        path: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.status_text = status_text
        self.body = body
        self.method = method
        self.path = path
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        head = f"{self.status_code} {self.status_text}".strip()
        if self.body:
            return f"{head} - {self.body}"
        return head


class NotFoundError(ApiError):
    """
    Raised when the service reports that an index does not exist (404).

    Kept distinct from ApiError so the detail pane can keep showing the
    previous selection instead of blanking.
    """

    error_code = "IC-API-404"
    why_it_happened = (
        "The index does not exist on the service. "
        "It may have been deleted or renamed since the list was loaded"
    )
    how_to_fix = [
        "Refresh the index list",
        "Check the spelling of the index name (names are case-sensitive)",
    ]


class NetworkError(IndexConsoleError):
    """
    Raised when no HTTP response was received at all.

    Covers connection refusals, DNS failures and timeouts. No response
    body is available.
    """

    error_code = "IC-NET-001"
    why_it_happened = (
        "Could not reach the indexing service. "
        "It may be down or the base URL may be wrong"
    )
    how_to_fix = [
        "Check that the service is running",
        "Verify the base URL (--base-url or INDEXCONSOLE_BASE_URL)",
        "Check if a firewall or proxy is blocking the connection",
    ]


class MalformedResponseError(IndexConsoleError):
    """
    Raised when a successful response carries a payload that cannot be used.

    For example a list endpoint returning an object, or an index record
    whose ``document_count`` is negative.
    """

    error_code = "IC-API-002"
    why_it_happened = (
        "The service answered successfully but the payload did not match "
        "the expected index format"
    )
    how_to_fix = [
        "Check that the base URL points to the document-indexing service",
        "Run with --verbose to see the payload validation errors",
    ]


# ============================================================================
# Error Info Lookup
# ============================================================================


# Mapping from standard exceptions to helpful error info
STANDARD_ERROR_INFO: dict[type, dict[str, Any]] = {
    builtins.FileNotFoundError: {
        "error_code": "IC-FILE-001",
        "why_it_happened": "The specified file could not be found",
        "how_to_fix": [
            "Check that the file path is correct",
            "Ensure you have read permissions for the file",
        ],
    },
    builtins.PermissionError: {
        "error_code": "IC-FILE-002",
        "why_it_happened": "You don't have permission to read this file",
        "how_to_fix": ["Check file permissions: ls -la <file>"],
    },
    ValueError: {
        "error_code": "IC-VAL-002",
        "why_it_happened": "An invalid value was provided",
        "how_to_fix": [
            "Check the error message for the expected value format",
        ],
    },
    OSError: {
        "error_code": "IC-SYS-001",
        "why_it_happened": "A system-level error occurred",
        "how_to_fix": ["Check disk space and permissions"],
    },
}


def get_error_info(exc: BaseException) -> dict[str, Any]:
    """Get helpful error information for any exception.

    Args:
        exc: Exception to get info for

    Returns:
        Dict with error_code, why_it_happened, how_to_fix
    """
    if isinstance(exc, IndexConsoleError):
        return {
            "error_code": exc.error_code,
            "why_it_happened": exc.why_it_happened,
            "how_to_fix": exc.how_to_fix,
        }

    exc_type = type(exc)
    if exc_type in STANDARD_ERROR_INFO:
        return STANDARD_ERROR_INFO[exc_type]

    for parent_type, info in STANDARD_ERROR_INFO.items():
        if isinstance(exc, parent_type):
            return info

    return {
        "error_code": "IC-ERR-999",
        "why_it_happened": "An unexpected error occurred",
        "how_to_fix": [
            "Check the error message for details",
            "Run with --verbose to see the full traceback",
        ],
    }
