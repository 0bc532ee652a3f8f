"""Error Hierarchy — typed, categorized failures for the generate endpoint.

Invariants:
    - Every error has a code (str), category (ErrorCategory), http_status (int)
    - to_response() always produces a JSON body with a top-level "error" key
    - Validation and method errors are 400/405; anything unexpected is 500

Design Decisions:
    - Errors double as result values: the handler returns them instead of raising,
      the route converts them to a response at one boundary point
    - Subclasses fix the user-facing message so response bodies stay byte-stable
"""

from enum import Enum

from meeting_assistant.core.timestamps import utc_now_iso


class ErrorCategory(str, Enum):
    """High-level error categories for logging and client handling."""
    METHOD = "method"
    VALIDATION = "validation"
    INTERNAL = "internal"


class AssistantError(Exception):
    """Base exception for all meeting assistant errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message}


# ─── Request Errors (400-level) ─────────────────────────────────

class MethodNotAllowedError(AssistantError):
    """HTTP method other than POST (OPTIONS is handled before this)."""
    def __init__(self, method: str, allowed: str = "POST"):
        super().__init__(
            "Method not allowed", "METHOD_NOT_ALLOWED",
            ErrorCategory.METHOD, 405,
        )
        self.method = method
        self.allowed = allowed

    def to_response(self) -> dict:
        return {"error": self.message, "allowed": self.allowed}


class MissingContentError(AssistantError):
    """Body has no usable "content" string."""
    def __init__(self):
        super().__init__(
            'Missing or empty "content" in request body',
            "MISSING_CONTENT", ErrorCategory.VALIDATION, 400,
        )


class InvalidTypeError(AssistantError):
    """Body "type" is absent or not one of the supported values."""
    def __init__(self):
        super().__init__(
            'Missing or invalid "type". Use "summary" or "tasks"',
            "INVALID_TYPE", ErrorCategory.VALIDATION, 400,
        )


# ─── Unexpected Errors (500-level) ──────────────────────────────

class InternalError(AssistantError):
    """Catch-all for failures that escaped the handler's own checks."""
    def __init__(self, detail: str | None = None, timestamp: str | None = None):
        super().__init__(
            "Internal Server Error", "INTERNAL_ERROR",
            ErrorCategory.INTERNAL, 500,
        )
        self.detail = detail or "Unknown error"
        self.timestamp = timestamp or utc_now_iso()

    @classmethod
    def from_exception(cls, exc: BaseException) -> "InternalError":
        """Wrap an arbitrary exception, keeping only its message."""
        return cls(str(exc))

    def to_response(self) -> dict:
        return {
            "error": self.message,
            "message": self.detail,
            "timestamp": self.timestamp,
        }
