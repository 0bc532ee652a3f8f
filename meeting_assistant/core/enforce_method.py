"""Method Enforcement — decides what happens to a request before its body is read.

Invariants:
    - All functions are PURE: no IO, no async, no side effects
    - OPTIONS is a preflight and bypasses every other check
    - Return error on violation, None on success

Design Decisions:
    - Return errors (not raise): the handler threads them as result values,
      keeping the error path identical to the success path
"""

from meeting_assistant.core.domain_types import ALLOWED_METHOD, PREFLIGHT_METHOD
from meeting_assistant.core.errors import MethodNotAllowedError


def is_preflight(method: str) -> bool:
    return method.upper() == PREFLIGHT_METHOD


def check_method(method: str) -> MethodNotAllowedError | None:
    """Only POST reaches payload validation."""
    if method.upper() != ALLOWED_METHOD:
        return MethodNotAllowedError(method.upper(), allowed=ALLOWED_METHOD)
    return None
