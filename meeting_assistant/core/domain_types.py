"""Domain Types — enums and constants that replace bare strings across the codebase.

Invariants:
    - GenerateType has exactly two members; matching is case-sensitive
    - ALLOWED_METHOD is the only method that reaches payload validation

Design Decisions:
    - str Enum: serializes to JSON without custom encoders
"""

from enum import Enum


class GenerateType(str, Enum):
    """What the caller wants generated from the transcript."""
    SUMMARY = "summary"
    TASKS = "tasks"


ALLOWED_METHOD = "POST"
PREFLIGHT_METHOD = "OPTIONS"

# Characters (code points) of trimmed content quoted in a summary
EXCERPT_LENGTH = 30
