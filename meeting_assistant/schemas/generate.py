"""Generate Schemas — Pydantic models for the generate endpoint's request and responses.

Invariants:
    - GenerateRequest.content: strict JSON string, trimmed with TRIM_CHARACTERS,
      non-empty, lone surrogates replaced so the text always encodes as UTF-8
    - GenerateRequest.type: exactly "summary" or "tasks" (case-sensitive)
    - Unknown body fields are ignored, never rejected

Design Decisions:
    - Literal type for `type` over str enum: Pydantic handles validation natively
    - strict=True on content: numbers/bools are rejected, not coerced to str
    - field_validators for side-effect-free transforms (surrogates before the
      strict str check, trimming after it) — keeps models pure
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from meeting_assistant.core.domain_types import GenerateType
from meeting_assistant.core.normalize_text import replace_lone_surrogates, trim_transcript


class GenerateRequest(BaseModel):
    """Transcript plus the kind of output wanted."""
    content: str = Field(strict=True)
    type: Literal["summary", "tasks"]

    @field_validator("content", mode="before")
    @classmethod
    def clean_surrogates(cls, v):
        if isinstance(v, str):
            return replace_lone_surrogates(v)
        return v

    @field_validator("content")
    @classmethod
    def strip_content(cls, v: str) -> str:
        v = trim_transcript(v)
        if not v:
            raise ValueError("content cannot be empty or whitespace")
        return v

    @property
    def generate_type(self) -> GenerateType:
        return GenerateType(self.type)


class GenerateResponse(BaseModel):
    """Successful generation."""
    text: str
    timestamp: str
    type: GenerateType


class ErrorResponse(BaseModel):
    """Any non-200 body. Optional fields depend on the error kind."""
    error: str
    message: str | None = None
    allowed: str | None = None
    timestamp: str | None = None
