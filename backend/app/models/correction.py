"""Correction request/response models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

# In-band token meaning "start a new paragraph here"
PARAGRAPH_MARKER = "¶"

ErrorType = Literal["spelling", "grammar", "punctuation", "paragraph"]

ERROR_TYPES: tuple[str, ...] = ("spelling", "grammar", "punctuation", "paragraph")


class CorrectionError(BaseModel):
    """One flagged issue in the student's text."""

    original: str
    correction: str
    error_type: ErrorType = Field(alias="type")
    explanation: str

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("error_type", mode="before")
    @classmethod
    def _normalize_type(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class CorrectionResult(BaseModel):
    """Normalized answer returned to the presentation layer."""

    has_errors: bool
    corrected_text: str
    errors: list[CorrectionError] = []
    feedback: str = ""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CorrectionRequest(BaseModel):
    """Request for a writing check."""

    text: str = ""

    @model_validator(mode="before")
    @classmethod
    def remap_legacy_fields(cls, data: object) -> object:
        """Accept the older ``prompt`` key used by the first web client."""
        if isinstance(data, dict) and "prompt" in data and "text" not in data:
            data = dict(data)
            data["text"] = data.pop("prompt")
        return data

    @field_validator("text", mode="before")
    @classmethod
    def _none_is_empty(cls, value: object) -> object:
        return "" if value is None else value
