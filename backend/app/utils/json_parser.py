"""Shared utility for decoding correction payloads from LLM responses."""

import json
import logging

from pydantic import ValidationError as PydanticValidationError

from app.core.errors import ResponseFormatError
from app.models.correction import CorrectionResult

logger = logging.getLogger(__name__)


def decode_correction_payload(raw: str | dict | None, source: str) -> CorrectionResult:
    """Decode a provider payload into a :class:`CorrectionResult`.

    Args:
        raw: JSON text (tool-call arguments or a text block) or an
            already-decoded object.
        source: Provider name, used in error messages and logs.

    Raises:
        ResponseFormatError: when *raw* is missing, is not valid JSON, or does
            not match the correction schema.
    """
    if raw is None:
        raise ResponseFormatError(source, "empty payload")

    if isinstance(raw, str):
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning("%s returned invalid JSON (%d chars): %s", source, len(raw), exc)
            raise ResponseFormatError(source, f"Failed to parse response: {exc}") from exc
    else:
        data = raw

    if not isinstance(data, dict):
        raise ResponseFormatError(source, f"expected a JSON object, got {type(data).__name__}")

    try:
        return CorrectionResult.model_validate(data)
    except PydanticValidationError as exc:
        logger.warning("%s payload failed schema validation: %d error(s)", source, exc.error_count())
        raise ResponseFormatError(source, f"payload does not match schema: {exc}") from exc
