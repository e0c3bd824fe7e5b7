"""View models for rendering a CorrectionResult as HTML.

The templates only loop over what is built here; no linguistic judgement
happens in this layer.
"""

from dataclasses import dataclass, field

from app.models.correction import ERROR_TYPES, PARAGRAPH_MARKER, CorrectionError, CorrectionResult

ERROR_CATEGORY_LABELS: dict[str, str] = {
    "spelling": "Spelling",
    "grammar": "Grammar",
    "punctuation": "Punctuation",
    "paragraph": "Paragraphs",
}

EMPTY_INPUT_MESSAGE = "Please enter some text before submitting."
GENERIC_ERROR_MESSAGE = "An error occurred. Please try again."


@dataclass
class TextSegment:
    kind: str  # "text" | "break"
    value: str = ""


@dataclass
class ErrorCard:
    original: str
    correction: list[TextSegment]
    explanation: str


@dataclass
class ErrorGroup:
    category: str
    label: str
    cards: list[ErrorCard] = field(default_factory=list)


@dataclass
class ResultView:
    heading: str
    has_errors: bool
    segments: list[TextSegment]
    feedback: str
    groups: list[ErrorGroup]

    @property
    def error_count(self) -> int:
        return sum(len(g.cards) for g in self.groups)


def split_paragraph_markers(text: str) -> list[TextSegment]:
    """Split *text* on the paragraph marker.

    Whitespace directly around a marker belongs to the break, so
    ``"one. ¶ Two"`` renders as two clean paragraphs.
    """
    segments: list[TextSegment] = []
    pieces = text.split(PARAGRAPH_MARKER)
    for i, piece in enumerate(pieces):
        if i > 0:
            piece = piece.lstrip(" \t\r\n")
            segments.append(TextSegment(kind="break"))
        if i < len(pieces) - 1:
            piece = piece.rstrip(" \t\r\n")
        if piece:
            segments.append(TextSegment(kind="text", value=piece))
    return segments


def group_errors(errors: list[CorrectionError]) -> list[ErrorGroup]:
    """Group errors by category in a fixed order, keeping provider order inside a group."""
    groups = {
        category: ErrorGroup(category=category, label=ERROR_CATEGORY_LABELS[category])
        for category in ERROR_TYPES
    }
    for err in errors:
        groups[err.error_type].cards.append(
            ErrorCard(
                original=err.original,
                correction=split_paragraph_markers(err.correction),
                explanation=err.explanation,
            )
        )
    return [g for g in groups.values() if g.cards]


def build_result_view(result: CorrectionResult) -> ResultView:
    heading = "Corrected Text:" if result.has_errors else "Your Text (No Corrections Needed):"
    return ResultView(
        heading=heading,
        has_errors=result.has_errors,
        segments=split_paragraph_markers(result.corrected_text),
        feedback=result.feedback,
        groups=group_errors(result.errors) if result.has_errors else [],
    )
