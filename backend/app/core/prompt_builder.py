"""Instruction and schema construction for provider calls."""

import re

from app.models.correction import ERROR_TYPES, PARAGRAPH_MARKER

# C0 controls except tab, line feed and carriage return, plus DEL and C1 controls.
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F-\x9F]")

CORRECTION_TOOL_NAME = "provideCorrections"


def sanitize_text(text: str) -> str:
    """Strip control characters that would corrupt the structured-response channel.

    Line breaks and tabs are kept: the paragraph policy depends on seeing them.
    """
    return _CONTROL_CHARS.sub("", text)


def build_system_prompt(include_json_format: bool = False) -> str:
    """Build the tutor instruction shared by every provider.

    Providers without a schema mechanism get the exact JSON shape appended
    (*include_json_format*).
    """
    parts = [
        "You are a helpful American English 5th grade teacher that checks spelling, "
        "grammar, punctuation, and paragraph structure for 5th-grade students.",
        "",
        "Focus on these significant errors:",
        "- Obvious spelling mistakes",
        "- Major grammatical errors",
        "- Clear punctuation mistakes",
        "- Paragraph structure (VERY IMPORTANT)",
        "",
        "For paragraphs specifically:",
        "- A paragraph break that already exists in ANY form (a single line break, "
        "a blank line, or several consecutive line breaks) is NEVER an error. "
        "Do not report it, do not move it, and do not ask for another one.",
        "- Only flag a missing paragraph break when two clearly different ideas run "
        "together with NO whitespace at all between them "
        "(for example a new topic, a new speaker, or a new time or place).",
        f'- For a missing paragraph break, use the type "paragraph", and put the '
        f'marker "{PARAGRAPH_MARKER}" in the correction exactly where the new '
        "paragraph should start.",
        f'- Use the same "{PARAGRAPH_MARKER}" marker in the corrected text for every '
        "paragraph break you add. Keep existing line breaks as they are.",
        "- Explain the specific reason for each paragraph break you add.",
        "",
        "DO NOT point out:",
        "- Whitespace or formatting choices such as extra spaces or newlines",
        "- Stylistic punctuation choices (e.g., using exclamation marks vs periods)",
        "",
        "Keep feedback encouraging and focused on helping the student improve their writing.",
        "Always provide a corrected version of the text, even if there are no errors. "
        "If there are no errors, the corrected text must be identical to the original text.",
    ]

    if include_json_format:
        parts.extend([
            "",
            "Analyze the text and respond with a JSON object in this exact format:",
            "{",
            '    "hasErrors": boolean,',
            '    "correctedText": "full text with corrections",',
            '    "errors": [',
            "        {",
            '            "original": "text with error",',
            '            "correction": "corrected text",',
            f'            "type": "{"|".join(ERROR_TYPES)}",',
            '            "explanation": "encouraging explanation"',
            "        }",
            "    ],",
            '    "feedback": "encouraging overall feedback"',
            "}",
            "",
            "Focus on significant errors only. Respond with the JSON object only, "
            "with no text before or after it. Ensure the response is valid JSON.",
        ])

    return "\n".join(parts)


def build_user_message(text: str) -> str:
    """Wrap the (already sanitized) student text in the user turn."""
    return f'Please check the following text: "{text}"'


CORRECTION_TOOL: dict = {
    "type": "function",
    "function": {
        "name": CORRECTION_TOOL_NAME,
        "description": "Provide corrections and explanations for significant errors in the text",
        "parameters": {
            "type": "object",
            "properties": {
                "hasErrors": {
                    "type": "boolean",
                    "description": "Indicates whether the text contains any significant errors",
                },
                "correctedText": {
                    "type": "string",
                    "description": (
                        "The full text with all corrections applied. "
                        "If no errors, this should be identical to the original text."
                    ),
                },
                "errors": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "original": {
                                "type": "string",
                                "description": "The specific text segment containing the error",
                            },
                            "correction": {
                                "type": "string",
                                "description": (
                                    "The corrected version. Use "
                                    f'"{PARAGRAPH_MARKER}" where a new paragraph should start.'
                                ),
                            },
                            "type": {
                                "type": "string",
                                "enum": list(ERROR_TYPES),
                                "description": "The type of error being corrected",
                            },
                            "explanation": {
                                "type": "string",
                                "description": "A brief, encouraging explanation of why this needs correction",
                            },
                        },
                        "required": ["original", "correction", "type", "explanation"],
                    },
                },
                "feedback": {
                    "type": "string",
                    "description": "Brief, encouraging feedback about the writing",
                },
            },
            "required": ["hasErrors", "correctedText", "errors", "feedback"],
        },
    },
}
