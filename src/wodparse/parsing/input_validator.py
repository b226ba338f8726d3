"""Gatekeeper checks run before any parsing."""

import logging
import re

from pydantic import BaseModel, Field

from ..config import ParserConfig, config
from .errors import ParsingErrorCode, ParsingIssue, ParsingSeverity, create_issue
from .patterns import has_digit

logger = logging.getLogger(__name__)

BINARY_PATTERN = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F]")
DANGEROUS_PATTERN = re.compile(r"<[^>]*script|javascript:|data:", re.IGNORECASE)
CONTROL_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")
HORIZONTAL_WHITESPACE = re.compile(r"[^\S\r\n]+")

NO_DIGITS_CONTEXT = (
    "No numbers found in input - workout typically includes reps, duration, or distance."
)


class InputValidationResult(BaseModel):
    """Outcome of input validation."""

    is_valid: bool
    sanitized_text: str | None = None
    errors: list[ParsingIssue] = Field(default_factory=list)
    warnings: list[ParsingIssue] = Field(default_factory=list)


class InputValidator:
    """Rejects empty, oversized, undersized, binary or unsafe input."""

    def __init__(self, settings: ParserConfig | None = None) -> None:
        self.settings = settings or config.parser

    def _fail(self, code: ParsingErrorCode, *args, context: str | None = None) -> InputValidationResult:
        logger.debug("Input rejected: %s", code.tag)
        issue = create_issue(code, ParsingSeverity.ERROR, *args, context=context)
        return InputValidationResult(is_valid=False, errors=[issue])

    def validate(self, text: str | None) -> InputValidationResult:
        """Check *text* in order, stopping at the first blocking problem."""
        if not text or not text.strip():
            return self._fail(ParsingErrorCode.EMPTY_INPUT)

        trimmed = text.strip()
        if len(trimmed) > self.settings.max_input_length:
            return self._fail(ParsingErrorCode.INPUT_TOO_LONG, self.settings.max_input_length)

        if len(trimmed) < self.settings.min_input_length:
            return self._fail(ParsingErrorCode.INPUT_TOO_SHORT, context=trimmed)

        if BINARY_PATTERN.search(trimmed):
            return self._fail(ParsingErrorCode.BINARY_CONTENT)

        if DANGEROUS_PATTERN.search(trimmed):
            return self._fail(ParsingErrorCode.INVALID_CHARACTERS)

        warnings = []
        if not has_digit(trimmed):
            warnings.append(
                create_issue(
                    ParsingErrorCode.NO_WORKOUT_STRUCTURE,
                    ParsingSeverity.WARNING,
                    context=NO_DIGITS_CONTEXT,
                )
            )

        return InputValidationResult(
            is_valid=True, sanitized_text=self.sanitize(trimmed), warnings=warnings
        )

    @staticmethod
    def sanitize(text: str) -> str:
        """Strip control characters and collapse runs of spaces. Line breaks survive."""
        text = CONTROL_CHARS.sub("", text)
        text = HORIZONTAL_WHITESPACE.sub(" ", text)
        return text.strip()
