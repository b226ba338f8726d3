"""Parsing issue taxonomy: codes, severities, message templates."""

import logging
from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class ParsingErrorCode(IntEnum):
    """Issue codes, banded by category.

    1xx input validation, 2xx workout structure, 3xx movement lines,
    4xx data consistency, 5xx system.
    """

    EMPTY_INPUT = 100
    INPUT_TOO_LONG = 101
    INPUT_TOO_SHORT = 102
    BINARY_CONTENT = 103
    INVALID_CHARACTERS = 104

    NO_WORKOUT_STRUCTURE = 200
    NO_MOVEMENTS_DETECTED = 201
    INVALID_WORKOUT_TYPE = 202
    AMBIGUOUS_WORKOUT_TYPE = 203
    MISSING_DURATION = 204
    MISSING_ROUND_COUNT = 205
    CONTRADICTORY_METADATA = 206
    MISSING_INTERVAL = 207

    UNKNOWN_MOVEMENT = 300
    AMBIGUOUS_MOVEMENT = 301
    INVALID_REP_COUNT = 302
    INVALID_WEIGHT = 303
    INVALID_DISTANCE = 304
    INVALID_TIME = 305
    INVALID_CALORIES = 306
    EMPTY_MOVEMENT_LINE = 307
    UNRECOGNIZED_MOVEMENT_FORMAT = 308

    DUPLICATE_MOVEMENT = 400
    INCONSISTENT_UNITS = 401
    VALUE_OUT_OF_RANGE = 402

    INTERNAL_ERROR = 500
    TIMEOUT = 501

    @property
    def tag(self) -> str:
        """Stable CamelCase name exposed to API consumers."""
        return "".join(part.capitalize() for part in self.name.split("_"))

    @property
    def band(self) -> int:
        return self.value // 100 * 100


class ParsingSeverity(str, Enum):
    """Issue severity. Errors sort first."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    ParsingSeverity.ERROR: 0,
    ParsingSeverity.WARNING: 1,
    ParsingSeverity.INFO: 2,
}


# code -> (message template, suggestion)
MESSAGES: dict[ParsingErrorCode, tuple[str, str]] = {
    ParsingErrorCode.EMPTY_INPUT: (
        "Workout text cannot be empty.",
        "Enter a workout description including movements and quantities.",
    ),
    ParsingErrorCode.INPUT_TOO_LONG: (
        "Workout text exceeds maximum length of {0:,} characters.",
        "Reduce the workout description or split into multiple workouts.",
    ),
    ParsingErrorCode.INPUT_TOO_SHORT: (
        "Workout text is too short to contain valid workout data.",
        "Include at least one movement with reps, distance, or duration.",
    ),
    ParsingErrorCode.BINARY_CONTENT: (
        "Input appears to contain binary or encoded content.",
        "Paste plain text workout description only.",
    ),
    ParsingErrorCode.INVALID_CHARACTERS: (
        "Input contains potentially harmful characters.",
        "Remove special characters and use plain text.",
    ),
    ParsingErrorCode.NO_WORKOUT_STRUCTURE: (
        "Could not detect a valid workout structure.",
        "Include workout type (e.g., 'AMRAP 20 min', 'For Time', '5 Rounds').",
    ),
    ParsingErrorCode.NO_MOVEMENTS_DETECTED: (
        "No movements could be parsed from the workout text.",
        "List movements with quantities (e.g., '21 Thrusters', '400m Run').",
    ),
    ParsingErrorCode.INVALID_WORKOUT_TYPE: (
        "'{0}' is not a recognized workout type.",
        "Use standard types: AMRAP, For Time, EMOM, Rounds, Tabata, Intervals.",
    ),
    ParsingErrorCode.AMBIGUOUS_WORKOUT_TYPE: (
        "Multiple workout types detected: {0}.",
        "Specify a single workout type clearly.",
    ),
    ParsingErrorCode.MISSING_DURATION: (
        "Timed workout (AMRAP/EMOM) requires a duration.",
        "Add duration (e.g., '20 min AMRAP', 'EMOM x 10 minutes').",
    ),
    ParsingErrorCode.MISSING_ROUND_COUNT: (
        "Rounds-based workout requires a round count.",
        "Specify rounds (e.g., '5 Rounds for Time').",
    ),
    ParsingErrorCode.CONTRADICTORY_METADATA: (
        "Contradictory workout metadata: {0}.",
        "Review and correct conflicting information.",
    ),
    ParsingErrorCode.MISSING_INTERVAL: (
        "EMOM workout has no interval length.",
        "Add the interval (e.g., 'E2MOM', 'Every 3 minutes').",
    ),
    ParsingErrorCode.UNKNOWN_MOVEMENT: (
        "Movement '{0}' not recognized.",
        "Check spelling or try a common abbreviation.",
    ),
    ParsingErrorCode.AMBIGUOUS_MOVEMENT: (
        "'{0}' could match multiple movements: {1}.",
        "Use the full movement name or common abbreviation.",
    ),
    ParsingErrorCode.INVALID_REP_COUNT: (
        "Invalid rep count '{0}'.",
        "Use a positive whole number for reps.",
    ),
    ParsingErrorCode.INVALID_WEIGHT: (
        "Invalid weight '{0}'.",
        "Use format like '135 lbs', '60 kg', or '1.5 pood'.",
    ),
    ParsingErrorCode.INVALID_DISTANCE: (
        "Invalid distance '{0}'.",
        "Use format like '400m', '1 mile', or '5k'.",
    ),
    ParsingErrorCode.INVALID_TIME: (
        "Invalid time value '{0}'.",
        "Use format like '2:00', '90 sec', or '3 min'.",
    ),
    ParsingErrorCode.INVALID_CALORIES: (
        "Invalid calorie value '{0}'.",
        "Use a positive whole number for calories.",
    ),
    ParsingErrorCode.EMPTY_MOVEMENT_LINE: (
        "Movement line is empty.",
        "Remove empty lines or add movement details.",
    ),
    ParsingErrorCode.UNRECOGNIZED_MOVEMENT_FORMAT: (
        "Could not parse movement: '{0}'.",
        "Use format: quantity + movement (e.g., '21 Thrusters').",
    ),
    ParsingErrorCode.DUPLICATE_MOVEMENT: (
        "Movement '{0}' appears multiple times in sequence.",
        "Intentional duplicates are allowed but flagged for review.",
    ),
    ParsingErrorCode.INCONSISTENT_UNITS: (
        "Inconsistent units: {0}.",
        "Use consistent units throughout the workout.",
    ),
    ParsingErrorCode.VALUE_OUT_OF_RANGE: (
        "Value '{0}' is outside reasonable range.",
        "Verify the value is correct.",
    ),
    ParsingErrorCode.INTERNAL_ERROR: (
        "An internal parsing error occurred.",
        "Please try again or report this issue.",
    ),
    ParsingErrorCode.TIMEOUT: (
        "Parsing timed out.",
        "Simplify the workout text or try again.",
    ),
}


def default_severity(code: ParsingErrorCode) -> ParsingSeverity:
    """Severity an issue gets when the caller does not choose one."""
    if code in (
        ParsingErrorCode.NO_MOVEMENTS_DETECTED,
        ParsingErrorCode.EMPTY_MOVEMENT_LINE,
        ParsingErrorCode.UNRECOGNIZED_MOVEMENT_FORMAT,
    ):
        return ParsingSeverity.ERROR
    if code == ParsingErrorCode.DUPLICATE_MOVEMENT:
        return ParsingSeverity.INFO
    if code.band in (100, 500):
        return ParsingSeverity.ERROR
    return ParsingSeverity.WARNING


def get_message(code: ParsingErrorCode, *args) -> str:
    """Format the message template for *code*; falls back to the raw template."""
    template, _ = MESSAGES.get(code, (f"Unknown error: {code.tag}", ""))
    if not args:
        return template
    try:
        return template.format(*args)
    except (IndexError, KeyError, ValueError):
        logger.debug("Could not format message for %s with %r", code.tag, args)
        return template


def get_suggestion(code: ParsingErrorCode) -> str:
    return MESSAGES.get(code, ("", ""))[1]


class ParsingIssue(BaseModel):
    """A single error, warning or note produced while parsing."""

    model_config = ConfigDict(frozen=True)

    code: ParsingErrorCode = Field(description="Taxonomy code")
    severity: ParsingSeverity = Field(description="Error, warning or info")
    message: str = Field(description="Human-readable message")
    line_number: int | None = Field(default=None, description="1-based line number")
    context: str | None = Field(default=None, description="Offending text snippet")
    suggestion: str | None = Field(default=None, description="How to fix it")
    similar_names: list[str] | None = Field(
        default=None, description="'Did you mean' candidates"
    )

    @property
    def is_error(self) -> bool:
        return self.severity == ParsingSeverity.ERROR


def create_issue(
    code: ParsingErrorCode,
    severity: ParsingSeverity | None = None,
    *message_args,
    line_number: int | None = None,
    context: str | None = None,
    suggestion: str | None = None,
    similar_names: list[str] | None = None,
) -> ParsingIssue:
    """Build an issue with its templated message and default suggestion."""
    return ParsingIssue(
        code=code,
        severity=severity or default_severity(code),
        message=get_message(code, *message_args),
        line_number=line_number,
        context=context,
        suggestion=suggestion if suggestion is not None else get_suggestion(code),
        similar_names=similar_names or None,
    )
