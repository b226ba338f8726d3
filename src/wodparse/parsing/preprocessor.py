"""Text normalization, title extraction and line classification."""

import logging
import re

from pydantic import BaseModel, ConfigDict, Field

from .patterns import contains_workout_type, has_digit, is_header_line, rep_sequence, slash_sequence
from .schemas import RepScheme

logger = logging.getLogger(__name__)

NAMED_WORKOUTS = (
    r"Fran|Diane|Helen|Grace|Isabel|Karen|Mary|Cindy|Annie|Eva|Kelly|Linda|Nancy|Angie"
    r"|Chelsea|Elizabeth|Filthy\s*Fifty|Fight\s*Gone\s*Bad|Murph|DT|Roy|Jackie"
)
NAMED_WORKOUT_PATTERN = re.compile(rf"^[\"']?({NAMED_WORKOUTS})[\"']?:?$", re.IGNORECASE)
TITLE_PATTERN = re.compile(r"^[\"']?([A-Z][A-Za-z\s\-']*)[\"']?:?$")

_TRANSLATION = str.maketrans(
    {
        "\u2018": "'",
        "\u2019": "'",
        "\u201c": '"',
        "\u201d": '"',
        "\u2032": "'",
        "\u2033": '"',
        "\u2013": "-",
        "\u2014": "-",
        "\u00d7": "x",
        "\u00a0": " ",
    }
)


class PreprocessedText(BaseModel):
    """Workout text split into title, header lines and movement lines."""

    model_config = ConfigDict(frozen=True)

    original_text: str
    normalized_text: str
    title: str | None = None
    lines: list[str] = Field(default_factory=list)
    header_lines: list[str] = Field(default_factory=list)
    movement_lines: list[str] = Field(default_factory=list)
    movement_line_numbers: list[int] = Field(default_factory=list)
    rep_scheme: RepScheme | None = None
    movement_rep_schemes: dict[int, RepScheme] = Field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.header_lines and not self.movement_lines


def normalize_text(text: str) -> str:
    """Unify line endings, whitespace, quotes and dashes."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = text.translate(_TRANSLATION)
    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def extract_title(line: str, next_line: str | None = None) -> str | None:
    """Return the workout name if *line* is a title, else None.

    Benchmark names always count. Any other capitalized phrase only counts when
    the following line describes the workout, so a bare movement name such as
    ``Pull-ups`` on the first line is not swallowed.
    """
    m = NAMED_WORKOUT_PATTERN.match(line)
    if m:
        return m.group(1)
    if has_digit(line) or contains_workout_type(line):
        return None
    if next_line is None or not (is_header_line(next_line) or _scheme_for_line(next_line)):
        return None
    m = TITLE_PATTERN.match(line)
    if m:
        return m.group(1).strip(" -'")
    return None


def _scheme_for_line(line: str) -> RepScheme | None:
    reps = rep_sequence(line) or slash_sequence(line)
    if reps is None:
        return None
    return RepScheme.from_reps(reps, line)


class TextPreprocessor:
    """Turns sanitized workout text into classified lines."""

    def process(self, text: str) -> PreprocessedText:
        normalized = normalize_text(text or "")
        numbered = [
            (number, line.strip())
            for number, line in enumerate(normalized.split("\n"), 1)
            if line.strip()
        ]
        if not numbered:
            return PreprocessedText(original_text=text or "", normalized_text=normalized)

        title = None
        if len(numbered) > 1:
            title = extract_title(numbered[0][1], numbered[1][1])
            if title:
                numbered = numbered[1:]

        header_lines: list[str] = []
        movement_lines: list[str] = []
        movement_line_numbers: list[int] = []
        movement_schemes: dict[int, RepScheme] = {}
        pending: RepScheme | None = None

        for number, line in numbered:
            scheme = _scheme_for_line(line)
            if scheme is not None:
                logger.debug("Line %d is a rep scheme: %s", number, scheme)
                pending = scheme
                header_lines.append(line)
                continue
            if is_header_line(line):
                logger.debug("Line %d is a header: %r", number, line)
                header_lines.append(line)
                continue

            index = len(movement_lines)
            if pending is not None:
                movement_schemes[index] = pending
                pending = None
            movement_lines.append(line)
            movement_line_numbers.append(number)

        workout_scheme = None
        if movement_schemes:
            schemes = list(movement_schemes.values())
            if all(s.reps == schemes[0].reps for s in schemes):
                workout_scheme = schemes[0]
                movement_schemes = {}
        elif pending is not None:
            workout_scheme = pending

        return PreprocessedText(
            original_text=text,
            normalized_text=normalized,
            title=title,
            lines=[line for _, line in numbered],
            header_lines=header_lines,
            movement_lines=movement_lines,
            movement_line_numbers=movement_line_numbers,
            rep_scheme=workout_scheme,
            movement_rep_schemes=movement_schemes,
        )
