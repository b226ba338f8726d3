"""Parses a single movement line into a ``ParsedMovement``."""

import logging
import re
from typing import Any, Awaitable, Callable

from pydantic import BaseModel, ConfigDict

from ..config import ParserConfig, config
from ..movements import MovementDictionary
from .errors import ParsingErrorCode, ParsingIssue, ParsingSeverity, create_issue
from .patterns import PATTERNS, clock_seconds, normalize_distance_unit, normalize_load_unit, to_seconds
from .schemas import (
    Distance,
    DistanceUnit,
    LoadUnit,
    MovementIdentity,
    ParsedMovement,
    PercentageLoad,
    Weight,
)
from .similar_names import find_similar

logger = logging.getLogger(__name__)

CONFIDENCE_EXACT = 100
CONFIDENCE_SINGLE_MATCH = 80
CONFIDENCE_AMBIGUOUS = 70
CONFIDENCE_UNKNOWN = 30

_EDGE_CHARS = " \t,:;@/+&-"
_LEADING_FILLER = frozenset({"of", "at", "x", "rep", "reps", "rx"})
_TRAILING_FILLER = _LEADING_FILLER | {"with"}


def _trim_name(body: str) -> str:
    """Drop separator punctuation and filler words from both ends of *body*."""
    words = body.split()
    start, end = 0, len(words)
    while start < end:
        first = words[start].lstrip(_EDGE_CHARS)
        if first and first.lower() not in _LEADING_FILLER:
            words[start] = first
            break
        start += 1
    while start < end:
        last = words[end - 1].rstrip(_EDGE_CHARS)
        if last and last.lower() not in _TRAILING_FILLER:
            words[end - 1] = last
            break
        end -= 1
    return " ".join(words[start:end])


class MovementParseResult(BaseModel):
    """Outcome of parsing one movement line."""

    model_config = ConfigDict(frozen=True)

    success: bool
    movement: ParsedMovement | None = None
    confidence: int = 0
    error: ParsingIssue | None = None
    warning: ParsingIssue | None = None
    line_number: int | None = None
    original_text: str = ""


class _LineScanner:
    """Finds quantities in a line body (consuming them) or its notes (read only)."""

    def __init__(self, body: str, notes: str | None) -> None:
        self.body = body
        self.notes = notes or ""

    def take(self, key: str) -> re.Match | None:
        pattern = PATTERNS[key]
        m = pattern.search(self.body)
        if m:
            self.body = self.body[: m.start()] + " " + self.body[m.end() :]
            return m
        return pattern.search(self.notes) if self.notes else None


class MovementLineParser:
    """Extracts quantities from a line and resolves the movement name."""

    def __init__(self, dictionary: MovementDictionary, settings: ParserConfig | None = None) -> None:
        self.dictionary = dictionary
        self.settings = settings or config.parser

    async def parse(self, line: str, sequence_order: int, line_number: int | None = None) -> MovementParseResult:
        text = (line or "").strip()
        if not text:
            return MovementParseResult(
                success=False,
                error=create_issue(
                    ParsingErrorCode.EMPTY_MOVEMENT_LINE,
                    ParsingSeverity.ERROR,
                    line_number=line_number,
                ),
                line_number=line_number,
                original_text=line or "",
            )

        fields = self._extract(text)
        name = fields.pop("name")
        movement = ParsedMovement(sequence_order=sequence_order, original_text=text, name=name or text, **fields)

        identity, confidence, warning = await self._resolve(name, text, line_number)
        if identity is not None:
            return MovementParseResult(
                success=True,
                movement=movement.model_copy(update={"identity": identity}),
                confidence=confidence,
                warning=warning,
                line_number=line_number,
                original_text=text,
            )

        if movement.has_quantity:
            similar = await self._similar_names(name)
            logger.debug("Line %s: unknown movement %r used as-is", line_number, name)
            return MovementParseResult(
                success=True,
                movement=movement,
                confidence=CONFIDENCE_UNKNOWN,
                warning=create_issue(
                    ParsingErrorCode.UNKNOWN_MOVEMENT,
                    ParsingSeverity.WARNING,
                    name or text,
                    line_number=line_number,
                    context=text,
                    suggestion="Using as-is. Check spelling or add this movement to the dictionary.",
                    similar_names=similar,
                ),
                line_number=line_number,
                original_text=text,
            )

        similar = await self._similar_names(name)
        return MovementParseResult(
            success=False,
            confidence=0,
            error=create_issue(
                ParsingErrorCode.UNRECOGNIZED_MOVEMENT_FORMAT,
                ParsingSeverity.ERROR,
                text,
                line_number=line_number,
                context=text,
                similar_names=similar,
            ),
            line_number=line_number,
            original_text=text,
        )

    def _extract(self, text: str) -> dict[str, Any]:
        """Pull every quantity out of *text*; what is left is the name."""
        text = PATTERNS["list_marker"].sub("", text, count=1)
        notes = None
        m = PATTERNS["notes"].search(text)
        if m:
            notes = m.group(1).strip() or None
            text = text[: m.start()]

        scan = _LineScanner(text, notes)
        fields: dict[str, Any] = {"notes": notes}

        m = scan.take("gender_load")
        if m:
            unit = LoadUnit(normalize_load_unit(m.group(2) or m.group(4)))
            female_unit = LoadUnit(normalize_load_unit(m.group(4) or m.group(2)))
            fields["load"] = Weight(value=float(m.group(1)), unit=unit, original_text=m.group(0).strip())
            fields["load_female"] = Weight(
                value=float(m.group(3)), unit=female_unit, original_text=m.group(0).strip()
            )
        else:
            m = scan.take("load")
            if m:
                fields["load"] = Weight(
                    value=float(m.group(1)),
                    unit=LoadUnit(normalize_load_unit(m.group(2))),
                    original_text=m.group(0).strip(),
                )

        m = scan.take("percentage")
        if m:
            reference = None
            if m.group(2):
                reference = "1RM"
            elif m.group(3):
                reference = "bodyweight"
            fields["percentage"] = PercentageLoad(
                percentage=float(m.group(1)), reference=reference, original_text=m.group(0).strip()
            )
        else:
            m = scan.take("bodyweight")
            if m:
                fields["percentage"] = PercentageLoad(
                    percentage=100.0, reference="bodyweight", original_text=m.group(0).strip()
                )

        m = scan.take("gender_calorie")
        if m:
            fields["calories"] = int(m.group(1))
            fields["calories_female"] = int(m.group(2))
        else:
            m = scan.take("calorie")
            if m:
                fields["calories"] = int(m.group(1))

        m = scan.take("distance")
        if m:
            fields["distance"] = Distance(
                value=float(m.group(1)),
                unit=DistanceUnit(normalize_distance_unit(m.group(2))),
                original_text=m.group(0).strip(),
            )

        m = scan.take("height")
        if m:
            fields["height"] = f"{m.group(1)} in"

        m = scan.take("clock")
        if m:
            fields["duration_seconds"] = clock_seconds(m.group(1), m.group(2))
        else:
            m = scan.take("duration")
            if m:
                if m.group(1):
                    fields["duration_seconds"] = to_seconds(int(m.group(1)), m.group(2))
                else:
                    fields["duration_seconds"] = int(m.group(3))

        body = PATTERNS["empty_parens"].sub("", scan.body).strip()
        m = PATTERNS["leading_reps"].match(body)
        if m:
            fields["reps"] = int(m.group(1))
            body = body[m.end() :]
        else:
            m = PATTERNS["trailing_reps"].search(body)
            if m:
                fields["reps"] = int(m.group(1) or m.group(2))
                body = body[: m.start()]

        fields["name"] = _trim_name(body)
        return fields

    async def _lookup(self, what: str, call: Callable[..., Awaitable[Any]], *args: Any) -> Any:
        """Await a dictionary call; a failure counts as no match."""
        try:
            return await call(*args)
        except Exception:
            logger.warning("Movement dictionary %s failed for %r; treating as no match", what, args, exc_info=True)
            return None

    async def _resolve(
        self, name: str, text: str, line_number: int | None
    ) -> tuple[MovementIdentity | None, int, ParsingIssue | None]:
        """Exact/alias lookup first, then fuzzy search."""
        if not name:
            return None, 0, None

        canonical = await self._lookup("normalize", self.dictionary.normalize, name)
        if canonical:
            identity = await self._lookup(
                "get_by_canonical_name", self.dictionary.get_by_canonical_name, canonical
            )
            if identity is not None:
                logger.debug("Line %s: %r resolved exactly to %s", line_number, name, canonical)
                return identity, CONFIDENCE_EXACT, None

        matches = await self._lookup("search", self.dictionary.search, name) or []
        if len(matches) == 1:
            logger.debug("Line %s: %r matched %s by search", line_number, name, matches[0].canonical_name)
            return matches[0], CONFIDENCE_SINGLE_MATCH, None
        if len(matches) > 1:
            best, runners_up = matches[0], [m.display_name for m in matches[1:3]]
            warning = create_issue(
                ParsingErrorCode.AMBIGUOUS_MOVEMENT,
                ParsingSeverity.WARNING,
                name,
                ", ".join([best.display_name, *runners_up]),
                line_number=line_number,
                context=text,
                suggestion="Verify this is the intended movement. Other options: " + ", ".join(runners_up),
                similar_names=runners_up,
            )
            return best, CONFIDENCE_AMBIGUOUS, warning

        return None, 0, None

    async def _list_names(self) -> list[str]:
        # optional extension; plain three-method dictionaries get no suggestions
        list_names = getattr(self.dictionary, "list_names", None)
        if list_names is None:
            return []
        return await list_names()

    async def _similar_names(self, name: str) -> list[str]:
        if not name:
            return []
        names = await self._lookup("list_names", self._list_names) or []
        return find_similar(
            name,
            names,
            max_suggestions=self.settings.similar_name_suggestion_count,
            max_distance=self.settings.similar_name_max_distance,
        )
