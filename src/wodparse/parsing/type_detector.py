"""Workout type detection from header lines."""

import logging
import re

from pydantic import BaseModel, ConfigDict

from .errors import ParsingErrorCode, ParsingIssue, ParsingSeverity, create_issue
from .patterns import (
    PATTERNS,
    embedded_rep_sequence,
    extract_time_cap,
    fixed_sequence,
    rep_sequence,
    slash_sequence,
    to_seconds,
)
from .preprocessor import PreprocessedText
from .schemas import IntervalConfig, RepScheme, WorkoutType

logger = logging.getLogger(__name__)

TABATA_ROUNDS = 8
TABATA_WORK_SECONDS = 20
TABATA_REST_SECONDS = 10

AMRAP_WITHOUT_CAP_MAX = 70
FOR_TIME_WITH_CAP_MIN = 90


class TypeDetectionResult(BaseModel):
    """What the header lines say about the workout."""

    model_config = ConfigDict(frozen=True)

    workout_type: WorkoutType = WorkoutType.FOR_TIME
    time_cap_seconds: int | None = None
    round_count: int | None = None
    interval_seconds: int | None = None
    confidence: int = 0
    matched_text: str | None = None
    rep_scheme: RepScheme | None = None
    interval_config: IntervalConfig | None = None
    error: ParsingIssue | None = None
    warning: ParsingIssue | None = None


class _Match(BaseModel):
    workout_type: WorkoutType
    intrinsic: float
    matched_text: str | None = None
    time_cap_seconds: int | None = None
    round_count: int | None = None
    interval_seconds: int | None = None
    interval_config: IntervalConfig | None = None


def _int(value: str | None) -> int | None:
    return int(value) if value else None


def _first(m: re.Match, *groups: str) -> str | None:
    for group in groups:
        if m.group(group):
            return m.group(group)
    return None


def _interval_seconds(m: re.Match) -> IntervalConfig:
    work_unit = m.group("work_unit") or m.group("rest_unit")
    rest_unit = m.group("rest_unit") or m.group("work_unit")
    return IntervalConfig(
        rounds=int(m.group("rounds")),
        work_seconds=to_seconds(int(m.group("work")), work_unit),
        rest_seconds=to_seconds(int(m.group("rest")), rest_unit),
        original_text=m.group(0).strip(),
    )


class TypeDetector:
    """Classifies a workout as AMRAP, For Time, EMOM, Tabata, Intervals or Rounds."""

    def detect(self, text: PreprocessedText) -> TypeDetectionResult:
        if text.is_empty:
            return TypeDetectionResult(
                confidence=0,
                error=create_issue(ParsingErrorCode.EMPTY_INPUT, ParsingSeverity.ERROR),
            )

        detection_lines = text.header_lines or text.lines
        detection_text = "\n".join(detection_lines)

        match = self._match_type(detection_text, text)
        rep_scheme = text.rep_scheme or self._extract_rep_scheme(text)
        time_cap = match.time_cap_seconds or extract_time_cap("\n".join(text.lines))

        confidence = round(match.intrinsic * 100)
        warning = None
        if match.workout_type == WorkoutType.FOR_TIME and time_cap:
            confidence = max(confidence, FOR_TIME_WITH_CAP_MIN)
        if match.workout_type == WorkoutType.AMRAP and not time_cap:
            confidence = min(confidence, AMRAP_WITHOUT_CAP_MAX)
            warning = create_issue(ParsingErrorCode.MISSING_DURATION, ParsingSeverity.WARNING)

        logger.debug(
            "Detected %s (confidence %d) from %r",
            match.workout_type.value,
            confidence,
            match.matched_text,
        )
        return TypeDetectionResult(
            workout_type=match.workout_type,
            time_cap_seconds=time_cap,
            round_count=match.round_count,
            interval_seconds=match.interval_seconds,
            confidence=confidence,
            matched_text=match.matched_text,
            rep_scheme=rep_scheme,
            interval_config=match.interval_config,
            warning=warning,
        )

    def _match_type(self, detection_text: str, text: PreprocessedText) -> _Match:
        """Try each workout family in precedence order; first hit wins."""
        m = PATTERNS["amrap"].search(detection_text)
        if m:
            minutes = _int(m.group(1) or m.group(2))
            return _Match(
                workout_type=WorkoutType.AMRAP,
                intrinsic=1.0,
                matched_text=m.group(0),
                time_cap_seconds=minutes * 60 if minutes else None,
            )

        m = PATTERNS["for_time"].search(detection_text)
        if m:
            return _Match(
                workout_type=WorkoutType.FOR_TIME,
                intrinsic=1.0,
                matched_text=m.group(0),
                round_count=_int(m.group(1) or m.group(2)),
            )

        m = PATTERNS["emom"].search(detection_text)
        if m:
            every = _int(_first(m, "every_pre", "every", "every_n")) or 1
            total = _int(_first(m, "total_pre", "total_e", "total_post", "total_every"))
            return _Match(
                workout_type=WorkoutType.EMOM,
                intrinsic=1.0,
                matched_text=m.group(0),
                interval_seconds=every * 60,
                time_cap_seconds=total * 60 if total else None,
                round_count=total // every if total else None,
            )

        m = PATTERNS["tabata"].search(detection_text)
        if m:
            tabata = IntervalConfig(
                rounds=TABATA_ROUNDS,
                work_seconds=TABATA_WORK_SECONDS,
                rest_seconds=TABATA_REST_SECONDS,
                original_text=m.group(0),
            )
            return _Match(
                workout_type=WorkoutType.TABATA,
                intrinsic=1.0,
                matched_text=m.group(0),
                interval_seconds=TABATA_WORK_SECONDS + TABATA_REST_SECONDS,
                time_cap_seconds=tabata.total_seconds,
                round_count=TABATA_ROUNDS,
                interval_config=tabata,
            )

        m = PATTERNS["interval"].search(detection_text) or PATTERNS["interval_trailing"].search(
            detection_text
        )
        if m:
            intervals = _interval_seconds(m)
            return _Match(
                workout_type=WorkoutType.INTERVALS,
                intrinsic=1.0,
                matched_text=m.group(0),
                interval_seconds=intervals.work_seconds + intervals.rest_seconds,
                time_cap_seconds=intervals.total_seconds,
                round_count=intervals.rounds,
                interval_config=intervals,
            )

        m = PATTERNS["rounds"].search(detection_text)
        if m:
            return _Match(
                workout_type=WorkoutType.ROUNDS,
                intrinsic=0.9,
                matched_text=m.group(0),
                round_count=int(m.group(1)),
            )

        if text.rep_scheme or any(rep_sequence(line) for line in text.header_lines):
            return _Match(workout_type=WorkoutType.FOR_TIME, intrinsic=0.8)

        return _Match(workout_type=WorkoutType.FOR_TIME, intrinsic=0.5)

    @staticmethod
    def _extract_rep_scheme(text: PreprocessedText) -> RepScheme | None:
        """First rep scheme found anywhere: dash line, slash line, then 'N rounds of M'."""
        for line in text.lines:
            reps = rep_sequence(line) or slash_sequence(line)
            if reps:
                return RepScheme.from_reps(reps, line)
        for line in text.header_lines:
            reps = embedded_rep_sequence(line)
            if reps:
                return RepScheme.from_reps(reps, line)
        for line in text.lines:
            reps = fixed_sequence(line)
            if reps:
                return RepScheme.from_reps(reps, line)
        return None
