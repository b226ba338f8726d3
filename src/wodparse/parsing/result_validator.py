"""Workout-level checks and confidence scoring."""

import logging

from ..config import ScoringConfig, config
from .aggregator import IssueAggregator
from .errors import ParsingErrorCode, ParsingSeverity, create_issue
from .movement_line import MovementParseResult
from .schemas import (
    ConfidenceBreakdown,
    IssueRecord,
    LoadUnit,
    ParsedMovement,
    ParsedWorkout,
    ParseResult,
    WorkoutType,
)
from .type_detector import TypeDetectionResult

logger = logging.getLogger(__name__)

# Beyond these a value is almost certainly a typo.
MAX_REPS = 1000
MAX_LOAD_LB = 1500
MAX_DISTANCE_KM = 100
MAX_DURATION_SECONDS = 4 * 60 * 60


def _out_of_range(movement: ParsedMovement) -> str | None:
    if movement.reps is not None and not 0 < movement.reps <= MAX_REPS:
        return f"{movement.reps} reps"
    for load in (movement.load, movement.load_female):
        if load is not None and not 0 < load.to_lb() <= MAX_LOAD_LB:
            return str(load)
    if movement.distance is not None and not 0 < movement.distance.to_kilometers() <= MAX_DISTANCE_KM:
        return str(movement.distance)
    if movement.duration_seconds is not None and not 0 < movement.duration_seconds <= MAX_DURATION_SECONDS:
        return f"{movement.duration_seconds} sec"
    return None


class ResultValidator:
    """Folds every stage's issues together and scores the parse."""

    def __init__(self, scoring: ScoringConfig | None = None) -> None:
        self.scoring = scoring or config.scoring

    def validate(
        self,
        workout: ParsedWorkout,
        detection: TypeDetectionResult,
        movement_results: list[MovementParseResult],
        aggregator: IssueAggregator,
    ) -> ParseResult:
        aggregator.add(detection.error)
        aggregator.add(detection.warning)
        for result in movement_results:
            aggregator.add(result.error)
            aggregator.add(result.warning)

        if not workout.movements:
            aggregator.add(
                create_issue(ParsingErrorCode.NO_MOVEMENTS_DETECTED, ParsingSeverity.ERROR)
            )

        time_domain = self._check_time_domain(workout, aggregator)
        self._check_consistency(workout, movement_results, aggregator)

        breakdown = self._breakdown(detection, movement_results, time_domain)
        confidence = self.overall_confidence(
            breakdown, aggregator.error_count, aggregator.warning_count
        )

        issues = aggregator.sorted_issues()
        logger.debug(
            "Scored %s: confidence %d, %d error(s), %d warning(s)",
            workout.workout_type.value,
            confidence,
            aggregator.error_count,
            aggregator.warning_count,
        )
        return ParseResult(
            success=not aggregator.has_errors,
            workout=workout,
            confidence=confidence,
            errors=[IssueRecord.from_issue(i) for i in issues if i.severity == ParsingSeverity.ERROR],
            warnings=[IssueRecord.from_issue(i) for i in issues if i.severity != ParsingSeverity.ERROR],
            breakdown=breakdown,
            usable_threshold=self.scoring.usable_threshold,
        )

    def _check_time_domain(self, workout: ParsedWorkout, aggregator: IssueAggregator) -> int:
        """Warn about missing time parameters; return the time-domain score."""
        if workout.workout_type == WorkoutType.AMRAP and not workout.time_cap_seconds:
            aggregator.add(create_issue(ParsingErrorCode.MISSING_DURATION, ParsingSeverity.WARNING))
            return self.scoring.amrap_without_cap
        if workout.workout_type == WorkoutType.EMOM and not workout.interval_seconds:
            aggregator.add(create_issue(ParsingErrorCode.MISSING_INTERVAL, ParsingSeverity.WARNING))
            return self.scoring.emom_without_interval
        if workout.workout_type == WorkoutType.ROUNDS and not workout.round_count:
            aggregator.add(create_issue(ParsingErrorCode.MISSING_ROUND_COUNT, ParsingSeverity.WARNING))
            return self.scoring.rounds_without_count
        return 100

    @staticmethod
    def _check_consistency(
        workout: ParsedWorkout,
        movement_results: list[MovementParseResult],
        aggregator: IssueAggregator,
    ) -> None:
        line_numbers = {
            r.movement.sequence_order: r.line_number for r in movement_results if r.movement
        }

        units = {
            load.unit
            for m in workout.movements
            for load in (m.load, m.load_female)
            if load is not None
        }
        if LoadUnit.LB in units and LoadUnit.KG in units:
            aggregator.add(
                create_issue(
                    ParsingErrorCode.INCONSISTENT_UNITS,
                    ParsingSeverity.WARNING,
                    "both lb and kg loads",
                )
            )

        for movement in workout.movements:
            value = _out_of_range(movement)
            if value:
                aggregator.add(
                    create_issue(
                        ParsingErrorCode.VALUE_OUT_OF_RANGE,
                        ParsingSeverity.WARNING,
                        value,
                        line_number=line_numbers.get(movement.sequence_order),
                        context=movement.original_text,
                    )
                )

    @staticmethod
    def _breakdown(
        detection: TypeDetectionResult,
        movement_results: list[MovementParseResult],
        time_domain: int,
    ) -> ConfidenceBreakdown:
        succeeded = [r for r in movement_results if r.success and r.movement]
        mean = sum(r.confidence for r in succeeded) // len(succeeded) if succeeded else 0
        return ConfidenceBreakdown(
            workout_type_confidence=detection.confidence,
            time_domain_confidence=time_domain,
            movement_identification_confidence=mean,
            movements_identified=sum(1 for r in succeeded if r.movement.is_identified),
            total_movement_lines=len(movement_results),
            movements_with_complete_data=sum(1 for r in succeeded if r.movement.has_complete_data),
        )

    def overall_confidence(self, breakdown: ConfidenceBreakdown, errors: int, warnings: int) -> int:
        """Weighted score; collapses once any error is present."""
        s = self.scoring
        if errors:
            return max(0, s.error_base - s.error_penalty * errors)
        weighted = (
            breakdown.workout_type_confidence * s.type_weight
            + breakdown.time_domain_confidence * s.time_domain_weight
            + breakdown.movement_identification_confidence * s.movement_weight
            + breakdown.identification_rate * s.coverage_weight
        )
        # round off float noise (0.15 * 100 == 15.000000000000002) before truncating
        weighted = int(round(weighted, 6))
        penalty = min(s.max_warning_penalty, s.warning_penalty * warnings)
        return max(0, min(100, weighted - penalty))
