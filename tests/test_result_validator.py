"""Tests for workout-level checks and confidence scoring."""

from wodparse.config import ScoringConfig
from wodparse.parsing.aggregator import IssueAggregator
from wodparse.parsing.errors import ParsingErrorCode
from wodparse.parsing.result_validator import ResultValidator
from wodparse.parsing.schemas import (
    ConfidenceBreakdown,
    ParsedWorkout,
    ParseResult,
    WorkoutType,
    confidence_level,
)
from wodparse.parsing.type_detector import TypeDetectionResult


def _make_breakdown(type_conf=100, time_conf=100, movement_conf=100, identified=2, lines=2):
    return ConfidenceBreakdown(
        workout_type_confidence=type_conf,
        time_domain_confidence=time_conf,
        movement_identification_confidence=movement_conf,
        movements_identified=identified,
        total_movement_lines=lines,
    )


def test_perfect_score():
    assert ResultValidator().overall_confidence(_make_breakdown(), 0, 0) == 100


def test_bare_rep_scheme_score():
    assert ResultValidator().overall_confidence(_make_breakdown(type_conf=80), 0, 0) == 96


def test_warning_penalty_is_capped():
    validator = ResultValidator()
    assert validator.overall_confidence(_make_breakdown(), 0, 1) == 95
    assert validator.overall_confidence(_make_breakdown(), 0, 10) == 80


def test_errors_collapse_the_score():
    validator = ResultValidator()
    assert validator.overall_confidence(_make_breakdown(), 1, 0) == 30
    assert validator.overall_confidence(_make_breakdown(), 3, 0) == 10
    assert validator.overall_confidence(_make_breakdown(), 5, 0) == 0


def test_custom_scoring():
    validator = ResultValidator(ScoringConfig(error_base=50, error_penalty=5))
    assert validator.overall_confidence(_make_breakdown(), 2, 0) == 40


def test_identification_rate():
    assert _make_breakdown(identified=1, lines=4).identification_rate == 25.0
    assert _make_breakdown(identified=0, lines=0).identification_rate == 0.0


def test_time_domain_checks():
    validator = ResultValidator()
    cases = [
        (WorkoutType.AMRAP, ParsingErrorCode.MISSING_DURATION, 50),
        (WorkoutType.EMOM, ParsingErrorCode.MISSING_INTERVAL, 70),
        (WorkoutType.ROUNDS, ParsingErrorCode.MISSING_ROUND_COUNT, 60),
    ]
    for workout_type, code, expected in cases:
        aggregator = IssueAggregator()
        score = validator._check_time_domain(ParsedWorkout(workout_type=workout_type), aggregator)
        assert score == expected
        assert [w.code for w in aggregator.warnings] == [code]

    aggregator = IssueAggregator()
    assert validator._check_time_domain(ParsedWorkout(), aggregator) == 100
    assert len(aggregator) == 0


def test_no_movements_is_an_error():
    result = ResultValidator().validate(
        ParsedWorkout(), TypeDetectionResult(confidence=50), [], IssueAggregator()
    )
    assert not result.success
    assert [e.code for e in result.errors] == [int(ParsingErrorCode.NO_MOVEMENTS_DETECTED)]
    assert result.confidence == 30
    assert not result.is_usable


def test_confidence_levels():
    assert confidence_level(100) == "Perfect"
    assert confidence_level(96) == "High"
    assert confidence_level(60) == "Medium"
    assert confidence_level(59) == "Low"


def test_usable_threshold_is_not_serialized():
    result = ParseResult(success=True, workout=ParsedWorkout(), confidence=70)
    data = result.model_dump()
    assert data["is_usable"] is True
    assert data["confidence_level"] == "Medium"
    assert "usable_threshold" not in data


def test_failed_result_is_never_usable():
    result = ParseResult(success=False, workout=ParsedWorkout(), confidence=90)
    assert not result.is_usable
