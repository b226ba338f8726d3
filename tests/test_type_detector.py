"""Tests for workout type detection."""

from wodparse.parsing.errors import ParsingErrorCode
from wodparse.parsing.preprocessor import TextPreprocessor
from wodparse.parsing.schemas import RepSchemeType, WorkoutType
from wodparse.parsing.type_detector import TypeDetector


def _detect(text):
    return TypeDetector().detect(TextPreprocessor().process(text))


def test_amrap_minutes_first():
    result = _detect("20 min AMRAP\n10 Push-ups\n15 Air Squats")
    assert result.workout_type == WorkoutType.AMRAP
    assert result.time_cap_seconds == 1200
    assert result.confidence == 100
    assert result.warning is None


def test_amrap_minutes_after():
    result = _detect("AMRAP 15\n5 Pull-ups")
    assert result.workout_type == WorkoutType.AMRAP
    assert result.time_cap_seconds == 900


def test_amrap_without_duration():
    result = _detect("AMRAP\n5 Pull-ups")
    assert result.workout_type == WorkoutType.AMRAP
    assert result.time_cap_seconds is None
    assert result.confidence == 70
    assert result.warning.code == ParsingErrorCode.MISSING_DURATION


def test_for_time():
    result = _detect("For Time\n50 Wall Balls")
    assert result.workout_type == WorkoutType.FOR_TIME
    assert result.confidence == 100
    assert result.round_count is None


def test_rounds_for_time():
    assert _detect("5 Rounds For Time\n10 Pull-ups").round_count == 5
    assert _detect("3 RFT\n400m Run").round_count == 3


def test_for_time_with_cap():
    result = _detect("For Time\nTime Cap: 12\n100 Burpees")
    assert result.workout_type == WorkoutType.FOR_TIME
    assert result.time_cap_seconds == 720
    assert result.confidence == 100


def test_emom_total_after():
    result = _detect("EMOM 10 min\n5 Power Cleans")
    assert result.workout_type == WorkoutType.EMOM
    assert result.interval_seconds == 60
    assert result.time_cap_seconds == 600
    assert result.round_count == 10


def test_emom_every_n():
    result = _detect("E2MOM x 10\n5 Power Cleans")
    assert result.interval_seconds == 120
    assert result.time_cap_seconds == 600
    assert result.round_count == 5


def test_emom_minutes_first():
    result = _detect("10 min EMOM\n3 Bar Muscle-ups")
    assert result.workout_type == WorkoutType.EMOM
    assert result.interval_seconds == 60
    assert result.time_cap_seconds == 600


def test_every_n_minutes():
    result = _detect("Every 3 minutes for 15 minutes\n400m Run")
    assert result.workout_type == WorkoutType.EMOM
    assert result.interval_seconds == 180
    assert result.time_cap_seconds == 900
    assert result.round_count == 5


def test_tabata_keyword():
    result = _detect("Tabata\nAir Squats")
    assert result.workout_type == WorkoutType.TABATA
    assert result.interval_seconds == 30
    assert result.time_cap_seconds == 240
    assert result.round_count == 8
    assert result.interval_config.work_seconds == 20
    assert result.interval_config.rest_seconds == 10


def test_tabata_notation():
    assert _detect("8 x 20s on / 10s off\nAir Squats").workout_type == WorkoutType.TABATA


def test_intervals():
    result = _detect("5 x 3 min on / 1 min off\n15 Cal Row")
    assert result.workout_type == WorkoutType.INTERVALS
    assert result.interval_config.work_seconds == 180
    assert result.interval_config.rest_seconds == 60
    assert result.interval_seconds == 240
    assert result.time_cap_seconds == 1200
    assert result.round_count == 5


def test_rounds():
    result = _detect("5 Rounds\n10 Pull-ups\n20 Push-ups")
    assert result.workout_type == WorkoutType.ROUNDS
    assert result.round_count == 5
    assert result.confidence == 90


def test_bare_rep_scheme_is_for_time():
    result = _detect("21-15-9\nThrusters (95/65 lb)\nPull-ups")
    assert result.workout_type == WorkoutType.FOR_TIME
    assert result.confidence == 80
    assert result.rep_scheme.reps == [21, 15, 9]
    assert result.rep_scheme.scheme_type == RepSchemeType.DESCENDING


def test_rep_scheme_inside_header():
    result = _detect("21-15-9 For Time\nThrusters\nPull-ups")
    assert result.workout_type == WorkoutType.FOR_TIME
    assert result.confidence == 100
    assert result.rep_scheme.reps == [21, 15, 9]


def test_no_type_defaults_to_for_time():
    result = _detect("10 Burpees")
    assert result.workout_type == WorkoutType.FOR_TIME
    assert result.confidence == 50


def test_empty_text():
    result = _detect("")
    assert result.confidence == 0
    assert result.error.code == ParsingErrorCode.EMPTY_INPUT
