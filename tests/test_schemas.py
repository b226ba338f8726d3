"""Tests for the parsed-workout value models."""

import pytest

from wodparse.parsing.schemas import (
    Distance,
    DistanceUnit,
    IntervalConfig,
    LoadUnit,
    ParsedMovement,
    RepScheme,
    RepSchemeType,
    Weight,
    classify_reps,
)


@pytest.mark.parametrize(
    "reps, expected",
    [
        ([21, 15, 9], RepSchemeType.DESCENDING),
        ([5, 4, 3, 2, 1], RepSchemeType.DESCENDING),
        ([1, 2, 3, 4, 5], RepSchemeType.ASCENDING),
        ([10, 20], RepSchemeType.ASCENDING),
        ([5, 5, 5, 5, 5], RepSchemeType.FIXED),
        ([10, 10], RepSchemeType.FIXED),
        ([10, 10, 5], RepSchemeType.CUSTOM),
        ([21, 15, 15, 9], RepSchemeType.CUSTOM),
        ([10, 20, 10], RepSchemeType.CUSTOM),
    ],
)
def test_rep_scheme_classification(reps, expected):
    scheme = RepScheme.from_reps(reps)
    assert scheme.scheme_type == expected
    assert classify_reps(scheme.reps) == scheme.scheme_type


def test_rep_scheme_totals():
    scheme = RepScheme.from_reps([21, 15, 9], original_text="21-15-9")
    assert scheme.total_reps == 45
    assert str(scheme) == "21-15-9"


def test_rep_scheme_needs_two_rounds():
    with pytest.raises(ValueError):
        RepScheme.from_reps([21])


def test_weight_conversions():
    assert Weight(value=100, unit=LoadUnit.KG).to_kg() == 100
    assert Weight(value=100, unit=LoadUnit.LB).to_kg() == pytest.approx(45.3592)
    assert Weight(value=1, unit=LoadUnit.POOD).to_kg() == pytest.approx(16.38)
    assert Weight(value=100, unit=LoadUnit.KG).to_lb() == pytest.approx(220.462)


def test_distance_conversions():
    assert Distance(value=5, unit=DistanceUnit.KILOMETERS).to_meters() == 5000
    assert Distance(value=400, unit=DistanceUnit.METERS).to_kilometers() == pytest.approx(0.4)
    assert Distance(value=1, unit=DistanceUnit.MILES).to_kilometers() == pytest.approx(1.609344)


def test_interval_total_seconds():
    assert IntervalConfig(rounds=8, work_seconds=20, rest_seconds=10).total_seconds == 240


def _make_movement(**fields):
    return ParsedMovement(sequence_order=1, original_text="line", **fields)


def test_load_pair():
    movement = _make_movement(
        load=Weight(value=95, unit=LoadUnit.LB, original_text="95/65 lb"),
        load_female=Weight(value=65, unit=LoadUnit.LB),
    )
    pair = movement.load_pair
    assert pair.male.value == 95
    assert pair.female.value == 65
    assert pair.original_text == "95/65 lb"
    assert str(pair) == "95/65 lb"


def test_load_pair_with_mixed_units():
    movement = _make_movement(
        load=Weight(value=50, unit=LoadUnit.LB),
        load_female=Weight(value=15, unit=LoadUnit.KG),
    )
    assert str(movement.load_pair) == "50 lb/15 kg"


def test_single_values_have_no_pair():
    movement = _make_movement(load=Weight(value=135, unit=LoadUnit.LB), calories=15)
    assert movement.load_pair is None
    assert movement.calorie_pair is None


def test_calorie_pair():
    pair = _make_movement(calories=21, calories_female=15).calorie_pair
    assert (pair.male, pair.female) == (21, 15)
    assert str(pair) == "21/15 cal"
