"""Tests for the issue taxonomy and the per-parse aggregator."""

from wodparse.parsing.aggregator import IssueAggregator
from wodparse.parsing.errors import (
    MESSAGES,
    ParsingErrorCode,
    ParsingSeverity,
    create_issue,
    default_severity,
    get_message,
    get_suggestion,
)


def _make_issue(code=ParsingErrorCode.UNKNOWN_MOVEMENT, severity=None, line=None, context=None):
    return create_issue(code, severity, "x", line_number=line, context=context)


def test_code_tag_and_band():
    code = ParsingErrorCode.UNRECOGNIZED_MOVEMENT_FORMAT
    assert code.tag == "UnrecognizedMovementFormat"
    assert code.band == 300
    assert int(ParsingErrorCode.EMPTY_INPUT) == 100
    assert ParsingErrorCode.TIMEOUT.tag == "Timeout"


def test_default_severity():
    assert default_severity(ParsingErrorCode.EMPTY_INPUT) == ParsingSeverity.ERROR
    assert default_severity(ParsingErrorCode.TIMEOUT) == ParsingSeverity.ERROR
    assert default_severity(ParsingErrorCode.NO_MOVEMENTS_DETECTED) == ParsingSeverity.ERROR
    assert default_severity(ParsingErrorCode.UNRECOGNIZED_MOVEMENT_FORMAT) == ParsingSeverity.ERROR
    assert default_severity(ParsingErrorCode.UNKNOWN_MOVEMENT) == ParsingSeverity.WARNING
    assert default_severity(ParsingErrorCode.MISSING_DURATION) == ParsingSeverity.WARNING
    assert default_severity(ParsingErrorCode.DUPLICATE_MOVEMENT) == ParsingSeverity.INFO


def test_every_code_has_a_message():
    assert set(MESSAGES) == set(ParsingErrorCode)


def test_message_formatting():
    assert get_message(ParsingErrorCode.UNKNOWN_MOVEMENT, "Burpies") == "Movement 'Burpies' not recognized."
    assert (
        get_message(ParsingErrorCode.INPUT_TOO_LONG, 10000)
        == "Workout text exceeds maximum length of 10,000 characters."
    )


def test_message_falls_back_to_template_on_missing_args():
    template = MESSAGES[ParsingErrorCode.AMBIGUOUS_MOVEMENT][0]
    assert get_message(ParsingErrorCode.AMBIGUOUS_MOVEMENT, "only one") == template


def test_create_issue_defaults():
    issue = create_issue(ParsingErrorCode.MISSING_DURATION)
    assert issue.severity == ParsingSeverity.WARNING
    assert issue.suggestion == get_suggestion(ParsingErrorCode.MISSING_DURATION)
    assert issue.similar_names is None
    assert not issue.is_error


def test_create_issue_overrides():
    issue = create_issue(
        ParsingErrorCode.UNKNOWN_MOVEMENT,
        ParsingSeverity.ERROR,
        "Burpies",
        line_number=2,
        suggestion="Try again.",
        similar_names=[],
    )
    assert issue.is_error
    assert issue.line_number == 2
    assert issue.suggestion == "Try again."
    assert issue.similar_names is None


def test_duplicate_on_same_line_is_dropped():
    agg = IssueAggregator()
    assert agg.add(_make_issue(line=3))
    assert not agg.add(_make_issue(line=3))
    assert agg.add(_make_issue(line=4))
    assert len(agg) == 2


def test_duplicate_by_context_prefix():
    agg = IssueAggregator()
    assert agg.add(_make_issue(context="a" * 60))
    assert not agg.add(_make_issue(context="a" * 50 + "b" * 10))
    assert agg.add(_make_issue(context="b" * 60))


def test_none_is_ignored():
    agg = IssueAggregator()
    assert not agg.add(None)
    assert len(agg) == 0


def test_error_ceiling_still_accepts_warnings():
    agg = IssueAggregator(max_errors=2)
    accepted = agg.add_all(
        _make_issue(ParsingErrorCode.UNRECOGNIZED_MOVEMENT_FORMAT, line=n) for n in (1, 2, 3)
    )
    assert accepted == 2
    assert agg.error_count == 2
    assert agg.error_limit_reached
    assert agg.add(_make_issue(line=9))
    assert agg.warning_count == 1


def test_sorted_issues_errors_first():
    agg = IssueAggregator()
    agg.add(_make_issue(line=1))
    agg.add(_make_issue(ParsingErrorCode.DUPLICATE_MOVEMENT, line=2))
    agg.add(_make_issue(ParsingErrorCode.UNRECOGNIZED_MOVEMENT_FORMAT, line=3))
    severities = [i.severity for i in agg.sorted_issues()]
    assert severities == [ParsingSeverity.ERROR, ParsingSeverity.WARNING, ParsingSeverity.INFO]


def test_summary_and_clear():
    agg = IssueAggregator()
    agg.add(_make_issue(ParsingErrorCode.UNRECOGNIZED_MOVEMENT_FORMAT, line=1))
    agg.add(_make_issue(ParsingErrorCode.UNRECOGNIZED_MOVEMENT_FORMAT, line=2))
    agg.add(_make_issue(line=3))

    summary = agg.summary()
    assert summary.error_count == 2
    assert summary.warning_count == 1
    assert summary.total == 3
    assert summary.has_errors
    assert summary.errors_by_code == {ParsingErrorCode.UNRECOGNIZED_MOVEMENT_FORMAT: 2}
    assert summary.warnings_by_code == {ParsingErrorCode.UNKNOWN_MOVEMENT: 1}

    agg.clear()
    assert len(agg) == 0
    assert not agg.has_errors
    assert agg.add(_make_issue(line=3))
