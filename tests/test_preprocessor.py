"""Tests for text normalization, title extraction and line classification."""

from wodparse.parsing.preprocessor import TextPreprocessor, extract_title, normalize_text

FRAN = "Fran\n21-15-9\nThrusters (95/65 lb)\nPull-ups"


def test_normalize_text():
    assert normalize_text("21–15–9\r\nThrusters  ×  10") == "21-15-9\nThrusters x 10"
    assert normalize_text("“Cindy”") == '"Cindy"'
    assert normalize_text("AMRAP 20\n\n\n\n5 Pull-ups") == "AMRAP 20\n\n5 Pull-ups"


def test_benchmark_names_are_titles():
    assert extract_title("Fran", "21-15-9") == "Fran"
    assert extract_title("Fran") == "Fran"
    assert extract_title('"Murph":', "For Time") == "Murph"


def test_other_titles_need_a_header_after_them():
    assert extract_title("The Chief", "AMRAP 3 min") == "The Chief"
    assert extract_title("Pull-ups", "Thrusters") is None
    assert extract_title("The Chief") is None


def test_lines_with_numbers_or_types_are_not_titles():
    assert extract_title("21 Thrusters", "For Time") is None
    assert extract_title("For Time", "21 Thrusters") is None


def test_fran():
    result = TextPreprocessor().process(FRAN)
    assert result.title == "Fran"
    assert result.lines == ["21-15-9", "Thrusters (95/65 lb)", "Pull-ups"]
    assert result.header_lines == ["21-15-9"]
    assert result.movement_lines == ["Thrusters (95/65 lb)", "Pull-ups"]
    assert result.movement_line_numbers == [3, 4]
    assert result.rep_scheme.reps == [21, 15, 9]
    assert result.movement_rep_schemes == {}


def test_line_numbers_count_blank_lines():
    result = TextPreprocessor().process("20 min AMRAP\n\n10 Push-ups\n15 Air Squats")
    assert result.title is None
    assert result.movement_line_numbers == [3, 4]


def test_different_schemes_stay_on_their_movements():
    result = TextPreprocessor().process("21-15-9\nThrusters\n10-8-6\nPull-ups")
    assert result.rep_scheme is None
    assert result.movement_rep_schemes[0].reps == [21, 15, 9]
    assert result.movement_rep_schemes[1].reps == [10, 8, 6]


def test_trailing_scheme_applies_to_workout():
    result = TextPreprocessor().process("Thrusters\nPull-ups\n21-15-9")
    assert result.title is None
    assert result.movement_lines == ["Thrusters", "Pull-ups"]
    assert result.rep_scheme.reps == [21, 15, 9]


def test_single_line_has_no_title():
    result = TextPreprocessor().process("Fran")
    assert result.title is None
    assert result.movement_lines == ["Fran"]


def test_empty():
    result = TextPreprocessor().process("")
    assert result.is_empty
    assert result.lines == []
