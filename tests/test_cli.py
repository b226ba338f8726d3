"""Tests for the command-line front end."""

import json

import pytest

from wodparse.cli import format_result, main
from wodparse.core import WorkoutParser

FRAN = "Fran\n21-15-9\nThrusters (95/65 lb)\nPull-ups\n"


@pytest.fixture
def workout_file(tmp_path):
    path = tmp_path / "fran.txt"
    path.write_text(FRAN, encoding="utf-8")
    return path


@pytest.mark.asyncio
async def test_format_result():
    result = await WorkoutParser().parse(FRAN)
    text = format_result(result)
    assert "Workout: Fran" in text
    assert "Type: For Time" in text
    assert "Rep scheme: 21-15-9 (descending, 45 reps)" in text
    assert "1. Thrusters @ 95/65 lb" in text
    assert "2. Pull-ups" in text
    assert "Confidence: 96 (High)" in text


@pytest.mark.asyncio
async def test_format_result_shows_suggestions():
    result = await WorkoutParser().parse("10 Burpies")
    text = format_result(result)
    assert "Warning: line 1:" in text
    assert "Did you mean: Burpees?" in text
    assert "(unrecognized)" in text


@pytest.mark.asyncio
async def test_main_with_file(workout_file, capsys):
    assert await main([str(workout_file)]) == 0
    out = capsys.readouterr().out
    assert "Type: For Time" in out


@pytest.mark.asyncio
async def test_main_json(workout_file, capsys):
    assert await main([str(workout_file), "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["confidence"] == 96
    assert data["workout"]["name"] == "Fran"
    assert len(data["workout"]["movements"]) == 2


@pytest.mark.asyncio
async def test_main_validate_only(tmp_path, capsys):
    path = tmp_path / "empty.txt"
    path.write_text("   ", encoding="utf-8")
    assert await main([str(path), "--validate"]) == 1
    assert "Workout text cannot be empty." in capsys.readouterr().out


@pytest.mark.asyncio
async def test_main_failed_parse_exit_code(tmp_path):
    path = tmp_path / "junk.txt"
    path.write_text("Just some text here", encoding="utf-8")
    assert await main([str(path)]) == 1
