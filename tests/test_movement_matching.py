"""Unit tests for movement name scoring and the in-memory dictionary. No DB needed."""

import pytest

from wodparse.catalog import DEFAULT_MOVEMENTS
from wodparse.database.repository import MovementRepository
from wodparse.movements import (
    InMemoryMovementDictionary,
    MovementDictionary,
    MovementEntry,
    normalize_name,
)

score = MovementRepository.score_match


def test_exact_match():
    assert score("Thrusters", "Thrusters") == 1.0


def test_exact_match_case_insensitive():
    assert score("thrusters", "Thrusters") == 1.0


def test_plural_matches_singular():
    assert score("thruster", "Thrusters") == 1.0


def test_partial_overlap_below_threshold():
    # "chest pull" vs "Chest Press": 1 shared word out of 3 unique
    s = score("chest pull", "Chest Press")
    assert s < 0.5, f"Score {s} should be below threshold for bad match"


def test_no_overlap():
    assert score("purple band stretch", "Back Squat") == 0.0


def test_whole_word_substring():
    """'Snatch' is half of 'Power Snatch', which is enough to be a candidate."""
    assert score("Snatch", "Power Snatch") == 0.5


def test_empty_query():
    assert score("", "Bench Press") == 0.0


def test_empty_name():
    assert score("Bench Press", "") == 0.0


def test_normalize_drops_parentheticals_and_punctuation():
    assert normalize_name("Pull-ups (strict)") == "pull up"
    assert normalize_name("Toes-to-Bar") == "toe to bar"
    assert normalize_name("C&J") == "c and j"


def test_normalize_keeps_double_s():
    assert normalize_name("Press") == "press"
    assert normalize_name("Presses") == "press"


def test_normalize_misspelling_does_not_collapse_to_real_name():
    assert normalize_name("Burpies") == "burpy"
    assert normalize_name("Burpees") == "burpee"


@pytest.fixture
def dictionary():
    return InMemoryMovementDictionary()


def test_in_memory_dictionary_satisfies_protocol(dictionary):
    assert isinstance(dictionary, MovementDictionary)
    assert len(dictionary) == len(DEFAULT_MOVEMENTS)


@pytest.mark.asyncio
async def test_normalize_alias(dictionary):
    assert await dictionary.normalize("T2B") == "toes_to_bar"
    assert await dictionary.normalize("pull-ups") == "pull_up"
    assert await dictionary.normalize("DUs") == "double_under"


@pytest.mark.asyncio
async def test_normalize_unknown(dictionary):
    assert await dictionary.normalize("burpies") is None


@pytest.mark.asyncio
async def test_get_by_canonical_name(dictionary):
    identity = await dictionary.get_by_canonical_name("thruster")
    assert identity.display_name == "Thrusters"
    assert identity.category == "weightlifting"
    assert identity.id == 1
    assert await dictionary.get_by_canonical_name("nope") is None


@pytest.mark.asyncio
async def test_search_returns_ranked_candidates(dictionary):
    matches = await dictionary.search("Power")
    assert [m.canonical_name for m in matches] == ["power_clean", "power_snatch"]


@pytest.mark.asyncio
async def test_search_no_candidates(dictionary):
    assert await dictionary.search("purple band stretch") == []


@pytest.mark.asyncio
async def test_list_names(dictionary):
    names = await dictionary.list_names()
    assert "Burpees" in names
    assert len(names) == len(DEFAULT_MOVEMENTS)


@pytest.mark.asyncio
async def test_custom_entries():
    dictionary = InMemoryMovementDictionary(
        [MovementEntry(canonical_name="devil_press", display_name="Devil Press", aliases=["DP"])]
    )
    assert await dictionary.normalize("dp") == "devil_press"
    assert await dictionary.normalize("thrusters") is None


def test_normalize_short_plurals():
    assert normalize_name("Sit-ups") == "sit up"
    assert normalize_name("DUs") == normalize_name("DU") == "du"
    assert normalize_name("Ab") == "ab"
