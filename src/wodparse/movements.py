"""Movement dictionary interface and an in-memory implementation."""

import re
from typing import Iterable, Protocol, runtime_checkable

from pydantic import BaseModel, Field

from .parsing.schemas import MovementIdentity

SEARCH_THRESHOLD = 0.5
MIN_SUBSTRING_LENGTH = 4


@runtime_checkable
class MovementDictionary(Protocol):
    """Lookup service the parser resolves movement names against.

    Implementations may also provide ``async def list_names() -> list[str]``
    returning display names. When present, those names feed the "did you
    mean" suggestions on unknown movements; without it there are none.
    """

    async def normalize(self, name: str) -> str | None:
        """Canonical name for an exact name or alias match, else None."""
        ...

    async def get_by_canonical_name(self, canonical_name: str) -> MovementIdentity | None:
        ...

    async def search(self, text: str) -> list[MovementIdentity]:
        """Ranked fuzzy matches, best first. May be empty."""
        ...


class MovementEntry(BaseModel):
    """A movement with its aliases, as stored in a catalog."""

    canonical_name: str = Field(description="Stable key, e.g. 'pull_up'")
    display_name: str = Field(description="Name shown to users, e.g. 'Pull-ups'")
    category: str = Field(default="gymnastics", description="weightlifting, gymnastics, cardio, strongman")
    aliases: list[str] = Field(default_factory=list)
    is_bodyweight: bool = False
    description: str | None = None


def _singular(word: str) -> str:
    # "ups", "DUs" and "WBs" lose their s; two-letter words are left alone
    if len(word) <= 2:
        return word
    if word.endswith("sses"):
        return word[:-2]
    if word.endswith("ies"):
        return word[:-3] + "y"
    if word.endswith("s") and not word.endswith(("ss", "us")):
        return word[:-1]
    return word


def normalize_name(name: str) -> str:
    """Lowercase, drop parentheticals and punctuation, singularize each word.

    ``"Pull-ups (strict)"`` becomes ``"pull up"``.
    """
    text = re.sub(r"\([^)]*\)", " ", name.lower())
    text = text.replace("&", " and ")
    text = re.sub(r"[-_/]", " ", text)
    text = re.sub(r"[^a-z0-9 ]", "", text)
    return " ".join(_singular(word) for word in text.split())


def score_match(query: str, name: str) -> float:
    """Score a name match using word-overlap Jaccard similarity.

    Tokenizes both strings, computes |intersection| / |union|. A query that is
    a substring of the name (or the other way round) scores at least the
    length ratio of the two.
    """
    q = normalize_name(query)
    n = normalize_name(name)
    q_tokens = set(q.split())
    n_tokens = set(n.split())
    if not q_tokens or not n_tokens:
        return 0.0
    score = len(q_tokens & n_tokens) / len(q_tokens | n_tokens)

    shorter, longer = sorted((q, n), key=len)
    if len(shorter) >= MIN_SUBSTRING_LENGTH and re.search(rf"\b{re.escape(shorter)}\b", longer):
        score = max(score, len(shorter) / len(longer))
    return score


class InMemoryMovementDictionary:
    """Movement dictionary backed by a list of ``MovementEntry`` records."""

    def __init__(self, entries: Iterable[MovementEntry] | None = None) -> None:
        if entries is None:
            from .catalog import DEFAULT_MOVEMENTS

            entries = DEFAULT_MOVEMENTS
        self._identities: dict[str, MovementIdentity] = {}
        self._names: dict[str, list[str]] = {}
        self._lookup: dict[str, str] = {}

        for movement_id, entry in enumerate(entries, 1):
            identity = MovementIdentity(
                id=movement_id,
                canonical_name=entry.canonical_name,
                display_name=entry.display_name,
                category=entry.category,
            )
            self._identities[entry.canonical_name] = identity
            names = [entry.canonical_name, entry.display_name, *entry.aliases]
            self._names[entry.canonical_name] = names
            for name in names:
                self._lookup.setdefault(normalize_name(name), entry.canonical_name)

    def __len__(self) -> int:
        return len(self._identities)

    async def normalize(self, name: str) -> str | None:
        return self._lookup.get(normalize_name(name))

    async def get_by_canonical_name(self, canonical_name: str) -> MovementIdentity | None:
        return self._identities.get(canonical_name.lower())

    async def search(self, text: str) -> list[MovementIdentity]:
        scored = []
        for canonical, names in self._names.items():
            best = max(score_match(text, name) for name in names)
            if best >= SEARCH_THRESHOLD:
                scored.append((best, self._identities[canonical]))
        scored.sort(key=lambda item: item[0], reverse=True)
        return [identity for _, identity in scored]

    async def list_names(self) -> list[str]:
        return [identity.display_name for identity in self._identities.values()]
