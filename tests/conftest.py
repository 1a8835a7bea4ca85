import random

import pytest

from src.core.engine import GameEngine
from src.core.wordlist import WordSource


CATALOG = {"cat", "dog"}


@pytest.fixture()
def source():
    return WordSource(catalog=CATALOG, max_rounds=2, score_increase=10)


@pytest.fixture()
def engine(source):
    return GameEngine(source, rng=random.Random(1234))


@pytest.fixture()
def solve():
    """Return the catalog word the scrambled letters were built from."""
    def _solve(scrambled, catalog=CATALOG):
        matches = [w for w in catalog if sorted(w) == sorted(scrambled)]
        assert len(matches) == 1, f"ambiguous or unknown scramble {scrambled!r}"
        return matches[0]
    return _solve


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("WORDLIST_PATH", "MAX_ROUNDS", "SCORE_INCREASE"):
        monkeypatch.delenv(key, raising=False)
