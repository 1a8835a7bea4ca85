from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional

logger = logging.getLogger(__name__)

# Project-local wordlist lives here:
_DATA_DIR = Path("data/wordlists")
_DEFAULT_FILE = "words.txt"

DEFAULT_MAX_ROUNDS = 10
DEFAULT_SCORE_INCREASE = 20

# Last-resort catalog when no wordlist file can be read.
_BUILTIN_WORDS = (
    "animal", "auto", "anecdote", "alphabet", "all", "awesome", "arise", "balloon",
    "basket", "bench", "best", "birthday", "book", "briefcase", "camera", "camping",
    "candle", "cat", "cauliflower", "chat", "children", "class", "classic",
    "classroom", "coffee", "colorful", "cookie", "creative", "cruise", "dance",
    "daytime", "dinosaur", "doorknob", "dine", "dream", "dusk", "eating", "elephant",
    "emerald", "eerie", "electric", "finish", "flowers", "follow", "fox", "frame",
    "free", "frequent", "funnel", "green", "guitar", "grocery", "glass", "great",
    "giggle", "haircut", "half", "homemade", "happen", "honey", "hurry", "hundred",
)


class WordSourceError(ValueError):
    """Raised when the word catalog or game constants cannot support a game."""


@dataclass(frozen=True)
class WordSource:
    """
    Read-only supplier of the word catalog and the game constants.

    Parameters
    ----------
    catalog : frozenset[str]
        Candidate answer words. Every word needs at least two distinct
        characters, otherwise it has no scrambled form that differs from it.
    max_rounds : int
        Number of rounds (words) in one game.
    score_increase : int
        Points awarded for each correct guess.
    """

    catalog: FrozenSet[str]
    max_rounds: int = DEFAULT_MAX_ROUNDS
    score_increase: int = DEFAULT_SCORE_INCREASE

    def __post_init__(self) -> None:
        # Because dataclass is frozen, use object.__setattr__ for normalization.
        object.__setattr__(self, "catalog", frozenset(self.catalog))

    def validate(self) -> "WordSource":
        """
        Reject configurations the engine cannot play to completion.

        Rules
        -----
        - The catalog must be non-empty.
        - `max_rounds` >= 1 and `score_increase` >= 0.
        - The catalog must hold at least `max_rounds` words; a game never draws
          more than `max_rounds` distinct words.
        - Each word must be non-empty with at least two distinct characters.

        Returns the source itself so callers can chain it.
        """
        if not self.catalog:
            raise WordSourceError("Word catalog is empty.")
        if self.max_rounds < 1:
            raise WordSourceError(f"`max_rounds` must be >= 1, got {self.max_rounds}.")
        if self.score_increase < 0:
            raise WordSourceError(f"`score_increase` must be >= 0, got {self.score_increase}.")
        if len(self.catalog) < self.max_rounds:
            raise WordSourceError(
                f"Word catalog has {len(self.catalog)} words but a game needs {self.max_rounds}."
            )
        degenerate = sorted(w for w in self.catalog if len(set(w)) < 2)
        if degenerate:
            raise WordSourceError(
                "Words need at least two distinct characters to be scrambled: "
                + ", ".join(repr(w) for w in degenerate)
            )
        return self


def load_catalog(path: Path) -> List[str]:
    """
    Read a text file (UTF-8) and return non-empty, stripped, lowercase lines.

    Notes
    -----
    - Returns an empty list if the file is missing.
    - Each valid line should contain exactly one word.
    """
    if not path.exists() or not path.is_file():
        logger.warning("Wordlist file not found: %s", path)
        return []
    raw = path.read_text(encoding="utf-8", errors="ignore").splitlines()
    words = [ln.strip().lower() for ln in raw if ln.strip()]
    logger.info("Loaded %s words from %s", len(words), path)
    return words


def _int_setting(value: Optional[int], env_key: str, default: int) -> int:
    """Resolve an integer setting: explicit argument, then env var, then default."""
    if value is not None:
        return value
    raw = os.getenv(env_key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise WordSourceError(f"{env_key} must be an integer, got {raw!r}.") from None


def load_word_source(
    path: Optional[Path] = None,
    max_rounds: Optional[int] = None,
    score_increase: Optional[int] = None,
    fallback: Iterable[str] = _BUILTIN_WORDS,
) -> WordSource:
    """
    Build a validated `WordSource` from files and environment settings.

    Fallback strategy
    -----------------
    1) Read `path`, or the file named by `WORDLIST_PATH`, or `data/wordlists/words.txt`.
    2) If that yields no words, use the built-in catalog.

    `MAX_ROUNDS` and `SCORE_INCREASE` env vars override the defaults (10 and 20)
    when the matching argument is not given.

    Raises
    ------
    WordSourceError
        If a setting is malformed or the resulting source fails `validate()`.
    """
    if path is None:
        env_path = os.getenv("WORDLIST_PATH")
        path = Path(env_path) if env_path else _DATA_DIR / _DEFAULT_FILE

    words = load_catalog(Path(path))
    if not words:
        words = list(fallback)
        logger.warning("Using built-in catalog (%s words)", len(words))

    source = WordSource(
        catalog=frozenset(words),
        max_rounds=_int_setting(max_rounds, "MAX_ROUNDS", DEFAULT_MAX_ROUNDS),
        score_increase=_int_setting(score_increase, "SCORE_INCREASE", DEFAULT_SCORE_INCREASE),
    )
    return source.validate()
