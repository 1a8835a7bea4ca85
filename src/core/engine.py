from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import Callable, List, Optional, Sequence, Set

from .state import GameState
from .wordlist import WordSource, WordSourceError

logger = logging.getLogger(__name__)

# Retry caps for the two rejection-sampling loops.
MAX_SHUFFLE_ATTEMPTS = 100
MAX_DRAW_ATTEMPTS = 100

StateListener = Callable[[GameState], None]


def shuffle_word(word: str, rng: random.Random) -> str:
    """
    Return a permutation of `word` that differs from `word` itself.

    Notes
    -----
    - Shuffles and retries up to `MAX_SHUFFLE_ATTEMPTS` times; if every attempt
      gives the word back, rotates it left by one character instead.
    - A rotation of a word with two or more distinct characters never equals the
      word, so the result always differs from the input.
    """
    if len(set(word)) < 2:
        raise WordSourceError(f"Cannot scramble {word!r}: it needs two distinct characters.")

    chars = list(word)
    for _ in range(MAX_SHUFFLE_ATTEMPTS):
        rng.shuffle(chars)
        scrambled = "".join(chars)
        if scrambled != word:
            return scrambled
    return word[1:] + word[:1]


def pick_unused_word(words: Sequence[str], used: Set[str], rng: random.Random) -> str:
    """
    Pick a word from `words` that is not in `used`.

    Samples the full catalog uniformly and rejects used words, up to
    `MAX_DRAW_ATTEMPTS` times; then picks uniformly among the unused remainder.
    """
    for _ in range(MAX_DRAW_ATTEMPTS):
        word = rng.choice(words)
        if word not in used:
            return word
    remaining = [w for w in words if w not in used]
    if not remaining:
        raise WordSourceError("Every word in the catalog has already been used.")
    return rng.choice(remaining)


class GameEngine:
    """
    Owns the progression of one Unscramble game session.

    The engine keeps the answer, the set of words already shown and the
    player's pending guess private, and publishes an immutable `GameState`
    after every transition. Listeners registered with `subscribe` receive
    each new snapshot.

    Not thread-safe: callers must serialize `reset`, `set_pending_guess`,
    `submit_guess` and `skip_word`.
    """

    def __init__(self, source: WordSource, rng: Optional[random.Random] = None) -> None:
        self._source = source.validate()
        self._words = tuple(sorted(source.catalog))
        self._rng = rng or random.Random()
        self._listeners: List[StateListener] = []

        self._current_word: Optional[str] = None
        self._used_words: Set[str] = set()
        self._pending_guess = ""
        self._state = GameState()

        self.reset()

    # ----- read access -----

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def pending_guess(self) -> str:
        return self._pending_guess

    @property
    def max_rounds(self) -> int:
        return self._source.max_rounds

    @property
    def score_increase(self) -> int:
        return self._source.score_increase

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register `listener` to be called with every newly published state.

        Returns a callable that removes the listener; calling it twice is a no-op.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ----- operations -----

    def reset(self) -> None:
        """Start a fresh game in place: round 1, score 0, flags cleared."""
        self._used_words.clear()
        self._pending_guess = ""
        self._publish(GameState(scrambled_word=self._pick_random_word_and_shuffle()))
        logger.info("New game started (%s rounds)", self.max_rounds)

    def set_pending_guess(self, text: str) -> None:
        self._pending_guess = text

    def submit_guess(self) -> None:
        """
        Compare the pending guess with the answer (case-insensitive).

        Behavior
        --------
        - Match: adds `score_increase` and advances to the next round (or ends the game).
        - No match: republishes the state with `guess_was_wrong=True`; nothing else changes.
        - The pending guess is cleared in both cases.
        - Ignored once the game is over, apart from clearing the pending guess.
        """
        guess, self._pending_guess = self._pending_guess, ""
        if self._state.is_game_over:
            return

        if self._current_word is not None and guess.lower() == self._current_word.lower():
            self._advance(self._state.score + self.score_increase)
        else:
            logger.debug("Wrong guess in round %s", self._state.round_count)
            self._publish(replace(self._state, guess_was_wrong=True))

    def skip_word(self) -> None:
        """Move to the next round without scoring. Ignored once the game is over."""
        self._pending_guess = ""
        if self._state.is_game_over:
            return
        self._advance(self._state.score)

    # ----- internals -----

    def _advance(self, updated_score: int) -> None:
        if len(self._used_words) == self.max_rounds:
            # Last round done; keep the final word and round on display.
            self._publish(
                replace(self._state, guess_was_wrong=False, score=updated_score, is_game_over=True)
            )
            logger.info("Game over with score %s", updated_score)
            return

        self._publish(
            replace(
                self._state,
                guess_was_wrong=False,
                scrambled_word=self._pick_random_word_and_shuffle(),
                round_count=self._state.round_count + 1,
                score=updated_score,
            )
        )
        logger.debug("Advanced to round %s (score %s)", self._state.round_count, updated_score)

    def _pick_random_word_and_shuffle(self) -> str:
        word = pick_unused_word(self._words, self._used_words, self._rng)
        self._used_words.add(word)
        self._current_word = word
        return shuffle_word(word, self._rng)

    def _publish(self, state: GameState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
