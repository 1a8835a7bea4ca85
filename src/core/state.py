from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameState:
    """
    Immutable snapshot of an Unscramble game, as shown to the player.

    Notes
    -----
    - This object is frozen so that the engine can publish a brand new snapshot
      after every transition; observers can hold on to an old one safely.
    - The answer for the current round is deliberately NOT part of the snapshot;
      it stays private to `core.engine.GameEngine`.
    - All rule transitions (scoring, rounds, game over) live in `core.engine`;
      this file only defines the data structure and basic validation.
    """

    scrambled_word: str = ""
    round_count: int = 1
    score: int = 0
    guess_was_wrong: bool = False
    is_game_over: bool = False

    def __post_init__(self) -> None:
        """
        Validate numeric fields.

        Validation
        ----------
        - `round_count` must be >= 1 (rounds are 1-based).
        - `score` must be >= 0.
        """
        if self.round_count < 1:
            raise ValueError("`round_count` must be >= 1.")
        if self.score < 0:
            raise ValueError("`score` must be >= 0.")
