import math
from typing import Optional

from .types import AttemptOutcome, Clue

DECAY_WINDOW_SECONDS = 15


def round_half_up(value: float) -> int:
    # Halves round toward +infinity, unlike the built-in round().
    return int(math.floor(value + 0.5))


def points_lost(value: int, elapsed_seconds: float) -> float:
    """Linear decay from the full value to zero over the decay window."""
    if value < 0:
        raise ValueError(f"value must be >= 0, got {value}")
    if elapsed_seconds < 0:
        raise ValueError(f"elapsed_seconds must be >= 0, got {elapsed_seconds}")
    return min(elapsed_seconds * (value / DECAY_WINDOW_SECONDS), value)


def score(value: int, elapsed_seconds: float, outcome: AttemptOutcome) -> int:
    """Integer score delta for one clue.

    Correct answers earn the decayed value (never below zero), incorrect
    answers lose the full value however fast they came, skips are free.
    """
    lost = points_lost(value, elapsed_seconds)
    if outcome is AttemptOutcome.CORRECT:
        return round_half_up(max(0, value - lost))
    if outcome is AttemptOutcome.INCORRECT:
        return -round_half_up(value)
    if outcome is AttemptOutcome.SKIPPED:
        return 0
    raise ValueError(f"unknown outcome {outcome!r}")


def score_clue(clue: Clue, elapsed_seconds: float, outcome: AttemptOutcome,
               wager: Optional[int] = None) -> int:
    """Score a board clue, playing daily doubles for the wager instead of face value."""
    if clue.is_wager_clue:
        if wager is None:
            raise ValueError(f"clue {clue.clue_id} is a daily double and needs a wager")
        return score(wager, elapsed_seconds, outcome)
    return score(clue.face_value, elapsed_seconds, outcome)
