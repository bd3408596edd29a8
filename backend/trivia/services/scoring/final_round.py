from dataclasses import dataclass

from . import wagers
from .answers import matches
from .clues import round_half_up


@dataclass(frozen=True)
class FinalRoundOutcome:
    correct: bool
    wager: int
    starting_score: int
    final_score: int


def resolve(current_score: int, wager: int, submitted_answer, canonical_answer: str) -> FinalRoundOutcome:
    """Settle the final-round wager. Raises InvalidWager before judging the answer."""
    wagers.validate(wager, current_score, is_final_round=True).raise_for_rejection()
    correct = matches(submitted_answer, canonical_answer)
    final_score = round_half_up(current_score + wager if correct else current_score - wager)
    return FinalRoundOutcome(correct, wager, current_score, final_score)


def settle(current_score: int, wager: int, submitted_answer, canonical_answer: str) -> int:
    return resolve(current_score, wager, submitted_answer, canonical_answer).final_score
