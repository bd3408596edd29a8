from dataclasses import dataclass
from typing import Optional

from .errors import InvalidWager

WAGER_FLOOR = 2000


def max_wager(current_score: int, is_final_round: bool = False) -> int:
    """Highest wager allowed for a daily double or the final round.

    Both rounds let a player bet up to the floor even with a low or negative
    score; above the floor the cap is the current score.
    """
    if is_final_round and current_score <= 0:
        return WAGER_FLOOR
    return max(WAGER_FLOOR, current_score)


@dataclass(frozen=True)
class WagerCheck:
    accepted: bool
    wager: object
    max_wager: int
    reason: Optional[str] = None

    def __bool__(self):
        return self.accepted

    def raise_for_rejection(self) -> None:
        if not self.accepted:
            raise InvalidWager(self.wager, self.max_wager, self.reason)


def validate(wager, current_score: int, is_final_round: bool = False) -> WagerCheck:
    limit = max_wager(current_score, is_final_round)
    if isinstance(wager, bool) or not isinstance(wager, int):
        return WagerCheck(False, wager, limit, 'Wager must be a whole number')
    if wager < 0 or wager > limit:
        return WagerCheck(False, wager, limit, f'Wager must be between $0 and ${limit:,}')
    return WagerCheck(True, wager, limit)
