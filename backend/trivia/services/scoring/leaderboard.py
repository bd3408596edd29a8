from typing import Dict, Iterable, List, Optional

from .types import GameResult, LeaderboardEntry, PlayerId

UNKNOWN_PLAYER_NAME = 'Unknown'


def _display_order(result: GameResult):
    # player_id breaks exact score/time ties so storage order never leaks through.
    return (-result.final_score, result.completed_at, str(result.player_id))


def rank(results: Iterable[GameResult]) -> List[LeaderboardEntry]:
    """Rank results with standard competition ranking.

    Higher scores first; equal scores share a rank and are displayed
    earliest completion first. The rank after a tied group skips ahead by
    the size of the group (1, 1, 3).
    """
    ordered = sorted(results, key=_display_order)
    entries = []
    current_rank = 0
    previous_score = None
    for position, result in enumerate(ordered, start=1):
        if result.final_score != previous_score:
            current_rank = position
            previous_score = result.final_score
        entries.append(LeaderboardEntry(
            player_id=result.player_id,
            display_name=result.display_name or UNKNOWN_PLAYER_NAME,
            final_score=result.final_score,
            completed_at=result.completed_at,
            rank=current_rank,
        ))
    return entries


def best_per_player(results: Iterable[GameResult]) -> List[GameResult]:
    """Keep one result per player: the best score, earliest completion on a tie."""
    best: Dict[PlayerId, GameResult] = {}
    for result in results:
        current = best.get(result.player_id)
        if current is None or _display_order(result) < _display_order(current):
            best[result.player_id] = result
    return list(best.values())


def rank_of(entries: Iterable[LeaderboardEntry], player_id: PlayerId) -> Optional[int]:
    for entry in entries:
        if entry.player_id == player_id:
            return entry.rank
    return None
