"""Active game sessions and the hand-off from the core to storage.

Sessions live only in this process. A player has at most one: starting
again drops the earlier one, and a session leaves the registry once its
result is saved. An abandoned session is simply never completed, so it
never produces a result.
"""

import uuid
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

from flask import current_app

from trivia import socketio
from trivia.services.questions import load_board
from trivia.services.results import ResultStore, RetryPolicy, read_until_visible, utc_today
from trivia.services.scoring import (
    DuplicateCompletion,
    GameResult,
    GameSession,
    InvalidTransition,
    PersistenceFailure,
)
from trivia.services.scoring import leaderboard as ranker


class SessionNotFound(LookupError):
    pass


@dataclass
class ActiveSession:
    session_id: str
    session: GameSession
    game_date: date
    display_name: Optional[str] = None
    result: Optional[GameResult] = None
    rank: Optional[int] = None
    standings: List = field(default_factory=list)

    @property
    def persisted(self) -> bool:
        return self.result is not None

    def to_dict(self) -> Dict:
        payload = self.session.to_dict()
        payload['session_id'] = self.session_id
        payload['game_date'] = self.game_date.isoformat()
        payload['saved'] = self.persisted
        payload['rank'] = self.rank
        return payload


_active_sessions: Dict[str, ActiveSession] = {}


def start_session(player_id: int, display_name: Optional[str] = None,
                  game_date: Optional[date] = None) -> ActiveSession:
    game_date = game_date or utc_today()
    clues, final_clue = load_board(game_date)
    active = ActiveSession(
        session_id=uuid.uuid4().hex,
        session=GameSession.start(player_id, clues, final_clue),
        game_date=game_date,
        display_name=display_name,
    )
    # One unfinished session per player; a new start replaces the old one.
    for stale_id in [sid for sid, other in _active_sessions.items() if other.session.player_id == player_id]:
        discard_session(stale_id)
        current_app.logger.info(f"[session-discard] session={stale_id} player={player_id} replaced")
    _active_sessions[active.session_id] = active
    current_app.logger.info(f"[session-start] session={active.session_id} player={player_id} clues={len(clues)}")
    return active


def get_session(session_id: str, player_id: int) -> ActiveSession:
    active = _active_sessions.get(session_id)
    if active is None or active.session.player_id != player_id:
        raise SessionNotFound(session_id)
    return active


def discard_session(session_id: str) -> None:
    _active_sessions.pop(session_id, None)


def answer_clue(active: ActiveSession, clue_id: str, answer, elapsed_seconds: float,
                wager: Optional[int] = None) -> ActiveSession:
    before = active.session
    active.session = before.answer_clue(clue_id, answer, elapsed_seconds, wager)
    if active.session is not before:
        attempt = active.session.attempts[-1]
        current_app.logger.info(
            f"[clue-answer] session={active.session_id} clue={clue_id} outcome={attempt.outcome.value} "
            f"points={attempt.points} score={active.session.cumulative_score}"
        )
    return active


def skip_clue(active: ActiveSession, clue_id: str, elapsed_seconds: float = 0) -> ActiveSession:
    before = active.session
    active.session = before.skip_clue(clue_id, elapsed_seconds)
    if active.session is not before:
        current_app.logger.info(f"[clue-skip] session={active.session_id} clue={clue_id}")
    return active


def place_final_wager(active: ActiveSession, wager: int) -> ActiveSession:
    active.session = active.session.submit_final_wager(wager)
    current_app.logger.info(f"[final-wager] session={active.session_id} wager={wager}")
    return active


def answer_final(active: ActiveSession, answer, store: ResultStore) -> ActiveSession:
    """Settle the final round and hand the result to the store exactly once."""
    active.session = active.session.submit_final_answer(answer)
    current_app.logger.info(
        f"[final-settle] session={active.session_id} correct={active.session.final_correct} "
        f"final_score={active.session.final_score}"
    )
    return save_result(active, store)


def save_result(active: ActiveSession, store: ResultStore) -> ActiveSession:
    """Persist a completed session. Raises PersistenceFailure for the caller to retry."""
    if not active.session.is_completed:
        raise InvalidTransition('only completed sessions can be saved')
    if active.persisted:
        raise DuplicateCompletion('result already saved')
    saved = store.save(active.session.player_id, active.session.final_score, active.game_date)
    active.result = saved
    discard_session(active.session_id)
    socketio.emit(
        'leaderboard_update',
        {'player_id': saved.player_id, 'score': saved.final_score, 'game_date': active.game_date.isoformat()},
        to='leaderboard',
        namespace='/ws',
    )
    policy = RetryPolicy.from_config(current_app.config)
    try:
        results = read_until_visible(store, saved, policy)
    except PersistenceFailure as exc:
        # The result is already stored; only the rank is missing from this response.
        current_app.logger.warning(f"[leaderboard-poll] session={active.session_id} read failed after save: {exc}")
        return active
    active.standings = ranker.rank(ranker.best_per_player(results))
    active.rank = ranker.rank_of(active.standings, saved.player_id)
    return active
