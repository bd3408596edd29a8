"""Persistence adapter for completed games.

The scoring core calls ``ResultStore.save`` once per completed session.
Storage errors come back as ``PersistenceFailure`` so callers can retry;
the adapter also owns the bounded polling used to wait for a fresh result
to show up on the leaderboard.
"""

import time
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Callable, List, Optional, Sequence

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from trivia import db
from trivia.models import GameRecord, User
from trivia.services.scoring import GameResult, PersistenceFailure


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


class ResultStore:
    def save(self, player_id: int, final_score: int, game_date: date) -> GameResult:
        if isinstance(final_score, bool) or not isinstance(final_score, int):
            raise ValueError(f"final_score must be an int, got {final_score!r}")
        record = GameRecord(user_id=player_id, score=final_score, game_date=game_date)
        try:
            db.session.add(record)
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            current_app.logger.error(f"[result-save-failed] player={player_id} date={game_date} error={exc}")
            raise PersistenceFailure('Failed to save game', cause=exc) from exc
        current_app.logger.info(f"[result-save] player={player_id} date={game_date} score={final_score}")
        return record.to_result()

    def has_played(self, player_id: int, game_date: date) -> bool:
        try:
            return GameRecord.query.filter_by(user_id=player_id, game_date=game_date).first() is not None
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise PersistenceFailure('Failed to check game status', cause=exc) from exc

    def most_recent(self, player_id: int) -> Optional[GameResult]:
        try:
            record = (
                GameRecord.query.filter_by(user_id=player_id)
                .order_by(GameRecord.completed_at.desc(), GameRecord.id.desc())
                .first()
            )
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise PersistenceFailure('Failed to fetch most recent game', cause=exc) from exc
        return record.to_result() if record else None

    def fetch_all(self, game_date: Optional[date] = None) -> List[GameResult]:
        try:
            query = GameRecord.query.join(User)
            if game_date is not None:
                query = query.filter(GameRecord.game_date == game_date)
            return [r.to_result() for r in query.all()]
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise PersistenceFailure('Failed to fetch leaderboard', cause=exc) from exc


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int = 5
    backoff: Sequence[float] = (0.25, 0.5, 1.0, 2.0)

    @classmethod
    def from_config(cls, config) -> 'RetryPolicy':
        raw = str(config.get('RESULT_READ_BACKOFF_SEC', '') or '')
        backoff = tuple(float(part) for part in raw.split(',') if part.strip())
        return cls(max_attempts=max(1, int(config.get('RESULT_READ_MAX_ATTEMPTS', 5))), backoff=backoff)

    def delay_before(self, attempt: int) -> float:
        """Seconds to wait before attempt number ``attempt`` (1-based)."""
        if attempt <= 1 or not self.backoff:
            return 0.0
        return self.backoff[min(attempt - 2, len(self.backoff) - 1)]


def read_until_visible(store: ResultStore, expected: GameResult, policy: RetryPolicy,
                       game_date: Optional[date] = None,
                       sleep: Callable[[float], None] = time.sleep) -> List[GameResult]:
    """Re-read results until ``expected`` shows up or the policy runs out.

    Returns the last read either way; the caller decides what a missing
    result means for the response.
    """
    results: List[GameResult] = []
    for attempt in range(1, policy.max_attempts + 1):
        delay = policy.delay_before(attempt)
        if delay:
            sleep(delay)
        results = store.fetch_all(game_date)
        if any(r.player_id == expected.player_id and r.final_score == expected.final_score
               and r.completed_at == expected.completed_at for r in results):
            if attempt > 1:
                current_app.logger.info(f"[leaderboard-poll] player={expected.player_id} visible after attempt={attempt}")
            return results
        current_app.logger.info(f"[leaderboard-poll] player={expected.player_id} not visible attempt={attempt}/{policy.max_attempts}")
    return results
