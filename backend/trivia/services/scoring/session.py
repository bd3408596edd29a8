"""One player's run through a board, as an explicit state machine.

A ``GameSession`` is a frozen value. Every action returns a new session
(or raises before anything changes), so a rejected wager or a malformed
request can never leave the cumulative score half-updated.
"""

from dataclasses import dataclass, replace
from datetime import date, datetime
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Optional, Tuple

from . import clues as clue_scorer
from . import final_round, wagers
from .answers import matches
from .errors import DuplicateCompletion, InvalidTransition, UnknownClue
from .types import AttemptOutcome, Clue, ClueAttempt, GameResult, PlayerId


class SessionState(str, Enum):
    IN_PROGRESS = 'in_progress'
    FINAL_ROUND_PENDING = 'final_round_pending'
    FINAL_ROUND_IN_PROGRESS = 'final_round_in_progress'
    COMPLETED = 'completed'


@dataclass(frozen=True)
class GameSession:
    player_id: PlayerId
    clues: Tuple[Clue, ...]
    final_clue: Clue
    state: SessionState = SessionState.IN_PROGRESS
    cumulative_score: int = 0
    attempts: Tuple[ClueAttempt, ...] = ()
    final_wager: Optional[int] = None
    final_correct: Optional[bool] = None
    final_score: Optional[int] = None

    @classmethod
    def start(cls, player_id: PlayerId, clues: Iterable[Clue], final_clue: Clue) -> 'GameSession':
        board = tuple(clues)
        ids = [c.clue_id for c in board]
        if len(set(ids)) != len(ids):
            raise ValueError('clue ids on a board must be unique')
        session = cls(player_id=player_id, clues=board, final_clue=final_clue)
        return session._advance_if_board_cleared()

    # ---- queries ----

    @property
    def total_clue_count(self) -> int:
        return len(self.clues)

    @property
    def answered_ids(self) -> FrozenSet[str]:
        return frozenset(a.clue_id for a in self.attempts)

    @property
    def is_completed(self) -> bool:
        return self.state is SessionState.COMPLETED

    def clue(self, clue_id: str) -> Clue:
        for c in self.clues:
            if c.clue_id == clue_id:
                return c
        raise UnknownClue(clue_id)

    def is_answered(self, clue_id: str) -> bool:
        return clue_id in self.answered_ids

    def max_wager(self, is_final_round: bool = False) -> int:
        return wagers.max_wager(self.cumulative_score, is_final_round)

    # ---- board transitions ----

    def answer_clue(self, clue_id: str, submitted_answer, elapsed_seconds: float,
                    wager: Optional[int] = None) -> 'GameSession':
        clue = self.clue(clue_id)
        if self.is_answered(clue_id):
            return self
        self._require(SessionState.IN_PROGRESS, 'answer a clue')
        if clue.is_wager_clue:
            wagers.validate(wager, self.cumulative_score).raise_for_rejection()
        else:
            wager = None
        # Blank or non-text answers never match and are scored as a miss.
        correct = matches(submitted_answer, clue.canonical_answer)
        outcome = AttemptOutcome.CORRECT if correct else AttemptOutcome.INCORRECT
        points = clue_scorer.score_clue(clue, elapsed_seconds, outcome, wager)
        attempt = ClueAttempt(
            clue_id=clue_id,
            elapsed_seconds=elapsed_seconds,
            outcome=outcome,
            points=points,
            wager_amount=wager,
            submitted_answer=submitted_answer if isinstance(submitted_answer, str) else None,
        )
        return self._record(attempt)

    def skip_clue(self, clue_id: str, elapsed_seconds: float = 0) -> 'GameSession':
        """The "I don't know" button: no penalty, no reward."""
        self.clue(clue_id)
        if self.is_answered(clue_id):
            return self
        self._require(SessionState.IN_PROGRESS, 'skip a clue')
        points = clue_scorer.score(0, elapsed_seconds, AttemptOutcome.SKIPPED)
        return self._record(ClueAttempt(clue_id, elapsed_seconds, AttemptOutcome.SKIPPED, points))

    # ---- final round transitions ----

    def submit_final_wager(self, wager: int) -> 'GameSession':
        if self.is_completed:
            raise DuplicateCompletion('final round already settled')
        self._require(SessionState.FINAL_ROUND_PENDING, 'place the final wager')
        wagers.validate(wager, self.cumulative_score, is_final_round=True).raise_for_rejection()
        return replace(self, state=SessionState.FINAL_ROUND_IN_PROGRESS, final_wager=wager)

    def submit_final_answer(self, submitted_answer) -> 'GameSession':
        if self.is_completed:
            raise DuplicateCompletion('final round already settled')
        self._require(SessionState.FINAL_ROUND_IN_PROGRESS, 'answer the final clue')
        outcome = final_round.resolve(
            self.cumulative_score, self.final_wager, submitted_answer, self.final_clue.canonical_answer
        )
        return replace(
            self,
            state=SessionState.COMPLETED,
            final_correct=outcome.correct,
            final_score=outcome.final_score,
        )

    def to_result(self, completed_at: datetime, display_name: Optional[str] = None,
                  game_date: Optional[date] = None) -> GameResult:
        self._require(SessionState.COMPLETED, 'produce a result')
        return GameResult(
            player_id=self.player_id,
            final_score=self.final_score,
            completed_at=completed_at,
            display_name=display_name,
            game_date=game_date,
        )

    def to_dict(self, include_answers: bool = False) -> Dict:
        answered = self.answered_ids
        board = []
        for c in self.clues:
            item = c.to_dict(include_answer=include_answers or c.clue_id in answered)
            item['answered'] = c.clue_id in answered
            board.append(item)
        final = None
        if self.state is not SessionState.IN_PROGRESS:
            final = self.final_clue.to_dict(include_answer=self.is_completed)
            if self.state is SessionState.FINAL_ROUND_PENDING:
                # The category is shown before the wager, the clue itself is not.
                final = {'category': final['category']}
        return {
            'player_id': self.player_id,
            'state': self.state.value,
            'score': self.cumulative_score,
            'answered_count': len(answered),
            'total_clues': self.total_clue_count,
            'board': board,
            'attempts': [a.to_dict() for a in self.attempts],
            'max_wager': self.max_wager(is_final_round=self.state is not SessionState.IN_PROGRESS),
            'final_clue': final,
            'final_wager': self.final_wager,
            'final_correct': self.final_correct,
            'final_score': self.final_score,
        }

    # ---- internals ----

    def _require(self, state: SessionState, action: str) -> None:
        if self.state is not state:
            raise InvalidTransition(f"cannot {action} while session is {self.state.value}")

    def _record(self, attempt: ClueAttempt) -> 'GameSession':
        updated = replace(
            self,
            attempts=self.attempts + (attempt,),
            cumulative_score=self.cumulative_score + attempt.points,
        )
        return updated._advance_if_board_cleared()

    def _advance_if_board_cleared(self) -> 'GameSession':
        if self.state is SessionState.IN_PROGRESS and len(self.answered_ids) == self.total_clue_count:
            return replace(self, state=SessionState.FINAL_ROUND_PENDING)
        return self
