"""Scoring, wagering and ranking core.

Pure domain logic with no Flask or database imports. HTTP routes and the
play service call into it; persistence stays on the other side of
``trivia.services.results``.
"""

from .errors import (
    DuplicateCompletion,
    EmptyOrMalformedAnswer,
    InvalidTransition,
    InvalidWager,
    PersistenceFailure,
    ScoringError,
    UnknownClue,
)
from .session import GameSession, SessionState
from .types import AttemptOutcome, Clue, ClueAttempt, GameResult, LeaderboardEntry

__all__ = [
    'AttemptOutcome',
    'Clue',
    'ClueAttempt',
    'DuplicateCompletion',
    'EmptyOrMalformedAnswer',
    'GameResult',
    'GameSession',
    'InvalidTransition',
    'InvalidWager',
    'LeaderboardEntry',
    'PersistenceFailure',
    'ScoringError',
    'SessionState',
    'UnknownClue',
]
