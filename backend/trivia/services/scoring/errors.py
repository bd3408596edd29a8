from typing import Optional


class ScoringError(Exception):
    """Base class for errors raised by the scoring core."""


class InvalidWager(ScoringError):
    """Wager outside the allowed bounds. Recoverable: re-prompt the player."""

    def __init__(self, wager, max_wager: int, reason: str):
        super().__init__(reason)
        self.wager = wager
        self.max_wager = max_wager
        self.reason = reason


class EmptyOrMalformedAnswer(ScoringError):
    """Blank or non-text submission. Scored as Incorrect, never fatal."""


class PersistenceFailure(ScoringError):
    """The result store failed to save or read. Safe to retry."""

    retryable = True

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class DuplicateCompletion(ScoringError):
    """A session (or player/date) already has a settled final score."""


class InvalidTransition(ScoringError):
    """The requested action is not allowed in the session's current state."""


class UnknownClue(ScoringError, KeyError):
    def __init__(self, clue_id: str):
        super().__init__(clue_id)
        self.clue_id = clue_id

    def __str__(self):
        return f"unknown clue {self.clue_id!r}"
