from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Optional, Union

PlayerId = Union[int, str]


class AttemptOutcome(str, Enum):
    CORRECT = 'correct'
    INCORRECT = 'incorrect'
    SKIPPED = 'skipped'


@dataclass(frozen=True)
class Clue:
    """One board clue. Owned by the question source and never mutated."""
    clue_id: str
    prompt: str
    canonical_answer: str
    face_value: int
    is_wager_clue: bool = False
    is_image_clue: bool = False
    category: str = ''
    image_path: Optional[str] = None

    def __post_init__(self):
        if self.face_value < 0:
            raise ValueError(f"face_value must be >= 0, got {self.face_value}")

    def to_dict(self, include_answer: bool = False) -> dict:
        data = {
            'clue_id': self.clue_id,
            'category': self.category,
            'prompt': self.prompt,
            'value': self.face_value,
            'is_daily_double': self.is_wager_clue,
            'is_image': self.is_image_clue,
            'image_path': self.image_path,
        }
        if include_answer:
            data['answer'] = self.canonical_answer
        return data


@dataclass(frozen=True)
class ClueAttempt:
    clue_id: str
    elapsed_seconds: float
    outcome: AttemptOutcome
    points: int
    wager_amount: Optional[int] = None
    submitted_answer: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            'clue_id': self.clue_id,
            'elapsed_seconds': self.elapsed_seconds,
            'outcome': self.outcome.value,
            'points': self.points,
            'wager': self.wager_amount,
        }


@dataclass(frozen=True)
class GameResult:
    player_id: PlayerId
    final_score: int
    completed_at: datetime
    display_name: Optional[str] = None
    game_date: Optional[date] = None

    def __post_init__(self):
        if isinstance(self.final_score, bool) or not isinstance(self.final_score, int):
            raise TypeError(f"final_score must be an int, got {self.final_score!r}")

    def to_dict(self) -> dict:
        return {
            'player_id': self.player_id,
            'display_name': self.display_name,
            'score': self.final_score,
            'completed_at': self.completed_at.isoformat(),
            'game_date': self.game_date.isoformat() if self.game_date else None,
        }


@dataclass(frozen=True)
class LeaderboardEntry:
    player_id: PlayerId
    display_name: str
    final_score: int
    completed_at: datetime
    rank: int

    def to_dict(self) -> dict:
        return {
            'rank': self.rank,
            'player_id': self.player_id,
            'display_name': self.display_name,
            'score': self.final_score,
            'completed_at': self.completed_at.isoformat(),
        }
