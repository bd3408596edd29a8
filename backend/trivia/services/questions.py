from datetime import date
from typing import List, Optional, Tuple

from trivia.models import Question
from trivia.services.scoring import Clue


class BoardUnavailable(LookupError):
    """No playable board (or no final clue) exists for the requested date."""


def _questions_for(game_date: Optional[date]):
    dated = Question.query.filter_by(game_date=game_date).count() if game_date else 0
    if dated:
        query = Question.query.filter_by(game_date=game_date)
    else:
        query = Question.query.filter(Question.game_date.is_(None))
    return query.order_by(Question.id).all()


def load_board(game_date: Optional[date] = None) -> Tuple[List[Clue], Clue]:
    """Return the board clues grouped by category and the final clue.

    Questions scheduled for ``game_date`` win; otherwise the undated pool
    is used. Categories keep the order in which they were loaded.
    """
    rows = _questions_for(game_date)
    finals = [q for q in rows if q.is_final]
    if not finals:
        raise BoardUnavailable(f"no final clue for {game_date or 'undated board'}")
    regular = [q for q in rows if not q.is_final]
    category_order = {}
    for q in regular:
        category_order.setdefault(q.category, len(category_order))
    regular.sort(key=lambda q: (category_order[q.category], q.position, q.id))
    return [q.to_clue() for q in regular], finals[0].to_clue()
