from flask import Blueprint, jsonify, request, current_app
from flask_login import login_required, current_user
from trivia.services import play
from trivia.services.questions import BoardUnavailable
from trivia.services.results import ResultStore, utc_today
from trivia.services.scoring import (
    DuplicateCompletion,
    InvalidTransition,
    InvalidWager,
    PersistenceFailure,
    UnknownClue,
)


game = Blueprint('game', __name__)


@game.errorhandler(InvalidWager)
def _invalid_wager(exc):
    return jsonify({'error': exc.reason, 'wager': exc.wager, 'max_wager': exc.max_wager}), 400


@game.errorhandler(UnknownClue)
def _unknown_clue(exc):
    return jsonify({'error': str(exc)}), 404


@game.errorhandler(play.SessionNotFound)
def _session_not_found(exc):
    return jsonify({'error': 'Game session not found'}), 404


@game.errorhandler(InvalidTransition)
def _invalid_transition(exc):
    return jsonify({'error': str(exc)}), 409


@game.errorhandler(DuplicateCompletion)
def _duplicate_completion(exc):
    return jsonify({'error': str(exc)}), 409


@game.errorhandler(PersistenceFailure)
def _persistence_failure(exc):
    current_app.logger.error(f"[persistence] {exc}")
    return jsonify({'error': str(exc), 'retryable': True}), 503


def _active(session_id):
    return play.get_session(session_id, current_user.id)


def _read_number(data, key, default=None):
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _read_wager(data):
    wager = data.get('wager')
    # Whole-number floats from JSON clients are accepted as ints.
    if isinstance(wager, float) and wager.is_integer():
        return int(wager)
    return wager


@game.route('/status', methods=['GET'])
@login_required
def get_game_status():
    today = utc_today()
    has_played = ResultStore().has_played(current_user.id, today)
    return jsonify({'has_played': has_played, 'date': today.isoformat()})


@game.route('/most-recent', methods=['GET'])
@login_required
def get_most_recent():
    result = ResultStore().most_recent(current_user.id)
    return jsonify(result.to_dict() if result else None)


@game.route('/start', methods=['POST'])
@login_required
def start_game():
    today = utc_today()
    if not current_app.config.get('ALLOW_REPLAY') and ResultStore().has_played(current_user.id, today):
        return jsonify({'error': 'You have already played today', 'date': today.isoformat()}), 409
    try:
        active = play.start_session(current_user.id, current_user.name, today)
    except BoardUnavailable as exc:
        current_app.logger.warning(f"[session-start] {exc}")
        return jsonify({'error': 'No game available today'}), 404
    return jsonify(active.to_dict()), 201


@game.route('/<string:session_id>', methods=['GET'])
@login_required
def get_session_state(session_id):
    return jsonify(_active(session_id).to_dict())


@game.route('/<string:session_id>/clues/<string:clue_id>/answer', methods=['POST'])
@login_required
def answer_clue(session_id, clue_id):
    data = request.get_json(silent=True) or {}
    elapsed = _read_number(data, 'elapsed_seconds', 0)
    if elapsed is None or elapsed < 0:
        return jsonify({'error': 'elapsed_seconds must be a non-negative number'}), 400
    active = play.answer_clue(_active(session_id), clue_id, data.get('answer'), elapsed, _read_wager(data))
    return jsonify(active.to_dict())


@game.route('/<string:session_id>/clues/<string:clue_id>/skip', methods=['POST'])
@login_required
def skip_clue(session_id, clue_id):
    data = request.get_json(silent=True) or {}
    elapsed = _read_number(data, 'elapsed_seconds', 0)
    if elapsed is None or elapsed < 0:
        return jsonify({'error': 'elapsed_seconds must be a non-negative number'}), 400
    active = play.skip_clue(_active(session_id), clue_id, elapsed)
    return jsonify(active.to_dict())


@game.route('/<string:session_id>/final/wager', methods=['POST'])
@login_required
def final_wager(session_id):
    data = request.get_json(silent=True) or {}
    active = play.place_final_wager(_active(session_id), _read_wager(data))
    return jsonify(active.to_dict())


@game.route('/<string:session_id>/final/answer', methods=['POST'])
@login_required
def final_answer(session_id):
    data = request.get_json(silent=True) or {}
    active = play.answer_final(_active(session_id), data.get('answer'), ResultStore())
    payload = active.to_dict()
    payload['leaderboard'] = [e.to_dict() for e in active.standings[:3]]
    return jsonify(payload)


@game.route('/<string:session_id>/save', methods=['POST'])
@login_required
def retry_save(session_id):
    """Retry persisting a completed session whose first save failed."""
    active = play.save_result(_active(session_id), ResultStore())
    return jsonify(active.to_dict())
