from datetime import date
from flask import Blueprint, jsonify, request, current_app
from trivia.services.results import ResultStore
from trivia.services.scoring import PersistenceFailure
from trivia.services.scoring import leaderboard as ranker

leaderboard = Blueprint('leaderboard', __name__)

NO_CACHE_HEADERS = {
    'Cache-Control': 'no-store, no-cache, must-revalidate, proxy-revalidate',
    'Pragma': 'no-cache',
    'Expires': '0',
}


@leaderboard.route('', methods=['GET'])
def get_leaderboard():
    """Ranked best result per player, optionally for a single ``date``."""
    game_date = None
    if request.args.get('date'):
        try:
            game_date = date.fromisoformat(request.args['date'])
        except ValueError:
            return jsonify({'error': 'date must be YYYY-MM-DD'}), 400
    limit = request.args.get('limit', type=int)
    if limit is None:
        limit = current_app.config.get('LEADERBOARD_LIMIT', 1000)

    try:
        results = ResultStore().fetch_all(game_date)
    except PersistenceFailure as exc:
        current_app.logger.error(f"[leaderboard] fetch failed: {exc}")
        return jsonify({'error': 'Failed to fetch leaderboard', 'retryable': True}), 503

    entries = ranker.rank(ranker.best_per_player(results))[:max(0, limit)]
    return jsonify([e.to_dict() for e in entries]), 200, NO_CACHE_HEADERS
