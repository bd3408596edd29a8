from flask import Blueprint, jsonify, request, current_app
from trivia.services.questions import BoardUnavailable, load_board
from trivia.services.results import utc_today

questions = Blueprint('questions', __name__)


@questions.route('', methods=['GET'])
def get_questions():
    """Today's board without answers; ``?type=final`` returns the final clue."""
    try:
        clues, final_clue = load_board(utc_today())
    except BoardUnavailable as exc:
        current_app.logger.warning(f"[questions] {exc}")
        return jsonify({'error': 'No questions available'}), 404

    if request.args.get('type') == 'final':
        return jsonify(final_clue.to_dict())
    return jsonify([c.to_dict() for c in clues])
