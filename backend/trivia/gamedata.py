"""Default board loaded by ``flask db-reset``."""

from trivia import db
from trivia.models import Question

SEED_PLAYERS = [
    ('testuser1', 'Hunter'),
    ('testuser2', 'Katelyn'),
    ('testuser3', 'Julia'),
]

DEFAULT_BOARD = [
    {
        'category': 'Hometowns',
        'clues': [
            {'clue': 'This city at the base of the Blue Ridge Mountains on the James River is home to Hunter',
             'answer': 'What is Lynchburg?', 'value': 200},
            {'clue': 'Davenport, Iowa belongs to this "higher number" metro, a step up from twin cities',
             'answer': 'What is Quad Cities?', 'value': 400},
            {'clue': 'For a pint with Katelyn, head to this capital where canals were built to haul beer',
             'answer': 'What is Dublin?', 'value': 600},
            {'clue': 'Go Blue, go Julia', 'answer': 'What is Ann Arbor?', 'value': 800,
             'is_daily_double': True},
            {'clue': 'The Panthers play in this city, named like the bank named after a country',
             'answer': 'What is Charlotte?', 'value': 1000},
        ],
    },
    {
        'category': 'Rebus',
        'clues': [
            {'clue': '', 'answer': 'What is label?', 'value': 200, 'is_image': True,
             'image_path': '/image1.png'},
            {'clue': '', 'answer': 'What is detection?', 'value': 400, 'is_image': True,
             'image_path': '/image2.png'},
            {'clue': '', 'answer': 'What is bounding box?', 'value': 600, 'is_image': True,
             'image_path': '/image3.png'},
            {'clue': '', 'answer': 'What is workspace?', 'value': 800, 'is_image': True,
             'image_path': '/image4.png'},
            {'clue': '', 'answer': 'What is manufacturing?', 'value': 1000, 'is_image': True,
             'image_path': '/image5.png'},
        ],
    },
    {
        'category': 'Use Cases',
        'clues': [
            {'clue': "The largest one ever pulled 143 million pounds of beef off the shelves in 2008",
             'answer': 'What is recall?', 'value': 200},
            {'clue': 'This electric truck maker saved billions on its assembly line inspections',
             'answer': 'What is Rivian?', 'value': 400},
            {'clue': 'Few missed falls but many false alarms means low precision and high this',
             'answer': 'What is recall?', 'value': 600, 'is_daily_double': True},
            {'clue': 'This Swiss chocolate company had wrapper trouble',
             'answer': 'What is Lindt?', 'value': 800},
            {'clue': 'Mislabelled yogurt flavors at this company raised allergy concerns',
             'answer': 'What is Chobani?', 'value': 1000},
        ],
    },
]

DEFAULT_FINAL = {
    'category': 'Computers',
    'clue': 'During the 1970s this company based in Armonk, NY was famous for its large mainframes',
    'answer': 'What is IBM?',
}


def seed_questions(game_date=None, board=None, final=None):
    """Insert a board (and its final clue) into the question table."""
    board = DEFAULT_BOARD if board is None else board
    final = DEFAULT_FINAL if final is None else final
    rows = []
    for category in board:
        for position, clue in enumerate(category['clues']):
            rows.append(Question(
                game_date=game_date,
                category=category['category'],
                position=position,
                clue=clue.get('clue', ''),
                answer=clue['answer'],
                value=clue['value'],
                is_daily_double=clue.get('is_daily_double', False),
                is_image=clue.get('is_image', False),
                image_path=clue.get('image_path'),
            ))
    rows.append(Question(
        game_date=game_date,
        category=final['category'],
        clue=final.get('clue', ''),
        answer=final['answer'],
        is_image=final.get('is_image', False),
        image_path=final.get('image_path'),
        is_final=True,
    ))
    db.session.add_all(rows)
    db.session.commit()
    return rows
