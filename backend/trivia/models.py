from datetime import datetime, timezone
from trivia import db, bcrypt
from flask_login import UserMixin
from trivia.services.scoring import Clue, GameResult


def _utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class User(UserMixin, db.Model):
    __tablename__ = 'user'
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(64), unique=True, nullable=False, index=True)
    display_name = db.Column(db.String(64), nullable=True)
    password_hash = db.Column(db.String(256), nullable=False)
    games = db.relationship('GameRecord', back_populates='user', lazy='dynamic')

    def set_password(self, password):
        self.password_hash = bcrypt.generate_password_hash(password).decode('utf-8')

    def check_password(self, password):
        return bcrypt.check_password_hash(self.password_hash, password)

    @property
    def name(self):
        return self.display_name or self.username

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
            'display_name': self.name,
        }


class Question(db.Model):
    __tablename__ = 'question'
    id = db.Column(db.Integer, primary_key=True)
    # NULL means the question belongs to the undated fallback board
    game_date = db.Column(db.Date, nullable=True, index=True)
    category = db.Column(db.String(128), nullable=False)
    position = db.Column(db.Integer, nullable=False, default=0)
    clue = db.Column(db.Text, nullable=False, default='')
    answer = db.Column(db.String(256), nullable=False)
    value = db.Column(db.Integer, nullable=True)  # NULL for the final clue
    is_daily_double = db.Column(db.Boolean, default=False, nullable=False)
    is_image = db.Column(db.Boolean, default=False, nullable=False)
    image_path = db.Column(db.String(256), nullable=True)
    is_final = db.Column(db.Boolean, default=False, nullable=False)

    def to_clue(self):
        return Clue(
            clue_id=str(self.id),
            prompt=self.clue,
            canonical_answer=self.answer,
            face_value=int(self.value or 0),
            is_wager_clue=bool(self.is_daily_double),
            is_image_clue=bool(self.is_image),
            category=self.category,
            image_path=self.image_path,
        )

    def to_dict(self, include_answer=False):
        data = {
            'id': self.id,
            'game_date': self.game_date.isoformat() if self.game_date else None,
            'category': self.category,
            'clue': self.clue,
            'value': self.value,
            'is_daily_double': self.is_daily_double,
            'is_image': self.is_image,
            'image_path': self.image_path,
            'question_type': 'final' if self.is_final else 'regular',
        }
        if include_answer:
            data['answer'] = self.answer
        return data


class GameRecord(db.Model):
    """A persisted, completed game. Append-only."""
    __tablename__ = 'game'
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False, index=True)
    score = db.Column(db.Integer, nullable=False)
    game_date = db.Column(db.Date, nullable=False, index=True)
    completed_at = db.Column(db.DateTime, nullable=False, default=_utcnow)
    user = db.relationship('User', back_populates='games')

    def to_result(self):
        return GameResult(
            player_id=self.user_id,
            final_score=int(self.score),
            completed_at=self.completed_at,
            display_name=self.user.name if self.user else None,
            game_date=self.game_date,
        )

    def to_dict(self):
        return self.to_result().to_dict()
