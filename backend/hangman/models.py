from datetime import datetime, timezone
from hangman import db


def utcnow():
    return datetime.now(timezone.utc)


class Player(db.Model):
    __tablename__ = 'player'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(64), nullable=False)
    games = db.relationship('Game', back_populates='player', lazy='dynamic')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
        }


class Word(db.Model):
    __tablename__ = 'word'
    id = db.Column(db.Integer, primary_key=True)
    text = db.Column(db.String(64), unique=True, nullable=False)
    used = db.Column(db.Boolean, default=False, nullable=False, index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'text': self.text,
            'used': self.used,
        }


class GameInProgress(db.Model):
    __tablename__ = 'game_in_progress'
    id = db.Column(db.Integer, primary_key=True)
    player_id = db.Column(db.Integer, db.ForeignKey('player.id'), nullable=False, index=True)
    word_id = db.Column(db.Integer, db.ForeignKey('word.id'), nullable=False)
    attempted_letters = db.Column(db.String(128), nullable=False, default='')  # comma-joined, see letters.encode_letters
    remaining_attempts = db.Column(db.Integer, nullable=False)
    started_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)

    player = db.relationship('Player')
    word = db.relationship('Word')

    def to_dict(self):
        return {
            'id': self.id,
            'player_id': self.player_id,
            'attempted_letters': self.attempted_letters,
            'remaining_attempts': self.remaining_attempts,
            'started_at': self.started_at.isoformat() if self.started_at else None,
        }


class Game(db.Model):
    """A finished game. Rows are written once and never updated."""
    __tablename__ = 'game'
    id = db.Column(db.Integer, primary_key=True)
    player_id = db.Column(db.Integer, db.ForeignKey('player.id'), nullable=False, index=True)
    word_id = db.Column(db.Integer, db.ForeignKey('word.id'), nullable=False)
    outcome = db.Column(db.String(8), nullable=False)  # WON, LOST
    score = db.Column(db.Integer, nullable=False, default=0)
    played_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)

    player = db.relationship('Player', back_populates='games')
    word = db.relationship('Word')
