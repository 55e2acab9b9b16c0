"""Persistence collaborators of the game service.

The service only talks to the protocols below. `SqlGameStores` is the
Flask-SQLAlchemy implementation; its methods stage changes on the session
and leave committing to the service so one operation is one transaction.
"""

from typing import List, Optional, Protocol

from hangman import db
from hangman.models import Player, Word, GameInProgress, Game, utcnow


class PlayerStore(Protocol):
    def find(self, player_id: int) -> Optional[Player]: ...


class WordStore(Protocol):
    def find_random_unused(self) -> Optional[Word]: ...

    def mark_used(self, word: Word) -> None: ...


class ActiveGameStore(Protocol):
    def create(self, player, word, attempted_letters: str, remaining_attempts: int): ...

    def find_most_recent(self, player_id: int) -> Optional[GameInProgress]: ...

    def save(self, gip: GameInProgress) -> None: ...

    def delete(self, gip: GameInProgress) -> None: ...


class CompletedGameStore(Protocol):
    def create(self, player, word, outcome: str, score: int): ...

    def save(self, game: Game) -> None: ...

    def find_by_player(self, player_id: int) -> List[Game]: ...

    def find_all(self) -> List[Game]: ...


class GameStores(Protocol):
    players: PlayerStore
    words: WordStore
    active_games: ActiveGameStore
    completed_games: CompletedGameStore

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


class SqlPlayerStore:
    def __init__(self, session):
        self.session = session

    def find(self, player_id: int) -> Optional[Player]:
        return self.session.get(Player, player_id)


class SqlWordStore:
    def __init__(self, session):
        self.session = session

    def find_random_unused(self) -> Optional[Word]:
        return (
            self.session.query(Word)
            .filter_by(used=False)
            .order_by(db.func.random())
            .first()
        )

    def mark_used(self, word: Word) -> None:
        word.used = True
        self.session.add(word)


class SqlActiveGameStore:
    def __init__(self, session):
        self.session = session

    def create(self, player, word, attempted_letters: str, remaining_attempts: int) -> GameInProgress:
        gip = GameInProgress(
            player=player,
            word=word,
            attempted_letters=attempted_letters,
            remaining_attempts=remaining_attempts,
            started_at=utcnow(),
        )
        self.save(gip)
        return gip

    def find_most_recent(self, player_id: int) -> Optional[GameInProgress]:
        # FOR UPDATE serializes guesses against the same row (no-op on SQLite)
        return (
            self.session.query(GameInProgress)
            .filter_by(player_id=player_id)
            .order_by(GameInProgress.started_at.desc(), GameInProgress.id.desc())
            .with_for_update()
            .first()
        )

    def save(self, gip: GameInProgress) -> None:
        self.session.add(gip)
        self.session.flush()

    def delete(self, gip: GameInProgress) -> None:
        self.session.delete(gip)


class SqlCompletedGameStore:
    def __init__(self, session):
        self.session = session

    def create(self, player, word, outcome: str, score: int) -> Game:
        game = Game(player=player, word=word, outcome=outcome, score=score, played_at=utcnow())
        self.save(game)
        return game

    def save(self, game: Game) -> None:
        self.session.add(game)
        self.session.flush()

    def find_by_player(self, player_id: int) -> List[Game]:
        return (
            self.session.query(Game)
            .filter_by(player_id=player_id)
            .order_by(Game.played_at.desc(), Game.id.desc())
            .all()
        )

    def find_all(self) -> List[Game]:
        return self.session.query(Game).order_by(Game.played_at.desc(), Game.id.desc()).all()


class SqlGameStores:
    def __init__(self, session=None):
        self.session = session if session is not None else db.session
        self.players = SqlPlayerStore(self.session)
        self.words = SqlWordStore(self.session)
        self.active_games = SqlActiveGameStore(self.session)
        self.completed_games = SqlCompletedGameStore(self.session)

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
