from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from .state import GuessOutcome


@dataclass(frozen=True)
class GameResult:
    hidden_word: str
    attempted_letters: List[str]
    remaining_attempts: int
    complete: bool
    score: int
    status: str


@dataclass(frozen=True)
class GameSummary:
    id: int
    player_id: int
    player_name: Optional[str]
    word: Optional[str]
    outcome: str
    score: int
    played_at: Optional[datetime]


def build_result(outcome: GuessOutcome, reveal: bool = False) -> GameResult:
    """Turn a state-machine outcome into what callers see.

    With `reveal` the whole word is shown, which is how finished games
    (won or lost) are reported.
    """
    return GameResult(
        hidden_word=outcome.word if reveal else outcome.hidden_word,
        attempted_letters=sorted(outcome.attempted),
        remaining_attempts=outcome.remaining_attempts,
        complete=outcome.complete,
        score=outcome.score,
        status=outcome.status,
    )


def summarize_game(game) -> GameSummary:
    return GameSummary(
        id=game.id,
        player_id=game.player_id,
        player_name=game.player.name if game.player else None,
        word=game.word.text.upper() if game.word else None,
        outcome=game.outcome,
        score=game.score,
        played_at=game.played_at,
    )


def result_to_dict(result: GameResult) -> dict:
    return {
        'hidden_word': result.hidden_word,
        'attempted_letters': list(result.attempted_letters),
        'remaining_attempts': result.remaining_attempts,
        'complete': result.complete,
        'score': result.score,
        'status': result.status,
    }


def summary_to_dict(summary: GameSummary) -> dict:
    return {
        'id': summary.id,
        'player_id': summary.player_id,
        'player_name': summary.player_name,
        'word': summary.word,
        'outcome': summary.outcome,
        'score': summary.score,
        'played_at': summary.played_at.isoformat() if summary.played_at else None,
    }
