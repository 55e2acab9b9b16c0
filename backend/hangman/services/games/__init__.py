"""Hangman domain services: letters, rendering, scoring, state and the game service.

Everything below `service` is pure and has no knowledge of Flask or the
database; HTTP routes and CLI commands should go through `GameService`.
"""

from .errors import GameError, NotFound, Exhausted, InvalidGuess
from .service import GameService
from .stores import SqlGameStores

__all__ = [
    'GameError',
    'NotFound',
    'Exhausted',
    'InvalidGuess',
    'GameService',
    'SqlGameStores',
]
