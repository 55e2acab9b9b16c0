"""Game state machine.

A game is IN_PROGRESS until the word is fully revealed (WON) or the player
runs out of attempts (LOST). Transitions are computed here as plain values;
persisting them is the service's job.
"""

from dataclasses import dataclass
from typing import AbstractSet, FrozenSet

from .errors import InvalidGuess
from .rendering import render_hidden_word
from .scoring import calculate_score

MAX_ATTEMPTS = 7

IN_PROGRESS = 'IN_PROGRESS'
WON = 'WON'
LOST = 'LOST'


@dataclass(frozen=True)
class GuessOutcome:
    word: str
    attempted: FrozenSet[str]
    remaining_attempts: int
    hidden_word: str
    complete: bool
    repeated: bool = False

    @property
    def status(self) -> str:
        if self.complete:
            return WON
        if self.remaining_attempts == 0:
            return LOST
        return IN_PROGRESS

    @property
    def finished(self) -> bool:
        return self.status != IN_PROGRESS

    @property
    def score(self) -> int:
        return calculate_score(self.word, self.attempted, self.complete, self.remaining_attempts)


def normalize_letter(letter) -> str:
    if not isinstance(letter, str):
        raise InvalidGuess('Letter must be a string')
    # any single character, so words like T-REX can still be solved
    normalized = letter.strip().upper()
    if len(normalized) != 1:
        raise InvalidGuess(f'Invalid letter: {letter!r}')
    return normalized


def snapshot(word: str, attempted: AbstractSet[str], remaining_attempts: int, repeated: bool = False) -> GuessOutcome:
    """Describe a game as it stands, without applying any guess."""
    word = word.upper()
    hidden = render_hidden_word(word, attempted)
    return GuessOutcome(
        word=word,
        attempted=frozenset(attempted),
        remaining_attempts=remaining_attempts,
        hidden_word=hidden,
        complete=hidden == word,
        repeated=repeated,
    )


def initial_state(word: str) -> GuessOutcome:
    return snapshot(word, frozenset(), MAX_ATTEMPTS)


def apply_guess(word: str, attempted: AbstractSet[str], remaining_attempts: int, letter: str) -> GuessOutcome:
    """Apply one guessed letter.

    A letter that was already attempted changes nothing. A new letter that
    is not in the word costs one attempt; attempts never drop below zero.
    """
    letter = normalize_letter(letter)
    word = word.upper()

    if letter in attempted:
        return snapshot(word, attempted, remaining_attempts, repeated=True)

    updated = set(attempted)
    updated.add(letter)
    if letter not in word:
        remaining_attempts = max(0, remaining_attempts - 1)
    return snapshot(word, updated, remaining_attempts)
