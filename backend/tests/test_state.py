import pytest

from hangman.services.games.errors import InvalidGuess
from hangman.services.games.state import (
    IN_PROGRESS, LOST, MAX_ATTEMPTS, WON, apply_guess, initial_state, normalize_letter,
)


def test_initial_state():
    state = initial_state('gato')
    assert state.word == 'GATO'
    assert state.hidden_word == '____'
    assert state.remaining_attempts == MAX_ATTEMPTS == 7
    assert state.attempted == frozenset()
    assert state.status == IN_PROGRESS
    assert state.score == 0


def test_correct_guess_reveals_without_cost():
    state = apply_guess('GATO', set(), 7, 'g')
    assert state.hidden_word == 'G___'
    assert state.remaining_attempts == 7
    assert state.attempted == {'G'}
    assert not state.repeated


def test_wrong_guess_costs_one_attempt():
    state = apply_guess('GATO', {'G'}, 7, 'Z')
    assert state.hidden_word == 'G___'
    assert state.remaining_attempts == 6
    assert state.status == IN_PROGRESS


def test_repeated_letter_changes_nothing():
    first = apply_guess('GATO', set(), 7, 'Z')
    again = apply_guess('GATO', first.attempted, first.remaining_attempts, 'z')
    assert again.repeated
    assert again.remaining_attempts == first.remaining_attempts
    assert again.attempted == first.attempted
    assert again.hidden_word == first.hidden_word


def test_revealing_last_letter_wins():
    state = apply_guess('GATO', {'G', 'A', 'T'}, 7, 'O')
    assert state.complete
    assert state.status == WON
    assert state.finished
    assert state.score == 20
    assert state.remaining_attempts == 7


def test_last_miss_loses_and_never_goes_negative():
    state = apply_guess('SOL', set('ABCDEF'), 1, 'G')
    assert state.remaining_attempts == 0
    assert state.status == LOST
    assert state.score == 0

    after = apply_guess('SOL', state.attempted, 0, 'H')
    assert after.remaining_attempts == 0


def test_winning_on_last_attempt_counts_only_the_bonus():
    state = apply_guess('SOL', set('SOABCDEF'), 1, 'L')
    assert state.complete
    assert state.remaining_attempts == 1
    assert state.score == 20


def test_normalize_letter():
    assert normalize_letter(' a ') == 'A'
    assert normalize_letter('-') == '-'
    assert normalize_letter('7') == '7'
    for bad in ['', '  ', 'ab', None]:
        with pytest.raises(InvalidGuess):
            normalize_letter(bad)
