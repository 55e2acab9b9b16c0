from typing import AbstractSet

FULL_WORD_POINTS = 20
POINTS_PER_LETTER = 1


def calculate_score(word: str, attempted: AbstractSet[str], complete: bool, remaining_attempts: int) -> int:
    """Score a game from its outcome.

    A revealed word is worth the full-word bonus no matter how many attempts
    were left. A lost game (no attempts left) earns one point per distinct
    attempted letter that occurs in the word. Games still being played
    score 0.
    """
    if complete:
        return FULL_WORD_POINTS
    if remaining_attempts == 0:
        correct = sum(1 for letter in attempted if letter in word)
        return correct * POINTS_PER_LETTER
    return 0
