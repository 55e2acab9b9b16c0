from typing import AbstractSet

PLACEHOLDER = '_'


def render_hidden_word(word: str, attempted: AbstractSet[str]) -> str:
    """Mask every character of `word` that has not been attempted yet."""
    return ''.join(c if c in attempted else PLACEHOLDER for c in word)
