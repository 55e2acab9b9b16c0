from typing import Iterable, Optional, Set

SEPARATOR = ','


def encode_letters(letters: Iterable[str]) -> str:
    """Join attempted letters into the stored form, e.g. {'A', 'G'} -> 'A,G'."""
    return SEPARATOR.join(sorted(set(letters)))


def decode_letters(raw: Optional[str]) -> Set[str]:
    """Inverse of `encode_letters`. Blank tokens are skipped."""
    letters: Set[str] = set()
    if not raw:
        return letters
    for token in raw.split(SEPARATOR):
        token = token.strip()
        if token:
            letters.add(token[0])
    return letters
