"""
Letter Matcher

Classifies every letter of a guess against the target word.
"""

from typing import List, Optional

from ..models.errors import InvalidLengthError
from ..models.game import GuessResult, LetterStatus


def evaluate(guess: str, target: str) -> GuessResult:
    """
    Implements the Wordle letter evaluation algorithm.

    Each occurrence of a letter in the target can satisfy at most one position
    of the guess. Exact matches are claimed first; the remaining positions then
    claim the leftmost unclaimed occurrence of their letter.

    Args:
        guess: Normalized guess word
        target: Normalized target word of the same length

    Returns:
        GuessResult with one (letter, status) pair per position

    Raises:
        InvalidLengthError: If the guess and target lengths differ
    """
    if len(guess) != len(target):
        raise InvalidLengthError(guess, target)

    # Working copy of the target; consumed letters are replaced by None
    target_chars: List[Optional[str]] = list(target)
    statuses: List[Optional[LetterStatus]] = [None] * len(guess)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == target_chars[i]:
            statuses[i] = LetterStatus.CORRECT
            target_chars[i] = None

    # Second pass: misplaced letters and misses
    for i, letter in enumerate(guess):
        if statuses[i] is not None:
            continue
        if letter in target_chars:
            statuses[i] = LetterStatus.PRESENT
            target_chars[target_chars.index(letter)] = None
        else:
            statuses[i] = LetterStatus.ABSENT

    return tuple(zip(guess, statuses))
