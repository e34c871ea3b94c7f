"""
Keyboard Aggregator

Folds the evaluations of all guesses into one status per letter.
"""

from typing import Iterable, List, Mapping, Sequence, Tuple

from ..config.game_settings import KEYBOARD_ROWS
from ..models.game import GuessResult, KeyboardState, LetterStatus


def fold(keyboard: Mapping[str, LetterStatus], result: GuessResult) -> KeyboardState:
    """
    Returns a new keyboard with one more guess evaluation folded in.

    A letter's status only ever moves up in precedence, so folding the
    same results in any order yields the same keyboard.
    """
    updated = dict(keyboard)
    for letter, status in result:
        updated[letter] = LetterStatus.best(updated.get(letter, LetterStatus.UNKNOWN), status)
    return updated


def aggregate(history: Iterable[GuessResult]) -> KeyboardState:
    """Builds the keyboard state from scratch for a whole guess history."""
    keyboard: KeyboardState = {}
    for result in history:
        keyboard = fold(keyboard, result)
    return keyboard


def project_keyboard(keyboard: Mapping[str, LetterStatus],
                     rows: Sequence[str] = KEYBOARD_ROWS) -> List[List[Tuple[str, LetterStatus]]]:
    """Lays the keyboard state out as rows of keys, unguessed keys UNKNOWN."""
    return [
        [(letter, keyboard.get(letter, LetterStatus.UNKNOWN)) for letter in row]
        for row in rows
    ]
