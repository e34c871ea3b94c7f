"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple


class LetterStatus(Enum):
    """Letter evaluation status, ordered CORRECT > PRESENT > ABSENT > UNKNOWN."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    UNKNOWN = "UNKNOWN"

    @property
    def precedence(self) -> int:
        return _PRECEDENCE[self]

    @classmethod
    def best(cls, current: "LetterStatus", new: "LetterStatus") -> "LetterStatus":
        """Return whichever of the two statuses carries more information."""
        return new if new.precedence > current.precedence else current


_PRECEDENCE = {
    LetterStatus.UNKNOWN: 0,
    LetterStatus.ABSENT: 1,
    LetterStatus.PRESENT: 2,
    LetterStatus.CORRECT: 3,
}

# One (letter, status) pair per position of the guess
GuessResult = Tuple[Tuple[str, LetterStatus], ...]

# Best status seen so far per guessed letter; missing letters are UNKNOWN
KeyboardState = Dict[str, LetterStatus]


def result_to_json(result: GuessResult) -> List[Tuple[str, str]]:
    """Convert a GuessResult into JSON-friendly (letter, status) pairs."""
    return [(letter, status.value) for letter, status in result]


def keyboard_to_json(keyboard: Mapping[str, LetterStatus]) -> Dict[str, str]:
    """Convert a KeyboardState into a JSON-friendly mapping."""
    return {letter: status.value for letter, status in sorted(keyboard.items())}


@dataclass(frozen=True)
class SubmitOutcome:
    """Result of submitting a guess to a GameSession."""
    accepted: bool
    error: Optional[str] = None  # "wrong_length" or "not_in_vocabulary"
    message: str = ""
    result: Optional[GuessResult] = None
    keyboard: Mapping[str, LetterStatus] = field(default_factory=lambda: MappingProxyType({}))
    solved: bool = False


@dataclass(frozen=True)
class GameView:
    """Read-only snapshot of a session for the presentation layer."""
    guesses: Tuple[str, ...]
    history: Tuple[GuessResult, ...]
    keyboard: Mapping[str, LetterStatus]
    solved: bool
    word_length: int
    input_buffer: str = ""

    def to_dict(self) -> Dict:
        return {
            'guesses': list(self.guesses),
            'guess_results': [result_to_json(result) for result in self.history],
            'letter_status': keyboard_to_json(self.keyboard),
            'solved': self.solved,
            'word_length': self.word_length,
            'input_word': self.input_buffer,
        }


@dataclass
class GameState:
    """Server-side game state representation."""
    game_id: str
    word_length: int
    solved: bool
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # Letter status as string for JSON serialization
    letter_status: Dict[str, str]
    input_word: str = ""
    keyboard_rows: List[List[Tuple[str, str]]] = field(default_factory=list)  # Virtual keyboard layout
    definitions: List[str] = field(default_factory=list)
    answer: Optional[str] = None  # Only included once solved
