"""
Game Session

A single round of the game: one hidden target and the guesses made against it.
"""

from types import MappingProxyType
from typing import List, Tuple

from ..models.errors import GuessRejectedError, NotInVocabularyError, WrongLengthError
from ..models.game import GameView, KeyboardState, SubmitOutcome
from .keyboard_aggregator import aggregate, fold
from .letter_matcher import evaluate
from .vocabulary import Vocabulary


def normalize_guess(raw_guess: str) -> str:
    return raw_guess.strip().casefold()


class GameSession:
    """
    Owns the target word and the append-only guess history.

    The history and the target are the only source of truth; the carried
    keyboard is an incremental fold of the same evaluations that
    ``current_view`` recomputes. Guessing stays open after the target has
    been found.
    """

    def __init__(self, target: str, vocabulary: Vocabulary):
        self._target = target.lower()
        self.vocabulary = vocabulary
        self._guesses: List[str] = []
        self._keyboard: KeyboardState = {}
        self._solved = False
        self.input_buffer = ""

    @property
    def target(self) -> str:
        return self._target

    @property
    def word_length(self) -> int:
        return len(self._target)

    @property
    def guesses(self) -> Tuple[str, ...]:
        return tuple(self._guesses)

    @property
    def solved(self) -> bool:
        return self._solved

    def validate(self, guess: str) -> None:
        """
        Raises a GuessRejectedError if the normalized guess cannot be accepted.
        """
        if len(guess) != self.word_length:
            raise WrongLengthError(guess, self.word_length)
        if not self.vocabulary.contains(guess):
            raise NotInVocabularyError(guess)

    def submit(self, raw_guess: str) -> SubmitOutcome:
        """
        Evaluates a guess and records it in the history.

        Rejections are returned as outcomes and leave no trace on the session.
        """
        guess = normalize_guess(raw_guess)
        try:
            self.validate(guess)
        except GuessRejectedError as e:
            return SubmitOutcome(
                accepted=False,
                error=e.error_code,
                message=str(e),
                keyboard=MappingProxyType(dict(self._keyboard)),
            )

        result = evaluate(guess, self._target)
        self._guesses.append(guess)
        self._keyboard = fold(self._keyboard, result)
        if guess == self._target:
            self._solved = True
        self.input_buffer = ""

        return SubmitOutcome(
            accepted=True,
            result=result,
            keyboard=MappingProxyType(dict(self._keyboard)),
            solved=guess == self._target,
        )

    def set_input(self, text: str) -> str:
        """Updates the in-progress input unless it would exceed the word length."""
        text = text.lower()
        if len(text) <= self.word_length:
            self.input_buffer = text
        return self.input_buffer

    def submit_input(self) -> SubmitOutcome:
        return self.submit(self.input_buffer)

    def current_view(self) -> GameView:
        history = tuple(evaluate(guess, self._target) for guess in self._guesses)
        return GameView(
            guesses=tuple(self._guesses),
            history=history,
            keyboard=MappingProxyType(aggregate(history)),
            solved=any(guess == self._target for guess in self._guesses),
            word_length=self.word_length,
            input_buffer=self.input_buffer,
        )
