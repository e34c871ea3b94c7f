"""
Game Errors

Exception hierarchy shared by the services and controllers.
"""


class WorsdError(Exception):
    """Base class for all game errors."""


class GuessRejectedError(WorsdError):
    """A submitted guess was refused; the session is left untouched."""
    error_code = "rejected"


class WrongLengthError(GuessRejectedError):
    error_code = "wrong_length"

    def __init__(self, guess: str, expected: int):
        super().__init__(f"Guess must be exactly {expected} letters")
        self.guess = guess
        self.expected = expected


class NotInVocabularyError(GuessRejectedError):
    error_code = "not_in_vocabulary"

    def __init__(self, guess: str):
        super().__init__(f"'{guess}' is not in the word list")
        self.guess = guess


class InvalidLengthError(WorsdError, ValueError):
    """Guess and target handed to the matcher differ in length."""

    def __init__(self, guess: str, target: str):
        super().__init__(
            f"Cannot evaluate a {len(guess)}-letter guess against a {len(target)}-letter target"
        )


class EmptyVocabularyError(WorsdError):
    """No word is available to choose a target from."""


class GameNotFoundError(WorsdError, KeyError):
    """No session is registered under the given game id."""

    def __init__(self, game_id: str):
        super().__init__(game_id)
        self.game_id = game_id

    def __str__(self):
        return f"Game not found: {self.game_id}"
