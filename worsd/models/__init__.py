"""
Data Models Package

Contains all data models, schemas and errors used throughout the application.
"""

from .game import GameState, GameView, GuessResult, KeyboardState, LetterStatus, SubmitOutcome
from .errors import (
    EmptyVocabularyError,
    GameNotFoundError,
    GuessRejectedError,
    InvalidLengthError,
    NotInVocabularyError,
    WorsdError,
    WrongLengthError,
)

__all__ = [
    'GameState', 'GameView', 'GuessResult', 'KeyboardState', 'LetterStatus', 'SubmitOutcome',
    'WorsdError', 'GuessRejectedError', 'WrongLengthError', 'NotInVocabularyError',
    'InvalidLengthError', 'EmptyVocabularyError', 'GameNotFoundError',
]
