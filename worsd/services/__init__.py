"""
Services Package

Contains all game logic and service classes.
"""

from .definition_service import DefinitionService
from .game_service import GameService, get_game_service, initialize_game_service
from .game_session import GameSession
from .keyboard_aggregator import aggregate, fold
from .letter_matcher import evaluate
from .target_selector import RandomTargetSelector
from .vocabulary import Vocabulary

__all__ = [
    'evaluate', 'aggregate', 'fold',
    'GameSession', 'Vocabulary', 'RandomTargetSelector', 'DefinitionService',
    'GameService', 'get_game_service', 'initialize_game_service'
]
