"""
Target Selector

Chooses the hidden word for a new game.
"""

import random
from typing import Optional

from ..models.errors import EmptyVocabularyError
from .vocabulary import Vocabulary


class RandomTargetSelector:
    """Picks a target uniformly at random from the vocabulary."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def choose(self, vocabulary: Vocabulary) -> str:
        words = vocabulary.all()
        if not words:
            raise EmptyVocabularyError("Cannot choose a target from an empty vocabulary")
        return self.rng.choice(words)
