"""
Vocabulary

Supplies the valid words and answers membership checks.
"""

import logging
from pathlib import Path
from typing import Iterable, Tuple, Union

from ..config.game_settings import FALLBACK_WORDS, WORD_LENGTH

logger = logging.getLogger(__name__)


class Vocabulary:
    """Immutable collection of lowercase words."""

    def __init__(self, words: Iterable[str]):
        # dict.fromkeys de-duplicates while keeping file order
        self._words: Tuple[str, ...] = tuple(dict.fromkeys(word.lower() for word in words))
        self._lookup = frozenset(self._words)

    @classmethod
    def from_file(cls, path: Union[str, Path], word_length: int = WORD_LENGTH) -> "Vocabulary":
        """
        Loads a whitespace-delimited word list.

        Only alphabetic words of ``word_length`` letters are kept. A missing,
        unreadable or empty file yields the fallback vocabulary so a game can
        always be started.
        """
        try:
            text = Path(path).read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not load %s (%s). Defaulting to %s.", path, e, ", ".join(FALLBACK_WORDS))
            return cls.fallback()

        words = [
            word.lower() for word in text.split()
            if len(word) == word_length and word.isascii() and word.isalpha()
        ]
        if not words:
            logger.warning("No %d-letter words in %s. Defaulting to %s.", word_length, path, ", ".join(FALLBACK_WORDS))
            return cls.fallback()

        logger.info("Loaded %d words from %s", len(words), path)
        return cls(words)

    @classmethod
    def fallback(cls) -> "Vocabulary":
        return cls(FALLBACK_WORDS)

    def contains(self, word: str) -> bool:
        return word in self._lookup

    def all(self) -> Tuple[str, ...]:
        return self._words

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self):
        return f"Vocabulary({len(self)} words)"
