"""
Game Configuration Constants Module

Game rules and constants, kept apart from the environment-driven
application configuration.
"""

from collections import Counter
from typing import Dict, Final, Iterable, Tuple

WORD_LENGTH: Final[int] = 5
"""Length of the words kept from the word list file."""

FALLBACK_WORDS: Final[Tuple[str, ...]] = ("worsd",)
"""Vocabulary used when the word list file is unavailable or empty."""

KEYBOARD_ROWS: Final[Tuple[str, ...]] = ("qwertyuiop", "asdfghjkl", "zxcvbnm")
"""Virtual keyboard layout the presentation layer renders letter status onto."""

VOWELS = frozenset('aeiou')


def get_word_statistics(words: Iterable[str]) -> Dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in the vocabulary
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Five most frequent letters
    """
    words = list(words)
    if not words:
        return {"error": "Word list is empty"}

    total_vowels = sum(len([char for char in word if char in VOWELS]) for word in words)
    letter_frequency = Counter(char for word in words for char in word)

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": dict(letter_frequency),
        "most_common_letters": letter_frequency.most_common(5)
    }
