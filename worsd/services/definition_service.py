"""
Definition Service

Best-effort lookup of dictionary definitions for the target word.
"""

import logging
from typing import List, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.dictionaryapi.dev/api/v2/entries/en/{word}"


class DefinitionService:
    """
    Fetches definitions from the public dictionary API.

    Every failure (network, HTTP status, JSON, unexpected shape) is logged
    and reported as ``None``; nothing is raised to the caller.
    """

    def __init__(self, api_url: str = DEFAULT_API_URL, timeout: float = 5.0,
                 session: Optional[requests.Session] = None):
        self.api_url = api_url
        self.timeout = timeout
        self.session = session or requests

    def lookup(self, word: str) -> Optional[List[str]]:
        url = self.api_url.format(word=word)
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            definitions = self._parse(response.json())
        except (requests.RequestException, ValueError, LookupError, TypeError, AttributeError) as e:
            logger.warning("Definition lookup for '%s' failed: %s", word, e)
            return None

        logger.info("Fetched %d definition(s) for '%s'", len(definitions), word)
        return definitions

    @staticmethod
    def _parse(payload) -> List[str]:
        """Flattens every definition string of the first entry's meanings."""
        entry = payload[0]
        return [
            definition['definition']
            for meaning in entry['meanings']
            for definition in meaning['definitions']
            if isinstance(definition.get('definition'), str)
        ]
