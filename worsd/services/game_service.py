"""
Game Service

Registry of independent game sessions, shared by the HTTP and WebSocket layers.
"""

import threading
import uuid
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from ..config.app_config import Config
from ..models.errors import GameNotFoundError
from ..models.game import GameState, SubmitOutcome, result_to_json
from ..utils.game_logger import game_logger
from .definition_service import DefinitionService
from .game_session import GameSession
from .keyboard_aggregator import project_keyboard
from .target_selector import RandomTargetSelector
from .vocabulary import Vocabulary


@dataclass
class GameRecord:
    """A session plus the advisory data kept next to it."""
    session: GameSession
    lock: threading.Lock = field(default_factory=threading.Lock)
    definitions: List[str] = field(default_factory=list)


class GameService:
    """
    Game service managing multiple game sessions.

    This class handles:
    - Session management with unique game IDs
    - Target selection and secure answer storage
    - Guess submission and snapshot publishing
    - Fire-and-forget definition lookup for each new target
    """

    def __init__(self,
                 vocabulary: Vocabulary,
                 selector: Optional[RandomTargetSelector] = None,
                 definition_service: Optional[DefinitionService] = None,
                 fetch_definitions: bool = True):
        self.vocabulary = vocabulary
        self.selector = selector or RandomTargetSelector()
        self.definition_service = definition_service or DefinitionService()
        self.fetch_definitions = fetch_definitions
        self.games: Dict[str, GameRecord] = {}
        self._lock = threading.Lock()

    def create_new_game(self, target: Optional[str] = None) -> str:
        """
        Creates a new game session.

        Args:
            target: Fixed target word; chosen from the vocabulary when omitted

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        target_word = target.lower() if target else self.selector.choose(self.vocabulary)

        with self._lock:
            self.games[game_id] = GameRecord(session=GameSession(target_word, self.vocabulary))

        game_logger.log_game_event(game_id, 'game_created', word_length=len(target_word))

        if self.fetch_definitions:
            worker = threading.Thread(
                target=self._fetch_definitions, args=(game_id, target_word), daemon=True
            )
            worker.start()

        return game_id

    def _get_record(self, game_id: str) -> GameRecord:
        with self._lock:
            record = self.games.get(game_id)
        if record is None:
            raise GameNotFoundError(game_id)
        return record

    def get_session(self, game_id: str) -> GameSession:
        return self._get_record(game_id).session

    def has_game(self, game_id: str) -> bool:
        with self._lock:
            return game_id in self.games

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session.

        The answer is only included once the session is solved.

        Returns:
            GameState object or None if game not found
        """
        try:
            record = self._get_record(game_id)
        except GameNotFoundError:
            return None

        with record.lock:
            snapshot = record.session.current_view()
            view = snapshot.to_dict()
            definitions = list(record.definitions)
            answer = record.session.target if view['solved'] else None

        return GameState(
            game_id=game_id,
            word_length=view['word_length'],
            solved=view['solved'],
            guesses=view['guesses'],
            guess_results=view['guess_results'],
            letter_status=view['letter_status'],
            input_word=view['input_word'],
            keyboard_rows=[result_to_json(row) for row in project_keyboard(snapshot.keyboard)],
            definitions=definitions,
            answer=answer,
        )

    def make_guess(self, game_id: str, guess: str) -> SubmitOutcome:
        """
        Submits a guess to a session.

        Raises:
            GameNotFoundError: If no session has this ID
        """
        return self._submit(game_id, lambda session: session.submit(guess))

    def submit_input(self, game_id: str) -> SubmitOutcome:
        """
        Submits the in-progress input word of a session.

        Raises:
            GameNotFoundError: If no session has this ID
        """
        return self._submit(game_id, lambda session: session.submit_input())

    def _submit(self, game_id: str, submit: Callable[[GameSession], SubmitOutcome]) -> SubmitOutcome:
        record = self._get_record(game_id)
        with record.lock:
            was_solved = record.session.solved
            outcome = submit(record.session)
            guess_count = len(record.session.guesses)

        if outcome.accepted and outcome.solved and not was_solved:
            game_logger.log_game_event(game_id, 'game_solved', guesses_used=guess_count)
        return outcome

    def update_input(self, game_id: str, text: str) -> str:
        record = self._get_record(game_id)
        with record.lock:
            return record.session.set_input(text)

    def get_definitions(self, game_id: str) -> List[str]:
        record = self._get_record(game_id)
        with record.lock:
            return list(record.definitions)

    def _fetch_definitions(self, game_id: str, word: str) -> None:
        """Background worker; a failed lookup leaves the definitions empty."""
        definitions = self.definition_service.lookup(word)
        if not definitions:
            return

        with self._lock:
            record = self.games.get(game_id)
        if record is None:
            return

        with record.lock:
            record.definitions = definitions
        game_logger.log_game_event(game_id, 'definitions_fetched', count=len(definitions))

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            if game_id in self.games:
                del self.games[game_id]
                return True
        return False

    def active_games_count(self) -> int:
        with self._lock:
            return len(self.games)


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(config_class=None) -> GameService:
    """Initialize the global game service instance from configuration."""
    global _game_service
    config_class = config_class or Config

    vocabulary = Vocabulary.from_file(config_class.WORDS_FILE, config_class.WORD_LENGTH)
    definition_service = DefinitionService(
        api_url=config_class.DEFINITION_API_URL,
        timeout=config_class.DEFINITION_TIMEOUT_SECONDS,
    )
    _game_service = GameService(
        vocabulary,
        definition_service=definition_service,
        fetch_definitions=config_class.FETCH_DEFINITIONS,
    )
    return _game_service
