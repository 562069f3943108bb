"""
Game Service

Manages game sessions by id and routes player actions onto them.
"""

import random
import threading
import time
import uuid
from typing import Dict, Mapping, Optional, Tuple

from ..config.app_config import Config
from ..config.game_settings import (
    BLANK_CELL, EMPTY_CELL, MAX_WORD_LENGTH, MIN_WORD_LENGTH, load_word_dictionary,
)
from ..errors import GameError, GameNotFoundError, InvalidInputError, InvalidShareCodeError
from ..models.game import GameState, GameStatus, Guess, Settings
from .dictionary import WordDictionary
from .game_session import GameSession
from .keyboard import full_keyboard
from .settings_policy import apply_settings, new_random_session, resolve_settings
from .share_codec import decode_word, encode_word

# Key names sent by the on-screen and physical keyboards
KEY_ENTER = "Enter"
KEY_BACKSPACE = "Backspace"
KEY_DELETE = "Delete"
KEY_LEFT = "ArrowLeft"
KEY_RIGHT = "ArrowRight"
BLANK_KEYS = (" ", "Space", BLANK_CELL)


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Random target selection from the shared dictionary
    - Routing of key presses and cell edits to the session
    - Settings changes, including the shared-game guard
    - Share code generation and loading

    Every mutating call holds the service lock, so actions on a game are
    applied one at a time in arrival order.
    """

    def __init__(self, dictionary: WordDictionary, rng: Optional[random.Random] = None,
                 default_settings: Optional[Settings] = None):
        self.dictionary = dictionary
        self.rng = rng or random.Random()
        self.default_settings = default_settings or resolve_settings(None)
        self.games: Dict[str, Dict] = {}  # Store active games by game_id
        self._lock = threading.RLock()

    def create_new_game(self, raw_settings: Optional[Mapping] = None) -> str:
        """
        Creates a new game session with a randomly selected word.

        Args:
            raw_settings: Optional word_length / max_attempts / infinite_mode

        Returns:
            str: Unique game ID for this session
        """
        settings = resolve_settings(raw_settings, self.default_settings)
        with self._lock:
            session = new_random_session(settings, self.dictionary, self.rng)
            game_id = str(uuid.uuid4())
            self.games[game_id] = {
                "session": session,
                "settings": settings,
                "share_reference": None,
                "created_at": time.time(),
            }
        return game_id

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the answer).

        Args:
            game_id: Unique game identifier

        Returns:
            GameState object or None if game not found
        """
        with self._lock:
            game = self.games.get(game_id)
            if game is None:
                return None
            return self._build_state(game_id, game)

    def handle_key(self, game_id: str, key: str) -> Tuple[GameState, Optional[Guess]]:
        """
        Applies a single key press.

        Letters fill the cell under the cursor, Space or "_" places the blank
        placeholder, Backspace clears with merge-left behaviour, Delete clears
        the cursor cell in place, the arrow keys move the cursor and Enter
        submits the row.

        Returns:
            Tuple of (new state, recorded guess if Enter produced one)
        """
        if not isinstance(key, str) or not key:
            raise InvalidInputError("Key is required")

        with self._lock:
            game = self._get_game(game_id)
            session: GameSession = game["session"]
            guess = None

            if key == KEY_ENTER:
                guess = session.submit()
            elif key == KEY_BACKSPACE:
                session.clear_cell()
            elif key == KEY_DELETE:
                session.set_cell(session.cursor, EMPTY_CELL)
            elif key == KEY_LEFT:
                session.move_cursor(-1)
            elif key == KEY_RIGHT:
                session.move_cursor(1)
            elif key in BLANK_KEYS:
                session.set_cell(session.cursor, BLANK_CELL)
            elif len(key) == 1 and key.isalpha() and key.isascii():
                session.set_cell(session.cursor, key)
            else:
                raise InvalidInputError(f"Unsupported key '{key}'")

            return self._build_state(game_id, game), guess

    def set_cell(self, game_id: str, position: int, value: Optional[str]) -> GameState:
        with self._lock:
            game = self._get_game(game_id)
            game["session"].set_cell(position, value)
            return self._build_state(game_id, game)

    def move_cursor(self, game_id: str, direction=None, position: Optional[int] = None) -> GameState:
        """Moves the cursor by a direction, or to an absolute position."""
        if direction is None and position is None:
            raise InvalidInputError("Either direction or position is required")
        with self._lock:
            game = self._get_game(game_id)
            if position is not None:
                game["session"].select_cell(position)
            else:
                game["session"].move_cursor(direction)
            return self._build_state(game_id, game)

    def clear_cell(self, game_id: str, position: Optional[int] = None) -> GameState:
        with self._lock:
            game = self._get_game(game_id)
            game["session"].clear_cell(position)
            return self._build_state(game_id, game)

    def submit_guess(self, game_id: str, guess: Optional[str] = None) -> Tuple[GameState, Guess]:
        """
        Submits the input row, or a whole word typed in one go.

        Args:
            game_id: Unique game identifier
            guess: Optional word to write into the row before submitting

        Returns:
            Tuple of (updated state, recorded guess)

        Raises:
            InvalidInputError: If the game is already over
            IncompleteGuessError / InvalidWordError: From the session; state is unchanged
        """
        with self._lock:
            game = self._get_game(game_id)
            session: GameSession = game["session"]

            if session.is_over:
                raise InvalidInputError("Game is already over")

            if guess is not None:
                previous = (session.cells, session.cursor)
                session.fill(guess)
                try:
                    recorded = session.submit()
                except GameError:
                    # A rejected whole-word guess leaves the row as it was
                    self._restore_row(session, *previous)
                    raise
            else:
                recorded = session.submit()

            return self._build_state(game_id, game), recorded

    def update_settings(self, game_id: str, raw_settings: Optional[Mapping]) -> GameState:
        """
        Applies a settings change to a game.

        The session itself only restarts when the game is not shared; a shared
        game keeps its word until the player starts a new game. The settings
        are stored only once the session accepted them, so a length with no
        candidate words leaves the game as it was.
        """
        with self._lock:
            game = self._get_game(game_id)
            settings = resolve_settings(raw_settings, game["settings"])
            session = apply_settings(game["session"], settings, self.dictionary, self.rng)
            game["session"] = session
            game["settings"] = settings
            return self._build_state(game_id, game)

    def restart_game(self, game_id: str) -> GameState:
        """Explicit new game: leaves shared mode and draws a new random target."""
        with self._lock:
            game = self._get_game(game_id)
            game["session"] = new_random_session(game["settings"], self.dictionary, self.rng)
            game["share_reference"] = None
            return self._build_state(game_id, game)

    def get_share_code(self, game_id: str) -> str:
        with self._lock:
            return encode_word(self._get_game(game_id)["session"].target)

    def load_shared_game(self, game_id: str, share_code: str) -> GameState:
        """
        Replaces the game's session with one targeting the shared word.

        The decoded word must be a dictionary word of a playable length. On
        failure the current session is left untouched.

        Raises:
            InvalidShareCodeError: If the code cannot be decoded or is not a valid word
        """
        word = decode_word(share_code)
        if not word or not word.isalpha() or not self.dictionary.has(word):
            raise InvalidShareCodeError("Invalid share code.")
        if not MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH:
            raise InvalidShareCodeError("Invalid share code.")

        with self._lock:
            game = self._get_game(game_id)
            current: Settings = game["settings"]
            settings = Settings(
                word_length=len(word),
                max_attempts=current.max_attempts,
                infinite_mode=current.infinite_mode,
            )
            game["settings"] = settings
            game["session"] = GameSession.new(word, settings, self.dictionary, is_shared=True)
            game["share_reference"] = share_code.strip()
            return self._build_state(game_id, game)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            if game_id in self.games:
                del self.games[game_id]
                return True
            return False

    def _get_game(self, game_id: str) -> Dict:
        game = self.games.get(game_id)
        if game is None:
            raise GameNotFoundError("Game not found")
        return game

    @staticmethod
    def _restore_row(session: GameSession, cells, cursor) -> None:
        for position, value in enumerate(cells):
            session.set_cell(position, value)
        session.select_cell(cursor)

    @staticmethod
    def _build_state(game_id: str, game: Dict) -> GameState:
        session: GameSession = game["session"]
        settings: Settings = session.settings

        if settings.infinite_mode:
            rows = len(session.guesses) + (0 if session.is_over else 1)
        else:
            rows = settings.max_attempts

        return GameState(
            game_id=game_id,
            status=session.status.value,
            game_over=session.is_over,
            won=session.status is GameStatus.WON,
            word_length=settings.word_length,
            max_attempts=settings.max_attempts,
            infinite_mode=settings.infinite_mode,
            rows=rows,
            guesses=[guess.to_dict() for guess in session.guesses],
            cells=list(session.cells),
            cursor=session.cursor,
            letter_status=full_keyboard(session.keyboard_status),
            is_shared=session.is_shared,
            settings=game["settings"].to_dict(),
            attempts_remaining=session.attempts_remaining,
            answer=session.target if session.is_over else None,
            pending_settings=game["settings"] != settings,
        )


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(config_class=Config,
                            dictionary: Optional[WordDictionary] = None,
                            rng: Optional[random.Random] = None) -> GameService:
    """
    Initialize the global game service instance.

    The dictionary is loaded once here and shared by every session.
    """
    global _game_service
    if dictionary is None:
        dictionary = WordDictionary(load_word_dictionary(config_class.WORD_LIST_PATH))
    if rng is None:
        rng = random.Random(config_class.RANDOM_SEED)
    default_settings = resolve_settings({
        'word_length': config_class.DEFAULT_WORD_LENGTH,
        'max_attempts': config_class.DEFAULT_MAX_ATTEMPTS,
        'infinite_mode': config_class.DEFAULT_INFINITE_MODE,
    })
    _game_service = GameService(dictionary, rng=rng, default_settings=default_settings)
    return _game_service
