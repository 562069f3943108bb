"""
Game Session

State machine for a single game: target word, guess history, the editable
input row with its cursor, and the win/loss lifecycle.
"""

from typing import Dict, List, Optional, Tuple, Union

from ..config.game_settings import BLANK_CELL, EMPTY_CELL
from ..errors import IncompleteGuessError, InvalidInputError, InvalidWordError, LengthMismatchError
from ..models.game import GameStatus, Guess, LetterStatus, Settings
from .dictionary import WordDictionary
from .feedback import is_win, score
from .keyboard import apply_feedback

_DIRECTIONS = {"left": -1, "right": 1}


class GameSession:
    """
    One game against one target word.

    The session starts IN_PROGRESS and ends WON or LOST. Once it has ended,
    every editing operation is a no-op; only a new session replaces it.

    Attributes are exposed as read-only projections. Callers change a
    session only through move_cursor, select_cell, set_cell, clear_cell,
    fill and submit.
    """

    def __init__(self, target: str, settings: Settings, dictionary: WordDictionary,
                 is_shared: bool = False):
        target = target.lower()
        if len(target) != settings.word_length:
            raise LengthMismatchError(
                f"Target '{target}' does not have {settings.word_length} letters"
            )

        self._target = target
        self._settings = settings
        self._dictionary = dictionary
        self._is_shared = is_shared
        self._guesses: List[Guess] = []
        self._cells: List[str] = [EMPTY_CELL] * settings.word_length
        self._cursor = 0
        self._status = GameStatus.IN_PROGRESS
        self._keyboard: Dict[str, LetterStatus] = {}

    @classmethod
    def new(cls, target: str, settings: Settings, dictionary: WordDictionary,
            is_shared: bool = False) -> "GameSession":
        """Starts a fresh session: no guesses, empty row, cursor at 0."""
        return cls(target, settings, dictionary, is_shared=is_shared)

    # Read-only projections

    @property
    def target(self) -> str:
        return self._target

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def word_length(self) -> int:
        return self._settings.word_length

    @property
    def is_shared(self) -> bool:
        return self._is_shared

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status.is_terminal

    @property
    def guesses(self) -> Tuple[Guess, ...]:
        return tuple(self._guesses)

    @property
    def cells(self) -> Tuple[str, ...]:
        return tuple(self._cells)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def keyboard_status(self) -> Dict[str, LetterStatus]:
        return dict(self._keyboard)

    @property
    def attempts_remaining(self) -> Optional[int]:
        """Guesses left before a loss, or None in infinite mode."""
        limit = self._settings.attempt_limit
        if limit is None:
            return None
        return max(limit - len(self._guesses), 0)

    # Input row editing

    def move_cursor(self, direction: Union[int, str]) -> None:
        """Moves the cursor by a signed step ("left"/"right" or an int), clamped to the row."""
        if self.is_over:
            return
        if isinstance(direction, str):
            if direction.lower() not in _DIRECTIONS:
                raise InvalidInputError(f"Unknown cursor direction '{direction}'")
            step = _DIRECTIONS[direction.lower()]
        elif isinstance(direction, int) and not isinstance(direction, bool):
            step = direction
        else:
            raise InvalidInputError("Cursor direction must be 'left', 'right' or an integer")
        self._cursor = self._clamp(self._cursor + step)

    def select_cell(self, position: int) -> None:
        """Puts the cursor on a specific cell."""
        if self.is_over:
            return
        self._cursor = self._check_position(position)

    def set_cell(self, position: int, value: Optional[str]) -> None:
        """
        Writes a letter, the blank placeholder or an empty value into a cell.

        The cursor advances one cell after a letter or blank is written and
        stays put after an empty value.
        """
        if self.is_over:
            return
        position = self._check_position(position)
        value = self._normalize_cell(value)

        self._cells[position] = value
        if value == EMPTY_CELL:
            return
        self._cursor = self._clamp(position + 1)

    def clear_cell(self, position: Optional[int] = None) -> None:
        """
        Backspace behaviour at a position (the cursor by default).

        A filled cell is cleared in place. An empty cell moves the cursor one
        to the left and clears that cell instead. Nothing happens on an empty
        first cell.
        """
        if self.is_over:
            return
        position = self._cursor if position is None else self._check_position(position)

        if self._cells[position] != EMPTY_CELL:
            self._cells[position] = EMPTY_CELL
            self._cursor = position
            return

        if position == 0:
            self._cursor = 0
            return

        self._cursor = position - 1
        self._cells[self._cursor] = EMPTY_CELL

    def fill(self, word: str) -> None:
        """Writes a whole word into the row, replacing its contents."""
        if self.is_over:
            return
        if not isinstance(word, str) or not word.strip():
            raise InvalidInputError("Guess must be a valid string")
        word = word.strip().lower()
        if len(word) != self.word_length:
            raise IncompleteGuessError(f"Guess must be {self.word_length} letters long.")
        if not (word.isalpha() and word.isascii()):
            raise InvalidInputError("Guess must contain only letters")
        self._cells = list(word)
        self._cursor = self.word_length - 1

    # Submission

    def submit(self) -> Optional[Guess]:
        """
        Scores the current row against the target.

        Returns:
            The recorded Guess, or None when the game has already ended

        Raises:
            IncompleteGuessError: A cell is empty or holds the blank placeholder
            InvalidWordError: The word is not in the dictionary
        """
        if self.is_over:
            return None

        if any(cell in (EMPTY_CELL, BLANK_CELL) for cell in self._cells):
            raise IncompleteGuessError(f"Guess must be {self.word_length} letters long.")

        word = "".join(self._cells)
        if not self._dictionary.has(word):
            raise InvalidWordError("Not a valid word.")

        feedback = score(word, self._target)
        self._keyboard = apply_feedback(self._keyboard, word, feedback)
        guess = Guess(word=word, feedback=feedback)
        self._guesses.append(guess)
        self._cells = [EMPTY_CELL] * self.word_length
        self._cursor = 0

        limit = self._settings.attempt_limit
        if is_win(feedback):
            self._status = GameStatus.WON
        elif limit is not None and len(self._guesses) >= limit:
            self._status = GameStatus.LOST

        return guess

    # Helpers

    def _clamp(self, position: int) -> int:
        return max(0, min(position, self.word_length - 1))

    def _check_position(self, position) -> int:
        if isinstance(position, bool) or not isinstance(position, int):
            raise InvalidInputError("Cell position must be an integer")
        if not 0 <= position < self.word_length:
            raise InvalidInputError(f"Cell position must be between 0 and {self.word_length - 1}")
        return position

    @staticmethod
    def _normalize_cell(value: Optional[str]) -> str:
        if value is None or value == EMPTY_CELL:
            return EMPTY_CELL
        if value == BLANK_CELL:
            return BLANK_CELL
        if isinstance(value, str) and len(value) == 1 and value.isalpha() and value.isascii():
            return value.lower()
        raise InvalidInputError("Cell value must be a single letter, the blank placeholder or empty")

    def __repr__(self) -> str:
        return (f"GameSession(status={self._status.value}, guesses={len(self._guesses)}, "
                f"word_length={self.word_length}, shared={self._is_shared})")
