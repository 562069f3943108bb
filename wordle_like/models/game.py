"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterStatus(Enum):
    """Letter evaluation status, ordered by display precedence."""
    UNKNOWN = "unknown"
    ABSENT = "absent"
    PRESENT = "present"
    CORRECT = "correct"

    @property
    def rank(self) -> int:
        return _STATUS_RANK[self]

    def outranks(self, other: "LetterStatus") -> bool:
        return self.rank > other.rank


_STATUS_RANK = {
    LetterStatus.UNKNOWN: 0,
    LetterStatus.ABSENT: 1,
    LetterStatus.PRESENT: 2,
    LetterStatus.CORRECT: 3,
}

Feedback = Tuple[LetterStatus, ...]


class GameStatus(Enum):
    """Lifecycle of a single session."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


@dataclass(frozen=True)
class Guess:
    """A submitted word and its feedback. Created only by a successful submit."""
    word: str
    feedback: Feedback

    def to_dict(self) -> Dict:
        return {
            "word": self.word,
            "feedback": [status.value for status in self.feedback],
        }


@dataclass(frozen=True)
class Settings:
    """Validated game configuration."""
    word_length: int
    max_attempts: int
    infinite_mode: bool = False

    @property
    def attempt_limit(self) -> Optional[int]:
        """Effective attempt limit, or None in infinite mode."""
        return None if self.infinite_mode else self.max_attempts

    def to_dict(self) -> Dict:
        return {
            "word_length": self.word_length,
            "max_attempts": self.max_attempts,
            "infinite_mode": self.infinite_mode,
        }


@dataclass
class GameState:
    """Read-only game snapshot handed to presentation layers."""
    game_id: str
    status: str
    game_over: bool
    won: bool
    word_length: int
    max_attempts: int
    infinite_mode: bool
    rows: int
    guesses: List[Dict]
    cells: List[str]
    cursor: int
    letter_status: Dict[str, str]
    is_shared: bool
    settings: Dict
    attempts_remaining: Optional[int] = None
    answer: Optional[str] = None  # Only included when game is over
    pending_settings: bool = False
