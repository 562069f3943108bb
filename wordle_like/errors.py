"""
Game Errors

Exception types raised by the game engine and surfaced by the controllers.
"""


class GameError(Exception):
    """Base class for user-correctable game errors. Never ends a session."""

    error_type = "game_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class IncompleteGuessError(GameError):
    """Submission attempted while a cell is empty or holds a blank placeholder."""

    error_type = "incomplete_guess"


class InvalidWordError(GameError):
    """Submitted word is not in the dictionary."""

    error_type = "invalid_word"


class InvalidShareCodeError(GameError):
    """Share code could not be decoded or does not name a dictionary word."""

    error_type = "invalid_share_code"


class InvalidInputError(GameError):
    """Malformed cell value, key, position or request payload."""

    error_type = "invalid_input"


class NoCandidateWordsError(GameError):
    """No dictionary word has the requested length."""

    error_type = "no_candidate_words"


class LengthMismatchError(ValueError):
    """Guess and target lengths differ. Indicates a caller bug."""


class GameNotFoundError(GameError):
    """No game is registered under the given id."""

    error_type = "game_not_found"
