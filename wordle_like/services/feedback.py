"""
Feedback Engine

Implements the Wordle letter evaluation algorithm with correct handling of
repeated letters.
"""

from typing import List, Optional

from ..errors import LengthMismatchError
from ..models.game import Feedback, LetterStatus


def score(guess: str, target: str) -> Feedback:
    """
    Computes per-letter feedback for a guess against the target word.

    Exact matches are resolved first so a repeated letter is never credited
    more times than it occurs in the target.

    Args:
        guess: The submitted word
        target: The secret word, same length as the guess

    Returns:
        Feedback: One LetterStatus per position of the guess

    Raises:
        LengthMismatchError: If guess and target lengths differ
    """
    if len(guess) != len(target):
        raise LengthMismatchError(
            f"Guess length {len(guess)} does not match target length {len(target)}"
        )

    guess = guess.lower()
    target = target.lower()
    feedback = [LetterStatus.ABSENT] * len(guess)

    # Unconsumed target letters; None marks a consumed position
    target_chars: List[Optional[str]] = list(target)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == target_chars[i]:
            feedback[i] = LetterStatus.CORRECT
            target_chars[i] = None

    # Second pass: displaced letters consume the first unconsumed occurrence
    for i, letter in enumerate(guess):
        if feedback[i] is LetterStatus.CORRECT:
            continue
        if letter in target_chars:
            feedback[i] = LetterStatus.PRESENT
            target_chars[target_chars.index(letter)] = None

    return tuple(feedback)


def is_win(feedback: Feedback) -> bool:
    """True when every position is correct."""
    return bool(feedback) and all(status is LetterStatus.CORRECT for status in feedback)
