"""
Keyboard Status Tracker

Aggregates guess feedback into the per-letter status shown on the keyboard.
"""

import string
from typing import Dict, Mapping

from ..errors import LengthMismatchError
from ..models.game import Feedback, LetterStatus

KEYBOARD_LETTERS = string.ascii_uppercase


def apply_feedback(status_map: Mapping[str, LetterStatus],
                   guess: str,
                   feedback: Feedback) -> Dict[str, LetterStatus]:
    """
    Returns a new status map upgraded with one guess's feedback.

    A letter's status only moves up the precedence order
    (correct > present > absent > unknown), so a later weaker result
    never overwrites an earlier stronger one.
    """
    if len(guess) != len(feedback):
        raise LengthMismatchError("Guess and feedback lengths differ")

    updated = dict(status_map)
    for letter, new_status in zip(guess.upper(), feedback):
        current_status = updated.get(letter, LetterStatus.UNKNOWN)
        if new_status.outranks(current_status):
            updated[letter] = new_status
    return updated


def full_keyboard(status_map: Mapping[str, LetterStatus]) -> Dict[str, str]:
    """A-Z projection of the status map for rendering."""
    return {
        letter: status_map.get(letter, LetterStatus.UNKNOWN).value
        for letter in KEYBOARD_LETTERS
    }
