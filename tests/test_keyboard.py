"""
Testing keyboard status aggregation.
"""

from wordle_like.models.game import LetterStatus
from wordle_like.services.feedback import score
from wordle_like.services.keyboard import KEYBOARD_LETTERS, apply_feedback, full_keyboard


def test_first_guess_populates_uppercase_letters():
    status = apply_feedback({}, "train", score("train", "crane"))

    assert status == {
        "T": LetterStatus.ABSENT,
        "R": LetterStatus.CORRECT,
        "A": LetterStatus.CORRECT,
        "I": LetterStatus.ABSENT,
        "N": LetterStatus.PRESENT,
    }


def test_correct_is_never_downgraded():
    status = apply_feedback({}, "broom", score("broom", "crane"))
    assert status["R"] is LetterStatus.CORRECT

    # r is only present in react
    status = apply_feedback(status, "react", score("react", "crane"))

    assert status["R"] is LetterStatus.CORRECT


def test_present_is_not_overwritten_by_absent():
    status = {"E": LetterStatus.PRESENT}
    # speed vs abide: the second e is absent
    status = apply_feedback(status, "speed", score("speed", "abide"))

    assert status["E"] is LetterStatus.PRESENT


def test_absent_upgrades_to_present_then_correct():
    status = apply_feedback({}, "speed", score("speed", "crane"))
    assert status["S"] is LetterStatus.ABSENT

    status = apply_feedback(status, "react", score("react", "crane"))
    assert status["E"] is LetterStatus.PRESENT

    status = apply_feedback(status, "crane", score("crane", "crane"))
    assert status["E"] is LetterStatus.CORRECT


def test_input_map_is_not_mutated():
    original = {"C": LetterStatus.ABSENT}
    apply_feedback(original, "crane", score("crane", "crane"))

    assert original == {"C": LetterStatus.ABSENT}


def test_full_keyboard_defaults_to_unknown():
    board = full_keyboard({"Q": LetterStatus.PRESENT})

    assert list(board) == list(KEYBOARD_LETTERS)
    assert board["Q"] == "present"
    assert board["Z"] == "unknown"
