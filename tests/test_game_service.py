"""
Testing the game service: key routing, settings, share codes.
"""

import random

import pytest

from wordle_like.config.game_settings import BLANK_CELL, EMPTY_CELL
from wordle_like.errors import (
    GameNotFoundError, IncompleteGuessError, InvalidInputError, InvalidShareCodeError,
    InvalidWordError, NoCandidateWordsError,
)
from wordle_like.models.game import Settings
from wordle_like.services.dictionary import WordDictionary
from wordle_like.services.game_service import GameService
from wordle_like.services.share_codec import encode_word


@pytest.fixture
def shared_game(service):
    """A game whose target is 'crane', loaded through a share code."""
    game_id = service.create_new_game()
    service.load_shared_game(game_id, encode_word("crane"))
    return game_id


def press(service, game_id, keys):
    state, guess = None, None
    for key in keys:
        state, guess = service.handle_key(game_id, key)
    return state, guess


def test_create_game_uses_default_settings(service):
    game_id = service.create_new_game()
    state = service.get_game_state(game_id)

    assert state.word_length == 5
    assert state.max_attempts == 6
    assert state.status == "in_progress"
    assert state.answer is None
    assert state.cells == [EMPTY_CELL] * 5
    assert set(state.letter_status.values()) == {"unknown"}


def test_create_game_with_settings(service):
    game_id = service.create_new_game({'word_length': 4, 'max_attempts': 'infinite'})
    state = service.get_game_state(game_id)

    assert state.word_length == 4
    assert state.infinite_mode is True
    assert state.rows == 1
    assert state.attempts_remaining is None


def test_unknown_game(service):
    assert service.get_game_state("missing") is None
    with pytest.raises(GameNotFoundError):
        service.handle_key("missing", "a")


def test_key_presses_edit_the_row(service, shared_game):
    state, _ = press(service, shared_game, ["c", "R", "a"])
    assert state.cells == ["c", "r", "a", EMPTY_CELL, EMPTY_CELL]
    assert state.cursor == 3

    state, _ = press(service, shared_game, ["Backspace"])
    assert state.cells == ["c", "r", EMPTY_CELL, EMPTY_CELL, EMPTY_CELL]
    assert state.cursor == 2

    state, _ = press(service, shared_game, [" ", "ArrowLeft", "ArrowLeft", "Delete"])
    assert state.cells == ["c", EMPTY_CELL, BLANK_CELL, EMPTY_CELL, EMPTY_CELL]
    assert state.cursor == 1

    state, _ = press(service, shared_game, ["ArrowRight"])
    assert state.cursor == 2


def test_unsupported_key(service, shared_game):
    with pytest.raises(InvalidInputError):
        service.handle_key(shared_game, "Tab")
    with pytest.raises(InvalidInputError):
        service.handle_key(shared_game, "")


def test_enter_submits_and_wins(service, shared_game):
    state, guess = press(service, shared_game, list("train") + ["Enter"])
    assert guess.word == "train"
    assert state.status == "in_progress"
    assert state.letter_status["R"] == "correct"

    state, guess = press(service, shared_game, list("crane") + ["Enter"])
    assert state.status == "won"
    assert state.won is True
    assert state.answer == "crane"
    assert guess.to_dict()["feedback"] == ["correct"] * 5


def test_enter_with_blank_is_incomplete(service, shared_game):
    press(service, shared_game, list("cran") + ["_"])

    with pytest.raises(IncompleteGuessError):
        service.handle_key(shared_game, "Enter")
    assert service.get_game_state(shared_game).guesses == []


def test_whole_word_guess(service, shared_game):
    state, guess = service.submit_guess(shared_game, "TRAIN")

    assert guess.word == "train"
    assert state.guesses[0]["feedback"] == ["absent", "correct", "correct", "absent", "present"]


def test_rejected_whole_word_restores_row(service, shared_game):
    press(service, shared_game, ["c", "r"])

    with pytest.raises(InvalidWordError):
        service.submit_guess(shared_game, "zzzzz")

    state = service.get_game_state(shared_game)
    assert state.cells == ["c", "r", EMPTY_CELL, EMPTY_CELL, EMPTY_CELL]
    assert state.cursor == 2
    assert state.guesses == []


def test_guess_after_game_over(service, shared_game):
    service.submit_guess(shared_game, "crane")

    with pytest.raises(InvalidInputError):
        service.submit_guess(shared_game, "train")


def test_lost_game_reveals_answer(service):
    game_id = service.create_new_game({'word_length': 4, 'max_attempts': 2})
    service.load_shared_game(game_id, encode_word("frog"))

    service.submit_guess(game_id, "crab")
    state, _ = service.submit_guess(game_id, "from")

    assert state.status == "lost"
    assert state.game_over is True
    assert state.answer == "frog"


def test_settings_change_restarts_unshared_game(service):
    game_id = service.create_new_game()
    service.submit_guess(game_id, "train")

    state = service.update_settings(game_id, {'word_length': 4})

    assert state.word_length == 4
    assert state.guesses == []
    assert state.is_shared is False
    assert state.pending_settings is False


def test_settings_change_deferred_while_shared(service, shared_game):
    service.submit_guess(shared_game, "train")

    state = service.update_settings(shared_game, {'word_length': 4, 'max_attempts': 2})

    assert state.word_length == 5
    assert len(state.guesses) == 1
    assert state.is_shared is True
    assert state.pending_settings is True
    assert state.settings == {'word_length': 4, 'max_attempts': 2, 'infinite_mode': False}
    assert service.games[shared_game]["session"].target == "crane"


def test_restart_leaves_shared_mode_and_applies_settings(service, shared_game):
    service.update_settings(shared_game, {'word_length': 4})

    state = service.restart_game(shared_game)

    assert state.is_shared is False
    assert state.word_length == 4
    assert state.pending_settings is False
    assert service.games[shared_game]["share_reference"] is None


def test_unplayable_word_length_keeps_previous_settings():
    service = GameService(WordDictionary({"crane": 1, "train": 1, "frog": 1}), rng=random.Random(0),
                          default_settings=Settings(word_length=5, max_attempts=6))
    game_id = service.create_new_game()
    target = service.games[game_id]["session"].target

    with pytest.raises(NoCandidateWordsError):
        service.update_settings(game_id, {'word_length': 7})

    state = service.get_game_state(game_id)
    assert state.word_length == 5
    assert state.settings['word_length'] == 5
    assert state.pending_settings is False
    assert service.games[game_id]["session"].target == target

    state = service.restart_game(game_id)
    assert state.word_length == 5
    assert state.status == "in_progress"


def test_load_shared_game_adopts_word_length(service):
    game_id = service.create_new_game()
    code = encode_word("basketball")

    state = service.load_shared_game(game_id, code)

    assert state.is_shared is True
    assert state.word_length == 10
    assert state.settings["word_length"] == 10
    assert service.games[game_id]["share_reference"] == code


@pytest.mark.parametrize("code", ["!!!", "", None, encode_word("zzzzz"), encode_word("ab")])
def test_invalid_share_code_leaves_game_untouched(service, shared_game, code):
    service.submit_guess(shared_game, "train")
    before = service.get_game_state(shared_game)

    with pytest.raises(InvalidShareCodeError):
        service.load_shared_game(shared_game, code)

    assert service.get_game_state(shared_game) == before


def test_share_code_round_trip(service):
    game_id = service.create_new_game()
    target = service.games[game_id]["session"].target

    other = service.create_new_game()
    state = service.load_shared_game(other, service.get_share_code(game_id))

    assert service.games[other]["session"].target == target
    assert state.is_shared is True


def test_infinite_mode_rows_grow(service, shared_game):
    service.update_settings(shared_game, {'infinite_mode': True})
    state = service.restart_game(shared_game)
    assert state.rows == 1

    target = service.games[shared_game]["session"].target
    guess = next(w for w in service.dictionary.words_of_length(5) if w != target)
    state, _ = service.submit_guess(shared_game, guess)
    assert state.rows == 2


def test_delete_game(service):
    game_id = service.create_new_game()
    assert service.delete_game(game_id) is True
    assert service.delete_game(game_id) is False
