"""
Testing share code encoding and decoding.
"""

import pytest

from wordle_like.services.share_codec import decode_word, encode_word


def test_encode_is_base64():
    assert encode_word("crane") == "Y3JhbmU="


def test_encode_lowercases():
    assert encode_word("CRANE") == encode_word("crane")


@pytest.mark.parametrize("word", ["ant", "frog", "crane", "basketball"])
def test_decode_restores_word(word):
    assert decode_word(encode_word(word)) == word


def test_decode_ignores_surrounding_whitespace():
    assert decode_word("  Y3JhbmU=\n") == "crane"


@pytest.mark.parametrize("code", [
    "",
    "   ",
    "!!!",
    "abc",          # bad padding
    "Y3Jh bmU=",    # embedded space
    "//4=",         # not UTF-8
    "é",
    None,
    42,
])
def test_decode_rejects_malformed_codes(code):
    assert decode_word(code) is None
