"""
Game Configuration Constants Module

This module defines the game rule constants and the word dictionary loader.
All game parameters are centralized here to enable easy modification.
"""

import json
import logging
import os
from typing import Dict, Final, Optional

logger = logging.getLogger('wordle_game')

# Word length bounds offered by the settings panel
MIN_WORD_LENGTH: Final[int] = 3
MAX_WORD_LENGTH: Final[int] = 10

# Attempt limit bounds offered by the settings panel
MIN_ATTEMPTS: Final[int] = 1
MAX_ATTEMPTS: Final[int] = 10

DEFAULT_WORD_LENGTH: Final[int] = 4
DEFAULT_MAX_ATTEMPTS: Final[int] = 4

INFINITE: Final[str] = "infinite"
"""Value accepted for max_attempts to switch infinite mode on."""

EMPTY_CELL: Final[str] = ""
BLANK_CELL: Final[str] = "_"
"""Placeholder a player may put in a cell; occupies a position but blocks submission."""

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words.json'
)


def load_word_dictionary(json_file_path: Optional[str] = None) -> Dict[str, object]:
    """
    Load the word dictionary from a JSON file.

    The file holds either an object mapping words to arbitrary metadata or an
    array of words. Words are lowercased; entries that are not purely
    alphabetic are skipped.

    A missing or malformed file degrades to an empty dictionary so the game
    keeps running (every guess is then rejected as an invalid word).

    Returns:
        Dict[str, object]: Mapping of lowercase word to its metadata
    """
    json_file_path = json_file_path or DEFAULT_WORD_LIST_PATH

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.error(f"Word list file not found: {json_file_path}")
        return {}
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error(f"Invalid JSON in word list {json_file_path}: {e}")
        return {}

    if isinstance(data, list):
        data = {word: None for word in data}
    elif not isinstance(data, dict):
        logger.error(f"Word list {json_file_path} must contain an object or an array of words")
        return {}

    dictionary = {}
    skipped = 0
    for word, metadata in data.items():
        if not isinstance(word, str) or not word.isalpha() or not word.isascii():
            skipped += 1
            continue
        dictionary[word.lower()] = metadata

    if skipped:
        logger.warning(f"Skipped {skipped} non-alphabetic entries in {json_file_path}")
    if not dictionary:
        logger.error(f"Word list {json_file_path} is empty")

    return dictionary


def validate_word_dictionary_integrity(dictionary: Dict[str, object]) -> bool:
    """
    Validates the integrity and consistency of a loaded word dictionary.

    This function performs validation to ensure:
    1. Character validation: Only alphabetic characters allowed
    2. Format validation: Consistent lowercase formatting
    3. Playability: Every offered word length has at least one word

    Returns:
        bool: True if the dictionary passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not dictionary:
        raise ValueError("Word dictionary cannot be empty")

    for word in dictionary:
        if not word.isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word '{word}' is not in lowercase format")

    lengths = {len(word) for word in dictionary}
    missing = [n for n in range(MIN_WORD_LENGTH, MAX_WORD_LENGTH + 1) if n not in lengths]
    if missing:
        raise ValueError(f"No words available for lengths: {missing}")

    return True


def get_word_statistics(dictionary: Dict[str, object]) -> dict:
    """
    Analyzes the dictionary and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in the dictionary
            - words_by_length: Count of words for each length
            - avg_vowel_count: Average vowels per word
            - most_common_letters: Five most frequent letters
    """
    if not dictionary:
        return {"error": "Word dictionary is empty"}

    vowels = set('aeiou')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in dictionary)

    words_by_length = {}
    letter_frequency = {}
    for word in dictionary:
        words_by_length[len(word)] = words_by_length.get(len(word), 0) + 1
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(dictionary),
        "words_by_length": dict(sorted(words_by_length.items())),
        "avg_vowel_count": round(total_vowels / len(dictionary), 2),
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


# Module check: validate the bundled word list
if __name__ == "__main__":

    try:
        words = load_word_dictionary()
        validate_word_dictionary_integrity(words)
        print(" Word list validation passed")

        stats = get_word_statistics(words)
        print(f" Game statistics: {stats}")

        print(" All configuration validation checks passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
