"""
Game Configuration Constants Module

This module defines the game rule constants and the curated word database.
The word database doubles as the answer pool and the dictionary of accepted
guesses: a guess is legal only if it is one of these words.
"""

import json
import os
from typing import Dict, Final, Iterable, List, Optional

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""
Number of letters in every target word and every guess.
"""

MAX_GUESSES: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'wordles.json'
)


class WordListError(ValueError):
    """Raised when a word list is empty or inconsistent."""


def validate_word_list_integrity(words: List[str], word_length: Optional[int] = None) -> bool:
    """
    Validates the integrity and consistency of a word database.

    This function performs validation to ensure:
    1. Non-empty: at least one word is available as a target
    2. Length validation: all words share the same length
    3. Character validation: only alphabetic characters allowed
    4. Format validation: consistent uppercase formatting
    5. Uniqueness validation: no duplicate entries

    Args:
        words: Word list to check
        word_length: Required length; defaults to the length of the first word

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        WordListError: If any validation check fails with detailed error message
    """
    if not words:
        raise WordListError("Word list cannot be empty")

    expected_length = word_length if word_length is not None else len(words[0])

    for index, word in enumerate(words):
        if len(word) != expected_length:
            raise WordListError(
                f"Word at index {index} '{word}' is not {expected_length} characters long"
            )

        if not word.isalpha():
            raise WordListError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise WordListError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise WordListError(f"Duplicate words found in word list: {duplicates}")

    return True


def load_word_list(path: str = DEFAULT_WORD_LIST_PATH, word_length: int = WORD_LENGTH) -> List[str]:
    """
    Load a word list from a JSON array file.

    Returns:
        List[str]: List of uppercase words of length `word_length`

    Raises:
        FileNotFoundError: If the file is not found
        WordListError: If the JSON is malformed, not an array, or fails validation
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {path}")
    except json.JSONDecodeError as e:
        raise WordListError(f"Invalid JSON in {os.path.basename(path)}: {e}") from e

    if not isinstance(word_list, list):
        raise WordListError("JSON file must contain an array of words")

    uppercase_words = [str(word).strip().upper() for word in word_list]
    validate_word_list_integrity(uppercase_words, word_length)
    return uppercase_words


def get_word_statistics(words: Iterable[str]) -> Dict:
    """
    Analyzes a word list and returns statistical information for game balancing.

    Returns:
        dict: total_words, avg_vowel_count, letter_frequency, most_common_letters
    """
    words = list(words)
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


# Curated Word Database loaded from JSON file
WORD_LIST: Final[List[str]] = load_word_list()


if __name__ == "__main__":

    try:
        validate_word_list_integrity(WORD_LIST, WORD_LENGTH)
        print(" Word list validation passed")

        stats = get_word_statistics(WORD_LIST)
        print(f" Game statistics: {stats}")
    except WordListError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
