"""
Tokenizer and validator shared by document ingestion and query parsing.

Tokenization rules:
1. Split on runs of ASCII spaces (no locale-aware whitespace)
2. Drop empty tokens
3. No lowercasing, no punctuation stripping, no stemming

Validation rule:
- A character is invalid if its code point is below 0x20 (control range)
- One invalid character anywhere fails the whole text, not just its token
"""

from typing import List

from .errors import InvalidArgumentError


def is_valid_word(word: str) -> bool:
    """
    Check that a word contains no control characters.

    Examples:
        >>> is_valid_word("cat")
        True
        >>> is_valid_word("ca\\x12t")
        False
    """
    return not any(ord(char) < ord(" ") for char in word)


def split_into_words(text: str) -> List[str]:
    """
    Split text into non-empty space-delimited tokens.

    Examples:
        >>> split_into_words("  white cat   and collar ")
        ['white', 'cat', 'and', 'collar']
        >>> split_into_words("")
        []
    """
    return [word for word in text.split(" ") if word]


def validate_text(text: str) -> None:
    """
    Fail if text contains any control character.

    Raises:
        InvalidArgumentError: naming the first offending position
    """
    for position, char in enumerate(text):
        if ord(char) < ord(" "):
            raise InvalidArgumentError(
                f"Text contains invalid character {char!r} at position {position}"
            )
