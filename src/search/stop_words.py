"""
Stop-word set excluded from both indexing and querying.

Built once from a space-separated string or any iterable of words and
validated at construction time; there is no way to change it afterwards.
"""

import logging
from typing import Iterable, Iterator, Union

from .errors import InvalidArgumentError
from .tokenizer import is_valid_word, split_into_words

logger = logging.getLogger(__name__)


class StopWords:
    """
    Immutable, validated set of stop words.

    Examples:
        >>> stop_words = StopWords("in the")
        >>> "in" in stop_words
        True
        >>> list(StopWords(["on", "", "at"]))
        ['at', 'on']
    """

    __slots__ = ("_words",)

    def __init__(self, words: Union[str, Iterable[str], None] = None):
        if words is None:
            candidates = []
        elif isinstance(words, str):
            candidates = split_into_words(words)
        else:
            candidates = [word for word in words if word]

        for word in candidates:
            if not is_valid_word(word):
                raise InvalidArgumentError(f"Stop word {word!r} contains invalid characters")

        self._words = frozenset(candidates)
        logger.debug(f"Stop words configured: {len(self._words)} unique words")

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"StopWords({sorted(self._words)!r})"

    def filter(self, words: Iterable[str]) -> list:
        """Keep words that are not stop words, preserving order and duplicates"""
        return [word for word in words if word not in self._words]
