"""
Query parser for plus/minus free-text queries.

Syntax:
    fluffy cat -collar

- Terms are separated by spaces
- A leading "-" marks a term as excluded (minus word); the "-" is stripped
- Stop words are dropped entirely, whether plus or minus
- Duplicates collapse; both term sets iterate in lexicographic order

Rejected with InvalidArgumentError:
- empty or blank query
- a lone "-" token (this covers a query ending with a bare "-")
- a token starting with "--"
- control characters anywhere in the query
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from .errors import InvalidArgumentError
from .stop_words import StopWords
from .tokenizer import split_into_words, validate_text

logger = logging.getLogger(__name__)

MINUS_PREFIX = "-"


@dataclass(frozen=True)
class Query:
    """Parsed query: sorted, de-duplicated plus and minus words"""

    plus_words: Tuple[str, ...] = ()
    minus_words: Tuple[str, ...] = ()


@dataclass(frozen=True)
class QueryWord:
    data: str
    is_minus: bool
    is_stop: bool


def parse_query_word(word: str, stop_words: StopWords) -> QueryWord:
    """
    Classify one query token.

    Raises:
        InvalidArgumentError: for a lone "-" or a "--" prefix
    """
    is_minus = False
    if word.startswith(MINUS_PREFIX):
        is_minus = True
        word = word[len(MINUS_PREFIX):]
        if not word:
            raise InvalidArgumentError("Query contains a minus sign without a word")
        if word.startswith(MINUS_PREFIX):
            raise InvalidArgumentError(f"Query word '--{word[1:]}' has a double minus")

    return QueryWord(data=word, is_minus=is_minus, is_stop=word in stop_words)


def parse_query(text: str, stop_words: StopWords) -> Query:
    """
    Parse raw query text into plus and minus word sets.

    Args:
        text: Raw query text
        stop_words: Words dropped from the query

    Returns:
        Query with lexicographically ordered, disjoint-by-role word tuples

    Raises:
        InvalidArgumentError: if the query is empty or malformed

    Examples:
        >>> parse_query("fluffy -collar cat fluffy", StopWords())
        Query(plus_words=('cat', 'fluffy'), minus_words=('collar',))
        >>> parse_query("the cat -in", StopWords("in the"))
        Query(plus_words=('cat',), minus_words=())
    """
    validate_text(text)

    words = split_into_words(text)
    if not words:
        raise InvalidArgumentError("Query is empty")

    plus_words = set()
    minus_words = set()
    for word in words:
        query_word = parse_query_word(word, stop_words)
        if query_word.is_stop:
            continue
        if query_word.is_minus:
            minus_words.add(query_word.data)
        else:
            plus_words.add(query_word.data)

    query = Query(plus_words=tuple(sorted(plus_words)), minus_words=tuple(sorted(minus_words)))
    logger.debug(f"Parsed query {text!r}: plus={list(query.plus_words)}, minus={list(query.minus_words)}")
    return query
