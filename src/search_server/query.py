import logging
from dataclasses import dataclass, field

from search_server.errors import InvalidArgumentError
from search_server.index import DocumentIndex
from search_server.tokenizer import is_valid_minus_word, is_valid_word, split_into_words

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Query:
    """Parsed query: terms that score documents and terms that exclude them."""

    plus_words: frozenset[str] = field(default_factory=frozenset)
    minus_words: frozenset[str] = field(default_factory=frozenset)


def validate_raw_query(raw_query: str) -> None:
    """
    Rejects queries that cannot be parsed.

    Raises:
        InvalidArgumentError: If the query is empty, or any token contains control
            characters or malformed negation (``-``, ``--term``).
    """
    if not raw_query:
        raise InvalidArgumentError("Query is empty")
    for word in split_into_words(raw_query):
        if not is_valid_word(word):
            raise InvalidArgumentError(f"Query word {word!r} contains invalid characters")
        if not is_valid_minus_word(word):
            raise InvalidArgumentError(f"Query word {word!r} is not a valid minus word")


def parse_query(raw_query: str, index: DocumentIndex) -> Query:
    """
    Splits a query into plus and minus words.

    A negated word keeps scoring as a plus word as well, but since minus words are
    applied last, any document containing it is excluded regardless.
    """
    plus_words: set[str] = set()
    minus_words: set[str] = set()
    for word in index.split_into_words_no_stop(raw_query):
        if word.startswith("-"):
            word = word[1:]
            if index.is_stop_word(word):
                continue
            minus_words.add(word)
        plus_words.add(word)

    logger.debug("Parsed query %r: plus=%s minus=%s", raw_query, sorted(plus_words), sorted(minus_words))
    return Query(frozenset(plus_words), frozenset(minus_words))
