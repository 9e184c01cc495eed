import logging
from collections import defaultdict
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

import numpy as np

from search_server.document import DocumentData, DocumentStatus, compute_average_rating
from search_server.errors import DocumentNotFoundError, InvalidArgumentError, OutOfRangeError
from search_server.tokenizer import is_valid_word, split_into_words

logger = logging.getLogger(__name__)

_EMPTY_POSTINGS: Mapping[int, float] = MappingProxyType({})


def parse_stop_words(stop_words: str | Iterable[str]) -> frozenset[str]:
    """
    Builds the stop-word set from a space-delimited string or a collection of strings.

    Each element of a collection is split on spaces as well, and empty elements are ignored.

    Raises:
        InvalidArgumentError: If any stop word contains control characters.
    """
    if isinstance(stop_words, str):
        stop_words = [stop_words]
    words = [word for text in stop_words for word in split_into_words(text)]
    for word in words:
        if not is_valid_word(word):
            raise InvalidArgumentError(f"Stop word {word!r} contains invalid characters")
    return frozenset(words)


class DocumentIndex:
    """
    In-memory inverted index over short text documents.

    Args:
        stop_words (str | Iterable[str]): Terms excluded from indexing and querying.

    Attributes:
        stop_words (frozenset[str]): The configured stop words.
    """

    def __init__(self, stop_words: str | Iterable[str] = ""):
        self.stop_words = parse_stop_words(stop_words)
        self._word_to_document_freqs: defaultdict[str, dict[int, float]] = defaultdict(dict)
        self._documents: dict[int, DocumentData] = {}
        self._document_ids: list[int] = []

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[int]:
        return iter(self._document_ids)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    @property
    def document_count(self) -> int:
        return len(self._documents)

    def is_stop_word(self, word: str) -> bool:
        return word in self.stop_words

    def split_into_words_no_stop(self, text: str) -> list[str]:
        """Tokenizes text, rejecting invalid words and dropping stop words."""
        words = []
        for word in split_into_words(text):
            if not is_valid_word(word):
                raise InvalidArgumentError(f"Word {word!r} contains invalid characters")
            if not self.is_stop_word(word):
                words.append(word)
        return words

    def add_document(
        self,
        document_id: int,
        text: str,
        status: DocumentStatus = DocumentStatus.ACTUAL,
        ratings: Iterable[int] = (),
    ) -> None:
        """
        Indexes a document under a caller-assigned id.

        Term frequency of each term is its share of the document's non-stop words.
        Nothing is modified if validation fails.

        Raises:
            InvalidArgumentError: If the id is negative or already used, the status is
                not a DocumentStatus, or the text contains invalid characters.
        """
        if document_id < 0:
            raise InvalidArgumentError(f"Document id {document_id} is negative")
        if document_id in self._documents:
            raise InvalidArgumentError(f"Document id {document_id} already exists")
        if not isinstance(status, DocumentStatus):
            raise InvalidArgumentError(f"Status {status!r} is not a DocumentStatus")

        words = self.split_into_words_no_stop(text)
        rating = compute_average_rating(ratings)

        if words:
            inverse_word_count = 1.0 / len(words)
            term_frequencies: dict[str, float] = defaultdict(float)
            for word in words:
                term_frequencies[word] += inverse_word_count
            for word, frequency in term_frequencies.items():
                self._word_to_document_freqs[word][document_id] = frequency

        self._documents[document_id] = DocumentData(rating, status)
        self._document_ids.append(document_id)
        logger.debug(
            "Indexed document %d (%d terms, rating=%d, status=%s)",
            document_id,
            len(words),
            rating,
            status.name,
        )

    def document_id_at(self, position: int) -> int:
        """
        Returns the id of the document added at the given 0-based position.

        Raises:
            OutOfRangeError: If position is outside [0, document_count).
        """
        if not 0 <= position < len(self._document_ids):
            raise OutOfRangeError(
                f"Position {position} is out of range for {len(self._document_ids)} documents"
            )
        return self._document_ids[position]

    def document_data(self, document_id: int) -> DocumentData:
        try:
            return self._documents[document_id]
        except KeyError:
            raise DocumentNotFoundError(f"Document id {document_id} not found") from None

    def postings(self, term: str) -> Mapping[int, float]:
        """Document id to term frequency for a term (empty if the term is not indexed)."""
        if term not in self._word_to_document_freqs:
            return _EMPTY_POSTINGS
        return MappingProxyType(self._word_to_document_freqs[term])

    def document_frequency(self, term: str) -> int:
        """Number of documents containing the term."""
        return len(self.postings(term))

    def inverse_document_frequency(self, terms: Iterable[str]) -> dict[str, float]:
        """
        Classic IDF for every indexed term among ``terms``:
            idf(t) = ln(N / df(t))

        Terms that are not indexed are omitted.
        """
        indexed = [term for term in terms if term in self._word_to_document_freqs]
        if not indexed:
            return {}
        df_values = np.array([self.document_frequency(term) for term in indexed], dtype=float)
        idf = np.log(self.document_count / df_values)
        return {term: float(idf_value) for term, idf_value in zip(indexed, idf)}
