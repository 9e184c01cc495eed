import logging
from collections.abc import Iterable, Iterator

from search_server.config import Config
from search_server.document import Document, DocumentStatus
from search_server.errors import DocumentNotFoundError
from search_server.index import DocumentIndex
from search_server.query import parse_query, validate_raw_query
from search_server.ranking import DocumentPredicate, find_all_documents, select_top_k, sort_documents

logger = logging.getLogger(__name__)


def status_predicate(status: DocumentStatus) -> DocumentPredicate:
    """Predicate accepting documents with the given status."""

    def predicate(document_id: int, document_status: DocumentStatus, rating: int) -> bool:
        return document_status == status

    return predicate


class SearchServer:
    """
    Ranked keyword search over short documents.

    Queries are space-separated words; a leading ``-`` marks a word whose presence
    excludes a document. Results are ranked by TF-IDF.

    Args:
        stop_words (str | Iterable[str]): Words ignored in documents and queries,
            either space-delimited in one string or as a collection.
    """

    def __init__(self, stop_words: str | Iterable[str] = ""):
        self.index = DocumentIndex(stop_words)

    def __len__(self) -> int:
        return len(self.index)

    def __iter__(self) -> Iterator[int]:
        return iter(self.index)

    @property
    def stop_words(self) -> frozenset[str]:
        return self.index.stop_words

    @property
    def document_count(self) -> int:
        return self.index.document_count

    def get_document_count(self) -> int:
        return self.index.document_count

    def get_document_id(self, index: int) -> int:
        return self.index.document_id_at(index)

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus = DocumentStatus.ACTUAL,
        ratings: Iterable[int] = (),
    ) -> None:
        self.index.add_document(document_id, document, status, ratings)

    def find_top_documents(
        self,
        raw_query: str,
        document_predicate: DocumentPredicate | DocumentStatus | None = None,
    ) -> list[Document]:
        """
        Returns the most relevant documents for a query.

        Args:
            raw_query: Space-separated query words, ``-word`` to exclude.
            document_predicate: Callable ``(document_id, status, rating) -> bool``,
                a DocumentStatus to filter on, or None for ACTUAL documents.

        Returns:
            At most Config.MAX_RESULT_DOCUMENT_COUNT documents, by descending relevance
            and then descending rating.

        Raises:
            InvalidArgumentError: If the query is empty or malformed.
        """
        if document_predicate is None:
            document_predicate = DocumentStatus.ACTUAL
        if isinstance(document_predicate, DocumentStatus):
            document_predicate = status_predicate(document_predicate)

        validate_raw_query(raw_query)
        query = parse_query(raw_query, self.index)

        matched_documents = find_all_documents(self.index, query, document_predicate)
        top_documents = select_top_k(sort_documents(matched_documents), Config.MAX_RESULT_DOCUMENT_COUNT)
        logger.debug(
            "Query %r matched %d documents, returning %d",
            raw_query,
            len(matched_documents),
            len(top_documents),
        )
        return top_documents

    def match_document(self, raw_query: str, document_id: int) -> tuple[list[str], DocumentStatus]:
        """
        Lists the query's plus words found in a document.

        The list is empty if the document contains any of the query's minus words.

        Raises:
            InvalidArgumentError: If the query is empty or malformed.
            DocumentNotFoundError: If no document has this id.
        """
        validate_raw_query(raw_query)
        if document_id not in self.index:
            raise DocumentNotFoundError(f"Document id {document_id} not found")
        query = parse_query(raw_query, self.index)

        status = self.index.document_data(document_id).status
        if any(document_id in self.index.postings(word) for word in query.minus_words):
            return [], status

        matched_words = [word for word in sorted(query.plus_words) if document_id in self.index.postings(word)]
        return matched_words, status
