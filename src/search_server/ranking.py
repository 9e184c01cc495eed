"""
TF-IDF scoring and top-k selection over a DocumentIndex.

Pipeline for a parsed query:
1. find_all_documents - accumulate idf * tf for plus words over documents
   accepted by the predicate, then drop every document containing a minus word
2. sort_documents - descending relevance, near-equal relevances by descending rating
3. select_top_k - cap the result list

Usage:
    from search_server.ranking import find_all_documents, sort_documents, select_top_k
"""

from __future__ import annotations

from collections.abc import Callable
from functools import cmp_to_key
from typing import TYPE_CHECKING

from search_server.config import Config
from search_server.document import Document, DocumentStatus

if TYPE_CHECKING:
    from search_server.index import DocumentIndex
    from search_server.query import Query


DocumentPredicate = Callable[[int, DocumentStatus, int], bool]


# =============================================================================
# Scoring
# =============================================================================


def find_all_documents(
    index: DocumentIndex,
    query: Query,
    document_predicate: DocumentPredicate,
) -> list[Document]:
    """
    Score every document matching at least one plus word.

    Minus-word exclusion is applied after scoring and overrides the predicate.

    Args:
        index: Index to search
        query: Parsed query
        document_predicate: Called as (document_id, status, rating); documents
            for which it returns False are not scored

    Returns:
        Unsorted result records, in ascending id order
    """
    idf = index.inverse_document_frequency(sorted(query.plus_words))

    document_to_relevance: dict[int, float] = {}
    for word, word_idf in idf.items():
        for document_id, term_freq in index.postings(word).items():
            data = index.document_data(document_id)
            if document_predicate(document_id, data.status, data.rating):
                document_to_relevance[document_id] = (
                    document_to_relevance.get(document_id, 0.0) + word_idf * term_freq
                )

    for word in query.minus_words:
        for document_id in index.postings(word):
            document_to_relevance.pop(document_id, None)

    return [
        Document(document_id, relevance, index.document_data(document_id).rating)
        for document_id, relevance in sorted(document_to_relevance.items())
    ]


# =============================================================================
# Ordering and Top-K Selection
# =============================================================================


def compare_documents(
    lhs: Document,
    rhs: Document,
    epsilon: float = Config.RELEVANCE_EPSILON,
) -> int:
    """Orders by descending relevance; relevances within epsilon fall back to descending rating."""
    if abs(lhs.relevance - rhs.relevance) < epsilon:
        return rhs.rating - lhs.rating
    return -1 if lhs.relevance > rhs.relevance else 1


def sort_documents(documents: list[Document]) -> list[Document]:
    return sorted(documents, key=cmp_to_key(compare_documents))


def select_top_k(
    documents: list[Document],
    top_k: int | None = Config.MAX_RESULT_DOCUMENT_COUNT,
) -> list[Document]:
    """Keep the first top_k of already sorted documents (None keeps all)."""
    if top_k is None:
        return list(documents)
    return documents[:top_k]


__all__ = [
    "DocumentPredicate",
    "find_all_documents",
    "compare_documents",
    "sort_documents",
    "select_top_k",
]
