from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class DocumentStatus(Enum):
    ACTUAL = "actual"
    IRRELEVANT = "irrelevant"
    BANNED = "banned"
    REMOVED = "removed"


@dataclass(frozen=True)
class DocumentData:
    """Metadata stored for every indexed document."""

    rating: int
    status: DocumentStatus


@dataclass(frozen=True)
class Document:
    """
    A ranked search result.

    Attributes:
        id (int): Caller-assigned document id.
        relevance (float): TF-IDF relevance of the document for the query.
        rating (int): Average rating of the document.
    """

    id: int
    relevance: float = 0.0
    rating: int = 0

    def __str__(self) -> str:
        return f"{{ document_id = {self.id}, relevance = {self.relevance:g}, rating = {self.rating} }}"


def compute_average_rating(ratings: Iterable[int]) -> int:
    """
    Integer mean of the ratings, truncated toward zero.

    Returns 0 when there are no ratings.
    """
    ratings = list(ratings)
    if not ratings:
        return 0
    total = sum(ratings)
    average = abs(total) // len(ratings)
    return average if total >= 0 else -average
