"""
Engine parameters and driver defaults.

Driver settings can be overridden via environment variables:
    SEARCH_SERVER_ENCODING=utf-8     # Encoding for stdin/stdout in the CLI
    SEARCH_SERVER_LOG_LEVEL=WARNING  # Root log level for the CLI
"""

import os


class Config:
    """Fixed ranking parameters shared by the query engine."""

    # Maximum number of documents returned by find_top_documents
    MAX_RESULT_DOCUMENT_COUNT: int = 5

    # Relevances closer than this are considered equal and ordered by rating
    RELEVANCE_EPSILON: float = 1e-6


DEFAULT_ENCODING = os.environ.get("SEARCH_SERVER_ENCODING", "utf-8")
DEFAULT_LOG_LEVEL = os.environ.get("SEARCH_SERVER_LOG_LEVEL", "WARNING").upper()
