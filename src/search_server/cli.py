"""
Command-line driver for the search server.

Reads from stdin:
    1. a line of stop words
    2. a line with the number of documents N
    3. N pairs of lines: document text (optionally prefixed ``STATUS|``), then
       ratings as ``k r1 ... rk``
    4. one query per remaining non-empty line

Run with:
    uv run search-server --status actual < input.txt
    uv run python -m search_server --match < input.txt
"""

from __future__ import annotations

import argparse
import io
import logging
import sys
from typing import TYPE_CHECKING, TextIO

from search_server.config import DEFAULT_ENCODING, DEFAULT_LOG_LEVEL
from search_server.document import Document, DocumentStatus
from search_server.errors import SearchServerError
from search_server.server import SearchServer

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

STATUS_SEPARATOR = "|"


class InputFormatError(ValueError):
    """Raised when the document section of the input is malformed."""


def read_line(lines: Iterator[str]) -> str:
    try:
        return next(lines).rstrip("\r\n")
    except StopIteration:
        raise InputFormatError("Unexpected end of input") from None


def read_line_with_number(lines: Iterator[str]) -> int:
    line = read_line(lines)
    try:
        return int(line.split()[0])
    except (IndexError, ValueError):
        raise InputFormatError(f"Expected a number, got {line!r}") from None


def read_ratings(lines: Iterator[str]) -> list[int]:
    """Parses a ``k r1 ... rk`` ratings line."""
    line = read_line(lines)
    try:
        values = [int(value) for value in line.split()]
    except ValueError:
        raise InputFormatError(f"Invalid ratings line {line!r}") from None
    if not values or values[0] != len(values) - 1:
        raise InputFormatError(f"Ratings line {line!r} does not match its declared count")
    return values[1:]


def parse_document_line(line: str) -> tuple[str, DocumentStatus]:
    """Splits an optional ``STATUS|`` prefix off a document line."""
    prefix, separator, text = line.partition(STATUS_SEPARATOR)
    if separator and prefix.strip().upper() in DocumentStatus.__members__:
        return text, DocumentStatus[prefix.strip().upper()]
    return line, DocumentStatus.ACTUAL


def load_server(lines: Iterator[str]) -> SearchServer:
    server = SearchServer(read_line(lines))
    document_count = read_line_with_number(lines)
    for document_id in range(document_count):
        text, status = parse_document_line(read_line(lines))
        ratings = read_ratings(lines)
        server.add_document(document_id, text, status, ratings)
    logger.info("Loaded %d documents", server.document_count)
    return server


def print_document(document: Document, file: TextIO | None = None) -> None:
    print(document, file=file if file is not None else sys.stdout)


def print_match_document_result(
    document_id: int,
    words: list[str],
    status: DocumentStatus,
    file: TextIO | None = None,
) -> None:
    matched = "".join(f" {word}" for word in words)
    print(
        f"{{ document_id = {document_id}, status = {status.name}, words ={matched} }}",
        file=file if file is not None else sys.stdout,
    )


def run_queries(
    server: SearchServer,
    queries: Iterator[str],
    status: DocumentStatus,
    match: bool,
    out: TextIO,
    err: TextIO,
) -> None:
    """Answers each query, reporting failures on err without stopping."""
    for raw_query in queries:
        raw_query = raw_query.rstrip("\r\n")
        if not raw_query:
            continue
        try:
            if match:
                matches = [(document_id, *server.match_document(raw_query, document_id)) for document_id in server]
            else:
                documents = server.find_top_documents(raw_query, status)
        except SearchServerError as e:
            logger.debug("Query %r failed (%s)", raw_query, e.kind.name)
            print(f"Error: {e}", file=err)
            continue

        if match:
            print(f"Matching documents on query: {raw_query}", file=out)
            for document_id, words, document_status in matches:
                print_match_document_result(document_id, words, document_status, file=out)
        else:
            print(f"Search results for query: {raw_query}", file=out)
            for document in documents:
                print_document(document, file=out)


def _reconfigured(stream: TextIO, encoding: str) -> TextIO:
    if isinstance(stream, io.TextIOWrapper):
        stream.reconfigure(encoding=encoding)
    return stream


def main(argv: list[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Rank documents read from stdin against queries.",
        epilog=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--status",
        type=str.upper,
        choices=list(DocumentStatus.__members__),
        default=DocumentStatus.ACTUAL.name,
        help="Only return documents with this status (default: ACTUAL).",
    )
    parser.add_argument(
        "--match",
        action="store_true",
        help="Print matched query words for every document instead of top documents.",
    )
    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help=f"Input/output text encoding (default: {DEFAULT_ENCODING}).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL}).",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if stdin is None:
        stdin = _reconfigured(sys.stdin, args.encoding)
    if stdout is None:
        stdout = _reconfigured(sys.stdout, args.encoding)

    lines = iter(stdin)
    try:
        server = load_server(lines)
    except (InputFormatError, SearchServerError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    run_queries(server, lines, DocumentStatus[args.status], args.match, stdout, sys.stderr)
    stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
