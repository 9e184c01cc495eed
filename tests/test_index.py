"""
Tests for the document store and inverted index.
"""

import numpy as np
import pytest

from search_server.document import DocumentStatus, compute_average_rating
from search_server.errors import (
    DocumentNotFoundError,
    ErrorKind,
    InvalidArgumentError,
    OutOfRangeError,
)
from search_server.index import DocumentIndex, parse_stop_words


@pytest.fixture
def index():
    index = DocumentIndex("и в на")
    index.add_document(1, "пушистый кот пушистый хвост", DocumentStatus.ACTUAL, [7, 2, 7])
    return index


@pytest.mark.parametrize(
    "ratings,expected",
    [
        ([], 0),
        ([7, 2, 7], 5),
        ([8, -3], 2),
        ([5, -12, 2, 1], -1),
        ([-7, 2], -2),
        ([9], 9),
    ],
)
def test_compute_average_rating(ratings, expected):
    assert compute_average_rating(ratings) == expected


@pytest.mark.parametrize(
    "stop_words,expected",
    [
        ("и в на", {"и", "в", "на"}),
        (["и", "в", "на"], {"и", "в", "на"}),
        (["и в", "", "на"], {"и", "в", "на"}),
        ("", set()),
        ({"и", "и"}, {"и"}),
    ],
)
def test_parse_stop_words(stop_words, expected):
    assert parse_stop_words(stop_words) == expected


def test_invalid_stop_word_rejected():
    with pytest.raises(InvalidArgumentError):
        DocumentIndex("и в\x12 на")


def test_term_frequencies(index):
    assert index.postings("пушистый") == {1: 0.5}
    assert index.postings("кот") == {1: 0.25}
    assert index.postings("хвост") == {1: 0.25}
    assert index.postings("собака") == {}


def test_stop_words_are_not_indexed():
    index = DocumentIndex("и в на")
    index.add_document(0, "кот и пёс на диване", DocumentStatus.ACTUAL, [])

    assert index.postings("и") == {}
    assert index.postings("на") == {}
    # Stop words don't count towards document length
    assert np.isclose(index.postings("кот")[0], 1 / 3)


def test_document_metadata(index):
    data = index.document_data(1)
    assert data.rating == 5
    assert data.status is DocumentStatus.ACTUAL


def test_document_metadata_unknown_id(index):
    with pytest.raises(DocumentNotFoundError) as excinfo:
        index.document_data(42)
    assert excinfo.value.kind is ErrorKind.NOT_FOUND


def test_duplicate_id_rejected(index):
    with pytest.raises(InvalidArgumentError) as excinfo:
        index.add_document(1, "пушистый пёс и модный ошейник", DocumentStatus.ACTUAL, [1, 2])

    assert excinfo.value.kind is ErrorKind.INVALID_ARGUMENT
    assert index.document_count == 1
    assert index.postings("пёс") == {}
    assert index.document_data(1).rating == 5


def test_negative_id_rejected(index):
    with pytest.raises(InvalidArgumentError):
        index.add_document(-1, "пушистый пёс и модный ошейник", DocumentStatus.ACTUAL, [1, 2])

    assert index.document_count == 1
    assert -1 not in index


def test_control_characters_rejected(index):
    with pytest.raises(InvalidArgumentError):
        index.add_document(3, "большой пёс скво\x12рец", DocumentStatus.ACTUAL, [1, 2])

    assert index.document_count == 1
    assert 3 not in index
    assert index.postings("большой") == {}
    assert list(index) == [1]


def test_empty_document_is_stored_without_postings():
    index = DocumentIndex("и")
    index.add_document(0, "и и", DocumentStatus.IRRELEVANT, [3])

    assert index.document_count == 1
    assert index.document_data(0).status is DocumentStatus.IRRELEVANT
    assert index.postings("и") == {}


def test_insertion_order():
    index = DocumentIndex()
    for document_id in [5, 2, 9]:
        index.add_document(document_id, "кот", DocumentStatus.ACTUAL, [])

    assert list(index) == [5, 2, 9]
    assert len(index) == 3
    assert [index.document_id_at(position) for position in range(3)] == [5, 2, 9]


@pytest.mark.parametrize("position", [1, 2, -1, 100])
def test_document_id_at_out_of_range(index, position):
    with pytest.raises(OutOfRangeError) as excinfo:
        index.document_id_at(position)
    assert excinfo.value.kind is ErrorKind.OUT_OF_RANGE


def test_out_of_range_is_index_error(index):
    with pytest.raises(IndexError):
        index.document_id_at(1)


def test_inverse_document_frequency():
    index = DocumentIndex()
    index.add_document(0, "кот пёс", DocumentStatus.ACTUAL, [])
    index.add_document(1, "кот", DocumentStatus.ACTUAL, [])
    index.add_document(2, "скворец", DocumentStatus.ACTUAL, [])
    index.add_document(3, "кот скворец", DocumentStatus.ACTUAL, [])

    idf = index.inverse_document_frequency(["кот", "пёс", "скворец", "собака"])

    assert set(idf) == {"кот", "пёс", "скворец"}
    assert np.isclose(idf["кот"], np.log(4 / 3))
    assert np.isclose(idf["пёс"], np.log(4))
    assert np.isclose(idf["скворец"], np.log(2))
    assert index.inverse_document_frequency(["собака"]) == {}


@pytest.mark.parametrize("status", ["ACTUAL", None, 0])
def test_invalid_status_rejected(status):
    index = DocumentIndex()
    with pytest.raises(InvalidArgumentError):
        index.add_document(0, "кот", status, [1])

    assert index.document_count == 0
    assert index.postings("кот") == {}

    index.add_document(0, "кот", DocumentStatus.ACTUAL, [1])
    assert list(index) == [0]
