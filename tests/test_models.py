"""Tests for Pydantic data models."""

import pytest
from pydantic import ValidationError

from random_isbn.models import (
    CatalogError,
    CatalogRequestError,
    CodeWidthError,
    InvalidCodeError,
    Isbn,
    IsbnError,
    LookupResult,
    Publisher,
    require_digits,
)


def _isbn(**overrides) -> Isbn:
    fields = {
        "head_code": "978",
        "country_code": "4",
        "publisher_code": "10",
        "publication_code": "109205",
        "check_digit_10": "2",
        "check_digit_13": "8",
    }
    fields.update(overrides)
    return Isbn(**fields)


def test_isbn_model():
    """Test Isbn model with matching check digits."""
    isbn = _isbn()

    assert isbn.head_code == "978"
    assert isbn.publication_code == "109205"
    assert isbn.check_digit_10 == "2"
    assert isbn.check_digit_13 == "8"


def test_isbn_model_x_check_digit():
    isbn = _isbn(publication_code="109201", check_digit_10="X", check_digit_13="0")
    assert isbn.check_digit_10 == "X"


def test_isbn_model_979_head():
    isbn = _isbn(head_code="979", check_digit_13="7")
    assert isbn.head_code == "979"


def test_isbn_is_frozen():
    isbn = _isbn()
    with pytest.raises(ValidationError):
        isbn.publication_code = "000000"


@pytest.mark.parametrize(
    "overrides",
    [
        {"check_digit_10": "3"},
        {"check_digit_13": "9"},
        {"check_digit_13": "X"},
        {"publication_code": "10920"},
        {"publication_code": "10920a"},
        {"head_code": "97"},
        {"head_code": "977"},
        {"country_code": ""},
        {"publisher_code": "12345678"},
    ],
)
def test_isbn_model_rejects_bad_parts(overrides):
    """Invalid parts fail at construction time."""
    with pytest.raises(ValidationError):
        _isbn(**overrides)


def test_publisher_model():
    publisher = Publisher(code=" 7981 ", name="翔泳社")

    assert publisher.code == "7981"
    assert publisher.name == "翔泳社"


@pytest.mark.parametrize("code", ["", "79a1", "12345678"])
def test_publisher_rejects_bad_code(code):
    with pytest.raises(ValidationError):
        Publisher(code=code, name="Bad")


def test_lookup_result_defaults():
    result = LookupResult(found=False, attempts=10)

    assert result.found is False
    assert result.link is None
    assert result.total_results == 0
    assert result.publisher is None


def test_require_digits():
    assert require_digits("0042") == "0042"
    with pytest.raises(InvalidCodeError):
        require_digits("4-10")
    with pytest.raises(InvalidCodeError):
        require_digits(4)


def test_error_hierarchy():
    """Core errors are ValueErrors; catalog errors carry context."""
    assert issubclass(InvalidCodeError, IsbnError)
    assert issubclass(CodeWidthError, IsbnError)
    assert issubclass(IsbnError, ValueError)

    error = CatalogRequestError("boom", isbn="9784101092058", context={"status_code": 503})
    assert isinstance(error, CatalogError)
    assert error.isbn == "9784101092058"
    assert error.context["status_code"] == 503
    assert CatalogError("plain").context == {}
