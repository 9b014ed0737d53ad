"""Pydantic data models and exceptions for random ISBN generation and lookup."""

from pydantic import BaseModel, Field, field_validator, model_validator

ISBN10_LENGTH = 10
ISBN13_LENGTH = 13
BOOKLAND_HEAD_CODES = ("978", "979")
MAX_COUNTRY_CODE_LENGTH = 5
MAX_PUBLISHER_CODE_LENGTH = 7
# country + publisher must leave room for at least one publication digit
MAX_GROUP_AND_PUBLISHER_LENGTH = 8


class IsbnError(ValueError):
    """Base exception for malformed identifier parts."""

    pass


class InvalidCodeError(IsbnError):
    """Raised when a code is empty or contains characters other than 0-9."""

    pass


class CodeWidthError(IsbnError):
    """Raised when code lengths cannot form a 10/13 digit identifier."""

    pass


class CatalogError(Exception):
    """Base exception for catalog lookup failures."""

    def __init__(self, message: str, isbn: str | None = None, context: dict = None):
        super().__init__(message)
        self.isbn = isbn
        self.context = context or {}


class CatalogRequestError(CatalogError):
    """Raised when the catalog endpoint cannot be reached or returns an HTTP error."""

    pass


class CatalogResponseError(CatalogError):
    """Raised when the catalog response cannot be parsed."""

    pass


class PublisherTableError(Exception):
    """Raised when the publisher reference table is missing or malformed."""

    pass


def require_digits(value: str, field: str = "code") -> str:
    """Return value unchanged if it is a non-empty ASCII digit string."""
    if not isinstance(value, str):
        raise InvalidCodeError(f"{field} must be a string, got {type(value).__name__}")
    if not value:
        raise InvalidCodeError(f"{field} must not be empty")
    # str.isdigit() accepts non-ASCII digits such as '²' or '٣'
    if not all("0" <= ch <= "9" for ch in value):
        raise InvalidCodeError(f"{field} must contain only digits 0-9: {value!r}")
    return value


class Publisher(BaseModel):
    """A row of the publisher reference table."""

    model_config = {"frozen": True}

    code: str
    name: str = ""

    @field_validator("code")
    @classmethod
    def _code_is_digits(cls, value: str) -> str:
        value = value.strip()
        require_digits(value, "publisher code")
        if len(value) > MAX_PUBLISHER_CODE_LENGTH:
            raise CodeWidthError(
                f"publisher code is {len(value)} digits, max {MAX_PUBLISHER_CODE_LENGTH}"
            )
        return value


class Isbn(BaseModel):
    """An immutable ISBN with both its ISBN-10 and ISBN-13 check digits.

    Construction validates every part, so an instance always assembles to a
    10 character ISBN-10 and a 13 digit ISBN-13 whose check digits match.
    Use ``tools.isbn_generator.generate_isbn`` to build one with a random
    publication code.
    """

    model_config = {"frozen": True}

    head_code: str = Field(pattern=r"^97[89]$")
    country_code: str = Field(min_length=1, max_length=MAX_COUNTRY_CODE_LENGTH)
    publisher_code: str = Field(min_length=1, max_length=MAX_PUBLISHER_CODE_LENGTH)
    publication_code: str = Field(min_length=1)
    check_digit_10: str = Field(pattern=r"^[0-9X]$")
    check_digit_13: str = Field(pattern=r"^[0-9]$")

    @field_validator("head_code", "country_code", "publisher_code", "publication_code")
    @classmethod
    def _parts_are_digits(cls, value: str, info) -> str:
        return require_digits(value, info.field_name)

    @model_validator(mode="after")
    def _check_widths_and_digits(self) -> "Isbn":
        from .tools.isbn_generator import (
            calculate_isbn10_check_digit,
            calculate_isbn13_check_digit,
        )

        body_length = (
            len(self.country_code) + len(self.publisher_code) + len(self.publication_code)
        )
        if body_length + 1 != ISBN10_LENGTH:
            raise CodeWidthError(
                f"country, publisher and publication codes span {body_length} digits, "
                f"expected {ISBN10_LENGTH - 1}"
            )

        expected_10 = calculate_isbn10_check_digit(
            self.country_code, self.publisher_code, self.publication_code
        )
        if self.check_digit_10 != expected_10:
            raise IsbnError(
                f"ISBN-10 check digit {self.check_digit_10!r} does not match {expected_10!r}"
            )

        expected_13 = calculate_isbn13_check_digit(
            self.head_code, self.country_code, self.publisher_code, self.publication_code
        )
        if self.check_digit_13 != expected_13:
            raise IsbnError(
                f"ISBN-13 check digit {self.check_digit_13!r} does not match {expected_13!r}"
            )
        return self


class LookupResult(BaseModel):
    """Outcome of a catalog lookup run."""

    found: bool
    attempts: int
    isbn13: str | None = None
    isbn10: str | None = None
    publisher: Publisher | None = None
    total_results: int = 0
    link: str | None = None
