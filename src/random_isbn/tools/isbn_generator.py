"""ISBN generation utilities."""

import random
from typing import Protocol

from ..models import (
    ISBN10_LENGTH,
    ISBN13_LENGTH,
    CodeWidthError,
    Isbn,
    require_digits,
)


class RandomSource(Protocol):
    """Anything with ``random.Random.randrange`` semantics."""

    def randrange(self, stop: int) -> int: ...


# Not seeded from the global generator
_default_rng = random.SystemRandom()


def publication_code_width(country_code: str, publisher_code: str) -> int:
    """Number of publication digits left after the group, publisher and check digit."""
    require_digits(country_code, "country code")
    require_digits(publisher_code, "publisher code")

    width = ISBN10_LENGTH - (len(country_code) + len(publisher_code) + 1)
    if width <= 0:
        raise CodeWidthError(
            f"country code {country_code!r} and publisher code {publisher_code!r} "
            f"leave no room for a publication code"
        )
    return width


def generate_publication_code(
    country_code: str, publisher_code: str, rng: RandomSource | None = None
) -> str:
    """Generate a random, zero-padded publication code.

    The width is ``10 - (len(country_code) + len(publisher_code) + 1)``, so the
    ISBN-10 always ends up exactly ten characters long.

    Args:
        country_code: Registration group digits, e.g. ``"4"``
        publisher_code: Registrant digits, e.g. ``"7981"``
        rng: Random source; tests pass a seeded ``random.Random``

    Returns:
        Decimal string of exactly the derived width

    Raises:
        InvalidCodeError: If either code is empty or not all digits
        CodeWidthError: If the codes already use all nine body digits
    """
    width = publication_code_width(country_code, publisher_code)
    rng = rng or _default_rng

    number = rng.randrange(10 ** width)
    return str(number).zfill(width)


def calculate_isbn10_check_digit(
    country_code: str, publisher_code: str, publication_code: str
) -> str:
    """Calculate the check digit for ISBN-10."""
    isbn_9 = _join_body(
        ISBN10_LENGTH - 1,
        ("country code", country_code),
        ("publisher code", publisher_code),
        ("publication code", publication_code),
    )

    total = 0
    for i, digit in enumerate(isbn_9):
        total += int(digit) * (10 - i)

    remainder = total % 11
    if remainder == 0:
        return "0"
    elif remainder == 1:
        return "X"
    else:
        return str(11 - remainder)


def calculate_isbn13_check_digit(
    head_code: str, country_code: str, publisher_code: str, publication_code: str
) -> str:
    """Calculate the check digit for ISBN-13."""
    isbn_12 = _join_body(
        ISBN13_LENGTH - 1,
        ("head code", head_code),
        ("country code", country_code),
        ("publisher code", publisher_code),
        ("publication code", publication_code),
    )

    total = 0
    for i, digit in enumerate(isbn_12):
        weight = 1 if i % 2 == 0 else 3
        total += int(digit) * weight

    remainder = total % 10
    return "0" if remainder == 0 else str(10 - remainder)


def _join_body(expected_length: int, *parts: tuple[str, str]) -> str:
    """Concatenate validated digit parts and check the combined length."""
    body = "".join(require_digits(value, name) for name, value in parts)
    if len(body) != expected_length:
        raise CodeWidthError(
            f"expected {expected_length} digits before the check digit, got {len(body)}: {body}"
        )
    return body


def generate_isbn(
    head_code: str,
    country_code: str,
    publisher_code: str,
    rng: RandomSource | None = None,
) -> Isbn:
    """Build an ISBN with a random publication code and both check digits."""
    publication_code = generate_publication_code(country_code, publisher_code, rng)

    return Isbn(
        head_code=head_code,
        country_code=country_code,
        publisher_code=publisher_code,
        publication_code=publication_code,
        check_digit_10=calculate_isbn10_check_digit(
            country_code, publisher_code, publication_code
        ),
        check_digit_13=calculate_isbn13_check_digit(
            head_code, country_code, publisher_code, publication_code
        ),
    )


def assemble_isbn10(isbn: Isbn) -> str:
    """Return the 10 character ISBN-10 form, e.g. ``4101092052``."""
    return isbn.country_code + isbn.publisher_code + isbn.publication_code + isbn.check_digit_10


def assemble_isbn13(isbn: Isbn) -> str:
    """Return the 13 digit ISBN-13 form."""
    return (
        isbn.head_code
        + isbn.country_code
        + isbn.publisher_code
        + isbn.publication_code
        + isbn.check_digit_13
    )


def format_isbn10(isbn: Isbn) -> str:
    """Hyphenated ISBN-10, e.g. ``4-10-109205-2``."""
    return "-".join(
        [isbn.country_code, isbn.publisher_code, isbn.publication_code, isbn.check_digit_10]
    )


def format_isbn13(isbn: Isbn) -> str:
    """Hyphenated ISBN-13, e.g. ``978-4-7981-7154-8``."""
    return "-".join(
        [
            isbn.head_code,
            isbn.country_code,
            isbn.publisher_code,
            isbn.publication_code,
            isbn.check_digit_13,
        ]
    )
