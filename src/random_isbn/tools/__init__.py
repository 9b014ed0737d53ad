"""Identifier generation, publisher table and catalog client."""

from .isbn_generator import (
    assemble_isbn10,
    assemble_isbn13,
    calculate_isbn10_check_digit,
    calculate_isbn13_check_digit,
    generate_isbn,
    generate_publication_code,
)

__all__ = [
    "assemble_isbn10",
    "assemble_isbn13",
    "calculate_isbn10_check_digit",
    "calculate_isbn13_check_digit",
    "generate_isbn",
    "generate_publication_code",
]
