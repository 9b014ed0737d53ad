"""Publisher reference table loading.

The packaged ``data/isbn978.csv`` is a small sample of well-known Japanese
978-4 publisher codes, not the full registrant list. Some publishers hold
more than one code (技術評論社 has 297 and 7741). Pass a fuller ``code,name``
CSV with ``--publishers`` or ``RANDOM_ISBN_PUBLISHER_TABLE`` for wider
coverage of the code space.
"""

import csv
import logging
import random
from importlib import resources
from pathlib import Path

from pydantic import ValidationError

from ..models import MAX_GROUP_AND_PUBLISHER_LENGTH, Publisher, PublisherTableError
from .isbn_generator import RandomSource

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "isbn978.csv"
REQUIRED_COLUMNS = ("code", "name")


def _open_table(path: Path | None):
    if path is None:
        table = resources.files("random_isbn") / "data" / DEFAULT_TABLE
        return table.open("r", encoding="utf-8", newline="")
    return open(path, "r", encoding="utf-8", newline="")


def load_publishers(path: Path | None = None, country_code: str = "4") -> list[Publisher]:
    """Load ``code,name`` rows from a CSV publisher table.

    Args:
        path: CSV file to read; ``None`` reads the packaged 978-4 table
        country_code: Group the codes belong to, used to reject codes too long
            to leave room for a publication code

    Returns:
        Publishers in file order

    Raises:
        PublisherTableError: If the file is missing, lacks the required
            columns, has a bad code, or contains no rows
    """
    source = str(path) if path is not None else f"<package>/{DEFAULT_TABLE}"

    try:
        with _open_table(path) as f:
            reader = csv.DictReader(f)
            missing = [c for c in REQUIRED_COLUMNS if c not in (reader.fieldnames or [])]
            if missing:
                raise PublisherTableError(
                    f"{source}: missing column(s) {', '.join(missing)}"
                )

            publishers = []
            for line_no, row in enumerate(reader, start=2):
                try:
                    publisher = Publisher(code=row["code"] or "", name=(row["name"] or "").strip())
                except ValidationError as e:
                    raise PublisherTableError(f"{source}:{line_no}: {e}") from e

                if len(country_code) + len(publisher.code) > MAX_GROUP_AND_PUBLISHER_LENGTH:
                    raise PublisherTableError(
                        f"{source}:{line_no}: publisher code {publisher.code} leaves no "
                        f"room for a publication code in group {country_code}"
                    )
                publishers.append(publisher)
    except OSError as e:
        raise PublisherTableError(f"Cannot read publisher table {source}: {e}") from e

    if not publishers:
        raise PublisherTableError(f"{source}: publisher table is empty")

    logger.debug(f"Loaded {len(publishers)} publishers from {source}")
    return publishers


def choose_publisher(
    publishers: list[Publisher], rng: RandomSource | None = None
) -> Publisher:
    """Pick a publisher uniformly at random."""
    if not publishers:
        raise PublisherTableError("Cannot choose from an empty publisher table")
    rng = rng or random
    return publishers[rng.randrange(len(publishers))]


def find_publisher(publishers: list[Publisher], code: str) -> Publisher | None:
    """Return the publisher with the given code, if listed."""
    for publisher in publishers:
        if publisher.code == code:
            return publisher
    return None
