"""Lookup loop: generate random ISBNs until the catalog knows one."""

import logging
import time
from collections.abc import Callable
from pathlib import Path

from .config import Settings, get_config
from .models import LookupResult, Publisher
from .tools.catalog import NDLCatalogClient
from .tools.isbn_generator import (
    RandomSource,
    assemble_isbn10,
    assemble_isbn13,
    format_isbn13,
    generate_isbn,
)
from .tools.publishers import choose_publisher, load_publishers

logger = logging.getLogger(__name__)


def build_link(isbn10: str, template: str | None = None) -> str:
    """Format the result link for an ISBN-10."""
    template = template or get_config().link_template
    return template.format(isbn10=isbn10)


def find_registered_isbn(
    client: NDLCatalogClient,
    publishers: list[Publisher],
    config: Settings | None = None,
    max_attempts: int | None = None,
    interval: float | None = None,
    rng: RandomSource | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> LookupResult:
    """Try random ISBNs until one has catalog records or attempts run out.

    Attempts are strictly sequential with ``interval`` seconds between them;
    there is no wait after the last attempt.

    Args:
        client: Catalog used to count records per ISBN-13
        publishers: Reference table to draw publisher codes from
        config: Settings (defaults to the global instance)
        max_attempts: Attempt budget (defaults to config.max_attempts)
        interval: Seconds between attempts (defaults to config.poll_interval_seconds)
        rng: Random source for both publisher choice and publication codes
        sleep: Delay function, replaced in tests

    Returns:
        LookupResult with ``found`` set and the link when a book was found

    Raises:
        CatalogError: If a request fails after transport retries or the
            response cannot be parsed
    """
    config = config or get_config()
    if max_attempts is None:
        max_attempts = config.max_attempts
    if interval is None:
        interval = config.poll_interval_seconds
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

    for attempt in range(1, max_attempts + 1):
        publisher = choose_publisher(publishers, rng)
        isbn = generate_isbn(config.head_code, config.country_code, publisher.code, rng)
        isbn13 = assemble_isbn13(isbn)

        total_results = client.count_results(isbn13)
        if total_results > 0:
            isbn10 = assemble_isbn10(isbn)
            logger.info(
                f"{format_isbn13(isbn)} found ({total_results} record(s), "
                f"{publisher.name or publisher.code}) on attempt {attempt}"
            )
            return LookupResult(
                found=True,
                attempts=attempt,
                isbn13=isbn13,
                isbn10=isbn10,
                publisher=publisher,
                total_results=total_results,
                link=build_link(isbn10, config.link_template),
            )

        logger.info(f"{isbn13} ... not found ({attempt}/{max_attempts})")
        if attempt < max_attempts:
            sleep(interval)

    return LookupResult(found=False, attempts=max_attempts)


def run_lookup(
    config: Settings | None = None,
    publisher_table: Path | None = None,
    max_attempts: int | None = None,
    interval: float | None = None,
) -> LookupResult:
    """Load the publisher table, open a catalog session and run the lookup loop."""
    config = config or get_config()
    publishers = load_publishers(
        publisher_table or config.publisher_table, country_code=config.country_code
    )

    with NDLCatalogClient(
        config.catalog_url,
        config.request_timeout,
        max_retries=config.network_max_retries,
        max_wait=config.network_retry_max_wait,
    ) as client:
        return find_registered_isbn(
            client,
            publishers,
            config=config,
            max_attempts=max_attempts,
            interval=interval,
        )
