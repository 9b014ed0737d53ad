"""CLI entry point for random-isbn."""

import logging
import random
from pathlib import Path

import typer
from pydantic import ValidationError

from .config import get_config
from .models import CatalogError, IsbnError, Publisher, PublisherTableError
from .runner import run_lookup
from .tools.isbn_generator import (
    assemble_isbn10,
    assemble_isbn13,
    format_isbn10,
    format_isbn13,
    generate_isbn,
)
from .tools.publishers import choose_publisher, find_publisher, load_publishers

cli = typer.Typer(help="Find a random ISBN that is actually registered.")


def _setup_logging() -> None:
    logging.basicConfig(
        level=get_config().log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@cli.command()
def find(
    attempts: int
    | None = typer.Option(None, "--attempts", "-n", min=1, help="Maximum lookup attempts"),
    interval: float
    | None = typer.Option(None, "--interval", "-i", help="Seconds between attempts"),
    publishers: Path
    | None = typer.Option(None, "--publishers", "-p", help="Publisher table CSV (code,name)"),
):
    """Query the NDL catalog with random ISBNs until one is registered."""
    _setup_logging()
    config = get_config()

    try:
        result = run_lookup(
            config, publisher_table=publishers, max_attempts=attempts, interval=interval
        )
    except (CatalogError, IsbnError, ValidationError, PublisherTableError) as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(code=2)

    if not result.found:
        typer.echo(f"cannot find any books in {result.attempts} times")
        raise typer.Exit(code=1)

    typer.echo(result.link)


@cli.command()
def generate(
    count: int = typer.Option(1, "--count", "-n", min=1, help="How many ISBNs to generate"),
    publisher: str
    | None = typer.Option(None, "--publisher", help="Publisher code (random if omitted)"),
    seed: int | None = typer.Option(None, "--seed", help="Seed for repeatable output"),
    publishers: Path
    | None = typer.Option(None, "--publishers", "-p", help="Publisher table CSV (code,name)"),
):
    """Generate well-formed ISBNs offline, without checking the catalog."""
    config = get_config()
    rng = random.Random(seed)

    try:
        table = load_publishers(
            publishers or config.publisher_table, country_code=config.country_code
        )
        fixed = None
        if publisher:
            # Codes missing from the table are still allowed, just unnamed
            fixed = find_publisher(table, publisher.strip()) or Publisher(code=publisher)

        for _ in range(count):
            entry = fixed or choose_publisher(table, rng)
            isbn = generate_isbn(config.head_code, config.country_code, entry.code, rng)
            line = (
                f"{assemble_isbn13(isbn)}  {assemble_isbn10(isbn)}  "
                f"({format_isbn13(isbn)} / {format_isbn10(isbn)})"
            )
            typer.echo(f"{line}  {entry.name}" if entry.name else line)
    except (IsbnError, ValidationError, PublisherTableError) as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(code=2)


@cli.command("publishers")
def list_publishers(
    publishers: Path
    | None = typer.Option(None, "--publishers", "-p", help="Publisher table CSV (code,name)"),
):
    """List the publisher reference table.

    The packaged table is a sample of well-known 978-4 publishers; pass
    --publishers with a fuller code,name CSV for wider coverage.
    """
    config = get_config()
    try:
        table = load_publishers(publishers or config.publisher_table, config.country_code)
    except PublisherTableError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(code=2)

    for entry in table:
        typer.echo(f"{config.country_code}-{entry.code}\t{entry.name}")


if __name__ == "__main__":
    cli()
