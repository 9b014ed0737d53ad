"""Pytest configuration for random-isbn tests."""

import pytest

from random_isbn.models import Publisher


class ScriptedRandom:
    """Random source that returns queued values from ``randrange``.

    Each value is reduced modulo ``stop`` so one script can drive both the
    publisher choice and the publication code draw.
    """

    def __init__(self, *values: int):
        self.values = list(values)
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        value = self.values.pop(0) if self.values else 0
        return value % stop


@pytest.fixture
def scripted_random():
    return ScriptedRandom


@pytest.fixture
def sample_publishers():
    return [
        Publisher(code="10", name="新潮社"),
        Publisher(code="7981", name="翔泳社"),
        Publisher(code="87311", name="オライリー・ジャパン"),
    ]


def make_opensearch_rss(total_results: int | str) -> bytes:
    """Build a minimal NDL OpenSearch RSS response."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<rss xmlns:openSearch="http://a9.com/-/spec/opensearchrss/1.0/" version="2.0">'
        "<channel>"
        "<title>ISBN search</title>"
        f"<openSearch:totalResults>{total_results}</openSearch:totalResults>"
        "<openSearch:startIndex>1</openSearch:startIndex>"
        "<openSearch:itemsPerPage>1</openSearch:itemsPerPage>"
        "</channel>"
        "</rss>"
    ).encode("utf-8")


@pytest.fixture
def opensearch_rss():
    return make_opensearch_rss
