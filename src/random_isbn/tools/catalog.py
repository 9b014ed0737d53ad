"""National Diet Library OpenSearch client.

The NDL search API answers an ISBN query with an RSS 2.0 document whose
``channel`` carries an OpenSearch ``totalResults`` element. Only that count
is used: any value above zero means the ISBN is registered.

Docs: https://iss.ndl.go.jp/information/api/
"""

import logging
import xml.etree.ElementTree as ET

import requests

from ..config import settings
from ..models import CatalogRequestError, CatalogResponseError
from ..utils.retry import create_network_retry_decorator

logger = logging.getLogger(__name__)


def _local_name(tag: str) -> str:
    """Strip the ``{namespace}`` part of an ElementTree tag."""
    return tag.rsplit("}", 1)[-1]


def _find_child(element: ET.Element, name: str) -> ET.Element | None:
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


def parse_total_results(xml_text: str | bytes, isbn: str | None = None) -> int:
    """Extract ``rss/channel/totalResults`` from an OpenSearch response.

    Args:
        xml_text: Response body
        isbn: ISBN the response belongs to, for error context

    Returns:
        The number of matching records

    Raises:
        CatalogResponseError: If the document is malformed or lacks the count
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise CatalogResponseError(
            f"Malformed XML from catalog: {e}", isbn=isbn
        ) from e

    channel = _find_child(root, "channel")
    if channel is None:
        raise CatalogResponseError("cannot find channel in xml tree", isbn=isbn)

    total = _find_child(channel, "totalResults")
    if total is None:
        raise CatalogResponseError("cannot find totalResults in xml tree", isbn=isbn)

    text = (total.text or "").strip()
    try:
        count = int(text)
    except ValueError as e:
        raise CatalogResponseError(
            f"totalResults is not an integer: {text!r}",
            isbn=isbn,
            context={"totalResults": text},
        ) from e

    if count < 0:
        raise CatalogResponseError(f"totalResults is negative: {count}", isbn=isbn)
    return count


class NDLCatalogClient:
    """Thin NDL OpenSearch client backed by a ``requests.Session``."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
        max_retries: int | None = None,
        max_wait: int | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: OpenSearch endpoint (falls back to settings.catalog_url)
            timeout: Per-request timeout in seconds (falls back to settings.request_timeout)
            session: Session to reuse; one is created when omitted
            max_retries: Attempts for connection errors and timeouts
                (falls back to settings.network_max_retries)
            max_wait: Longest backoff between those attempts in seconds
                (falls back to settings.network_retry_max_wait)
        """
        self.base_url = base_url or settings.catalog_url
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.session = session or requests.Session()
        self._fetch = create_network_retry_decorator(max_retries, max_wait)(
            self._fetch_once
        )

    def __enter__(self) -> "NDLCatalogClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _fetch_once(self, isbn13: str) -> requests.Response:
        response = self.session.get(
            self.base_url,
            params={"cnt": 1, "isbn": isbn13},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response

    def search(self, isbn13: str) -> bytes:
        """Query the catalog for one ISBN and return the raw RSS body.

        Raises:
            CatalogRequestError: On connection failure, timeout or HTTP error status
        """
        logger.debug(f"GET {self.base_url} isbn={isbn13}")
        try:
            response = self._fetch(isbn13)
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise CatalogRequestError(
                f"Catalog returned HTTP {status_code} for {isbn13}",
                isbn=isbn13,
                context={"status_code": status_code, "url": self.base_url},
            ) from e
        except requests.RequestException as e:
            raise CatalogRequestError(
                f"Catalog request failed for {isbn13}: {e}",
                isbn=isbn13,
                context={"url": self.base_url},
            ) from e

        return response.content

    def count_results(self, isbn13: str) -> int:
        """Return how many catalog records are registered under ``isbn13``."""
        return parse_total_results(self.search(isbn13), isbn=isbn13)
