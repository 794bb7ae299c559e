"""Google Scholar profile listing helpers."""

from __future__ import annotations

import logging
import re

import requests

from document_query import DocumentQuery, SoupDocumentQuery
from models import PublicationSummary

SCHOLAR_BASE_URL = "https://scholar.google.com"
SCHOLAR_PROFILE_URL = SCHOLAR_BASE_URL + "/citations?user={scholar_id}&hl={language}"
DEFAULT_LANGUAGE = "de"
REQUEST_TIMEOUT_SECONDS = 30
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

_ROW_SELECTOR = "#gsc_a_b .gsc_a_tr"
_TITLE_SELECTOR = ".gsc_a_t a"
_GRAY_SELECTOR = ".gsc_a_t .gs_gray"
_YEAR_SELECTOR = ".gsc_a_y"
_VENUE_YEAR_SELECTOR = ".gs_oph"
_VENUE_YEAR_SEPARATOR = re.compile(r",\s*")

LOGGER = logging.getLogger(__name__)


def build_headers(language: str = DEFAULT_LANGUAGE) -> dict[str, str]:
    """Return the fixed header set sent with every Scholar request."""
    lang = language.lower()
    return {
        "Accept-Charset": "UTF-8",
        "Accept-Language": f"{lang}-{lang.upper()},{lang};q=0.9",
        "User-Agent": USER_AGENT,
    }


def fetch_publication_summaries(
    scholar_id: str, language: str = DEFAULT_LANGUAGE
) -> list[PublicationSummary]:
    """Fetch the profile page for scholar_id and parse its publication rows.

    Network and HTTP errors are not caught here: a listing failure aborts
    the run.

    Args:
        scholar_id: Google Scholar profile identifier (the ``user=`` value).
        language: Interface language code, sent as ``hl=`` and Accept-Language.
    """
    if not scholar_id:
        raise ValueError("scholar_id is required")

    url = SCHOLAR_PROFILE_URL.format(scholar_id=scholar_id, language=language)
    response = requests.get(
        url,
        headers=build_headers(language),
        timeout=REQUEST_TIMEOUT_SECONDS,
    )
    response.raise_for_status()

    summaries = parse_listing_html(response.text)
    LOGGER.info("Scholar listing: scholar_id=%s rows=%s", scholar_id, len(summaries))
    return summaries


def parse_listing_html(html: str) -> list[PublicationSummary]:
    """Parse listing markup into summaries, preserving row order."""
    if not isinstance(html, str):
        raise RuntimeError("Unexpected listing payload: expected HTML text")

    query = SoupDocumentQuery(html)
    return [_parse_row(query, row) for row in query.find_all(_ROW_SELECTOR)]


def _parse_row(query: DocumentQuery, row) -> PublicationSummary:
    title_nodes = query.find_all(_TITLE_SELECTOR, scope=row)
    title_node = title_nodes[0] if title_nodes else None
    gray_blocks = query.find_all(_GRAY_SELECTOR, scope=row)

    year = _joined_text(query, query.find_all(_YEAR_SELECTOR, scope=row))
    # "Proc. Foo, 2020" style rows carry the year next to the venue.
    year_in_venue = _joined_text(query, query.find_all(_VENUE_YEAR_SELECTOR, scope=row))
    if year_in_venue:
        year = _VENUE_YEAR_SEPARATOR.sub("", year_in_venue, count=1)

    return PublicationSummary(
        title=query.text(title_node),
        detail_reference=query.attribute(title_node, "href") if title_node is not None else "",
        raw_authors_text=query.text(gray_blocks[0]) if len(gray_blocks) > 0 else "",
        raw_venue_block=query.text(gray_blocks[1]) if len(gray_blocks) > 1 else "",
        year=year,
    )


def _joined_text(query: DocumentQuery, nodes: list) -> str:
    """Concatenated text of all matched nodes, stripped."""
    return "".join(query.text(node) for node in nodes).strip()
