"""Resolve an external source link from a Scholar citation detail page."""

from __future__ import annotations

import logging

import requests

from document_query import DocumentQuery, SoupDocumentQuery
from models import ResolvedLink
from rate_limiter import RateLimiter
from scholar_listing import (
    DEFAULT_LANGUAGE,
    REQUEST_TIMEOUT_SECONDS,
    SCHOLAR_BASE_URL,
    build_headers,
)

PREPRINT_HOST_MARKER = "arxiv.org"
LISTING_HOST_MARKER = "scholar.google"

# Title link and the [PDF]/[HTML] badge next to it.
_PRIMARY_ZONE_SELECTOR = "#gsc_oci_title_gg a, a.gsc_oci_title_link"
_VALUE_ZONE_SELECTOR = ".gsc_oci_value a"

LOGGER = logging.getLogger(__name__)


def resolve_source_link(
    detail_reference: str,
    title: str,
    rate_limiter: RateLimiter,
    language: str = DEFAULT_LANGUAGE,
) -> ResolvedLink:
    """Fetch the detail page for one publication and pick its source link.

    Never raises: fetch or parse failures are logged and produce an empty
    source link so the caller can keep going.

    Args:
        detail_reference: Relative citation locator taken from the listing row.
        title: Publication title, used for log lines only.
        rate_limiter: Called once before the request goes out.
        language: Interface language for the request headers.
    """
    rate_limiter.wait_turn()
    url = SCHOLAR_BASE_URL + detail_reference

    try:
        response = requests.get(
            url,
            headers=build_headers(language),
            timeout=REQUEST_TIMEOUT_SECONDS,
        )
        response.raise_for_status()
        source = select_source_link(SoupDocumentQuery(response.text))
    except Exception as exc:  # broad so one bad detail page never aborts the run
        LOGGER.exception("Detail fetch failed for %r (%s): %s", title, url, exc)
        return ResolvedLink(source="")

    if not source:
        LOGGER.info("No source link found for %r", title)
    return ResolvedLink(source=source)


def select_source_link(query: DocumentQuery) -> str:
    """Apply the link preference policy to a parsed detail page.

    Primary zone: the first anchor wins unless some anchor points at the
    preprint host, in which case that one wins. Value zone (fallback): the
    first anchor that does not lead back to Scholar itself.
    """
    first_found = ""
    for anchor in query.find_all(_PRIMARY_ZONE_SELECTOR):
        href = query.attribute(anchor, "href")
        if not href:
            continue
        absolute = to_absolute_url(href)
        if PREPRINT_HOST_MARKER in absolute:
            return absolute
        if not first_found:
            first_found = absolute

    if first_found:
        return first_found

    for anchor in query.find_all(_VALUE_ZONE_SELECTOR):
        href = query.attribute(anchor, "href")
        if not href:
            continue
        absolute = to_absolute_url(href)
        if LISTING_HOST_MARKER not in absolute:
            return absolute

    return ""


def to_absolute_url(href: str) -> str:
    if href.startswith("http://") or href.startswith("https://"):
        return href
    return SCHOLAR_BASE_URL + href
