"""Text cleanup and record assembly for scraped listing rows."""

from __future__ import annotations

import re

from models import PublicationRecord, PublicationSummary, ResolvedLink
from scholar_listing import SCHOLAR_BASE_URL

AUTHOR_SEPARATOR = ", "
# Scholar appends this marker to some venue strings.
VENUE_MARKER = "[Google Scholar]"
_TRAILING_COMMA = re.compile(r",\s*$")


def normalize_authors(raw_authors_text: str) -> str:
    """Trim each comma-separated author and rejoin in the original order."""
    if not raw_authors_text:
        return ""
    return AUTHOR_SEPARATOR.join(
        author.strip() for author in raw_authors_text.split(AUTHOR_SEPARATOR)
    )


def clean_venue(raw_venue_block: str, year: str) -> str:
    """Strip the year, the Scholar marker and a trailing comma from a venue.

    Purely textual: "Proc. Foo, 2020" with year "2020" becomes "Proc. Foo".
    Odd inputs may keep stray punctuation.
    """
    if not raw_venue_block:
        return ""

    venue = raw_venue_block.strip()
    if year:
        venue = venue.replace(year, "", 1)
    venue = venue.replace(VENUE_MARKER, "")
    venue = _TRAILING_COMMA.sub("", venue, count=1)
    return venue.strip()


def assemble_record(summary: PublicationSummary, link: ResolvedLink) -> PublicationRecord:
    """Merge one listing summary with its resolved link into the final record."""
    return PublicationRecord(
        title=summary.title,
        scholar_link=SCHOLAR_BASE_URL + summary.detail_reference,
        source_link=link.source,
        authors=normalize_authors(summary.raw_authors_text),
        venue=clean_venue(summary.raw_venue_block, summary.year),
        year=summary.year,
    )
