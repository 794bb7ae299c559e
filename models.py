"""Shared typed models for the publications pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class PublicationSummary:
    """Raw, uncleaned data from one row of the profile listing page."""

    title: str
    detail_reference: str
    raw_authors_text: str
    raw_venue_block: str
    year: str


@dataclass(frozen=True, slots=True)
class ResolvedLink:
    """External source link extracted from a publication's detail page."""

    source: str = ""


@dataclass(frozen=True, slots=True)
class PublicationRecord:
    """Final cleaned record persisted to the output file."""

    title: str
    scholar_link: str
    source_link: str
    authors: str
    venue: str
    year: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "scholarLink": self.scholar_link,
            "sourceLink": self.source_link,
            "authors": self.authors,
            "venue": self.venue,
            "year": self.year,
        }
