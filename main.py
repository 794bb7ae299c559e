"""CLI entrypoint for the Google Scholar publications fetcher."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from cleaners import assemble_record
from detail_resolver import resolve_source_link
from json_sink import JSON_OUTPUT_PATH, write_publications
from models import PublicationRecord
from rate_limiter import DEFAULT_DELAY_SECONDS, FixedDelayRateLimiter, RateLimiter
from scholar_listing import DEFAULT_LANGUAGE, fetch_publication_summaries


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line flags. Unset flags fall back to environment values."""
    parser = argparse.ArgumentParser(description="Fetch Google Scholar publications into a JSON file")
    parser.add_argument(
        "--scholar-id",
        default=os.getenv("SCHOLAR_ID"),
        help="Google Scholar profile id (default: $SCHOLAR_ID)",
    )
    parser.add_argument(
        "--language",
        default=os.getenv("SCHOLAR_LANGUAGE", DEFAULT_LANGUAGE),
        help="Scholar interface language code (default: de)",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=float(os.getenv("SCHOLAR_REQUEST_DELAY_SECONDS", str(DEFAULT_DELAY_SECONDS))),
        help="Seconds to wait before each detail-page request",
    )
    parser.add_argument(
        "--output",
        default=os.getenv("PUBLICATIONS_OUTPUT_PATH", JSON_OUTPUT_PATH),
        help="Path of the JSON file to overwrite",
    )
    parser.add_argument("--limit", type=int, default=None, help="Only process the first N listed publications")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve everything but do not write the output file",
    )
    return parser.parse_args(argv)


def run(
    scholar_id: str,
    rate_limiter: RateLimiter,
    output_path: str | None = None,
    language: str = DEFAULT_LANGUAGE,
    limit: int | None = None,
    dry_run: bool = False,
) -> list[PublicationRecord]:
    """Run one fetch cycle and return the records in listing order.

    Listing failures propagate. Detail failures only blank the affected
    record's source link.
    """
    summaries = fetch_publication_summaries(scholar_id, language=language)
    logging.info("Fetched %s publication rows for scholar_id=%s", len(summaries), scholar_id)

    if limit is not None:
        summaries = summaries[:limit]

    records: list[PublicationRecord] = []
    for summary in summaries:
        link = resolve_source_link(
            summary.detail_reference,
            summary.title,
            rate_limiter,
            language=language,
        )
        record = assemble_record(summary, link)
        records.append(record)
        logging.info("Processed: %s (Source: %s)", record.title, record.source_link)

    if dry_run:
        logging.info("[dry-run] Would write %s publications to %s", len(records), output_path or JSON_OUTPUT_PATH)
    else:
        write_publications(records, output_path)

    logging.info("Successfully fetched %s publications", len(records))
    return records


def main(argv: list[str] | None = None) -> None:
    """Initialize config and execute the pipeline; exit non-zero on fatal errors."""
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    args = parse_args(argv)

    if not args.scholar_id:
        logging.error("SCHOLAR_ID environment variable or --scholar-id is required")
        sys.exit(1)

    try:
        run(
            scholar_id=args.scholar_id,
            rate_limiter=FixedDelayRateLimiter(args.delay),
            output_path=args.output,
            language=args.language,
            limit=args.limit,
            dry_run=args.dry_run,
        )
    except Exception as exc:
        logging.exception("Error fetching publications: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
