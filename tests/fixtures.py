"""Inline HTML snippets shaped like Google Scholar pages."""

from __future__ import annotations

from unittest.mock import MagicMock


def listing_row(
    title: str,
    href: str,
    authors: str | None = "A. One, B. Two",
    venue: str | None = "Proc. Foo",
    venue_year: str | None = ", 2020",
    year: str = "2020",
) -> str:
    gray = ""
    if authors is not None:
        gray += f'<div class="gs_gray">{authors}</div>'
    if venue is not None:
        oph = f'<span class="gs_oph">{venue_year}</span>' if venue_year is not None else ""
        gray += f'<div class="gs_gray">{venue}{oph}</div>'
    return (
        '<tr class="gsc_a_tr">'
        f'<td class="gsc_a_t"><a href="{href}" class="gsc_a_at">{title}</a>{gray}</td>'
        '<td class="gsc_a_c"><a href="#" class="gsc_a_ac gs_ibl">12</a></td>'
        f'<td class="gsc_a_y"><span class="gsc_a_h gsc_a_hc gs_ibl">{year}</span></td>'
        "</tr>"
    )


def listing_page(*rows: str) -> str:
    return (
        "<html><body><div id=\"gsc_bdy\"><table id=\"gsc_a_t\">"
        f"<tbody id=\"gsc_a_b\">{''.join(rows)}</tbody>"
        "</table></div></body></html>"
    )


def detail_page(primary_links: list[str] | None = None, value_links: list[str] | None = None) -> str:
    """Citation page whose title zone holds primary_links and whose value zone holds value_links."""
    primary = "".join(
        f'<div class="gsc_oci_title_ggi"><a href="{href}">[PDF] link</a></div>'
        for href in primary_links or []
    )
    values = "".join(f'<a href="{href}">link</a> ' for href in value_links or [])
    return (
        "<html><body>"
        f'<div id="gsc_oci_title_wrapper"><div id="gsc_oci_title_gg">{primary}</div>'
        '<div id="gsc_oci_title">Example Paper</div></div>'
        '<div id="gsc_oci_table"><div class="gs_scl">'
        '<div class="gsc_oci_field">Quelle</div>'
        f'<div class="gsc_oci_value">{values}</div>'
        "</div></div>"
        "</body></html>"
    )


def mock_resp(html: str) -> MagicMock:
    """Return a mock requests.Response carrying html."""
    mock = MagicMock()
    mock.text = html
    return mock
