"""Markup query capability used by the listing and detail parsers."""

from __future__ import annotations

from typing import Protocol

from bs4 import BeautifulSoup
from bs4.element import Tag


class DocumentQuery(Protocol):
    """Selector-based read access to a parsed HTML document."""

    def find_all(self, selector: str, scope: Tag | None = None) -> list[Tag]: ...

    def attribute(self, node: Tag, name: str) -> str: ...

    def text(self, node: Tag | None) -> str: ...


class SoupDocumentQuery:
    """DocumentQuery backed by BeautifulSoup's CSS selector support."""

    def __init__(self, html: str) -> None:
        self._soup = BeautifulSoup(html, "html.parser")

    def find_all(self, selector: str, scope: Tag | None = None) -> list[Tag]:
        """Return matching nodes in document order, optionally within scope."""
        root = scope if scope is not None else self._soup
        return root.select(selector)

    def attribute(self, node: Tag, name: str) -> str:
        value = node.get(name)
        if isinstance(value, list):
            # multi-valued attributes such as class come back as lists
            return " ".join(value)
        return value or ""

    def text(self, node: Tag | None) -> str:
        if node is None:
            return ""
        return node.get_text().strip()
