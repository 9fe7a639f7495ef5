"""
Block parsers for site_importer.

Each parser turns one block container into a block table and replaces the
container with it. ``PARSERS`` maps block ids used in the site
configuration to the parse functions.
"""

from collections.abc import Callable

from lxml import html

from site_importer.dom import Document
from site_importer.parsers import cards, carousel, columns, tabs

BlockParser = Callable[[html.HtmlElement, Document], html.HtmlElement | None]

PARSERS: dict[str, BlockParser] = {
    "cards": cards.parse,
    "carousel": carousel.parse,
    "columns": columns.parse,
    "tabs": tabs.parse,
}


def get_parser(block: str) -> BlockParser:
    """
    Look up the parser for a block id.

    Raises:
        ValueError: If no parser is registered for the block id
    """
    if block not in PARSERS:
        raise ValueError(f"No parser for block '{block}'. Available: {', '.join(PARSERS)}")
    return PARSERS[block]


__all__ = [
    "PARSERS",
    "BlockParser",
    "cards",
    "carousel",
    "columns",
    "get_parser",
    "tabs",
]
