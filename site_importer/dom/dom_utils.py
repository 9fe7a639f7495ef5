"""Page-level DOM removal helpers used by transformers."""

import logging

from lxml import etree, html

from site_importer.dom.query import select

logger = logging.getLogger(__name__)


def _is_within(node: html.HtmlElement, root: html.HtmlElement) -> bool:
    parent = node.getparent()
    while parent is not None:
        if parent is root:
            return True
        parent = parent.getparent()
    return False


def remove(element: html.HtmlElement, selectors: list[str]) -> int:
    """
    Remove every descendant of ``element`` matching any of the selectors.

    Selectors are applied in order. Text following a removed node is kept.

    Args:
        element: Root of the subtree to clean
        selectors: Ordered list of CSS selectors

    Returns:
        Number of removed elements
    """
    removed = 0
    for selector in selectors:
        for match in select(element, selector):
            # Already gone with an ancestor removed earlier in this loop
            if not _is_within(match, element):
                continue
            match.drop_tree()
            removed += 1
    if removed:
        logger.debug(f"Removed {removed} elements matching {selectors}")
    return removed


def strip_attributes(element: html.HtmlElement, names: list[str]) -> int:
    """
    Delete the named attributes from ``element`` and all its descendants.

    Args:
        element: Root of the subtree to clean
        names: Attribute names to delete

    Returns:
        Number of attributes deleted
    """
    stripped = 0
    for node in element.iter(etree.Element):
        for name in names:
            if name in node.attrib:
                del node.attrib[name]
                stripped += 1
    return stripped
