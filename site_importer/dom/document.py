"""Document wrapper and node helpers for building block content.

The extractors only read from the source tree. New content is either built
from scratch through :class:`Document` or cloned from source nodes with
:func:`clone`, so the source nodes themselves are never rewritten.
"""

import copy
import logging
from typing import Any

from lxml import html

logger = logging.getLogger(__name__)


class Document:
    """
    A parsed HTML page plus the ability to create new elements.

    Extractors receive a Document alongside the element they work on and use
    it for every node they construct.
    """

    def __init__(self, root: html.HtmlElement):
        """
        Initialize the document.

        Args:
            root: Root ``<html>`` element of a parsed page
        """
        self.root = root

    @classmethod
    def from_string(cls, html_content: str) -> "Document":
        """
        Parse an HTML string into a Document.

        Fragments are wrapped into ``<html><body>`` by lxml.

        Args:
            html_content: Raw HTML content

        Returns:
            Document wrapping the parsed tree
        """
        return cls(html.document_fromstring(html_content))

    @property
    def body(self) -> html.HtmlElement:
        """The ``<body>`` element, or the root when the page has none."""
        body = self.root.find("body")
        return body if body is not None else self.root

    @property
    def title(self) -> str | None:
        title = self.root.findtext(".//title")
        return title.strip() if title else None

    def create_element(
        self,
        tag: str,
        text: str | None = None,
        attrs: dict[str, str] | None = None,
    ) -> html.HtmlElement:
        """
        Create a new, detached element.

        Args:
            tag: Tag name
            text: Optional text content
            attrs: Optional attributes

        Returns:
            The new element
        """
        element = html.Element(tag, attrib=attrs or {})
        if text is not None:
            element.text = text
        return element

    def to_html(self, element: html.HtmlElement | None = None, pretty_print: bool = True) -> str:
        """Serialize ``element``, or the whole page when no element is given."""
        target = self.root if element is None else element
        return html.tostring(target, encoding="unicode", pretty_print=pretty_print)

    def contains(self, element: html.HtmlElement) -> bool:
        """Check whether ``element`` is still attached to this page."""
        node: Any = element
        while node is not None:
            if node is self.root:
                return True
            node = node.getparent()
        return False


def text_of(element: html.HtmlElement) -> str:
    """Return the element's text content with surrounding whitespace trimmed."""
    return element.text_content().strip()


def set_text(element: html.HtmlElement, text: str) -> html.HtmlElement:
    """Replace all children of ``element`` with plain text."""
    for child in list(element):
        element.remove(child)
    element.text = text
    return element


def clone(element: html.HtmlElement) -> html.HtmlElement:
    """Deep copy an element without the text that trails it in the source."""
    copied = copy.deepcopy(element)
    copied.tail = None
    return copied


def closest(element: html.HtmlElement, tag: str) -> html.HtmlElement | None:
    """Return ``element`` or its nearest ancestor with the given tag."""
    if element.tag == tag:
        return element
    for ancestor in element.iterancestors(tag):
        return ancestor
    return None


def replace_with(old: html.HtmlElement, new: html.HtmlElement) -> bool:
    """
    Replace ``old`` with ``new`` in the tree, keeping the text after ``old``.

    Args:
        old: Element currently in the tree
        new: Replacement element

    Returns:
        True if the replacement happened, False if ``old`` has no parent
    """
    parent = old.getparent()
    if parent is None:
        logger.debug(f"Cannot replace detached <{old.tag}> element")
        return False
    new.tail = old.tail
    parent.replace(old, new)
    return True
