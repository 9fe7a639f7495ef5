"""CSS querying for lxml elements.

Selectors are translated to XPath with cssselect and evaluated relative to
the element, so results follow ``querySelectorAll`` semantics: descendants
only, in document order, without duplicates.
"""

from functools import lru_cache

from cssselect import HTMLTranslator
from lxml import html

_translator = HTMLTranslator()


@lru_cache(maxsize=512)
def css_to_xpath(css: str, prefix: str = "descendant::") -> str:
    """
    Translate a CSS selector group to an XPath expression.

    Args:
        css: CSS selector, may be a comma separated group
        prefix: XPath axis the expression is anchored on

    Returns:
        XPath expression string
    """
    return _translator.css_to_xpath(css, prefix=prefix)


def select(element: html.HtmlElement, css: str) -> list[html.HtmlElement]:
    """Return all descendants of ``element`` matching ``css``."""
    return element.xpath(css_to_xpath(css))


def select_one(element: html.HtmlElement, css: str) -> html.HtmlElement | None:
    """Return the first descendant of ``element`` matching ``css`` or None."""
    found = select(element, css)
    return found[0] if found else None


def select_children(element: html.HtmlElement, css: str) -> list[html.HtmlElement]:
    """Return the direct children of ``element`` matching ``css``."""
    return element.xpath(css_to_xpath(css, prefix="child::"))
