"""Parser for the Cards block.

Block structure:
    - Header row: block name ("Cards")
    - One row per card: [image | content]

Source patterns:
    1. Featured cards: ``Pod-pod`` items with image, category (h2), title (h4),
       description (p) and a CTA link
    2. Recent/blog cards: grid items with image, linked category (a > h4) and a
       title link (a > p)
    3. Author cards: grid items with avatar, name (span), role (p) and a CTA link
    4. Tool cards: grid items with icon, title (h4), description (p) and a CTA link
"""

import logging

from lxml import html

from site_importer.dom import (
    Document,
    Row,
    clone,
    closest,
    create_block,
    replace_with,
    select,
    select_one,
    set_text,
    text_of,
)
from site_importer.parsers import selectors

logger = logging.getLogger(__name__)

BLOCK_NAME = "Cards"


def _strong_paragraph(document: Document, text: str) -> html.HtmlElement:
    paragraph = document.create_element("p")
    paragraph.append(document.create_element("strong", text=text))
    return paragraph


def _link_paragraph(document: Document, link: html.HtmlElement) -> html.HtmlElement:
    paragraph = document.create_element("p")
    paragraph.append(set_text(clone(link), text_of(link)))
    return paragraph


def _build_content(card: html.HtmlElement, document: Document) -> html.HtmlElement:
    """Collect category, title, description and CTA of one card into a div."""
    content = document.create_element("div")

    category_link = select_one(card, selectors.CARD_LINKED_CATEGORY)
    category_heading = select_one(card, selectors.CARD_CATEGORY_HEADING)
    author_name = select_one(card, selectors.CARD_AUTHOR_NAME)

    if category_link is not None:
        anchor = clone(closest(category_link, "a"))
        set_text(anchor, "")
        anchor.append(document.create_element("strong", text=text_of(category_link)))
        paragraph = document.create_element("p")
        paragraph.append(anchor)
        content.append(paragraph)
    elif category_heading is not None:
        content.append(_strong_paragraph(document, text_of(category_heading)))
    elif author_name is not None:
        content.append(_strong_paragraph(document, text_of(author_name)))

    title_heading = select_one(card, selectors.CARD_TITLE_HEADING)
    styled_links = select(card, selectors.STYLED_LINK)

    if title_heading is not None and category_link is None:
        content.append(_strong_paragraph(document, text_of(title_heading)))

    if category_link is not None and len(styled_links) > 1:
        content.append(_link_paragraph(document, styled_links[1]))
    elif category_link is None and author_name is None and styled_links and title_heading is None:
        content.append(_link_paragraph(document, styled_links[0]))

    descriptions = select(card, selectors.CARD_DESCRIPTION)
    author_role = select_one(card, selectors.CARD_AUTHOR_ROLE)
    if descriptions:
        for description in descriptions:
            content.append(document.create_element("p", text=text_of(description)))
    elif author_role is not None:
        content.append(document.create_element("p", text=text_of(author_role)))

    # The last styled link is the CTA unless it is the linked category, and
    # only when its text is not already part of the card content
    if styled_links and category_link is None:
        cta_text = text_of(styled_links[-1])
        if cta_text and cta_text not in content.text_content():
            content.append(_link_paragraph(document, styled_links[-1]))

    return content


def extract_cells(element: html.HtmlElement, document: Document) -> list[Row]:
    """
    Build the Cards cell grid.

    Args:
        element: Container holding the cards
        document: Document used to create new nodes

    Returns:
        One ``[image, content]`` row per card that has an image
    """
    cells: list[Row] = []
    for card in selectors.CARD_ITEMS.find_all(element):
        image = select_one(card, "img")
        content = _build_content(card, document)
        if image is None:
            logger.debug("Skipping card without image")
            continue
        cells.append([clone(image), content])
    return cells


def parse(element: html.HtmlElement, document: Document) -> html.HtmlElement:
    """Replace a cards container with a Cards block and return the block."""
    cells = extract_cells(element, document)
    block = create_block(document, BLOCK_NAME, cells)
    replace_with(element, block)
    logger.info(f"Parsed {BLOCK_NAME} block with {len(cells)} cards")
    return block
