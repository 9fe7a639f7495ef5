"""Parser for the Carousel block.

Block structure:
    - Header row: block name ("Carousel")
    - One row per slide: [image | title link]

Source pattern: a ``glide`` slider whose ``glide__slide`` items each hold a
picture and an optional styled title link.
"""

import logging

from lxml import html

from site_importer.dom import Document, Row, clone, create_block, replace_with, select_one, set_text, text_of
from site_importer.parsers import selectors

logger = logging.getLogger(__name__)

BLOCK_NAME = "Carousel"


def extract_cells(element: html.HtmlElement, document: Document) -> list[Row]:
    """Build one ``[image, title link]`` row per slide that has an image."""
    cells: list[Row] = []
    for slide in selectors.CAROUSEL_SLIDES.find_all(element):
        image = select_one(slide, "img")
        if image is None:
            continue

        link = selectors.CAROUSEL_TITLE_LINK.find_first(slide)
        if link is not None:
            cells.append([clone(image), set_text(clone(link), text_of(link))])
        else:
            cells.append([clone(image), ""])
    return cells


def parse(element: html.HtmlElement, document: Document) -> html.HtmlElement:
    cells = extract_cells(element, document)
    block = create_block(document, BLOCK_NAME, cells)
    replace_with(element, block)
    logger.info(f"Parsed {BLOCK_NAME} block with {len(cells)} slides")
    return block
