"""Parser for the Columns block.

Block structure:
    - Header row: block name ("Columns")
    - First row: each column's heading, or its first link when it has none
    - Link rows: one link per column, blank where a column has run out

Source pattern: a 4-column grid whose ``GridItem-order`` children each hold a
heading paragraph followed by styled links.
"""

import logging

from lxml import html

from site_importer.dom import (
    Cell,
    Document,
    Row,
    clone,
    create_block,
    replace_with,
    select,
    select_one,
    set_text,
    text_of,
)
from site_importer.parsers import selectors

logger = logging.getLogger(__name__)

BLOCK_NAME = "Columns"


def _column_content(column: html.HtmlElement, document: Document) -> list[Cell]:
    """The heading, when the column has one, followed by every styled link."""
    content: list[Cell] = []
    heading = select_one(column, selectors.COLUMN_HEADING)
    if heading is not None:
        content.append(document.create_element("strong", text=text_of(heading)))
    for link in select(column, selectors.STYLED_LINK):
        content.append(set_text(clone(link), text_of(link)))
    return content


def extract_cells(element: html.HtmlElement, document: Document) -> list[Row] | None:
    """
    Build the Columns cell grid.

    Args:
        element: Grid container whose direct children are the columns
        document: Document used to create new nodes

    Returns:
        Rows padded to equal length, or None when no columns were found
    """
    column_divs = selectors.COLUMN_CONTAINERS.find_all(element)
    if not column_divs:
        return None

    columns = [_column_content(column, document) for column in column_divs]
    # The first row is always emitted, blank for columns with no content
    row_count = max(max(len(column) for column in columns), 1)

    return [[column[i] if i < len(column) else "" for column in columns] for i in range(row_count)]


def parse(element: html.HtmlElement, document: Document) -> html.HtmlElement | None:
    """
    Replace a columns grid with a Columns block.

    Returns:
        The block, or None when no columns were found and the element was left as is
    """
    cells = extract_cells(element, document)
    if cells is None:
        logger.info(f"No columns found, leaving element for {BLOCK_NAME} untouched")
        return None

    block = create_block(document, BLOCK_NAME, cells)
    replace_with(element, block)
    logger.info(f"Parsed {BLOCK_NAME} block with {len(cells[0])} columns and {len(cells)} rows")
    return block
