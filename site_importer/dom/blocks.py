"""Materialize a cell grid into a block table."""

import logging
from typing import Union

from lxml import html

from site_importer.dom.document import Document

logger = logging.getLogger(__name__)

# A cell is a single node, several nodes, or plain text ("" is a blank placeholder)
Cell = Union[html.HtmlElement, list[html.HtmlElement], str]
Row = list[Cell]


def _fill_cell(td: html.HtmlElement, cell: Cell) -> None:
    if isinstance(cell, str):
        if cell:
            td.text = cell
    elif isinstance(cell, list):
        for node in cell:
            td.append(node)
    else:
        td.append(cell)


def create_block(document: Document, name: str, cells: list[Row]) -> html.HtmlElement:
    """
    Build a block table from a cell grid.

    The first row holds the block name in a single header cell spanning the
    full width; every grid row follows as its own table row.

    Args:
        document: Document used to create the table nodes
        name: Block name, e.g. ``Cards``
        cells: Rows of cells

    Returns:
        The ``<table>`` element
    """
    width = max((len(row) for row in cells), default=1)
    if any(len(row) != width for row in cells):
        logger.warning(f"Block '{name}' has rows of unequal length")

    table = document.create_element("table")
    header_row = document.create_element("tr")
    header = document.create_element("th", text=name)
    if width > 1:
        header.set("colspan", str(width))
    header_row.append(header)
    table.append(header_row)

    for row in cells:
        tr = document.create_element("tr")
        for cell in row:
            td = document.create_element("td")
            _fill_cell(td, cell)
            tr.append(td)
        table.append(tr)

    logger.debug(f"Created '{name}' block with {len(cells)} rows")
    return table
