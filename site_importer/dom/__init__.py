"""
DOM helpers for site_importer.

This module wraps lxml with the handful of operations the block parsers and
transformers need: CSS querying, node construction, block tables and
subtree removal.
"""

from site_importer.dom.blocks import Cell, Row, create_block
from site_importer.dom.document import Document, clone, closest, replace_with, set_text, text_of
from site_importer.dom.dom_utils import remove, strip_attributes
from site_importer.dom.query import css_to_xpath, select, select_children, select_one

__all__ = [
    "Cell",
    "Document",
    "Row",
    "clone",
    "closest",
    "create_block",
    "css_to_xpath",
    "remove",
    "replace_with",
    "select",
    "select_children",
    "select_one",
    "set_text",
    "strip_attributes",
    "text_of",
]
