"""
Importer module for site_importer.

This module contains the Importer class for turning source pages saved on
disk into block-structured Markdown.
"""

from site_importer.importer.importer import Importer

__all__ = [
    "Importer",
]
