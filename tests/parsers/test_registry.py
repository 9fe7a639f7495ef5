"""Tests for the block parser registry."""

import pytest

from site_importer.parsers import PARSERS, cards, carousel, columns, get_parser, tabs


class TestGetParser:
    """Tests for get_parser."""

    @pytest.mark.parametrize(
        ("block", "module"),
        [("cards", cards), ("carousel", carousel), ("columns", columns), ("tabs", tabs)],
    )
    def test_known_blocks(self, block, module):
        """Every block id resolves to its module's parse function."""
        assert get_parser(block) is module.parse

    def test_unknown_block(self):
        """Unknown block ids raise a ValueError naming the available ids."""
        with pytest.raises(ValueError, match="hero"):
            get_parser("hero")

    def test_registry_keys(self):
        """The registry covers exactly the supported blocks."""
        assert sorted(PARSERS) == ["cards", "carousel", "columns", "tabs"]
