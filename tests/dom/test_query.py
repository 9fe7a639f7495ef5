"""Tests for CSS querying helpers."""

import pytest
from lxml import html

from site_importer.dom import css_to_xpath, select, select_children, select_one

GRID_HTML = """
<div id="grid" class="Grid-grid-3c1f2a0 Grid-md:grid-cols-4-9d8e7f1">
    <div class="GridItem-order-e422a5a">
        <p class="mb-12 body02 font-medium">Home &amp; family</p>
        <a class="Link-font-demi-link-84adaca mb-4" href="/tax-tips/family/">Family</a>
    </div>
    <div class="GridItem-order-e422a5a">
        <section><div class="GridItem-order-nested">Nested</div></section>
    </div>
</div>
"""


@pytest.fixture
def grid():
    """Fixture for a parsed grid fragment."""
    return html.fragment_fromstring(GRID_HTML.strip())


class TestSelect:
    """Tests for select and select_one."""

    def test_select_excludes_the_element_itself(self, grid):
        """The container never matches its own selector."""
        assert select(grid, '[class*="Grid-grid"]') == []

    def test_select_finds_all_descendants(self, grid):
        """Descendants at any depth are returned."""
        assert len(select(grid, '[class*="GridItem-order"]')) == 3

    def test_select_group_in_document_order(self, grid):
        """A selector group returns matches in document order."""
        found = select(grid, "a, p")
        assert [el.tag for el in found] == ["p", "a"]

    def test_select_one(self, grid):
        """select_one returns the first match or None."""
        link = select_one(grid, 'a[class*="Link-font-demi-link"]')
        assert link is not None
        assert link.get("href") == "/tax-tips/family/"
        assert select_one(grid, "iframe") is None


class TestSelectChildren:
    """Tests for select_children."""

    def test_only_direct_children(self, grid):
        """Nested matches are not direct children."""
        children = select_children(grid, 'div[class*="GridItem-order"]')
        assert len(children) == 2
        assert all(child.getparent() is grid for child in children)


def test_css_to_xpath_prefix():
    """The XPath expression is anchored on the requested axis."""
    assert css_to_xpath("div").startswith("descendant::")
    assert css_to_xpath("div", prefix="child::").startswith("child::")
