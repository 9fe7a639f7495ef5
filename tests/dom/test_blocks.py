"""Tests for block table creation."""

from site_importer.dom import Document, create_block


def _rows(table):
    return table.findall("tr")


class TestCreateBlock:
    """Tests for create_block."""

    def setup_method(self):
        self.document = Document.from_string("<p>page</p>")

    def test_header_row(self):
        """The first row holds the block name spanning all columns."""
        image = self.document.create_element("img", attrs={"src": "/a.jpg"})
        content = self.document.create_element("div", text="Card")
        table = create_block(self.document, "Cards", [[image, content]])

        assert table.tag == "table"
        header = _rows(table)[0].findall("th")
        assert len(header) == 1
        assert header[0].text == "Cards"
        assert header[0].get("colspan") == "2"

    def test_cell_kinds(self):
        """Strings become text, elements and lists of elements are appended."""
        strong = self.document.create_element("strong", text="Heading")
        links = [
            self.document.create_element("a", text="One", attrs={"href": "/1"}),
            self.document.create_element("a", text="Two", attrs={"href": "/2"}),
        ]
        table = create_block(self.document, "Columns", [[strong, "Label", ""], [links, "", ""]])

        first, second = _rows(table)[1:]
        cells = first.findall("td")
        assert cells[0][0] is strong
        assert cells[1].text == "Label"
        assert cells[2].text is None and len(cells[2]) == 0
        assert [a.text for a in second.findall("td")[0]] == ["One", "Two"]

    def test_empty_grid(self):
        """An empty grid produces only the header row."""
        table = create_block(self.document, "Tabs", [])
        rows = _rows(table)
        assert len(rows) == 1
        assert rows[0][0].get("colspan") is None

    def test_every_row_keeps_its_cells(self):
        """Each grid row becomes a table row with the same number of cells."""
        cells = [["a", "b", "c"], ["d", "", ""]]
        table = create_block(self.document, "Columns", cells)
        assert [len(row.findall("td")) for row in _rows(table)[1:]] == [3, 3]
