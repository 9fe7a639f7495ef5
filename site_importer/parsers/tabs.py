"""Parser for the Tabs block.

Block structure:
    - Header row: block name ("Tabs")
    - One row per tab: [label | content]

Source pattern: a tab list of buttons and, in the same order, one tab panel
per button holding a heading, a "browse all" video link and an embedded
video playlist.
"""

import logging
import re
from urllib.parse import parse_qs, urlparse

from lxml import html

from site_importer.dom import Document, Row, clone, create_block, replace_with, select_one, set_text, text_of
from site_importer.parsers import selectors

logger = logging.getLogger(__name__)

BLOCK_NAME = "Tabs"

_WORD_START = re.compile(r"\b\w")


def normalize_label(label: str) -> str:
    """
    Turn an all-caps tab label into title case.

    Mixed-case labels are returned unchanged, e.g. "TAX TIPS" becomes
    "Tax Tips" while "FAQs & Help" stays as it is.
    """
    if label != label.upper():
        return label
    return _WORD_START.sub(lambda match: match.group().upper(), label.lower())


def video_watch_url(embed_src: str) -> str | None:
    """
    Build a watch-page URL from an embed URL's playlist parameter.

    Args:
        embed_src: Embed URL, e.g. ``https://www.youtube.com/embed/?playlist=abc123,def456``

    Returns:
        Watch URL for the first video of the playlist, or None without a playlist
    """
    playlist = parse_qs(urlparse(embed_src).query).get("playlist")
    if not playlist:
        return None
    video_id = playlist[0].split(",")[0].strip()
    if not video_id:
        return None
    return selectors.VIDEO_WATCH_URL.format(video_id=video_id)


def _tab_label(button: html.HtmlElement) -> str:
    strong = select_one(button, selectors.TAB_LABEL)
    return normalize_label(text_of(strong) if strong is not None else text_of(button))


def _tab_content(panel: html.HtmlElement, document: Document) -> html.HtmlElement:
    content = document.create_element("div")

    heading = select_one(panel, selectors.TAB_HEADING)
    if heading is not None:
        content.append(document.create_element("h3", text=text_of(heading)))

    browse_link = select_one(panel, selectors.TAB_BROWSE_LINK)
    if browse_link is not None:
        paragraph = document.create_element("p")
        paragraph.append(set_text(clone(browse_link), text_of(browse_link)))
        content.append(paragraph)

    frame = select_one(panel, selectors.TAB_VIDEO_FRAME)
    if frame is not None:
        url = video_watch_url(frame.get("src") or "")
        if url:
            paragraph = document.create_element("p")
            paragraph.append(document.create_element("a", text=url, attrs={"href": url}))
            content.append(paragraph)
        else:
            logger.debug("Video frame without playlist, skipping video link")

    return content


def extract_cells(element: html.HtmlElement, document: Document) -> list[Row]:
    """Pair buttons with panels by position and build ``[label, content]`` rows."""
    buttons = selectors.TAB_BUTTONS.find_all(element)
    panels = selectors.TAB_PANELS.find_all(element)

    cells: list[Row] = []
    for index, button in enumerate(buttons):
        if index >= len(panels):
            logger.debug(f"Tab button {index} has no panel, skipping")
            continue
        cells.append([_tab_label(button), _tab_content(panels[index], document)])
    return cells


def parse(element: html.HtmlElement, document: Document) -> html.HtmlElement:
    cells = extract_cells(element, document)
    block = create_block(document, BLOCK_NAME, cells)
    replace_with(element, block)
    logger.info(f"Parsed {BLOCK_NAME} block with {len(cells)} tabs")
    return block
