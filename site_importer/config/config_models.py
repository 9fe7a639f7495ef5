"""Configuration models for the block importer.

This module contains Pydantic models that define the site-specific import
configuration: where block instances live on a page, which selector
strategies find their items, how the page is cleaned up and how the result
is converted to Markdown.
"""

import logging
from typing import Literal
from urllib.parse import urlparse

from lxml import html
from pydantic import BaseModel, ConfigDict, Field, HttpUrl

from site_importer.dom.query import select, select_children, select_one

logger = logging.getLogger(__name__)

BlockId = Literal["cards", "carousel", "columns", "tabs"]


class HtmlToMarkdownConfig(BaseModel):
    """Configuration settings for HTML to Markdown conversion.

    Customizes how the imported page is converted to Markdown. These settings
    are mapped to html2text options.
    """

    ignore_links: bool = False
    body_width: int = 0  # Don't wrap text
    protect_links: bool = True  # Don't wrap links
    unicode_snob: bool = True  # Use Unicode instead of ASCII
    ignore_images: bool = False  # Include images
    ignore_tables: bool = False  # Blocks are tables, keep them


class SelectorStrategy(BaseModel):
    """One way of locating elements inside a container.

    ``css`` is matched against descendants, or only against direct children
    when ``direct_children`` is set. ``must_contain`` keeps only the matches
    that have a descendant matching that selector.
    """

    model_config = ConfigDict(frozen=True)

    label: str
    css: str
    direct_children: bool = False
    must_contain: str | None = None

    def find_all(self, element: html.HtmlElement) -> list[html.HtmlElement]:
        found = select_children(element, self.css) if self.direct_children else select(element, self.css)
        if self.must_contain:
            found = [match for match in found if select_one(match, self.must_contain) is not None]
        return found


class SelectorChain(BaseModel):
    """Priority-ordered selector strategies where the first non-empty match wins.

    Strategies run from most to least specific. The order is the only thing
    keeping generic fallbacks from matching unrelated page regions.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    strategies: list[SelectorStrategy] = Field(..., min_length=1)

    def find_all(self, element: html.HtmlElement) -> list[html.HtmlElement]:
        """Return the matches of the first strategy that finds anything.

        Args:
            element: Container to search

        Returns:
            Matching elements in document order, empty if no strategy matched
        """
        for strategy in self.strategies:
            found = strategy.find_all(element)
            if found:
                logger.debug(f"{self.name}: '{strategy.label}' matched {len(found)} elements")
                return found
        logger.debug(f"{self.name}: no strategy matched")
        return []

    def find_first(self, element: html.HtmlElement) -> html.HtmlElement | None:
        found = self.find_all(element)
        return found[0] if found else None


class BlockLocator(BaseModel):
    """Where instances of one block type live on a page."""

    block: BlockId
    css: str
    must_contain: str | None = None

    def as_strategy(self) -> SelectorStrategy:
        return SelectorStrategy(label=self.block, css=self.css, must_contain=self.must_contain)


class CleanupConfig(BaseModel):
    """Settings for the page cleanup transformer."""

    tracking_attributes: list[str] = Field(
        default_factory=lambda: ["data-theme", "data-track", "data-testid"],
        description="Attributes stripped from every element after block extraction",
    )


class ImportConfig(BaseModel):
    """Configuration settings for importing a page.

    Block locators are processed in order; an element already replaced by an
    earlier block is skipped.
    """

    title_selector: str = "//title"
    blocks: list[BlockLocator] = Field(
        default_factory=list,
        description="Priority-ordered block locators",
    )
    cleanup: CleanupConfig = Field(default_factory=CleanupConfig)
    save_html: bool = True  # Also write the transformed HTML next to the Markdown
    markdown_config: HtmlToMarkdownConfig = Field(default_factory=HtmlToMarkdownConfig)


class SiteConfig(BaseModel):
    """Configuration for site-specific imports.

    Defines the overall configuration for a site, including base URL,
    description and the import configuration.
    """

    base_url: HttpUrl
    description: str | None = None
    import_config: ImportConfig = Field(default_factory=ImportConfig)

    @property
    def base_dir(self) -> str:
        """Derive base directory from base_url.

        Returns:
            Host name without protocol prefix or port (e.g., 'turbotax.intuit.com')
        """
        url_str = str(self.base_url)
        host = urlparse(url_str).hostname
        if not host:
            raise ValueError(f"Invalid base_url: {url_str!r}")
        return host


class ImportConfigRegistry(BaseModel):
    """Registry of all site import configurations."""

    sites: dict[str, SiteConfig]
