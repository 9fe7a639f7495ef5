"""Page import pipeline.

This module contains the Importer class, which loads a site configuration,
turns the block regions of each source page into block tables, cleans up the
page and saves the result as Markdown with YAML frontmatter.
"""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any
from urllib.parse import urljoin

import html2text
import yaml
from lxml import html

from site_importer.config import ConfigManager, settings
from site_importer.config.config_models import SiteConfig
from site_importer.dom import Document, text_of
from site_importer.parsers import get_parser
from site_importer.transformers import TransformHook, transform


class Importer:
    """
    Block importer that uses site-specific configurations.

    The importer finds block instances with the site's block locators, runs
    the matching block parser on each and wraps the whole pass in the cleanup
    transformer hooks.
    """

    def __init__(
        self,
        site_name: str,
        config_path: str | None = None,
    ):
        """
        Initialize the importer.

        Args:
            site_name: Site to import (must match a key in config)
            config_path: Optional path to custom config file
        """
        self.site = site_name

        config_manager = ConfigManager(config_path)
        self.config = config_manager.get_site_config(site_name)

        self.input_dir = os.path.join(settings.DEFAULT_CONTENT_DIR, site_name, settings.DEFAULT_DIRS["SOURCE_DIR"])
        self.output_dir = os.path.join(settings.DEFAULT_CONTENT_DIR, site_name, settings.DEFAULT_DIRS["IMPORTED_DIR"])

        self.logger = logging.getLogger(__name__)

        os.makedirs(self.output_dir, exist_ok=True)

        self.logger.info(f"Initialized Importer for {self.site}")

    def transform_dom(self, document: Document) -> dict[str, int]:
        """
        Replace every located block region of a page with its block table.

        Args:
            document: Parsed page, modified in place

        Returns:
            Number of emitted blocks per block id
        """
        import_config = self.config.import_config
        payload = {"site": self.site, "cleanup": import_config.cleanup}
        page = document.body

        transform(TransformHook.BEFORE_TRANSFORM, page, payload)

        report: dict[str, int] = {}
        created: list[html.HtmlElement] = []
        for locator in import_config.blocks:
            parse = get_parser(locator.block)
            for element in locator.as_strategy().find_all(page):
                # Replaced along with an ancestor, or part of a block built earlier
                if not document.contains(element) or self._inside_block(element, created):
                    continue
                block = parse(element, document)
                if block is not None:
                    created.append(block)
                    report[locator.block] = report.get(locator.block, 0) + 1

        transform(TransformHook.AFTER_TRANSFORM, page, payload)

        self.logger.info(f"Emitted blocks: {report or 'none'}")
        return report

    @staticmethod
    def _inside_block(element: html.HtmlElement, blocks: list[html.HtmlElement]) -> bool:
        return any(ancestor is block for ancestor in element.iterancestors() for block in blocks)

    def _extract_title(self, document: Document) -> str:
        found = document.root.xpath(self.config.import_config.title_selector)
        if not found:
            return document.title or "Untitled"
        first = found[0]
        return str(first).strip() if isinstance(first, str) else text_of(first)

    def import_html(self, html_content: str, base_url: str | None = None) -> dict[str, Any]:
        """
        Import a single HTML page.

        Args:
            html_content: Raw HTML content
            base_url: URL of the page, used to make relative links absolute

        Returns:
            Dictionary with the page ``title``, transformed ``html``, its
            ``markdown`` rendering and the per-block counts in ``blocks``
        """
        document = Document.from_string(html_content)
        title = self._extract_title(document)

        report = self.transform_dom(document)
        if base_url:
            self._convert_relative_links_to_absolute(document.root, base_url)

        content_html = document.to_html(document.body)

        return {
            "title": title,
            "html": content_html,
            "markdown": self._html_to_markdown(content_html),
            "blocks": report,
        }

    @staticmethod
    def _convert_element_link_to_absolute(
        element: html.HtmlElement,
        attribute: str,
        base_url: str,
        absolute_prefixes: tuple[str, ...],
    ) -> bool:
        """
        Convert a single element's link attribute to absolute URL if it's relative.

        Args:
            element: HTML element to process
            attribute: Attribute name (e.g., 'href', 'src')
            base_url: Base URL to use for conversion
            absolute_prefixes: Tuple of prefixes that indicate absolute URLs

        Returns:
            True if the link was converted, False otherwise
        """
        link = element.get(attribute)
        if not link or link.startswith(absolute_prefixes):
            return False

        element.set(attribute, urljoin(base_url, link))
        return True

    def _convert_relative_links_to_absolute(self, root: html.HtmlElement, base_url: str) -> int:
        """
        Convert relative ``href`` and ``src`` attributes in place.

        Args:
            root: Root of the tree to process
            base_url: URL the links are relative to

        Returns:
            Number of converted links
        """
        href_prefixes = ("http://", "https://", "//", "mailto:", "#", "tel:")
        src_prefixes = ("http://", "https://", "//", "data:")

        converted = 0
        for element in root.xpath("//*[@href]"):
            converted += self._convert_element_link_to_absolute(element, "href", base_url, href_prefixes)
        for element in root.xpath("//*[@src]"):
            converted += self._convert_element_link_to_absolute(element, "src", base_url, src_prefixes)
        return converted

    def _html_to_markdown(self, html_content: str) -> str:
        """
        Convert HTML to Markdown using site-specific configuration.

        Args:
            html_content: HTML content to convert

        Returns:
            Markdown formatted text
        """
        config = self.config.import_config.markdown_config
        text_maker = html2text.HTML2Text()
        text_maker.ignore_links = config.ignore_links
        text_maker.body_width = config.body_width
        text_maker.protect_links = config.protect_links
        text_maker.unicode_snob = config.unicode_snob
        text_maker.ignore_images = config.ignore_images
        text_maker.ignore_tables = config.ignore_tables

        return text_maker.handle(html_content)

    def _construct_base_url_from_path(self, file_path: str) -> str:
        """
        Construct the page URL from its path below the input directory.

        Args:
            file_path: Path to the HTML file

        Returns:
            Constructed base URL
        """
        rel_path = os.path.relpath(file_path, self.input_dir)
        if rel_path.startswith(".."):
            self.logger.info(f"File outside input dir, using base URL: {self.config.base_url}")
            return str(self.config.base_url)

        normalized_path = rel_path.replace("\\", "/")
        constructed_url = urljoin(str(self.config.base_url), normalized_path)
        self.logger.debug(f"Constructed base URL: {constructed_url}")
        return constructed_url

    def _get_output_filename(self, html_file_path: Path) -> str:
        """
        Generate an output filename (without extension) that mirrors the
        file's location below the input directory.
        """
        try:
            rel_path = html_file_path.relative_to(Path(self.input_dir))
        except ValueError:
            return html_file_path.stem
        return str(rel_path.with_suffix(""))

    def import_file(self, html_file: str | Path) -> dict[str, Any] | None:
        """
        Import a single HTML file and save the result.

        Args:
            html_file: Path to the HTML file

        Returns:
            Dictionary containing information about the imported file, or
            None if the import failed
        """
        html_file_path = Path(html_file)
        self.logger.info(f"Importing {html_file_path}")

        source_url = self._construct_base_url_from_path(str(html_file_path))

        try:
            with open(html_file_path, encoding="utf-8") as f:
                html_content = f.read()

            result = self.import_html(html_content, base_url=source_url)
            output_filename = self._get_output_filename(html_file_path)
            metadata = self._create_metadata(html_file_path, result["title"], result["blocks"], source_url)
            output_path = self._save_markdown(output_filename, result["title"], result["markdown"], metadata)

            if self.config.import_config.save_html:
                self._save_html(output_filename, result["html"])

            return {
                "source_file": str(html_file_path),
                "output_file": output_path,
                "title": result["title"],
                "blocks": result["blocks"],
            }

        except Exception as e:
            self.logger.error(f"Error importing {html_file_path}: {str(e)}")
            return None

    def _create_metadata(
        self,
        file_path: str | Path,
        title: str,
        blocks: dict[str, int],
        source_url: str | None = None,
    ) -> dict[str, Any]:
        """Create frontmatter metadata for an imported page."""
        metadata: dict[str, Any] = {
            "source_file": str(file_path),
            "title": title,
            "import_timestamp": datetime.now().isoformat(),
            "importer": self.__class__.__name__,
            "blocks": dict(blocks),
        }
        if source_url:
            metadata["source_url"] = source_url
        return metadata

    def _save_markdown(
        self,
        filename: str,
        title: str,
        content: str,
        metadata: dict[str, Any],
    ) -> str:
        """
        Save content as a markdown file with YAML frontmatter.

        Args:
            filename: Base filename (without extension)
            title: Content title
            content: Markdown content
            metadata: Dictionary of metadata

        Returns:
            Path to the saved file
        """
        output_path = os.path.join(self.output_dir, f"{filename}.md")
        os.makedirs(os.path.dirname(output_path), exist_ok=True)

        frontmatter = yaml.dump(metadata, default_flow_style=False)
        markdown_content = f"---\n{frontmatter}---\n\n# {title}\n\n{content}\n"

        with open(output_path, "w", encoding="utf-8") as f:
            f.write(markdown_content)

        self.logger.info(f"Saved markdown to {output_path}")
        return output_path

    def _save_html(self, filename: str, content_html: str) -> str:
        output_path = os.path.join(self.output_dir, f"{filename}.html")
        os.makedirs(os.path.dirname(output_path), exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content_html)
        return output_path

    def import_all(self) -> list[dict[str, Any]]:
        """
        Import all HTML files in the site's source directory.

        Returns:
            List of dictionaries containing information about imported files
        """
        self.logger.info(f"Importing HTML files for site '{self.site}' from directory '{self.input_dir}'")

        html_files = []
        for root, _, files in os.walk(self.input_dir):
            for file in files:
                if file.endswith(".html"):
                    html_files.append(os.path.join(root, file))

        self.logger.info(f"Found {len(html_files)} HTML files to import")

        results: list[dict[str, Any]] = []
        for html_file in sorted(html_files):
            result = self.import_file(html_file)
            if result:
                results.append(result)

        if results:
            self._create_index(results)

        self.logger.info(f"Imported {len(results)} files")
        return results

    def _create_index(self, results: list[dict[str, Any]]) -> str:
        """
        Create an index markdown file for all imported pages.

        Args:
            results: List of import results

        Returns:
            Path to the index file
        """
        index_path = os.path.join(self.output_dir, "index.md")

        with open(index_path, "w", encoding="utf-8") as f:
            f.write(f"# {self.site} Imported Content Index\n\n")
            f.write(f"Total pages imported: {len(results)}\n\n")
            f.write("| Title | Source File | Output File | Blocks |\n")
            f.write("|-------|-------------|-------------|--------|\n")

            for result in results:
                title = result.get("title", "Untitled")
                source = os.path.basename(result.get("source_file", ""))
                output = os.path.relpath(result.get("output_file", ""), self.output_dir)
                blocks = ", ".join(f"{name}: {count}" for name, count in result.get("blocks", {}).items()) or "-"
                f.write(f"| {title} | {source} | [{output}]({output}) | {blocks} |\n")

        self.logger.info(f"Created index at {index_path}")
        return index_path

    @classmethod
    def list_available_site_configs(cls, config_path: str | None = None) -> list[str]:
        """List all available site configuration keys."""
        return ConfigManager(config_path).list_available_sites()

    @classmethod
    def get_site_config(cls, site: str, config_path: str | None = None) -> SiteConfig | None:
        """
        Get the configuration of a site.

        Returns:
            SiteConfig for the site, or None if it doesn't exist
        """
        try:
            return ConfigManager(config_path).get_site_config(site)
        except ValueError:
            return None
