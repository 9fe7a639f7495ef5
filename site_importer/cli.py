import logging
import os

import typer

from site_importer.config import ConfigManager
from site_importer.config.settings import DEFAULT_CONTENT_DIR, DEFAULT_DIRS, DEFAULT_SITE
from site_importer.importer import Importer
from site_importer.parsers import PARSERS

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = typer.Typer(help="Site Importer CLI - Convert page regions into CMS blocks")


@app.command()
def run(
    site: str = typer.Argument(..., help="Site configuration to use for importing (e.g., 'turbotax')"),
    config_path: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to custom site configurations file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """
    Import every saved HTML page of a site and write block-structured Markdown.

    Pages are read from content/<site>/source and the results are written to
    content/<site>/imported together with an index.md.

    Example:
        $ python -m site_importer.cli run turbotax
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config_manager = ConfigManager(config_path)
        available_sites = config_manager.list_available_sites()
    except Exception as e:
        typer.echo(f"❌ Error loading site configuration: {str(e)}", err=True)
        raise typer.Exit(code=1)

    if site not in available_sites:
        typer.echo(f"❌ Unsupported site: {site}")
        typer.echo(f"Available sites: {', '.join(available_sites)}")
        raise typer.Exit(code=1)

    source_dir = os.path.join(DEFAULT_CONTENT_DIR, site, DEFAULT_DIRS["SOURCE_DIR"])
    imported_dir = os.path.join(DEFAULT_CONTENT_DIR, site, DEFAULT_DIRS["IMPORTED_DIR"])
    typer.echo(f"📝 Importing HTML pages from {source_dir}")

    try:
        importer = Importer(site_name=site, config_path=config_path)
        results = importer.import_all()
    except Exception as e:
        typer.echo(f"❌ Error during import: {str(e)}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"✅ Import completed! Processed {len(results)} files.")
    typer.echo(f"📝 Content saved as Markdown files in {imported_dir}")


@app.command()
def transform(
    html_file: str = typer.Argument(..., help="HTML file to import"),
    site: str = typer.Option(DEFAULT_SITE, "--site", "-s", help="Site configuration to use"),
    config_path: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to custom site configurations file",
    ),
    base_url: str | None = typer.Option(
        None,
        "--base-url",
        "-b",
        help="URL of the page, used to make relative links absolute",
    ),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the result to this file instead of printing it",
    ),
    as_html: bool = typer.Option(
        False,
        "--html",
        help="Output the transformed HTML instead of Markdown",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """
    Import a single HTML file and print the result.

    Examples:
        $ python -m site_importer.cli transform page.html
        $ python -m site_importer.cli transform page.html --html -o page.out.html
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        importer = Importer(site_name=site, config_path=config_path)
        with open(html_file, encoding="utf-8") as f:
            result = importer.import_html(f.read(), base_url=base_url)
    except Exception as e:
        typer.echo(f"❌ Error transforming {html_file}: {str(e)}", err=True)
        raise typer.Exit(code=1)

    content = result["html"] if as_html else result["markdown"]

    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(content)
        typer.echo(f"💾 Saved result to {output}")
    else:
        typer.echo(content)

    blocks = ", ".join(f"{name}: {count}" for name, count in result["blocks"].items()) or "none"
    typer.echo(f"📦 Blocks: {blocks}", err=True)


@app.command()
def list_sites(
    config_path: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to custom site configurations file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show detailed information about each site configuration",
    ),
) -> None:
    """
    List available site configurations.

    Use the --verbose flag to see the block locators of each site.
    """
    try:
        config_manager = ConfigManager(config_path)
        available_sites = config_manager.list_available_sites()
        site_descriptions = config_manager.get_site_descriptions()

        typer.echo("📋 Available Site Configurations:")

        for site_name in available_sites:
            if verbose:
                site_config = config_manager.get_site_config(site_name)
                import_config = site_config.import_config
                typer.echo(f"\n📄 {site_name}:")
                typer.echo(f"  Base URL: {site_config.base_url}")
                typer.echo(f"  Description: {site_config.description or 'No description'}")
                typer.echo(f"  Title selector: {import_config.title_selector}")
                typer.echo("  Block locators:")
                for locator in import_config.blocks:
                    condition = f" (containing {locator.must_contain})" if locator.must_contain else ""
                    typer.echo(f"    - {locator.block}: {locator.css}{condition}")
                typer.echo(f"  Tracking attributes: {', '.join(import_config.cleanup.tracking_attributes)}")
            else:
                typer.echo(f"  • {site_name} - {site_descriptions[site_name]}")

        if available_sites:
            typer.echo("\nUse these sites with the run command, e.g.:")
            typer.echo(f"  $ python -m site_importer.cli run {available_sites[0]}")

    except Exception as e:
        typer.echo(f"❌ Error listing site configurations: {str(e)}", err=True)
        raise typer.Exit(code=1)


@app.command()
def info() -> None:
    """Show information about the importer and available commands."""
    typer.echo("Site Importer - Convert page regions into CMS blocks")
    typer.echo(f"\nSupported blocks: {', '.join(PARSERS)}")
    typer.echo("\nAvailable commands:")
    typer.echo("  run         - Import all saved HTML pages of a site")
    typer.echo("  transform   - Import a single HTML file and print the result")
    typer.echo("  list-sites  - List available site configurations")
    typer.echo("  info        - Show this information")
    typer.echo("\nRun a command with --help for more information")


if __name__ == "__main__":
    app()
