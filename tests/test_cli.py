"""Tests for the CLI module."""

import os
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from site_importer.cli import app
from site_importer.config.settings import DEFAULT_CONTENT_DIR, DEFAULT_DIRS

PAGE = """
<html>
    <head><title>Tax tips</title></head>
    <body>
        <header><a href="#mainContent">Skip</a></header>
        <main>
            <div class="idsTSTabs">
                <button class="Tabs-tabButton-49b612f"><strong>TAX TIPS</strong></button>
                <div class="Tabs-tabPanel-073f769"><h2>Tips</h2></div>
            </div>
            <p>Body text</p>
        </main>
    </body>
</html>
"""


@pytest.fixture
def runner():
    """Fixture for creating a CLI runner."""
    return CliRunner()


@pytest.fixture
def html_file(tmp_path):
    """Fixture for a saved HTML page."""
    path = tmp_path / "page.html"
    path.write_text(PAGE, encoding="utf-8")
    return path


class TestCli:
    """Tests for the CLI module."""

    def test_info_command(self, runner):
        """Test the info command."""
        result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "Site Importer" in result.stdout
        assert "Supported blocks: cards, carousel, columns, tabs" in result.stdout
        assert "Available commands:" in result.stdout
        assert "run" in result.stdout
        assert "transform" in result.stdout
        assert "list-sites" in result.stdout

    @patch("site_importer.cli.Importer")
    @patch("site_importer.cli.ConfigManager")
    def test_run_command(self, mock_config_manager, mock_importer, runner):
        """Test the run command."""
        mock_importer_instance = MagicMock()
        mock_importer_instance.import_all.return_value = [{"title": "a"}, {"title": "b"}]
        mock_importer.return_value = mock_importer_instance

        mock_config_instance = MagicMock()
        mock_config_instance.list_available_sites.return_value = ["turbotax"]
        mock_config_manager.return_value = mock_config_instance

        result = runner.invoke(app, ["run", "turbotax"])

        assert result.exit_code == 0
        mock_importer.assert_called_once_with(site_name="turbotax", config_path=None)
        mock_importer_instance.import_all.assert_called_once()

        expected_dir = os.path.join(DEFAULT_CONTENT_DIR, "turbotax", DEFAULT_DIRS["IMPORTED_DIR"])
        assert "Import completed! Processed 2 files." in result.stdout
        assert expected_dir in result.stdout

    @patch("site_importer.cli.ConfigManager")
    def test_run_command_invalid_site(self, mock_config_manager, runner):
        """Test the run command with an invalid site name."""
        mock_config_instance = MagicMock()
        mock_config_instance.list_available_sites.return_value = ["turbotax", "other"]
        mock_config_manager.return_value = mock_config_instance

        result = runner.invoke(app, ["run", "unsupported_site"])

        assert result.exit_code == 1
        assert "Unsupported site: unsupported_site" in result.stdout
        assert "Available sites: turbotax, other" in result.stdout

    @patch("site_importer.cli.Importer")
    @patch("site_importer.cli.ConfigManager")
    def test_run_command_exception(self, mock_config_manager, mock_importer, runner):
        """Test handling of exceptions in the run command."""
        mock_config_instance = MagicMock()
        mock_config_instance.list_available_sites.return_value = ["turbotax"]
        mock_config_manager.return_value = mock_config_instance
        mock_importer.return_value.import_all.side_effect = Exception("Test error")

        result = runner.invoke(app, ["run", "turbotax"])

        assert result.exit_code == 1
        assert "Error during import: Test error" in result.output

    def test_transform_command(self, runner, html_file):
        """Test transforming a single file to Markdown."""
        result = runner.invoke(app, ["transform", str(html_file)])

        assert result.exit_code == 0
        assert "Tax Tips" in result.stdout
        assert "Skip" not in result.stdout
        assert "Blocks: tabs: 1" in result.output

    def test_transform_command_html_output(self, runner, html_file, tmp_path):
        """Test writing the transformed HTML to a file."""
        output = tmp_path / "out.html"
        result = runner.invoke(app, ["transform", str(html_file), "--html", "-o", str(output)])

        assert result.exit_code == 0
        assert f"Saved result to {output}" in result.stdout
        content = output.read_text(encoding="utf-8")
        assert ">Tabs</th>" in content
        assert "<header" not in content

    def test_transform_command_missing_file(self, runner, tmp_path):
        """A missing input file is reported as an error."""
        result = runner.invoke(app, ["transform", str(tmp_path / "missing.html")])

        assert result.exit_code == 1
        assert "Error transforming" in result.output

    def test_list_sites_command(self, runner):
        """Test listing the packaged site configurations."""
        result = runner.invoke(app, ["list-sites"])

        assert result.exit_code == 0
        assert "Available Site Configurations:" in result.stdout
        assert "turbotax - TurboTax tax articles and tips pages" in result.stdout

    def test_list_sites_command_verbose(self, runner):
        """Test the detailed site listing."""
        result = runner.invoke(app, ["list-sites", "--verbose"])

        assert result.exit_code == 0
        assert "Base URL: https://turbotax.intuit.com/" in result.stdout
        assert "Block locators:" in result.stdout
        assert "- carousel: .glide" in result.stdout
        assert "Tracking attributes: data-theme, data-track, data-testid" in result.stdout

    @patch("site_importer.cli.ConfigManager")
    def test_list_sites_command_error(self, mock_config_manager, runner):
        """Test handling of configuration errors when listing sites."""
        mock_config_manager.side_effect = FileNotFoundError("missing.yaml")

        result = runner.invoke(app, ["list-sites", "-c", "missing.yaml"])

        assert result.exit_code == 1
        assert "Error listing site configurations: missing.yaml" in result.output
