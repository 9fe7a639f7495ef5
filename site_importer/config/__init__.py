"""Configuration module for site_importer.

This module provides configuration models and management utilities
for the importer.
"""

from site_importer.config.config_manager import ConfigManager
from site_importer.config.config_models import (
    BlockLocator,
    CleanupConfig,
    HtmlToMarkdownConfig,
    ImportConfig,
    ImportConfigRegistry,
    SelectorChain,
    SelectorStrategy,
    SiteConfig,
)

__all__ = [
    "BlockLocator",
    "CleanupConfig",
    "ConfigManager",
    "HtmlToMarkdownConfig",
    "ImportConfig",
    "ImportConfigRegistry",
    "SelectorChain",
    "SelectorStrategy",
    "SiteConfig",
]
