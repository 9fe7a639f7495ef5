"""Loading of the site import registry from YAML."""

import logging
import os

import yaml

from site_importer.config.config_models import ImportConfigRegistry, SiteConfig


class ConfigManager:
    """
    Site import configurations read from a YAML registry.

    Without an explicit path the packaged ``site_configs.yaml`` is used.
    """

    def __init__(self, config_path: str | None = None):
        self.logger = logging.getLogger(__name__)
        self._config_registry = self._load_config_registry(config_path)

    def _load_config_registry(self, config_path: str | None = None) -> ImportConfigRegistry:
        """
        Read and validate the registry.

        Raises:
            FileNotFoundError: The file is missing
            yaml.YAMLError: The file is not valid YAML
            ValueError: The content does not validate (pydantic ValidationError)
        """
        if not config_path:
            config_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "site_configs.yaml")

        try:
            with open(config_path, encoding="utf-8") as file:
                return ImportConfigRegistry(**yaml.safe_load(file))
        except FileNotFoundError:
            self.logger.error(f"Site registry not found: {config_path}")
            raise
        except yaml.YAMLError as e:
            self.logger.error(f"Site registry {config_path} is not valid YAML: {e}")
            raise
        except (TypeError, ValueError) as e:
            # pydantic's ValidationError is a ValueError
            self.logger.error(f"Site registry {config_path} failed validation: {e}")
            raise

    def get_site_config(self, site: str) -> SiteConfig:
        """
        Look up one site.

        Raises:
            ValueError: If the registry has no such site
        """
        if site not in self._config_registry.sites:
            raise ValueError(f"Site '{site}' not found in configuration")

        return self._config_registry.sites[site]

    def list_available_sites(self) -> list[str]:
        return list(self._config_registry.sites)

    def get_site_descriptions(self) -> dict[str, str]:
        """Site ids mapped to their description, or a generic one when unset."""
        return {
            site_id: site_config.description or f"Configuration for {site_id}"
            for site_id, site_config in self._config_registry.sites.items()
        }

    @classmethod
    def from_file(cls, config_path: str) -> "ConfigManager":
        return cls(config_path=config_path)
