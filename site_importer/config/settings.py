"""Global configuration settings for the site_importer application.

This module contains common configuration settings used across different
components of the importer, including default directories for source pages
and imported content.
"""

DEFAULT_CONTENT_DIR = "content"

# Default directory paths
DEFAULT_DIRS = {
    "SOURCE_DIR": "source",
    "IMPORTED_DIR": "imported",
}

DEFAULT_SITE = "turbotax"
