"""Block importer for migrating TurboTax pages into table-based CMS blocks."""

__version__ = "0.1.0"
