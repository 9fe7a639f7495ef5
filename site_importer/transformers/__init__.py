"""Page transformers run by the importer around block parsing."""

from site_importer.transformers.cleanup import TransformHook, transform

__all__ = [
    "TransformHook",
    "transform",
]
