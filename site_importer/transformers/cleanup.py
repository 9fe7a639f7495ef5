"""Page cleanup transformer for TurboTax pages.

Removes non-content page chrome. It runs twice per page: before the block
parsers (header, skip link, navigation, carousel controls) and after them
(non-rendering tags, footer, tracking attributes).
"""

import logging
from enum import Enum
from typing import Any

from lxml import html

from site_importer.config.config_models import CleanupConfig
from site_importer.dom import remove, strip_attributes
from site_importer.parsers import selectors

logger = logging.getLogger(__name__)


class TransformHook(str, Enum):
    BEFORE_TRANSFORM = "beforeTransform"
    AFTER_TRANSFORM = "afterTransform"


BEFORE_REMOVALS = [
    selectors.HEADER,
    selectors.SKIP_LINK,
    selectors.NAVIGATION,
    selectors.CAROUSEL_CONTROLS,
]

AFTER_REMOVALS = [
    selectors.NON_RENDERING,
    selectors.FOOTER,
]


def transform(hook_name: str, element: html.HtmlElement, payload: dict[str, Any] | None = None) -> None:
    """
    Clean up a page in place at one of the transform hooks.

    Args:
        hook_name: ``beforeTransform`` or ``afterTransform``; other hooks are ignored
        element: Page element to clean
        payload: Optional pipeline payload; a ``cleanup`` entry holding a
                 CleanupConfig overrides the stripped attributes
    """
    if hook_name == TransformHook.BEFORE_TRANSFORM:
        removed = sum(remove(element, selector_list) for selector_list in BEFORE_REMOVALS)
        logger.debug(f"{hook_name}: removed {removed} page chrome elements")

    elif hook_name == TransformHook.AFTER_TRANSFORM:
        removed = sum(remove(element, selector_list) for selector_list in AFTER_REMOVALS)
        cleanup = (payload or {}).get("cleanup") or CleanupConfig()
        stripped = strip_attributes(element, cleanup.tracking_attributes)
        logger.debug(f"{hook_name}: removed {removed} elements, stripped {stripped} tracking attributes")
