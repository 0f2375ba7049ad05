"""Asset registry - records stylesheet dependencies of rendered tables.

Follows the same pattern as the preset registry:
- In-memory store keyed by path
- Global singleton via get_asset_registry()

Renderers call add_stylesheet() once per init(); the page layer reads
stylesheets() to emit the matching <link> tags.
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class AssetRegistry:
    """Ordered, de-duplicated set of stylesheet paths."""

    def __init__(self):
        self._stylesheets: dict[str, None] = {}

    def add_stylesheet(self, path: str) -> None:
        """Record a stylesheet path. Registering the same path twice is a no-op."""
        if path in self._stylesheets:
            logger.debug(f"Stylesheet already registered: {path}")
            return
        self._stylesheets[path] = None
        logger.info(f"Registered stylesheet: {path}")

    def stylesheets(self) -> list[str]:
        """List registered stylesheets in registration order."""
        return list(self._stylesheets)

    def count(self) -> int:
        """Get total number of registered stylesheets."""
        return len(self._stylesheets)

    def clear(self) -> None:
        self._stylesheets.clear()


# Global registry instance
_registry: Optional[AssetRegistry] = None


def get_asset_registry() -> AssetRegistry:
    """Get the global asset registry instance."""
    global _registry
    if _registry is None:
        _registry = AssetRegistry()
    return _registry
