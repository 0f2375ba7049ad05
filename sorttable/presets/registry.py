"""Preset registry - loads and serves table presets from YAML files.

Follows the usual registry pattern:
- YAML-per-file in definitions/ directory
- Lazy loading with _loaded guard
- In-memory dict keyed by preset_key
- Global singleton via get_preset_registry()
"""

import logging
from pathlib import Path
from typing import Optional

import yaml

from sorttable.assets.registry import AssetRegistry
from sorttable.tables.renderer import SortTableRenderer

from .schemas import PresetSummary, TablePreset

logger = logging.getLogger(__name__)


class PresetRegistry:
    """Registry of table presets loaded from YAML files.

    Each file in definitions/ holds one preset. Files that fail to parse or
    validate are logged and skipped.
    """

    def __init__(self, definitions_dir: Optional[Path] = None):
        self.definitions_dir = definitions_dir or (
            Path(__file__).parent / "definitions"
        )
        self._presets: dict[str, TablePreset] = {}
        self._loaded = False

    def load(self) -> None:
        """Load all preset definitions from YAML files."""
        if self._loaded:
            return

        if not self.definitions_dir.exists():
            logger.warning(
                f"Preset definitions directory not found: {self.definitions_dir}"
            )
            self._loaded = True
            return

        for yaml_file in sorted(self.definitions_dir.glob("*.yaml")):
            try:
                with open(yaml_file, "r") as f:
                    data = yaml.safe_load(f)
                if data is None:
                    continue
                preset = TablePreset.model_validate(data)
                self._presets[preset.preset_key] = preset
                logger.debug(f"Loaded preset: {preset.preset_key}")
            except Exception as e:
                logger.error(f"Failed to load preset from {yaml_file}: {e}")

        self._loaded = True
        logger.info(
            f"Loaded {len(self._presets)} presets from {self.definitions_dir}"
        )

    def get(self, preset_key: str) -> Optional[TablePreset]:
        """Get a preset by key."""
        self.load()
        return self._presets.get(preset_key)

    def list_all(self) -> list[TablePreset]:
        """List all presets."""
        self.load()
        return list(self._presets.values())

    def list_keys(self) -> list[str]:
        """List all preset keys."""
        self.load()
        return sorted(self._presets.keys())

    def list_summaries(self) -> list[PresetSummary]:
        """List preset summaries."""
        self.load()
        return [
            PresetSummary(
                preset_key=p.preset_key,
                preset_name=p.preset_name,
                description=p.description,
                table_id=p.table.table_id,
                status=p.status,
            )
            for p in sorted(self._presets.values(), key=lambda p: p.preset_key)
        ]

    def count(self) -> int:
        """Get total number of presets."""
        self.load()
        return len(self._presets)

    def renderer_for(
        self, preset_key: str, registry: Optional[AssetRegistry] = None
    ) -> Optional[SortTableRenderer]:
        """Build a renderer configured from a preset, or None if unknown."""
        preset = self.get(preset_key)
        if preset is None:
            return None
        return SortTableRenderer(preset.table, registry=registry)

    def reload(self) -> None:
        """Force reload all definitions."""
        self._loaded = False
        self._presets.clear()
        self.load()


# Global registry instance
_registry: Optional[PresetRegistry] = None


def get_preset_registry() -> PresetRegistry:
    """Get the global preset registry instance."""
    global _registry
    if _registry is None:
        _registry = PresetRegistry()
        _registry.load()
    return _registry
