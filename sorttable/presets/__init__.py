"""Table presets - named table configurations loaded from YAML definitions."""

from .schemas import PresetSummary, TablePreset
from .registry import PresetRegistry, get_preset_registry

__all__ = [
    "PresetSummary",
    "TablePreset",
    "PresetRegistry",
    "get_preset_registry",
]
