"""API routes for table presets.

Presets are named table configurations (table id, stylesheet, widget
options) that consumers can reference instead of repeating settings.
"""

import logging

from fastapi import APIRouter, HTTPException

from sorttable.presets.registry import get_preset_registry
from sorttable.presets.schemas import PresetSummary, TablePreset

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/presets", tags=["presets"])


def get_preset_or_404(preset_key: str) -> TablePreset:
    """Get a preset by key or raise 404."""
    registry = get_preset_registry()
    preset = registry.get(preset_key)
    if preset is None:
        available = registry.list_keys()
        raise HTTPException(
            status_code=404,
            detail=f"Preset '{preset_key}' not found. Available: {available}",
        )
    return preset


@router.get("", response_model=list[PresetSummary])
async def list_presets():
    """List all table presets (summaries)."""
    registry = get_preset_registry()
    return registry.list_summaries()


@router.get("/{preset_key}", response_model=TablePreset)
async def get_preset(preset_key: str):
    """Get a full preset definition."""
    return get_preset_or_404(preset_key)
