"""API routes for table rendering.

Consumers post header cells and rows and get back the markup to embed,
together with the stylesheets the page must link for it.
"""

import logging
from typing import Optional, TypeVar

from fastapi import APIRouter
from pydantic import BaseModel

from sorttable.api.routes.presets import get_preset_or_404
from sorttable.assets.registry import AssetRegistry
from sorttable.tables.renderer import SortTableRenderer
from sorttable.tables.schemas import TableRenderRequest, TableRenderResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tables", tags=["tables"])

ModelT = TypeVar("ModelT", bound=BaseModel)


def _overlay(base: ModelT, override: Optional[ModelT]) -> ModelT:
    """Apply the fields explicitly set on override on top of base."""
    if override is None:
        return base
    return base.model_copy(
        update={name: getattr(override, name) for name in override.model_fields_set}
    )


@router.post("/render", response_model=TableRenderResponse)
async def render_table(request: TableRenderRequest):
    """Render a sortable table.

    Fields set in the request's table/widget win over the preset's, field by
    field. Each request gets its own asset registry, so `stylesheets` lists
    what this render needs.
    """
    table = request.table
    widget = request.widget
    if request.preset_key:
        preset = get_preset_or_404(request.preset_key)
        table = _overlay(preset.table, table)
        widget = _overlay(preset.widget, widget)

    assets = AssetRegistry()
    renderer = SortTableRenderer(table, registry=assets)
    markup = renderer.render(request.header, request.rows, widget)

    logger.info(
        f"Rendered table '{renderer.table_id}': "
        f"{len(request.header)} columns, {len(request.rows)} rows"
    )
    return TableRenderResponse(html=markup, stylesheets=assets.stylesheets())
