"""Table preset schemas - named, file-defined table configurations."""

from pydantic import BaseModel, Field

from sorttable.tables.schemas import TableConfig, WidgetOptions


class TablePreset(BaseModel):
    """A reusable table setup: where the table binds and how it sorts."""

    preset_key: str = Field(
        ...,
        description="Unique identifier (snake_case, e.g. 'default', 'orders_by_date')",
    )
    preset_name: str = Field(..., description="Human-readable name")
    description: str = Field(default="", description="When to use this preset")
    table: TableConfig = Field(default_factory=TableConfig)
    widget: WidgetOptions = Field(default_factory=WidgetOptions)
    status: str = Field(
        default="active",
        description="'active', 'draft', 'deprecated'",
    )


class PresetSummary(BaseModel):
    """Lightweight summary for listing endpoints."""

    preset_key: str
    preset_name: str
    description: str = ""
    table_id: str
    status: str = "active"
