"""Table schemas - configuration and cell models for the sortable table renderer.

Cells come in two shapes: a plain scalar (the displayed text or markup) or a
decorated object carrying presentation attributes. Validators normalize the
plain shape into the decorated model so the renderer only ever sees one type.
"""

import os
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _default_css_dir() -> str:
    return os.environ.get("SORTTABLE_CSS_DIR", "/css")


def _display_text(value: Any) -> Any:
    """Coerce plain scalars to display text; leave anything else to validation."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, (int, float)):
        return str(value)
    return value


def _plain_to_decorated(item: Any) -> Any:
    """Wrap a plain scalar cell as {'value': ...}."""
    if item is None or isinstance(item, (str, int, float)):
        return {"value": _display_text(item)}
    return item


class TableConfig(BaseModel):
    """Per-table configuration, fixed at renderer construction."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    table_id: str = Field(
        default="theTable",
        min_length=1,
        description="ID of the <table> element; the widget binds to it",
    )
    css_dir: str = Field(
        default_factory=_default_css_dir,
        description="Directory of the table stylesheet (SORTTABLE_CSS_DIR, else '/css')",
    )
    css_file: str = Field(
        default="sort_table.css",
        description="File name of the table stylesheet",
    )

    @property
    def stylesheet_path(self) -> str:
        return f"{self.css_dir.rstrip('/')}/{self.css_file}"


class WidgetOptions(BaseModel):
    """Options passed to the client-side HtmlTable widget.

    sortable/sort_index are always emitted. sort_reverse, parsers and
    default_parser are only emitted when set, so the widget keeps its own
    defaults otherwise.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    sortable: bool = Field(default=True, description="Enable column sorting")
    sort_index: Optional[int] = Field(
        default=0,
        ge=0,
        description="Column sorted on load; None disables the initial sort",
    )
    sort_reverse: Optional[bool] = Field(
        default=None,
        description="Sort the initial column in reverse order",
    )
    parsers: Optional[list[str]] = Field(
        default=None,
        description="Per-column parser names (e.g. 'string', 'number', 'date')",
    )
    default_parser: Optional[str] = Field(
        default=None,
        description="Parser used when a column's parser cannot be detected",
    )
    callback: Optional[str] = Field(
        default=None,
        description="Callback name, or JavaScript statements, run before the "
        "widget is created (e.g. 'updateTooltips')",
    )
    function_name: str = Field(
        default="sortTable",
        pattern=r"^[A-Za-z_$][A-Za-z0-9_$]*$",
        description="Name of the generated JavaScript function; call it again "
        "after replacing the table body via AJAX",
    )


class Cell(BaseModel):
    """A body cell with optional presentation attributes."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    value: str = ""
    css_class: Optional[str] = Field(default=None, alias="class")
    width: Optional[Union[int, str]] = None
    extra: Optional[str] = Field(
        default=None,
        alias="other",
        description="Raw attribute string appended inside the tag",
    )

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_value(cls, v: Any) -> Any:
        return _display_text(v)


class HeaderCell(Cell):
    """A column header. Unsortable when sort is False or the value is empty."""

    sort: Optional[bool] = None

    @property
    def sortable(self) -> bool:
        return self.sort is not False and bool(self.value)


class Row(BaseModel):
    """A body row: ordered cells plus optional <tr> attributes."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    cells: list[Cell] = Field(default_factory=list)
    id: Optional[str] = None
    css_class: Optional[str] = Field(default=None, alias="class")
    extra: Optional[str] = Field(default=None, alias="other")

    @field_validator("cells", mode="before")
    @classmethod
    def _coerce_cells(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            return [_plain_to_decorated(item) for item in v]
        return v


CellInput = Union[Cell, dict[str, Any], str, int, float, None]
HeaderInput = Union[HeaderCell, dict[str, Any], str, int, float, None]
RowInput = Union[Row, dict[str, Any], list[CellInput], tuple]


def as_header_cell(item: Any) -> HeaderCell:
    """Normalize a plain or decorated header input."""
    if isinstance(item, HeaderCell):
        return item
    return HeaderCell.model_validate(_plain_to_decorated(item))


def as_row(item: Any) -> Row:
    """Normalize a row given as a Row, a dict, or a plain sequence of cells."""
    if isinstance(item, Row):
        return item
    if isinstance(item, (list, tuple)):
        return Row(cells=list(item))
    return Row.model_validate(item)


# -- API request/response schemas --


class TableRenderRequest(BaseModel):
    """A complete table render: configuration, header and body rows."""

    model_config = ConfigDict(extra="forbid")

    preset_key: Optional[str] = Field(
        default=None,
        description="Preset supplying defaults; fields set in table/widget override "
        "the preset field by field",
    )
    table: Optional[TableConfig] = Field(
        default=None, description="Table configuration (overrides the preset)"
    )
    widget: Optional[WidgetOptions] = Field(
        default=None, description="Widget options (overrides the preset)"
    )
    header: list[Union[HeaderCell, str, int, float]] = Field(default_factory=list)
    rows: list[Union[Row, list[Union[Cell, str, int, float]]]] = Field(
        default_factory=list
    )


class TableRenderResponse(BaseModel):
    """Rendered markup and the stylesheets the page must load for it."""

    html: str
    stylesheets: list[str] = Field(default_factory=list)
