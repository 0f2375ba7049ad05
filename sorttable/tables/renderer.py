"""Sortable table renderer - emits table markup bound to the HtmlTable widget.

The renderer produces four fragments that the caller concatenates in order:

    renderer.init()             # <script> creating the widget on domready
    renderer.start_table(header)
    renderer.rows(records)
    renderer.end_table()

render() does exactly that. Display values are inserted verbatim since they
may carry markup; id/class/width attribute values are escaped.
"""

import html
import json
import logging
import re
from typing import Any, Iterable, Optional, TypeVar, Union

from pydantic import BaseModel

from sorttable.assets.registry import AssetRegistry, get_asset_registry

from .schemas import (
    Cell,
    HeaderInput,
    RowInput,
    TableConfig,
    WidgetOptions,
    as_header_cell,
    as_row,
)

logger = logging.getLogger(__name__)

TABLE_CLASS = "sortTable"
HEADER_ROW_CLASS = "SortTableHeader"
NO_SORT_CLASS = "table-th-nosort"

# Fixed widget presentation classes, matched by sort_table.css
ZEBRA_CLASS = "zebra"
HEAD_SORT_CLASS = "downArrow"
HEAD_SORT_REV_CLASS = "upArrow"
CELL_SORT_CLASS = "focusedColumn"

_CALLBACK_NAME = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$.]*$")

ModelT = TypeVar("ModelT", bound=BaseModel)


def _attributes(
    css_class: Optional[str] = None,
    width: Optional[Union[int, str]] = None,
    extra: Optional[str] = None,
    element_id: Optional[str] = None,
) -> str:
    """Build the attribute part of an opening tag (leading space included)."""
    parts = []
    if element_id:
        parts.append(f' id="{html.escape(element_id)}"')
    if css_class:
        parts.append(f' class="{html.escape(css_class)}"')
    if width:
        parts.append(f' width="{html.escape(str(width))}"')
    if extra:
        parts.append(f" {extra}")
    return "".join(parts)


def _merge(model: type[ModelT], value: Any, overrides: dict[str, Any]) -> ModelT:
    """Validate a model instance or dict, with keyword overrides applied on top."""
    if isinstance(value, model) and not overrides:
        return value
    base = value.model_dump() if isinstance(value, model) else dict(value or {})
    return model.model_validate({**base, **overrides})


def _callback_statement(callback: str) -> str:
    """A bare function name becomes a call; anything else is emitted as-is."""
    callback = callback.strip()
    if _CALLBACK_NAME.match(callback):
        return f"{callback}();"
    return callback


class SortTableRenderer:
    """Renders a sortable HTML table and the script that activates it.

    Args:
        config: Table configuration (model or dict). Omitted fields take
            their defaults.
        registry: Asset registry that receives the stylesheet on init().
            Defaults to the global registry.
        **options: TableConfig fields, overriding those in ``config``.
    """

    def __init__(
        self,
        config: Optional[Union[TableConfig, dict[str, Any]]] = None,
        registry: Optional[AssetRegistry] = None,
        **options: Any,
    ):
        self.config = _merge(TableConfig, config, options)
        self._registry = registry

    @property
    def table_id(self) -> str:
        return self.config.table_id

    @property
    def registry(self) -> AssetRegistry:
        if self._registry is None:
            self._registry = get_asset_registry()
        return self._registry

    def init(
        self,
        options: Optional[Union[WidgetOptions, dict[str, Any]]] = None,
        **overrides: Any,
    ) -> str:
        """Register the stylesheet and return the widget bootstrap script.

        The script defines a named function (``sortTable`` by default) that
        runs the optional callback and then creates the HtmlTable widget on
        the configured table. The function is bound to domready; call it
        again after reloading the table body.
        """
        widget = _merge(WidgetOptions, options, overrides)

        self.registry.add_stylesheet(self.config.stylesheet_path)

        settings = [
            f"sortable: {json.dumps(widget.sortable)}",
            f"sortIndex: {json.dumps(widget.sort_index)}",
        ]
        if widget.sort_reverse is not None:
            settings.append(f"sortReverse: {json.dumps(widget.sort_reverse)}")
        if widget.parsers:
            settings.append(f"parsers: {json.dumps(widget.parsers)}")
        if widget.default_parser:
            settings.append(f"defaultParser: {json.dumps(widget.default_parser)}")
        settings.extend([
            "zebra: true",
            f"classZebra: {json.dumps(ZEBRA_CLASS)}",
            f"classHeadSort: {json.dumps(HEAD_SORT_CLASS)}",
            f"classHeadSortRev: {json.dumps(HEAD_SORT_REV_CLASS)}",
            f"classCellSort: {json.dumps(CELL_SORT_CLASS)}",
        ])

        lines = ['<script type="text/javascript">']
        lines.append(f"function {widget.function_name}() {{")
        if widget.callback and widget.callback.strip():
            lines.append(f"    {_callback_statement(widget.callback)}")
        lines.append(f"    new HtmlTable($({json.dumps(self.table_id)}), {{")
        lines.append(",\n".join(f"        {s}" for s in settings))
        lines.append("    });")
        lines.append("}")
        lines.append(f"window.addEvent('domready', {widget.function_name});")
        lines.append("</script>")

        logger.debug(f"Built widget script for table '{self.table_id}'")
        return "\n".join(lines) + "\n"

    def start_table(self, header: Optional[Iterable[HeaderInput]] = None) -> str:
        """Open the table, emit the header row if any, and open the body."""
        cells = [as_header_cell(item) for item in (header or [])]

        buffer = f'<table class="{TABLE_CLASS}" id="{html.escape(self.table_id)}">'
        if cells:
            buffer += f'<thead><tr class="{HEADER_ROW_CLASS}">'
            for cell in cells:
                css_class = cell.css_class
                if not cell.sortable:
                    css_class = f"{NO_SORT_CLASS} {css_class}" if css_class else NO_SORT_CLASS
                buffer += f"<th{_attributes(css_class, cell.width, cell.extra)}>{cell.value}</th>"
            buffer += "</tr></thead>"
        buffer += "<tbody>"
        return buffer

    def rows(self, records: Iterable[RowInput]) -> str:
        """Emit one <tr> per non-empty record. Rows without cells are skipped."""
        buffer = ""
        rendered = 0
        for record in records:
            row = as_row(record)
            if not row.cells:
                continue
            buffer += f"<tr{_attributes(row.css_class, extra=row.extra, element_id=row.id)}>"
            for cell in row.cells:
                buffer += self._cell(cell)
            buffer += "</tr>"
            rendered += 1

        logger.debug(f"Rendered {rendered} rows for table '{self.table_id}'")
        return buffer

    def end_table(self) -> str:
        return "</tbody></table>"

    def render(
        self,
        header: Optional[Iterable[HeaderInput]],
        records: Iterable[RowInput],
        options: Optional[Union[WidgetOptions, dict[str, Any]]] = None,
    ) -> str:
        """Render script, header, rows and closing tags in one call."""
        return (
            self.init(options)
            + self.start_table(header)
            + self.rows(records)
            + self.end_table()
        )

    @staticmethod
    def _cell(cell: Cell) -> str:
        return f"<td{_attributes(cell.css_class, cell.width, cell.extra)}>{cell.value}</td>"
