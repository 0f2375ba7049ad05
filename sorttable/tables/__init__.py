"""Sortable table rendering.

Renders <table> markup plus the inline script that binds the MooTools
HtmlTable widget to it. Sorting itself happens in the browser.
"""

from .schemas import (
    Cell,
    HeaderCell,
    Row,
    TableConfig,
    WidgetOptions,
)
from .renderer import SortTableRenderer

__all__ = [
    "Cell",
    "HeaderCell",
    "Row",
    "TableConfig",
    "WidgetOptions",
    "SortTableRenderer",
]
