"""Sort Table - sortable HTML table rendering.

This package renders table markup bound to the MooTools HtmlTable widget:
- Table renderer (header, rows, widget bootstrap script)
- Asset registry (stylesheets a page must load)
- Table presets (named configurations loaded from YAML)
"""

__version__ = "0.1.0"
