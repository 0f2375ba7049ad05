"""Unit tests for SortTableRenderer."""

import pytest
from pydantic import ValidationError

from sorttable.assets.registry import AssetRegistry
from sorttable.tables.renderer import NO_SORT_CLASS, SortTableRenderer
from sorttable.tables.schemas import Cell, HeaderCell, Row, TableConfig, WidgetOptions


@pytest.fixture
def assets() -> AssetRegistry:
    return AssetRegistry()


@pytest.fixture
def renderer(assets: AssetRegistry) -> SortTableRenderer:
    return SortTableRenderer(
        {"table_id": "orders", "css_dir": "/static/css"}, registry=assets
    )


class TestConfigure:
    """Tests for renderer configuration."""

    def test_defaults(self, monkeypatch, assets):
        monkeypatch.delenv("SORTTABLE_CSS_DIR", raising=False)
        renderer = SortTableRenderer(registry=assets)

        assert renderer.table_id == "theTable"
        assert renderer.config.stylesheet_path == "/css/sort_table.css"

    def test_css_dir_from_environment(self, monkeypatch, assets):
        monkeypatch.setenv("SORTTABLE_CSS_DIR", "/assets/")
        renderer = SortTableRenderer(registry=assets)

        assert renderer.config.stylesheet_path == "/assets/sort_table.css"

    def test_keyword_options_override_config(self, assets):
        config = TableConfig(table_id="a", css_file="x.css")
        renderer = SortTableRenderer(config, registry=assets, table_id="b")

        assert renderer.table_id == "b"
        assert renderer.config.css_file == "x.css"

    def test_config_is_immutable(self, renderer):
        with pytest.raises(ValidationError):
            renderer.config.table_id = "other"

    def test_empty_table_id_rejected(self, assets):
        with pytest.raises(ValidationError):
            SortTableRenderer({"table_id": ""}, registry=assets)


class TestInit:
    """Tests for the widget bootstrap script."""

    def test_registers_stylesheet(self, renderer, assets):
        renderer.init()

        assert assets.stylesheets() == ["/static/css/sort_table.css"]

    def test_defaults_emitted(self, renderer):
        script = renderer.init()

        assert script.startswith('<script type="text/javascript">')
        assert script.rstrip().endswith("</script>")
        assert "function sortTable() {" in script
        assert 'new HtmlTable($("orders"), {' in script
        assert "sortable: true" in script
        assert "sortIndex: 0" in script
        assert "zebra: true" in script
        assert 'classZebra: "zebra"' in script
        assert 'classHeadSort: "downArrow"' in script
        assert 'classHeadSortRev: "upArrow"' in script
        assert 'classCellSort: "focusedColumn"' in script
        assert "window.addEvent('domready', sortTable);" in script

    def test_optional_settings_omitted_by_default(self, renderer):
        script = renderer.init()

        assert "sortReverse" not in script
        assert "parsers" not in script
        assert "defaultParser" not in script

    def test_widget_options(self, renderer):
        script = renderer.init(
            WidgetOptions(
                sortable=False,
                sort_index=None,
                sort_reverse=True,
                parsers=["string", "number"],
                default_parser="string",
            )
        )

        assert "sortable: false" in script
        assert "sortIndex: null" in script
        assert "sortReverse: true" in script
        assert 'parsers: ["string", "number"]' in script
        assert 'defaultParser: "string"' in script

    def test_callback_name_runs_before_widget(self, renderer):
        script = renderer.init(callback="updateTooltips")

        assert "updateTooltips();" in script
        assert script.index("updateTooltips();") < script.index("new HtmlTable")

    def test_callback_statements_emitted_verbatim(self, renderer):
        script = renderer.init({"callback": "updateTooltips(); resize(3);"})

        assert "    updateTooltips(); resize(3);\n" in script

    def test_custom_function_name(self, renderer):
        script = renderer.init(function_name="sortOrders")

        assert "function sortOrders() {" in script
        assert "window.addEvent('domready', sortOrders);" in script

    def test_invalid_function_name_rejected(self, renderer):
        with pytest.raises(ValidationError):
            renderer.init(function_name="sort table")

    def test_negative_sort_index_rejected(self, renderer):
        with pytest.raises(ValidationError):
            renderer.init(sort_index=-1)

    def test_unknown_option_names_rejected(self, renderer):
        with pytest.raises(ValidationError):
            renderer.init({"sortIndex": 2, "js_function": "updateTooltips();"})

    def test_unknown_table_option_rejected(self, assets):
        with pytest.raises(ValidationError):
            SortTableRenderer({"tableId": "orders"}, registry=assets)


class TestStartTable:
    """Tests for the table opening and header row."""

    def test_no_header(self, renderer):
        assert renderer.start_table() == '<table class="sortTable" id="orders"><tbody>'

    def test_empty_header_list(self, renderer):
        assert "<thead>" not in renderer.start_table([])

    def test_one_th_per_header_in_order(self, renderer):
        markup = renderer.start_table(["Date", "Name", "Total"])

        assert markup.count("<th>") == 3
        assert markup.index(">Date<") < markup.index(">Name<") < markup.index(">Total<")
        assert '<thead><tr class="SortTableHeader">' in markup
        assert markup.endswith("</tr></thead><tbody>")

    def test_plain_header_has_no_attributes(self, renderer):
        assert "<th>Name</th>" in renderer.start_table(["Name"])

    def test_decorated_header(self, renderer):
        markup = renderer.start_table(
            [{"value": "Name", "class": "wide", "width": 120, "other": 'title="n"'}]
        )

        assert '<th class="wide" width="120" title="n">Name</th>' in markup

    def test_sort_false_marks_nosort(self, renderer):
        markup = renderer.start_table([HeaderCell(value="Actions", sort=False)])

        assert f'<th class="{NO_SORT_CLASS}">Actions</th>' in markup

    def test_nosort_prepended_to_existing_class(self, renderer):
        markup = renderer.start_table([{"value": "Edit", "class": "icons", "sort": False}])

        assert f'class="{NO_SORT_CLASS} icons"' in markup

    def test_empty_value_overrides_sort_flag(self, renderer):
        markup = renderer.start_table(["Name", {"value": "", "sort": True}])

        assert "<th>Name</th>" in markup
        assert f'<th class="{NO_SORT_CLASS}"></th>' in markup

    def test_empty_plain_header_is_unsortable(self, renderer):
        assert f'<th class="{NO_SORT_CLASS}"></th>' in renderer.start_table([""])

    def test_zero_header_is_sortable(self, renderer):
        markup = renderer.start_table([0, "0"])

        assert markup.count("<th>0</th>") == 2
        assert NO_SORT_CLASS not in markup

    def test_header_markup_is_verbatim(self, renderer):
        markup = renderer.start_table(["<b>Name</b>"])

        assert "<th><b>Name</b></th>" in markup


class TestRows:
    """Tests for body row rendering."""

    def test_plain_rows(self, renderer):
        markup = renderer.rows([["2024-01-02", "Alice", 3], ["2024-01-03", "Bob", 4.5]])

        assert markup == (
            "<tr><td>2024-01-02</td><td>Alice</td><td>3</td></tr>"
            "<tr><td>2024-01-03</td><td>Bob</td><td>4.5</td></tr>"
        )

    def test_cell_count_matches_input(self, renderer):
        markup = renderer.rows([["a", "b", "c", "d"]])

        assert markup.count("<td") == 4

    def test_empty_rows_skipped(self, renderer):
        markup = renderer.rows([[], ["x"], Row(id="r2"), ()])

        assert markup == "<tr><td>x</td></tr>"

    def test_no_rows(self, renderer):
        assert renderer.rows([]) == ""

    def test_row_attributes(self, renderer):
        markup = renderer.rows(
            [{"cells": ["a"], "id": "r1", "class": "odd", "other": "data-k=\"1\""}]
        )

        assert markup == '<tr id="r1" class="odd" data-k="1"><td>a</td></tr>'

    def test_decorated_cells(self, renderer):
        markup = renderer.rows(
            [["plain", Cell(value="<a href='#'>go</a>", css_class="no_border", width="10%")]]
        )

        assert "<td>plain</td>" in markup
        assert "<td class=\"no_border\" width=\"10%\"><a href='#'>go</a></td>" in markup

    def test_none_cell_renders_empty(self, renderer):
        assert renderer.rows([[None]]) == "<tr><td></td></tr>"

    def test_attribute_values_escaped(self, renderer):
        markup = renderer.rows([Row(cells=["a"], css_class='x" onclick="y')])

        assert 'class="x&quot; onclick=&quot;y"' in markup

    def test_malformed_cell_rejected(self, renderer):
        with pytest.raises(ValidationError):
            renderer.rows([[["nested"]]])

    def test_malformed_row_rejected(self, renderer):
        with pytest.raises(ValidationError):
            renderer.rows(["not a row"])

    def test_row_keyed_by_column_rejected(self, renderer):
        with pytest.raises(ValidationError):
            renderer.rows([{"name": "Alice", "age": 3}])

    def test_unknown_cell_attribute_rejected(self, renderer):
        with pytest.raises(ValidationError):
            renderer.rows([[{"value": "a", "colour": "red"}]])

    def test_boolean_cells(self, renderer):
        assert renderer.rows([[True, False]]) == "<tr><td>1</td><td></td></tr>"


class TestEndTable:
    def test_end_table(self, renderer):
        assert renderer.end_table() == "</tbody></table>"

    def test_end_table_independent_of_prior_calls(self, renderer):
        renderer.start_table(["a"])
        renderer.rows([["1"]])

        assert renderer.end_table() == "</tbody></table>"


class TestRender:
    def test_fragments_in_order(self, renderer, assets):
        markup = renderer.render(["Name"], [["Alice"]], {"sort_index": 0})

        assert markup.index("</script>") < markup.index("<table")
        assert markup.index("<thead>") < markup.index("<td>Alice</td>")
        assert markup.endswith("</tbody></table>")
        assert assets.count() == 1

    def test_uses_global_registry_by_default(self, monkeypatch):
        from sorttable.assets import registry as registry_module

        global_assets = AssetRegistry()
        monkeypatch.setattr(registry_module, "_registry", global_assets)

        SortTableRenderer(table_id="t").init()

        assert global_assets.count() == 1
