"""
Table JavaScript Functions

Provides the client-side configuration that activates jQuery tablesorter on a
rendered table: the tablesorter initialisation call, pager add-on options,
output (export) widget options, export menu handlers and popover activation.

Every function that targets a table takes the table id explicitly, so the
script always matches the markup it was rendered for.
"""

import json
from collections.abc import Sequence
from typing import Any

PAGER_SIZE = 10
PAGER_OUTPUT_FORMAT = "{startRow} - {endRow} / {filteredRows} ({totalRows})"
OUTPUT_FILENAME = "mytable.csv"


def js_literal(value: Any) -> str:
    """
    Encode a value as a JavaScript literal safe to embed in a <script> block.

    Example:
        >>> js_literal(["filter", "zebra"])
        '["filter", "zebra"]'
        >>> js_literal("</script>")
        '"\\\\u003c/script\\\\u003e"'
    """
    return json.dumps(value).replace("<", "\\u003c").replace(">", "\\u003e").replace("&", "\\u0026")


def get_tablesorter_init_script(table_id: str, theme: str, widgets: Sequence[str], output_options: str = "") -> str:
    """
    Returns the tablesorter initialisation call for a table.

    The returned expression is not terminated so add-ons such as the pager can
    be chained onto it.

    Args:
        table_id: id attribute of the <table>
        theme: tablesorter theme name
        widgets: Widget names, emitted as a JavaScript array in this order
        output_options: Extra widgetOptions entries (see get_output_widget_options)

    Returns:
        String of JavaScript code
    """
    return f"""
    $({js_literal("#" + table_id)}).tablesorter({{
        theme: {js_literal(theme)},

        widgets: {js_literal(list(widgets))},

        widgetOptions: {{
            filter_reset : ".reset",
            filter_cssFilter: "form-control",
            {output_options}
        }}
    }})"""


def get_pager_script(table_id: str) -> str:
    """
    Returns the tablesorter pager add-on call, chained onto the initialisation.

    Features:
    - Fixed page size of 10 (matches the selected page-size option)
    - Pager controls looked up inside the table's own footer
    - Rows outside the page are hidden, not removed

    Args:
        table_id: id attribute of the <table>

    Returns:
        String of JavaScript code starting with ".tablesorterPager("
    """
    return f""".tablesorterPager({{

        size: {PAGER_SIZE},

        // pager markup lives in the table footer
        container: $({js_literal("#" + table_id + " .ts-pager")}),

        // page number select
        cssGoto  : ".pagenum",

        // hide rather than remove rows outside the current page
        removeRows: false,

        // possible variables: {{page}}, {{totalPages}}, {{filteredPages}}, {{startRow}}, {{endRow}}, {{filteredRows}} and {{totalRows}}
        output: {js_literal(PAGER_OUTPUT_FORMAT)}

    }})"""


def get_output_widget_options() -> str:
    """
    Returns widgetOptions entries for the tablesorter output widget.

    Defaults:
    - Comma separator, quotes replaced with a left double quote
    - Header row included, footer rows excluded
    - Spaces trimmed, every value wrapped in quotes
    - Saved as mytable.csv; output_savePlugin is left null for callers that
      want to hand the data to an external saver

    Returns:
        String of JavaScript object entries
    """
    return f"""output_separator     : ',',         // ',' 'json', 'array' or separator (e.g. ';')
            output_hiddenColumns : false,       // include hidden columns in the output
            output_includeFooter : false,       // include footer rows in the output
            output_includeHeader : true,        // include header rows in the output
            output_headerRows    : false,       // output all header rows (if multiple rows)
            output_dataAttrib    : 'data-name', // data-attribute containing alternate cell text
            output_delivery      : 'p',         // (p)opup, (d)ownload
            output_saveRows      : 'f',         // (a)ll, (v)isible, (f)iltered or jQuery filter selector
            output_duplicateSpans: true,        // duplicate output data in tbody colspan/rowspan
            output_replaceQuote  : '\\u201c',    // change quote to left double quote
            output_includeHTML   : false,       // output includes all cell HTML (except the header cells)
            output_trimSpaces    : true,        // remove extra white-space characters from beginning & end
            output_wrapQuotes    : true,        // wrap every cell output in quotes
            output_popupStyle    : 'width=580,height=310',
            output_saveFileName  : {js_literal(OUTPUT_FILENAME)},
            output_formatContent : function(config, widgetOptions, data) {{
                return data.content;
            }},
            // return false to stop delivery
            output_callback      : function(config, data, url) {{
                return true;
            }},
            // used when outputting JSON and a header cell has a colspan
            output_callbackJSON  : function($cell, txt, cellIndex) {{
                return txt + '(' + cellIndex + ')';
            }},
            output_encoding      : 'data:application/octet-stream;charset=utf8,',
            // function(config, widgetOptions, data) to replace the built-in save
            output_savePlugin    : null"""


def get_output_menu_script(table_id: str) -> str:
    """
    Returns the handlers wiring the export menu to the output widget.

    Features:
    - Dropdown toggle that stays open while options are changed
    - Separator buttons update the separator input and filename extension
    - Quote buttons update the replacement input
    - Header/footer toggle buttons
    - Download button copies the chosen options into widgetOptions and
      triggers the "outputTable" event

    Args:
        table_id: id of the table; handlers are scoped to its container

    Returns:
        String of JavaScript code
    """
    return f"""
    (function() {{
        var $this = $({js_literal(".sortTable-" + table_id)});

        $this.find('.dropdown-toggle').click(function(e) {{
            // keep the menu open while options are clicked
            $this.find('.dropdown-menu').toggle();
            return false;
        }});
        $this.find('.output-separator').click(function() {{
            $this.find('.output-separator').removeClass('active');
            var txt = $(this).addClass('active').html();
            $this.find('.output-separator-input').val( txt );
            $this.find('.output-filename').val(function(i, v) {{
                var filetype = (txt === 'json' || txt === 'array') ? 'js' :
                    txt === ',' ? 'csv' : 'txt';
                return v.replace(/\\.\\w+$/, '.' + filetype);
            }});
            return false;
        }});
        $this.find('.output-quotes').click(function() {{
            $this.find('.output-quotes').removeClass('active');
            $this.find('.output-replacequotes').val( $(this).addClass('active').text() );
            return false;
        }});
        $this.find('.output-header, .output-footer').click(function() {{
            $(this).toggleClass('active');
        }});
        $this.find('.output-all').change(function() {{
            $this.find('.pagesize').val('all').trigger('change');
        }});
        $this.find('.download').click(function() {{
            var $table = $this.find('table'),
                wo = $table[0].config.widgetOptions,
                val = $this.find('.output-filter-all :checked').attr('class');
            wo.output_saveRows     = val === 'output-filter' ? 'f' :
                val === 'output-visible' ? 'v' :
                    val === 'output-selected' ? '.checked' :
                        val === 'output-sel-vis' ? '.checked:visible' :
                            'a';
            val = $this.find('.output-download-popup :checked').attr('class');
            wo.output_delivery      = val === 'output-download' ? 'd' : 'p';
            wo.output_separator     = $this.find('.output-separator-input').val();
            wo.output_replaceQuote  = $this.find('.output-replacequotes').val();
            wo.output_trimSpaces    = $this.find('.output-trim').is(':checked');
            wo.output_includeHTML   = $this.find('.output-html').is(':checked');
            wo.output_wrapQuotes    = $this.find('.output-wrap').is(':checked');
            wo.output_saveFileName  = $this.find('.output-filename').val();
            wo.output_includeHeader = $this.find('button.output-header').is('.active');
            wo.output_includeFooter = $this.find('button.output-footer').is('.active');

            $table.trigger('outputTable');
            return false;
        }});
    }})();
    """


def get_popover_script(table_id: str) -> str:
    """
    Returns the Bootstrap popover activation for a table's header cells.

    Args:
        table_id: id attribute of the <table>

    Returns:
        String of JavaScript code
    """
    return f"""
    $(function () {{
        $({js_literal("#" + table_id)}).find('[data-toggle="popover"]').popover();
    }});
    """


def get_table_javascript(
    table_id: str,
    theme: str,
    widgets: Sequence[str],
    include_popovers: bool = False,
) -> str:
    """
    Returns the complete script for one table based on its enabled widgets.

    Args:
        table_id: id attribute of the <table>
        theme: tablesorter theme name
        widgets: Enabled widget names; "pager" and "output" add their blocks
        include_popovers: Include popover activation for header cells

    Returns:
        String of JavaScript code wrapped in <script> tags
    """
    include_pager = "pager" in widgets
    include_output = "output" in widgets

    init = get_tablesorter_init_script(
        table_id,
        theme,
        widgets,
        output_options=get_output_widget_options() if include_output else "",
    )
    if include_pager:
        init += get_pager_script(table_id)

    js_parts = [init + ";"]

    if include_output:
        js_parts.append(get_output_menu_script(table_id))
    if include_popovers:
        js_parts.append(get_popover_script(table_id))

    javascript = f"""
<script>
{chr(10).join(js_parts)}
</script>
"""

    return javascript
