"""Combined graph template for check_openweathermap performance data."""

from collections.abc import Iterable, Mapping
from typing import Any

from owmgraph.config import GraphConfig
from owmgraph.core.logging import StructuredLogger
from owmgraph.template import rrd
from owmgraph.template.models import GraphContext, GraphSpec, SeriesDescriptor


GRAPH_LABEL = "check_openweathermap"
SUMMARY_FUNCTIONS = ("LAST", "AVERAGE")
VALUE_FORMAT = "%9.4lf %S"

logger = StructuredLogger(__name__)


def coerce_context(context: GraphContext | Mapping[str, Any]) -> GraphContext:
    if isinstance(context, GraphContext):
        return context
    return GraphContext.model_validate(dict(context))


def coerce_series(
    item: SeriesDescriptor | Mapping[str, Any], position: int
) -> SeriesDescriptor:
    """Build a descriptor from a host DS entry.

    Entries without a key are keyed by their 0-based position, as the host
    numbers its DS array.
    """
    if isinstance(item, SeriesDescriptor):
        return item
    data = dict(item)
    if "key" not in data and "KEY" not in data:
        data["key"] = position
    return SeriesDescriptor.model_validate(data)


class GraphTemplateRenderer:
    """Renders every data series of the plugin into one graph.

    Each series contributes a DEF, a LINE and a GPRINT pair, in input order.
    Three COMMENT lines close the legend; the last names the check command
    taken from the final series.
    """

    def __init__(self, config: GraphConfig | None = None):
        config = config or GraphConfig()
        self.consolidation = config.get_consolidation()
        self.line_width = config.get_line_width()
        self.color_alpha = config.get_color_alpha()
        self.legend_width = config.get_legend_width()

    def title(self, context: GraphContext) -> str:
        text = (
            f"{GRAPH_LABEL} graph for "
            f"{context.host_display_name} / {context.service_display_name}"
        )
        return f' --title "{rrd.escape(text)}" '

    def series_commands(self, series: SeriesDescriptor, position: int = 0) -> str:
        """Directives for one series; text keys take their color from ``position``."""
        vname = series.vname
        index = series.key if isinstance(series.key, int) else position
        return (
            rrd.def_(vname, series.rrd_file, series.data_source_name, self.consolidation)
            + rrd.line(
                self.line_width,
                vname,
                rrd.color(index, self.color_alpha),
                rrd.cut(series.display_name, self.legend_width),
            )
            + rrd.gprint(vname, SUMMARY_FUNCTIONS, VALUE_FORMAT + series.unit)
        )

    def render(
        self,
        context: GraphContext | Mapping[str, Any],
        series: Iterable[SeriesDescriptor | Mapping[str, Any]],
    ) -> GraphSpec:
        """Render the graph spec for ``context`` and ``series``."""
        context = coerce_context(context)

        commands: list[str] = []
        last: SeriesDescriptor | None = None
        for position, item in enumerate(series):
            last = coerce_series(item, position)
            commands.append(self.series_commands(last, position))

        log = logger.bind(host=context.host_display_name, service=context.service_display_name)
        if last is None:
            log.warning("Rendering graph without data series")
        command = last.template if last is not None else ""

        commands.append(rrd.comment(rrd.JUSTIFY_RIGHT))
        commands.append(rrd.comment(f"{GRAPH_LABEL} graph template{rrd.JUSTIFY_RIGHT}"))
        commands.append(rrd.comment(f"Command {command}{rrd.JUSTIFY_RIGHT}"))

        log.debug("Rendered graph template", series=len(commands) - 3)
        return GraphSpec(title_option=self.title(context), draw_commands="".join(commands))


def render(
    context: GraphContext | Mapping[str, Any],
    series: Iterable[SeriesDescriptor | Mapping[str, Any]],
) -> GraphSpec:
    """Render with the stock template settings."""
    return GraphTemplateRenderer().render(context, series)
