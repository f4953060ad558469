"""Main CLI entry point for owmgraph."""

import sys
from typing import Any

import click
from rich.console import Console
from rich.markup import escape

from owmgraph import __version__
from owmgraph.config import load_config
from owmgraph.core.context import OwmGraphContext, pass_context
from owmgraph.core.output import OutputFormat
from owmgraph.core.exceptions import OwmGraphError, ConfigError
from owmgraph.template import rrd
from owmgraph.template.loader import load_request
from owmgraph.template.models import GraphContext


CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 120,
}


class OutputFormatType(click.ParamType):
    """Custom Click parameter type for output format."""

    name = "format"

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> OutputFormat:
        if isinstance(value, OutputFormat):
            return value
        try:
            return OutputFormat(value.lower())
        except ValueError:
            self.fail(
                f"Invalid format '{value}'. Choose from: table, json, yaml, raw",
                param,
                ctx,
            )


OUTPUT_FORMAT = OutputFormatType()


def print_version(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return
    console = Console()
    console.print(f"owmgraph version {__version__}")
    ctx.exit()


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option(
    "-o",
    "--output",
    "output_format",
    type=OUTPUT_FORMAT,
    metavar="FORMAT",
    help="Output format: table, json, yaml, raw",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (-v for info, -vv for debug)",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="Only log errors",
)
@click.option(
    "--no-color",
    is_flag=True,
    help="Disable colored output",
)
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(exists=True),
    metavar="FILE",
    envvar="OWMGRAPH_CONFIG",
    help="Path to config file",
)
@click.option(
    "--version",
    is_flag=True,
    callback=print_version,
    expose_value=False,
    is_eager=True,
    help="Show version and exit",
)
@click.pass_context
def cli(
    ctx: click.Context,
    output_format: OutputFormat | None,
    verbose: int,
    quiet: bool,
    no_color: bool,
    config_file: str | None,
) -> None:
    """owmgraph - PNP4Nagios graph template for check_openweathermap.

    Renders the combined weather graph (rrdtool DEF/LINE/GPRINT/COMMENT
    directives) from a request document holding the host/service display
    names and the plugin's data series.

    \b
    Examples:
        owmgraph render request.yaml
        owmgraph -o raw render request.yaml --host station1
        owmgraph directives request.json
        owmgraph palette --count 8

    \b
    Configuration:
        ~/.owmgraph/config.yaml    User configuration
        ./owmgraph.yaml            Project configuration
        OWMGRAPH_*                 Environment variables
    """
    try:
        config = load_config(config_file)

        ctx.obj = OwmGraphContext(
            config=config,
            output_format=output_format,
            verbose=verbose,
            quiet=quiet,
            color=False if no_color else None,
        )
    except ConfigError as e:
        console = Console(stderr=True)
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        sys.exit(1)


def _render_file(
    ctx: OwmGraphContext, request_file: str, host: str | None, service: str | None
):
    request = load_request(request_file)
    context = request.context
    if host is not None or service is not None:
        context = GraphContext(
            host_display_name=host if host is not None else context.host_display_name,
            service_display_name=(
                service if service is not None else context.service_display_name
            ),
        )
    ctx.logger.debug("Rendering request", file=request_file, series=len(request.series))
    return ctx.renderer.render(context, request.series)


@cli.command()
@click.argument("request_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--host", metavar="NAME", help="Override the host display name")
@click.option("--service", metavar="NAME", help="Override the service display name")
@pass_context
def render(ctx: OwmGraphContext, request_file: str, host: str | None, service: str | None) -> None:
    """Render the graph spec for REQUEST_FILE (YAML or JSON)."""
    spec = _render_file(ctx, request_file, host, service)
    data = {"opt": spec.title_option, "def": spec.draw_commands}
    ctx.output.print_data(data, title="check_openweathermap graph")


@cli.command()
@click.argument("request_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--host", metavar="NAME", help="Override the host display name")
@click.option("--service", metavar="NAME", help="Override the service display name")
@pass_context
def directives(
    ctx: OwmGraphContext, request_file: str, host: str | None, service: str | None
) -> None:
    """Print the drawing directives for REQUEST_FILE, one per line."""
    spec = _render_file(ctx, request_file, host, service)
    ctx.output.print_lines(spec.directives())


@cli.command()
@click.option("--count", "-n", type=click.IntRange(min=1), default=len(rrd.PALETTE), show_default=True)
@pass_context
def palette(ctx: OwmGraphContext, count: int) -> None:
    """List the colors assigned to series keys."""
    alpha = ctx.config.graph.get_color_alpha()
    rows = [{"key": key, "color": rrd.color(key, alpha)} for key in range(count)]
    ctx.output.print_data(rows, headers=["key", "color"], title="Series colors")


@cli.command()
@pass_context
def config(ctx: OwmGraphContext) -> None:
    """Show current configuration."""
    graph = ctx.config.graph
    config_data = {
        "output_format": ctx.output_format.value,
        "verbose": ctx.verbose,
        "consolidation": graph.get_consolidation(),
        "line_width": graph.get_line_width(),
        "color_alpha": graph.get_color_alpha(),
        "legend_width": graph.get_legend_width(),
    }
    ctx.output.print_data(config_data, title="Current Configuration")


def main() -> None:
    """Main entry point."""
    try:
        cli()
    except OwmGraphError as e:
        console = Console(stderr=True)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)
    except KeyboardInterrupt:
        console = Console(stderr=True)
        console.print("\n[yellow]Interrupted[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()
