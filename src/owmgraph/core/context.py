"""Click context object for sharing state across commands."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from owmgraph.config import OwmGraphConfig, get_default_config
from owmgraph.core.output import OutputFormat, OutputFormatter
from owmgraph.core.logging import LogLevel, setup_logging, StructuredLogger

if TYPE_CHECKING:
    from owmgraph.template.renderer import GraphTemplateRenderer


class OwmGraphContext:
    """Shared context object for owmgraph commands.

    This object is passed through Click's context mechanism and provides
    access to configuration, the renderer, and output utilities.
    """

    def __init__(
        self,
        config: OwmGraphConfig | None = None,
        output_format: OutputFormat | None = None,
        verbose: int = 0,
        quiet: bool = False,
        color: bool | None = None,
    ):
        self._config = config or get_default_config()

        # Output settings (CLI overrides config)
        self._output_format = output_format or self._config.global_settings.output_format
        self._verbose = verbose
        if color is None:
            mode = self._config.global_settings.color
            color = mode == "always" or (mode == "auto" and sys.stdout.isatty())

        if verbose >= 2:
            log_level = LogLevel.DEBUG
        elif verbose == 1:
            log_level = LogLevel.INFO
        elif quiet:
            log_level = LogLevel.ERROR
        else:
            log_level = self._config.global_settings.verbosity

        setup_logging(log_level, rich_output=color)
        self._logger = StructuredLogger("context")

        self._output = OutputFormatter(format=self._output_format, color=color)

        self._renderer: GraphTemplateRenderer | None = None

    @property
    def config(self) -> OwmGraphConfig:
        """Get the loaded configuration."""
        return self._config

    @property
    def output(self) -> OutputFormatter:
        """Get the output formatter."""
        return self._output

    @property
    def output_format(self) -> OutputFormat:
        return self._output_format

    @property
    def verbose(self) -> int:
        return self._verbose

    @property
    def logger(self) -> StructuredLogger:
        return self._logger

    @property
    def renderer(self) -> "GraphTemplateRenderer":
        """Get or create the graph template renderer."""
        if self._renderer is None:
            from owmgraph.template.renderer import GraphTemplateRenderer

            self._renderer = GraphTemplateRenderer(self._config.graph)
        return self._renderer


# Click decorator for passing context
pass_context = click.make_pass_decorator(OwmGraphContext, ensure=True)
