"""Table, JSON, YAML and raw rendering of command results using Rich."""

import json
from enum import Enum
from typing import Any

import yaml
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text


class OutputFormat(str, Enum):
    """Supported output formats."""

    TABLE = "table"
    JSON = "json"
    YAML = "yaml"
    RAW = "raw"


class OutputFormatter:
    """Prints command results in the format chosen with ``--output``.

    Cell values are wrapped in ``Text`` so rrdtool strings are never read as
    Rich markup.
    """

    def __init__(self, format: OutputFormat = OutputFormat.TABLE, color: bool = True):
        self.format = format
        self.color = color
        self._console = Console(force_terminal=color, no_color=not color, soft_wrap=True)

    def print_data(
        self,
        data: list[dict[str, Any]] | dict[str, Any],
        headers: list[str] | None = None,
        title: str | None = None,
    ) -> None:
        if self.format == OutputFormat.JSON:
            self._print_syntax(json.dumps(data, indent=2, default=str), "json")
        elif self.format == OutputFormat.YAML:
            text = yaml.dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)
            self._print_syntax(text, "yaml")
        elif self.format == OutputFormat.RAW:
            values = data.values() if isinstance(data, dict) else data
            self.print_lines([str(value) for value in values])
        else:
            self._print_table(data, headers, title)

    def print_lines(self, lines: list[str]) -> None:
        """Print lines verbatim, bypassing Rich markup."""
        for line in lines:
            print(line)

    def _print_syntax(self, text: str, lexer: str) -> None:
        if self.color:
            self._console.print(Syntax(text, lexer, theme="monokai"))
        else:
            print(text.rstrip("\n"))

    def _print_table(
        self,
        data: list[dict[str, Any]] | dict[str, Any],
        headers: list[str] | None,
        title: str | None,
    ) -> None:
        if not data:
            self._console.print("[dim]No data to display[/dim]")
            return

        table = Table(title=title, show_header=True, header_style="bold cyan")
        if isinstance(data, dict):
            # Single record - display as key-value pairs
            table.add_column("Field", style="dim")
            table.add_column("Value")
            for key, value in data.items():
                table.add_row(str(key), Text(str(value)))
        else:
            headers = headers or list(data[0].keys())
            for header in headers:
                table.add_column(header)
            for row in data:
                table.add_row(*[Text(str(row.get(h, ""))) for h in headers])
        self._console.print(table)
