"""Configuration-independent plumbing: errors, logging, output, click context."""

# Import context lazily to avoid circular imports
# Use: from owmgraph.core.context import OwmGraphContext, pass_context
from owmgraph.core.exceptions import OwmGraphError, ConfigError, TemplateInputError
from owmgraph.core.output import OutputFormat, OutputFormatter

__all__ = [
    "OwmGraphError",
    "ConfigError",
    "TemplateInputError",
    "OutputFormat",
    "OutputFormatter",
]
