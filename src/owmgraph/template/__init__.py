"""PNP4Nagios graph template for check_openweathermap."""

from owmgraph.template.models import GraphContext, GraphSpec, SeriesDescriptor
from owmgraph.template.renderer import GraphTemplateRenderer, render
from owmgraph.template.loader import RenderRequest, load_request, parse_request

__all__ = [
    "GraphContext",
    "GraphSpec",
    "SeriesDescriptor",
    "GraphTemplateRenderer",
    "render",
    "RenderRequest",
    "load_request",
    "parse_request",
]
