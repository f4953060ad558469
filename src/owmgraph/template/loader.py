"""Load render requests from YAML or JSON documents.

A request document looks like::

    context:
      DISP_HOSTNAME: weather-station
      DISP_SERVICEDESC: openweathermap
    series:
      1:
        RRDFILE: /var/lib/pnp4nagios/weather-station/openweathermap_temp.rrd
        DS: 1
        NAME: temp
        UNIT: C
        TEMPLATE: check_openweathermap

``series`` may also be a list, in which case entries without a key are
numbered from 0 in list order, the way the host numbers its DS array. Keys
are opaque: integers stay integers, anything else is used as text.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from owmgraph.core.exceptions import TemplateInputError
from owmgraph.core.logging import get_logger
from owmgraph.template.models import GraphContext, SeriesDescriptor
from owmgraph.template.renderer import coerce_series

logger = get_logger(__name__)


@dataclass
class RenderRequest:
    """Context and series read from a request document."""

    context: GraphContext
    series: list[SeriesDescriptor] = field(default_factory=list)


def parse_request(data: Any, source: str | None = None) -> RenderRequest:
    """Build a render request from already-parsed document data."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise TemplateInputError("Request document must be a mapping", source=source)

    raw_context = data.get("context") or {}
    raw_series = data.get("series") or []

    if not isinstance(raw_context, dict):
        raise TemplateInputError("'context' must be a mapping", source=source)

    if isinstance(raw_series, dict):
        entries = []
        for key, value in raw_series.items():
            if not isinstance(value, dict):
                raise TemplateInputError(f"Series {key} must be a mapping", source=source)
            entries.append({"key": key, **value})
    elif isinstance(raw_series, list):
        entries = raw_series
    else:
        raise TemplateInputError("'series' must be a list or a mapping", source=source)

    context = GraphContext.model_validate(raw_context)
    series = []
    for position, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise TemplateInputError(f"Series entry {position} must be a mapping", source=source)
        series.append(coerce_series(entry, position))

    logger.debug(f"Loaded {len(series)} series from {source or '<data>'}")
    return RenderRequest(context=context, series=series)


def load_request(path: str | Path) -> RenderRequest:
    """Read a render request from a YAML or JSON file."""
    path = Path(path)
    try:
        content = path.read_text()
    except OSError as e:
        raise TemplateInputError(f"Cannot read {path}: {e}", source=str(path))

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise TemplateInputError(f"Invalid document in {path}: {e}", source=str(path))

    return parse_request(data, source=str(path))
