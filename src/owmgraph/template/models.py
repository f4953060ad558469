"""Input and output records for the graph template."""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


# A directive is a run of non-space characters, where quoted segments may hold spaces.
_DIRECTIVE_RE = re.compile(r'(?:[^\s"]|"(?:\\.|[^"\\])*")+')


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


class GraphContext(BaseModel):
    """Display names of the host and service the graph is drawn for.

    Accepts the PNP4Nagios macro names (``DISP_HOSTNAME``,
    ``DISP_SERVICEDESC``) as aliases.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    host_display_name: str = Field(default="", alias="DISP_HOSTNAME")
    service_display_name: str = Field(default="", alias="DISP_SERVICEDESC")

    @field_validator("host_display_name", "service_display_name", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return _as_text(v)


class SeriesDescriptor(BaseModel):
    """One data series exposed by the plugin's performance data.

    Field aliases follow the host's DS entry keys. Missing fields default to
    the empty string and unknown keys are ignored. The key is an opaque
    identifier: integers stay integers, anything else is kept as text.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    key: int | str = Field(alias="KEY")
    rrd_file: str = Field(default="", alias="RRDFILE")
    data_source_name: str = Field(default="", alias="DS")
    display_name: str = Field(default="", alias="NAME")
    unit: str = Field(default="", alias="UNIT")
    template: str = Field(default="", alias="TEMPLATE")

    @field_validator("key", mode="before")
    @classmethod
    def coerce_key(cls, v: Any) -> int | str:
        if isinstance(v, int) and not isinstance(v, bool):
            return v
        return _as_text(v)

    @field_validator(
        "rrd_file", "data_source_name", "display_name", "unit", "template", mode="before"
    )
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return _as_text(v)

    @property
    def vname(self) -> str:
        """Synthetic rrdtool variable name for this series."""
        return f"var{self.key}"


class GraphSpec(BaseModel):
    """Rendered graph: rrdtool options and drawing directives."""

    model_config = ConfigDict(frozen=True)

    title_option: str
    draw_commands: str

    def directives(self) -> list[str]:
        """Split the drawing commands into individual directives."""
        return _DIRECTIVE_RE.findall(self.draw_commands)

    def as_template_arrays(self) -> dict[str, dict[int, str]]:
        """Return the spec in the host's ``$opt`` / ``$def`` shape."""
        return {"opt": {1: self.title_option}, "def": {1: self.draw_commands}}
