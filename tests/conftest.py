"""Pytest fixtures for owmgraph tests."""

from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from owmgraph.config import OwmGraphConfig, GlobalConfig, GraphConfig
from owmgraph.core.context import OwmGraphContext
from owmgraph.core.output import OutputFormat
from owmgraph.template.models import GraphContext, SeriesDescriptor


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep OWMGRAPH_* variables and stray config files out of tests."""
    for name in (
        "OWMGRAPH_CONFIG",
        "OWMGRAPH_CONSOLIDATION",
        "OWMGRAPH_LINE_WIDTH",
        "OWMGRAPH_COLOR_ALPHA",
        "OWMGRAPH_LEGEND_WIDTH",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def graph_context() -> GraphContext:
    return GraphContext(host_display_name="host1", service_display_name="weather")


@pytest.fixture
def weather_series() -> list[SeriesDescriptor]:
    """Typical check_openweathermap data series."""
    names = [
        ("temp", "Temperature", "C"),
        ("humidity", "Humidity", "%"),
        ("pressure", "Pressure", "hPa"),
        ("wind_speed", "Wind speed (average over interval)", "m/s"),
    ]
    return [
        SeriesDescriptor(
            key=key,
            rrd_file=f"/var/lib/pnp4nagios/host1/weather_{ds}.rrd",
            data_source_name=ds,
            display_name=name,
            unit=unit,
            template="check_openweathermap",
        )
        for key, (ds, name, unit) in enumerate(names, start=1)
    ]


@pytest.fixture
def mock_config() -> OwmGraphConfig:
    """Create a mock configuration."""
    return OwmGraphConfig(
        global_settings=GlobalConfig(output_format=OutputFormat.JSON, color="never"),
        graph=GraphConfig(line_width=1, color_alpha="ff"),
    )


@pytest.fixture
def mock_context(mock_config: OwmGraphConfig) -> OwmGraphContext:
    """Create a mock owmgraph context."""
    return OwmGraphContext(
        config=mock_config,
        output_format=OutputFormat.TABLE,
        verbose=0,
        quiet=False,
        color=False,
    )


@pytest.fixture
def request_file(tmp_path: Path) -> Path:
    """Write a render request document in the host's DS layout."""
    content = {
        "context": {"DISP_HOSTNAME": "host1", "DISP_SERVICEDESC": "weather"},
        "series": {
            1: {
                "RRDFILE": "a.rrd",
                "DS": "temp",
                "NAME": "Temperature",
                "UNIT": "C",
                "TEMPLATE": "check_openweathermap",
            },
            2: {
                "RRDFILE": "b.rrd",
                "DS": "humidity",
                "NAME": "Humidity",
                "UNIT": "%",
                "TEMPLATE": "check_openweathermap",
            },
        },
    }
    path = tmp_path / "request.yaml"
    path.write_text(yaml.dump(content))
    return path
