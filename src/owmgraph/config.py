"""Configuration management for owmgraph using Pydantic."""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from owmgraph.core.exceptions import ConfigError
from owmgraph.core.output import OutputFormat
from owmgraph.core.logging import LogLevel


CONSOLIDATION_FUNCTIONS = ("AVERAGE", "MIN", "MAX", "LAST")


class GraphConfig(BaseModel):
    """Directive settings for the check_openweathermap graph.

    The defaults reproduce the stock PNP4Nagios template output.
    """

    consolidation: str = "AVERAGE"
    line_width: int = Field(default=2, ge=1, le=3)
    color_alpha: str = "80"
    legend_width: int = Field(default=16, ge=1)

    @field_validator("consolidation")
    @classmethod
    def validate_consolidation(cls, v: str) -> str:
        v = v.upper()
        if v not in CONSOLIDATION_FUNCTIONS:
            raise ValueError(f"consolidation must be one of: {', '.join(CONSOLIDATION_FUNCTIONS)}")
        return v

    @field_validator("color_alpha")
    @classmethod
    def validate_color_alpha(cls, v: str) -> str:
        v = v.upper()
        if len(v) != 2 or any(c not in "0123456789ABCDEF" for c in v):
            raise ValueError("color_alpha must be two hex digits")
        return v

    def _from_env(self, name: str, variable: str) -> Any:
        """Return ``name`` from ``variable`` if set, validated like a config value."""
        value = os.environ.get(variable)
        if not value:
            return getattr(self, name)
        try:
            overridden = GraphConfig.model_validate({**self.model_dump(), name: value})
        except ValueError as e:
            raise ConfigError(f"Invalid {variable}: {value}", details={"error": str(e)})
        return getattr(overridden, name)

    def get_consolidation(self) -> str:
        """Get DEF consolidation function from config or environment."""
        return self._from_env("consolidation", "OWMGRAPH_CONSOLIDATION")

    def get_line_width(self) -> int:
        """Get LINE width from config or environment."""
        return self._from_env("line_width", "OWMGRAPH_LINE_WIDTH")

    def get_color_alpha(self) -> str:
        """Get color alpha channel from config or environment."""
        return self._from_env("color_alpha", "OWMGRAPH_COLOR_ALPHA")

    def get_legend_width(self) -> int:
        """Get legend label width from config or environment."""
        return self._from_env("legend_width", "OWMGRAPH_LEGEND_WIDTH")


class GlobalConfig(BaseModel):
    """Global settings."""

    output_format: OutputFormat = OutputFormat.TABLE
    color: str = "auto"  # auto, always, never
    verbosity: LogLevel = LogLevel.WARNING

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: str) -> str:
        if v not in ("auto", "always", "never"):
            raise ValueError("color must be 'auto', 'always', or 'never'")
        return v


class OwmGraphConfig(BaseModel):
    """Main configuration model."""

    model_config = {"populate_by_name": True}

    version: str = "1"
    global_settings: GlobalConfig = Field(default_factory=GlobalConfig, alias="global")
    graph: GraphConfig = Field(default_factory=GraphConfig)


class ConfigLoader:
    """Loads the user, project and explicit config files, later ones winning."""

    CONFIG_FILENAMES = ["owmgraph.yaml", "owmgraph.yml", ".owmgraph.yaml", ".owmgraph.yml"]

    def load(self, config_file: str | Path | None = None) -> OwmGraphConfig:
        """Merge ``~/.owmgraph/config.yaml``, the nearest project file and ``config_file``."""
        paths = [Path.home() / ".owmgraph" / "config.yaml"]
        project_config = self._find_project_config()
        if project_config:
            paths.append(project_config)

        merged: dict[str, Any] = {}
        for path in paths:
            if path.exists():
                merged = deep_merge(merged, self._load_yaml_file(path))

        if config_file:
            config_path = Path(config_file)
            if not config_path.exists():
                raise ConfigError(f"Config file not found: {config_file}")
            merged = deep_merge(merged, self._load_yaml_file(config_path))

        try:
            return OwmGraphConfig(**merged)
        except ValueError as e:
            raise ConfigError(f"Invalid configuration: {e}")

    def _find_project_config(self) -> Path | None:
        """Find project config file in current or parent directories."""
        for directory in (Path.cwd(), *Path.cwd().parents):
            for filename in self.CONFIG_FILENAMES:
                if (directory / filename).exists():
                    return directory / filename
        return None

    def _load_yaml_file(self, path: Path) -> dict[str, Any]:
        try:
            with open(path) as f:
                content = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}")
        except OSError as e:
            raise ConfigError(f"Cannot read {path}: {e}")
        if not isinstance(content, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        return content


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into a copy of ``base``, recursing into nested mappings."""
    result = base.copy()
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(config_file: str | Path | None = None) -> OwmGraphConfig:
    """Load owmgraph configuration."""
    return ConfigLoader().load(config_file)


def get_default_config() -> OwmGraphConfig:
    """Get default configuration without loading from files."""
    return OwmGraphConfig()
