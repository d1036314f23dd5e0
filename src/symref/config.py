"""
Configuration for symref.

Settings come from ``SYMREF_*`` environment variables, a ``.env`` file, or
a YAML file passed explicitly. Every field is a formatting or visibility
switch; none of them change how comments are parsed.

Examples:
    >>> settings = SymrefSettings(include_all=True, searchable=True)
    >>> settings.render_options().searchable
    True

    Loading from YAML::

        # symref.yaml
        include_all: false
        output_format: markdown
        show_tags: false

    >>> settings = SymrefSettings.from_yaml(Path("symref.yaml"))
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from symref.errors import InvalidConfigError, MissingConfigError
from symref.renderers.base import RenderOptions


class SymrefSettings(BaseSettings):
    """Settings for building and rendering a reference document.

    Fields
    ──────
    include_all    : Keep host built-ins, not only user-defined symbols
    output_format  : ``html`` or ``markdown``
    searchable     : Emit the search input (HTML)
    script_src     : Script referenced by the trailer (HTML, None = no trailer)
    show_tags      : Emit comment tags under each symbol
    show_locations : Emit file/line locations
    log_level      : Structlog log level
    json_logs      : JSON log lines (None = auto, JSON when stderr is not a tty)
    """

    model_config = SettingsConfigDict(
        env_prefix="SYMREF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Document ─────────────────────────────────────────────────
    include_all: bool = False

    # ── Rendering ────────────────────────────────────────────────
    output_format: Literal["html", "markdown"] = "html"
    searchable: bool = False
    script_src: str | None = None
    show_tags: bool = True
    show_locations: bool = True

    # ── Observability ────────────────────────────────────────────
    log_level: str = Field(default="INFO", description="Structlog log level")
    json_logs: bool | None = None

    @classmethod
    def from_yaml(cls, yaml_path: Path, **overrides: Any) -> SymrefSettings:
        """Load settings from a YAML file.

        Args:
            yaml_path: Path to YAML configuration file
            **overrides: Values that win over the file (None values are ignored)

        Returns:
            SymrefSettings instance

        Raises:
            MissingConfigError: If the file does not exist
            InvalidConfigError: If the file is not a YAML mapping or fails validation
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise MissingConfigError(str(yaml_path), f"Config file not found: {yaml_path}")

        try:
            with open(yaml_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise InvalidConfigError(str(yaml_path), "<unparseable>", cause=e) from e

        if not isinstance(data, dict):
            raise InvalidConfigError(
                str(yaml_path), data, f"Config file {yaml_path} must contain a mapping"
            )

        data.update({key: value for key, value in overrides.items() if value is not None})
        try:
            return cls(**data)
        except ValidationError as e:
            raise InvalidConfigError(str(yaml_path), data, str(e), cause=e) from e

    def render_options(self) -> RenderOptions:
        """Formatting flags for the renderer."""
        return RenderOptions(
            searchable=self.searchable,
            script_src=self.script_src,
            show_tags=self.show_tags,
            show_locations=self.show_locations,
        )
