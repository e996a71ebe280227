"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``HAIRSTYLEX_*`` prefix
  3. TOML file    — ``hairstylex.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource`; where
the file lives and how paths resolve is :mod:`hairstylex.config.discovery`.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from hairstylex.config.discovery import locate_config, read_toml, resolve_data_path
from hairstylex.config.models import DataConfig, DisplayConfig, PluginsConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``hairstylex.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = read_toml(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class HairstylexSettings(BaseSettings):
    """Unified settings for the hairstylex CLI.

    Merges CLI flags, environment variables, TOML config sections,
    and code-baked defaults into a single frozen object.

    Attributes:
        project_root: Directory relative paths resolve against (parent of
            ``hairstylex.toml``, or CWD if no config found).
        config_path: The TOML file in effect, or None.
        data_file: ``--data-file`` override for ``[data] file``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "HAIRSTYLEX_",
        "env_nested_delimiter": "__",
    }

    # --- Resolved paths (not in TOML) ---
    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None
    data_file: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_interact: bool = False
    no_save: bool = False

    # --- TOML sections ---
    data: DataConfig = Field(default_factory=DataConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @property
    def data_path(self) -> Path:
        """Absolute path of the snapshot file."""
        return resolve_data_path(self.project_root, self.data.file, self.data_file)

    @property
    def autosave(self) -> bool:
        """Whether successful mutations are written back to the data file."""
        return self.data.autosave and not self.no_save

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        data_file: str | None = None,
        **cli_flags: Any,
    ) -> HairstylexSettings:
        """Construct settings from a CLI invocation.

        Discovers ``hairstylex.toml`` via walk-up (or explicit *config_path*),
        resolves *project_root* from the config file's parent directory,
        and merges CLI flags as highest-priority overrides.
        """
        location = locate_config(config_path, project_root)
        toml_path = location.config_path
        resolved_root = project_root if project_root is not None else location.root

        # Unset flags stay out of the init kwargs so env vars and TOML can supply them.
        overrides: dict[str, Any] = {k: v for k, v in cli_flags.items() if v}
        if data_file is not None:
            overrides["data_file"] = Path(data_file)

        _tls.toml_path = toml_path
        try:
            return cls(
                project_root=resolved_root,
                config_path=toml_path,
                **overrides,
            )
        finally:
            _tls.toml_path = None
