"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy loading of the store model, the plugin
event bus, and centralized result emission (stdout/stderr routing, exit
codes, and autosave).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import click

from hairstylex.config.logging import configure_logging
from hairstylex.output.formatters import OutputSettings, format_result
from hairstylex.services.telemetry import disable_telemetry, enable_telemetry

if TYPE_CHECKING:
    from hairstylex.config.settings import HairstylexSettings
    from hairstylex.plugins.event_bus import EventBus
    from hairstylex.services.base import BaseService
    from hairstylex.services.result import ServiceResult
    from hairstylex.store.model import StoreModel

_S = TypeVar("_S", bound="BaseService")


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The store model is loaded on first use so ``--help`` and ``--examples``
    never touch the data file. The interactive shell keeps one AppContext
    (and therefore one model) for the whole session.
    """

    def __init__(self, settings: HairstylexSettings) -> None:
        self.settings = settings
        self._model: StoreModel | None = None
        self._event_bus: EventBus | None = None

        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )
        if settings.verbose:
            enable_telemetry()
        else:
            disable_telemetry()

    @property
    def model(self) -> StoreModel:
        """The store model (loaded from the data file on first access)."""
        if self._model is None:
            from hairstylex.infrastructure.storage import DataLoadError, load_snapshot
            from hairstylex.store.errors import StoreError
            from hairstylex.store.model import StoreModel

            path = self.settings.data_path
            try:
                self._model = StoreModel(load_snapshot(path))
            except DataLoadError as exc:
                raise click.ClickException(str(exc)) from exc
            except StoreError as exc:
                msg = f"Invalid data file {path}: {exc}"
                raise click.ClickException(msg) from exc
        return self._model

    @property
    def event_bus(self) -> EventBus:
        """Plugin event bus (entry-point plugins plus enabled built-ins)."""
        if self._event_bus is None:
            from hairstylex.plugins.builtins.audit import AuditPlugin
            from hairstylex.plugins.event_bus import EventBus
            from hairstylex.plugins.manager import PluginManager

            pm = PluginManager()
            pm.discover_and_load()
            if self.settings.plugins.audit:
                pm.register_plugin(AuditPlugin(), name="audit")
            self._event_bus = EventBus(pm)
        return self._event_bus

    def service(self, service_cls: type[_S]) -> _S:
        """Build a service bound to this context's model and event bus."""
        return service_cls(self.model, event_bus=self.event_bus)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            max_rows=self.settings.display.max_rows,
            show_tags=self.settings.display.show_tags,
        )

    @property
    def interactive(self) -> bool:
        """Whether confirmation prompts may be shown."""
        return not self.settings.no_interact and not self.settings.json_output

    def save(self) -> None:
        """Write the model back to the data file if it changed and autosave is on."""
        if self._model is None or not self._model.dirty or not self.settings.autosave:
            return
        from hairstylex.infrastructure.storage import DataSaveError, save_snapshot

        try:
            save_snapshot(self._model.get_address_book(), self.settings.data_path)
        except DataSaveError as exc:
            raise click.ClickException(str(exc)) from exc
        self._model.mark_saved()

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): saves pending changes, then writes to
          stdout. Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            self.save()
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def close(self) -> None:
        if self._model is not None:
            self._model.close()
            self._model = None
