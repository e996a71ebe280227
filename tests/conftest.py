"""Shared pytest fixtures and test helpers for hairstylex tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner

from hairstylex.domain.entities import Client, Hairdresser, Person
from hairstylex.plugins.builtins.audit import AuditPlugin
from hairstylex.plugins.event_bus import EventBus
from hairstylex.plugins.manager import PluginManager
from hairstylex.services.telemetry import disable_telemetry
from hairstylex.store.model import StoreModel


@pytest.fixture(autouse=True)
def _reset_ambient_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Undo process-wide state that CLI invocations leave behind.

    AppContext reconfigures logging and may enable telemetry; both outlive
    a CliRunner invocation unless restored here.
    """
    for var in ("HAIRSTYLEX_CONFIG", "HAIRSTYLEX_DATA__FILE", "HAIRSTYLEX_QUIET"):
        monkeypatch.delenv(var, raising=False)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    app_level = logging.getLogger("hairstylex").level
    try:
        yield
    finally:
        disable_telemetry()
        structlog.contextvars.clear_contextvars()
        root.handlers[:] = handlers
        root.setLevel(level)
        logging.getLogger("hairstylex").setLevel(app_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from an empty temp directory (no config, no data file).

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command test
    classes. The data file lands at ``tmp_path / "data" / "hairstylex.json"``.
    """
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def model() -> Iterator[StoreModel]:
    """Empty store model."""
    m = StoreModel()
    try:
        yield m
    finally:
        m.close()


@pytest.fixture
def plugin_manager() -> PluginManager:
    """Plugin manager with only the audit plugin (no entry-point discovery)."""
    pm = PluginManager()
    pm.register_plugin(AuditPlugin(), name="audit")
    return pm


@pytest.fixture
def event_bus(plugin_manager: PluginManager) -> EventBus:
    return EventBus(plugin_manager)


# ---------------------------------------------------------------------------
# Shared test helpers (record builders)
# ---------------------------------------------------------------------------


def details(
    name: str = "Alice Tan",
    phone: str = "91112222",
    *,
    email: str | None = None,
    gender: str = "F",
    tags: list[str] | None = None,
) -> dict[str, Any]:
    """Raw PersonDetails data; the email defaults to one derived from *name*."""
    return {
        "name": name,
        "phone": phone,
        "email": email or f"{name.split()[0].lower()}@example.com",
        "gender": gender,
        "tags": tags or [],
    }


def make_person(name: str = "Alice Tan", phone: str = "91112222", **kwargs: Any) -> Person:
    return Person.model_validate({"details": details(name, phone, **kwargs)})


def make_client(
    client_id: int = 1,
    name: str = "Alice Tan",
    phone: str = "91112222",
    *,
    address: str = "Blk 1 Clementi Ave 2",
    **kwargs: Any,
) -> Client:
    return Client.model_validate(
        {"id": client_id, "address": address, "details": details(name, phone, **kwargs)}
    )


def make_hairdresser(
    hairdresser_id: int = 1,
    name: str = "Ben Ong",
    phone: str = "81234567",
    *,
    title: str = "Senior Stylist",
    specialisations: list[str] | None = None,
    **kwargs: Any,
) -> Hairdresser:
    return Hairdresser.model_validate(
        {
            "id": hairdresser_id,
            "title": title,
            "specialisations": specialisations or [],
            "details": details(name, phone, **kwargs),
        }
    )


CLIENT_ARGS = [
    "client",
    "add",
    "Alice Tan",
    "--phone",
    "91112222",
    "--email",
    "alice@example.com",
    "--gender",
    "F",
    "--address",
    "Blk 1 Clementi Ave 2",
]

HAIRDRESSER_ARGS = [
    "hairdresser",
    "add",
    "Ben Ong",
    "--phone",
    "81234567",
    "--email",
    "ben@example.com",
    "--gender",
    "M",
    "--title",
    "Senior Stylist",
]

PERSON_ARGS = [
    "person",
    "add",
    "Carol Lee",
    "--phone",
    "87654321",
    "--email",
    "carol@example.com",
    "--gender",
    "F",
]
