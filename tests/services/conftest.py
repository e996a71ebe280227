"""Service-layer fixtures: services bound to a fresh model and event bus."""

from __future__ import annotations

from typing import Any

import pytest

from hairstylex.plugins.event_bus import EventBus
from hairstylex.plugins.hookspecs import hookimpl
from hairstylex.plugins.manager import PluginManager
from hairstylex.services.create import CreateService
from hairstylex.services.delete import DeleteService
from hairstylex.services.query import QueryService
from hairstylex.services.update import UpdateService
from hairstylex.store.model import StoreModel


class RecordingPlugin:
    """Plugin that records every hook call for verification."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []

    @hookimpl
    def post_add(self, kind: str, entity_id: int | None, name: str) -> None:
        self.calls.append(("post_add", {"kind": kind, "entity_id": entity_id, "name": name}))

    @hookimpl
    def post_edit(self, kind: str, entity_id: int | None, fields_changed: list[str]) -> None:
        self.calls.append(
            (
                "post_edit",
                {"kind": kind, "entity_id": entity_id, "fields_changed": fields_changed},
            )
        )

    @hookimpl
    def post_delete(self, kind: str, entity_id: int | None, name: str) -> None:
        self.calls.append(("post_delete", {"kind": kind, "entity_id": entity_id, "name": name}))

    @hookimpl
    def post_reset(self, counts: dict[str, int]) -> None:
        self.calls.append(("post_reset", {"counts": counts}))


@pytest.fixture
def recorder(plugin_manager: PluginManager) -> RecordingPlugin:
    plugin = RecordingPlugin()
    plugin_manager.register_plugin(plugin, name="recorder")
    return plugin


@pytest.fixture
def creator(model: StoreModel, event_bus: EventBus) -> CreateService:
    return CreateService(model, event_bus=event_bus)


@pytest.fixture
def updater(model: StoreModel, event_bus: EventBus) -> UpdateService:
    return UpdateService(model, event_bus=event_bus)


@pytest.fixture
def deleter(model: StoreModel, event_bus: EventBus) -> DeleteService:
    return DeleteService(model, event_bus=event_bus)


@pytest.fixture
def query(model: StoreModel) -> QueryService:
    return QueryService(model)


def add_alice(creator: CreateService, **overrides: Any) -> None:
    kwargs: dict[str, Any] = {
        "phone": "91112222",
        "email": "alice@example.com",
        "gender": "F",
        "address": "Blk 1 Clementi Ave 2",
    }
    name = overrides.pop("name", "Alice Tan")
    kwargs.update(overrides)
    result = creator.add_client(name, **kwargs)
    assert result.ok, result.error


def add_ben(creator: CreateService, **overrides: Any) -> None:
    kwargs: dict[str, Any] = {
        "phone": "81234567",
        "email": "ben@example.com",
        "gender": "M",
        "title": "Senior Stylist",
    }
    name = overrides.pop("name", "Ben Ong")
    kwargs.update(overrides)
    result = creator.add_hairdresser(name, **kwargs)
    assert result.ok, result.error


def add_carol(creator: CreateService, **overrides: Any) -> None:
    kwargs: dict[str, Any] = {
        "phone": "87654321",
        "email": "carol@example.com",
        "gender": "F",
    }
    name = overrides.pop("name", "Carol Lee")
    kwargs.update(overrides)
    result = creator.add_person(name, **kwargs)
    assert result.ok, result.error
