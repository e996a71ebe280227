"""Integration tests — event dispatch from services to plugins."""

from __future__ import annotations

from hairstylex.services.create import CreateService
from hairstylex.services.delete import DeleteService
from hairstylex.services.update import UpdateService
from tests.services.conftest import RecordingPlugin, add_alice, add_ben, add_carol


class TestLifecycleHooks:
    def test_post_add(self, creator: CreateService, recorder: RecordingPlugin) -> None:
        add_alice(creator)
        add_carol(creator)
        assert recorder.calls == [
            ("post_add", {"kind": "client", "entity_id": 1, "name": "Alice Tan"}),
            ("post_add", {"kind": "person", "entity_id": None, "name": "Carol Lee"}),
        ]

    def test_post_edit(
        self, creator: CreateService, updater: UpdateService, recorder: RecordingPlugin
    ) -> None:
        add_ben(creator)
        updater.edit_hairdresser(1, {"title": "Lead"})
        assert recorder.calls[-1] == (
            "post_edit",
            {"kind": "hairdresser", "entity_id": 1, "fields_changed": ["title"]},
        )

    def test_post_delete(
        self, creator: CreateService, deleter: DeleteService, recorder: RecordingPlugin
    ) -> None:
        add_alice(creator)
        deleter.delete_client(1)
        assert recorder.calls[-1] == (
            "post_delete",
            {"kind": "client", "entity_id": 1, "name": "Alice Tan"},
        )

    def test_post_reset_receives_removed_counts(
        self, creator: CreateService, deleter: DeleteService, recorder: RecordingPlugin
    ) -> None:
        add_alice(creator)
        deleter.clear()
        assert recorder.calls[-1] == (
            "post_reset",
            {"counts": {"persons": 0, "clients": 1, "hairdressers": 0}},
        )

    def test_failures_dispatch_nothing(
        self, creator: CreateService, updater: UpdateService, recorder: RecordingPlugin
    ) -> None:
        add_alice(creator)
        recorder.calls.clear()
        creator.add_client(
            "Alice Tan", phone="91112222", email="a@example.com", gender="F", address="x"
        )
        updater.edit_client(1, {})
        updater.edit_client(5, {"address": "y"})
        assert recorder.calls == []
