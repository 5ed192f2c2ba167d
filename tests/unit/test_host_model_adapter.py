"""Unit tests for HostModelAdapter and Settings."""

from datetime import datetime, timedelta, timezone
from unittest.mock import Mock, patch
from zoneinfo import ZoneInfoNotFoundError

import pytest

from tfs_bridge.config.settings import Settings
from tfs_bridge.models import (
    ChangeType,
    ExtendedItemSnapshot,
    ItemSpec,
    ItemType,
    PendingChangeSnapshot,
    PendingSetSnapshot,
    RecursionType,
)
from tfs_bridge.schemas import TfsServerPath
from tfs_bridge.services import (
    HostModelAdapter,
    MockLabelRenderer,
    UnknownPathTypeError,
    VendorLabelRenderer,
)

INSTANT = datetime(2022, 3, 4, 5, 6, 7, 123000, tzinfo=timezone.utc)


def make_set(name, *server_items):
    return PendingSetSnapshot(
        name=name,
        computer="HOST",
        pending_changes=[
            PendingChangeSnapshot(
                server_item=item,
                creation_date=INSTANT,
                change_type=int(ChangeType.EDIT),
            )
            for item in server_items
        ],
    )


class TestHostModelAdapter:
    """Test cases for HostModelAdapter."""

    def setup_method(self):
        """Set up test fixtures."""
        self.tz = timezone(timedelta(hours=1))
        self.adapter = HostModelAdapter(renderer=MockLabelRenderer(), tz=self.tz)

    def test_pending_changes_use_zone(self):
        result = list(self.adapter.pending_changes(make_set("ws", "$/a")))

        assert len(result) == 1
        assert result[0].date == "2022-03-04T06:06:07.123+0100"

    def test_pending_changes_for_sets_keeps_order(self):
        result = self.adapter.pending_changes_for_sets(
            [make_set("ws1", "$/a", "$/b"), make_set("ws2", "$/c")]
        )

        assert [(r.workspace, r.server_item) for r in result] == [
            ("ws1", "$/a"),
            ("ws1", "$/b"),
            ("ws2", "$/c"),
        ]

    def test_item_infos(self):
        items = [
            ExtendedItemSnapshot(target_server_item="$/a", item_type=ItemType.FOLDER),
            ExtendedItemSnapshot(
                target_server_item="$/b", pending_change=int(ChangeType.DELETE)
            ),
        ]

        result = self.adapter.item_infos(items)

        assert [(r.server_item, r.change, r.type) for r in result] == [
            ("$/a", "none", "FOLDER"),
            ("$/b", "DELETE", "FILE"),
        ]

    def test_canonical_path_and_item_spec(self):
        path = TfsServerPath(path="$/proj")

        assert self.adapter.canonical_path(path) == "$/proj"
        assert self.adapter.item_spec(path, RecursionType.FULL) == ItemSpec(
            item="$/proj", recursion=RecursionType.FULL
        )

    def test_unknown_path_propagates(self):
        with pytest.raises(UnknownPathTypeError):
            self.adapter.canonical_path(Mock())

    @patch("builtins.print")
    def test_from_settings(self, mock_print):
        settings = Settings(DEBUG=False, DISPLAY_TIMEZONE="")

        adapter = HostModelAdapter.from_settings(settings)

        assert isinstance(adapter.renderer, VendorLabelRenderer)
        assert adapter.tz is None


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DEBUG", raising=False)
        monkeypatch.delenv("DISPLAY_TIMEZONE", raising=False)

        settings = Settings()

        assert settings.DEBUG is False
        assert settings.DISPLAY_TIMEZONE == ""
        assert settings.display_tzinfo() is None

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "true")

        assert Settings().DEBUG is True

    def test_unknown_zone_raises(self):
        settings = Settings(DISPLAY_TIMEZONE="Nowhere/Atlantis")

        with pytest.raises(ZoneInfoNotFoundError):
            settings.display_tzinfo()
