"""Mock implementation of LabelRendererProtocol for development and testing."""

from ..models import ChangeType, ItemType, LockLevel
from ..protocols import ExtendedItemProtocol


class MockLabelRenderer:
    """Deterministic labels built from enum names."""

    def render_change(self, change_type: int, item: ExtendedItemProtocol) -> str:
        names = [
            kind.name
            for kind in ChangeType
            if kind != ChangeType.NONE and ChangeType.contains(change_type, kind)
        ]
        return "|".join(names)

    def render_item_type(self, item_type: ItemType) -> str:
        return ItemType(item_type).name

    def render_lock_level(self, lock_level: LockLevel) -> str:
        return LockLevel(lock_level).name
