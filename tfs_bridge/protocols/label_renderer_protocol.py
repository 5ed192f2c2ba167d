"""Label renderer protocol interface."""

from typing import Protocol, runtime_checkable

from ..models import ItemType, LockLevel
from .vendor_protocols import ExtendedItemProtocol


@runtime_checkable
class LabelRendererProtocol(Protocol):
    """Protocol for turning client enums into display text."""

    def render_change(self, change_type: int, item: ExtendedItemProtocol) -> str:
        """Human-readable label for a non-empty ChangeType bitmask."""
        ...

    def render_item_type(self, item_type: ItemType) -> str:
        """Label for an item type."""
        ...

    def render_lock_level(self, lock_level: LockLevel) -> str:
        """Label for a lock level."""
        ...
