"""Display labels in the version-control client's own wording."""

from typing import Dict, List, Tuple

from ..models import ChangeType, ItemType, LockLevel
from ..protocols import ExtendedItemProtocol

# Bit order, as the client lists change kinds.
CHANGE_TYPE_LABELS: Tuple[Tuple[ChangeType, str], ...] = (
    (ChangeType.ADD, "add"),
    (ChangeType.EDIT, "edit"),
    (ChangeType.ENCODING, "encoding"),
    (ChangeType.RENAME, "rename"),
    (ChangeType.DELETE, "delete"),
    (ChangeType.UNDELETE, "undelete"),
    (ChangeType.BRANCH, "branch"),
    (ChangeType.MERGE, "merge"),
    (ChangeType.LOCK, "lock"),
    (ChangeType.ROLLBACK, "rollback"),
    (ChangeType.SOURCE_RENAME, "source rename"),
    (ChangeType.TARGET_RENAME, "target rename"),
    (ChangeType.PROPERTY, "property"),
)

ITEM_TYPE_LABELS: Dict[ItemType, str] = {
    ItemType.ANY: "any",
    ItemType.FOLDER: "folder",
    ItemType.FILE: "file",
}

LOCK_LEVEL_LABELS: Dict[LockLevel, str] = {
    LockLevel.NONE: "none",
    LockLevel.CHECKIN: "check-in",
    LockLevel.CHECKOUT: "check-out",
    LockLevel.UNCHANGED: "unchanged",
}


class VendorLabelRenderer:
    """Renders change, item type and lock labels the way the client UI does."""

    def __init__(self, separator: str = ", "):
        self.separator = separator

    def render_change(self, change_type: int, item: ExtendedItemProtocol) -> str:
        labels: List[str] = []
        for kind, label in CHANGE_TYPE_LABELS:
            if not ChangeType.contains(change_type, kind):
                continue
            # Folders have no encoding to change
            if kind == ChangeType.ENCODING and item.item_type == ItemType.FOLDER:
                continue
            labels.append(label)
        return self.separator.join(labels)

    def render_item_type(self, item_type: ItemType) -> str:
        return ITEM_TYPE_LABELS[ItemType(item_type)]

    def render_lock_level(self, lock_level: LockLevel) -> str:
        return LOCK_LEVEL_LABELS[LockLevel(lock_level)]
