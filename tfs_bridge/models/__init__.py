"""Models for the application."""

from .snapshots import ExtendedItemSnapshot, PendingChangeSnapshot, PendingSetSnapshot
from .vendor_types import (
    ENCODING_UNCHANGED,
    ChangeType,
    FileEncoding,
    ItemSpec,
    ItemType,
    LockLevel,
    RecursionType,
)

__all__ = [
    "ENCODING_UNCHANGED",
    "ChangeType",
    "ExtendedItemSnapshot",
    "FileEncoding",
    "ItemSpec",
    "ItemType",
    "LockLevel",
    "PendingChangeSnapshot",
    "PendingSetSnapshot",
    "RecursionType",
]
