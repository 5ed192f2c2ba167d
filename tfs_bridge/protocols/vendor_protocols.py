"""Protocols describing the client objects read by the adapter."""

from datetime import datetime
from typing import Optional, Protocol, Sequence, runtime_checkable

from ..models import FileEncoding, ItemType, LockLevel


@runtime_checkable
class PendingChangeProtocol(Protocol):
    """Protocol for a single pending change."""

    @property
    def server_item(self) -> str: ...

    @property
    def local_item(self) -> Optional[str]: ...

    @property
    def version(self) -> int: ...

    @property
    def pending_set_owner(self) -> str: ...

    @property
    def creation_date(self) -> datetime: ...

    @property
    def lock_level_name(self) -> str: ...

    @property
    def change_type(self) -> int:
        """ChangeType bitmask."""
        ...

    @property
    def is_candidate(self) -> bool: ...

    @property
    def source_server_item(self) -> Optional[str]: ...


@runtime_checkable
class PendingSetProtocol(Protocol):
    """Protocol for the pending changes of one workspace."""

    @property
    def name(self) -> str:
        """Workspace name."""
        ...

    @property
    def computer(self) -> str:
        """Host the workspace lives on."""
        ...

    @property
    def pending_changes(self) -> Sequence[PendingChangeProtocol]: ...

    @property
    def candidate_pending_changes(self) -> Optional[Sequence[PendingChangeProtocol]]:
        """Detected but not pended changes. May be None."""
        ...


@runtime_checkable
class ExtendedItemProtocol(Protocol):
    """Protocol for extended item metadata."""

    @property
    def target_server_item(self) -> str: ...

    @property
    def local_item(self) -> Optional[str]: ...

    @property
    def local_version(self) -> int: ...

    @property
    def latest_version(self) -> int: ...

    @property
    def pending_change(self) -> int: ...

    @property
    def item_type(self) -> ItemType: ...

    @property
    def lock_level(self) -> LockLevel: ...

    @property
    def lock_owner(self) -> Optional[str]: ...

    @property
    def deletion_id(self) -> int: ...

    @property
    def checkin_date(self) -> Optional[datetime]: ...

    @property
    def encoding(self) -> Optional[FileEncoding]: ...
