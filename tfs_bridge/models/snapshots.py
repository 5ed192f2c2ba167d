"""Read-only snapshots of client objects received over the host boundary.

Only the fields the adapter reads are carried. Any object exposing the
same attributes (see ``tfs_bridge.protocols``) converts the same way.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .vendor_types import FileEncoding, ItemType, LockLevel


class PendingChangeSnapshot(BaseModel):
    """One pending (or candidate) change on a single item."""

    model_config = ConfigDict(frozen=True)

    server_item: str
    local_item: Optional[str] = None
    version: int = 0
    pending_set_owner: str = ""
    creation_date: datetime
    lock_level_name: str = "none"
    change_type: int = Field(default=0, description="ChangeType bitmask")
    is_candidate: bool = False
    source_server_item: Optional[str] = None


class PendingSetSnapshot(BaseModel):
    """Pending changes of one workspace."""

    model_config = ConfigDict(frozen=True)

    name: str
    owner: str = ""
    computer: str = ""
    pending_changes: List[PendingChangeSnapshot] = Field(default_factory=list)
    candidate_pending_changes: Optional[List[PendingChangeSnapshot]] = None


class ExtendedItemSnapshot(BaseModel):
    """Extended metadata of a version-controlled item."""

    model_config = ConfigDict(frozen=True)

    target_server_item: str
    local_item: Optional[str] = None
    local_version: int = 0
    latest_version: int = 0
    pending_change: int = Field(default=0, description="ChangeType bitmask")
    item_type: ItemType = ItemType.FILE
    lock_level: LockLevel = LockLevel.NONE
    lock_owner: Optional[str] = None
    deletion_id: int = 0
    checkin_date: Optional[datetime] = None
    encoding: Optional[FileEncoding] = None
