"""Conversion from client objects to host-side records."""

import itertools
import os
from datetime import datetime, tzinfo
from typing import Iterable, Iterator, List, Optional, Tuple

from ..models import (
    ENCODING_UNCHANGED,
    ChangeType,
    ItemSpec,
    ItemType,
    RecursionType,
)
from ..protocols import (
    ExtendedItemProtocol,
    LabelRendererProtocol,
    PendingChangeProtocol,
    PendingSetProtocol,
)
from ..schemas import (
    TfsItemInfo,
    TfsLocalPath,
    TfsPendingChange,
    TfsServerPath,
    TfsServerStatusType,
)

# Ordered pairs, not a dict: output order must follow this table.
PENDING_CHANGE_TYPE_MAP: Tuple[Tuple[ChangeType, TfsServerStatusType], ...] = (
    (ChangeType.ADD, TfsServerStatusType.ADD),
    (ChangeType.EDIT, TfsServerStatusType.EDIT),
    (ChangeType.ENCODING, TfsServerStatusType.UNKNOWN),
    (ChangeType.RENAME, TfsServerStatusType.RENAME),
    (ChangeType.DELETE, TfsServerStatusType.DELETE),
    (ChangeType.UNDELETE, TfsServerStatusType.UNDELETE),
    (ChangeType.BRANCH, TfsServerStatusType.BRANCH),
    (ChangeType.MERGE, TfsServerStatusType.MERGE),
    (ChangeType.LOCK, TfsServerStatusType.LOCK),
    (ChangeType.ROLLBACK, TfsServerStatusType.UNKNOWN),
    (ChangeType.SOURCE_RENAME, TfsServerStatusType.RENAME),
    (ChangeType.TARGET_RENAME, TfsServerStatusType.UNKNOWN),
    (ChangeType.PROPERTY, TfsServerStatusType.EDIT),
)


class UnknownPathTypeError(RuntimeError):
    """Raised for a path value that is neither a local nor a server path."""

    def __init__(self, path: object):
        super().__init__(f"Unknown path type: {path!r}")
        self.path = path


def format_iso_timestamp(value: datetime, tz: Optional[tzinfo] = None) -> str:
    """
    Format an instant as ``yyyy-MM-ddTHH:mm:ss.SSS+HHMM``.

    Naive values are taken as local wall time. The instant is rendered in
    ``tz``, or in the system local zone when ``tz`` is None. Milliseconds
    are truncated.
    """
    local = value.astimezone(tz)
    # Offset seconds are dropped, leaving whole minutes.
    offset_seconds = int(local.utcoffset().total_seconds())
    sign = "-" if offset_seconds < 0 else "+"
    offset_hours, offset_minutes = divmod(abs(offset_seconds) // 60, 60)
    return (
        f"{local.year:04d}-{local.month:02d}-{local.day:02d}"
        f"T{local.hour:02d}:{local.minute:02d}:{local.second:02d}"
        f".{local.microsecond // 1000:03d}"
        f"{sign}{offset_hours:02d}{offset_minutes:02d}"
    )


def to_change_types(change_type: int) -> List[TfsServerStatusType]:
    """Decode a ChangeType bitmask into host statuses, in table order."""
    return [
        status
        for kind, status in PENDING_CHANGE_TYPE_MAP
        if ChangeType.contains(change_type, kind)
    ]


def to_pending_change(
    pending_set: PendingSetProtocol,
    pc: PendingChangeProtocol,
    tz: Optional[tzinfo] = None,
) -> TfsPendingChange:
    return TfsPendingChange(
        server_item=pc.server_item,
        local_item=pc.local_item,
        version=pc.version,
        owner=pc.pending_set_owner,
        date=format_iso_timestamp(pc.creation_date, tz),
        lock=pc.lock_level_name,
        change_types=tuple(to_change_types(pc.change_type)),
        workspace=pending_set.name,
        computer=pending_set.computer,
        is_candidate=pc.is_candidate,
        source_item=pc.source_server_item,
    )


class PendingChangeSequence:
    """
    Lazy view of all pending changes of a pending set.

    Each iteration converts the regular changes first, then the candidate
    changes, both in the order the pending set holds them.
    """

    def __init__(self, pending_set: PendingSetProtocol, tz: Optional[tzinfo] = None):
        self.pending_set = pending_set
        self.tz = tz

    def _candidates(self) -> Iterable[PendingChangeProtocol]:
        return self.pending_set.candidate_pending_changes or ()

    def __iter__(self) -> Iterator[TfsPendingChange]:
        return (
            to_pending_change(self.pending_set, pc, self.tz)
            for pc in itertools.chain(
                self.pending_set.pending_changes, self._candidates()
            )
        )

    def __len__(self) -> int:
        return len(self.pending_set.pending_changes) + len(list(self._candidates()))


def to_pending_changes(
    pending_set: PendingSetProtocol, tz: Optional[tzinfo] = None
) -> PendingChangeSequence:
    return PendingChangeSequence(pending_set, tz)


def canonicalize_local_path(path: str) -> str:
    """Absolute, normalized form of a local path without a trailing separator."""
    return os.path.normpath(os.path.abspath(path))


def to_canonical_path_string(path: object) -> str:
    if isinstance(path, TfsLocalPath):
        return canonicalize_local_path(path.path)
    if isinstance(path, TfsServerPath):
        return path.path
    raise UnknownPathTypeError(path)


def to_canonical_path_item_spec(
    path: object, recursion_type: RecursionType
) -> ItemSpec:
    return ItemSpec(item=to_canonical_path_string(path), recursion=recursion_type)


def to_canonical_path_item_specs(
    paths: Iterable[object], recursion_type: RecursionType
) -> List[ItemSpec]:
    return [to_canonical_path_item_spec(path, recursion_type) for path in paths]


def _file_encoding_name(item: ExtendedItemProtocol) -> Optional[str]:
    if item.item_type != ItemType.FILE:
        return None
    encoding = item.encoding
    if encoding is None or encoding.code_page == ENCODING_UNCHANGED:
        return None
    return encoding.name


def to_item_info(
    item: ExtendedItemProtocol,
    renderer: LabelRendererProtocol,
    tz: Optional[tzinfo] = None,
) -> TfsItemInfo:
    """Flatten extended item metadata. Labels come from ``renderer``."""
    if item.pending_change == ChangeType.NONE:
        change = "none"
    else:
        change = renderer.render_change(item.pending_change, item)

    checkin_date = (
        format_iso_timestamp(item.checkin_date, tz)
        if item.checkin_date is not None
        else None
    )

    return TfsItemInfo(
        server_item=item.target_server_item,
        local_item=item.local_item,
        local_version=item.local_version,
        server_version=item.latest_version,
        change=change,
        type=renderer.render_item_type(item.item_type),
        lock=renderer.render_lock_level(item.lock_level),
        lock_owner=item.lock_owner,
        deletion_id=item.deletion_id,
        checkin_date=checkin_date,
        file_encoding=_file_encoding_name(item),
    )
