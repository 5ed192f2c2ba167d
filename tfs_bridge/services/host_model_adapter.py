"""Converts batches of client objects for the host boundary."""

from datetime import tzinfo
from typing import Iterable, List, Optional

from ..config.settings import Settings
from ..models import ItemSpec, RecursionType
from ..protocols import (
    ExtendedItemProtocol,
    LabelRendererProtocol,
    PendingSetProtocol,
)
from ..schemas import TfsItemInfo, TfsPendingChange
from .data_conversion import (
    PendingChangeSequence,
    to_canonical_path_item_spec,
    to_canonical_path_string,
    to_item_info,
    to_pending_changes,
)
from .label_renderer_factory import create_label_renderer_from_settings


class HostModelAdapter:
    """Binds a label renderer and display zone to the conversion functions."""

    def __init__(
        self,
        renderer: LabelRendererProtocol,
        tz: Optional[tzinfo] = None,
    ):
        self.renderer = renderer
        self.tz = tz

    @classmethod
    def from_settings(cls, settings: Settings) -> "HostModelAdapter":
        return cls(
            renderer=create_label_renderer_from_settings(settings),
            tz=settings.display_tzinfo(),
        )

    def pending_changes(self, pending_set: PendingSetProtocol) -> PendingChangeSequence:
        return to_pending_changes(pending_set, self.tz)

    def pending_changes_for_sets(
        self, pending_sets: Iterable[PendingSetProtocol]
    ) -> List[TfsPendingChange]:
        """Flatten several pending sets, keeping the order they were given in."""
        changes: List[TfsPendingChange] = []
        for pending_set in pending_sets:
            changes.extend(self.pending_changes(pending_set))
        return changes

    def item_info(self, item: ExtendedItemProtocol) -> TfsItemInfo:
        return to_item_info(item, self.renderer, self.tz)

    def item_infos(self, items: Iterable[ExtendedItemProtocol]) -> List[TfsItemInfo]:
        return [self.item_info(item) for item in items]

    def canonical_path(self, path: object) -> str:
        return to_canonical_path_string(path)

    def item_spec(self, path: object, recursion_type: RecursionType) -> ItemSpec:
        return to_canonical_path_item_spec(path, recursion_type)
