"""Services for the application."""

from .data_conversion import (
    PendingChangeSequence,
    UnknownPathTypeError,
    format_iso_timestamp,
    to_canonical_path_item_spec,
    to_canonical_path_item_specs,
    to_canonical_path_string,
    to_change_types,
    to_item_info,
    to_pending_change,
    to_pending_changes,
)
from .host_model_adapter import HostModelAdapter
from .label_renderer import VendorLabelRenderer
from .label_renderer_factory import (
    create_label_renderer,
    create_label_renderer_from_settings,
)
from .mock_label_renderer import MockLabelRenderer

__all__ = [
    "HostModelAdapter",
    "MockLabelRenderer",
    "PendingChangeSequence",
    "UnknownPathTypeError",
    "VendorLabelRenderer",
    "create_label_renderer",
    "create_label_renderer_from_settings",
    "format_iso_timestamp",
    "to_canonical_path_item_spec",
    "to_canonical_path_item_specs",
    "to_canonical_path_string",
    "to_change_types",
    "to_item_info",
    "to_pending_change",
    "to_pending_changes",
]
