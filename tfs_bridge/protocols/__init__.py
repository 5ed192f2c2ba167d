"""Protocols for the application."""

from .label_renderer_protocol import LabelRendererProtocol
from .vendor_protocols import (
    ExtendedItemProtocol,
    PendingChangeProtocol,
    PendingSetProtocol,
)

__all__ = [
    "ExtendedItemProtocol",
    "LabelRendererProtocol",
    "PendingChangeProtocol",
    "PendingSetProtocol",
]
