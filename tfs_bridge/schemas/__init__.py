"""Schemas for the application."""

from .host import (
    ItemSpecRequest,
    TfsItemInfo,
    TfsLocalPath,
    TfsPath,
    TfsPendingChange,
    TfsServerPath,
    TfsServerStatusType,
)

__all__ = [
    "ItemSpecRequest",
    "TfsItemInfo",
    "TfsLocalPath",
    "TfsPath",
    "TfsPendingChange",
    "TfsServerPath",
    "TfsServerStatusType",
]
