"""Value types mirrored from the version-control client library."""

from enum import Enum, IntFlag
from typing import Dict

from pydantic import BaseModel, ConfigDict

ENCODING_UNCHANGED = -2


class ChangeType(IntFlag):
    """Bitmask of pending change kinds. Kinds combine independently."""

    NONE = 0
    ADD = 1
    EDIT = 2
    ENCODING = 4
    RENAME = 8
    DELETE = 16
    UNDELETE = 32
    BRANCH = 64
    MERGE = 128
    LOCK = 256
    ROLLBACK = 512
    SOURCE_RENAME = 1024
    TARGET_RENAME = 2048
    PROPERTY = 4096

    @staticmethod
    def contains(mask: int, kind: "ChangeType") -> bool:
        """Return True if every bit of ``kind`` is set in ``mask``."""
        return (int(mask) & int(kind)) == int(kind)


class ItemType(str, Enum):
    """Kind of version-controlled item."""

    ANY = "any"
    FOLDER = "folder"
    FILE = "file"


class LockLevel(str, Enum):
    """Lock held on a version-controlled item."""

    NONE = "none"
    CHECKIN = "checkin"
    CHECKOUT = "checkout"
    UNCHANGED = "unchanged"


class RecursionType(str, Enum):
    """Depth of an item lookup."""

    NONE = "none"
    ONE_LEVEL = "one_level"
    FULL = "full"


_ENCODING_NAMES: Dict[int, str] = {
    -1: "binary",
    -3: "Default",
    1200: "UTF-16",
    1201: "UTF-16BE",
    1252: "windows-1252",
    12000: "UTF-32",
    12001: "UTF-32BE",
    20127: "US-ASCII",
    65001: "UTF-8",
}


class FileEncoding(BaseModel):
    """File encoding identified by its code page."""

    model_config = ConfigDict(frozen=True)

    code_page: int

    @property
    def name(self) -> str:
        if self.code_page == ENCODING_UNCHANGED:
            return "unchanged"
        return _ENCODING_NAMES.get(self.code_page, f"cp{self.code_page}")

    @classmethod
    def unchanged(cls) -> "FileEncoding":
        return cls(code_page=ENCODING_UNCHANGED)


class ItemSpec(BaseModel):
    """Path plus lookup depth, as accepted by the client's item queries."""

    model_config = ConfigDict(frozen=True)

    item: str
    recursion: RecursionType = RecursionType.NONE
