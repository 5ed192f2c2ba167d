"""Host-side records handed to the IDE plugin."""

from enum import Enum
from typing import Annotated, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from ..models import RecursionType


class TfsServerStatusType(str, Enum):
    """Coarse change status understood by the host."""

    ADD = "ADD"
    EDIT = "EDIT"
    RENAME = "RENAME"
    DELETE = "DELETE"
    UNDELETE = "UNDELETE"
    BRANCH = "BRANCH"
    MERGE = "MERGE"
    LOCK = "LOCK"
    UNKNOWN = "UNKNOWN"


class TfsPendingChange(BaseModel):
    """Flattened pending change."""

    model_config = ConfigDict(frozen=True)

    server_item: str
    local_item: Optional[str] = None
    version: int
    owner: str
    date: str  # yyyy-MM-ddTHH:mm:ss.SSS+HHMM
    lock: str
    change_types: Tuple[TfsServerStatusType, ...]
    workspace: str
    computer: str
    is_candidate: bool
    source_item: Optional[str] = None  # For renames and branches


class TfsItemInfo(BaseModel):
    """Flattened extended item metadata."""

    model_config = ConfigDict(frozen=True)

    server_item: str
    local_item: Optional[str] = None
    local_version: int
    server_version: int
    change: str
    type: str
    lock: str
    lock_owner: Optional[str] = None
    deletion_id: int
    checkin_date: Optional[str] = None
    file_encoding: Optional[str] = None


class TfsLocalPath(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["local"] = "local"
    path: str


class TfsServerPath(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["server"] = "server"
    path: str


TfsPath = Annotated[Union[TfsLocalPath, TfsServerPath], Field(discriminator="kind")]


class ItemSpecRequest(BaseModel):
    paths: List[TfsPath]
    recursion: RecursionType = RecursionType.NONE
