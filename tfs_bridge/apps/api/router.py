from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from tfs_bridge.config.settings import Settings, get_settings
from tfs_bridge.models import ExtendedItemSnapshot, ItemSpec, PendingSetSnapshot
from tfs_bridge.schemas import ItemSpecRequest, TfsItemInfo, TfsPendingChange
from tfs_bridge.services import HostModelAdapter, to_canonical_path_item_specs

router = APIRouter(prefix="/tfs", tags=["tfs"])

# Global adapter instance
_host_model_adapter: Optional[HostModelAdapter] = None


def get_host_model_adapter(
    settings: Settings = Depends(get_settings),
) -> HostModelAdapter:
    """Get or create the host model adapter."""
    global _host_model_adapter
    if _host_model_adapter is None:
        try:
            _host_model_adapter = HostModelAdapter.from_settings(settings)
        except Exception as e:
            raise HTTPException(
                status_code=500,
                detail=f"Failed to initialize adapter: {str(e)}",
            )
    return _host_model_adapter


@router.post("/pending-changes", response_model=List[TfsPendingChange])
async def convert_pending_changes(
    pending_sets: List[PendingSetSnapshot],
    adapter: HostModelAdapter = Depends(get_host_model_adapter),
):
    """Flatten pending sets into host pending changes."""
    try:
        return adapter.pending_changes_for_sets(pending_sets)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Conversion failed: {str(e)}")


@router.post("/item-info", response_model=List[TfsItemInfo])
async def convert_item_info(
    items: List[ExtendedItemSnapshot],
    adapter: HostModelAdapter = Depends(get_host_model_adapter),
):
    """Flatten extended items into host item info."""
    try:
        return adapter.item_infos(items)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Conversion failed: {str(e)}")


@router.post("/item-specs", response_model=List[ItemSpec])
async def convert_item_specs(request: ItemSpecRequest):
    """Canonicalize paths into item specs."""
    try:
        return to_canonical_path_item_specs(request.paths, request.recursion)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Conversion failed: {str(e)}")


@router.get("/health")
async def tfs_health_check():
    """Simple health check for tfs endpoints."""
    return {"status": "tfs endpoints available"}
