from fastapi import FastAPI

from tfs_bridge.apps.api import router
from tfs_bridge.config.settings import get_settings

settings = get_settings()

app = FastAPI(
    title="TFS Bridge API",
    version="0.1.0",
    description="Converts version-control client objects into host-side records",
)

if settings.DEBUG:
    print("🔧 DEBUG mode: host records use MockLabelRenderer labels")

app.include_router(router.router, prefix="/api")


@app.get("/")
async def hello_world():
    return {"message": "Hello World"}


@app.get("/health")
async def health_check():
    """
    Simple health check endpoint to confirm the API is running.
    """
    return {"status": "ok"}
