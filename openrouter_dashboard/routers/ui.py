import os

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from openrouter_dashboard.config.settings import settings

router = APIRouter(prefix="", tags=["UI"])  # public: the page itself reads ?token= from its URL


@router.get("/", include_in_schema=False)
def dashboard():
    """Serve the static dashboard HTML."""
    if not os.path.isfile(settings.index_path):
        raise HTTPException(status_code=404, detail="Dashboard not found")
    return FileResponse(settings.index_path, media_type="text/html")


def static_files() -> StaticFiles:
    # check_dir=False: a missing asset root should not break API routes at import time
    return StaticFiles(directory=settings.STATIC_DIR, html=True, check_dir=False)
