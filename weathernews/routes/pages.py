"""
Weather & News Backend — Front-End Page Route
===============================================

What:  Serves index.html for GET /.
Why:   The front-end is a static page that calls /api/weather and /api/news.
       Other assets (scripts, styles) are served by the static mount that
       create_app() registers last.
"""

from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from weathernews.config import Settings
from weathernews.dependencies import get_settings

router = APIRouter(tags=["Front-End"])


@router.get("/", include_in_schema=False)
async def index(settings: Settings = Depends(get_settings)) -> FileResponse:
    index_file = Path(settings.static_dir) / "index.html"
    if not index_file.is_file():
        # Treated as a routing miss: answered by the not-found handler
        raise StarletteHTTPException(status_code=404)
    return FileResponse(index_file, media_type="text/html")
