"""
Embed widget script endpoint
"""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

router = APIRouter()

EMBED_DIR = Path(__file__).resolve().parent.parent / "static" / "embed"


@router.get("/size-charts.js", include_in_schema=False)
async def size_charts_widget():
    """Serve the embeddable widget; CORS headers are added by the public CORS middleware"""
    return FileResponse(
        EMBED_DIR / "size-charts.js",
        media_type="application/javascript; charset=utf-8",
        headers={"Cache-Control": "public, max-age=3600"},
    )
