"""
Static files, SPA fallback and the production error endpoint.

Register this router last: its catch-all GET route answers every path no
other route claimed.
"""
# Standard library imports
from pathlib import Path
from typing import Optional

# External package imports
from fastapi import APIRouter, HTTPException, status
from fastapi.responses import FileResponse

# Local application imports
from ...core.config import get_settings

router = APIRouter(tags=["spa"])

INDEX_FILE = "index.html"
ERROR_MESSAGE = "An error occurred while processing your request."


def resolve_static_file(static_root: Path, relative_path: str) -> Optional[Path]:
    """Return the file under static_root for relative_path, or None when absent or outside the root"""
    if not relative_path:
        return None
    root = static_root.resolve()
    candidate = (root / relative_path).resolve()
    if root not in candidate.parents or not candidate.is_file():
        return None
    return candidate


@router.get("/error")
async def error_page() -> dict:
    return {"detail": ERROR_MESSAGE}


@router.get("/{full_path:path}", include_in_schema=False)
async def spa_fallback(full_path: str) -> FileResponse:
    """Serve a static file when one exists, otherwise the SPA host page"""
    static_root = Path(get_settings().static_root)

    static_file = resolve_static_file(static_root, full_path)
    if static_file is not None:
        return FileResponse(static_file)

    index_file = static_root / INDEX_FILE
    if index_file.is_file():
        return FileResponse(index_file, media_type="text/html")

    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
