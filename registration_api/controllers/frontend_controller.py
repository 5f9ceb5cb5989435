# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: serves the pre-built front-end with an index.html fallback."""
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

from registration_api.core.config import settings
from registration_api.core.exceptions import NotFound

router = APIRouter(tags=["Frontend"], include_in_schema=False)


def resolve_asset(static_dir: Path, requested: str) -> Path | None:
    """Return the file to serve for ``requested``, or None when the bundle is missing."""
    root = static_dir.resolve()
    candidate = (root / requested).resolve()
    if requested and candidate.is_file() and candidate.is_relative_to(root):
        return candidate
    index = root / "index.html"
    return index if index.is_file() else None


@router.get("/{full_path:path}")
async def serve_frontend(full_path: str):
    asset = resolve_asset(Path(settings.STATIC_DIR), full_path)
    if asset is None:
        raise NotFound("Front-end bundle not found")
    return FileResponse(asset)
