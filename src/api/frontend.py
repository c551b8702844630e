"""Single-page application entry point.

Registered last so every API route, the health check and the uploads mount
take precedence over the catch-all.
"""

from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from src.api.dependencies import get_app_settings
from src.config import Settings
from src.exceptions import NotFoundError

router = APIRouter(tags=["frontend"], include_in_schema=False)


def resolve_public_file(public_dir: Path, full_path: str) -> Path:
    """Map a request path to a file in the public directory.

    Falls back to ``index.html`` so client-side routes load the app; paths
    escaping the public directory never resolve to a file outside it.
    """
    root = public_dir.resolve()
    candidate = (root / full_path).resolve()
    if full_path and candidate.is_relative_to(root) and candidate.is_file():
        return candidate

    index = root / "index.html"
    if not index.is_file():
        raise NotFoundError("Not found")
    return index


@router.get("/{full_path:path}")
def serve_frontend(
    full_path: str,
    settings: Annotated[Settings, Depends(get_app_settings)],
):
    """Serve static assets of the frontend, or its entry page."""
    if full_path == "api" or full_path.startswith("api/"):
        raise NotFoundError("Not found")
    return FileResponse(resolve_public_file(Path(settings.public_dir), full_path))
