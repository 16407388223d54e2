"""
Fallback handling for paths no router matched.

API-looking paths get a plain 404 naming the method and path; everything
else is looked up in the frontend directory.
"""
from pathlib import Path

from fastapi import HTTPException, Request, status
from fastapi.responses import FileResponse, PlainTextResponse

RESERVED_PREFIXES = ("/api", "/prontuario", "/prontuarios", "/exames", "/ai-")


def is_reserved(path: str) -> bool:
    return path.startswith(RESERVED_PREFIXES)


def resolve_static_file(static_dir: str, path: str):
    """
    Map a URL path to a file inside ``static_dir``.

    Directories resolve to their ``index.html``. Paths escaping the
    directory resolve to None.
    """
    root = Path(static_dir).resolve()
    candidate = (root / path.lstrip("/")).resolve()
    if candidate != root and root not in candidate.parents:
        return None
    if candidate.is_dir():
        candidate = candidate / "index.html"
    if candidate.is_file():
        return candidate
    return None


def not_found_response(request: Request) -> PlainTextResponse:
    return PlainTextResponse(
        f"Rota não encontrada: {request.method} {request.url.path}",
        status_code=status.HTTP_404_NOT_FOUND,
    )


def fallback_response(request: Request, static_dir: str):
    """
    Answer a request that matched no route.

    Raises:
        HTTPException: 404 for non-reserved paths with no static file
    """
    path = request.url.path
    if is_reserved(path):
        return not_found_response(request)
    if request.method in ("GET", "HEAD"):
        file_path = resolve_static_file(static_dir, path)
        if file_path is not None:
            return FileResponse(file_path)
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
