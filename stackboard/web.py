"""FastAPI application previewing board files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from fastapi import FastAPI, HTTPException  # type: ignore[import-not-found]
from fastapi.responses import (  # type: ignore[import-not-found]
    HTMLResponse,
    JSONResponse,
    Response,
)

from stackboard.loader import BoardFormatError, load_board
from stackboard.render import HtmlRenderer, layout_to_data
from stackboard.style import Style, StyleError, load_style

# Directory containing board files.
BOARDS_DIR = Path(
    os.environ.get("STACKBOARD_BOARDS", Path.home() / ".stackboard" / "boards")
)


def _board_files() -> list[Path]:
    """Return available board files from ``BOARDS_DIR``.

    Returns:
        Paths pointing to JSON or YAML files. Nonexistent directories
        yield an empty list.
    """

    # Return early when directory does not exist.
    if not BOARDS_DIR.exists():
        return []

    # Collect files with supported extensions.
    files: list[Path] = []
    for pattern in ("*.json", "*.yaml", "*.yml"):
        files.extend(BOARDS_DIR.glob(pattern))
    return sorted(files)


def _style() -> Style:
    """Return the style named by ``STACKBOARD_STYLE`` or the defaults."""

    style_path = os.environ.get("STACKBOARD_STYLE")
    try:
        return load_style(Path(style_path) if style_path else None)
    except StyleError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


app = FastAPI()


@app.get("/boards")
async def list_boards() -> JSONResponse:
    """Return the names of the available boards."""

    return JSONResponse([path.stem for path in _board_files()])


@app.get("/boards/{name}")
async def get_board(
    name: str, format: Literal["json", "html"] = "json"
) -> Response:
    """Return the layout of a board or its HTML rendering.

    Args:
        name: Board file name without extension.
        format: Desired response format.

    Returns:
        Layout data as JSON or a complete HTML page.
    """

    # Locate the file matching ``name``.
    file_path = next((p for p in _board_files() if p.stem == name), None)
    if file_path is None:
        raise HTTPException(status_code=404, detail="Board not found")

    try:
        board = load_board(file_path)
    except BoardFormatError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    if format == "html":
        return HTMLResponse(HtmlRenderer(_style(), title=name).render(board))
    return JSONResponse(layout_to_data(board))
