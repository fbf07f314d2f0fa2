"""Tests for the board preview web app."""

from __future__ import annotations

from pathlib import Path

import pytest

pytest.importorskip("fastapi.testclient")

from fastapi.testclient import TestClient  # type: ignore[import-not-found]

from stackboard import web

BOARD_YAML = """
board:
  - section: Account
    blocks: [Name, Email]
  - section: Preferences
    blocks:
      - section: Notif
        blocks: [Push]
      - Dark Mode
"""


def _client() -> TestClient:
    """Return a test client for the web app."""

    return TestClient(web.app)


@pytest.fixture
def boards_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point the app at a temporary directory holding one board."""

    (tmp_path / "settings.yaml").write_text(BOARD_YAML, encoding="utf-8")
    monkeypatch.setattr(web, "BOARDS_DIR", tmp_path)
    monkeypatch.delenv("STACKBOARD_STYLE", raising=False)
    return tmp_path


def test_list_boards(boards_dir: Path) -> None:
    response = _client().get("/boards")

    assert response.status_code == 200
    assert response.json() == ["settings"]


def test_list_boards_missing_directory(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setattr(web, "BOARDS_DIR", tmp_path / "missing")
    assert _client().get("/boards").json() == []


def test_board_json(boards_dir: Path) -> None:
    response = _client().get("/boards/settings")

    assert response.status_code == 200
    data = response.json()
    assert [item["header"] for item in data] == ["Account", "Preferences"]
    assert [b["text"] for b in data[1]["blocks"]] == ["Push", "Dark Mode"]


def test_board_html(boards_dir: Path) -> None:
    response = _client().get("/boards/settings", params={"format": "html"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert response.text.count("<section") == 2
    assert "Notif" not in response.text


def test_unknown_board(boards_dir: Path) -> None:
    assert _client().get("/boards/missing").status_code == 404


def test_malformed_board(boards_dir: Path) -> None:
    (boards_dir / "broken.yaml").write_text("items: []\n", encoding="utf-8")
    response = _client().get("/boards/broken")

    assert response.status_code == 422
    assert "board" in response.json()["detail"]


def test_undecodable_board(boards_dir: Path) -> None:
    (boards_dir / "latin.yaml").write_bytes(b"board:\n  - \xff\xfe\n")
    response = _client().get("/boards/latin")

    assert response.status_code == 422
    assert "cannot decode" in response.json()["detail"]
