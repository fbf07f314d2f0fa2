"""Shared fixtures for board tests."""

from __future__ import annotations

import pytest

from stackboard.board import Board, Section, Text


@pytest.fixture
def settings_board() -> Board:
    """Return a settings screen with one nested section."""

    return Board.construct(
        lambda: [
            Section.titled("Account", lambda: [Text("Name"), Text("Email")]),
            Section.titled(
                "Preferences",
                lambda: [
                    Section.titled("Notif", lambda: [Text("Push")]),
                    Text("Dark Mode"),
                ],
            ),
            Section.titled("Footer", lambda: [Text("Footer Info")]),
        ]
    )
