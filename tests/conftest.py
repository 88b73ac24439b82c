"""Pytest configuration and shared fixtures."""

from pathlib import Path
from unittest.mock import patch

import pytest

from ogit.core.driver import Controller
from ogit.core.engine import TransitionEngine
from ogit.core.keymap import KeyInterpreter
from ogit.domain.entities import CommitSummary
from tests.helpers.fake_repository import FakeRepository
from tests.helpers.git_repo import create_git_repo


@pytest.fixture(autouse=True)
def isolated_global_config(tmp_path: Path):
    """Point the global config lookup at a path that does not exist.

    Keeps the user's ~/.config/ogit/config.toml from leaking into tests.
    Tests that exercise the global config patch the path themselves.
    """
    missing = tmp_path / "no_global_config" / "config.toml"
    with patch(
        "ogit.adapters.config.toml_config_provider.get_global_config_path",
        return_value=missing,
    ):
        yield missing


@pytest.fixture
def fake_repo() -> FakeRepository:
    """Repository with one file in each list and two commits."""
    return FakeRepository(
        untracked={"new.txt"},
        tracked={"changed.txt"},
        staged={"ready.txt"},
        commits=[
            CommitSummary("b2c3d4e", "Second commit"),
            CommitSummary("a1b2c3d", "Initial commit"),
        ],
    )


@pytest.fixture
def engine(fake_repo: FakeRepository) -> TransitionEngine:
    return TransitionEngine(fake_repo)


@pytest.fixture
def controller(engine: TransitionEngine) -> Controller:
    return Controller(engine, KeyInterpreter())


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a git repository with one committed file, test.txt."""
    return create_git_repo(tmp_path / "repo", files={"test.txt": "hello\n"})
