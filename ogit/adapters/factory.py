"""Factory classes for adapter and controller instantiation.

Keeps the CLI layer free from direct adapter imports. Imports are lazy so
the pass-through mode never loads prompt_toolkit.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ogit.adapters.git_cmd.git_adapter import GitAdapter
    from ogit.adapters.tui.app import OgitUI
    from ogit.core.driver import Controller
    from ogit.domain.config import OgitConfig
    from ogit.ports.config import ConfigProvider
    from ogit.ports.repository import Repository


class ConfigFactory:
    """Factory for creating configuration-related instances."""

    def create_config_provider(self) -> ConfigProvider:
        """Create a TomlConfigProvider instance.

        Returns:
            TomlConfigProvider instance.
        """
        from ogit.adapters.config.toml_config_provider import TomlConfigProvider

        return TomlConfigProvider()


class RepositoryFactory:
    """Factory for creating repository adapters."""

    def create_git_adapter(self, repo_root: Path, remote: str = "origin") -> GitAdapter:
        """Create a GitAdapter instance.

        Args:
            repo_root: Path inside the working copy.
            remote: Remote used for named push/pull targets.

        Returns:
            GitAdapter instance.

        Raises:
            RuntimeError: If repo_root is not inside a git repository.
        """
        from ogit.adapters.git_cmd.git_adapter import GitAdapter

        return GitAdapter(repo_root, remote=remote)

    def run_git(self, directory: Path, args: list[str]) -> str:
        """Run git with args forwarded verbatim, no repository required.

        Args:
            directory: Directory git runs in.
            args: Arguments after 'git'.

        Returns:
            Combined stdout and stderr.

        Raises:
            FileNotFoundError: If the git executable cannot be found.
        """
        from ogit.adapters.git_cmd.git_adapter import run_git

        return run_git(directory, args)


class ControllerFactory:
    """Factory for wiring the interactive session.

    Args:
        config: Configuration with remote and display settings.
    """

    def __init__(self, config: OgitConfig) -> None:
        self._config = config

    def create_controller(self, repository: Repository) -> Controller:
        """Create a Controller with its initial session read from repository.

        Args:
            repository: Repository the session drives.

        Returns:
            Controller ready for the first turn.
        """
        from ogit.core.driver import Controller
        from ogit.core.engine import TransitionEngine
        from ogit.core.keymap import KeyInterpreter

        return Controller(
            TransitionEngine(repository),
            KeyInterpreter(default_branch=self._config.remote.default_branch),
        )

    def create_ui(self, repository: Repository) -> OgitUI:
        """Create the full-screen UI around a fresh controller.

        Args:
            repository: Repository the session drives.

        Returns:
            OgitUI instance.
        """
        from ogit.adapters.tui.app import OgitUI

        return OgitUI(self.create_controller(repository), self._config)
