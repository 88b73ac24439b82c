"""Config domain models for ogit.

Configuration is read from ~/.config/ogit/config.toml and from a
repository-local .ogit/config.toml. This module defines the validated
configuration state and how partial TOML data is merged into it.
"""

import logging
from dataclasses import dataclass, field, fields, replace
from typing import Any

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class RemoteConfig:
    """Configuration for push and pull.

    Attributes:
        name: Remote used when pushing to or pulling from a named branch.
        default_branch: Branch offered by the push/pull menu shortcut.

    Raises:
        ValueError: If name or default_branch is empty.
    """

    name: str = "origin"
    default_branch: str = "master"

    def __post_init__(self) -> None:
        """Validate remote config after initialization."""
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("remote name cannot be empty")
        if not isinstance(self.default_branch, str) or not self.default_branch.strip():
            raise ValueError("default_branch cannot be empty")


@dataclass(frozen=True)
class DisplayConfig:
    """Configuration for the terminal UI.

    Attributes:
        syntax_highlighting: Colour diff output (default: True)
    """

    syntax_highlighting: bool = True


@dataclass(frozen=True)
class LogConfig:
    """Configuration for diagnostic logging.

    Attributes:
        level: Logging level name (default: "WARNING")
        file: Optional log file. Logs go to stderr when unset, and are muted
              while the full-screen UI is running.

    Raises:
        ValueError: If level is not a standard logging level name.
    """

    level: str = "WARNING"
    file: str | None = None

    def __post_init__(self) -> None:
        """Validate log config after initialization."""
        if not isinstance(self.level, str) or self.level.upper() not in _LOG_LEVELS:
            raise ValueError(
                f"log level must be one of {', '.join(_LOG_LEVELS)}, got {self.level!r}"
            )

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level.upper())


@dataclass(frozen=True)
class OgitConfig:
    """Complete ogit configuration.

    Attributes:
        remote: Push/pull configuration
        display: Terminal UI configuration
        log: Logging configuration
    """

    remote: RemoteConfig = field(default_factory=RemoteConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    log: LogConfig = field(default_factory=LogConfig)

    @staticmethod
    def default() -> "OgitConfig":
        """Create a config with all default values."""
        return OgitConfig(
            remote=RemoteConfig(),
            display=DisplayConfig(),
            log=LogConfig(),
        )

    @staticmethod
    def from_partial(base: "OgitConfig", data: dict[str, Any]) -> "OgitConfig":
        """Overlay partial TOML data onto an existing config.

        Only keys present in data are replaced. Unknown sections and keys are
        ignored so that newer config files keep working.

        Args:
            base: Config to start from.
            data: Parsed TOML mapping of section name to key/value table.

        Returns:
            New OgitConfig with overrides applied and validated.

        Raises:
            ValueError: If a section is not a table or a value is invalid.
        """
        sections: dict[str, Any] = {}
        for section in fields(base):
            overrides = data.get(section.name)
            if overrides is None:
                continue
            if not isinstance(overrides, dict):
                raise ValueError(f"[{section.name}] must be a table")
            current = getattr(base, section.name)
            known = {f.name for f in fields(current)}
            values = {k: v for k, v in overrides.items() if k in known}
            sections[section.name] = replace(current, **values)
        return replace(base, **sections)
