"""Configuration provider port.

Defines the interface for loading application configuration.
"""

from pathlib import Path
from typing import Protocol

from ogit.domain.config import OgitConfig


class ConfigProvider(Protocol):
    """Protocol for loading configuration."""

    def load(self, repo_root: Path) -> OgitConfig:
        """Load configuration for a repository.

        Args:
            repo_root: Working copy root; its .ogit/config.toml is read.

        Returns:
            OgitConfig with loaded or default values

        Note:
            Implementations should fall back to defaults if config files
            are missing or invalid.
        """
        ...
