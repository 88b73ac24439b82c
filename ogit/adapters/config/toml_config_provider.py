"""TOML-based configuration provider.

Config loading priority (highest to lowest):
1. Local: <repo>/.ogit/config.toml (repo-specific)
2. Global: ~/.config/ogit/config.toml (user defaults)
3. Built-in defaults
"""

import logging
from pathlib import Path

from ogit.domain.config import OgitConfig
from ogit.shared.config_io import (
    get_global_config_path,
    get_local_config_path,
    load_config_data,
)

logger = logging.getLogger(__name__)


class TomlConfigProvider:
    """Configuration provider that loads from TOML files.

    Local values override global values key by key; anything missing falls
    back to built-in defaults. Missing or invalid files are skipped with a
    warning.
    """

    def load(self, repo_root: Path) -> OgitConfig:
        """Load configuration with global fallback.

        Args:
            repo_root: Working copy root containing an optional .ogit/ directory

        Returns:
            OgitConfig with merged global/local values or defaults
        """
        config = OgitConfig.default()

        global_path = get_global_config_path()
        if global_path.exists():
            try:
                config = OgitConfig.from_partial(config, load_config_data(global_path))
                logger.debug("Loaded global config from %s", global_path)
            except (FileNotFoundError, ValueError) as e:
                logger.warning(
                    "Failed to parse global config at %s: %s. Ignoring global config.",
                    global_path,
                    e,
                )

        local_path = get_local_config_path(repo_root)
        if local_path.exists():
            try:
                config = OgitConfig.from_partial(config, load_config_data(local_path))
                logger.debug("Loaded local config from %s", local_path)
            except (FileNotFoundError, ValueError) as e:
                logger.warning(
                    "Failed to parse config.toml: %s. Using global/default configuration.",
                    e,
                )

        return config
