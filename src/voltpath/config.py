import logging
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from voltpath.constants import (
    DEFAULT_VOLT_DIR,
    HOME_ENV_VAR,
    VOLT_VIM_ENV_VAR,
    VOLTPATH_ENV_VAR,
    WINDOWS_HOME_ENV_VAR,
    WINDOWS_PLATFORM,
)
from voltpath.errors import HomeDirectoryUnresolvableError

logger = logging.getLogger(__name__)


def current_platform() -> str:
    """Return 'windows' on Windows, otherwise sys.platform."""
    if sys.platform.startswith("win"):
        return WINDOWS_PLATFORM
    return sys.platform


def home_dir(environ: Mapping[str, str]) -> Path:
    """Get the home directory from HOME, falling back to USERPROFILE."""
    for var in (HOME_ENV_VAR, WINDOWS_HOME_ENV_VAR):
        if home := environ.get(var, ""):
            return Path(home)
    raise HomeDirectoryUnresolvableError()


def volt_path(environ: Mapping[str, str], home: Path) -> Path:
    """Get the VOLTPATH directory, defaulting to ~/volt."""
    if root := environ.get(VOLTPATH_ENV_VAR, ""):
        return Path(root)
    return home / DEFAULT_VOLT_DIR


@dataclass(frozen=True)
class LayoutConfig:
    """Snapshot of the environment roots every path is derived from."""

    home: Path
    volt_path: Path
    platform: str
    vim_override: str | None = None

    @property
    def is_windows(self) -> bool:
        return self.platform == WINDOWS_PLATFORM

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        platform: str | None = None,
    ) -> "LayoutConfig":
        """Read the environment once.

        Raises:
            HomeDirectoryUnresolvableError: if no home directory is set.
        """
        if environ is None:
            environ = os.environ
        home = home_dir(environ)
        config = cls(
            home=home,
            volt_path=volt_path(environ, home),
            platform=platform if platform is not None else current_platform(),
            vim_override=environ.get(VOLT_VIM_ENV_VAR) or None,
        )
        logger.debug("Resolved layout config: %s", config)
        return config
