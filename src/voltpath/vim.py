import logging
import shutil
from collections.abc import Iterable, Iterator
from pathlib import Path

from voltpath.config import LayoutConfig
from voltpath.constants import (
    DOTFILE_PREFIX,
    DOTFILE_PREFIX_WINDOWS,
    GVIMRC,
    VIM_EXE,
    VIM_EXE_WINDOWS,
    VIMRC,
)
from voltpath.errors import ExecutableNotFoundError
from voltpath.layout import vim_dir

logger = logging.getLogger(__name__)


def exists(path: Path) -> bool:
    """Check if a path exists without following symlinks.

    Only a missing path counts as absent; other lstat errors such as
    PermissionError still report the path as present.
    """
    try:
        path.lstat()
    except FileNotFoundError:
        return False
    return True


def vim_executable(config: LayoutConfig) -> str:
    """Get the vim executable, preferring the VOLT_VIM override.

    Raises:
        ExecutableNotFoundError: if vim is not on PATH.
    """
    if config.vim_override:
        return config.vim_override
    exe_name = VIM_EXE_WINDOWS if config.is_windows else VIM_EXE
    vim = shutil.which(exe_name)
    if vim is None:
        raise ExecutableNotFoundError(exe_name)
    logger.debug("Found %s at %s", exe_name, vim)
    return vim


def _rc_candidates(config: LayoutConfig, name: str) -> list[Path]:
    prefix = DOTFILE_PREFIX_WINDOWS if config.is_windows else DOTFILE_PREFIX
    return [config.home / f"{prefix}{name}", vim_dir(config) / name]


def _existing(paths: Iterable[Path]) -> Iterator[Path]:
    for path in paths:
        if exists(path):
            yield path
        else:
            logger.debug("Skipping missing rc file %s", path)


def look_up_vimrc(config: LayoutConfig) -> list[Path]:
    """Existing vimrc files: ~/.vimrc (~/_vimrc on Windows), then (vim dir)/vimrc."""
    return list(_existing(_rc_candidates(config, VIMRC)))


def look_up_gvimrc(config: LayoutConfig) -> list[Path]:
    """Existing gvimrc files: ~/.gvimrc (~/_gvimrc on Windows), then (vim dir)/gvimrc."""
    return list(_existing(_rc_candidates(config, GVIMRC)))
