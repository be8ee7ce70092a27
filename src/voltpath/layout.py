"""Filesystem layout derived from a LayoutConfig and repository identifiers.

Everything persisted by volt lives under the VOLTPATH (clones, plugconf,
profiles, lock files); everything vim loads lives under
``<vim dir>/pack/volt``. Repository identifiers are always split on '/'
and rejoined with the native separator.
"""

from pathlib import Path

from voltpath.config import LayoutConfig
from voltpath.constants import (
    BUILD_INFO_JSON,
    BUNDLED_PLUGCONF_PARTS,
    CLONE_URL_PREFIX,
    CONFIG_TOML,
    LOCK_JSON,
    OPT_DIR,
    PACK_DIR,
    PACK_REPLACEMENTS,
    PLUGCONF_DIR,
    PLUGCONF_SUFFIX,
    RC_DIR,
    REPOS_DIR,
    REPOS_SEP,
    START_DIR,
    TEMP_DIR,
    TOOL_NAME,
    TRX_LOCK,
    UNPACK_REPLACEMENTS,
    VIM_DIR,
    VIM_DIR_WINDOWS,
)
from voltpath.repos import ReposPath, to_slash


def _segments(path: str) -> list[str]:
    return to_slash(path).split(REPOS_SEP)


def full_repos_path(config: LayoutConfig, repos: ReposPath) -> Path:
    """$VOLTPATH/repos/{repos}"""
    return config.volt_path.joinpath(REPOS_DIR, *_segments(repos))


def clone_url(repos: ReposPath) -> str:
    """https://{repos}"""
    return CLONE_URL_PREFIX + to_slash(repos)


def plugconf(config: LayoutConfig, repos: ReposPath) -> Path:
    """$VOLTPATH/plugconf/{repos}.vim"""
    return config.volt_path.joinpath(
        PLUGCONF_DIR, *_segments(repos + PLUGCONF_SUFFIX)
    )


def rc_dir(config: LayoutConfig, profile_name: str) -> Path:
    """$VOLTPATH/rc/{profile_name}"""
    return config.volt_path / RC_DIR / profile_name


def lock_json(config: LayoutConfig) -> Path:
    return config.volt_path / LOCK_JSON


def config_toml(config: LayoutConfig) -> Path:
    return config.volt_path / CONFIG_TOML


def trx_lock(config: LayoutConfig) -> Path:
    return config.volt_path / TRX_LOCK


def temp_dir(config: LayoutConfig) -> Path:
    return config.volt_path / TEMP_DIR


def vim_dir(config: LayoutConfig) -> Path:
    """~/vimfiles on Windows, ~/.vim elsewhere."""
    if config.is_windows:
        return config.home / VIM_DIR_WINDOWS
    return config.home / VIM_DIR


def vim_volt_dir(config: LayoutConfig) -> Path:
    return vim_dir(config) / PACK_DIR / TOOL_NAME


def vim_volt_opt_dir(config: LayoutConfig) -> Path:
    return vim_volt_dir(config) / OPT_DIR


def vim_volt_start_dir(config: LayoutConfig) -> Path:
    return vim_volt_dir(config) / START_DIR


def build_info_json(config: LayoutConfig) -> Path:
    return vim_volt_dir(config) / BUILD_INFO_JSON


def bundled_plugconf(config: LayoutConfig) -> Path:
    return vim_volt_start_dir(config).joinpath(*BUNDLED_PLUGCONF_PARTS)


def _replace_all(value: str, replacements: tuple[tuple[str, str], ...]) -> str:
    for old, new in replacements:
        value = value.replace(old, new)
    return value


def pack_repos_path(repos: ReposPath) -> str:
    """Flatten a repository identifier into a single directory name.

    Underscores are doubled first, then each '/' becomes '_':
    "github.com/tyru/open_browser.vim" -> "github.com_tyru_open__browser.vim"
    """
    return _replace_all(repos, PACK_REPLACEMENTS)


def encode_repos_path(config: LayoutConfig, repos: ReposPath) -> Path:
    """(vim dir)/pack/volt/opt/{packed repos}"""
    return vim_volt_opt_dir(config) / pack_repos_path(repos)


def decode_repos_path(name: str | Path) -> ReposPath:
    """Recover a repository identifier from an opt directory name.

    Only the last path component is used. Every '_' becomes '/', then
    every '//' becomes '_'. This is not an exact inverse of
    pack_repos_path: a '/' directly followed by '_' in the identifier
    (e.g. "a/_b/c") does not survive the round trip. Existing installs
    depend on these names, so the behavior is kept as is.
    """
    return ReposPath(_replace_all(Path(name).name, UNPACK_REPLACEMENTS))
