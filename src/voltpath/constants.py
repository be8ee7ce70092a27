"""Constants for voltpath - no magic strings/numbers allowed elsewhere."""

# Environment variables
HOME_ENV_VAR = "HOME"
WINDOWS_HOME_ENV_VAR = "USERPROFILE"
VOLTPATH_ENV_VAR = "VOLTPATH"
VOLT_VIM_ENV_VAR = "VOLT_VIM"

# Platform
WINDOWS_PLATFORM = "windows"

# Repository identifiers
DEFAULT_HOST = "github.com"
GIT_SUFFIX = ".git"
URL_SCHEMES = ("https:", "http:", "git:")
CLONE_URL_PREFIX = "https://"
LOCAL_REPOS_PREFIX = "localhost/local/"
REPOS_SEP = "/"

# Directory-name codec
PACK_REPLACEMENTS = (("_", "__"), ("/", "_"))
UNPACK_REPLACEMENTS = (("_", "/"), ("//", "_"))

# Directory names within VOLTPATH
DEFAULT_VOLT_DIR = "volt"
REPOS_DIR = "repos"
PLUGCONF_DIR = "plugconf"
PLUGCONF_SUFFIX = ".vim"
RC_DIR = "rc"
TEMP_DIR = "tmp"
LOCK_JSON = "lock.json"
CONFIG_TOML = "config.toml"
TRX_LOCK = "trx.lock"

# Profile rc files
PROFILE_VIMRC = "vimrc.vim"
PROFILE_GVIMRC = "gvimrc.vim"
VIMRC = "vimrc"
GVIMRC = "gvimrc"

# Vim directories
VIM_DIR = ".vim"
VIM_DIR_WINDOWS = "vimfiles"
PACK_DIR = "pack"
TOOL_NAME = "volt"
OPT_DIR = "opt"
START_DIR = "start"
BUILD_INFO_JSON = "build-info.json"
BUNDLED_PLUGCONF_PARTS = ("system", "plugin", "bundled_plugconf.vim")
DOTFILE_PREFIX = "."
DOTFILE_PREFIX_WINDOWS = "_"

# Vim executable
VIM_EXE = "vim"
VIM_EXE_WINDOWS = "vim.exe"

# Logging
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Error messages
ERR_INVALID_FORMAT = "invalid format of repository: {raw}"
ERR_EXECUTABLE_NOT_FOUND = "executable file not found in $PATH: {name}"
ERR_HOME_UNRESOLVABLE = "Couldn't look up HOME"
