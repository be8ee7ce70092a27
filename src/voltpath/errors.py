"""Errors raised while normalizing repositories and resolving the layout."""

from voltpath.constants import (
    ERR_EXECUTABLE_NOT_FOUND,
    ERR_HOME_UNRESOLVABLE,
    ERR_INVALID_FORMAT,
)


class VoltPathError(Exception):
    """Base class for voltpath errors."""

    fatal = False


class InvalidFormatError(VoltPathError, ValueError):
    """A repository reference could not be normalized."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(ERR_INVALID_FORMAT.format(raw=raw))


class ExecutableNotFoundError(VoltPathError, LookupError):
    """The vim executable is not on the search path."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(ERR_EXECUTABLE_NOT_FOUND.format(name=name))


class HomeDirectoryUnresolvableError(VoltPathError):
    """Neither HOME nor USERPROFILE is set.

    Nearly every path depends on the home directory, so callers are
    expected to abort rather than recover.
    """

    fatal = True

    def __init__(self) -> None:
        super().__init__(ERR_HOME_UNRESOLVABLE)
