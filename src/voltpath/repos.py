import os
from typing import NewType

from voltpath.constants import (
    DEFAULT_HOST,
    GIT_SUFFIX,
    LOCAL_REPOS_PREFIX,
    REPOS_SEP,
    URL_SCHEMES,
)
from voltpath.errors import InvalidFormatError

ReposPath = NewType("ReposPath", str)


class ReposPathList(list[ReposPath]):
    """Ordered repository identifiers, as listed by the user or config."""

    def strings(self) -> list[str]:
        return [str(repos) for repos in self]


def to_slash(path: str) -> str:
    """Replace the native path separator with '/'."""
    if os.sep == REPOS_SEP:
        return path
    return path.replace(os.sep, REPOS_SEP)


def normalize_repos(raw: str) -> ReposPath:
    """Normalize a repository reference into 'host/owner/name'.

    Accepted forms:
        "user/name[.git]" -> "github.com/user/name"
        "github.com/user/name[.git]" -> "github.com/user/name"
        "[git|http|https]://github.com/user/name[.git]" -> "github.com/user/name"

    Raises:
        InvalidFormatError: for any other shape.
    """
    raw = to_slash(raw)
    paths = raw.split(REPOS_SEP)
    if len(paths) == 3:
        return ReposPath(raw.removesuffix(GIT_SUFFIX))
    if len(paths) == 2:
        return ReposPath(f"{DEFAULT_HOST}/{raw}".removesuffix(GIT_SUFFIX))
    if paths[0] in URL_SCHEMES and len(paths) > 3:
        # Keep only the trailing host/owner/name
        path = REPOS_SEP.join(paths[-3:])
        return ReposPath(path.removesuffix(GIT_SUFFIX))
    raise InvalidFormatError(raw)


def normalize_local_repos(name: str) -> ReposPath:
    """Normalize a repository, treating a bare name as a local plugin."""
    if REPOS_SEP not in name:
        return ReposPath(LOCAL_REPOS_PREFIX + name)
    return normalize_repos(name)
