import os
import pathlib

from .errors import NotGitRepositoryError
from .levels import Level
from .util import get_logger

logger = get_logger("paths")

# repository structure

git_root = ".git"
local_config = pathlib.Path(git_root) / "config"


def file_exists(path) -> bool:
    try:
        return pathlib.Path(path).is_file()
    except OSError:
        return False


def directory_exists(path) -> bool:
    try:
        return pathlib.Path(path).is_dir()
    except OSError:
        return False


def start_directory(start=None) -> pathlib.Path:
    """Absolute directory a lookup starts from.

    Defaults to the current working directory. A path naming something
    other than a directory (usually a file) is replaced by its parent.
    """
    cur = pathlib.Path(start) if start else pathlib.Path.cwd()
    cur = pathlib.Path(os.path.abspath(cur))
    if not directory_exists(cur):
        cur = cur.parent
    return cur


def find_repository_root(start=None) -> pathlib.Path:
    cur = pathlib.Path(os.path.abspath(start or pathlib.Path.cwd()))
    while True:
        if directory_exists(cur / git_root):
            return cur
        parent = cur.parent
        if parent == cur:
            raise NotGitRepositoryError(
                "not a git repository (or any of the parent directories)"
            )
        cur = parent


# per-level configuration files


def local_config_file(start=None):
    root = find_repository_root(start)
    path = root / local_config
    if not file_exists(path):
        logger.debug("no local configuration at %s", path)
        return None
    return path


def xdg_config_home() -> pathlib.Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return pathlib.Path(xdg)
    return home_directory() / ".config"


def home_directory() -> pathlib.Path:
    home = os.environ.get("HOME")
    if home:
        return pathlib.Path(home)
    return pathlib.Path.home()


def global_config_candidates():
    return [
        xdg_config_home() / "git" / "config",
        home_directory() / ".gitconfig",
    ]


def global_config_file():
    for path in global_config_candidates():
        if file_exists(path):
            return path
    logger.debug("no global configuration file found")
    return None


def system_config_file():
    # the install prefix git was built with is not discoverable here
    logger.debug("system configuration lookup is not supported")
    return None


def level_file(level, start=None):
    """File backing `level`, or None when there is none.

    A missing repository counts as "no file" for the local level.
    """
    level = Level.from_selector(level)
    if level == Level.LOCAL:
        try:
            return local_config_file(start)
        except NotGitRepositoryError as e:
            logger.debug("local level skipped: %s", e)
            return None
    elif level == Level.GLOBAL:
        return global_config_file()
    elif level == Level.SYSTEM:
        return system_config_file()
    else:
        return None
