# use configparser to approximate gitconfig format

import collections
import configparser
import dataclasses
import itertools
import pathlib
from configparser import ConfigParser
from typing import Optional

from . import paths
from .errors import (
    ConfigLoadError,
    KeyNotFoundError,
    UnsupportedLevelError,
)
from .levels import Level, precedence
from .util import get_logger

logger = get_logger("config")

# keys before the first section header; not a valid git section name
top_section = "<top>"


@dataclasses.dataclass(frozen=True)
class LookupRequest:
    key: str
    level: Level = Level.UNSPECIFIED
    start_location: Optional[pathlib.Path] = None

    def __post_init__(self):
        object.__setattr__(self, "level", Level.from_selector(self.level))


Resolution = collections.namedtuple("Resolution", ["value", "level", "path"])


def split_key(key: str):
    """Split "section.name" on the first dot.

    A key without a dot has no section: "name" -> ("", "name").
    """
    parts = key.split(".", 1)
    if len(parts) == 2:
        return parts[0], parts[1]
    return "", parts[0]


def load_config(path) -> ConfigParser:
    if path is None:
        raise ConfigLoadError("no configuration file to load")
    parser = ConfigParser(
        interpolation=None,
        strict=False,
        allow_no_value=True,
        inline_comment_prefixes=("#", ";"),
    )
    try:
        with open(path, encoding="utf-8") as f:
            lines = itertools.chain([f"[{top_section}]\n"], f)
            parser.read_file(lines, source=str(path))
    except (OSError, UnicodeDecodeError, configparser.Error) as e:
        raise ConfigLoadError(f"unable to load {path}: {e}") from e
    return parser


def lookup(parser: ConfigParser, section: str, name: str) -> str:
    # section names are case-insensitive in git; the last match wins
    val = None
    for candidate in parser.sections():
        name_in_file = "" if candidate == top_section else candidate
        if name_in_file.lower() != section.lower():
            continue
        if parser.has_option(candidate, name):
            val = parser.get(candidate, name)
    return val or ""


def query_file(key: str, path) -> str:
    """Value of `key` in the file at `path`.

    Raises ConfigLoadError when there is no file or it cannot be parsed.
    A missing section or name gives "", same as an empty value.
    """
    section, name = split_key(key)
    parser = load_config(path)
    val = lookup(parser, section, name)
    logger.debug("%s in %s: %r", key, path, val)
    return val


def single_level_file(level: Level, start):
    if level == Level.LOCAL:
        # a missing repository is reported rather than turned into "no file"
        return paths.local_config_file(start)
    elif level == Level.SYSTEM:
        raise UnsupportedLevelError(
            "system configuration lookup is not supported on this platform"
        )
    return paths.level_file(level, start)


def search_levels(request: LookupRequest) -> Resolution:
    start = paths.start_directory(request.start_location)
    for level in precedence:
        path = paths.level_file(level, start)
        try:
            val = query_file(request.key, path)
        except ConfigLoadError as e:
            logger.debug("%s level skipped: %s", level.name.lower(), e)
            continue
        if val != "":
            return Resolution(val, level, path)
    raise KeyNotFoundError(f"key not found: {request.key}")


def find_value(request: LookupRequest) -> Resolution:
    """Resolve a request, reporting which level and file answered it."""
    if request.level == Level.UNSPECIFIED:
        return search_levels(request)
    start = paths.start_directory(request.start_location)
    path = single_level_file(request.level, start)
    val = query_file(request.key, path)
    return Resolution(val, request.level, path)


def search_all_levels(request: LookupRequest) -> str:
    return search_levels(request).value


def get_value(request: LookupRequest) -> str:
    return find_value(request).value


resolve = get_value


def get_config(key: str, level=Level.UNSPECIFIED, start_location=None) -> str:
    request = LookupRequest(key, level, start_location)
    return get_value(request)
