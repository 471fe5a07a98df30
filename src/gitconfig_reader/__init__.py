from .config import (
    LookupRequest,
    Resolution,
    find_value,
    get_config,
    get_value,
    query_file,
    resolve,
    search_all_levels,
    split_key,
)
from .errors import (
    ConfigLoadError,
    GitConfigError,
    KeyNotFoundError,
    NotGitRepositoryError,
    UnsupportedLevelError,
)
from .levels import Level
from .paths import find_repository_root, level_file
