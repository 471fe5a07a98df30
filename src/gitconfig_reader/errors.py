class GitConfigError(Exception):
    pass


class NotGitRepositoryError(GitConfigError):
    pass


class ConfigLoadError(GitConfigError):
    pass


class UnsupportedLevelError(ConfigLoadError):
    pass


class KeyNotFoundError(GitConfigError):
    pass
