from pathlib import Path
from typing import Union

from tdm import labels


class ConfigError(Exception):
    """Base class for fatal configuration problems."""


class ConfigNotFound(ConfigError):
    """The configuration file could not be opened."""

    def __init__(self, path: Union[str, Path]):
        self.path = str(path)
        super().__init__(labels.MSG_CONFIG_NOT_FOUND.format(self.path))


class MalformedConfigLine(ConfigError):
    """A line that is neither blank nor a comment has no '=' separator."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(labels.MSG_INVALID_CONFIGURATION.format(line))


class ConfigUnreadable(ConfigError):
    """The configuration file is not valid UTF-8 text."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(labels.MSG_CONFIG_UNREADABLE.format(name, reason))
