"""
Turns tdm.conf into the menu options and padding used by the menu.
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional, TextIO, Union

from tdm import constants, labels
from tdm.configuration._config_parser import ConfigParser
from tdm.configuration._errors import ConfigNotFound, ConfigUnreadable
from tdm.logger import Logger
from tdm.menu import MenuOption

log = Logger().setup_logger('Configuration')

_LEADING_INT = re.compile(r'\s*([+-]?\d+)')


@dataclass
class MenuConfig:
    """Everything read from the configuration file."""

    options: List[MenuOption] = field(default_factory=list)
    x_padding: int = 0
    y_padding: int = 0


def parse_int(value: str) -> int:
    """Read a leading integer like C atoi: '2px' -> 2, 'abc' -> 0."""
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else 0


def resolve_config_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """
    Locate tdm.conf.

    $XDG_CONFIG_HOME/tdm.conf when the variable is set, otherwise
    $HOME/.config/tdm.conf.
    """
    if environ is None:
        environ = os.environ

    config_home = environ.get(constants.CONFIG_HOME_ENV)
    if config_home:
        return Path(config_home) / constants.CONFIG_FILENAME

    home = environ.get('HOME')
    base = Path(home) if home else Path.home()
    return base / constants.DEFAULT_CONFIG_DIR / constants.CONFIG_FILENAME


def open_config(path: Union[str, Path]) -> TextIO:
    """Open the configuration for reading, raising ConfigNotFound on failure."""
    try:
        return open(path, encoding='utf-8')
    except OSError as e:
        raise ConfigNotFound(path) from e


def load_menu_config(source: TextIO) -> MenuConfig:
    """
    Read every entry from ``source``.

    Reserved keys set the padding in file order, so a later ``xpadding``
    overrides only the horizontal part of an earlier ``padding``. Any other
    key becomes a menu option whose value is the command to launch.

    Raises:
        MalformedConfigLine: on a line without a separator.
        ConfigUnreadable: when the source is not valid UTF-8.
    """
    config = MenuConfig()
    name = str(getattr(source, 'name', '<config>'))

    with ConfigParser(source) as parser:
        try:
            for entry in parser:
                if entry.key == constants.PADDING_KEY:
                    config.x_padding = config.y_padding = parse_int(entry.value)
                elif entry.key == constants.X_PADDING_KEY:
                    config.x_padding = parse_int(entry.value)
                elif entry.key == constants.Y_PADDING_KEY:
                    config.y_padding = parse_int(entry.value)
                else:
                    config.options.append(MenuOption(entry.key, entry.value))
        except UnicodeDecodeError as e:
            raise ConfigUnreadable(name, str(e)) from e

    log.info(labels.CONFIG_LOADED, len(config.options))
    log.info(labels.CONFIG_PADDING, config.x_padding, config.y_padding)
    return config


def read_config(path: Union[str, Path, None] = None, environ: Optional[Mapping[str, str]] = None) -> MenuConfig:
    """Resolve (unless given), open and load the configuration file."""
    if path is None:
        path = resolve_config_path(environ)
    log.info(labels.CONFIG_RESOLVED_PATH, path)
    return load_menu_config(open_config(path))
