from ._config_loader import MenuConfig, load_menu_config, open_config, parse_int, read_config, resolve_config_path
from ._config_parser import ConfigEntry, ConfigParser
from ._errors import ConfigError, ConfigNotFound, ConfigUnreadable, MalformedConfigLine

__all__ = [
    "ConfigEntry",
    "ConfigParser",
    "ConfigError",
    "ConfigNotFound",
    "ConfigUnreadable",
    "MalformedConfigLine",
    "MenuConfig",
    "load_menu_config",
    "open_config",
    "parse_int",
    "read_config",
    "resolve_config_path",
]
