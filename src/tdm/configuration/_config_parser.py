"""
Line-oriented key/value reader for tdm.conf.

Each surfaced line is split on its first '='. The key loses trailing
spaces only and the value loses leading spaces only, so
``  work  =  alacritty -e tmux  `` yields key ``'  work'`` and value
``'alacritty -e tmux  '``.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, TextIO

from tdm import constants, labels
from tdm.configuration._errors import MalformedConfigLine
from tdm.logger import Logger

log = Logger().setup_logger('Configuration')


@dataclass(frozen=True)
class ConfigEntry:
    """One key/value pair read from the configuration."""

    key: str
    value: str


def _strip_line_ending(line: str) -> str:
    if line.endswith('\n'):
        line = line[:-1]
    if line.endswith('\r'):
        line = line[:-1]
    return line


def _is_skipped(line: str) -> bool:
    return not line.strip() or line.startswith(constants.COMMENT_PREFIX)


class ConfigParser:
    """
    Streams ConfigEntry values out of an open text source.

    The source is closed as soon as the end of input is reached or a
    malformed line is met. Callers either pull entries one at a time with
    ``next_entry()`` or iterate over the parser.
    """

    def __init__(self, source: TextIO):
        self._source: Optional[TextIO] = source

    @property
    def closed(self) -> bool:
        return self._source is None

    def next_entry(self) -> Optional[ConfigEntry]:
        """
        Return the next entry, or None once the input is exhausted.

        Raises:
            MalformedConfigLine: when a surfaced line has no '='.
        """
        if self._source is None:
            return None

        while True:
            line = self._source.readline()
            if not line:
                self.close()
                return None
            line = _strip_line_ending(line)
            if not _is_skipped(line):
                break

        if constants.KEY_VALUE_SEPARATOR not in line:
            log.error(labels.CONFIG_MALFORMED, line)
            self.close()
            raise MalformedConfigLine(line)

        raw_key, raw_value = line.split(constants.KEY_VALUE_SEPARATOR, 1)
        entry = ConfigEntry(raw_key.rstrip(' '), raw_value.lstrip(' '))
        log.debug(labels.CONFIG_ENTRY, entry.key, entry.value)
        return entry

    def close(self) -> None:
        if self._source is not None:
            self._source.close()
            self._source = None
            log.debug(labels.CONFIG_SOURCE_CLOSED)

    def __iter__(self) -> Iterator[ConfigEntry]:
        while True:
            entry = self.next_entry()
            if entry is None:
                return
            yield entry

    def __enter__(self) -> 'ConfigParser':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
