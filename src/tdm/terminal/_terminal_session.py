"""
Terminal mode handling around the interactive menu.
"""

import array
import os
import shutil
import termios
from fcntl import ioctl
from typing import Optional, Tuple

from tdm import labels
from tdm.logger import Logger
from tdm.terminal._graphics_mode import GraphicsModeController

log = Logger().setup_logger('Terminal')


def get_terminal_size(fd: Optional[int] = None) -> Tuple[int, int]:
    """
    Return (columns, rows) of the terminal behind ``fd``.

    Uses the TIOCGWINSZ ioctl and falls back to shutil.get_terminal_size()
    when ``fd`` is None or not a terminal.
    """
    if fd is not None:
        try:
            buf = array.array('H', [0, 0, 0, 0])
            ioctl(fd, termios.TIOCGWINSZ, buf, True)
            rows, columns = buf[0], buf[1]
            if rows and columns:
                log.debug(labels.TERMINAL_SIZE, columns, rows)
                return columns, rows
        except OSError as e:
            log.debug(labels.TERMINAL_SIZE_FALLBACK, e)

    size = shutil.get_terminal_size()
    return size.columns, size.lines


class TerminalSession:
    """
    Context manager that prepares the terminal for the menu and undoes it.

    On enter, canonical input and echo are switched off (when ``stdin_fd``
    is a terminal), the screen is reset and G1 is loaded with the
    line-drawing set. On exit the cursor is shown again, the saved
    attributes are restored and the screen is reset.
    """

    def __init__(self, graphics: GraphicsModeController, stdin_fd: Optional[int] = None):
        self._graphics = graphics
        self._stdin_fd = stdin_fd
        self._old_settings = None

    def __enter__(self) -> 'TerminalSession':
        if self._stdin_fd is not None and os.isatty(self._stdin_fd):
            self._old_settings = termios.tcgetattr(self._stdin_fd)
            new_settings = termios.tcgetattr(self._stdin_fd)
            new_settings[3] &= ~(termios.ICANON | termios.ECHO)
            termios.tcsetattr(self._stdin_fd, termios.TCSANOW, new_settings)
            log.info(labels.TERMINAL_CBREAK)
        else:
            log.info(labels.TERMINAL_NOT_A_TTY)

        self._graphics.reset_screen()
        self._graphics.designate_line_drawing()
        self._graphics.flush()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self._graphics.set_mode(False)
            self._graphics.show_cursor()
            self._graphics.flush()
        finally:
            # Restore echo and canonical input even if the terminal went away
            if self._old_settings is not None:
                termios.tcsetattr(self._stdin_fd, termios.TCSANOW, self._old_settings)
                self._old_settings = None
                log.info(labels.TERMINAL_RESTORED)
        self._graphics.reset_screen()
        self._graphics.flush()
