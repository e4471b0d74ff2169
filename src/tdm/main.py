#!/usr/bin/env python3
"""
tdm command line entry point.

Reads the whole configuration first, so a missing or malformed file is
reported before the terminal is touched, then runs the menu inside a
TerminalSession.
"""

import argparse
import logging
import sys
from typing import BinaryIO, List, Optional, TextIO, Tuple

from tdm import __version__, constants, labels
from tdm.configuration import ConfigError, MenuConfig, read_config
from tdm.logger import Logger
from tdm.menu import CommandLauncher, Layout, MenuController
from tdm.terminal import GraphicsModeController, InputDecoder, TerminalSession, get_terminal_size

log = Logger().setup_logger('Main')

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='tdm', description='Terminal session launcher')
    parser.add_argument('--config', help='Configuration file (default: $XDG_CONFIG_HOME/tdm.conf or ~/.config/tdm.conf)')
    parser.add_argument(
        '--launcher', default=constants.DEFAULT_LAUNCHER, help='Program the selected command is passed to'
    )
    parser.add_argument('--title', default=constants.DEFAULT_TITLE, help='Text drawn in the top border')
    parser.add_argument('--debug', action='store_true', help='Log debug messages')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser.parse_args(argv)


def run_menu(
    menu_config: MenuConfig,
    output: TextIO,
    source: BinaryIO,
    launcher: CommandLauncher,
    title: str = constants.DEFAULT_TITLE,
    terminal_size: Optional[Tuple[int, int]] = None,
    stdin_fd: Optional[int] = None,
) -> int:
    """
    Run the interactive menu until the user quits.

    Args:
        menu_config (MenuConfig): Options and padding read from tdm.conf.
        output (TextIO): Stream the menu is drawn on.
        source (BinaryIO): Raw key input.
        launcher (CommandLauncher): Runs the selected command.
        title (str): Text drawn in the top border.
        terminal_size (tuple, optional): (columns, rows); queried from ``stdin_fd`` when omitted.
        stdin_fd (int, optional): Terminal whose mode is switched for the session.

    Returns:
        int: Process exit status.
    """
    graphics = GraphicsModeController(output)
    columns, rows = terminal_size or get_terminal_size(stdin_fd)
    layout = Layout.compute(menu_config.options, menu_config.x_padding, menu_config.y_padding, columns, rows)
    menu = MenuController(menu_config.options, layout, graphics, InputDecoder(source), launcher, title)

    with TerminalSession(graphics, stdin_fd):
        try:
            menu.run()
        except KeyboardInterrupt:
            log.info(labels.MAIN_TERMINATED_CTRL_C)

    return EXIT_SUCCESS


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.debug:
        Logger().set_level(logging.DEBUG)

    log.info(labels.MAIN_STARTING)

    try:
        menu_config = read_config(args.config)
    except ConfigError as e:
        log.error(labels.MAIN_CONFIG_ERROR, e)
        print(e)
        return EXIT_FAILURE

    stdin_fd = sys.stdin.fileno()
    with open(stdin_fd, 'rb', buffering=0, closefd=False) as source:
        status = run_menu(
            menu_config,
            sys.stdout,
            source,
            CommandLauncher(args.launcher),
            title=args.title,
            stdin_fd=stdin_fd,
        )

    log.info(labels.MAIN_TERMINATED_NORMAL)
    return status


if __name__ == '__main__':
    sys.exit(main())
