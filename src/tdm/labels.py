"""
User-facing and log strings for tdm.

Keeping them here lets the diagnostics and log lines be reviewed in one place.
"""

# Fatal configuration diagnostics
MSG_CONFIG_NOT_FOUND = "Cannot locate config file at '{}'"
MSG_INVALID_CONFIGURATION = "Invalid Configuration:\n '{}'"
MSG_CONFIG_UNREADABLE = "Cannot read config file '{}': {}"

# Configuration
CONFIG_RESOLVED_PATH = 'Using configuration file %s'
CONFIG_ENTRY = 'Read entry %r = %r'
CONFIG_SOURCE_CLOSED = 'Configuration source closed'
CONFIG_PADDING = 'Padding set to x=%d y=%d'
CONFIG_LOADED = 'Loaded %d menu option(s)'
CONFIG_MALFORMED = 'Malformed configuration line: %r'

# Terminal
TERMINAL_NOT_A_TTY = 'Input is not a terminal, leaving terminal attributes untouched'
TERMINAL_CBREAK = 'Terminal switched to cbreak mode'
TERMINAL_RESTORED = 'Terminal attributes restored'
TERMINAL_SIZE = 'Terminal size is %dx%d'
TERMINAL_SIZE_FALLBACK = 'TIOCGWINSZ failed (%s), falling back to environment size'

# Menu
MENU_LAYOUT = 'Box %dx%d at (%d, %d)'
MENU_SELECTED = 'Selection moved to %d (%s)'
MENU_QUIT = 'Quit requested'
MENU_END_OF_INPUT = 'End of input reached, leaving menu'
MENU_IGNORED_KEY = 'Ignored key special=%s code=%d'
MENU_EMPTY = 'No menu options configured'

# Launcher
LAUNCH_RUNNING = 'Running: %s'
LAUNCH_FINISHED = 'Command finished with exit code %s'

# Main
MAIN_STARTING = 'Starting tdm'
MAIN_TERMINATED_NORMAL = 'tdm terminated normally'
MAIN_TERMINATED_CTRL_C = 'tdm terminated with Ctrl+C'
MAIN_CONFIG_ERROR = 'Configuration error: %s'
