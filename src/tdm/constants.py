### Configuration ###
CONFIG_FILENAME = 'tdm.conf'
CONFIG_HOME_ENV = 'XDG_CONFIG_HOME'
# Relative to $HOME when XDG_CONFIG_HOME is unset
DEFAULT_CONFIG_DIR = '.config'

# Reserved keys, consumed as layout settings instead of menu entries
PADDING_KEY = 'padding'
X_PADDING_KEY = 'xpadding'
Y_PADDING_KEY = 'ypadding'

COMMENT_PREFIX = '#'
KEY_VALUE_SEPARATOR = '='

### Launcher ###
DEFAULT_LAUNCHER = 'startx'
STDERR_DISCARD = '2>/dev/null'
DEFAULT_TITLE = 'tdm'

### Control bytes ###
ESCAPE = '\x1b'
ESCAPE_CODE = 27
# Shift-out selects G1 (line drawing), shift-in returns to G0
ENTER_LINE_DRAWING = '\x0e'
EXIT_LINE_DRAWING = '\x0f'

### Escape sequence bodies (emitted after ESCAPE) ###
RESET_SCREEN = 'c'
DESIGNATE_G1_LINE_DRAWING = ')0'
CURSOR_DOWN = '[B'
CURSOR_LEFT = '[D'
CURSOR_POSITION = '[{};{}f'
HIDE_CURSOR = '[?25l'
SHOW_CURSOR = '[?25h'

### Keys ###
CSI_INTRODUCER = ord('[')
ARROW_BASE = ord('A')
UP_ARROW = 0
DOWN_ARROW = 1
RIGHT_ARROW = 2
LEFT_ARROW = 3

QUIT_KEY = ord('q')
ENTER_KEYS = (ord('\n'), ord('\r'))

### Layout ###
# Indicator column, separating space and one trailing column
BOX_MARGIN = 3
# Left and right border columns
BORDER_WIDTH = 2
