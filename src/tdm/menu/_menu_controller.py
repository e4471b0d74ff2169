"""
MenuController - selection state and incremental redraw of the menu.

The whole menu is drawn once by ``render()``. Afterwards navigation only
touches the indicator cells of the row that lost the selection and of the
row that gained it.
"""

from enum import Enum
from typing import List, Optional, Sequence

from tdm import constants, labels, theme
from tdm.logger import Logger
from tdm.menu._launcher import CommandLauncher
from tdm.menu._models import Layout, MenuOption
from tdm.terminal import BoxRenderer, GraphicsModeController, InputDecoder, Key

log = Logger().setup_logger('Menu')


class MenuState(Enum):
    IDLE = "idle"
    DISPATCH = "dispatch"
    EXITED = "exited"


class MenuController:
    """
    Owns the option list and the selected index.

    Attributes:
        options (list[MenuOption]): Rows in configuration order.
        layout (Layout): Geometry the rows are drawn with.
    """

    def __init__(
        self,
        options: Sequence[MenuOption],
        layout: Layout,
        graphics: GraphicsModeController,
        decoder: InputDecoder,
        launcher: CommandLauncher,
        title: str = constants.DEFAULT_TITLE,
    ) -> None:
        self.options: List[MenuOption] = list(options)
        self.layout = layout
        self.title = title
        self._graphics = graphics
        self._decoder = decoder
        self._launcher = launcher
        self._selected_index = 0
        self._state = MenuState.IDLE

    @property
    def selected_index(self) -> int:
        return self._selected_index

    @property
    def state(self) -> MenuState:
        return self._state

    @property
    def selected_option(self) -> Optional[MenuOption]:
        if not self.options:
            return None
        return self.options[self._selected_index]

    # -------------------------------------------------------------------------
    # Drawing
    # -------------------------------------------------------------------------
    def render(self) -> None:
        """Draw the box and every option row once."""
        layout = self.layout
        log.info(labels.MENU_LAYOUT, layout.box_width, layout.box_height, layout.origin_x, layout.origin_y)
        if not self.options:
            log.warning(labels.MENU_EMPTY)

        BoxRenderer(self._graphics).draw_box(
            layout.origin_x,
            layout.origin_y,
            layout.box_width,
            layout.box_height,
            layout.x_padding,
            layout.y_padding,
            self.title,
        )

        for i, option in enumerate(self.options):
            self._graphics.move_cursor_to(layout.option_column, layout.option_row(i))
            if i == self._selected_index:
                self._graphics.draw_glyph(theme.INDICATOR)
            else:
                self._graphics.write_text(' ')
            # Back to normal mode so the label is not drawn as glyphs
            self._graphics.set_mode(False)
            self._graphics.write_text(f" {option.label}")

        self._graphics.flush()

    def _clear_indicator(self, index: int) -> None:
        self._graphics.move_cursor_to(self.layout.option_column, self.layout.option_row(index))
        self._graphics.write_text(' ')

    def _draw_indicator(self, index: int) -> None:
        self._graphics.move_cursor_to(self.layout.option_column, self.layout.option_row(index))
        self._graphics.draw_glyph(theme.INDICATOR)
        self._graphics.set_mode(False)

    # -------------------------------------------------------------------------
    # Key handling
    # -------------------------------------------------------------------------
    def handle_key(self, key: Key) -> MenuState:
        """React to one decoded key and return the resulting state."""
        if self._state is MenuState.EXITED:
            return self._state

        self._state = MenuState.DISPATCH

        if not key.special and key.code == constants.QUIT_KEY:
            log.info(labels.MENU_QUIT)
            self._state = MenuState.EXITED
            return self._state

        if not key.special and key.code in constants.ENTER_KEYS:
            self._launch_selected()
        elif key.special and key.code in (constants.UP_ARROW, constants.DOWN_ARROW):
            self._move_selection(key.code)
        else:
            log.debug(labels.MENU_IGNORED_KEY, key.special, key.code)

        self._state = MenuState.IDLE
        return self._state

    def _move_selection(self, direction: int) -> None:
        count = len(self.options)
        if not count:
            return

        previous = self._selected_index
        if direction == constants.UP_ARROW:
            self._selected_index = count - 1 if previous == 0 else previous - 1
        else:
            self._selected_index = 0 if previous == count - 1 else previous + 1

        self._clear_indicator(previous)
        self._draw_indicator(self._selected_index)
        self._graphics.flush()
        log.debug(labels.MENU_SELECTED, self._selected_index, self.options[self._selected_index].label)

    def _launch_selected(self) -> None:
        option = self.selected_option
        if option is None:
            return
        self._graphics.flush()
        self._launcher.launch(option.command)

    # -------------------------------------------------------------------------
    # Main loop
    # -------------------------------------------------------------------------
    def run(self) -> None:
        """Render, then dispatch keys until 'q' or end of input."""
        self.render()
        self._graphics.hide_cursor()
        self._graphics.flush()

        while self._state is not MenuState.EXITED:
            key = self._decoder.read_key()
            if key is None:
                log.info(labels.MENU_END_OF_INPUT)
                self._state = MenuState.EXITED
                break
            self.handle_key(key)
