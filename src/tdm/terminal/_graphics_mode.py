"""
Single chokepoint for everything written to the terminal.

Line-drawing mode reinterprets the printable ASCII range as box glyphs,
which includes the bytes escape sequences are made of. Every escape
sequence is therefore emitted with line-drawing mode forced off and the
previous mode restored afterwards.
"""

from typing import TextIO

from tdm import constants


class GraphicsModeController:
    """
    Tracks whether the output stream is in line-drawing mode.

    Attributes:
        line_drawing (bool): True while shift-out is in effect.
    """

    def __init__(self, output: TextIO):
        self._output = output
        self._line_drawing = False

    @property
    def line_drawing(self) -> bool:
        return self._line_drawing

    def set_mode(self, on: bool) -> bool:
        """
        Switch line-drawing mode on or off.

        Emits one shift-out/shift-in byte when the mode actually changes and
        nothing otherwise.

        Returns:
            bool: The mode that was active before the call.
        """
        previous = self._line_drawing
        if on != previous:
            self._output.write(constants.ENTER_LINE_DRAWING if on else constants.EXIT_LINE_DRAWING)
            self._line_drawing = on
        return previous

    def draw_glyph(self, code: int) -> None:
        self.set_mode(True)
        self._output.write(chr(code))

    def write_text(self, text: str) -> None:
        """Print plain text, leaving line-drawing mode first."""
        self.set_mode(False)
        self._output.write(text)

    def run_control_sequence(self, sequence: str) -> None:
        """Emit ESC + ``sequence`` in normal mode, then restore the previous mode."""
        previous = self.set_mode(False)
        self._output.write(constants.ESCAPE + sequence)
        self.set_mode(previous)

    def move_cursor_to(self, x: int, y: int) -> None:
        # Row comes first in the escape sequence
        self.run_control_sequence(constants.CURSOR_POSITION.format(y, x))

    def cursor_down(self) -> None:
        self.run_control_sequence(constants.CURSOR_DOWN)

    def cursor_left(self) -> None:
        self.run_control_sequence(constants.CURSOR_LEFT)

    def hide_cursor(self) -> None:
        self.run_control_sequence(constants.HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.run_control_sequence(constants.SHOW_CURSOR)

    def reset_screen(self) -> None:
        self.run_control_sequence(constants.RESET_SCREEN)

    def designate_line_drawing(self) -> None:
        """Load the DEC line-drawing set into G1 so shift-out selects it."""
        self.run_control_sequence(constants.DESIGNATE_G1_LINE_DRAWING)

    def flush(self) -> None:
        self._output.flush()
