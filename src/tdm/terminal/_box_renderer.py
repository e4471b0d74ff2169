from tdm import theme
from tdm.terminal._graphics_mode import GraphicsModeController


class BoxRenderer:
    """
    Draws a titled border with the DEC line-drawing glyphs.

    The two sides are drawn with relative cursor motion only: each row is a
    cursor-down, a cursor-left and one vertical glyph, which leaves the
    cursor just right of the glyph again. A side is therefore started from
    the absolute position one column right of the corner it hangs from.
    """

    def __init__(self, graphics: GraphicsModeController):
        self._graphics = graphics

    def draw_box(
        self, x: int, y: int, width: int, height: int, x_padding: int = 0, y_padding: int = 0, title: str = ''
    ) -> None:
        """
        Draw a box whose inner area is ``width`` x ``height`` cells at (x, y).

        Args:
            x (int): Column of the left border before padding.
            y (int): Row of the top border before padding.
            width (int): Inner width before padding.
            height (int): Inner height before padding.
            x_padding (int): Extra columns on each side.
            y_padding (int): Extra rows above and below.
            title (str): Printed verbatim after the first top-edge glyph. It is
                not truncated, a title wider than the box misaligns the border.
        """
        x -= x_padding
        y -= y_padding
        width += x_padding * 2
        height += y_padding * 2

        self._draw_top(x, y, width, title)

        self._graphics.move_cursor_to(x + width + 2, y)
        self._draw_side(height)

        self._graphics.move_cursor_to(x + 1, y)
        self._draw_side(height)

        self._draw_bottom(width)

    def _draw_top(self, x: int, y: int, width: int, title: str) -> None:
        self._graphics.move_cursor_to(x, y)
        self._graphics.draw_glyph(theme.TL)
        self._graphics.draw_glyph(theme.HOR)
        self._graphics.write_text(title)
        for _ in range(width - 1 - len(title)):
            self._graphics.draw_glyph(theme.HOR)
        self._graphics.draw_glyph(theme.TR)

    def _draw_side(self, height: int) -> None:
        for _ in range(height):
            self._graphics.cursor_down()
            self._graphics.cursor_left()
            self._graphics.draw_glyph(theme.VERT)

    def _draw_bottom(self, width: int) -> None:
        # Continue from the last left-side glyph
        self._graphics.cursor_down()
        self._graphics.cursor_left()
        self._graphics.draw_glyph(theme.BL)
        for _ in range(width):
            self._graphics.draw_glyph(theme.HOR)
        self._graphics.draw_glyph(theme.BR)
