"""
Data models for the menu: the options read from the configuration and the
box geometry derived from them.
"""

from dataclasses import dataclass
from typing import Sequence

from tdm import constants


@dataclass(frozen=True)
class MenuOption:
    """A menu row: the label shown and the command handed to the launcher."""

    label: str
    command: str


@dataclass(frozen=True)
class Layout:
    """
    Box geometry, computed once after every option is known.

    Attributes:
        x_padding (int): Extra columns on each side of the box.
        y_padding (int): Extra rows above and below the options.
        box_width (int): Longest label plus BOX_MARGIN.
        box_height (int): Number of options.
        origin_x (int): Left border column of the unpadded box.
        origin_y (int): Top border row of the unpadded box.
    """

    x_padding: int
    y_padding: int
    box_width: int
    box_height: int
    origin_x: int
    origin_y: int

    @classmethod
    def compute(
        cls, options: Sequence[MenuOption], x_padding: int, y_padding: int, columns: int, rows: int
    ) -> 'Layout':
        """Center a box sized for ``options`` on a ``columns`` x ``rows`` terminal."""
        box_width = max((len(option.label) for option in options), default=0) + constants.BOX_MARGIN
        box_height = len(options)
        origin_x = (columns - box_width - constants.BORDER_WIDTH) // 2
        origin_y = (rows - box_height - constants.BORDER_WIDTH) // 2
        return cls(x_padding, y_padding, box_width, box_height, origin_x, origin_y)

    @property
    def option_column(self) -> int:
        return self.origin_x + 1

    def option_row(self, index: int) -> int:
        return self.origin_y + 1 + index
