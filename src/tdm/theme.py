"""Line-drawing glyphs used by the menu.

Codes come from the DEC special graphics character set; they render as
box-drawing characters only while the terminal is in line-drawing mode.
"""


TL: int = ord('l')  # top-left
TR: int = ord('k')  # top-right
BL: int = ord('m')  # bottom-left
BR: int = ord('j')  # bottom-right
HOR: int = ord('q')
VERT: int = ord('x')

# Marker in front of the selected option
INDICATOR: int = ord('`')

__all__ = ["TL", "TR", "BL", "BR", "HOR", "VERT", "INDICATOR"]
