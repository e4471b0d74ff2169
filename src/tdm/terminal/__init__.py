from ._box_renderer import BoxRenderer
from ._graphics_mode import GraphicsModeController
from ._input_decoder import InputDecoder, Key
from ._terminal_session import TerminalSession, get_terminal_size

__all__ = [
    "BoxRenderer",
    "GraphicsModeController",
    "InputDecoder",
    "Key",
    "TerminalSession",
    "get_terminal_size",
]
