"""
Decodes raw terminal bytes into keys.

Arrow keys arrive as ESC '[' <letter>; the letter minus 'A' gives
Up=0, Down=1, Right=2, Left=3. Everything else is returned byte by byte.
"""

from typing import BinaryIO, NamedTuple, Optional

from tdm import constants


class Key(NamedTuple):
    special: bool
    code: int


class InputDecoder:
    """
    Blocking key reader.

    An ESC that is not followed by '[' is returned as a literal ESC key and
    the byte read after it is kept for the next call, so no keystroke is
    swallowed. There is no timeout: a lone ESC is delivered once the next
    byte arrives.
    """

    def __init__(self, source: BinaryIO):
        self._source = source
        self._pending: Optional[int] = None

    def _read_byte(self) -> Optional[int]:
        if self._pending is not None:
            byte, self._pending = self._pending, None
            return byte
        data = self._source.read(1)
        if not data:
            return None
        return data[0]

    def read_key(self) -> Optional[Key]:
        """
        Block until one key is available.

        Returns:
            Optional[Key]: The decoded key, or None at end of input.
        """
        byte = self._read_byte()
        if byte is None:
            return None

        if byte != constants.ESCAPE_CODE:
            return Key(False, byte)

        follower = self._read_byte()
        if follower is None:
            return Key(False, byte)
        if follower != constants.CSI_INTRODUCER:
            self._pending = follower
            return Key(False, byte)

        final = self._read_byte()
        if final is None:
            return None
        return Key(True, final - constants.ARROW_BASE)
