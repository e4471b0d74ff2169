import os
import subprocess
import tempfile

import pytest

# Keep test runs from writing into the user's state directory
os.environ.setdefault('TDM_LOG_DIR', tempfile.mkdtemp(prefix='tdm-logs-'))

from tdm import constants, theme  # noqa: E402

# Box characters used when printing a captured screen
UNICODE_GLYPHS = {
    theme.TL: '┌',
    theme.TR: '┐',
    theme.BL: '└',
    theme.BR: '┘',
    theme.HOR: '─',
    theme.VERT: '│',
    theme.INDICATOR: '◆',
}


class Screen:
    """
    Minimal VT100 model: replays what tdm writes into a grid of cells.

    Understands absolute positioning, relative cursor motion, shift-out and
    shift-in, cursor visibility and full reset. Every cell remembers whether
    it was written in line-drawing mode.
    """

    def __init__(self):
        self.reset()
        self.escapes_in_line_drawing = 0

    def reset(self):
        self.cells = {}
        self.row = 1
        self.col = 1
        self.line_drawing = False
        self.cursor_visible = True

    def feed(self, data):
        i = 0
        while i < len(data):
            ch = data[i]
            if ch == constants.ESCAPE:
                if self.line_drawing:
                    self.escapes_in_line_drawing += 1
                nxt = data[i + 1]
                if nxt == '[':
                    j = i + 2
                    while not data[j].isalpha():
                        j += 1
                    self._csi(data[i + 2:j], data[j])
                    i = j + 1
                elif nxt == 'c':
                    self.reset()
                    i += 2
                elif nxt in '()':
                    i += 3
                else:
                    i += 2
                continue
            if ch == constants.ENTER_LINE_DRAWING:
                self.line_drawing = True
            elif ch == constants.EXIT_LINE_DRAWING:
                self.line_drawing = False
            else:
                self.cells[(self.row, self.col)] = (ch, self.line_drawing)
                self.col += 1
            i += 1

    def _csi(self, params, final):
        if final in 'fH':
            row, col = params.split(';')
            self.row, self.col = int(row), int(col)
        elif params == '?25' and final in 'hl':
            self.cursor_visible = final == 'h'
        else:
            n = int(params) if params else 1
            if final == 'A':
                self.row = max(1, self.row - n)
            elif final == 'B':
                self.row += n
            elif final == 'C':
                self.col += n
            elif final == 'D':
                self.col = max(1, self.col - n)

    def cell(self, row, col):
        return self.cells.get((row, col), (' ', False))

    def text(self, row, start, end):
        """Row contents between two columns (inclusive), glyphs shown as box characters."""
        out = []
        for col in range(start, end + 1):
            ch, drawing = self.cell(row, col)
            out.append(UNICODE_GLYPHS.get(ord(ch), ch) if drawing else ch)
        return ''.join(out)


class RecordingRunner:
    """Stands in for subprocess.run and remembers every command."""

    def __init__(self):
        self.calls = []

    def __call__(self, command, **kwargs):
        self.calls.append((command, kwargs))
        return subprocess.CompletedProcess(command, 0)

    @property
    def commands(self):
        return [command for command, _ in self.calls]


@pytest.fixture
def screen():
    return Screen()


@pytest.fixture
def runner():
    return RecordingRunner()
