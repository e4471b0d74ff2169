"""Tests for menu layout and the command launcher."""
from tdm.menu import CommandLauncher, Layout, MenuOption


def options(*labels):
    return [MenuOption(label, label.lower()) for label in labels]


class TestLayout:
    """Box size and centering."""

    def test_box_width_is_longest_label_plus_margin(self):
        """Width is the longest label plus 3."""
        layout = Layout.compute(options("A", "BB", "CCC"), 0, 0, 80, 24)
        assert layout.box_width == 6

    def test_box_height_is_option_count(self):
        """Height equals the number of options."""
        layout = Layout.compute(options("A", "BB", "CCC"), 0, 0, 80, 24)
        assert layout.box_height == 3

    def test_centered_origin(self):
        """The bordered box is centered on the terminal."""
        layout = Layout.compute(options("A", "BB", "CCC"), 0, 0, 80, 24)
        assert (layout.origin_x, layout.origin_y) == (36, 9)

    def test_padding_is_carried(self):
        """Padding does not change the centered origin."""
        layout = Layout.compute(options("A"), 2, 1, 80, 24)
        assert (layout.x_padding, layout.y_padding) == (2, 1)
        assert layout.origin_x == Layout.compute(options("A"), 0, 0, 80, 24).origin_x

    def test_option_cells(self):
        """Rows start right below the top border, one column in."""
        layout = Layout.compute(options("A", "BB"), 0, 0, 80, 24)
        assert layout.option_column == layout.origin_x + 1
        assert layout.option_row(0) == layout.origin_y + 1
        assert layout.option_row(1) == layout.origin_y + 2

    def test_no_options(self):
        """An empty menu still gets a minimal box."""
        layout = Layout.compute([], 0, 0, 80, 24)
        assert (layout.box_width, layout.box_height) == (3, 0)


class TestCommandLauncher:
    """Command formatting and execution."""

    def test_format_command(self):
        """Launcher, command and stderr redirection in order."""
        launcher = CommandLauncher()
        assert launcher.format_command("alacritty") == "startx alacritty 2>/dev/null"

    def test_custom_launcher(self):
        """The launcher program can be replaced."""
        launcher = CommandLauncher("exec")
        assert launcher.format_command("sway") == "exec sway 2>/dev/null"

    def test_launch_runs_through_shell(self, runner):
        """The formatted string is run by the shell without checking the status."""
        CommandLauncher(runner=runner).launch("firefox --kiosk")
        assert runner.calls == [("startx firefox --kiosk 2>/dev/null", {"shell": True, "check": False})]
