from ._launcher import CommandLauncher
from ._models import Layout, MenuOption
from ._menu_controller import MenuController, MenuState

__all__ = ["CommandLauncher", "Layout", "MenuOption", "MenuController", "MenuState"]
