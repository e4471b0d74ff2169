import subprocess
from typing import Callable

from tdm import constants, labels
from tdm.logger import Logger

log = Logger().setup_logger('Launcher')


class CommandLauncher:
    """
    Runs the selected command as ``<launcher> <command> 2>/dev/null``.

    The call blocks until the child exits. Its exit status is logged and
    otherwise ignored.
    """

    def __init__(self, launcher: str = constants.DEFAULT_LAUNCHER, runner: Callable = subprocess.run):
        self.launcher = launcher
        self._runner = runner

    def format_command(self, command: str) -> str:
        return f"{self.launcher} {command} {constants.STDERR_DISCARD}"

    def launch(self, command: str) -> None:
        shell_command = self.format_command(command)
        log.info(labels.LAUNCH_RUNNING, shell_command)
        result = self._runner(shell_command, shell=True, check=False)
        log.info(labels.LAUNCH_FINISHED, getattr(result, 'returncode', None))
