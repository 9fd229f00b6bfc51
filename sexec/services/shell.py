"""
Shell Executor — Run a substituted command string in a subshell

The command inherits the terminal (stdin/stdout/stderr) so interactive
programs behave as if typed directly. Blocks until the process exits.
"""

import logging
import subprocess
from typing import Optional

from ..errors import ExecutionError

logger = logging.getLogger(__name__)


class ShellExecutor:
    """
    Spawns commands through the system shell.

    Args:
        shell: Optional shell executable (e.g. /bin/bash); None uses /bin/sh
    """

    def __init__(self, shell: Optional[str] = None):
        self.shell = shell

    def execute(self, command: str) -> Optional[int]:
        """
        Run a command and wait for it.

        Returns:
            Exit code, or None if the process was ended by a signal
            or interrupted with Ctrl-C

        Raises:
            ExecutionError: If the shell could not be started
        """
        logger.debug("Executing %r (shell=%s)", command, self.shell or "default")
        try:
            completed = subprocess.run(command, shell=True, executable=self.shell)
        except OSError as e:
            logger.debug("Failed to spawn shell: %s", e)
            raise ExecutionError()
        except KeyboardInterrupt:
            # subprocess.run has already reaped the child
            logger.debug("Interrupted while running %r", command)
            return None

        code = completed.returncode
        # Negative return codes mean "terminated by signal -N" on POSIX
        if code < 0:
            return None
        return code
