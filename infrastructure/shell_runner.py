import logging
import subprocess
import sys
from typing import List

from core import ShellCommandError

logger = logging.getLogger("tuido.shell")


def shell_argv(command: str) -> List[str]:
    if sys.platform.startswith("win"):
        return ["cmd", "/C", command]
    return ["sh", "-c", command]


class SubprocessShellRunner:
    """Runs a shell command to completion and returns its stdout."""

    def run(self, command: str) -> str:
        try:
            result = subprocess.run(shell_argv(command), capture_output=True, encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.warning("Shell command failed to start: %s", exc)
            raise ShellCommandError(str(exc)) from exc
        if result.returncode != 0:
            logger.warning("Shell command exited with %s: %s", result.returncode, command)
            if not result.stdout.strip():
                return result.stderr
        return result.stdout


__all__ = ["SubprocessShellRunner", "shell_argv"]
