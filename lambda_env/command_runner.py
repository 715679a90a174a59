"""
Subprocess wrapper used to query the local build environment.
"""
import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Tuple


class CommandError(Exception):
    """Raised when an external command exits non-zero or cannot be started."""

    def __init__(self, cmd: List[str], message: str):
        self.cmd = cmd
        super().__init__(f"{' '.join(cmd)}: {message}")


def run_command(
    cmd: List[str],
    cwd: Optional[Path] = None,
    timeout: Optional[float] = None,
) -> Tuple[bool, str, str]:
    """
    Run a command and capture its output.

    :param cmd: Command as list of strings.
    :param cwd: Working directory, defaults to the current one.
    :param timeout: Seconds before the process is killed, None waits forever.
    :returns: Tuple of (success, stdout, stderr).
    """
    try:
        result = subprocess.run(
            cmd,
            check=True,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            cwd=str(cwd) if cwd else None,
            timeout=timeout,
        )
        return True, result.stdout, result.stderr
    except subprocess.CalledProcessError as e:
        return False, e.stdout or "", e.stderr or f"exit status {e.returncode}"
    except subprocess.TimeoutExpired:
        return False, "", f"Timed out after {timeout}s"
    except FileNotFoundError:
        return False, "", f"Command not found: {cmd[0]}"


class CommandRunner:
    """
    Runs read-only commands and returns their trimmed stdout.
    """

    def __init__(self, cwd: Optional[Path] = None, timeout: Optional[float] = None):
        """
        :param cwd: Working directory for every command
        :param timeout: Per command timeout in seconds
        """
        self.cwd = cwd
        self.timeout = timeout
        self.logger = logging.getLogger(self.__class__.__name__)

    def run(self, cmd: List[str]) -> str:
        """
        Run a command.

        :param cmd: Command as list of strings.
        :returns: Stripped stdout.
        :raises CommandError: On non-zero exit, missing executable or timeout.
        """
        self.logger.debug(f"Running: {' '.join(cmd)}")
        success, stdout, stderr = run_command(cmd, cwd=self.cwd, timeout=self.timeout)
        if not success:
            raise CommandError(cmd, stderr.strip())
        return stdout.strip()
