# ABOUTME: Runs external commands (apt, curl, npm, amplify, ssh, rsync) for the workflows
# ABOUTME: Any non-zero exit raises CommandError so the caller aborts on the first failure

"""External command execution."""

import os
import shlex
import shutil
import subprocess
from pathlib import Path

from amplify_workstation.errors import CommandError
from amplify_workstation.output import console


class ShellRunner:
    """Run external commands one at a time, raising on the first failure.

    The runner owns the environment handed to child processes so that the
    PATH can be extended (for example with the nvm node bin directory) without
    touching ``os.environ``.
    """

    def __init__(self, env: dict[str, str] | None = None, verbose: bool = False):
        self.env = dict(os.environ if env is None else env)
        self.verbose = verbose

    def run(
        self,
        argv: list[str],
        description: str,
        *,
        cwd: Path | None = None,
        input: str | None = None,
        env: dict[str, str] | None = None,
        capture: bool = False,
    ) -> subprocess.CompletedProcess:
        """Run a command and raise CommandError if it fails.

        Args:
            argv: Command and arguments.
            description: Human readable failure message, e.g. "Amplify init failed".
            cwd: Working directory.
            input: Text written to the command's stdin.
            env: Extra environment variables for this command only.
            capture: Capture stdout/stderr instead of streaming them to the terminal.
        """
        if self.verbose:
            console.print(f"[dim]Running: {shlex.join(argv)}[/dim]", highlight=False)

        child_env = dict(self.env)
        if env:
            child_env.update(env)

        try:
            result = subprocess.run(
                argv,
                cwd=str(cwd) if cwd else None,
                input=input,
                env=child_env,
                text=True,
                capture_output=capture,
            )
        except FileNotFoundError as e:
            raise CommandError(description, argv, 127, str(e)) from e

        if result.returncode != 0:
            output = ""
            if capture:
                output = (result.stderr or result.stdout or "").strip()
            raise CommandError(description, argv, result.returncode, output)
        return result

    def run_shell(self, script: str, description: str, **kwargs) -> subprocess.CompletedProcess:
        """Run a bash snippet (pipelines, sourced shell functions such as nvm)."""
        return self.run(["bash", "-c", script], description, **kwargs)

    def succeeds(self, argv: list[str], cwd: Path | None = None) -> bool:
        """Return True if the command exits 0. Never raises."""
        try:
            result = subprocess.run(
                argv,
                cwd=str(cwd) if cwd else None,
                env=self.env,
                capture_output=True,
                text=True,
            )
        except OSError:
            return False
        return result.returncode == 0

    def which(self, command: str) -> str | None:
        """Locate a command on the runner's PATH."""
        return shutil.which(command, path=self.env.get("PATH"))

    def prepend_path(self, directory: Path) -> None:
        """Put a directory first on the PATH of every later command."""
        current = self.env.get("PATH", "")
        entries = [entry for entry in current.split(os.pathsep) if entry and entry != str(directory)]
        self.env["PATH"] = os.pathsep.join([str(directory), *entries])
