# ABOUTME: Shared command plumbing: configuration loading and fatal error reporting
# ABOUTME: Any SetupError becomes one timestamped ERROR line and exit code 1

"""Base class for amplify-workstation commands."""

from cleo.commands.command import Command

from amplify_workstation.config import Config
from amplify_workstation.errors import CommandError, SetupError
from amplify_workstation.output import console, log_error
from amplify_workstation.shell import ShellRunner


class WorkstationCommand(Command):
    """A command whose workflow aborts on the first failure."""

    def handle(self) -> int:
        """Execute the command."""
        try:
            self.config = Config.load()
            return self.execute_workflow()
        except KeyboardInterrupt:
            console.print("\n\n[yellow]Setup interrupted.[/yellow]")
            return 1
        except CommandError as e:
            log_error(str(e))
            if e.output:
                console.print(f"[dim]{e.output}[/dim]", highlight=False)
            return 1
        except SetupError as e:
            log_error(str(e))
            return 1

    def execute_workflow(self) -> int:
        raise NotImplementedError

    @property
    def settings(self):
        return self.config.settings

    def create_runner(self) -> ShellRunner:
        return ShellRunner(verbose=self.io.is_verbose())
