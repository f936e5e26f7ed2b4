# ABOUTME: Setup selector offering Gen 1 or Gen 2 and running the matching full setup
# ABOUTME: An invalid --generation value is a fatal error (exit code 1)

"""Setup command - Generation selector."""

from amplify_workstation.cli.commands.init import InitCommand
from amplify_workstation.cli.utils import prompts
from amplify_workstation.errors import SetupError
from amplify_workstation.models import Generation


class SetupCommand(InitCommand):
    name = "setup"
    description = "Choose Amplify Gen 1 or Gen 2 and run the complete workstation setup"

    def execute_workflow(self) -> int:
        value = self.option("generation")
        if value is None:
            generation = prompts.ask_generation()
        else:
            try:
                generation = Generation.parse(value)
            except ValueError as e:
                raise SetupError(f"Invalid selection: {e}") from e
        return self._run_pipeline(generation)
