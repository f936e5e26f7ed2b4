# ABOUTME: Init and reinit commands: install, configure, then create or reuse the Amplify project
# ABOUTME: Existing projects can be updated, re-initialised (stacks deleted) or left untouched

"""Init command - Full Amplify project setup."""

from pathlib import Path

from cleo.helpers import option
from rich.panel import Panel

from amplify_workstation.amplify import AmplifyCli
from amplify_workstation.cli.commands.base import WorkstationCommand
from amplify_workstation.cli.commands.configure import CONFIGURE_OPTIONS, gather_configuration
from amplify_workstation.cli.commands.install import INSTALL_OPTIONS, print_install_report
from amplify_workstation.cli.utils import prompts
from amplify_workstation.errors import SetupError
from amplify_workstation.installer import ToolInstaller
from amplify_workstation.models import AmplifyConfiguration, ExistingProjectAction, Generation, ProjectSpec
from amplify_workstation.output import console, log
from amplify_workstation.project import InitResult, ProjectInitializer
from amplify_workstation.shell import ShellRunner
from amplify_workstation.stacks import StackCleaner
from amplify_workstation.validators import validate_no_whitespace, validate_project_name

NEXT_STEPS = {
    Generation.GEN1: [
        "Navigate to your project directory: [cyan]cd {name}[/cyan]",
        "Add Amplify categories, e.g. [cyan]amplify add auth[/cyan] or [cyan]amplify add api[/cyan]",
        "Deploy your backend: [cyan]amplify push[/cyan]",
        "Integrate Amplify into your frontend code",
        "Commit and push your changes to trigger Amplify's automatic deployments",
    ],
    Generation.GEN2: [
        "Navigate to your project directory: [cyan]cd {name}[/cyan]",
        "Define your backend in [cyan]amplify/[/cyan] (auth/resource.ts, data/resource.ts)",
        "Start a personal cloud sandbox: [cyan]npx ampx sandbox[/cyan]",
        "Regenerate client configuration: [cyan]npx ampx generate outputs[/cyan]",
        "Commit and push your changes to trigger Amplify's automatic deployments",
    ],
}

DOCS_URL = {
    Generation.GEN1: "https://docs.amplify.aws/gen1/",
    Generation.GEN2: "https://docs.amplify.aws/",
}

PROJECT_OPTIONS = [
    option("project", "p", description="Amplify project name (directory)", flag=False),
    option("app-id", description="Amplify App ID from the Amplify console", flag=False),
    option("env", "e", description="Amplify environment (Gen 1) or branch (Gen 2) name", flag=False),
    option("generation", "g", description="Amplify generation: gen1 or gen2", flag=False),
    option("react", description="Scaffold a React + TypeScript app with Tailwind CSS", flag=True),
    option("skip-install", description="Do not check or install the toolchain", flag=True),
    option(
        "action",
        description="What to do with an existing project: update, reinit or cancel (prompted if omitted)",
        flag=False,
    ),
    option("yes", "y", description="Confirm deletion of the environment's stacks without asking", flag=True),
]


class InitCommand(WorkstationCommand):
    name = "init"
    description = "Install the toolchain, configure Amplify and initialize an Amplify project"

    options = PROJECT_OPTIONS + CONFIGURE_OPTIONS + INSTALL_OPTIONS
    refresh_dependencies = False

    def execute_workflow(self) -> int:
        generation = self._resolve_generation()
        return self._run_pipeline(generation)

    def _resolve_generation(self) -> Generation:
        value = self.option("generation")
        if value is None:
            return Generation.GEN1
        try:
            return Generation.parse(value)
        except ValueError as e:
            raise SetupError(str(e)) from e

    def _run_pipeline(self, generation: Generation) -> int:
        console.print(
            Panel.fit(
                f"[bold cyan]AWS Amplify {generation.label} Project Setup[/bold cyan]\n\n"
                "This will install the required tools, configure the Amplify CLI\n"
                "and initialize your project.",
                border_style="cyan",
                padding=(1, 2),
            )
        )

        spec = self._gather_project(generation)
        runner = self.create_runner()

        if not self.option("skip-install"):
            report = ToolInstaller(runner, self.settings).run(upgrade_system=not self.option("skip-system-update"))
            if self.io.is_verbose():
                print_install_report(report)

        configuration = gather_configuration(
            self.settings,
            region=self.option("region"),
            profile=self.option("profile"),
            credentials_profile=self.option("credentials-profile"),
        )
        amplify = AmplifyCli(runner)
        amplify.configure_headless(configuration)

        initializer = self._create_initializer(runner, amplify, configuration)
        result = initializer.run(spec, configuration)

        if result is InitResult.CANCELLED:
            return 0

        self._show_next_steps(spec)
        return 0

    def _gather_project(self, generation: Generation) -> ProjectSpec:
        name = self._value("project", "Enter the AWS Amplify project name:", validate_project_name)
        app_id = self._value(
            "app-id",
            "Enter the AWS Amplify App ID (find this in the AWS Amplify console):",
            validate_no_whitespace,
        )
        env_name = self._value(
            "env",
            "Enter the AWS Amplify branch name (e.g., 'main' or 'develop'):",
            validate_no_whitespace,
        )
        return ProjectSpec(
            name=name,
            app_id=app_id,
            env_name=env_name,
            generation=generation,
            parent_dir=Path.cwd(),
            react=bool(self.option("react")),
        )

    def _value(self, option_name: str, message: str, validate) -> str:
        value = self.option(option_name)
        if value is None:
            return prompts.ask_text(message, validate=validate)
        result = validate(value)
        if result is not True:
            raise SetupError(f"Invalid --{option_name} '{value}': {result}")
        return value

    def _create_initializer(
        self, runner: ShellRunner, amplify: AmplifyCli, configuration: AmplifyConfiguration
    ) -> ProjectInitializer:
        settings = self.settings

        def stack_cleaner() -> StackCleaner:
            return StackCleaner(
                region=configuration.region,
                poll_interval=settings.stack_poll_interval,
                timeout=settings.stack_delete_timeout,
                credentials=configuration.credentials,
            )

        return ProjectInitializer(
            runner=runner,
            amplify=amplify,
            stack_cleaner=stack_cleaner,
            choose_action=self._choose_action,
            confirm_deletion=self._confirm_deletion,
            refresh_dependencies=self.refresh_dependencies,
        )

    def _choose_action(self) -> ExistingProjectAction:
        value = self.option("action")
        if value is None:
            return prompts.ask_existing_project_action()
        try:
            return ExistingProjectAction(value.strip().lower())
        except ValueError as e:
            raise SetupError(f"Invalid --action '{value}' (expected update, reinit or cancel)") from e

    def _confirm_deletion(self, stacks: list[str]) -> bool:
        if self.option("yes"):
            log(f"Deleting {len(stacks)} stack(s) without confirmation (--yes)")
            return True
        return prompts.confirm_stack_deletion(stacks, console)

    def _show_next_steps(self, spec: ProjectSpec) -> None:
        console.print("\nNext steps:")
        for index, step in enumerate(NEXT_STEPS[spec.generation], start=1):
            console.print(f"{index}. {step.format(name=spec.name)}")
        if spec.react:
            console.print("• Start the development server: [cyan]npm start[/cyan]")
        console.print(f"\nFor more information, visit: {DOCS_URL[spec.generation]}")


class ReinitCommand(InitCommand):
    name = "reinit"
    description = "Update or re-initialize an existing Amplify project (deletes its stacks on reinit)"

    # npm install in an existing project, after the update/reinit choice
    refresh_dependencies = True
