# ABOUTME: Creates, updates or re-initialises an Amplify project directory
# ABOUTME: Implements the NoProject / ExistingProject state machine and the React scaffold

"""Amplify project initializer and re-initializer."""

import shutil
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from amplify_workstation.amplify import AmplifyCli
from amplify_workstation.errors import PrerequisiteError, ReinitDeclined
from amplify_workstation.models import AmplifyConfiguration, ExistingProjectAction, ProjectSpec, ProjectState
from amplify_workstation.output import log
from amplify_workstation.shell import ShellRunner
from amplify_workstation.stacks import StackCleaner

TAILWIND_CONFIG = """/** @type {import('tailwindcss').Config} */
module.exports = {
  content: [
    "./src/**/*.{js,jsx,ts,tsx}",
  ],
  theme: {
    extend: {},
  },
  plugins: [],
}
"""

TAILWIND_CSS = """@tailwind base;
@tailwind components;
@tailwind utilities;
"""


class InitResult(Enum):
    """Which branch of the state machine a run took."""

    INITIALIZED = "initialized"
    UPDATED = "updated"
    REINITIALIZED = "reinitialized"
    CANCELLED = "cancelled"


def install_dependencies(runner: ShellRunner, directory: Path) -> bool:
    """Run npm install in a project that already has a package.json.

    Returns:
        True if npm install ran.
    """
    if not (directory / "package.json").exists():
        return False
    log("Installing project dependencies...")
    runner.run(["npm", "install"], "Failed to install project dependencies", cwd=directory)
    return True


def inspect_project(directory: Path) -> ProjectState:
    """An Amplify project exists when the directory has an amplify/ subdirectory."""
    if (directory / "amplify").is_dir():
        return ProjectState.EXISTING_PROJECT
    return ProjectState.NO_PROJECT


def splice_configure_snippet(index_file: Path, snippet: list[str]) -> bool:
    """Insert the Amplify configure lines at the top of the application entry point.

    Returns:
        True if the file was changed, False if the snippet was already present.
    """
    if not index_file.is_file():
        raise PrerequisiteError(f"Application entry point not found: {index_file}")

    lines = index_file.read_text().splitlines(keepends=True)
    existing = [line.rstrip("\n") for line in lines[: len(snippet)]]
    if existing == snippet:
        return False

    index_file.write_text("".join(f"{line}\n" for line in snippet) + "".join(lines))
    return True


class ProjectInitializer:
    """Drive a project directory into an initialised Amplify project.

    ``choose_action`` is asked what to do with an existing project and
    ``confirm_deletion`` must approve the list of stacks before anything is
    deleted. ``stack_cleaner`` is created lazily because only the
    re-initialisation path talks to CloudFormation.
    With ``refresh_dependencies`` set, ``npm install`` runs once the operator
    has chosen to go ahead and before anything is deleted.
    """

    def __init__(
        self,
        runner: ShellRunner,
        amplify: AmplifyCli,
        stack_cleaner: Callable[[], StackCleaner],
        choose_action: Callable[[], ExistingProjectAction],
        confirm_deletion: Callable[[list[str]], bool],
        refresh_dependencies: bool = False,
    ):
        self.runner = runner
        self.amplify = amplify
        self.stack_cleaner = stack_cleaner
        self.choose_action = choose_action
        self.confirm_deletion = confirm_deletion
        self.refresh_dependencies = refresh_dependencies

    def run(self, spec: ProjectSpec, configuration: AmplifyConfiguration) -> InitResult:
        directory = spec.directory

        if spec.react and not (directory / "package.json").exists():
            self.scaffold_react_app(spec)
        else:
            directory.mkdir(parents=True, exist_ok=True)

        state = inspect_project(directory)
        if state is ProjectState.NO_PROJECT:
            self._refresh_dependencies(spec)
            self.initialize(spec, configuration)
            return InitResult.INITIALIZED

        log(f"Found an existing Amplify project in [cyan]{directory}[/cyan]")
        action = self.choose_action()

        if action is ExistingProjectAction.CANCEL:
            log("[yellow]Operation cancelled.[/yellow]")
            return InitResult.CANCELLED

        if action is ExistingProjectAction.UPDATE:
            self._refresh_dependencies(spec)
            log(f"Pulling the latest '{spec.env_name}' environment...")
            self.amplify.pull(spec, configuration)
            log("[green]✓ Project updated[/green]")
            return InitResult.UPDATED

        self.reinitialize(spec, configuration)
        return InitResult.REINITIALIZED

    def initialize(self, spec: ProjectSpec, configuration: AmplifyConfiguration) -> None:
        log(f"Initializing Amplify {spec.generation.label} project '{spec.name}'...")
        # A kept Gen 2 backend (amplify/) is reused rather than scaffolded again
        has_backend = inspect_project(spec.directory) is ProjectState.EXISTING_PROJECT
        self.amplify.init(spec, configuration, has_backend)

        if spec.react:
            index_file = spec.directory / "src" / "index.tsx"
            if splice_configure_snippet(index_file, spec.generation.configure_snippet()):
                log("Added Amplify configuration to src/index.tsx")

        log(f"[green]✓ AWS Amplify {spec.generation.label} project '{spec.name}' has been initialized[/green]")

    def reinitialize(self, spec: ProjectSpec, configuration: AmplifyConfiguration) -> None:
        """Delete the environment's stacks and local metadata, then initialise again."""
        cleaner = self.stack_cleaner()
        stacks = cleaner.find_stacks(spec.app_id, spec.env_name)

        if stacks and not self.confirm_deletion(stacks):
            raise ReinitDeclined("Stack deletion declined; nothing was changed.")

        self._refresh_dependencies(spec)

        if stacks:
            cleaner.delete_stacks(stacks)
        else:
            log(f"No stacks found for app '{spec.app_id}' and environment '{spec.env_name}'")

        self.remove_local_metadata(spec)
        self.initialize(spec, configuration)

    def remove_local_metadata(self, spec: ProjectSpec) -> list[Path]:
        removed = []
        for relative in spec.generation.local_metadata(spec.outputs_dir):
            path = spec.directory / relative
            if path.is_dir():
                shutil.rmtree(path)
            elif path.exists():
                path.unlink()
            else:
                continue
            removed.append(path)
            log(f"Removed {relative}")
        return removed

    def _refresh_dependencies(self, spec: ProjectSpec) -> None:
        if self.refresh_dependencies:
            install_dependencies(self.runner, spec.directory)

    def scaffold_react_app(self, spec: ProjectSpec) -> None:
        """Create a React + TypeScript app with the Amplify libraries and Tailwind CSS."""
        log("Setting up React TypeScript project...")
        spec.parent_dir.mkdir(parents=True, exist_ok=True)
        self.runner.run(
            ["npx", "create-react-app", spec.name, "--template", "typescript"],
            "Failed to create React app",
            cwd=spec.parent_dir,
        )

        directory = spec.directory
        self.runner.run(
            ["npm", "install", "aws-amplify", "@aws-amplify/ui-react"],
            "Failed to install Amplify libraries",
            cwd=directory,
        )
        self.runner.run(
            ["npm", "install", "-D", "tailwindcss", "postcss", "autoprefixer"],
            "Failed to install Tailwind CSS",
            cwd=directory,
        )
        self.runner.run(["npx", "tailwindcss", "init", "-p"], "Failed to initialize Tailwind CSS", cwd=directory)

        (directory / "tailwind.config.js").write_text(TAILWIND_CONFIG)
        (directory / "src").mkdir(exist_ok=True)
        (directory / "src" / "index.css").write_text(TAILWIND_CSS)
        log("React TypeScript project set up successfully.")
