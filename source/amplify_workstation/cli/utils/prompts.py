# ABOUTME: Interactive questions asked by the commands
# ABOUTME: Wraps questionary; a cancelled prompt (Ctrl+C / Esc) raises KeyboardInterrupt

"""Interactive prompts."""

import questionary
from rich.console import Console

from amplify_workstation.models import ExistingProjectAction, Generation


def _answer(question: questionary.Question):
    answer = question.ask()
    if answer is None:  # User cancelled (Ctrl+C)
        raise KeyboardInterrupt
    return answer


def ask_text(message: str, default: str | None = None, validate=None) -> str:
    return _answer(questionary.text(message, default=default or "", validate=validate)).strip()


def ask_generation() -> Generation:
    return _answer(
        questionary.select(
            "Which Amplify generation do you want to set up?",
            choices=[
                questionary.Choice("Gen 1 (Amplify CLI: amplify init / amplify pull)", value=Generation.GEN1),
                questionary.Choice("Gen 2 (ampx: code-first backend)", value=Generation.GEN2),
            ],
        )
    )


def ask_existing_project_action() -> ExistingProjectAction:
    return _answer(
        questionary.select(
            "This directory already contains an Amplify project. What would you like to do?",
            choices=[
                questionary.Choice("Update (pull the latest cloud environment)", value=ExistingProjectAction.UPDATE),
                questionary.Choice(
                    "Reinitialize (delete the environment's stacks and start over)",
                    value=ExistingProjectAction.REINIT,
                ),
                questionary.Choice("Cancel", value=ExistingProjectAction.CANCEL),
            ],
        )
    )


def confirm_stack_deletion(stacks: list[str], console: Console) -> bool:
    """Show the stacks that will be deleted and require a single 'y' to proceed."""
    console.print("\n[bold red]⚠️  The following CloudFormation stacks will be permanently deleted:[/bold red]")
    for stack in stacks:
        console.print(f"  • [cyan]{stack}[/cyan]")
    answer = _answer(questionary.text("Delete these stacks? [y/N]"))
    return answer.strip().lower() == "y"
