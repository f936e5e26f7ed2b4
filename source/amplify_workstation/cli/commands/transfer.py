# ABOUTME: Transfer command copying ~/.aws to a remote development server
# ABOUTME: Prompts for the host and key, registers an SSH alias and syncs with rsync

"""Transfer command - Send AWS configuration to a remote host."""

from cleo.helpers import option

from amplify_workstation.cli.commands.base import WorkstationCommand
from amplify_workstation.cli.utils import prompts
from amplify_workstation.output import console
from amplify_workstation.transfer import CredentialTransfer, default_key_exists
from amplify_workstation.validators import validate_no_whitespace


class TransferCommand(WorkstationCommand):
    name = "transfer"
    description = "Copy the local AWS configuration to an EC2 development server"

    options = [
        option("host", description="EC2 instance public DNS or IP", flag=False),
        option("key", "k", description="Path to the SSH private key", flag=False),
    ]

    def execute_workflow(self) -> int:
        settings = self.settings

        remote_host = self.option("host")
        if remote_host is None:
            remote_host = prompts.ask_text(
                "Enter your EC2 instance public DNS or IP:", validate=validate_no_whitespace
            )

        key_path = self.option("key")
        if key_path is None:
            key_path = prompts.ask_text(
                f"Enter the path to your private key file (default: {settings.default_key_path}):"
            )
        key_path = key_path or settings.default_key_path

        if key_path == settings.default_key_path and not default_key_exists(settings):
            console.print(f"[yellow]Warning: {settings.default_key_path} does not exist[/yellow]")

        result = CredentialTransfer(self.create_runner(), settings).run(remote_host, key_path)
        console.print(f"\nConnect with: [cyan]ssh {result.alias}[/cyan]")
        return 0
