# ABOUTME: Copies the local AWS configuration directory to a remote development host
# ABOUTME: Registers an SSH host alias, creates the remote directory and mirrors with rsync

"""AWS credential transfer to a remote host."""

from dataclasses import dataclass
from pathlib import Path

from amplify_workstation.config import Settings
from amplify_workstation.errors import PrerequisiteError
from amplify_workstation.models import HostEntry
from amplify_workstation.output import log
from amplify_workstation.shell import ShellRunner
from amplify_workstation.ssh_config import ensure_host_entry


@dataclass
class TransferResult:
    alias: str
    remote_dir: str
    host_added: bool


class CredentialTransfer:
    """Mirror ~/.aws to the same location on a remote host over SSH."""

    def __init__(self, runner: ShellRunner, settings: Settings):
        self.runner = runner
        self.settings = settings

    @property
    def remote_dir(self) -> str:
        return f"/home/{self.settings.remote_user}/.aws"

    def host_entry(self, remote_host: str, key_path: str | None) -> HostEntry:
        return HostEntry(
            alias=self.settings.ssh_host_alias,
            hostname=remote_host,
            user=self.settings.remote_user,
            identity_file=key_path or self.settings.default_key_path,
        )

    def run(self, remote_host: str, key_path: str | None = None) -> TransferResult:
        if not remote_host:
            raise PrerequisiteError("A remote host is required")

        entry = self.host_entry(remote_host, key_path)
        ssh_config = self.settings.expand(self.settings.ssh_config_path)
        added = ensure_host_entry(ssh_config, entry)
        if added:
            log(f"Added host [cyan]{entry.alias}[/cyan] to {ssh_config}")
        else:
            log(f"Host [cyan]{entry.alias}[/cyan] already present in {ssh_config}")

        local_dir = self.settings.expand(self.settings.aws_config_dir)
        if not local_dir.is_dir():
            raise PrerequisiteError(f"{local_dir} does not exist.")

        self.runner.run(
            ["ssh", entry.alias, f"mkdir -p {self.remote_dir}"],
            "Could not create the remote AWS directory",
        )
        self.runner.run(
            ["rsync", "-avz", "--delete", "-e", "ssh", f"{local_dir}/", f"{entry.alias}:{self.remote_dir}"],
            "AWS configuration sync failed",
        )
        log("[green]✓ AWS configuration files transferred successfully.[/green]")
        return TransferResult(alias=entry.alias, remote_dir=self.remote_dir, host_added=added)


def default_key_exists(settings: Settings) -> bool:
    return Path(settings.default_key_path).expanduser().exists()
