# ABOUTME: Install command for the Amplify development toolchain
# ABOUTME: Installs only the tools whose installation marker is missing

"""Install command - Provision the development toolchain."""

from cleo.helpers import option
from rich import box
from rich.table import Table

from amplify_workstation.cli.commands.base import WorkstationCommand
from amplify_workstation.installer import InstallReport, ToolInstaller
from amplify_workstation.output import console

INSTALL_OPTIONS = [
    option("skip-system-update", description="Do not run apt update / full-upgrade", flag=True),
]


def print_install_report(report: InstallReport) -> None:
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Tool")
    table.add_column("Status")
    for name in report.installed:
        table.add_row(name, "[green]installed[/green]")
    for name in report.skipped:
        table.add_row(name, "[dim]already present[/dim]")
    console.print(table)


class InstallCommand(WorkstationCommand):
    name = "install"
    description = "Install unzip, curl, AWS CLI v2, nvm, Node.js and the Amplify CLI"

    options = list(INSTALL_OPTIONS)

    def execute_workflow(self) -> int:
        installer = ToolInstaller(self.create_runner(), self.settings)
        report = installer.run(upgrade_system=not self.option("skip-system-update"))

        print_install_report(report)
        if report.changed:
            console.print("[green]✓ Toolchain installed[/green]")
        else:
            console.print("[green]✓ All tools already installed, nothing to do[/green]")
        return 0
