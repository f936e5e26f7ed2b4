# ABOUTME: Settings command to show and change persisted workstation settings
# ABOUTME: Values are stored in ~/.amplifyws/config.json; AMPLIFYWS_* variables override them

"""Settings command - View and edit configuration."""

from cleo.helpers import option
from rich import box
from rich.table import Table

from amplify_workstation.cli.commands.base import WorkstationCommand
from amplify_workstation.errors import SetupError
from amplify_workstation.output import console


class SettingsCommand(WorkstationCommand):
    name = "settings"
    description = "Show or change amplify-workstation settings"

    options = [
        option("set", "s", description="Set a value (key=value); may be repeated", flag=False, multiple=True),
    ]

    def execute_workflow(self) -> int:
        assignments = self.option("set") or []

        if assignments:
            for assignment in assignments:
                key, sep, value = assignment.partition("=")
                if not sep:
                    raise SetupError(f"Expected key=value, got '{assignment}'")
                try:
                    self.settings.set_value(key.strip(), value.strip())
                except ValueError as e:
                    raise SetupError(str(e)) from e
            self.config.save()
            console.print(f"[green]✓ Settings saved to {self.config.CONFIG_FILE}[/green]")

        table = Table(title="amplify-workstation settings", box=box.SIMPLE)
        table.add_column("Setting", style="cyan")
        table.add_column("Value")
        for key, value in self.settings.to_dict().items():
            if key == "updated_at":
                continue
            table.add_row(key, "" if value is None else str(value))
        console.print(table)
        return 0
