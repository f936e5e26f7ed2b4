# ABOUTME: Configure command feeding local AWS credentials to the Amplify CLI
# ABOUTME: Reads ~/.aws/credentials, asks for region and profile, runs amplify configure --headless

"""Configure command - Headless Amplify CLI configuration."""

from cleo.helpers import option

from amplify_workstation.amplify import AmplifyCli
from amplify_workstation.cli.commands.base import WorkstationCommand
from amplify_workstation.cli.utils import prompts
from amplify_workstation.cli.utils.aws import get_account_id, get_current_region
from amplify_workstation.config import Settings
from amplify_workstation.credentials import read_credentials
from amplify_workstation.errors import SetupError
from amplify_workstation.models import AmplifyConfiguration
from amplify_workstation.output import console, log
from amplify_workstation.validators import is_known_region, validate_no_whitespace

CONFIGURE_OPTIONS = [
    option("region", "r", description="AWS region (prompted if omitted)", flag=False),
    option("profile", description="AWS profile name for the Amplify CLI (prompted if omitted)", flag=False),
    option(
        "credentials-profile",
        description="Section of ~/.aws/credentials to read the access keys from",
        flag=False,
    ),
]


def gather_configuration(
    settings: Settings,
    region: str | None = None,
    profile: str | None = None,
    credentials_profile: str | None = None,
) -> AmplifyConfiguration:
    """Read the access keys and collect region and profile for the Amplify CLI."""
    log("Configuring AWS CLI...")
    credentials = read_credentials(
        settings.expand(settings.credentials_path),
        credentials_profile or settings.credentials_profile,
    )

    if region is None:
        region = prompts.ask_text(
            "Enter your AWS region:",
            default=settings.default_region or get_current_region(),
            validate=validate_no_whitespace,
        )
    if profile is None:
        profile = prompts.ask_text(
            "Enter your AWS profile name:",
            default=settings.amplify_profile,
            validate=validate_no_whitespace,
        )

    for name, value in (("region", region), ("profile", profile)):
        if validate_no_whitespace(value) is not True:
            raise SetupError(f"Invalid AWS {name}: {value!r}")

    if not is_known_region(region):
        console.print(f"[yellow]Warning: '{region}' is not a known AWS region[/yellow]")

    return AmplifyConfiguration(credentials=credentials, region=region, profile=profile, language=settings.language)


class ConfigureCommand(WorkstationCommand):
    name = "configure"
    description = "Configure the Amplify CLI from the local AWS credentials file"

    options = list(CONFIGURE_OPTIONS)

    def execute_workflow(self) -> int:
        configuration = gather_configuration(
            self.settings,
            region=self.option("region"),
            profile=self.option("profile"),
            credentials_profile=self.option("credentials-profile"),
        )

        account_id = get_account_id(configuration.credentials, configuration.region)
        if account_id:
            console.print(f"[dim]Using AWS account {account_id}[/dim]")
        else:
            console.print("[yellow]Warning: could not verify the credentials with AWS STS[/yellow]")

        AmplifyCli(self.create_runner()).configure_headless(configuration)
        console.print(
            f"\n[green]✓ Amplify CLI configured for profile '{configuration.profile}' "
            f"in {configuration.region}[/green]"
        )
        return 0
