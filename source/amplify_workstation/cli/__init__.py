# ABOUTME: CLI module for amplify-workstation
# ABOUTME: Provides command-line interface for provisioning Amplify development hosts

"""Command-line interface for amplify-workstation."""

from cleo.application import Application

from amplify_workstation import __version__

from .commands.configure import ConfigureCommand
from .commands.init import InitCommand, ReinitCommand
from .commands.install import InstallCommand
from .commands.settings import SettingsCommand
from .commands.setup import SetupCommand
from .commands.transfer import TransferCommand


def create_application() -> Application:
    """Create the CLI application."""
    application = Application("amplifyws", __version__)

    # Full setup
    application.add(SetupCommand())
    application.add(InitCommand())
    application.add(ReinitCommand())

    # Individual steps
    application.add(InstallCommand())
    application.add(ConfigureCommand())
    application.add(TransferCommand())

    application.add(SettingsCommand())

    return application


def main():
    """Main entry point for the CLI."""
    application = create_application()
    application.run()


if __name__ == "__main__":
    main()
