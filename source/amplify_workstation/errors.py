# ABOUTME: Exception types raised by the provisioning workflows
# ABOUTME: Every failure is fatal; commands translate these into exit code 1

"""Errors for amplify-workstation."""


class SetupError(Exception):
    """Base class for every fatal setup failure."""


class CommandError(SetupError):
    """An external command exited with a non-zero status."""

    def __init__(self, description: str, argv: list[str], returncode: int, output: str = ""):
        self.description = description
        self.argv = argv
        self.returncode = returncode
        self.output = output
        super().__init__(f"{description} (exit code {returncode})")


class CredentialsError(SetupError):
    """The local AWS credentials file is missing or unusable."""


class PrerequisiteError(SetupError):
    """A required local tool, file or directory is missing."""


class ReinitDeclined(SetupError):
    """The operator declined deletion of the project's cloud stacks."""


class CloudFormationError(SetupError):
    """A CloudFormation API call failed (access denied, no credentials, unreachable endpoint)."""


class StackDeletionError(CloudFormationError):
    """A CloudFormation stack could not be deleted."""

    def __init__(self, stack_name: str, status: str, reason: str = ""):
        self.stack_name = stack_name
        self.status = status
        self.reason = reason
        message = f"Stack {stack_name} ended in {status}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
