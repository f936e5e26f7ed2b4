# ABOUTME: Reads access-key credentials from the local AWS credentials file
# ABOUTME: Missing file, missing keys or malformed content all raise CredentialsError

"""AWS credentials file access."""

import configparser
from pathlib import Path

from amplify_workstation.errors import CredentialsError
from amplify_workstation.models import AwsCredentials

CONFIGURE_HINT = "Please set up your AWS credentials first. You can do this by running 'aws configure'."


def read_credentials(path: Path, profile: str = "default") -> AwsCredentials:
    """Read the access key pair for a profile from an AWS credentials file.

    Args:
        path: Location of the credentials file (usually ~/.aws/credentials).
        profile: Section of the file to read.

    Returns:
        AwsCredentials for the profile.

    Raises:
        CredentialsError: If the file is missing, cannot be parsed, or either key is absent or empty.
    """
    if not path.is_file():
        raise CredentialsError(f"AWS credentials file not found at {path}. {CONFIGURE_HINT}")

    parser = configparser.ConfigParser(interpolation=None)
    try:
        parser.read(path)
    except configparser.Error as e:
        raise CredentialsError(f"Could not parse {path}: {e}. {CONFIGURE_HINT}") from e

    if not parser.has_section(profile):
        raise CredentialsError(f"Profile [{profile}] not found in {path}. {CONFIGURE_HINT}")

    access_key_id = parser.get(profile, "aws_access_key_id", fallback="").strip()
    secret_access_key = parser.get(profile, "aws_secret_access_key", fallback="").strip()

    if not access_key_id or not secret_access_key:
        raise CredentialsError(
            f"Failed to read AWS credentials from {path}. "
            "Please ensure your credentials are properly set in the file."
        )

    return AwsCredentials(access_key_id=access_key_id, secret_access_key=secret_access_key)

