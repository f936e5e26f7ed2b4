# ABOUTME: AWS utility functions for amplify-workstation
# ABOUTME: Region discovery and a credentials sanity check via STS

"""AWS utilities for CLI commands."""

import boto3

from amplify_workstation.models import AwsCredentials


def get_current_region() -> str | None:
    """Get the current AWS region from configuration."""
    try:
        session = boto3.Session()
        return session.region_name
    except Exception:
        return None


def get_account_id(credentials: AwsCredentials, region: str) -> str | None:
    """Get the AWS account ID the credentials belong to, or None if they cannot be verified."""
    try:
        client = boto3.client(
            "sts",
            region_name=region,
            aws_access_key_id=credentials.access_key_id,
            aws_secret_access_key=credentials.secret_access_key,
        )
        response = client.get_caller_identity()
        return response["Account"]
    except Exception:
        return None
