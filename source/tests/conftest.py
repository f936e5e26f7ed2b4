"""Pytest configuration and shared fixtures."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from amplify_workstation.config import ENV_PREFIX, Config


# Set AWS region for all tests to avoid NoRegionError
@pytest.fixture(autouse=True, scope="session")
def set_aws_region():
    """Set AWS region for all tests."""
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"
    os.environ["AWS_REGION"] = "us-east-1"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep every test away from the real ~/.amplifyws and AMPLIFYWS_* variables."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)

    config_dir = tmp_path / ".amplifyws"
    with patch.object(Config, "CONFIG_DIR", config_dir):
        with patch.object(Config, "CONFIG_FILE", config_dir / "config.json"):
            yield config_dir


@pytest.fixture
def credentials_file(tmp_path) -> Path:
    """A well-formed AWS credentials file."""
    path = tmp_path / "aws" / "credentials"
    path.parent.mkdir(parents=True)
    path.write_text(
        "[default]\n"
        "aws_access_key_id = AKIAEXAMPLEKEY\n"
        "aws_secret_access_key = secretEXAMPLEkey\n"
        "\n"
        "[work]\n"
        "aws_access_key_id = AKIAWORKKEY\n"
        "aws_secret_access_key = workSECRET\n"
    )
    return path
