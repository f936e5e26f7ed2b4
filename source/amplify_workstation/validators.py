# ABOUTME: Input validation for interactive prompts and command options
# ABOUTME: Validators return True or an error message, as questionary expects

"""Prompt validation for amplify-workstation."""

import re

# AWS regions (as of 2025)
AWS_REGIONS = {
    "us-east-1",
    "us-east-2",
    "us-west-1",
    "us-west-2",
    "ca-central-1",
    "eu-central-1",
    "eu-central-2",
    "eu-west-1",
    "eu-west-2",
    "eu-west-3",
    "eu-north-1",
    "eu-south-1",
    "eu-south-2",
    "ap-south-1",
    "ap-south-2",
    "ap-northeast-1",
    "ap-northeast-2",
    "ap-northeast-3",
    "ap-southeast-1",
    "ap-southeast-2",
    "ap-southeast-3",
    "ap-southeast-4",
    "ap-east-1",
    "sa-east-1",
    "me-south-1",
    "me-central-1",
    "af-south-1",
}


def validate_no_whitespace(value: str | None) -> bool | str:
    """Non-empty and free of whitespace (app ids, environment and profile names)."""
    if value and re.match(r"^\S+$", value):
        return True
    return "Value must be non-empty and contain no spaces"


def validate_project_name(value: str | None) -> bool | str:
    """Project names become directory names."""
    if value and re.match(r"^[A-Za-z0-9][A-Za-z0-9._-]*$", value):
        return True
    return "Invalid project name (letters, digits, '.', '_' and '-' only)"


def is_known_region(region: str) -> bool:
    """Unknown regions are allowed (new regions appear) but worth a warning."""
    return region in AWS_REGIONS
