"""Provision AWS Amplify development workstations."""

__version__ = "1.0.0"
