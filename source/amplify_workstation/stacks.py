# ABOUTME: CloudFormation stack discovery and deletion for Amplify re-initialisation
# ABOUTME: Deletes matching stacks one by one and blocks until each is gone

"""CloudFormation stack cleanup."""

import time
from collections.abc import Callable
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from amplify_workstation.errors import CloudFormationError, StackDeletionError
from amplify_workstation.models import AwsCredentials
from amplify_workstation.output import log

# Every status except DELETE_COMPLETE; list_stacks otherwise returns deleted stacks for 90 days
LIVE_STACK_STATUSES = [
    "CREATE_IN_PROGRESS",
    "CREATE_FAILED",
    "CREATE_COMPLETE",
    "ROLLBACK_IN_PROGRESS",
    "ROLLBACK_FAILED",
    "ROLLBACK_COMPLETE",
    "DELETE_IN_PROGRESS",
    "DELETE_FAILED",
    "UPDATE_IN_PROGRESS",
    "UPDATE_COMPLETE_CLEANUP_IN_PROGRESS",
    "UPDATE_COMPLETE",
    "UPDATE_FAILED",
    "UPDATE_ROLLBACK_IN_PROGRESS",
    "UPDATE_ROLLBACK_FAILED",
    "UPDATE_ROLLBACK_COMPLETE_CLEANUP_IN_PROGRESS",
    "UPDATE_ROLLBACK_COMPLETE",
    "REVIEW_IN_PROGRESS",
    "IMPORT_IN_PROGRESS",
    "IMPORT_COMPLETE",
    "IMPORT_ROLLBACK_IN_PROGRESS",
    "IMPORT_ROLLBACK_FAILED",
    "IMPORT_ROLLBACK_COMPLETE",
]


class StackCleaner:
    """Find and delete the CloudFormation stacks that belong to an Amplify environment."""

    def __init__(
        self,
        region: str,
        poll_interval: float = 10.0,
        timeout: float | None = None,
        client: Any = None,
        credentials: AwsCredentials | None = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.region = region
        self.poll_interval = poll_interval
        self.timeout = timeout
        if client is None:
            kwargs = {}
            if credentials:
                kwargs = {
                    "aws_access_key_id": credentials.access_key_id,
                    "aws_secret_access_key": credentials.secret_access_key,
                }
            client = boto3.client("cloudformation", region_name=region, **kwargs)
        self.client = client
        self._sleep = sleep
        self._clock = clock

    def find_stacks(self, app_id: str, env_name: str) -> list[str]:
        """Names of live stacks whose name contains both the app id and the environment name."""
        paginator = self.client.get_paginator("list_stacks")
        matches = []
        try:
            for page in paginator.paginate(StackStatusFilter=LIVE_STACK_STATUSES):
                for stack in page.get("StackSummaries", []):
                    name = stack["StackName"]
                    if app_id in name and env_name in name:
                        matches.append(name)
        except (ClientError, BotoCoreError) as e:
            raise CloudFormationError(f"Could not list CloudFormation stacks in {self.region}: {e}") from e
        return matches

    def get_stack_status(self, stack_name: str) -> str | None:
        """Current status of a stack, or None if it no longer exists."""
        try:
            response = self.client.describe_stacks(StackName=stack_name)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ValidationError":
                # Stack doesn't exist
                return None
            raise CloudFormationError(f"Could not describe stack {stack_name}: {e}") from e
        except BotoCoreError as e:
            raise CloudFormationError(f"Could not describe stack {stack_name}: {e}") from e
        stacks = response.get("Stacks", [])
        if not stacks:
            return None
        return stacks[0]["StackStatus"]

    def delete_stacks(self, stack_names: list[str]) -> None:
        """Delete stacks sequentially, waiting for each to finish before starting the next."""
        for stack_name in stack_names:
            self.delete_stack(stack_name)

    def delete_stack(self, stack_name: str) -> None:
        log(f"Deleting stack: [cyan]{stack_name}[/cyan]")
        try:
            self.client.delete_stack(StackName=stack_name)
        except (ClientError, BotoCoreError) as e:
            raise CloudFormationError(f"Could not delete stack {stack_name}: {e}") from e
        self.wait_for_delete(stack_name)
        log(f"[green]✓ Stack {stack_name} deleted[/green]")

    def wait_for_delete(self, stack_name: str) -> None:
        """Poll until the stack is gone. Waits forever unless a timeout is configured."""
        started = self._clock()
        while True:
            status = self.get_stack_status(stack_name)
            if status is None or status == "DELETE_COMPLETE":
                return
            if status == "DELETE_FAILED":
                raise StackDeletionError(stack_name, status, self._status_reason(stack_name))
            if self.timeout is not None and self._clock() - started >= self.timeout:
                raise StackDeletionError(stack_name, status, f"timed out after {self.timeout:g}s")
            self._sleep(self.poll_interval)

    def _status_reason(self, stack_name: str) -> str:
        try:
            response = self.client.describe_stacks(StackName=stack_name)
            return response["Stacks"][0].get("StackStatusReason", "")
        except (ClientError, BotoCoreError, KeyError, IndexError):
            return ""
