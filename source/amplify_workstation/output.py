# ABOUTME: Console output helpers shared by all commands
# ABOUTME: Timestamped progress lines on stdout and ERROR lines on stderr

"""Console output for CLI commands."""

from datetime import datetime

from rich.console import Console

console = Console()
error_console = Console(stderr=True)


def timestamp() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def log(message: str) -> None:
    """Print a progress message prefixed with the current time."""
    console.print(f"[dim]\\[{timestamp()}][/dim] {message}", highlight=False)


def log_error(message: str) -> None:
    """Print an error message prefixed with the current time to stderr."""
    error_console.print(f"\\[{timestamp()}] [bold red]ERROR:[/bold red] {message}", highlight=False)
