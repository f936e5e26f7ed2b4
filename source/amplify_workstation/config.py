# ABOUTME: Configuration management for amplify-workstation
# ABOUTME: Handles settings persistence, environment overrides and defaults

"""Configuration management for amplify-workstation."""

import json
import os
from dataclasses import asdict, dataclass, fields
from datetime import datetime
from pathlib import Path
from typing import Any

from amplify_workstation.errors import SetupError

ENV_PREFIX = "AMPLIFYWS_"


@dataclass
class Settings:
    """Workstation settings shared by every command."""

    # Credential transfer
    remote_user: str = "ubuntu"
    ssh_host_alias: str = "amplify-development-server"
    default_key_path: str = "~/.ssh/id_rsa"
    ssh_config_path: str = "~/.ssh/config"
    aws_config_dir: str = "~/.aws"

    # Tool installer
    aws_cli_url: str = "https://awscli.amazonaws.com/awscli-exe-linux-x86_64.zip"
    nvm_install_url: str = "https://raw.githubusercontent.com/nvm-sh/nvm/v0.39.3/install.sh"
    nvm_dir: str = "~/.nvm"
    node_version: str = "node"  # nvm alias for the latest release
    amplify_package: str = "@aws-amplify/cli"
    apt_packages: list[str] | None = None

    # Configurator
    credentials_path: str = "~/.aws/credentials"
    credentials_profile: str = "default"
    default_region: str | None = None
    amplify_profile: str = "default"
    language: str = "javascript"

    # Re-initializer
    stack_poll_interval: float = 10.0
    stack_delete_timeout: float | None = None  # None waits forever

    updated_at: str | None = None

    def __post_init__(self) -> None:
        if self.apt_packages is None:
            self.apt_packages = ["unzip", "curl"]
        if not self.stack_poll_interval > 0:
            raise ValueError(f"stack_poll_interval must be greater than zero, got {self.stack_poll_interval}")
        if self.stack_delete_timeout is not None and not self.stack_delete_timeout > 0:
            raise ValueError(f"stack_delete_timeout must be greater than zero, got {self.stack_delete_timeout}")

    def expand(self, value: str) -> Path:
        """Expand a ~-relative setting into a path."""
        return Path(value).expanduser()

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Settings":
        """Create settings from dictionary, ignoring keys from other versions."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def apply_env_overrides(self, environ: dict[str, str] | None = None) -> "Settings":
        """Override settings from AMPLIFYWS_* environment variables."""
        environ = os.environ if environ is None else environ
        for f in fields(self):
            raw = environ.get(f"{ENV_PREFIX}{f.name.upper()}")
            if raw is None:
                continue
            try:
                setattr(self, f.name, _coerce(f.name, raw, getattr(self, f.name)))
            except ValueError as e:
                raise SetupError(f"Invalid {ENV_PREFIX}{f.name.upper()}: {e}") from e
        return self

    def set_value(self, key: str, raw: str) -> None:
        """Set a single setting from its string form."""
        known = {f.name for f in fields(self)}
        if key not in known or key == "updated_at":
            raise ValueError(f"Unknown setting: {key}")
        setattr(self, key, _coerce(key, raw, getattr(self, key)))


def _coerce(key: str, raw: str, current: Any) -> Any:
    """Convert a string to the type of the current setting value."""
    if key == "apt_packages":
        return [item.strip() for item in raw.split(",") if item.strip()]
    if key in ("stack_poll_interval", "stack_delete_timeout"):
        if raw.strip().lower() in ("", "none"):
            if key == "stack_poll_interval":
                raise ValueError("stack_poll_interval cannot be empty")
            return None
        try:
            value = float(raw)
        except ValueError as e:
            raise ValueError(f"Invalid number for {key}: {raw}") from e
        if not value > 0:
            raise ValueError(f"{key} must be greater than zero, got {raw}")
        return value
    if key == "default_region" and raw.strip().lower() in ("", "none"):
        return None
    if isinstance(current, bool):
        return raw.strip().lower() in ("1", "true", "yes", "y")
    return raw


class Config:
    """Configuration manager for amplify-workstation."""

    CONFIG_DIR = Path.home() / ".amplifyws"
    CONFIG_FILE = CONFIG_DIR / "config.json"

    def __init__(self, settings: Settings | None = None, schema_version: str = "1.0"):
        """Initialize configuration."""
        self.settings = settings or Settings()
        self.schema_version = schema_version

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file and apply environment overrides."""
        if cls.CONFIG_FILE.exists():
            try:
                with open(cls.CONFIG_FILE) as f:
                    data = json.load(f)

                config = cls(
                    settings=Settings.from_dict(data.get("settings", {})),
                    schema_version=data.get("schema_version", "1.0"),
                )
            except Exception as e:
                print(f"Warning: Could not load config: {e}")
                config = cls()
        else:
            config = cls()

        config.settings.apply_env_overrides()
        return config

    def save(self) -> None:
        """Save configuration to file."""
        self.CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        self.settings.updated_at = datetime.now().isoformat()

        data = {
            "schema_version": self.schema_version,
            "settings": self.settings.to_dict(),
        }

        with open(self.CONFIG_FILE, "w") as f:
            json.dump(data, f, indent=2)
