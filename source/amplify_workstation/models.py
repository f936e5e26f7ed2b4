# ABOUTME: Value objects shared by the installer, configurator and initializer
# ABOUTME: Generation-specific Amplify commands live here as the single source of truth

"""
Value objects for amplify-workstation.

Amplify Gen 1 and Gen 2 projects are driven by different CLIs. Everything that
differs between the two generations (init/pull commands, the generated client
configuration file, the local metadata removed on re-initialisation) is
described by ``Generation`` so the workflows never branch on raw strings.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

# Environment variable names handed to child processes
ENV_ACCESS_KEY_ID = "AWS_ACCESS_KEY_ID"
ENV_SECRET_ACCESS_KEY = "AWS_SECRET_ACCESS_KEY"
ENV_DEFAULT_REGION = "AWS_DEFAULT_REGION"
ENV_PROFILE = "AWS_PROFILE"


class Generation(Enum):
    """Amplify project generation."""

    GEN1 = "gen1"
    GEN2 = "gen2"

    @property
    def label(self) -> str:
        return "Gen 1" if self is Generation.GEN1 else "Gen 2"

    def client_config_file(self, out_dir: str | None = None) -> str:
        """Client configuration file generated by the Amplify tooling, relative to the project.

        Gen 2 writes amplify_outputs.json to ``out_dir`` when one is given
        (``src`` for React apps, whose bundler only resolves imports inside src/).
        """
        if self is Generation.GEN1:
            return "src/aws-exports.js"
        if out_dir:
            return f"{out_dir}/amplify_outputs.json"
        return "amplify_outputs.json"

    def local_metadata(self, out_dir: str | None = None) -> list[str]:
        """Paths removed from the project before re-initialisation."""
        if self is Generation.GEN1:
            return ["amplify", self.client_config_file()]
        # The Gen 2 amplify/ directory holds backend source code, not metadata
        return [".amplify", self.client_config_file(out_dir)]

    def init_commands(
        self, app_id: str, env_name: str, has_backend: bool = False, out_dir: str | None = None
    ) -> list[list[str]]:
        """Commands that initialise the project.

        A Gen 2 project that already has its amplify/ backend source only
        regenerates outputs; create-amplify refuses to scaffold over it.
        """
        if self is Generation.GEN1:
            return [["amplify", "init", "--appId", app_id, "--envName", env_name]]
        commands = []
        if not has_backend:
            commands.append(["npm", "create", "amplify@latest", "--", "--yes"])
        commands.append(self.pull_command(app_id, env_name, out_dir))
        return commands

    def pull_command(self, app_id: str, env_name: str, out_dir: str | None = None) -> list[str]:
        if self is Generation.GEN1:
            return ["amplify", "pull", "--appId", app_id, "--envName", env_name, "--yes"]
        argv = ["npx", "ampx", "generate", "outputs", "--app-id", app_id, "--branch", env_name]
        if out_dir:
            argv += ["--out-dir", out_dir]
        return argv

    def configure_snippet(self) -> list[str]:
        """Lines spliced at the top of src/index.tsx to configure the Amplify client library."""
        if self is Generation.GEN1:
            return [
                "import { Amplify } from 'aws-amplify';",
                "import awsExports from './aws-exports';",
                "Amplify.configure(awsExports);",
            ]
        # React apps get their outputs generated into src/
        return [
            "import { Amplify } from 'aws-amplify';",
            "import outputs from './amplify_outputs.json';",
            "Amplify.configure(outputs);",
        ]

    @classmethod
    def parse(cls, value: str) -> "Generation":
        """Parse a user-supplied generation ("gen1", "Gen 2", "2", ...)."""
        normalized = value.strip().lower().replace(" ", "").replace("-", "")
        aliases = {"gen1": cls.GEN1, "1": cls.GEN1, "gen2": cls.GEN2, "2": cls.GEN2}
        if normalized not in aliases:
            raise ValueError(f"Unknown Amplify generation: {value!r} (expected gen1 or gen2)")
        return aliases[normalized]


class ProjectState(Enum):
    """What the initializer found in the project directory."""

    NO_PROJECT = "no_project"
    EXISTING_PROJECT = "existing_project"


class ExistingProjectAction(Enum):
    """Operator choice for a directory that already holds an Amplify project."""

    UPDATE = "update"
    REINIT = "reinit"
    CANCEL = "cancel"


@dataclass(frozen=True)
class AwsCredentials:
    """Access-key credentials read from the local credentials file."""

    access_key_id: str
    secret_access_key: str

    def __repr__(self) -> str:
        masked = f"{self.access_key_id[:4]}****" if self.access_key_id else ""
        return f"AwsCredentials(access_key_id={masked!r}, secret_access_key='****')"


@dataclass(frozen=True)
class AmplifyConfiguration:
    """Everything the Amplify CLI needs to be configured headlessly.

    Passed explicitly to the commands that need it instead of being exported
    into the parent process environment.
    """

    credentials: AwsCredentials
    region: str
    profile: str
    language: str = "javascript"

    def to_env(self) -> dict[str, str]:
        """Environment variables for child processes."""
        return {
            ENV_ACCESS_KEY_ID: self.credentials.access_key_id,
            ENV_SECRET_ACCESS_KEY: self.credentials.secret_access_key,
            ENV_DEFAULT_REGION: self.region,
            ENV_PROFILE: self.profile,
        }


@dataclass
class ProjectSpec:
    """The Amplify project being created or reused."""

    name: str
    app_id: str
    env_name: str
    generation: Generation = Generation.GEN1
    parent_dir: Path = field(default_factory=Path.cwd)
    react: bool = False

    @property
    def directory(self) -> Path:
        return self.parent_dir / self.name

    @property
    def outputs_dir(self) -> str | None:
        """Where Gen 2 writes amplify_outputs.json, relative to the project."""
        if self.generation is Generation.GEN2 and self.react:
            return "src"
        return None


@dataclass(frozen=True)
class HostEntry:
    """A Host block of the SSH client configuration."""

    alias: str
    hostname: str
    user: str
    identity_file: str

    def render(self) -> str:
        return (
            f"Host {self.alias}\n"
            f"    HostName {self.hostname}\n"
            f"    User {self.user}\n"
            f"    IdentityFile {self.identity_file}\n"
        )
