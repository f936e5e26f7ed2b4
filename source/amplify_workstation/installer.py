# ABOUTME: Idempotent installation of the Amplify development toolchain
# ABOUTME: Checks an installation marker per tool and installs only what is missing

"""Toolchain installer for Amplify development hosts."""

import shlex
import tempfile
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from amplify_workstation.config import Settings
from amplify_workstation.errors import PrerequisiteError
from amplify_workstation.output import log
from amplify_workstation.shell import ShellRunner

# Commands that must resolve once installation has finished
REQUIRED_COMMANDS = ["node", "npm", "aws", "amplify"]


@dataclass
class Tool:
    """A tool with its installation marker and installer."""

    name: str
    is_installed: Callable[[], bool]
    install: Callable[[], None]


@dataclass
class InstallReport:
    """What a run of the installer did."""

    installed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    system_updated: bool = False

    @property
    def changed(self) -> bool:
        return bool(self.installed) or self.system_updated


class ToolInstaller:
    """Ensure unzip, curl, AWS CLI v2, nvm, Node.js and the Amplify CLI are present."""

    def __init__(self, runner: ShellRunner, settings: Settings):
        self.runner = runner
        self.settings = settings
        self.nvm_dir = settings.expand(settings.nvm_dir)

    def tools(self) -> list[Tool]:
        """The fixed, ordered toolchain."""
        tools = [
            Tool(package, self._apt_check(package), self._apt_install(package))
            for package in self.settings.apt_packages
        ]
        tools += [
            Tool("AWS CLI", lambda: self.runner.which("aws") is not None, self._install_aws_cli),
            Tool("NVM", self.nvm_dir.is_dir, self._install_nvm),
            Tool("Node.js", self._node_installed, self._install_node),
            Tool("Amplify CLI", lambda: self.runner.which("amplify") is not None, self._install_amplify_cli),
        ]
        return tools

    def run(self, upgrade_system: bool = True) -> InstallReport:
        """Install every missing tool, then verify the required commands resolve."""
        report = InstallReport()

        # Put an nvm-managed node on PATH first so the amplify marker sees global npm packages
        self._activate_node()

        tools = self.tools()
        pending = [tool.name for tool in tools if not tool.is_installed()]

        if pending and upgrade_system:
            self.update_system()
            report.system_updated = True

        for tool in tools:
            if tool.is_installed():
                log(f"{tool.name} is already installed.")
                report.skipped.append(tool.name)
            else:
                log(f"Installing {tool.name}...")
                tool.install()
                report.installed.append(tool.name)

            if tool.name == "Node.js":
                self._activate_node()

        self.verify()
        return report

    def update_system(self) -> None:
        log("Updating system...")
        self.runner.run(["sudo", "apt", "update"], "System update failed")
        self.runner.run(["sudo", "apt", "full-upgrade", "-y"], "System update failed")

    def verify(self) -> None:
        """Raise PrerequisiteError if a required command cannot be found."""
        log("Verifying installations...")
        for command in REQUIRED_COMMANDS:
            if self.runner.which(command) is None:
                raise PrerequisiteError(f"Command '{command}' could not be found. Please install it and try again.")

    def _apt_check(self, package: str) -> Callable[[], bool]:
        return lambda: self.runner.succeeds(["dpkg", "-s", package])

    def _apt_install(self, package: str) -> Callable[[], None]:
        return lambda: self.runner.run(["sudo", "apt", "install", "-y", package], f"Failed to install {package}")

    def _install_aws_cli(self) -> None:
        with tempfile.TemporaryDirectory(prefix="awscli-") as tmp:
            archive = Path(tmp) / "awscliv2.zip"
            self.runner.run(
                ["curl", "-fsSL", self.settings.aws_cli_url, "-o", str(archive)],
                "AWS CLI download failed",
            )
            self.runner.run(["unzip", "-q", str(archive), "-d", tmp], "AWS CLI unzip failed")
            self.runner.run(["sudo", str(Path(tmp) / "aws" / "install")], "AWS CLI installation failed")

    def _install_nvm(self) -> None:
        url = shlex.quote(self.settings.nvm_install_url)
        self.runner.run_shell(f"set -o pipefail; curl -fsSL -o- {url} | bash", "NVM installation failed")

    def _nvm_script(self, command: str) -> str:
        """A bash snippet that loads nvm and runs an nvm subcommand."""
        nvm_dir = shlex.quote(str(self.nvm_dir))
        return f'export NVM_DIR={nvm_dir}; . "$NVM_DIR/nvm.sh" && nvm {command}'

    def _node_installed(self) -> bool:
        version = shlex.quote(self.settings.node_version)
        return self.runner.succeeds(["bash", "-c", self._nvm_script(f"which {version}")])

    def _install_node(self) -> None:
        version = shlex.quote(self.settings.node_version)
        self.runner.run_shell(self._nvm_script(f"install {version}"), "Node.js installation failed")

    def _activate_node(self) -> None:
        """Prepend the nvm node bin directory to the runner PATH, if node is installed."""
        if not self.nvm_dir.is_dir() or not self._node_installed():
            return
        version = shlex.quote(self.settings.node_version)
        result = self.runner.run_shell(
            self._nvm_script(f"which {version}"), "Could not locate Node.js", capture=True
        )
        node_path = result.stdout.strip().splitlines()[-1] if result.stdout.strip() else ""
        if node_path:
            self.runner.prepend_path(Path(node_path).parent)

    def _install_amplify_cli(self) -> None:
        self.runner.run(
            ["npm", "install", "-g", self.settings.amplify_package],
            "Amplify CLI installation failed",
        )
