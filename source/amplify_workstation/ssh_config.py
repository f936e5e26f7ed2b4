# ABOUTME: Minimal structured reader/writer for the OpenSSH client configuration
# ABOUTME: Splits the file into Host/Match blocks so commented-out hosts never count as present

"""SSH client configuration handling."""

import re
from dataclasses import dataclass, field
from pathlib import Path

from amplify_workstation.models import HostEntry

# "Host foo bar", "Host=foo", "  match host foo"
_BLOCK_START = re.compile(r"^\s*(host|match)\s*(?:=|\s)\s*(.*)$", re.IGNORECASE)


@dataclass
class ConfigBlock:
    """A Host or Match block together with the lines that belong to it."""

    keyword: str
    patterns: list[str]
    lines: list[str] = field(default_factory=list)


class SshConfig:
    """An SSH config file parsed into its preamble and blocks.

    Only the structure needed to detect and append Host blocks is modelled;
    the original text is preserved byte for byte on render.
    """

    def __init__(self, preamble: list[str] | None = None, blocks: list[ConfigBlock] | None = None):
        self.preamble = preamble or []
        self.blocks = blocks or []

    @classmethod
    def parse(cls, text: str) -> "SshConfig":
        preamble: list[str] = []
        blocks: list[ConfigBlock] = []

        for line in text.splitlines(keepends=True):
            stripped = line.strip()
            match = None if stripped.startswith("#") else _BLOCK_START.match(line.rstrip("\r\n"))
            if match:
                value = match.group(2).split("#", 1)[0]
                blocks.append(ConfigBlock(match.group(1).lower(), value.split(), [line]))
            elif blocks:
                blocks[-1].lines.append(line)
            else:
                preamble.append(line)

        return cls(preamble, blocks)

    @classmethod
    def load(cls, path: Path) -> "SshConfig":
        if not path.exists():
            return cls()
        return cls.parse(path.read_text())

    def host_aliases(self) -> list[str]:
        aliases = []
        for block in self.blocks:
            if block.keyword == "host":
                aliases.extend(block.patterns)
        return aliases

    def has_host(self, alias: str) -> bool:
        """True if a Host block names this alias literally."""
        return alias in self.host_aliases()

    def add_host(self, entry: HostEntry) -> bool:
        """Append a Host block unless one for the alias already exists.

        Returns:
            True if the block was added.
        """
        if self.has_host(entry.alias):
            return False

        text = self.render()
        if text and not text.endswith("\n"):
            self._last_lines().append("\n")
            text += "\n"
        # Blank line between the existing content and the new block
        if text.strip() and not text.endswith("\n\n"):
            self._last_lines().append("\n")

        self.blocks.append(ConfigBlock("host", [entry.alias], entry.render().splitlines(keepends=True)))
        return True

    def render(self) -> str:
        parts = list(self.preamble)
        for block in self.blocks:
            parts.extend(block.lines)
        return "".join(parts)

    def _last_lines(self) -> list[str]:
        return self.blocks[-1].lines if self.blocks else self.preamble


def ensure_host_entry(path: Path, entry: HostEntry) -> bool:
    """Add a Host block to an SSH config file if missing and restrict its permissions to 0600.

    Returns:
        True if the file gained a new block.
    """
    path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
    path.touch(exist_ok=True)

    config = SshConfig.load(path)
    added = config.add_host(entry)
    if added:
        path.write_text(config.render())

    path.chmod(0o600)
    return added
