# ABOUTME: Unit tests for copying AWS configuration to a remote host
# ABOUTME: ssh and rsync are replaced by a mocked runner

"""Tests for amplify_workstation.transfer."""

from unittest.mock import MagicMock, call

import pytest

from amplify_workstation.config import Settings
from amplify_workstation.errors import CommandError, PrerequisiteError
from amplify_workstation.transfer import CredentialTransfer, default_key_exists


@pytest.fixture
def aws_dir(tmp_path):
    path = tmp_path / "aws"
    path.mkdir()
    (path / "credentials").write_text("[default]\n")
    return path


@pytest.fixture
def settings(tmp_path, aws_dir):
    return Settings(ssh_config_path=str(tmp_path / "ssh" / "config"), aws_config_dir=str(aws_dir))


class TestCredentialTransfer:
    """Tests for CredentialTransfer.run."""

    def test_registers_host_and_syncs(self, settings, aws_dir, tmp_path):
        """Test the host block, remote mkdir and rsync mirror."""
        runner = MagicMock()

        result = CredentialTransfer(runner, settings).run("10.1.2.3", "~/.ssh/dev.pem")

        assert result.host_added
        assert result.remote_dir == "/home/ubuntu/.aws"
        config = (tmp_path / "ssh" / "config").read_text()
        assert "HostName 10.1.2.3" in config
        assert "IdentityFile ~/.ssh/dev.pem" in config
        assert runner.run.call_args_list == [
            call(
                ["ssh", "amplify-development-server", "mkdir -p /home/ubuntu/.aws"],
                "Could not create the remote AWS directory",
            ),
            call(
                [
                    "rsync",
                    "-avz",
                    "--delete",
                    "-e",
                    "ssh",
                    f"{aws_dir}/",
                    "amplify-development-server:/home/ubuntu/.aws",
                ],
                "AWS configuration sync failed",
            ),
        ]

    def test_running_twice_keeps_one_block(self, settings, tmp_path):
        """Test the SSH config is not appended to on a second run."""
        transfer = CredentialTransfer(MagicMock(), settings)

        transfer.run("10.1.2.3")
        second = transfer.run("10.1.2.3")

        assert not second.host_added
        assert (tmp_path / "ssh" / "config").read_text().count("Host amplify-development-server") == 1

    def test_default_key(self, settings, tmp_path):
        """Test the identity file falls back to the default key."""
        CredentialTransfer(MagicMock(), settings).run("10.1.2.3")

        assert "IdentityFile ~/.ssh/id_rsa" in (tmp_path / "ssh" / "config").read_text()

    def test_missing_aws_dir_stops_before_ssh(self, settings, aws_dir):
        """Test that no remote command runs without a local ~/.aws."""
        settings.aws_config_dir = str(aws_dir / "missing")
        runner = MagicMock()

        with pytest.raises(PrerequisiteError, match="does not exist"):
            CredentialTransfer(runner, settings).run("10.1.2.3")

        runner.run.assert_not_called()

    def test_failed_mkdir_stops_before_rsync(self, settings):
        """Test the first failing remote command halts the transfer."""
        runner = MagicMock()
        runner.run.side_effect = CommandError("Could not create the remote AWS directory", ["ssh"], 255)

        with pytest.raises(CommandError):
            CredentialTransfer(runner, settings).run("10.1.2.3")

        assert runner.run.call_count == 1

    def test_empty_host(self, settings):
        """Test an empty host is rejected."""
        with pytest.raises(PrerequisiteError):
            CredentialTransfer(MagicMock(), settings).run("")

    def test_custom_remote_user(self, settings):
        """Test the remote directory follows the remote user."""
        settings.remote_user = "ec2-user"

        assert CredentialTransfer(MagicMock(), settings).remote_dir == "/home/ec2-user/.aws"


def test_default_key_exists(tmp_path):
    """Test the default key check."""
    key = tmp_path / "id_rsa"
    settings = Settings(default_key_path=str(key))

    assert not default_key_exists(settings)
    key.write_text("key")
    assert default_key_exists(settings)
