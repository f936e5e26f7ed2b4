# ABOUTME: Unit tests for the Amplify CLI adapter
# ABOUTME: Verifies the headless transcript order and the environment passed to each command

"""Tests for amplify_workstation.amplify."""

from unittest.mock import MagicMock

import pytest

from amplify_workstation.amplify import AmplifyCli, HeadlessConfigureTranscript
from amplify_workstation.models import AmplifyConfiguration, AwsCredentials, Generation, ProjectSpec


@pytest.fixture
def configuration():
    return AmplifyConfiguration(
        credentials=AwsCredentials("AKIATEST", "s3cr3t"), region="us-west-2", profile="default"
    )


class TestHeadlessConfigureTranscript:
    """Tests for the scripted configure answers."""

    def test_answers_follow_prompt_order(self, configuration):
        """Test keys, region, language and profile are answered in the CLI's order."""
        transcript = HeadlessConfigureTranscript(configuration)

        assert transcript.answers() == ["AKIATEST", "s3cr3t", "us-west-2", "javascript", "default"]
        assert transcript.render() == "AKIATEST\ns3cr3t\nus-west-2\njavascript\ndefault\n"

    def test_prompt_order_drives_rendering(self, configuration, monkeypatch):
        """Test that reordering PROMPT_ORDER is the only change needed."""
        monkeypatch.setattr(
            HeadlessConfigureTranscript,
            "PROMPT_ORDER",
            ("region", "access_key_id", "secret_access_key", "profile", "language"),
        )

        assert HeadlessConfigureTranscript(configuration).answers()[0] == "us-west-2"


class TestAmplifyCli:
    """Tests for AmplifyCli."""

    def test_configure_headless(self, configuration):
        """Test the transcript goes to stdin and credentials only to the child environment."""
        runner = MagicMock()

        AmplifyCli(runner).configure_headless(configuration)

        runner.run.assert_called_once()
        args, kwargs = runner.run.call_args
        assert args[0] == ["amplify", "configure", "--headless"]
        assert kwargs["input"] == HeadlessConfigureTranscript(configuration).render()
        assert kwargs["env"]["AWS_ACCESS_KEY_ID"] == "AKIATEST"
        assert kwargs["env"]["AWS_DEFAULT_REGION"] == "us-west-2"

    def test_init_gen1(self, configuration, tmp_path):
        """Test Gen 1 runs a single amplify init in the project directory."""
        runner = MagicMock()
        spec = ProjectSpec("app", "d42", "dev", Generation.GEN1, tmp_path)

        AmplifyCli(runner).init(spec, configuration)

        runner.run.assert_called_once()
        args, kwargs = runner.run.call_args
        assert args == (["amplify", "init", "--appId", "d42", "--envName", "dev"], "Amplify init failed")
        assert kwargs["cwd"] == tmp_path / "app"

    def test_init_gen2_runs_each_step(self, configuration, tmp_path):
        """Test Gen 2 scaffolds non-interactively and then generates outputs."""
        runner = MagicMock()

        AmplifyCli(runner).init(ProjectSpec("app", "d42", "main", Generation.GEN2, tmp_path), configuration)

        argvs = [call.args[0] for call in runner.run.call_args_list]
        assert argvs == [
            ["npm", "create", "amplify@latest", "--", "--yes"],
            ["npx", "ampx", "generate", "outputs", "--app-id", "d42", "--branch", "main"],
        ]

    def test_init_gen2_with_backend(self, configuration, tmp_path):
        """Test an existing Gen 2 backend is not scaffolded again."""
        runner = MagicMock()

        AmplifyCli(runner).init(
            ProjectSpec("app", "d42", "main", Generation.GEN2, tmp_path), configuration, has_backend=True
        )

        argvs = [call.args[0] for call in runner.run.call_args_list]
        assert argvs == [["npx", "ampx", "generate", "outputs", "--app-id", "d42", "--branch", "main"]]

    def test_pull(self, configuration, tmp_path):
        """Test pull uses the generation's pull command."""
        runner = MagicMock()

        AmplifyCli(runner).pull(ProjectSpec("app", "d42", "dev", Generation.GEN1, tmp_path), configuration)

        args, _ = runner.run.call_args
        assert args[0][:2] == ["amplify", "pull"]
        assert args[1] == "Amplify pull failed"

    def test_pull_gen2_react_writes_outputs_to_src(self, configuration, tmp_path):
        """Test React projects get their outputs where the bundler can import them."""
        runner = MagicMock()
        spec = ProjectSpec("app", "d42", "main", Generation.GEN2, tmp_path, react=True)

        AmplifyCli(runner).pull(spec, configuration)

        assert runner.run.call_args.args[0][-2:] == ["--out-dir", "src"]
