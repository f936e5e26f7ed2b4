# ABOUTME: Unit tests for the shared value objects
# ABOUTME: Covers generation-specific commands, credential masking and child environments

"""Tests for amplify_workstation.models."""

import pytest

from amplify_workstation.models import (
    AmplifyConfiguration,
    AwsCredentials,
    ExistingProjectAction,
    Generation,
    HostEntry,
    ProjectSpec,
)


class TestGeneration:
    """Tests for the Generation enum."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("gen1", Generation.GEN1),
            ("Gen 1", Generation.GEN1),
            ("1", Generation.GEN1),
            ("GEN2", Generation.GEN2),
            ("gen-2", Generation.GEN2),
            ("2", Generation.GEN2),
        ],
    )
    def test_parse_accepts_common_spellings(self, value, expected):
        """Test that menu and option spellings map to a generation."""
        assert Generation.parse(value) is expected

    @pytest.mark.parametrize("value", ["", "gen3", "3", "latest"])
    def test_parse_rejects_unknown_values(self, value):
        """Test that anything else is an invalid selection."""
        with pytest.raises(ValueError, match="Unknown Amplify generation"):
            Generation.parse(value)

    def test_gen1_uses_amplify_cli(self):
        """Test Gen 1 init and pull go through the classic Amplify CLI."""
        assert Generation.GEN1.init_commands("d123", "dev") == [
            ["amplify", "init", "--appId", "d123", "--envName", "dev"]
        ]
        assert Generation.GEN1.pull_command("d123", "dev") == [
            "amplify",
            "pull",
            "--appId",
            "d123",
            "--envName",
            "dev",
            "--yes",
        ]

    def test_gen2_uses_ampx(self):
        """Test Gen 2 scaffolds with create-amplify and generates outputs with ampx."""
        commands = Generation.GEN2.init_commands("d123", "main")

        assert commands[0] == ["npm", "create", "amplify@latest", "--", "--yes"]
        assert commands[1] == ["npx", "ampx", "generate", "outputs", "--app-id", "d123", "--branch", "main"]
        assert Generation.GEN2.pull_command("d123", "main") == commands[1]

    def test_gen2_existing_backend_only_generates_outputs(self):
        """Test that a kept amplify/ backend is not scaffolded again."""
        assert Generation.GEN2.init_commands("d123", "main", has_backend=True) == [
            ["npx", "ampx", "generate", "outputs", "--app-id", "d123", "--branch", "main"]
        ]
        # Gen 1 always runs amplify init
        assert Generation.GEN1.init_commands("d123", "dev", has_backend=True)[0][:2] == ["amplify", "init"]

    def test_gen2_outputs_dir(self):
        """Test React apps get amplify_outputs.json generated inside src/."""
        assert Generation.GEN2.pull_command("d123", "main", "src")[-2:] == ["--out-dir", "src"]
        assert Generation.GEN2.init_commands("d123", "main", out_dir="src")[-1][-2:] == ["--out-dir", "src"]
        assert Generation.GEN2.client_config_file("src") == "src/amplify_outputs.json"
        assert Generation.GEN2.local_metadata("src") == [".amplify", "src/amplify_outputs.json"]
        # Gen 1 ignores the output directory
        assert Generation.GEN1.pull_command("d123", "dev", "src")[-1] == "--yes"

    def test_gen2_metadata_keeps_backend_source(self):
        """Test that re-initialising a Gen 2 project never removes the amplify/ backend code."""
        assert Generation.GEN2.local_metadata() == [".amplify", "amplify_outputs.json"]
        assert Generation.GEN1.local_metadata() == ["amplify", "src/aws-exports.js"]

    def test_configure_snippet_matches_client_config(self):
        """Test that the spliced import points at the generated configuration file."""
        assert "./aws-exports" in Generation.GEN1.configure_snippet()[1]
        # CRA only resolves imports inside src/, where React outputs are generated
        assert "'./amplify_outputs.json'" in Generation.GEN2.configure_snippet()[1]


class TestAmplifyConfiguration:
    """Tests for the explicit configuration struct."""

    def test_to_env_contains_all_four_variables(self):
        """Test that child processes receive keys, region and profile."""
        configuration = AmplifyConfiguration(
            credentials=AwsCredentials("AKIA1", "secret1"), region="eu-west-1", profile="dev"
        )

        assert configuration.to_env() == {
            "AWS_ACCESS_KEY_ID": "AKIA1",
            "AWS_SECRET_ACCESS_KEY": "secret1",
            "AWS_DEFAULT_REGION": "eu-west-1",
            "AWS_PROFILE": "dev",
        }
        assert configuration.language == "javascript"

    def test_credentials_repr_masks_secret(self):
        """Test that credentials never print in full."""
        text = repr(AwsCredentials("AKIAVERYSECRET", "topsecret"))

        assert "topsecret" not in text
        assert "AKIAVERYSECRET" not in text
        assert "AKIA****" in text


class TestMiscModels:
    """Tests for the smaller value objects."""

    def test_project_directory(self, tmp_path):
        """Test the project directory is the name under the parent directory."""
        spec = ProjectSpec(name="demo", app_id="d1", env_name="dev", parent_dir=tmp_path)
        assert spec.directory == tmp_path / "demo"

    def test_outputs_dir(self, tmp_path):
        """Test only Gen 2 React projects redirect their outputs."""
        assert ProjectSpec("a", "d1", "dev", Generation.GEN2, tmp_path, react=True).outputs_dir == "src"
        assert ProjectSpec("a", "d1", "dev", Generation.GEN2, tmp_path).outputs_dir is None
        assert ProjectSpec("a", "d1", "dev", Generation.GEN1, tmp_path, react=True).outputs_dir is None

    def test_host_entry_render(self):
        """Test the rendered SSH block."""
        entry = HostEntry("amplify-development-server", "1.2.3.4", "ubuntu", "~/.ssh/id_rsa")

        assert entry.render() == (
            "Host amplify-development-server\n"
            "    HostName 1.2.3.4\n"
            "    User ubuntu\n"
            "    IdentityFile ~/.ssh/id_rsa\n"
        )

    def test_existing_project_action_values(self):
        """Test the --action option values."""
        assert ExistingProjectAction("update") is ExistingProjectAction.UPDATE
        assert ExistingProjectAction("reinit") is ExistingProjectAction.REINIT
        assert ExistingProjectAction("cancel") is ExistingProjectAction.CANCEL
