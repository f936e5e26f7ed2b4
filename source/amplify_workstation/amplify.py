# ABOUTME: Adapter around the Amplify CLI and its headless configure transcript
# ABOUTME: The prompt order of `amplify configure --headless` is defined in exactly one place

"""Amplify CLI adapter."""

from amplify_workstation.models import AmplifyConfiguration, ProjectSpec
from amplify_workstation.output import log
from amplify_workstation.shell import ShellRunner


class HeadlessConfigureTranscript:
    """Scripted stdin for `amplify configure --headless`.

    The Amplify CLI reads its answers positionally, so a wrong order silently
    misconfigures it. Each logical value has its own accessor; PROMPT_ORDER is
    the only thing to change if the CLI reorders its prompts.
    """

    PROMPT_ORDER = ("access_key_id", "secret_access_key", "region", "language", "profile")

    def __init__(self, configuration: AmplifyConfiguration):
        self.configuration = configuration

    def access_key_id(self) -> str:
        return self.configuration.credentials.access_key_id

    def secret_access_key(self) -> str:
        return self.configuration.credentials.secret_access_key

    def region(self) -> str:
        return self.configuration.region

    def language(self) -> str:
        return self.configuration.language

    def profile(self) -> str:
        return self.configuration.profile

    def answers(self) -> list[str]:
        return [getattr(self, name)() for name in self.PROMPT_ORDER]

    def render(self) -> str:
        return "\n".join(self.answers()) + "\n"


class AmplifyCli:
    """Amplify commands used by the configurator and the project initializer."""

    def __init__(self, runner: ShellRunner):
        self.runner = runner

    def configure_headless(self, configuration: AmplifyConfiguration) -> None:
        log("Configuring Amplify CLI...")
        self.runner.run(
            ["amplify", "configure", "--headless"],
            "Amplify CLI configuration failed",
            input=HeadlessConfigureTranscript(configuration).render(),
            env=configuration.to_env(),
        )
        log(
            "Note: You may see a message 'Headless mode is not implemented for @aws-amplify/cli-internal'. "
            "This can be ignored if the setup continues successfully."
        )

    def init(self, spec: ProjectSpec, configuration: AmplifyConfiguration, has_backend: bool = False) -> None:
        commands = spec.generation.init_commands(spec.app_id, spec.env_name, has_backend, spec.outputs_dir)
        for argv in commands:
            self.runner.run(argv, "Amplify init failed", cwd=spec.directory, env=configuration.to_env())

    def pull(self, spec: ProjectSpec, configuration: AmplifyConfiguration) -> None:
        self.runner.run(
            spec.generation.pull_command(spec.app_id, spec.env_name, spec.outputs_dir),
            "Amplify pull failed",
            cwd=spec.directory,
            env=configuration.to_env(),
        )
