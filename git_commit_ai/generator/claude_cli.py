"""Generator backed by an external command-line AI tool (Claude Code by default)."""

import shlex
import shutil
import subprocess

from git_commit_ai.config import DEFAULT_GENERATOR
from git_commit_ai.generator.base import (
    BaseGenerator,
    GenerationResult,
    clean_generated_message,
)
from git_commit_ai.generator.exceptions import (
    GenerationFailedError,
    GeneratorUnavailableError,
)


class ClaudeCLIGenerator(BaseGenerator):
    """Runs a CLI that reads the prompt on stdin and prints the message."""

    def __init__(self, command: str = DEFAULT_GENERATOR):
        """Initialize the generator.

        Args:
            command: Command line of the generator, e.g. "claude" or "claude --model sonnet".
        """
        self.command = command
        try:
            self.argv = shlex.split(command)
        except ValueError as e:
            raise GeneratorUnavailableError(f"Invalid generator command {command!r}: {e}")

    def ensure_available(self) -> None:
        # noinspection PyArgumentList
        if not self.argv or not shutil.which(self.argv[0]):
            name = self.argv[0] if self.argv else self.command
            raise GeneratorUnavailableError(f"{name} not found")

    def generate(self, prompt: str) -> GenerationResult:
        self.ensure_available()

        try:
            result = subprocess.run(
                self.argv,
                input=prompt,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except FileNotFoundError:
            raise GeneratorUnavailableError(f"{self.argv[0]} not found")

        output = result.stdout or ""
        if result.returncode != 0:
            raise GenerationFailedError(
                f"{self.argv[0]} exited with code {result.returncode}",
                output=output,
                returncode=result.returncode,
            )

        return GenerationResult(
            message=clean_generated_message(output),
            raw_output=output,
            command=self.command,
        )
