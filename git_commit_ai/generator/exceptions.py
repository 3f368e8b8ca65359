"""Generator-related exception classes.

Contains all exception classes for the text generation step:
- GeneratorError: Base exception for generator-related errors
- GeneratorUnavailableError: Raised when the generator binary is missing
- GenerationFailedError: Raised when the generator exits with an error
- EmptyGeneratedMessageError: Raised when the output holds no message
"""


class GeneratorError(Exception):
    """Base exception for generator-related errors."""

    pass


class GeneratorUnavailableError(GeneratorError):
    """Raised when the generator command cannot be found."""

    pass


class GenerationFailedError(GeneratorError):
    """Raised when the generator exits with a non-zero status.

    Attributes:
        output: Combined stdout/stderr of the generator, shown to the user.
        returncode: The generator's exit status.
    """

    def __init__(self, message: str, output: str = "", returncode: int | None = None):
        super().__init__(message)
        self.output = output
        self.returncode = returncode


class EmptyGeneratedMessageError(GeneratorError):
    """Raised when nothing is left of the output after cleaning."""

    pass
