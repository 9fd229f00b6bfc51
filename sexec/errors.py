"""
Errors — Message-carrying failures raised by handlers

Every handler failure is one of these. The dispatch loop is the only
place that catches them: it prints "Error: <message>" and carries on.
"""


def help_command(interactive: bool) -> str:
    """The help invocation to suggest, phrased for REPL or shell use."""
    return "help" if interactive else "se help"


class SeError(Exception):
    """Base class for all errors reported back to the user."""

    default_message = "Unknown error."

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NoActionError(SeError):
    """Empty input: no action keyword or command reference."""
    default_message = "No action or identifier given!"


class MissingTargetError(SeError):
    """An action needs a command reference and none was given."""
    default_message = "No command specified for action."


class NotFoundError(SeError):
    """A command name that is not in the list."""

    def __init__(self, name: str, interactive: bool, suggestions=None):
        self.name = name
        self.suggestions = list(suggestions or [])
        message = (
            f"Command with name \"{name}\" not found. "
            f"Run \"{help_command(interactive)}\" for help."
        )
        if self.suggestions:
            quoted = ", ".join(f"\"{s}\"" for s in self.suggestions)
            message += f" Did you mean {quoted}?"
        super().__init__(message)


class OutOfRangeError(SeError):
    """A numeric reference outside the current list bounds."""

    def __init__(self, reference: str, interactive: bool):
        self.reference = reference
        super().__init__(
            f"Command #{reference} does not exist. "
            f"Run \"{help_command(interactive)}\" for help."
        )


class DuplicateNameError(SeError):
    """Name collision on create or rename."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Command with name \"{name}\" already exists.")


class InvalidNameError(SeError):
    default_message = "Command name cannot be empty."


class InvalidNumberError(SeError):
    default_message = "Invalid number."


class AbortedError(SeError):
    """User declined a confirmation or abandoned an input prompt."""
    default_message = "Deletion aborted."


class ExecutionError(SeError):
    default_message = "Failed to run command."


class PersistenceError(SeError):
    default_message = "Failed to save commands."
