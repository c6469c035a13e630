"""Command dispatch exceptions.

Every failure a command can hit between frame parsing and the outbound
response is modelled as a CommandError subclass. The router decides, per
command, whether a given failure is answered with a status response or
dropped silently; the exceptions only describe what went wrong.

Taxonomy:
    ShapeError:            payload is not a mapping or lacks a required field
    StateError:            session precondition not met (e.g. already logged in)
    PermissionDeniedError: authenticated but missing the required role
    ValidationError:       field present but unacceptable (e.g. blank title)
    CollaboratorError:     an external service reported a non-success status
"""

from __future__ import annotations


class CommandError(Exception):
    """Base class for failures raised while handling one command.

    Attributes:
        command: Name of the command being handled.
    """

    def __init__(self, command: str, message: str) -> None:
        super().__init__(message)
        self.command = command
        self.message = message


class ShapeError(CommandError):
    """Payload is malformed or is missing a required field."""

    def __init__(self, command: str, message: str, *, field: str | None = None) -> None:
        super().__init__(command, message)
        self.field = field


class StateError(CommandError):
    """Session state does not satisfy the command's precondition."""


class PermissionDeniedError(CommandError):
    """Session lacks the capability required by a privileged command."""

    def __init__(self, command: str, capability: str) -> None:
        super().__init__(command, f"{command} requires capability {capability!r}")
        self.capability = capability


class ValidationError(CommandError):
    """Well-formed payload carrying a value the command rejects.

    Attributes:
        status: Status string reported to the client.
    """

    def __init__(self, command: str, status: str, message: str) -> None:
        super().__init__(command, message)
        self.status = status


class CollaboratorError(CommandError):
    """An external collaborator returned a non-success status.

    Attributes:
        status: The collaborator's own status string, forwarded verbatim
            when the command's policy surfaces collaborator failures.
        step: Name of the collaborator call that failed.
    """

    def __init__(self, command: str, status: str, *, step: str) -> None:
        super().__init__(command, f"{step} reported status {status!r}")
        self.status = status
        self.step = step


__all__ = [
    "CommandError",
    "ShapeError",
    "StateError",
    "PermissionDeniedError",
    "ValidationError",
    "CollaboratorError",
]
