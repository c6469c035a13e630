"""Centralized exception classes for the command layer.

Organization:
    - dispatch.py: per-command failures (shape, state, permission,
      validation, collaborator)
    - classify.py: exception-to-label mapping used in log lines
"""

from .classify import classify_error
from .dispatch import (
    ShapeError,
    StateError,
    CommandError,
    ValidationError,
    CollaboratorError,
    PermissionDeniedError,
)

__all__ = [
    "CommandError",
    "ShapeError",
    "StateError",
    "PermissionDeniedError",
    "ValidationError",
    "CollaboratorError",
    "classify_error",
]
