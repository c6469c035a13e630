"""Exception classification helpers for log labels."""

from __future__ import annotations

from .dispatch import (
    ShapeError,
    StateError,
    ValidationError,
    CollaboratorError,
    PermissionDeniedError,
)

ERROR_CATEGORIES: tuple[tuple[type[BaseException], str], ...] = (
    (ShapeError, "shape"),
    (StateError, "state"),
    (PermissionDeniedError, "permission"),
    (ValidationError, "validation"),
    (CollaboratorError, "collaborator"),
    (TimeoutError, "timeout"),
    (ConnectionError, "connection"),
)


def classify_error(exc: BaseException) -> str:
    """Map an exception to a short category label."""

    for cls, label in ERROR_CATEGORIES:
        if isinstance(exc, cls):
            return label
    return "unknown"


__all__ = ["ERROR_CATEGORIES", "classify_error"]
