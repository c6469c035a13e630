"""Connection and command handling.

- permissions.py: capability checks against the session snapshot
- router.py: command specs and the shape/state/permission pipeline
- aggregator.py: ordered collaborator chains
- lifecycle.py: session creation, logout and teardown
- websocket/: transport (accept, receive loop, outbound channel)
"""

from .permissions import Capability, is_allowed
from .router import Command, CommandSpec, CommandRouter, CommandContext, Precondition
from .lifecycle import ConnectionLifecycle, logout_session

__all__ = [
    "Capability",
    "is_allowed",
    "Command",
    "CommandSpec",
    "CommandRouter",
    "CommandContext",
    "Precondition",
    "ConnectionLifecycle",
    "logout_session",
]
