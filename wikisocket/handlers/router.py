"""Command routing and the fixed validation pipeline.

Every inbound command goes through the same four steps, stopping at the
first failure:

1. Shape:        payload is a mapping carrying every required field, with
                 the declared type where one is declared
2. State:        the session satisfies the command's precondition
3. Permission:   the session holds the command's capability
4. Handler:      the command's coroutine runs

What happens on failure is declared per command on its CommandSpec: a
failure either produces a ``{"status": ...}`` reply on the command's reply
event or is dropped without any reply. The policies differ between commands
on purpose and are kept as the client protocol expects them.
"""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING, Any
from collections.abc import Mapping, Callable, Iterable, Awaitable
from dataclasses import field, dataclass

from ..config.protocol import STATUS_NO_PERMISSION, response_event
from ..errors import (
    ShapeError,
    StateError,
    CommandError,
    ValidationError,
    CollaboratorError,
    PermissionDeniedError,
    classify_error,
)
from ..logging import log_context
from ..state.session import ConnectionSession
from .permissions import Capability, is_allowed

if TYPE_CHECKING:
    from ..runtime.dependencies import RuntimeDeps
    from .websocket.helpers import EventChannel

logger = logging.getLogger(__name__)


class Precondition(str, enum.Enum):
    """Session state a command expects before it is allowed to run."""

    NONE = "none"
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"
    READ_ACCESS = "read_access"


@dataclass(frozen=True, slots=True)
class Command:
    """One inbound command as parsed from a frame."""

    name: str
    payload: Any = None


@dataclass(slots=True)
class CommandContext:
    """Everything a handler needs to serve one command."""

    command: Command
    session: ConnectionSession
    channel: EventChannel
    deps: RuntimeDeps
    reply_event: str

    @property
    def name(self) -> str:
        return self.command.name

    @property
    def data(self) -> dict[str, Any]:
        payload = self.command.payload
        return payload if isinstance(payload, dict) else {}

    @property
    def users(self):
        return self.deps.users

    @property
    def discussions(self):
        return self.deps.discussions

    async def reply(self, payload: Mapping[str, Any]) -> bool:
        return await self.channel.emit(self.reply_event, dict(payload))

    async def emit(self, event: str, payload: Mapping[str, Any]) -> bool:
        return await self.channel.emit(event, dict(payload))


Handler = Callable[[CommandContext], Awaitable[None]]


@dataclass(frozen=True, slots=True)
class CommandSpec:
    """Declarative description of one command.

    Attributes:
        name: Inbound command name.
        handler: Coroutine run once validation passes.
        fields: Required payload fields mapped to the type they must have,
            or None when any value is accepted. Commands with no fields skip
            the shape step and ignore their payload.
        precondition: Session state required before the handler runs.
        capability: Capability checked by the permission gate.
        shape_status: Status replied on a shape failure; None drops silently.
        state_status: Status replied on a state failure; None drops silently.
        forward_collaborator_status: Reply with the collaborator's status when
            a collaborator call fails; otherwise drop silently.
        reply_event: Outbound event name; defaults to ``<name>Response``.
    """

    name: str
    handler: Handler
    fields: Mapping[str, type | None] = field(default_factory=dict)
    precondition: Precondition = Precondition.NONE
    capability: Capability = Capability.NONE
    shape_status: str | None = None
    state_status: str | None = None
    forward_collaborator_status: bool = False
    reply_event: str | None = None

    @property
    def event(self) -> str:
        return self.reply_event or response_event(self.name)

    def failure_status(self, exc: CommandError) -> str | None:
        """Return the status to reply with for ``exc``, or None to drop it."""
        if isinstance(exc, ShapeError):
            return self.shape_status
        if isinstance(exc, StateError):
            return self.state_status
        if isinstance(exc, PermissionDeniedError):
            return STATUS_NO_PERMISSION
        if isinstance(exc, ValidationError):
            return exc.status
        if isinstance(exc, CollaboratorError):
            return exc.status if self.forward_collaborator_status else None
        return None


def check_shape(spec: CommandSpec, payload: Any) -> None:
    """Raise ShapeError unless ``payload`` carries every field ``spec`` requires.

    Presence is key presence: a field sent as JSON null is present. Only
    fields declared with a type are type-checked.
    """
    if not spec.fields:
        return
    if not isinstance(payload, dict):
        raise ShapeError(spec.name, "payload must be a JSON object")
    for name, expected in spec.fields.items():
        if name not in payload:
            raise ShapeError(spec.name, f"missing field {name!r}", field=name)
        if expected is not None and not isinstance(payload[name], expected):
            raise ShapeError(
                spec.name,
                f"field {name!r} must be of type {expected.__name__}",
                field=name,
            )


def check_state(spec: CommandSpec, session: ConnectionSession, *, public_access: bool) -> None:
    """Raise StateError unless ``session`` satisfies the spec's precondition."""
    precondition = spec.precondition
    if precondition is Precondition.NONE:
        return
    if precondition is Precondition.ANONYMOUS:
        if session.authenticated:
            raise StateError(spec.name, "already authenticated")
        return
    if precondition is Precondition.AUTHENTICATED:
        if not is_allowed(session, Capability.AUTHENTICATED):
            raise StateError(spec.name, "authentication required")
        return
    if not session.authenticated and not public_access:
        raise StateError(spec.name, "public access disabled for anonymous sessions")


def check_permission(spec: CommandSpec, session: ConnectionSession) -> None:
    """Raise PermissionDeniedError unless the permission gate allows the command."""
    if not is_allowed(session, spec.capability):
        raise PermissionDeniedError(spec.name, spec.capability.value)


class CommandRouter:
    """Maps command names to specs and runs the validation pipeline."""

    def __init__(self, specs: Iterable[CommandSpec] = ()) -> None:
        self._specs: dict[str, CommandSpec] = {}
        for spec in specs:
            self.register(spec)

    def register(self, spec: CommandSpec) -> None:
        if spec.name in self._specs:
            raise ValueError(f"command {spec.name!r} registered twice")
        self._specs[spec.name] = spec

    def get(self, name: str) -> CommandSpec | None:
        return self._specs.get(name)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._specs)

    async def dispatch(
        self,
        command: Command,
        *,
        session: ConnectionSession,
        channel: EventChannel,
        deps: RuntimeDeps,
    ) -> None:
        """Validate and run one command, emitting at most one reply.

        Never raises: unexpected handler failures are logged and the command
        is dropped so the connection keeps serving later commands.
        """
        spec = self._specs.get(command.name)
        if spec is None:
            logger.debug("dropping unknown command %r", command.name)
            return

        ctx = CommandContext(
            command=command,
            session=session,
            channel=channel,
            deps=deps,
            reply_event=spec.event,
        )
        with log_context(command=command.name):
            try:
                check_shape(spec, command.payload)
                check_state(spec, session, public_access=deps.global_settings.public_access)
                check_permission(spec, session)
                await spec.handler(ctx)
            except CommandError as exc:
                await self._handle_failure(spec, ctx, exc)
            except Exception:  # noqa: BLE001
                logger.exception("command %s failed", command.name)

    async def _handle_failure(self, spec: CommandSpec, ctx: CommandContext, exc: CommandError) -> None:
        status = spec.failure_status(exc)
        category = classify_error(exc)
        if status is None:
            logger.debug("dropping %s: %s failure (%s)", spec.name, category, exc.message)
            return
        logger.info("%s rejected: %s failure status=%s", spec.name, category, status)
        await ctx.reply({"status": status})


__all__ = [
    "Precondition",
    "Command",
    "CommandContext",
    "CommandSpec",
    "CommandRouter",
    "check_shape",
    "check_state",
    "check_permission",
]
