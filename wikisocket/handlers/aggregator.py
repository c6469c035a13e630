"""Ordered aggregation of collaborator calls into one response.

Some commands answer with data gathered from several Discussions calls.
Steps run strictly one after another; the first step reporting a
non-success status stops the chain with a CollaboratorError and nothing
gathered so far is emitted. Whether that error reaches the client is the
command's policy, decided by the router.
"""

from __future__ import annotations

import logging
from typing import Any
from collections.abc import Callable, Sequence, Awaitable
from dataclasses import dataclass

from ..config.protocol import STATUS_SUCCESS
from ..errors import CollaboratorError
from ..collaborators.base import ServiceResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ChainStep:
    """One collaborator call in an aggregation chain."""

    name: str
    call: Callable[[], Awaitable[ServiceResult]]


async def run_chain(command: str, steps: Sequence[ChainStep]) -> list[Any]:
    """Run ``steps`` in order and return their data in the same order.

    Raises:
        CollaboratorError: At the first step whose status is not success.
            Later steps are never called.
    """
    results: list[Any] = []
    for step in steps:
        status, data = await step.call()
        if status != STATUS_SUCCESS:
            logger.info("%s: step %s returned status=%s", command, step.name, status)
            raise CollaboratorError(command, status, step=step.name)
        results.append(data)
    return results


async def mutate_and_refetch(
    command: str,
    mutation: ChainStep,
    refetch: ChainStep,
    *,
    result_key: str,
) -> dict[str, Any]:
    """Apply ``mutation`` then fold the re-fetched listing into a success reply.

    The re-fetch only happens after the mutation succeeded, so a client
    never sees a listing next to a failed mutation.
    """
    _, listing = await run_chain(command, (mutation, refetch))
    return {"status": STATUS_SUCCESS, result_key: listing}


__all__ = ["ChainStep", "run_chain", "mutate_and_refetch"]
