"""Denial logging for callers of the guards.

Guards stay silent; a handler that wants an audit trail wraps them here,
where the actor and target are known.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


def log_decision(
    guard_name: str,
    allowed: bool,
    *,
    actor_id: str | None,
    group_id: str | None = None,
    subject: str | None = None,
) -> None:
    """Log one guard result: denials at INFO, grants at DEBUG."""
    if allowed:
        logger.debug(
            "access granted: user %s passed %s in group %s (%s)",
            actor_id,
            guard_name,
            group_id,
            subject,
        )
        return
    logger.info(
        "access denied: user %s failed %s in group %s (%s)",
        actor_id,
        guard_name,
        group_id,
        subject,
    )


_SUBJECT_KWARGS = ("capability", "min_role", "permission", "min_team")


def audited(guard: Callable[..., bool]) -> Callable[..., bool]:
    """Wrap a guard ``(actor, group_id, subject, ...)`` so each call is logged.

    The actor is a ``UserWithAccess`` for role guards or a ``TeamAssignment``
    for team guards; only users carry an id to log.
    """

    @functools.wraps(guard)
    def wrapper(actor: Any, *args: Any, **kwargs: Any) -> bool:
        allowed = guard(actor, *args, **kwargs)
        group_id = args[0] if args else kwargs.get("group_id")
        if len(args) > 1:
            subject = args[1]
        else:
            subject = next((kwargs[k] for k in _SUBJECT_KWARGS if k in kwargs), None)
        log_decision(
            guard.__name__,
            allowed,
            actor_id=getattr(actor, "id", None),
            group_id=group_id,
            subject=None if subject is None else str(subject),
        )
        return allowed

    return wrapper
