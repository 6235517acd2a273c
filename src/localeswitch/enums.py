"""Enumerations for localeswitch type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class SwitchState(StrEnum):
    """Observable state of the switch coordinator.

    StrEnum provides automatic string conversion: str(SwitchState.IDLE) == "idle"
    """

    IDLE = "idle"
    """No switch in progress."""

    SWITCHING = "switching"
    """A switch request is being processed (hooks are running)."""


class SwitchStatus(StrEnum):
    """Outcome of a locale switch request.

    StrEnum provides automatic string conversion: str(SwitchStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Locale changed, all hooks completed, observers notified."""

    UNCHANGED = "unchanged"
    """Requested locale was already selected; nothing ran."""

    UNAVAILABLE = "unavailable"
    """Requested locale is not in the discovered set; nothing changed."""

    HOOK_FAILED = "hook_failed"
    """A hook failed; locale was updated but remaining hooks were skipped."""

    CONFLICT = "conflict"
    """Another switch was in flight; the request was rejected."""


__all__ = [
    "SwitchState",
    "SwitchStatus",
]
