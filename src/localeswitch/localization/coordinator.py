"""Locale switch coordination.

Implements the switch protocol shared by every subsystem that owns
locale-dependent state:

    validate target -> update current locale -> run hooks -> notify observers

Key architectural decisions:
- Hooks are awaited sequentially, never fanned out, so a failure is
  attributable to one hook and successive hooks never race on shared state
- Current locale is updated before the first hook runs; hooks querying it
  observe the new value
- At most one switch is in flight; concurrent requests are rejected with
  SwitchStatus.CONFLICT rather than queued
- Hook and observer collections are insertion-ordered with O(1) membership,
  so execution order is reproducible run to run. Callers must not depend on
  the order between hooks.
- The first selection is detected with an explicit presence flag, never by
  comparing against an empty-string locale
- A failing hook aborts the rest of the switch without rolling back the
  locale; the failure is returned in SwitchResult, not raised

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from localeswitch.diagnostics import (
    ErrorTemplate,
    HookError,
    LocalizationError,
    SwitchConflictError,
    UnavailableLocaleError,
)
from localeswitch.enums import SwitchState, SwitchStatus
from localeswitch.localization.registry import LocaleRegistry
from localeswitch.localization.types import LocaleChangedCallback, LocaleCode, SwitchHook

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Coordinator
    "SwitchCoordinator",
    "SwitchResult",
    # Callback collections
    "CallbackRegistry",
    "HookRegistry",
    "ObserverList",
]

logger = logging.getLogger(__name__)


def _callable_name(func: Callable[..., object]) -> str:
    """Human-readable name of a hook or listener for logs and errors."""
    return getattr(func, "__qualname__", None) or repr(func)


class CallbackRegistry[T: Callable[..., object]]:
    """Insertion-ordered set of callables with O(1) membership.

    Identity is the callable itself: adding an equal callable twice keeps
    one entry, discarding an unknown callable is a no-op. Bound methods of
    the same object compare equal and therefore deduplicate.

    Thread Safety:
        Mutations and snapshots are serialized by a lock, so callables can
        be added or discarded from any thread, including while another flow
        iterates a snapshot.
    """

    __slots__ = ("_items", "_lock")

    def __init__(self) -> None:
        # dict preserves insertion order; values are unused
        self._items: dict[T, None] = {}
        self._lock = threading.Lock()

    def add(self, item: T) -> None:
        """Add item unless an equal item is already present."""
        with self._lock:
            self._items.setdefault(item, None)

    def discard(self, item: T) -> None:
        """Remove item if present."""
        with self._lock:
            self._items.pop(item, None)

    def clear(self) -> None:
        """Remove all items."""
        with self._lock:
            self._items.clear()

    def snapshot(self) -> tuple[T, ...]:
        """Return the current items in insertion order."""
        with self._lock:
            return tuple(self._items)

    def __contains__(self, item: object) -> bool:
        with self._lock:
            return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[_callable_name(i) for i in self.snapshot()]})"


class HookRegistry(CallbackRegistry[SwitchHook]):
    """Switch hooks registered by subsystems owning locale-dependent state."""


class ObserverList(CallbackRegistry[LocaleChangedCallback]):
    """Listeners notified after every completed switch."""

    def notify(self, locale: LocaleCode) -> None:
        """Call every listener with locale, in registration order.

        A listener that raises is logged and skipped; the remaining
        listeners still run and the switch stays successful.
        """
        for listener in self.snapshot():
            try:
                listener(locale)
            except Exception:
                logger.exception(
                    "Locale changed listener %s failed for locale %s",
                    _callable_name(listener),
                    locale,
                )


@dataclass(frozen=True, slots=True)
class SwitchResult:
    """Outcome of a locale switch request.

    Attributes:
        requested_locale: Locale passed to select_locale()
        status: What happened (success, unchanged, unavailable, ...)
        previous_locale: Selected locale before the request (None if none)
        current_locale: Selected locale after the request (None if none)
        hooks_invoked: Number of hooks started during the switch, including
            a failing one
        error: Exception describing a failure, None otherwise

    Example:
        >>> result = await coordinator.select_locale("ja")
        >>> if not result.ok:
        ...     print(f"Switch failed: {result.error}")
    """

    requested_locale: LocaleCode
    status: SwitchStatus
    previous_locale: LocaleCode | None = None
    current_locale: LocaleCode | None = None
    hooks_invoked: int = 0
    error: LocalizationError | None = None

    @property
    def is_success(self) -> bool:
        """Check if the locale changed and all hooks completed."""
        return self.status == SwitchStatus.SUCCESS

    @property
    def is_unchanged(self) -> bool:
        """Check if the requested locale was already selected."""
        return self.status == SwitchStatus.UNCHANGED

    @property
    def is_unavailable(self) -> bool:
        """Check if the requested locale was not discovered."""
        return self.status == SwitchStatus.UNAVAILABLE

    @property
    def is_hook_failure(self) -> bool:
        """Check if a hook failed during the switch."""
        return self.status == SwitchStatus.HOOK_FAILED

    @property
    def is_conflict(self) -> bool:
        """Check if the request was rejected because a switch was in flight."""
        return self.status == SwitchStatus.CONFLICT

    @property
    def ok(self) -> bool:
        """Check if the requested locale is now selected and fully loaded."""
        return self.status in (SwitchStatus.SUCCESS, SwitchStatus.UNCHANGED)

    def raise_for_status(self) -> None:
        """Raise the carried error if the request failed.

        Raises:
            LocalizationError: The subclass matching the failure status
        """
        if self.error is not None:
            raise self.error


class SwitchCoordinator:
    """Owner of the current locale and driver of the switch protocol.

    Subsystems register async hooks that reload their locale-dependent
    state; select_locale() runs all of them whenever the locale actually
    changes and notifies observers once every hook has completed.

    State machine:
        IDLE -> SWITCHING on a valid change request
        SWITCHING -> IDLE when hooks complete, a hook fails, or the
        switching task is cancelled

    Example:
        >>> coordinator = SwitchCoordinator(registry)
        >>> coordinator.register_hook(text_manager.reload)
        >>> coordinator.subscribe(lambda locale: print(f"Now in {locale}"))
        >>> result = await coordinator.select_locale("ja")
        Now in ja
        >>> result.status
        <SwitchStatus.SUCCESS: 'success'>
    """

    __slots__ = (
        "_current_locale",
        "_has_selection",
        "_hooks",
        "_observers",
        "_registry",
        "_state",
    )

    def __init__(self, registry: LocaleRegistry) -> None:
        """Initialize the coordinator with no locale selected.

        Args:
            registry: Source of truth for which locales may be selected
        """
        self._registry = registry
        self._hooks = HookRegistry()
        self._observers = ObserverList()
        self._state = SwitchState.IDLE
        self._current_locale: LocaleCode | None = None
        self._has_selection = False

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def current_locale(self) -> LocaleCode | None:
        """Selected locale, or None before the first selection.

        During a switch this already holds the target locale.
        """
        return self._current_locale

    @property
    def has_selection(self) -> bool:
        """Check if a locale has been selected at least once."""
        return self._has_selection

    @property
    def state(self) -> SwitchState:
        """Current state of the switch state machine."""
        return self._state

    @property
    def is_switching(self) -> bool:
        """Check if a switch is in flight."""
        return self._state == SwitchState.SWITCHING

    @property
    def registry(self) -> LocaleRegistry:
        """Locale registry used to validate switch targets."""
        return self._registry

    @property
    def hooks(self) -> tuple[SwitchHook, ...]:
        """Snapshot of the registered switch hooks."""
        return self._hooks.snapshot()

    @property
    def observers(self) -> tuple[LocaleChangedCallback, ...]:
        """Snapshot of the registered locale changed listeners."""
        return self._observers.snapshot()

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_hook(self, hook: SwitchHook) -> None:
        """Run hook during every subsequent switch. Idempotent."""
        self._hooks.add(hook)

    def unregister_hook(self, hook: SwitchHook) -> None:
        """Stop running hook. Unknown hooks are ignored.

        If a switch is in flight and hook has not run yet, it is skipped.
        """
        self._hooks.discard(hook)

    def subscribe(self, listener: LocaleChangedCallback) -> None:
        """Call listener with the new locale after every completed switch."""
        self._observers.add(listener)

    def unsubscribe(self, listener: LocaleChangedCallback) -> None:
        """Stop notifying listener. Unknown listeners are ignored."""
        self._observers.discard(listener)

    # ------------------------------------------------------------------
    # Switch protocol
    # ------------------------------------------------------------------

    async def select_locale(self, target: LocaleCode) -> SwitchResult:
        """Select target as the current locale.

        Validation order: availability, then in-flight conflict, then
        same-locale no-op. Failures are returned, never raised.

        Args:
            target: Locale to select

        Returns:
            SwitchResult describing the outcome
        """
        previous = self._current_locale

        if not self._registry.is_available(target):
            logger.warning("Failed to select locale: locale '%s' is not available", target)
            diagnostic = ErrorTemplate.locale_unavailable(target, self._registry.list())
            return SwitchResult(
                requested_locale=target,
                status=SwitchStatus.UNAVAILABLE,
                previous_locale=previous,
                current_locale=previous,
                error=UnavailableLocaleError(diagnostic, locale=target),
            )

        if self._state == SwitchState.SWITCHING:
            in_flight = previous or ""
            logger.warning(
                "Rejected switch to '%s': switch to '%s' in progress", target, in_flight
            )
            diagnostic = ErrorTemplate.switch_conflict(target, in_flight)
            return SwitchResult(
                requested_locale=target,
                status=SwitchStatus.CONFLICT,
                previous_locale=previous,
                current_locale=previous,
                error=SwitchConflictError(
                    diagnostic, requested_locale=target, in_flight_locale=in_flight
                ),
            )

        if self._has_selection and target == previous:
            logger.debug("Locale '%s' already selected", target)
            return SwitchResult(
                requested_locale=target,
                status=SwitchStatus.UNCHANGED,
                previous_locale=previous,
                current_locale=previous,
            )

        # No suspension point between the state check above and this
        # transition, so no other task can start a switch in between.
        self._state = SwitchState.SWITCHING
        self._current_locale = target
        self._has_selection = True
        logger.debug("Switching locale: %s -> %s", previous, target)

        invoked = 0
        try:
            for hook in self._hooks.snapshot():
                if hook not in self._hooks:
                    logger.debug("Skipping hook %s: unregistered", _callable_name(hook))
                    continue
                invoked += 1
                logger.debug("Running switch hook %s", _callable_name(hook))
                try:
                    await hook()
                except Exception as e:
                    return self._hook_failure(hook, e, target, previous, invoked)
        finally:
            self._state = SwitchState.IDLE

        logger.info("Selected locale '%s' (previous: %s, hooks: %d)", target, previous, invoked)
        self._observers.notify(target)
        return SwitchResult(
            requested_locale=target,
            status=SwitchStatus.SUCCESS,
            previous_locale=previous,
            current_locale=target,
            hooks_invoked=invoked,
        )

    @staticmethod
    def _hook_failure(
        hook: SwitchHook,
        exc: Exception,
        target: LocaleCode,
        previous: LocaleCode | None,
        invoked: int,
    ) -> SwitchResult:
        """Build the result for a switch aborted by a failing hook."""
        hook_name = _callable_name(hook)
        logger.error(
            "Switch hook %s failed while selecting '%s': %s; remaining hooks skipped",
            hook_name,
            target,
            exc,
        )
        error = HookError(
            ErrorTemplate.hook_failed(hook_name, target, exc),
            locale=target,
            hook_name=hook_name,
        )
        error.__cause__ = exc
        return SwitchResult(
            requested_locale=target,
            status=SwitchStatus.HOOK_FAILED,
            previous_locale=previous,
            current_locale=target,
            hooks_invoked=invoked,
            error=error,
        )

    def clear_registrations(self) -> None:
        """Unregister every hook and listener."""
        self._hooks.clear()
        self._observers.clear()

    def reset(self) -> None:
        """Forget the current selection.

        The next select_locale() call runs all hooks again, whatever
        locale it targets.

        Raises:
            SwitchConflictError: If a switch is in flight
        """
        if self._state == SwitchState.SWITCHING:
            in_flight = self._current_locale or ""
            raise SwitchConflictError(
                ErrorTemplate.switch_conflict("<reset>", in_flight),
                in_flight_locale=in_flight,
            )
        self._current_locale = None
        self._has_selection = False
