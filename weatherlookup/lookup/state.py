"""Single-writer observable cell holding the live LookupResult."""

import logging
import threading
from collections.abc import Callable

from weatherlookup.models.common import ErrorKind
from weatherlookup.models.forecast import DailyPoint, HourlyPoint
from weatherlookup.models.lookup import LookupResult, LookupStatus
from weatherlookup.models.weather import CurrentConditions

logger = logging.getLogger(__name__)

Listener = Callable[[LookupResult], None]


class LookupState:
    """Holds exactly one LookupResult; readers only ever see whole snapshots.

    Every lookup is tagged with a monotonically increasing sequence number
    by begin(). publish() applies a result only when its sequence number is
    still the active one, so a superseded lookup never becomes visible.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._result = LookupResult()
        self._sequence = 0
        self._listeners: list[Listener] = []

    def snapshot(self) -> LookupResult:
        with self._lock:
            return self._result

    @property
    def current(self) -> CurrentConditions | None:
        return self.snapshot().current

    @property
    def hourly(self) -> list[HourlyPoint]:
        return list(self.snapshot().hourly)

    @property
    def daily(self) -> list[DailyPoint]:
        return list(self.snapshot().daily)

    @property
    def is_loading(self) -> bool:
        return self.snapshot().status == LookupStatus.LOADING

    @property
    def error_message(self) -> str | None:
        return self.snapshot().error_message

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with each applied result."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def begin(self) -> int:
        """Start a new lookup: clear prior state, enter loading."""
        with self._lock:
            self._sequence += 1
            seq = self._sequence
            loading = LookupResult.loading(seq)
            self._result = loading
            listeners = list(self._listeners)
        self._notify(listeners, loading)
        return seq

    def reject(self, kind: ErrorKind, message: str) -> int:
        """Go straight to error without a loading phase, superseding any lookup."""
        with self._lock:
            self._sequence += 1
            seq = self._sequence
            failed = LookupResult.failed(kind, message, sequence=seq)
            self._result = failed
            listeners = list(self._listeners)
        self._notify(listeners, failed)
        return seq

    def publish(self, sequence: int, result: LookupResult) -> bool:
        """Apply a finished lookup's result if it is still the active one."""
        with self._lock:
            if sequence != self._sequence:
                logger.debug(
                    "Discarding result of superseded lookup %d (active %d)",
                    sequence, self._sequence,
                )
                return False
            self._result = result
            listeners = list(self._listeners)
        self._notify(listeners, result)
        return True

    @staticmethod
    def _notify(listeners: list[Listener], result: LookupResult) -> None:
        for listener in listeners:
            try:
                listener(result)
            except Exception:
                logger.exception("Lookup state listener failed")


class LookupStateView:
    """Read-only face of a LookupState handed to display surfaces."""

    def __init__(self, state: LookupState):
        self._state = state

    def snapshot(self) -> LookupResult:
        return self._state.snapshot()

    @property
    def current(self) -> CurrentConditions | None:
        return self._state.current

    @property
    def hourly(self) -> list[HourlyPoint]:
        return self._state.hourly

    @property
    def daily(self) -> list[DailyPoint]:
        return self._state.daily

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    @property
    def error_message(self) -> str | None:
        return self._state.error_message

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self._state.subscribe(listener)
