import threading
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_UNSET: Any = object()

# ---------------------------------------------------------------------------
# Single-slot shared variable
#
# Written by the HTTP handlers (aiohttp daemon thread) and read by the
# control loop (main thread). Each flag holds exactly one value; a put
# overwrites whatever was there, so rapid duplicate requests coalesce and
# the reader only ever sees the most recent completed write.
#
# The lock is held for a single assignment or read, never across caller
# code, so neither thread can stall the other.
# ---------------------------------------------------------------------------


class SharedFlag(Generic[T]):
    """
    Overwrite-on-write mailbox for one control variable.

    `initial` is the value held from construction. `rest` is the value
    restored by take(); it defaults to `initial`.
    """

    def __init__(self, initial: T, rest: T = _UNSET, name: str = ""):
        self._lock = threading.Lock()
        self._value = initial
        self._rest = initial if rest is _UNSET else rest
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def rest(self) -> T:
        return self._rest

    def put(self, value: T) -> None:
        with self._lock:
            self._value = value

    def get(self) -> T:
        """Non-consuming read, safe to poll repeatedly."""
        with self._lock:
            return self._value

    def take(self) -> T:
        """Return the current value and reset the flag to its rest value."""
        with self._lock:
            value = self._value
            self._value = self._rest
        return value

    def __repr__(self) -> str:
        return f"SharedFlag({self._name or '?'}={self.get()!r})"
