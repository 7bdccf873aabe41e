import threading
from typing import Callable

from state import ControlState

DEFAULT_CONTROL_PERIOD = 0.01   # seconds; 100 Hz, well ahead of the web side

# ---------------------------------------------------------------------------
# Control task
#
# Polls the control flags on a fixed period, independent of request
# arrival. Only reads: `armed` with get() (level), `calibrate` with take()
# (one-shot, so a single request is acted on once).
# ---------------------------------------------------------------------------


def _log_calibrate() -> None:
    print("[control] Calibration requested - zeroing sensors")


def _log_calibrate_dropped() -> None:
    print("[control] Calibration request dropped - flight control is armed")


def _log_arm_change(armed: bool) -> None:
    print(f"[control] Flight control {'armed' if armed else 'disarmed'}")


class ControlTask:
    def __init__(
        self,
        state: ControlState,
        period: float = DEFAULT_CONTROL_PERIOD,
        on_calibrate: Callable[[], None] | None = None,
        on_arm_change: Callable[[bool], None] | None = None,
        on_calibrate_dropped: Callable[[], None] | None = None,
    ):
        self.state = state
        self.period = period
        self.on_calibrate = on_calibrate or _log_calibrate
        self.on_arm_change = on_arm_change or _log_arm_change
        self.on_calibrate_dropped = on_calibrate_dropped or _log_calibrate_dropped
        self._armed = state.armed.get()

    def step(self) -> bool:
        """
        One poll of the control flags. Returns the armed value observed.

        Never calibrate a live control loop. An arm change is reported
        before any calibration in the same poll, and a calibrate request
        that finds the loop armed is consumed and dropped rather than
        deferred, so a later disarm cannot trigger a stale calibration.
        """
        requested = self.state.calibrate.take()
        armed = self.state.armed.get()

        if armed != self._armed:
            self._armed = armed
            self.on_arm_change(armed)

        if requested:
            if armed:
                self.on_calibrate_dropped()
            else:
                self.on_calibrate()
        return armed

    def run(self, stop_event: threading.Event | None = None) -> None:
        """
        Runs step() every `period` seconds until `stop_event` is set
        (forever when no event is given).
        """
        stop_event = stop_event or threading.Event()
        print(f"[control] Control loop running every {self.period * 1000:.0f} ms")
        while not stop_event.is_set():
            self.step()
            stop_event.wait(self.period)
