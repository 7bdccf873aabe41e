from shares import SharedFlag

# ---------------------------------------------------------------------------
# Control state
#
# Built once by main() and handed by reference to both the bridge handlers
# (writer) and the control task (reader). There is no module-level instance.
# ---------------------------------------------------------------------------


class ControlState:
    """The panel's control intent, one SharedFlag per variable."""

    def __init__(self):
        self.armed: SharedFlag[bool] = SharedFlag(False, name="armed")      # flight control active
        self.calibrate: SharedFlag[bool] = SharedFlag(False, name="calibrate")  # one-shot zero request

    def snapshot(self) -> dict:
        """
        Current value of every flag. Each flag is read on its own, so this is
        not an atomic view across flags.
        """
        return {
            "armed": self.armed.get(),
            "calibrate": self.calibrate.get(),
        }

    def __repr__(self) -> str:
        return f"ControlState({self.snapshot()!r})"
