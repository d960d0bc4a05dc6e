# frame_clock.py

class FrameClock:
    """
    Cooperative once-per-repaint scheduler.

    Callbacks take no arguments and run once, on the next call to run_frame().
    A callback that wants to run again must request another frame itself.

    Data Contract:
    - request_frame(callback) -> None: queue callback for the next frame.
    - run_frame() -> int: run the callbacks queued before this call, in
      request order. Callbacks requested while it runs wait for the following
      frame. Returns the number of callbacks run.
    - Invariants: callbacks of one frame never interleave; exceptions raised
      by a callback propagate to the caller of run_frame().
    """
    def __init__(self):
        self._queue = []
        self.frame_count = 0

    @property
    def pending(self) -> int:
        return len(self._queue)

    def request_frame(self, callback):
        self._queue.append(callback)

    def run_frame(self) -> int:
        due, self._queue = self._queue, []
        for callback in due:
            callback()
        self.frame_count += 1
        return len(due)
