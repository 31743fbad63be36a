"""
scheduler.py — Frame callback queue.

A tiny stand-in for a browser's animation-frame API: callers request a
callback for the *next* frame, the application loop pumps the queue once per
display frame with the current clock. Nothing here repeats on its own; a
callback that wants another frame has to ask for one.
"""

import itertools
import logging

logger = logging.getLogger(__name__)


class FrameScheduler:
    """Single-shot frame callbacks keyed by integer handles."""

    def __init__(self):
        self._callbacks: dict[int, callable] = {}
        self._handles = itertools.count(1)

    @property
    def pending(self) -> int:
        return len(self._callbacks)

    def request_frame(self, callback) -> int:
        """Run ``callback(timestamp_ms)`` on the next pump. Returns a handle."""
        handle = next(self._handles)
        self._callbacks[handle] = callback
        return handle

    def cancel(self, handle) -> None:
        """Drop a queued callback. Unknown or already-run handles are ignored."""
        self._callbacks.pop(handle, None)

    def pump(self, timestamp_ms: int) -> int:
        """
        Fire every callback queued before this call and return how many ran.
        Callbacks requested while pumping wait for the next frame.
        """
        due = sorted(self._callbacks)
        ran = 0
        for handle in due:
            # an earlier callback may have cancelled this one
            callback = self._callbacks.pop(handle, None)
            if callback is None:
                continue
            callback(timestamp_ms)
            ran += 1
        if ran:
            logger.debug("frame %d ms: ran %d callback(s)", timestamp_ms, ran)
        return ran
