"""Frames-per-second counting with a once-per-second refresh."""

from __future__ import annotations

import logging
import math
import time
from typing import Callable, Optional

from .times import TimeValues

_log = logging.getLogger(__name__)


def transform_time(input_time_milli: float) -> str:
    """Split milliseconds into whole milliseconds, whole microseconds and rounded nanoseconds."""
    whole_ms = math.floor(input_time_milli)
    rem_us = (input_time_milli - whole_ms) * 1000
    whole_us = math.floor(rem_us)
    ns = round((rem_us - whole_us) * 1000)
    return f"{whole_ms}ms,{whole_us}us,{ns}ns"


def _vsync_label(vsync: bool) -> str:
    return "Enabled" if vsync else "Disabled"


class FPSCounter:
    """Counts frames and recomputes the frame rate once at least a second has passed.

    ``clock`` returns the current time in nanoseconds; ``set_title`` receives the
    window title built by :meth:`frame_in_title`.
    """

    def __init__(
        self,
        title: str = "",
        set_title: Optional[Callable[[str], object]] = None,
        clock: Callable[[], int] = time.perf_counter_ns,
    ) -> None:
        self.title = title
        self._set_title = set_title
        self._clock = clock
        self._last_time = clock()
        self.frames = 0
        self.fps = 0.0
        self.ms_per_frame = 0.0
        self.max_fps = 0.0
        self.ms_per_frame_composition = ""

    def update(self) -> None:
        """Count one frame and refresh the statistics when a second has elapsed."""
        self.frames += 1
        frames = float(self.frames)
        current = self._clock()
        step = TimeValues.from_nanoseconds(float(current - self._last_time))
        if step.seconds >= 1.0:
            self._last_time = current
            self.fps = frames / step.seconds
            self.ms_per_frame = step.millis / frames
            self.frames = 0
            self.max_fps = max(self.max_fps, self.fps)
        self.ms_per_frame_composition = transform_time(self.ms_per_frame)

    def _summary(self, vsync: bool, show_max: bool) -> str:
        if show_max:
            return (
                f"{self.fps:.3f} fps/{self.ms_per_frame_composition} - "
                f"Max: {self.max_fps:.3f} - VSync: {_vsync_label(vsync)}"
            )
        return f"{self.fps:.3f} fps/{self.ms_per_frame_composition} - VSync: {_vsync_label(vsync)}"

    def frame(self, vsync: bool = False, show_max: bool = False) -> str:
        """Count a frame, log the statistics line and return it."""
        self.update()
        message = self._summary(vsync, show_max)
        _log.info("%s", message)
        return message

    def frame_in_title(self, vsync: bool = False, show_max: bool = False) -> str:
        """Count a frame and hand the title with statistics to the title setter."""
        self.update()
        text = f"{self.title} - {self._summary(vsync, show_max)}"
        if self._set_title is not None:
            self._set_title(text)
        return text