"""Lifetime record of one input, from its start event until it ends."""

import weakref
from typing import Hashable

from touch_region.errors import InvalidEventError
from touch_region.events import RawEvent, composed_path
from touch_region.pointer_data import PointSnapshot


class InputTrack:
    """
    Tracks a single input (a finger, a mouse button, a pointer) and keeps its
    initial, previous and current snapshots, plus scratch storage for each
    gesture that looks at it.
    """

    def __init__(self, event: RawEvent, identifier: Hashable,
                 snapshot: PointSnapshot | None = None):
        if snapshot is None:
            snapshot = PointSnapshot.from_event(event, identifier)

        path = composed_path(event)
        if not path:
            raise InvalidEventError(
                f"{event.type!r} event has no target to build a start path from"
            )

        self.identifier = identifier
        self.initial = snapshot
        self.previous = snapshot
        self.current = snapshot

        # Relation only: the track must not keep elements alive.
        self.start_elements = weakref.WeakSet(path)

        self.progress = {}  # {gesture_key: dict}

    def __repr__(self):
        return f"InputTrack(identifier={self.identifier!r}, phase={self.phase.value})"

    @property
    def phase(self):
        return self.current.phase

    @property
    def start_time(self):
        return self.initial.timestamp

    @property
    def current_time(self):
        return self.current.timestamp

    @property
    def elapsed(self):
        return self.current.timestamp - self.initial.timestamp

    def update(self, event: RawEvent, snapshot: PointSnapshot | None = None):
        """Push the current snapshot into `previous` and record a new one."""
        if self.phase.is_terminal:
            raise RuntimeError(
                f"input {self.identifier!r} already ended; it cannot be updated"
            )
        if snapshot is None:
            snapshot = PointSnapshot.from_event(event, self.identifier)
        self.previous = self.current
        self.current = snapshot

    def was_initially_inside(self, element) -> bool:
        return element in self.start_elements

    def progress_for(self, gesture_key: Hashable) -> dict:
        """Scratch dict for one gesture, created on first access."""
        if gesture_key not in self.progress:
            self.progress[gesture_key] = {}
        return self.progress[gesture_key]

    def total_distance(self) -> float:
        return self.initial.distance_to(self.current)
