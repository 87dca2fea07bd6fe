"""Per-event capture of a single input's position and phase."""

import time
from dataclasses import dataclass, field
from typing import Any, Hashable

from touch_region.errors import InvalidEventError
from touch_region.phase import Phase, phase_of
from touch_region.point2d import Point2D


@dataclass(frozen=True)
class PointSnapshot:
    """
    Position, phase and time of one input at one raw event.

    Built with :meth:`from_event`; never modified afterwards.
    """
    phase: Phase
    timestamp: float
    position: Point2D
    identifier: Hashable
    event: Any = field(repr=False, compare=False)

    @classmethod
    def from_event(cls, event, identifier):
        if event is None:
            raise InvalidEventError("a raw event is required to build a PointSnapshot")

        event_type = getattr(event, "type", None)
        phase = phase_of(event_type)
        if phase is None:
            raise InvalidEventError(f"unrecognized event type: {event_type!r}")

        x, y = _coordinates_for(event, identifier)
        timestamp = getattr(event, "timestamp", None)
        if timestamp is None:
            timestamp = time.monotonic()

        return cls(phase, timestamp, Point2D(x, y), identifier, event)

    def distance_to(self, other):
        return self.position.distance_to(other.position)

    def angle_to(self, other):
        return self.position.angle_to(other.position)


def _coordinates_for(event, identifier):
    touches = getattr(event, "changed_touches", None)
    if touches is not None:
        for contact in touches:
            if contact.identifier == identifier:
                if contact.x is None or contact.y is None:
                    raise InvalidEventError(f"contact {identifier!r} carries no coordinates")
                return contact.x, contact.y
        raise InvalidEventError(
            f"identifier {identifier!r} not found in changed touches of {event.type!r} event"
        )

    x, y = getattr(event, "x", None), getattr(event, "y", None)
    if x is None or y is None:
        raise InvalidEventError(f"{event.type!r} event carries no coordinates")
    return x, y
