"""Lifecycle phases and the lookup table from raw event types to phases."""

from enum import Enum


class Phase(str, Enum):
    START = "start"
    MOVE = "move"
    END = "end"
    CANCEL = "cancel"

    @property
    def is_terminal(self):
        return self in (Phase.END, Phase.CANCEL)


# Raw event type -> lifecycle phase. Covers the mouse, touch and pointer
# families plus the plain "down"/"move"/"up" names used by batch payloads.
PHASE = {
    "mousedown": Phase.START,
    "touchstart": Phase.START,
    "pointerdown": Phase.START,
    "down": Phase.START,

    "mousemove": Phase.MOVE,
    "touchmove": Phase.MOVE,
    "pointermove": Phase.MOVE,
    "move": Phase.MOVE,

    "mouseup": Phase.END,
    "touchend": Phase.END,
    "pointerup": Phase.END,
    "up": Phase.END,

    "touchcancel": Phase.CANCEL,
    "pointercancel": Phase.CANCEL,
    "cancel": Phase.CANCEL,
}


def phase_of(event_type):
    """Return the Phase for an event type string, or None if it is unknown."""
    return PHASE.get(event_type)
