"""Raw event payloads consumed by the region.

Any object exposing the same attributes as :class:`RawEvent` can be fed to a
Region; these dataclasses are what the bundled element tree and the Panda3D
input source produce.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from touch_region.config import MOUSE_BUTTON_ID


@dataclass(frozen=True)
class Contact:
    """One entry of a multi-touch payload."""
    identifier: int
    x: float
    y: float


@dataclass
class RawEvent:
    type: str
    target: Any = None
    x: Optional[float] = None
    y: Optional[float] = None
    button: int = MOUSE_BUTTON_ID
    pointer_id: Optional[int] = None
    changed_touches: Optional[Tuple[Contact, ...]] = None
    timestamp: Optional[float] = None
    path: Optional[Tuple[Any, ...]] = None
    default_prevented: bool = field(default=False, init=False)
    propagation_stopped: bool = field(default=False, init=False)

    def prevent_default(self):
        self.default_prevented = True

    def stop_propagation(self):
        self.propagation_stopped = True

    @property
    def family(self):
        """'touch', 'pointer' or 'mouse', decided by the payload's shape."""
        if self.changed_touches is not None:
            return "touch"
        if self.pointer_id is not None:
            return "pointer"
        return "mouse"

    def identifiers(self):
        return event_identifiers(self)

    def composed_path(self):
        return composed_path(self)

    @classmethod
    def from_mapping(cls, data, target=None):
        """
        Build an event from a dict payload such as
        {'type': 'down', 'id': 1, 'x': 100, 'y': 150, 'timestamp': ...}.
        A 'touches' entry holding dicts with 'id', 'x' and 'y' makes it a
        multi-touch payload.
        """
        touches = data.get("touches")
        if touches is not None:
            touches = tuple(Contact(t["id"], t["x"], t["y"]) for t in touches)
        return cls(
            type=data["type"],
            target=data.get("target", target),
            x=data.get("x"),
            y=data.get("y"),
            button=data.get("button", MOUSE_BUTTON_ID),
            pointer_id=data.get("id"),
            changed_touches=touches,
            timestamp=data.get("timestamp"),
        )


def event_identifiers(event):
    """Every input identifier carried by a raw event, in payload order."""
    touches = getattr(event, "changed_touches", None)
    if touches is not None:
        return [t.identifier for t in touches]
    pointer_id = getattr(event, "pointer_id", None)
    if pointer_id is not None:
        return [pointer_id]
    return [getattr(event, "button", MOUSE_BUTTON_ID)]


def composed_path(event):
    """
    The propagation path of an event, from its target up to and including the
    root. An explicit `path` on the event wins over walking `parent` links.
    """
    path = getattr(event, "path", None)
    if path is not None:
        return list(path)
    result = []
    node = getattr(event, "target", None)
    while node is not None:
        result.append(node)
        node = getattr(node, "parent", None)
    return result
