"""
A minimal host element tree.

Elements form a parent/child hierarchy, optionally carry screen bounds for hit
testing, and deliver raw events to listeners in capture, target and bubble
order. Regions install their listeners on one of these.
"""

from collections import defaultdict
from collections.abc import Callable

from touch_region.config import EVENT_FAMILIES


class Element:
    def __init__(self, name: str | None = None, parent: "Element | None" = None,
                 bounds: tuple[float, float, float, float] | None = None,
                 families: tuple[str, ...] = ("mouse", "touch")):
        self.name = name
        self.parent = None
        self.children = []
        self.bounds = bounds  # (left, right, bottom, top), or None for unbounded
        self.families = tuple(families)
        self._listeners = defaultdict(list)  # {event_type: [(listener, capture)]}
        if parent is not None:
            parent.append(self)

    def __repr__(self):
        return f"Element({self.name!r})"

    # --- Tree ---
    def append(self, child: "Element"):
        if child.parent is not None:
            child.parent.remove(child)
        child.parent = self
        self.children.append(child)
        return child

    def remove(self, child: "Element"):
        self.children.remove(child)
        child.parent = None

    def ancestors(self):
        """This element followed by each parent up to the root."""
        node = self
        while node is not None:
            yield node
            node = node.parent

    def supports(self, family: str) -> bool:
        return family in self.families

    def event_types(self):
        return [t for family in self.families for t in EVENT_FAMILIES.get(family, ())]

    # --- Hit testing ---
    def contains(self, x: float, y: float) -> bool:
        if self.bounds is None:
            return True
        left, right, bottom, top = self.bounds
        return left <= x <= right and bottom <= y <= top

    def hit_test(self, x: float, y: float) -> "Element | None":
        """
        The deepest element under (x, y), starting from this one. Later
        children are drawn on top, so they are tried first. Returns None when
        the point is outside this element.
        """
        if not self.contains(x, y):
            return None
        for child in reversed(self.children):
            hit = child.hit_test(x, y)
            if hit is not None:
                return hit
        return self

    # --- Listeners ---
    def add_event_listener(self, event_type: str, listener: Callable, capture: bool = False):
        entry = (listener, capture)
        if entry not in self._listeners[event_type]:
            self._listeners[event_type].append(entry)

    def remove_event_listener(self, event_type: str, listener: Callable, capture: bool = False):
        entries = self._listeners.get(event_type, [])
        if (listener, capture) in entries:
            entries.remove((listener, capture))

    def listeners(self, event_type: str, capture: bool) -> list[Callable]:
        return [fn for fn, c in self._listeners.get(event_type, ()) if c == capture]

    def dispatch_event(self, event):
        """
        Deliver `event` with this element as its target, replacing any target
        it already had. Capture listeners run from the root down, then the
        target's own listeners, then bubble listeners from the parent up.
        """
        event.target = self
        path = list(self.ancestors())

        for node in reversed(path[1:]):
            for listener in node.listeners(event.type, capture=True):
                listener(event)
            if event.propagation_stopped:
                return

        for listener in self.listeners(event.type, True) + self.listeners(event.type, False):
            listener(event)
        if event.propagation_stopped:
            return

        for node in path[1:]:
            for listener in node.listeners(event.type, capture=False):
                listener(event)
            if event.propagation_stopped:
                return
