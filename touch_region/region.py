"""
The region: the element that listens for input events and routes them to the
gestures bound inside it.
"""

import logging
from collections.abc import Callable
from typing import Any

from touch_region.binding import Binding
from touch_region.config import EVENT_FAMILIES
from touch_region.element import Element
from touch_region.errors import ConfigurationError
from touch_region.events import RawEvent
from touch_region.phase import phase_of
from touch_region.registry import ActiveInputRegistry

logger = logging.getLogger(__name__)


class Region:
    """
    Listens for raw input events on `element` and dispatches lifecycle hooks
    to every binding whose element an active input started inside.

    capture: listen during the capture phase instead of the bubble phase.
    prevent_default: mark every handled event as default-prevented so the
        host does not act on it as well.
    """

    def __init__(self, element: Element, capture: bool = False, prevent_default: bool = True):
        if element is None:
            raise ConfigurationError("a Region requires a root element")
        if not callable(getattr(element, "add_event_listener", None)):
            raise ConfigurationError(f"{element!r} cannot accept event listeners")

        self.element = element
        self.capture = capture
        self.prevent_default = prevent_default
        self.registry = ActiveInputRegistry()
        self.bindings = []
        self._event_types = []

        self.activate()

    def activate(self):
        """Install the arbiter for every event type of the available families."""
        if self._event_types:
            return
        supports = getattr(self.element, "supports", lambda family: True)
        if supports("mouse") or supports("touch"):
            families = ("mouse", "touch")
        else:
            families = ("pointer",)

        self._event_types = [t for family in families for t in EVENT_FAMILIES[family]]
        for event_type in self._event_types:
            self.element.add_event_listener(event_type, self.arbitrate, self.capture)
        logger.debug("Region on %r listening for %s", self.element, ", ".join(families))

    def deactivate(self):
        for event_type in self._event_types:
            self.element.remove_event_listener(event_type, self.arbitrate, self.capture)
        self._event_types = []

    def arbitrate(self, event: RawEvent):
        """
        Handle one raw event: update the inputs, pick the bindings an active
        input started inside, run their hooks, then drop ended inputs.
        """
        if self.prevent_default:
            event.prevent_default()

        self.registry.reconcile(event)
        phase = phase_of(event.type)

        try:
            for binding in self.selected_bindings():
                binding.evaluate_hook(phase, self.registry)
        finally:
            self.registry.purge_ended()

    def selected_bindings(self) -> list[Binding]:
        return [b for b in self.bindings if self.registry.tracks_started_inside(b.element)]

    def bindings_for(self, element: Element) -> list[Binding]:
        return [b for b in self.bindings if b.element is element]

    def bind(self, element: Element, gesture, handler: Callable[[Any], None]):
        self.bindings.append(Binding(element, gesture, handler))
        logger.debug("Bound %r to %r", gesture, element)

    def unbind(self, element: Element, gesture=None) -> list[Binding]:
        """
        Remove the bindings of `element`, only those for `gesture` if one is
        given. Returns the removed bindings.
        """
        kept, removed = [], []
        for b in self.bindings:
            if b.element is element and (gesture is None or b.gesture is gesture):
                removed.append(b)
            else:
                kept.append(b)
        self.bindings = kept
        if removed:
            logger.debug("Unbound %d binding(s) from %r", len(removed), element)
        return removed
