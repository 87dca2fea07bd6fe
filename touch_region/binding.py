from collections.abc import Callable
from typing import Any

from touch_region.gesture import hook_for
from touch_region.phase import Phase
from touch_region.registry import ActiveInputRegistry


class Binding:
    """
    Associates an element with a gesture and the handler that receives the
    gesture's output.
    """

    __slots__ = ("_element", "_gesture", "_handler")

    def __init__(self, element, gesture, handler: Callable[[Any], None]):
        self._element = element
        self._gesture = gesture
        self._handler = handler

    def __repr__(self):
        return f"Binding({self._element!r}, {self._gesture!r})"

    @property
    def element(self):
        return self._element

    @property
    def gesture(self):
        return self._gesture

    @property
    def handler(self):
        return self._handler

    def evaluate_hook(self, phase: Phase | str, registry: ActiveInputRegistry):
        """
        Run the gesture's hook for `phase` and pass any non-None result to
        the handler. A gesture without that hook counts as returning None.
        """
        hook = hook_for(self._gesture, Phase(phase).value)
        if hook is None:
            return None
        data = hook(registry)
        if data is not None:
            self._handler(data)
        return data
