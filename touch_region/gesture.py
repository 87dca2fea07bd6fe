"""
The gesture capability contract.

A gesture is any object with zero or more of the hooks ``start``, ``move``,
``end`` and ``cancel``. Each hook is called with the region's
ActiveInputRegistry and returns data for the bound handler, or None when it
has nothing to report. Subclassing :class:`Gesture` is optional; it supplies
no-op hooks and a unique ``id`` to key per-input progress.
"""

import itertools

HOOKS = ("start", "move", "end", "cancel")

_ids = itertools.count()


class Gesture:
    def __init__(self, name=None):
        self.name = name or type(self).__name__
        self.id = f"{self.name}-{next(_ids)}"

    def __repr__(self):
        return f"{type(self).__name__}(id={self.id!r})"

    def start(self, registry):
        return None

    def move(self, registry):
        return None

    def end(self, registry):
        return None

    def cancel(self, registry):
        return None


def gesture_key(gesture):
    """Key a gesture's progress is stored under on each InputTrack."""
    key = getattr(gesture, "id", None)
    if key is None:
        key = f"{type(gesture).__name__}@{id(gesture):x}"
    return key


def hook_for(gesture, phase):
    """The gesture's callable hook for `phase`, or None if it has none."""
    if phase not in HOOKS:
        raise ValueError(f"unknown hook {phase!r}")
    hook = getattr(gesture, phase, None)
    return hook if callable(hook) else None
