from unittest.mock import Mock

from touch_region.element import Element
from touch_region.events import Contact, RawEvent


def make_tree():
    """root > panel > button, plus an unrelated sibling of panel."""
    root = Element("root", bounds=(0, 200, 0, 200))
    panel = Element("panel", parent=root, bounds=(0, 100, 0, 100))
    button = Element("button", parent=panel, bounds=(10, 40, 10, 40))
    sidebar = Element("sidebar", parent=root, bounds=(150, 200, 0, 200))
    return root, panel, button, sidebar


def mouse(event_type, x, y, target, button=0, timestamp=None):
    return RawEvent(event_type, target=target, x=x, y=y, button=button, timestamp=timestamp)


def touch(event_type, target, *contacts, timestamp=None):
    return RawEvent(event_type, target=target,
                    changed_touches=tuple(Contact(*c) for c in contacts),
                    timestamp=timestamp)


def mock_gesture(**returns):
    gesture = Mock(spec=["start", "move", "end", "cancel"])
    for hook in ("start", "move", "end", "cancel"):
        getattr(gesture, hook).return_value = returns.get(hook)
    return gesture
