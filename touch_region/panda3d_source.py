"""
Feeds Panda3D mouse and touch input into an element tree as raw events.

Panda3D reports input as per-frame state rather than events, so the source
polls the MouseWatcher each frame, compares it with the previous frame, and
dispatches touchstart/touchmove/touchend and mousedown/mousemove/mouseup
events on the element under each input. Attach it to the task manager of a
ShowBase app::

    root = Element("root", bounds=(-1.33, 1.33, -1, 1))
    region = Region(root)
    source = Panda3DInputSource(root, base.mouseWatcherNode)
    source.attach(base.taskMgr)
"""

import logging
import time

from direct.task import Task
from panda3d.core import MouseButton

from touch_region.config import MOUSE_BUTTON_ID, TOUCH_ID_OFFSET
from touch_region.events import Contact, RawEvent

logger = logging.getLogger(__name__)


class Panda3DInputSource:
    TASK_NAME = "pollInputsTask"

    def __init__(self, root, mouse_watcher, clock=time.monotonic):
        self.root = root
        self.mouse_watcher = mouse_watcher
        self.clock = clock

        self.previous_touches = {}  # {touch_id: Contact}
        self.touch_targets = {}     # {touch_id: element the touch started on}
        self.previous_mouse = None  # (x, y) while button one is held
        self.mouse_target = None

    def attach(self, task_mgr, name=None):
        return task_mgr.add(self.task, name or self.TASK_NAME)

    def task(self, task):
        self.poll()
        return Task.cont

    def poll(self):
        """Read one frame of input and dispatch the resulting events."""
        now = self.clock()
        self._poll_touches(now)
        self._poll_mouse(now)

    # --- Touch ---
    def _read_touches(self):
        watcher = self.mouse_watcher
        touches = {}
        if hasattr(watcher, "hasTouch") and watcher.hasTouch():
            for i in range(watcher.getNumTouches()):
                info = watcher.getTouch(i)
                touch_id = info.getId() + TOUCH_ID_OFFSET
                touches[touch_id] = Contact(touch_id, info.getX(), info.getY())
        return touches

    def _poll_touches(self, now):
        current = self._read_touches()

        started = [c for t_id, c in current.items() if t_id not in self.previous_touches]
        moved = [c for t_id, c in current.items()
                 if t_id in self.previous_touches and c != self.previous_touches[t_id]]
        # A lifted touch is reported at its last known position.
        ended = [c for t_id, c in self.previous_touches.items() if t_id not in current]

        for contact in started:
            target = self.root.hit_test(contact.x, contact.y)
            if target is None:
                continue
            self.touch_targets[contact.identifier] = target

        self._dispatch_touches("touchstart", started, now)
        self._dispatch_touches("touchmove", moved, now)
        self._dispatch_touches("touchend", ended, now)

        for contact in ended:
            self.touch_targets.pop(contact.identifier, None)
        self.previous_touches = {t_id: c for t_id, c in current.items()
                                 if t_id in self.touch_targets}

    def _dispatch_touches(self, event_type, contacts, now):
        by_target = {}
        for contact in contacts:
            target = self.touch_targets.get(contact.identifier)
            if target is None:
                continue
            by_target.setdefault(target, []).append(contact)

        for target, group in by_target.items():
            event = RawEvent(event_type, target=target,
                             changed_touches=tuple(group), timestamp=now)
            logger.debug("%s %s on %r", event_type, [c.identifier for c in group], target)
            target.dispatch_event(event)

    # --- Mouse ---
    def _poll_mouse(self, now):
        watcher = self.mouse_watcher
        if not watcher.hasMouse():
            return
        x, y = watcher.getMouseX(), watcher.getMouseY()
        is_down = watcher.isButtonDown(MouseButton.one())

        if is_down and self.previous_mouse is None:
            target = self.root.hit_test(x, y)
            if target is None:
                return
            self.mouse_target = target
            self._dispatch_mouse("mousedown", target, x, y, now)
            self.previous_mouse = (x, y)
        elif is_down and self.previous_mouse != (x, y):
            target = self.root.hit_test(x, y) or self.mouse_target
            self._dispatch_mouse("mousemove", target, x, y, now)
            self.previous_mouse = (x, y)
        elif not is_down and self.previous_mouse is not None:
            target = self.root.hit_test(x, y) or self.mouse_target
            self._dispatch_mouse("mouseup", target, x, y, now)
            self.previous_mouse = None
            self.mouse_target = None

    def _dispatch_mouse(self, event_type, target, x, y, now):
        event = RawEvent(event_type, target=target, x=x, y=y,
                         button=MOUSE_BUTTON_ID, timestamp=now)
        target.dispatch_event(event)
