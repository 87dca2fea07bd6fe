import unittest
from unittest.mock import Mock

from direct.task import Task

from touch_region.config import TOUCH_ID_OFFSET
from touch_region.gesture import Gesture
from touch_region.panda3d_source import Panda3DInputSource
from touch_region.phase import Phase
from touch_region.region import Region
from tests.helpers import make_tree


class FakeTouch:
    def __init__(self, touch_id, x, y):
        self._id, self._x, self._y = touch_id, x, y

    def getId(self):
        return self._id

    def getX(self):
        return self._x

    def getY(self):
        return self._y


class FakeMouseWatcher:
    """Stands in for a MouseWatcher node: one mouse plus optional touches."""

    def __init__(self):
        self.mouse = None  # (x, y) or None when outside the window
        self.button_down = False
        self.touches = []

    def hasMouse(self):
        return self.mouse is not None

    def getMouseX(self):
        return self.mouse[0]

    def getMouseY(self):
        return self.mouse[1]

    def isButtonDown(self, button):
        return self.button_down

    def hasTouch(self):
        return bool(self.touches)

    def getNumTouches(self):
        return len(self.touches)

    def getTouch(self, i):
        return self.touches[i]


class Recorder(Gesture):
    def __init__(self):
        super().__init__("recorder")
        self.calls = []

    def _record(self, phase, registry):
        self.calls.append((phase, sorted(t.identifier for t in registry.tracks_in_phase(phase))))

    def start(self, registry):
        self._record(Phase.START, registry)

    def move(self, registry):
        self._record(Phase.MOVE, registry)

    def end(self, registry):
        self._record(Phase.END, registry)


class TestPanda3DInputSource(unittest.TestCase):
    def setUp(self):
        self.root, self.panel, self.button, self.sidebar = make_tree()
        self.region = Region(self.root)
        self.gesture = Recorder()
        self.region.bind(self.button, self.gesture, Mock())
        self.watcher = FakeMouseWatcher()
        self.clock = iter(range(100))
        self.source = Panda3DInputSource(self.root, self.watcher, clock=lambda: next(self.clock))

    def test_mouse_press_drag_release(self):
        self.watcher.mouse = (20, 20)
        self.source.poll()  # hovering, nothing pressed
        self.watcher.button_down = True
        self.source.poll()
        self.source.poll()  # held still: no move
        self.watcher.mouse = (170, 20)
        self.source.poll()
        self.watcher.button_down = False
        self.source.poll()

        self.assertEqual(self.gesture.calls, [
            (Phase.START, [0]),
            (Phase.MOVE, [0]),
            (Phase.END, [0]),
        ])
        self.assertEqual(len(self.region.registry), 0)

    def test_press_outside_root_is_ignored(self):
        self.watcher.mouse = (500, 500)
        self.watcher.button_down = True
        self.source.poll()
        self.assertEqual(self.gesture.calls, [])

    def test_touches_are_offset_and_batched(self):
        self.watcher.touches = [FakeTouch(1, 20, 20), FakeTouch(2, 30, 30)]
        self.source.poll()
        self.watcher.touches = [FakeTouch(1, 25, 20), FakeTouch(2, 30, 30)]
        self.source.poll()
        self.watcher.touches = [FakeTouch(2, 30, 30)]
        self.source.poll()

        first, second = 1 + TOUCH_ID_OFFSET, 2 + TOUCH_ID_OFFSET
        self.assertEqual(self.gesture.calls, [
            (Phase.START, [first, second]),
            (Phase.MOVE, [first]),
            (Phase.END, [first]),
        ])
        self.assertEqual([t.identifier for t in self.region.registry], [second])

    def test_touch_keeps_its_original_target(self):
        self.watcher.touches = [FakeTouch(1, 20, 20)]
        self.source.poll()
        self.watcher.touches = [FakeTouch(1, 170, 20)]
        self.source.poll()
        self.watcher.touches = []
        self.source.poll()
        self.assertEqual([phase for phase, _ in self.gesture.calls],
                         [Phase.START, Phase.MOVE, Phase.END])

    def test_task_continues(self):
        self.assertEqual(self.source.task(Mock()), Task.cont)

    def test_attach_registers_task(self):
        task_mgr = Mock()
        self.source.attach(task_mgr)
        task_mgr.add.assert_called_once_with(self.source.task, "pollInputsTask")


if __name__ == '__main__':
    unittest.main()
