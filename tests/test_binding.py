import unittest
from unittest.mock import Mock

from touch_region.binding import Binding
from touch_region.element import Element
from touch_region.gesture import Gesture
from touch_region.phase import Phase
from tests.helpers import mock_gesture


class TestBinding(unittest.TestCase):
    def setUp(self):
        self.element = Element("div")
        self.gesture = mock_gesture()
        self.handler = Mock()
        self.binding = Binding(self.element, self.gesture, self.handler)
        self.registry = object()

    def test_exposes_its_parts(self):
        self.assertIs(self.binding.element, self.element)
        self.assertIs(self.binding.gesture, self.gesture)
        self.assertIs(self.binding.handler, self.handler)

    def test_is_immutable(self):
        with self.assertRaises(AttributeError):
            self.binding.element = Element("other")

    def test_calls_the_hook_for_each_phase(self):
        for hook in ("start", "move", "end", "cancel"):
            with self.subTest(hook=hook):
                self.binding.evaluate_hook(hook, self.registry)
                getattr(self.gesture, hook).assert_called_once_with(self.registry)

    def test_accepts_phase_members(self):
        self.binding.evaluate_hook(Phase.MOVE, self.registry)
        self.gesture.move.assert_called_once_with(self.registry)

    def test_none_result_does_not_call_handler(self):
        for hook in ("start", "move", "end", "cancel"):
            self.assertIsNone(self.binding.evaluate_hook(hook, self.registry))
        self.handler.assert_not_called()

    def test_result_is_passed_to_handler_once(self):
        data = {"x": 91}
        self.gesture.end.return_value = data
        self.assertIs(self.binding.evaluate_hook("end", self.registry), data)
        self.handler.assert_called_once_with(data)
        self.assertIs(self.handler.call_args[0][0], data)

    def test_falsy_results_still_reach_the_handler(self):
        for value in ({}, [], 0, "", False):
            with self.subTest(value=value):
                handler = Mock()
                binding = Binding(self.element, mock_gesture(move=value), handler)
                binding.evaluate_hook("move", self.registry)
                handler.assert_called_once_with(value)

    def test_missing_hooks_count_as_none(self):
        class OnlyEnds:
            def end(self, registry):
                return "done"

        handler = Mock()
        binding = Binding(self.element, OnlyEnds(), handler)
        self.assertIsNone(binding.evaluate_hook("start", self.registry))
        self.assertIsNone(binding.evaluate_hook("cancel", self.registry))
        handler.assert_not_called()
        binding.evaluate_hook("end", self.registry)
        handler.assert_called_once_with("done")

    def test_base_gesture_hooks_are_no_ops(self):
        binding = Binding(self.element, Gesture(), self.handler)
        for hook in ("start", "move", "end", "cancel"):
            self.assertIsNone(binding.evaluate_hook(hook, self.registry))
        self.handler.assert_not_called()

    def test_unknown_phase(self):
        with self.assertRaises(ValueError):
            self.binding.evaluate_hook("hover", self.registry)


class TestGesture(unittest.TestCase):
    def test_ids_are_unique(self):
        self.assertNotEqual(Gesture().id, Gesture().id)

    def test_id_carries_the_name(self):
        self.assertTrue(Gesture("tap").id.startswith("tap-"))


if __name__ == '__main__':
    unittest.main()
