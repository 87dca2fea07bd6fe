"""
Reference gestures built on the hook contract.

Each takes an optional element; when given, only inputs that started inside
that element are considered. Without one a gesture sees every input of the
region, including inputs that started outside the element it is bound to,
as soon as any input keeps that binding selected. Pass the bound element to
scope it. Thresholds are class constants so subclasses or instances can
tune them.
"""

from touch_region.gesture import Gesture, gesture_key
from touch_region.phase import Phase
from touch_region.point2d import Point2D


class _ElementGesture(Gesture):
    def __init__(self, element=None, name=None):
        super().__init__(name)
        self.element = element

    def _relevant(self, tracks):
        if self.element is None:
            return list(tracks)
        return [t for t in tracks if t.was_initially_inside(self.element)]


class Tap(_ElementGesture):
    """An input that ends close to where it started, quickly."""
    MAX_DISTANCE = 10.0
    MAX_DURATION_SEC = 0.3

    def end(self, registry):
        for track in self._relevant(registry.tracks_in_phase(Phase.END)):
            if track.total_distance() > self.MAX_DISTANCE:
                continue
            if track.elapsed > self.MAX_DURATION_SEC:
                continue
            point = track.current.position
            return {"x": point.x, "y": point.y, "identifier": track.identifier}
        return None


class Swipe(_ElementGesture):
    """A single input that travels far enough before it ends."""
    MIN_DISTANCE = 30.0

    def end(self, registry):
        ended = self._relevant(registry.tracks_in_phase(Phase.END))
        if len(ended) != 1:
            return None
        track = ended[0]
        distance = track.total_distance()
        if distance <= self.MIN_DISTANCE:
            return None

        delta = track.current.position.minus(track.initial.position)
        if abs(delta.x) > abs(delta.y):
            direction = "right" if delta.x > 0 else "left"
        else:
            direction = "down" if delta.y > 0 else "up"
        return {"direction": direction, "distance": round(distance, 2),
                "identifier": track.identifier}


class Pinch(_ElementGesture):
    """
    Two or more inputs moving towards or away from their centroid. Reports
    the scale against the spread the inputs had when the pinch began.
    """
    MIN_SCALE_DIFF = 0.05

    def start(self, registry):
        self._begin(self._active(registry))
        return None

    def move(self, registry):
        tracks = self._active(registry)
        if len(tracks) < 2:
            return None

        progress = tracks[0].progress_for(gesture_key(self))
        ids = frozenset(t.identifier for t in tracks)
        if progress.get("ids") != ids:
            self._begin(tracks)
            return None

        centroid, spread = _spread(tracks)
        initial = progress["initial_distance"]
        if initial <= 1e-5:
            return None
        scale = spread / initial
        if abs(scale - 1.0) <= self.MIN_SCALE_DIFF:
            return None
        return {"scale": round(scale, 2), "distance": spread, "centroid": centroid}

    def end(self, registry):
        self._begin(self._active(registry))
        return None

    def cancel(self, registry):
        return self.end(registry)

    def _active(self, registry):
        return self._relevant(registry.active)

    def _begin(self, tracks):
        key = gesture_key(self)
        if len(tracks) < 2:
            for track in tracks:
                track.progress_for(key).clear()
            return
        _, spread = _spread(tracks)
        ids = frozenset(t.identifier for t in tracks)
        for track in tracks:
            progress = track.progress_for(key)
            progress["initial_distance"] = spread
            progress["ids"] = ids


def _spread(tracks):
    points = [t.current.position for t in tracks]
    centroid = Point2D.centroid(points)
    return centroid, centroid.average_distance_to(points)
