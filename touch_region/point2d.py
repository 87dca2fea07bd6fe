"""Simple 2D point arithmetic used by snapshots, tracks and gestures."""

import math


class Point2D:
    """An immutable (x, y) coordinate."""

    __slots__ = ("_x", "_y")

    def __init__(self, x=0, y=0):
        self._x = float(x)
        self._y = float(y)

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def __repr__(self):
        return f"Point2D({self._x:.2f}, {self._y:.2f})"

    def __eq__(self, other):
        if not isinstance(other, Point2D):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self):
        return hash((self._x, self._y))

    def __iter__(self):
        yield self._x
        yield self._y

    def plus(self, point):
        return Point2D(self._x + point.x, self._y + point.y)

    def minus(self, point):
        return Point2D(self._x - point.x, self._y - point.y)

    def magnitude(self):
        return (self._x**2 + self._y**2)**0.5

    def normalized(self):
        mag = self.magnitude()
        if mag == 0:
            return Point2D(0, 0)
        return Point2D(self._x / mag, self._y / mag)

    def distance_to(self, point):
        """Length of the straight line between this point and `point`."""
        return math.hypot(point.x - self._x, point.y - self._y)

    def angle_to(self, point):
        """Angle in radians of the line from this point to `point`."""
        return math.atan2(point.y - self._y, point.x - self._x)

    def total_distance_to(self, points):
        if points is None:
            raise TypeError("total_distance_to() requires a sequence of points")
        return sum(self.distance_to(p) for p in points)

    def average_distance_to(self, points):
        if points is None:
            raise TypeError("average_distance_to() requires a sequence of points")
        points = list(points)
        if not points:
            return 0.0
        return self.total_distance_to(points) / len(points)

    @staticmethod
    def sum(points=()):
        x = y = 0.0
        for p in points:
            x += p.x
            y += p.y
        return Point2D(x, y)

    @staticmethod
    def centroid(points=()):
        """Mean of `points`, or None when there are none."""
        points = list(points)
        if not points:
            return None
        total = Point2D.sum(points)
        return Point2D(total.x / len(points), total.y / len(points))
