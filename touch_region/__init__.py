"""Multi-pointer input tracking and gesture dispatch."""

from touch_region.binding import Binding
from touch_region.element import Element
from touch_region.errors import ConfigurationError, InvalidEventError, TouchRegionError
from touch_region.events import Contact, RawEvent
from touch_region.gesture import Gesture
from touch_region.input_track import InputTrack
from touch_region.phase import PHASE, Phase
from touch_region.point2d import Point2D
from touch_region.pointer_data import PointSnapshot
from touch_region.region import Region
from touch_region.registry import ActiveInputRegistry

__version__ = "1.1.0"

__all__ = [
    "ActiveInputRegistry",
    "Binding",
    "ConfigurationError",
    "Contact",
    "Element",
    "Gesture",
    "InputTrack",
    "InvalidEventError",
    "PHASE",
    "Phase",
    "Point2D",
    "PointSnapshot",
    "RawEvent",
    "Region",
    "TouchRegionError",
]
