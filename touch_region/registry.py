"""The set of inputs currently alive within one region."""

import logging
from typing import Hashable

from touch_region.errors import InvalidEventError
from touch_region.events import RawEvent, event_identifiers
from touch_region.input_track import InputTrack
from touch_region.phase import Phase
from touch_region.point2d import Point2D
from touch_region.pointer_data import PointSnapshot

logger = logging.getLogger(__name__)


class ActiveInputRegistry:
    """
    Holds every InputTrack that has started and not yet been purged, keyed
    by identifier in the order the inputs started. Gesture hooks receive this
    object and read the inputs they care about from it.
    """

    def __init__(self):
        self._tracks = {}  # {identifier: InputTrack}
        self.event = None
        self.inputs = []
        self.active = []
        self.active_points = []
        self.centroid = None
        self.radius = 0.0

    def __len__(self):
        return len(self._tracks)

    def __iter__(self):
        return iter(list(self._tracks.values()))

    def __contains__(self, identifier):
        return identifier in self._tracks

    def get(self, identifier: Hashable, default=None) -> InputTrack | None:
        return self._tracks.get(identifier, default)

    def reconcile(self, event: RawEvent):
        """
        Create or update the track of every identifier `event` carries.

        Start-phase identifiers get a fresh track; known identifiers in any
        other phase are updated; unknown identifiers outside a start are
        ignored (a mouse moving with no button held), as are identifiers whose
        track already ended but has not been purged yet. Every snapshot is built
        before anything is stored, so a bad identifier leaves the registry as
        it was.
        """
        if event is None:
            raise InvalidEventError("reconcile() requires a raw event")

        created, updated = [], []
        try:
            for identifier in event_identifiers(event):
                snapshot = PointSnapshot.from_event(event, identifier)
                if snapshot.phase is Phase.START:
                    created.append(InputTrack(event, identifier, snapshot))
                elif identifier in self._tracks:
                    track = self._tracks[identifier]
                    if track.phase.is_terminal:
                        logger.debug("Ignoring %s for ended input %r", event.type, identifier)
                    else:
                        updated.append((track, snapshot))
                else:
                    logger.debug("Ignoring %s for unknown input %r", event.type, identifier)
        except InvalidEventError as exc:
            logger.debug("Rejected %r: %s", getattr(event, "type", None), exc)
            raise

        for track in created:
            if track.identifier in self._tracks:
                logger.debug("Replacing stale input %r", track.identifier)
                del self._tracks[track.identifier]
            self._tracks[track.identifier] = track
            logger.debug("Input %r started", track.identifier)
        for track, snapshot in updated:
            track.update(event, snapshot)

        self.event = event
        self._refresh()

    def purge_ended(self) -> list[InputTrack]:
        """Drop every track whose current phase is end or cancel."""
        ended = [t for t in self._tracks.values() if t.phase.is_terminal]
        for track in ended:
            del self._tracks[track.identifier]
            logger.debug("Input %r %s", track.identifier, track.phase.value)
        if ended:
            self._refresh()
        return ended

    def tracks_started_inside(self, element) -> bool:
        return any(t.was_initially_inside(element) for t in self._tracks.values())

    def tracks_in_phase(self, phase: Phase | str) -> list[InputTrack]:
        phase = Phase(phase)
        return [t for t in self._tracks.values() if t.phase is phase]

    def tracks_not_in_phase(self, phase: Phase | str) -> list[InputTrack]:
        phase = Phase(phase)
        return [t for t in self._tracks.values() if t.phase is not phase]

    def _refresh(self):
        self.inputs = list(self._tracks.values())
        self.active = [t for t in self.inputs if not t.phase.is_terminal]
        self.active_points = [t.current.position for t in self.active]
        self.centroid = Point2D.centroid(self.active_points)
        if self.centroid is None:
            self.radius = 0.0
        else:
            self.radius = max(self.centroid.distance_to(p) for p in self.active_points)
