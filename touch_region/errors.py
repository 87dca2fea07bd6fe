class TouchRegionError(Exception):
    """Base class for errors raised by touch_region."""


class InvalidEventError(TouchRegionError, ValueError):
    """A raw event is missing required fields or does not carry the
    identifier it is being read for."""


class ConfigurationError(TouchRegionError, TypeError):
    """A Region was constructed with unusable arguments."""
