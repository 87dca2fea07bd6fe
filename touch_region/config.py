"""Tunable constants shared by the region and the Panda3D input source."""

MOUSE_EVENTS = ("mousedown", "mousemove", "mouseup")
TOUCH_EVENTS = ("touchstart", "touchmove", "touchend", "touchcancel")
POINTER_EVENTS = ("pointerdown", "pointermove", "pointerup", "pointercancel")

EVENT_FAMILIES = {
    "mouse": MOUSE_EVENTS,
    "touch": TOUCH_EVENTS,
    "pointer": POINTER_EVENTS,
}

# Mouse button one is reported with identifier 0, the way a simulated touch
# used to be.
MOUSE_BUTTON_ID = 0

# Native touch ids are shifted by this amount so they never share an
# identifier with a mouse button inside one registry.
TOUCH_ID_OFFSET = 1_000_000
