"""
Translation between WebVTT cue settings and internal alignment markers.

The internal marker is a ``{\\anN}`` token at the start of cue text, with N
laid out like a numeric keypad:

    7 8 9    top
    4 5 6    middle
    1 2 3    bottom

WebVTT placement comes from the ``position:`` (horizontal) and ``line:``
(vertical) cue settings that trail a timecode line.
"""

from typing import Optional

ALIGNMENT_MARKERS = tuple(f"{{\\an{n}}}" for n in range(1, 10))

LEFT = "left"
RIGHT = "right"
TOP = "top"
MIDDLE = "middle"

# (horizontal, vertical) -> keypad number; None is center / bottom
_KEYPAD = {
    (LEFT, None): 1, (None, None): 2, (RIGHT, None): 3,
    (LEFT, MIDDLE): 4, (None, MIDDLE): 5, (RIGHT, MIDDLE): 6,
    (LEFT, TOP): 7, (None, TOP): 8, (RIGHT, TOP): 9,
}

_POSITION_SETTINGS = {LEFT: "position:20%", RIGHT: "position:80%"}
_LINE_SETTINGS = {TOP: "line:20%", MIDDLE: "line:50%"}


def get_setting(settings: str, name: str) -> Optional[str]:
    """
    Read the value of a cue setting such as ``position:``.

    The value ends at the first space; an alignment suffix after a comma
    (``line:10%,start``) is dropped.

    Example:
        >>> get_setting("00:00:01.000 --> 00:00:02.000 position:10%,line-left", "position:")
        '10%'
    """
    index = settings.find(name)
    if index < 0:
        return None
    value = settings[index + len(name):].strip()
    value = value.split(" ", 1)[0]
    return value.split(",", 1)[0]


def _to_number(value: str) -> Optional[float]:
    try:
        return float(value)
    except ValueError:
        return None


def horizontal_alignment(position: Optional[str]) -> Optional[str]:
    """Horizontal axis from a ``position:`` percentage (<25 left, >75 right)."""
    if not position or not position.endswith("%"):
        return None
    number = _to_number(position[:-1])
    if number is None:
        return None
    if number < 25:
        return LEFT
    if number > 75:
        return RIGHT
    return None


def vertical_alignment(line: Optional[str]) -> Optional[str]:
    """
    Vertical axis from a ``line:`` value.

    Percentages: <25 top, <75 middle. Line numbers: below 7 top (negative
    numbers included), 7..10 middle.
    """
    if not line:
        return None
    if line.endswith("%"):
        number = _to_number(line[:-1])
        if number is None:
            return None
        if number < 25:
            return TOP
        if number < 75:
            return MIDDLE
        return None

    number = _to_number(line)
    if number is None:
        return None
    if number < 7:
        return TOP
    if number < 11:
        return MIDDLE
    return None


def position_marker_from_settings(settings: str) -> str:
    """
    Build the internal alignment marker for a timecode line's cue settings.

    Returns an empty string when neither axis moves the cue away from the
    bottom-center default.

    Example:
        >>> position_marker_from_settings("position:10% line:5%")
        '{\\\\an7}'
    """
    horizontal = horizontal_alignment(get_setting(settings, "position:"))
    vertical = vertical_alignment(get_setting(settings, "line:"))
    if horizontal is None and vertical is None:
        return ""
    return f"{{\\an{_KEYPAD[(horizontal, vertical)]}}}"


def get_alignment_marker(text: str) -> Optional[str]:
    """Return the alignment marker ``text`` starts with, if any."""
    if not text.startswith("{\\an"):
        return None
    for marker in ALIGNMENT_MARKERS:
        if text.startswith(marker):
            return marker
    return None


def position_settings_from_text(text: str) -> str:
    """
    Build the WebVTT cue settings suffix for cue text.

    The result has a single leading space, e.g. ``" position:20% line:20%"``
    for ``{\\an7}``, or is empty when the text has no marker or is
    bottom-center.
    """
    marker = get_alignment_marker(text)
    if marker is None:
        return ""
    keypad = int(marker[4])
    horizontal, vertical = next(axes for axes, n in _KEYPAD.items() if n == keypad)

    parts = []
    if horizontal in _POSITION_SETTINGS:
        parts.append(_POSITION_SETTINGS[horizontal])
    if vertical in _LINE_SETTINGS:
        parts.append(_LINE_SETTINGS[vertical])
    if not parts:
        return ""
    return " " + " ".join(parts)
