"""
vttformat - Tolerant WebVTT reader and writer

Translates between WebVTT cue text and an in-memory subtitle model shared
with other subtitle format handlers.

Features:
- Parse full and hour-less timecodes (``mm:ss.mmm``)
- Skip cue number lines and detect the numbered ``WEBVTT FILE`` variant
- Map ``position:``/``line:`` cue settings to ``{\\anN}`` alignment markers
- Map ``<c.color>`` classes to ``<font color="...">`` and back
- Strip voice, ruby and span markup and list voices

Example usage:
    >>> from vttformat import parse_vtt_content, format_vtt
    >>>
    >>> result = parse_vtt_content(
    ...     "WEBVTT\\n\\n00:01.500 --> 00:02.000 line:10%\\n<c.yellow>Hello</c>"
    ... )
    >>> result.subtitle.cues[0].text
    '{\\\\an8}<font color="yellow">Hello</font>'
    >>> print(format_vtt(result.subtitle))
    WEBVTT
    <BLANKLINE>
    00:00:01.500 --> 00:00:02.000 line:20%
    <c.yellow>Hello</c>
"""

import logging

__version__ = "0.1.0"
__author__ = "vttformat Contributors"
__license__ = "MIT"

# Add NullHandler to prevent "No handler found" warnings
# Users should configure logging in their application if they want to see logs
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Data models
from .models import TimeCode, Cue, Subtitle, LoadResult, LoadStatus, ReadConfig

# Timecodes
from .timecode import (
    TimeCodeFormatError,
    parse_timecode,
    format_timecode,
    normalize_timecode_line,
    split_timecode_line,
    match_timecode_shape,
)

# Cue positioning
from .position import (
    ALIGNMENT_MARKERS,
    get_setting,
    get_alignment_marker,
    position_marker_from_settings,
    position_settings_from_text,
)

# Inline markup
from .markup import (
    color_vtt_to_internal,
    color_internal_to_vtt,
    remove_tag,
    strip_native_formatting,
    remove_native_formatting,
    remove_alignment_tags,
    get_voices,
)

# Parsing and writing
from .parser import (
    LineKind,
    classify_line,
    split_lines,
    decode_char_references,
    CueBlockParser,
    parse_vtt_lines,
    parse_vtt_content,
)
from .writer import format_cue_text, format_cue, format_vtt
from .reader import VTTReadError, read_lines, load_subtitle, save_subtitle
from .format import WebVTTFormat

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",

    # Models
    "TimeCode",
    "Cue",
    "Subtitle",
    "LoadResult",
    "LoadStatus",
    "ReadConfig",

    # Timecodes
    "TimeCodeFormatError",
    "parse_timecode",
    "format_timecode",
    "normalize_timecode_line",
    "split_timecode_line",
    "match_timecode_shape",

    # Cue positioning
    "ALIGNMENT_MARKERS",
    "get_setting",
    "get_alignment_marker",
    "position_marker_from_settings",
    "position_settings_from_text",

    # Inline markup
    "color_vtt_to_internal",
    "color_internal_to_vtt",
    "remove_tag",
    "strip_native_formatting",
    "remove_native_formatting",
    "remove_alignment_tags",
    "get_voices",

    # Parsing and writing
    "LineKind",
    "classify_line",
    "split_lines",
    "decode_char_references",
    "CueBlockParser",
    "parse_vtt_lines",
    "parse_vtt_content",
    "format_cue_text",
    "format_cue",
    "format_vtt",

    # Sources
    "VTTReadError",
    "read_lines",
    "load_subtitle",
    "save_subtitle",

    # Format handler
    "WebVTTFormat",
]
