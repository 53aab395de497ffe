"""
WebVTT serialization.

Renders a Subtitle back to WebVTT text: alignment markers become cue
settings, generic font colors become ``<c.NAME>`` classes and blank lines
inside a cue are collapsed so they do not end the cue early.
"""

import logging

from .markup import color_internal_to_vtt, remove_alignment_tags
from .models import Cue, Subtitle
from .parser import HEADER
from .position import position_settings_from_text
from .timecode import format_timecode

logger = logging.getLogger(__name__)


def format_cue_text(cue: Cue) -> str:
    """
    Cue text as written to WebVTT.

    Example:
        >>> format_cue_text(Cue(TimeCode(), TimeCode(), '{\\\\an8}<font color="red">Hi</font>'))
        '<c.red>Hi</c>'
    """
    text = remove_alignment_tags(cue.text)
    while "\n\n" in text:
        text = text.replace("\n\n", "\n")
    return color_internal_to_vtt(text)


def format_cue(cue: Cue, header: str = HEADER) -> str:
    """
    Render one cue block without the trailing blank line.

    The ``extra`` annotation is written only for a plain ``WEBVTT`` header.
    """
    start = format_timecode(cue.start_time)
    end = format_timecode(cue.end_time)
    lines = [f"{start} --> {end}{position_settings_from_text(cue.text)}", format_cue_text(cue)]
    if cue.extra and header == HEADER:
        lines.append(cue.extra)
    return "\n".join(lines)


def format_vtt(subtitle: Subtitle) -> str:
    """
    Render a Subtitle as WebVTT text.

    Example:
        >>> subtitle = Subtitle(cues=[Cue(TimeCode(0, 0, 1, 0), TimeCode(0, 0, 2, 0), "Hello")])
        >>> print(format_vtt(subtitle))
        WEBVTT
        <BLANKLINE>
        00:00:01.000 --> 00:00:02.000
        Hello
    """
    blocks = [HEADER]
    for cue in subtitle.cues:
        blocks.append(format_cue(cue, subtitle.header))
    logger.debug(f"Formatted {len(subtitle.cues)} cues as WebVTT")
    return "\n\n".join(blocks).strip()
