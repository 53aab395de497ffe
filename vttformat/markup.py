"""
Inline markup translation between WebVTT and the generic internal form.

WebVTT colors cue text with class spans (``<c.yellow>...</c>``); the
internal form uses ``<font color="yellow">...</font>``. Tags are assumed
not to nest. Every function here is a single forward pass over the text
and never raises: anything it does not recognise is left in place.
"""

import re
from typing import Iterable, List

from .models import Subtitle

FONT_CLOSE = "</font>"
CLASS_CLOSE = "</c>"

_VTT_COLOR_PATTERN = re.compile(r"<c[. ]([a-z]+)>|</c>")
_INTERNAL_COLOR_PATTERN = re.compile(r"<font color=(?:\"([a-z]*)\"|([a-z]*))>|</font>")
_CLASS_TAG_PATTERN = re.compile(r"</?c(?:[. ][\w. ]*)?>")
_OVERRIDE_BLOCK_PATTERN = re.compile(r"\{\\[^}]*\}")

NATIVE_TAGS = ("v", "rt", "ruby", "span")


def color_vtt_to_internal(text: str) -> str:
    """
    Rewrite WebVTT color classes into generic font tags.

    Example:
        >>> color_vtt_to_internal("<c.yellow>text</c>")
        '<font color="yellow">text</font>'
    """
    def replace(match):
        if match.group(1) is None:
            return FONT_CLOSE
        return f'<font color="{match.group(1)}">'

    return _VTT_COLOR_PATTERN.sub(replace, text)


def color_internal_to_vtt(text: str) -> str:
    """
    Rewrite generic font color tags into WebVTT color classes.

    Both ``<font color="red">`` and ``<font color=red>`` are recognised.

    Example:
        >>> color_internal_to_vtt('<font color="yellow">text</font>')
        '<c.yellow>text</c>'
    """
    def replace(match):
        if match.group(0) == FONT_CLOSE:
            return CLASS_CLOSE
        name = match.group(1) if match.group(1) is not None else match.group(2)
        return f"<c.{name}>"

    return _INTERNAL_COLOR_PATTERN.sub(replace, text)


def _tag_pattern(tags: Iterable[str]) -> "re.Pattern":
    names = "|".join(re.escape(tag) for tag in tags)
    return re.compile(rf"<(/?)({names})(?:[ .][^>]*)?>")


_NATIVE_TAG_PATTERN = _tag_pattern(NATIVE_TAGS)


def _remove_paired_tags(pattern: "re.Pattern", text: str) -> str:
    # Each opening tag consumes the first closing tag of the same name after it
    open_counts = {}

    def replace(match):
        closing, tag = match.group(1), match.group(2)
        if not closing:
            open_counts[tag] = open_counts.get(tag, 0) + 1
            return ""
        if open_counts.get(tag):
            open_counts[tag] -= 1
            return ""
        return match.group(0)

    return pattern.sub(replace, text)


def remove_tag(tag: str, text: str) -> str:
    """
    Remove ``<tag ...>`` openings and their matching ``</tag>``, keeping
    the inner text. Unmatched closing tags are left alone.

    Example:
        >>> remove_tag("v", "<v John>Hello</v>")
        'Hello'
    """
    return _remove_paired_tags(_tag_pattern([tag]), text)


def strip_native_formatting(text: str) -> str:
    """
    Remove WebVTT-only markup from cue text.

    Voice, ruby and span tags are unwrapped and any remaining ``<c...>`` or
    ``</c>`` tag is dropped; surrounding whitespace is trimmed.
    """
    if "<" not in text:
        return text
    text = _remove_paired_tags(_NATIVE_TAG_PATTERN, text)
    return _CLASS_TAG_PATTERN.sub("", text).strip()


def remove_native_formatting(subtitle: Subtitle) -> None:
    """Apply :func:`strip_native_formatting` to every cue in place."""
    for cue in subtitle.cues:
        cue.text = strip_native_formatting(cue.text)


def remove_alignment_tags(text: str) -> str:
    """Drop ``{\\...}`` override blocks such as the alignment marker."""
    return _OVERRIDE_BLOCK_PATTERN.sub("", text)


def get_voices(subtitle: Subtitle) -> List[str]:
    """
    Collect distinct voice names from ``<v NAME>`` tags in first-seen order.

    The name is everything between ``<v `` and the next ``>``, trimmed, so
    a cue ``<v John>Hi</v>`` yields ``['John']``.
    """
    voices = []
    for cue in subtitle.cues:
        text = cue.text
        start = text.find("<v ")
        while start >= 0:
            end = text.find(">", start)
            if end < 0:
                break
            voice = text[start + 2:end].strip()
            if voice not in voices:
                voices.append(voice)
            start = text.find("<v ", end)
    return voices
