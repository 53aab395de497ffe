"""
WebVTT cue block parser.

Segments raw lines into cues with a two-state machine (seeking / in cue).
Each line is first classified as header, timecode, blank or text; the
state machine then decides what the line means in context:

- a timecode line closes the open cue and opens a new one
- ``WEBVTT`` before the first finished cue sets the subtitle header
- a bare integer after a blank line, directly followed by a timecode
  line, is a cue number and is skipped
- any other line inside a cue is cue text

Start/end times are not validated against each other and cue order is
kept as found in the file.
"""

import html
import logging
import re
from enum import Enum
from typing import List, Optional, Sequence

from .markup import color_vtt_to_internal
from .models import Cue, LoadResult, LoadStatus, Subtitle
from .position import position_marker_from_settings
from .timecode import (
    TimeCodeFormatError,
    match_timecode_shape,
    normalize_timecode_line,
    parse_timecode,
    split_timecode_line,
)

logger = logging.getLogger(__name__)

HEADER = "WEBVTT"
NUMBERED_VARIANT_HEADER = "WEBVTT FILE"
DEFER_MIN_CUES = 5

_CUE_NUMBER_PATTERN = re.compile(r"^\s*[0-9]+\s*$")
_LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")
# Only terminated references; html.unescape alone also decodes "&notice"
_CHAR_REFERENCE_PATTERN = re.compile(r"&(?:#[0-9]+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);")


class LineKind(str, Enum):
    HEADER = "header"
    TIMECODE = "timecode"
    BLANK = "blank"
    TEXT = "text"


def classify_line(line: str) -> LineKind:
    """
    Classify a raw line without looking at parser state.

    Example:
        >>> classify_line("00:01.000 --> 00:02.000")
        <LineKind.TIMECODE: 'timecode'>
    """
    if match_timecode_shape(line):
        return LineKind.TIMECODE
    stripped = line.strip()
    if stripped == HEADER:
        return LineKind.HEADER
    if not stripped:
        return LineKind.BLANK
    return LineKind.TEXT


def is_cue_number(line: str) -> bool:
    return bool(_CUE_NUMBER_PATTERN.match(line))


def split_lines(content: str) -> List[str]:
    """
    Split text on CR, LF or CRLF only.

    Unlike ``str.splitlines`` this keeps form feeds, ``\\x85`` and
    ``\\u2028`` inside the cue line they belong to.
    """
    lines = _LINE_BREAK_PATTERN.split(content)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def decode_char_references(text: str) -> str:
    """
    Decode ``&name;``, ``&#NN;`` and ``&#xHH;`` character references.

    References without the closing semicolon are left as written, so
    ``&notice`` stays ``&notice``.

    Example:
        >>> decode_char_references("Tom &amp; Jerry &sect3")
        'Tom & Jerry &sect3'
    """
    return _CHAR_REFERENCE_PATTERN.sub(lambda m: html.unescape(m.group(0)), text)


class CueBlockParser:
    """
    Line-by-line WebVTT cue segmentation into a Subtitle.

    Call :meth:`feed` for every line (with the line after it), then
    :meth:`finish`. ``error_count`` counts timecode lines that could not be
    read; ``cue_numbers`` counts skipped cue number lines.
    """

    def __init__(self, subtitle: Optional[Subtitle] = None):
        self.subtitle = subtitle if subtitle is not None else Subtitle()
        self.error_count = 0
        self.cue_numbers = 0
        self._cue: Optional[Cue] = None
        self._cue_lines: List[str] = []
        self._position_info = ""
        self._had_empty_line = False

    @property
    def in_cue(self) -> bool:
        return self._cue is not None

    def feed(self, index: int, line: str, next_line: str = "") -> None:
        kind = classify_line(line)

        if kind is LineKind.TIMECODE:
            self._open_cue(index, normalize_timecode_line(line))
        elif kind is LineKind.HEADER and not self.subtitle.cues:
            logger.debug(f"WebVTT header found on line {index + 1}")
            self.subtitle.header = HEADER
        elif (self.in_cue and self._had_empty_line and is_cue_number(line)
              and classify_line(next_line) is LineKind.TIMECODE):
            logger.debug(f"Skipping cue number {line.strip()} on line {index + 1}")
            self.cue_numbers += 1
        elif self.in_cue:
            self._append_text(line)

    def finish(self) -> Subtitle:
        self._close_cue()
        return self.subtitle

    def _open_cue(self, index: int, line: str) -> None:
        self._close_cue()
        start, end = split_timecode_line(line)
        try:
            self._cue = Cue(start_time=parse_timecode(start), end_time=parse_timecode(end))
            self._position_info = position_marker_from_settings(end)
        except TimeCodeFormatError as e:
            logger.warning(f"Skipping cue with bad timecode on line {index + 1}: {e}")
            self.error_count += 1
            self._cue = None
            self._position_info = ""
        self._had_empty_line = False

    def _append_text(self, line: str) -> None:
        stripped = line.strip()
        if not stripped:
            self._had_empty_line = True
        self._cue_lines.append(self._position_info + stripped)
        self._position_info = ""

    def _close_cue(self) -> None:
        if self._cue is None:
            return
        self._cue.text = "\n".join(self._cue_lines).rstrip()
        self.subtitle.cues.append(self._cue)
        self._cue = None
        self._cue_lines = []


def _looks_like_numbered_variant(lines: Sequence[str], cue_count: int, cue_numbers: int) -> bool:
    return (cue_count > DEFER_MIN_CUES
            and cue_numbers >= cue_count - 1
            and lines[0] == NUMBERED_VARIANT_HEADER)


def parse_vtt_lines(lines: Sequence[str], subtitle: Optional[Subtitle] = None) -> LoadResult:
    """
    Parse WebVTT lines into a Subtitle.

    On acceptance, WebVTT color classes are turned into generic font tags,
    HTML character references are decoded and cues are numbered 1..N.

    If the input starts with ``WEBVTT FILE`` and nearly every one of more
    than five cues carries a number line, the partial result is returned
    with ``LoadStatus.DEFER_TO_VARIANT`` so a numbered-cue handler can take
    it instead.

    Args:
        lines: Raw lines, without line terminators
        subtitle: Optional Subtitle to populate (a new one by default)

    Returns:
        LoadResult with the subtitle, status and error count

    Example:
        >>> result = parse_vtt_lines(["WEBVTT", "", "00:01.500 --> 00:02.000", "Hi"])
        >>> result.subtitle.cues[0].text
        'Hi'
    """
    parser = CueBlockParser(subtitle)
    for index, line in enumerate(lines):
        next_line = lines[index + 1] if index + 1 < len(lines) else ""
        parser.feed(index, line, next_line)
    subtitle = parser.finish()

    if lines and _looks_like_numbered_variant(lines, len(subtitle.cues), parser.cue_numbers):
        reason = (f"'{NUMBERED_VARIANT_HEADER}' header with {parser.cue_numbers} numbered cues "
                  f"out of {len(subtitle.cues)}")
        logger.info(f"Deferring to numbered WebVTT variant: {reason}")
        return LoadResult(
            subtitle=subtitle,
            status=LoadStatus.DEFER_TO_VARIANT,
            error_count=parser.error_count,
            reason=reason,
        )

    for cue in subtitle.cues:
        cue.text = decode_char_references(color_vtt_to_internal(cue.text))
    subtitle.renumber()

    logger.info(f"Parsed {len(subtitle.cues)} cues ({parser.error_count} errors)")
    return LoadResult(subtitle=subtitle, error_count=parser.error_count)


def parse_vtt_content(vtt_content: str, subtitle: Optional[Subtitle] = None) -> LoadResult:
    """Parse WebVTT content held in a single string."""
    return parse_vtt_lines(split_lines(vtt_content), subtitle)
