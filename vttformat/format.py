"""
WebVTT subtitle format handler.

Bundles loading, saving and WebVTT-specific queries behind one object so
callers that juggle several subtitle formats can treat WebVTT uniformly.
"""

import logging
from typing import List, Optional, Sequence

from . import markup
from .models import LoadResult, Subtitle
from .parser import parse_vtt_lines
from .writer import format_vtt

logger = logging.getLogger(__name__)


class WebVTTFormat:
    """
    Handler for the WebVTT format.

    Example:
        >>> vtt = WebVTTFormat()
        >>> result = vtt.load(lines)
        >>> if result.accepted:
        ...     text = vtt.to_text(result.subtitle)
    """

    name = "WebVTT"
    extension = ".vtt"

    def __init__(self):
        """Initialize the handler; ``error_count`` tracks the last load."""
        self.error_count = 0

    def load(self, lines: Sequence[str], subtitle: Optional[Subtitle] = None) -> LoadResult:
        result = parse_vtt_lines(lines, subtitle)
        self.error_count = result.error_count
        return result

    def is_mine(self, lines: Sequence[str]) -> bool:
        """
        Whether these lines should be handled as WebVTT.

        True for an accepted parse with more cues than timecode errors;
        input deferred to the numbered variant is not ours.
        """
        result = self.load(lines)
        if not result.accepted:
            logger.debug(f"Not WebVTT: {result.reason}")
            return False
        return len(result.subtitle.cues) > result.error_count

    def to_text(self, subtitle: Subtitle) -> str:
        return format_vtt(subtitle)

    def remove_native_formatting(self, subtitle: Subtitle) -> None:
        """Strip voice, ruby, span and class tags from every cue."""
        markup.remove_native_formatting(subtitle)

    def get_voices(self, subtitle: Subtitle) -> List[str]:
        return markup.get_voices(subtitle)
