"""
Reading and writing WebVTT sources.

Thin adapters around the parser and writer: local files are read with the
configured encoding and http(s) URLs are fetched with requests.
"""

import logging
from pathlib import Path
from typing import List

import requests

from .models import LoadResult, ReadConfig, Subtitle
from .parser import parse_vtt_lines, split_lines
from .writer import format_vtt

logger = logging.getLogger(__name__)


class VTTReadError(Exception):
    """Raised when a WebVTT source cannot be read."""


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def fetch_vtt_text(config: ReadConfig) -> str:
    """
    Download WebVTT text from an HTTP URL.

    Raises:
        VTTReadError: If the request fails or returns an error status
    """
    try:
        response = requests.get(config.source, timeout=config.timeout, verify=config.verify_ssl)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"Failed to fetch VTT from {config.source}: {str(e)}")
        raise VTTReadError(f"Failed to fetch {config.source}: {str(e)}") from e

    # Servers often omit the charset for text/vtt
    response.encoding = config.encoding
    return response.text


def read_vtt_text(config: ReadConfig) -> str:
    """
    Read WebVTT text from a file path or an http(s) URL.

    Raises:
        VTTReadError: If the source cannot be read or decoded
    """
    if is_url(config.source):
        return fetch_vtt_text(config)
    try:
        return Path(config.source).read_text(encoding=config.encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read VTT file {config.source}: {str(e)}")
        raise VTTReadError(f"Failed to read {config.source}: {str(e)}") from e


def read_lines(config: ReadConfig) -> List[str]:
    """Read a WebVTT source and split it into lines."""
    lines = split_lines(read_vtt_text(config))
    logger.info(f"Read {len(lines)} lines from {config.source}")
    return lines


def load_subtitle(config: ReadConfig) -> LoadResult:
    """
    Read and parse a WebVTT source.

    Example:
        >>> result = load_subtitle(ReadConfig(source="movie.vtt"))
        >>> print(f"Loaded {len(result.subtitle.cues)} cues")
    """
    return parse_vtt_lines(read_lines(config))


def save_subtitle(subtitle: Subtitle, output_path: str, encoding: str = "utf-8") -> None:
    """Write a Subtitle to ``output_path`` as WebVTT."""
    content = format_vtt(subtitle)
    with open(output_path, "w", encoding=encoding) as f:
        f.write(content + "\n")
    logger.info(f"Saved {len(subtitle.cues)} cues to {output_path}")
