"""
Basic vttformat usage example.

Loads a WebVTT file or URL, lists cues and voices, and writes it back out.
"""

import logging
import sys

from vttformat import ReadConfig, WebVTTFormat, read_lines, save_subtitle


def main():
    logging.basicConfig(level=logging.INFO)
    source = sys.argv[1] if len(sys.argv) > 1 else "subtitles.vtt"

    vtt = WebVTTFormat()
    result = vtt.load(read_lines(ReadConfig(source=source)))

    if not result.accepted:
        print(f"Input looks like another WebVTT variant: {result.reason}")
        return

    print(f"Loaded {len(result.subtitle.cues)} cues ({result.error_count} errors)")
    for cue in result.subtitle.cues[:5]:
        print(f"{cue.number}: {cue.start_time} -> {cue.end_time}: {cue.text!r}")

    print(f"Voices: {vtt.get_voices(result.subtitle)}")

    save_subtitle(result.subtitle, "roundtrip.vtt")
    print("Saved to: roundtrip.vtt")

if __name__ == "__main__":
    main()
