"""
Markup translation example.

Shows how cue settings and color classes map to the internal form and back.
"""

from vttformat import parse_vtt_content, format_vtt, strip_native_formatting

CONTENT = """WEBVTT

00:01.000 --> 00:03.000 position:10% line:5%
<v Anna><c.yellow>Look up here!</c></v>
"""


def main():
    subtitle = parse_vtt_content(CONTENT).subtitle
    cue = subtitle.cues[0]

    print(f"Internal text: {cue.text}")
    print(f"Without WebVTT-only tags: {strip_native_formatting(cue.text)}")
    print("\nWritten back:")
    print(format_vtt(subtitle))

if __name__ == "__main__":
    main()
