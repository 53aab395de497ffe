from vttformat.format import WebVTTFormat


def _lines(header, count, numbered):
    lines = [header, ""]
    for i in range(1, count + 1):
        if numbered:
            lines.append(str(i))
        lines += [f"00:00:{i:02d}.000 --> 00:00:{i:02d}.900", f"<v John>Line {i}</v>", ""]
    return lines


def test_is_mine():
    vtt = WebVTTFormat()
    assert vtt.is_mine(_lines("WEBVTT", 6, numbered=False))
    assert not vtt.is_mine(_lines("WEBVTT FILE", 6, numbered=True))
    assert not vtt.is_mine(["Just some text", "without cues"])


def test_load_tracks_error_count():
    vtt = WebVTTFormat()
    vtt.load(["00:00:01.000 --> 00:00:02.000x", "Bad"])
    assert vtt.error_count == 1
    vtt.load(["00:00:01.000 --> 00:00:02.000", "Good"])
    assert vtt.error_count == 0


def test_voices_then_native_formatting():
    vtt = WebVTTFormat()
    subtitle = vtt.load(_lines("WEBVTT", 2, numbered=False)).subtitle
    assert vtt.get_voices(subtitle) == ["John"]
    vtt.remove_native_formatting(subtitle)
    assert [cue.text for cue in subtitle.cues] == ["Line 1", "Line 2"]


def test_to_text():
    vtt = WebVTTFormat()
    subtitle = vtt.load(["WEBVTT", "", "00:01.000 --> 00:02.000 line:50%", "Mid"]).subtitle
    assert vtt.to_text(subtitle) == "WEBVTT\n\n00:00:01.000 --> 00:00:02.000 line:50%\nMid"
    assert vtt.name == "WebVTT"
    assert vtt.extension == ".vtt"
