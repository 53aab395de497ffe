from vttformat.models import LoadStatus, Subtitle, TimeCode
from vttformat.parser import (
    CueBlockParser,
    LineKind,
    classify_line,
    parse_vtt_content,
    parse_vtt_lines,
)


def _numbered_lines(header, count, numbered=True):
    lines = [header, ""]
    for i in range(1, count + 1):
        if numbered:
            lines.append(str(i))
        lines.append(f"00:00:{i:02d}.000 --> 00:00:{i:02d}.500")
        lines.append(f"Line {i}")
        lines.append("")
    return lines


def test_classify_line():
    assert classify_line("WEBVTT") is LineKind.HEADER
    assert classify_line(" WEBVTT ") is LineKind.HEADER
    assert classify_line("WEBVTT FILE") is LineKind.TEXT
    assert classify_line("00:01.000 --> 00:02.000") is LineKind.TIMECODE
    assert classify_line("   ") is LineKind.BLANK
    assert classify_line("Hello") is LineKind.TEXT


def test_parse_basic_file():
    content = (
        "WEBVTT\n"
        "\n"
        "00:00:01.000 --> 00:00:03.000\n"
        "Hello\n"
        "world\n"
        "\n"
        "00:00:04.000 --> 00:00:05.500\n"
        "Second\n"
    )
    result = parse_vtt_content(content)
    assert result.accepted
    assert result.error_count == 0
    subtitle = result.subtitle
    assert subtitle.header == "WEBVTT"
    assert [cue.text for cue in subtitle.cues] == ["Hello\nworld", "Second"]
    assert subtitle.cues[1].start_time == TimeCode(0, 0, 4, 0)
    assert subtitle.cues[1].end_time == TimeCode(0, 0, 5, 500)
    assert [cue.number for cue in subtitle.cues] == [1, 2]


def test_missing_hours():
    result = parse_vtt_lines(["WEBVTT", "", "00:01.500 --> 00:02.000", "Hi"])
    cue = result.subtitle.cues[0]
    assert cue.start_time == TimeCode(0, 0, 1, 500)
    assert cue.end_time == TimeCode(0, 0, 2, 0)
    assert cue.text == "Hi"


def test_missing_start_hours_only():
    result = parse_vtt_lines(["00:01.500 --> 01:00:02.000", "Hi"])
    cue = result.subtitle.cues[0]
    assert cue.start_time == TimeCode(0, 0, 1, 500)
    assert cue.end_time == TimeCode(1, 0, 2, 0)
    assert result.subtitle.header == ""


def test_position_settings_become_marker():
    lines = [
        "WEBVTT",
        "",
        "00:00:01.000 --> 00:00:02.000 position:10% line:5%",
        "Top left",
        "second line",
    ]
    cue = parse_vtt_lines(lines).subtitle.cues[0]
    assert cue.text == "{\\an7}Top left\nsecond line"


def test_cue_numbers_are_skipped():
    lines = [
        "WEBVTT",
        "",
        "1",
        "00:00:01.000 --> 00:00:02.000",
        "First",
        "",
        "2",
        "00:00:03.000 --> 00:00:04.000",
        "Second",
    ]
    result = parse_vtt_lines(lines)
    assert [cue.text for cue in result.subtitle.cues] == ["First", "Second"]


def test_number_without_timecode_after_is_text():
    lines = ["00:00:01.000 --> 00:00:02.000", "Count:", "", "42", "Done"]
    cue = parse_vtt_lines(lines).subtitle.cues[0]
    assert cue.text == "Count:\n\n42\nDone"


def test_lines_before_first_cue_are_ignored():
    lines = ["WEBVTT", "Kind: captions", "NOTE hello", "", "00:00:01.000 --> 00:00:02.000", "Hi"]
    result = parse_vtt_lines(lines)
    assert len(result.subtitle.cues) == 1
    assert result.subtitle.cues[0].text == "Hi"


def test_bad_timecode_discards_cue_and_counts_error():
    lines = [
        "WEBVTT",
        "",
        "00:00:01.000 --> 00:00:02.000position:10%",
        "Lost",
        "",
        "00:00:03.000 --> 00:00:04.000",
        "Kept",
    ]
    result = parse_vtt_lines(lines)
    assert result.accepted
    assert result.error_count == 1
    assert [cue.text for cue in result.subtitle.cues] == ["Kept"]


def test_markup_and_entities_are_translated():
    lines = ["00:00:01.000 --> 00:00:02.000", "<c.yellow>Tom &amp; Jerry</c> &lt;3"]
    cue = parse_vtt_lines(lines).subtitle.cues[0]
    assert cue.text == '<font color="yellow">Tom & Jerry</font> <3'


def test_numbered_variant_is_deferred():
    result = parse_vtt_lines(_numbered_lines("WEBVTT FILE", 6))
    assert result.status is LoadStatus.DEFER_TO_VARIANT
    assert not result.accepted
    assert "WEBVTT FILE" in result.reason
    assert len(result.subtitle.cues) == 6
    assert all(cue.number == 0 for cue in result.subtitle.cues)


def test_plain_header_is_accepted():
    result = parse_vtt_lines(_numbered_lines("WEBVTT", 6, numbered=False))
    assert result.accepted
    assert len(result.subtitle.cues) == 6


def test_numbered_variant_needs_more_than_five_cues():
    result = parse_vtt_lines(_numbered_lines("WEBVTT FILE", 5))
    assert result.accepted


def test_start_after_end_is_kept():
    lines = ["00:00:05.000 --> 00:00:01.000", "Backwards", "", "00:00:00.000 --> 00:00:01.000", "Earlier"]
    cues = parse_vtt_lines(lines).subtitle.cues
    assert cues[0].start_time > cues[0].end_time
    assert [cue.text for cue in cues] == ["Backwards", "Earlier"]


def test_populates_given_subtitle():
    subtitle = Subtitle()
    result = parse_vtt_lines(["00:00:01.000 --> 00:00:02.000", "Hi"], subtitle)
    assert result.subtitle is subtitle
    assert len(subtitle.cues) == 1


def test_state_machine_directly():
    parser = CueBlockParser()
    assert not parser.in_cue
    parser.feed(0, "Ignored")
    parser.feed(1, "00:00:01.000 --> 00:00:02.000")
    assert parser.in_cue
    parser.feed(2, "  text  ")
    subtitle = parser.finish()
    assert subtitle.cues[0].text == "text"
    assert not parser.in_cue


def test_empty_input():
    result = parse_vtt_lines([])
    assert result.accepted
    assert result.subtitle.cues == []


def test_unterminated_references_stay_literal():
    lines = ["00:00:01.000 --> 00:00:02.000", "Fish &chips &notice &sect3 &para1 &amp; &#169; &#x41;"]
    cue = parse_vtt_lines(lines).subtitle.cues[0]
    assert cue.text == "Fish &chips &notice &sect3 &para1 & © A"


def test_webvtt_after_finished_cue_is_text():
    lines = [
        "00:00:01.000 --> 00:00:02.000",
        "A",
        "",
        "00:00:03.000 --> 00:00:04.000",
        "B",
        "WEBVTT",
    ]
    subtitle = parse_vtt_lines(lines).subtitle
    assert subtitle.header == ""
    assert subtitle.cues[-1].text == "B\nWEBVTT"


def test_cue_numbers_before_short_and_middle_timecodes():
    lines = [
        "WEBVTT",
        "",
        "00:01.000 --> 00:02.000",
        "First",
        "",
        "2",
        "00:03.000 --> 00:04.000",
        "Second",
        "",
        "3",
        "00:05.000 --> 00:00:06.000",
        "Third",
    ]
    cues = parse_vtt_lines(lines).subtitle.cues
    assert [cue.text for cue in cues] == ["First", "Second", "Third"]
    assert cues[2].end_time == TimeCode(0, 0, 6, 0)


def test_content_splits_only_on_line_breaks():
    content = "WEBVTT\r\n\r\n00:00:01.000 --> 00:00:02.000\r\nPage\x0cbreak here\rnext\n"
    cue = parse_vtt_content(content).subtitle.cues[0]
    assert cue.text == "Page\x0cbreak here\nnext"
