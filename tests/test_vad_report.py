import pytest

from speechkit.vad_report import format_segments


def test_offline_format_two_segments():
    text = format_segments([[0, 100], [200, 300]], "wav_default_id")
    assert text == "wav_default_id: [[0,100],[200,300]]"


def test_offline_empty_result_still_rendered():
    assert format_segments([], "utt") == "utt: []"


def test_offline_keeps_empty_segment():
    assert format_segments([[5, 9], []], "utt") == "utt: [[5,9],[]]"


def test_streaming_empty_result_gives_none():
    assert format_segments([], "utt", skip_empty=True) is None


def test_streaming_keeps_open_ends():
    assert format_segments([[70, -1]], "utt", skip_empty=True) == "utt: [[70,-1]]"


def test_streaming_skips_empty_segment_but_keeps_comma():
    assert format_segments([[1, 2], []], "utt", skip_empty=True) == "utt: [[1,2],]"


def test_streaming_skips_leading_empty_segment():
    assert format_segments([[], [3, 4]], "utt", skip_empty=True) == "utt: [[3,4]]"


@pytest.mark.parametrize("skip_empty", [False, True])
def test_nonempty_segments_render_same_in_both_modes(skip_empty):
    segments = [[10, 20], [30, 40], [50, 60]]
    assert format_segments(segments, "a", skip_empty=skip_empty) == format_segments(
        segments, "a"
    )


def test_prefix_and_brackets_invariant():
    text = format_segments([[1, 2], [3, 4]], "id7")
    assert text.startswith("id7: [")
    assert text.endswith("]")
    assert text.count("[") == text.count("]") == 3


def test_accepts_tuples():
    assert format_segments(((0, 5),), "x") == "x: [[0,5]]"