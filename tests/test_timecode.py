import pytest

from daylog.format.timecode import (
    frames_to_timecode,
    is_valid_duration,
    is_valid_timecode,
    ranges_overlap,
    seconds_to_large_timecode,
    seconds_to_timecode,
    timecode_to_frames,
    timecode_to_seconds,
)


@pytest.mark.parametrize(
    "value, fps, expected",
    [
        ("01:02:03:04", None, True),
        ("01:02:03:04", 24, True),
        ("01:02:03:24", 24, False),
        ("01:60:03:04", None, False),
        ("01:02:03", None, False),
        ("aa:bb:cc:dd", None, False),
    ],
)
def test_is_valid_timecode(value, fps, expected):
    assert is_valid_timecode(value, fps) is expected


def test_is_valid_duration_accepts_large_form():
    assert is_valid_duration("0123:45:59")
    assert is_valid_duration("00:00:10:00")
    assert not is_valid_duration("0123:61:00")


def test_timecode_to_frames_and_back():
    assert timecode_to_frames("00:00:10:12", 24) == 252
    assert frames_to_timecode(252, 24) == "00:00:10:12"
    assert frames_to_timecode(90_000, 25) == "01:00:00:00"


def test_timecode_to_seconds_ignores_frames():
    assert timecode_to_seconds("01:00:00:23") == 3600
    assert timecode_to_seconds("0100:00:01") == 360_001


def test_seconds_encodings():
    assert seconds_to_timecode(3661) == "01:01:01:00"
    assert seconds_to_large_timecode(360_061) == "0100:01:01"


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (("08:00:00:00", "08:00:10:00"), ("08:00:05:00", "08:00:15:00"), True),
        (("08:00:00:00", "08:00:05:00"), ("08:00:06:00", "08:00:10:00"), False),
        (("08:00:00:00", "08:00:05:00"), ("08:00:05:10", "08:00:10:00"), True),
    ],
)
def test_ranges_overlap_whole_seconds(a, b, expected):
    seconds = [timecode_to_seconds(tc) for tc in (*a, *b)]
    assert ranges_overlap(*seconds) is expected


@pytest.mark.parametrize(
    "timecode, fps",
    [
        ("00:01:00:00", 23.976),
        ("00:10:00:00", 29.97),
        ("01:00:00:00", 59.94),
        ("00:00:59:23", 23.976),
        ("00:00:10:29", 29.97),
    ],
)
def test_fractional_rates_keep_wall_clock_time(timecode, fps):
    assert frames_to_timecode(timecode_to_frames(timecode, fps), fps) == timecode


def test_frames_to_timecode_rejects_non_positive_fps():
    with pytest.raises(ValueError):
        frames_to_timecode(10, 0)
