import pytest

from daylog.aggregate import (
    total_date_range,
    total_day_range,
    total_days,
    total_duration,
    total_duration_seconds,
    total_files,
    total_size,
)
from daylog.log import assemble_log
from daylog.schemas import DayLog


@pytest.fixture()
def assembled(corpus, options):
    return [assemble_log(log, options) for log in corpus]


@pytest.mark.parametrize("group", ["ocf", "proxy", "sound"])
def test_total_files_is_sum_of_each_log(assembled, group):
    expected = sum(getattr(log, group).files() for log in assembled)

    assert total_files(assembled, group) == expected


def test_total_size_shapes(assembled):
    assert total_size(assembled, "ocf") == 6_000_000_000
    assert total_size(assembled, "ocf", output="string") == "6 GB"
    assert total_size(assembled, "sound", output="tuple", unit="mb") == (60, "MB")


def test_unknown_group_is_rejected(assembled):
    with pytest.raises(ValueError):
        total_files(assembled, "video")


def test_total_duration_formats(assembled):
    assert total_duration_seconds(assembled) == 60
    assert total_duration(assembled) == "0000:01:00"
    assert total_duration(assembled, "hms-string") == "1m 0s"
    assert total_duration(assembled, "hms").minutes == 1


def test_total_days_and_ranges(assembled):
    assert total_days(assembled) == "2"
    assert total_days(assembled, 3) == "002"
    assert total_day_range(assembled, 2) == ("01", "02")
    assert total_date_range(assembled, "dd-mm-yyyy") == ("01-06-2025", "02-06-2025")


def test_day_range_sorts_as_strings(options):
    logs = [
        assemble_log(DayLog(id="D09", day=9, date="2025-06-09"), options),
        assemble_log(DayLog(id="D10", day=10, date="2025-06-10"), options),
    ]

    assert total_day_range(logs) == ("10", "9")
    assert total_day_range(logs, 2) == ("10", "09")


def test_empty_input():
    assert total_day_range([]) == ("", "")
    assert total_date_range([]) == ("", "")
    assert total_files([], "ocf") == 0
    assert total_duration([]) == "0000:00:00"
