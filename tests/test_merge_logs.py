import pytest

from daylog.log import assemble_log
from daylog.merge.logs import combine_logs, first_and_last
from daylog.schemas import DayLog


def test_combined_identity_fields(corpus, options):
    merged = combine_logs(corpus, options)

    assert merged.id == "D01_250601 - D02_250601"
    assert merged.day == "1 - 2"
    assert merged.date == "2025-06-01 - 2025-06-02"
    assert merged.unit == "A"
    assert merged.version == 1


def test_combined_ocf_duration_is_sum_of_days(corpus, options):
    merged = combine_logs(corpus, options)
    days = [assemble_log(log, options) for log in corpus]

    assert merged.ocf.duration == "0000:01:00"
    total = sum(day.ocf.duration_as_seconds() for day in days)
    assert assemble_log(merged, options).ocf.duration_as_seconds() == total == 60


def test_combined_group_totals(corpus, options):
    merged = combine_logs(corpus, options)

    assert merged.ocf.files == 3
    assert merged.ocf.size == 6_000_000_000
    assert merged.ocf.reels == ["A001", "B001"]
    assert merged.ocf.copies == ["SHUTTLE_1", "RAID", "SHUTTLE_2"]
    assert [clip.clip for clip in merged.ocf.clips] == ["A001C001", "A001C002", "B001C001"]
    assert merged.proxy.files == 1
    assert merged.sound.files == 2
    assert merged.sound.size == 60_000_000
    assert merged.sound.copies == []


def test_groups_without_data_stay_unset(options):
    logs = [
        DayLog(id="D01", day=1, date="2025-06-01"),
        DayLog(id="D02", day=2, date="2025-06-02"),
    ]
    merged = combine_logs(logs, options)

    assert merged.ocf.files is None
    assert merged.ocf.duration is None
    assert merged.proxy.clips is None
    assert merged.custom is None
    assert merged.unit == ""


def test_custom_entries_grouped_by_schema(corpus, options):
    merged = combine_logs(corpus, options)

    script, notes = merged.custom
    assert script.schema_id == "script"
    assert script.log is None
    assert [clip.clip for clip in script.clips] == ["A001C001", "Z999"]
    assert notes.schema_id == "notes"
    assert notes.log == {"weather": "rain"}
    assert len(notes.clips) == 1


def test_units_are_joined_in_input_order(day_one_data, day_two_data, options):
    day_one_data["unit"] = "B"
    logs = [DayLog.model_validate(day_two_data), DayLog.model_validate(day_one_data)]

    assert combine_logs(logs, options).unit == "A, B"


def test_first_and_last_order_by_date_then_day_then_unit():
    logs = [
        DayLog(id="late", day=3, date="2025-06-03"),
        DayLog(id="b", day=2, date="2025-06-02", unit="B"),
        DayLog(id="a", day=2, date="2025-06-02", unit="A"),
    ]

    first, last = first_and_last(logs)
    assert (first.id, last.id) == ("a", "late")


def test_single_log_keeps_plain_identity(day_one, options):
    merged = combine_logs([day_one], options)

    assert merged.id == "D01_250601"
    assert merged.day == "1"


def test_combine_requires_logs(options):
    with pytest.raises(ValueError):
        combine_logs([], options)


def test_assembled_logs_must_line_up(corpus, options):
    with pytest.raises(ValueError):
        combine_logs(corpus, options, assembled=[assemble_log(corpus[0], options)])
